"""Scraper facade: resolve a name, fetch its page, extract the record."""

from loguru import logger

from tfdoc_scraper.config import Settings, settings as default_settings
from tfdoc_scraper.errors import TransportError
from tfdoc_scraper.fetch import Fetcher, HttpFetcher
from tfdoc_scraper.scraper.base import DocKind, DocRequest, ProviderRecord, ResourceRecord, to_kind
from tfdoc_scraper.scraper.extractor import extract
from tfdoc_scraper.scraper.resolver import resolve


class TfScraper:
    """Scrapes one Terraform provider or resource documentation page.

    The URL is resolved, and its existence checked, when the scraper is
    built; ``scrape()`` then fetches the page a second time for its content.
    """

    def __init__(
        self,
        kind: DocKind | str,
        name: str,
        fetcher: Fetcher | None = None,
        settings: Settings | None = None,
    ):
        self.request = DocRequest(kind=to_kind(kind), name=name)
        self.settings = settings or default_settings
        self.fetcher = fetcher or HttpFetcher(self.settings)
        self.url = resolve(self.request.kind, self.request.name, self.fetcher, self.settings.base_url).url

    @property
    def kind(self) -> DocKind:
        return self.request.kind

    @property
    def name(self) -> str:
        return self.request.name

    def scrape(self) -> ResourceRecord | ProviderRecord:
        """Fetch the resolved page and extract its record."""
        logger.info(f"Scraping {self.kind.value} {self.name!r} from {self.url}")
        status_code, body = self.fetcher.fetch(self.url)
        if status_code != 200:
            raise TransportError(self.url, status_code=status_code)
        return extract(self.request.kind, body, self.request.name)


def scrape(
    kind: DocKind | str,
    name: str,
    fetcher: Fetcher | None = None,
    settings: Settings | None = None,
) -> ResourceRecord | ProviderRecord:
    """Resolve, fetch, and extract in one call."""
    return TfScraper(kind, name, fetcher=fetcher, settings=settings).scrape()
