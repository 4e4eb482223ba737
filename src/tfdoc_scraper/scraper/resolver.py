"""URL resolver: maps a provider or resource name to its documentation page."""

from loguru import logger

from tfdoc_scraper.config import settings
from tfdoc_scraper.errors import NotFoundError, TransportError
from tfdoc_scraper.fetch import Fetcher, HttpFetcher
from tfdoc_scraper.scraper.base import DocKind, ResolvedUrl, split_resource_name, to_kind


def build_url(kind: DocKind | str, name: str, base_url: str | None = None) -> str:
    """Build the documentation URL for a provider or resource name."""
    kind = to_kind(kind)
    base = (base_url or settings.base_url).rstrip("/")

    if kind is DocKind.PROVIDER:
        return f"{base}/providers/{name}/index.html"
    provider, rest = split_resource_name(name)
    return f"{base}/providers/{provider}/r/{rest}.html"


def resolve(
    kind: DocKind | str,
    name: str,
    fetcher: Fetcher | None = None,
    base_url: str | None = None,
) -> ResolvedUrl:
    """Build the documentation URL and check that the page exists.

    The existence check is a request of its own; the page content is
    fetched again later by the caller.
    """
    kind = to_kind(kind)
    url = build_url(kind, name, base_url)
    logger.debug(f"Resolved {kind.value} {name!r} to {url}")

    fetcher = fetcher or HttpFetcher()
    try:
        status_code = fetcher.fetch(url).status_code
    except TransportError as e:
        raise NotFoundError(kind.value, name, url) from e
    if status_code != 200:
        raise NotFoundError(kind.value, name, url, status_code)

    return ResolvedUrl(kind=kind, name=name, url=url)
