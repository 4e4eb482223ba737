"""HTTP fetch capability built on requests.

The resolver and the scraper only rely on the ``Fetcher`` contract: a
``fetch(url)`` call returning the status code and raw body, or raising
``TransportError`` when no response could be obtained at all.
"""

from typing import NamedTuple, Protocol

import requests
from loguru import logger

from tfdoc_scraper.config import Settings, settings as default_settings
from tfdoc_scraper.errors import TransportError


class FetchResponse(NamedTuple):
    status_code: int
    body: bytes


class Fetcher(Protocol):
    def fetch(self, url: str) -> FetchResponse: ...


class HttpFetcher:
    """Wrapper for GET requests via a shared requests session."""

    def __init__(self, settings: Settings | None = None, session: requests.Session | None = None):
        self.settings = settings or default_settings
        self._owns_session = session is None
        self.session = session or requests.Session()

    def fetch(self, url: str) -> FetchResponse:
        """GET ``url`` and return its status code and body, whatever the status."""
        logger.debug(f"GET {url}")
        try:
            resp = self.session.get(
                url,
                headers={"User-Agent": self.settings.user_agent},
                timeout=self.settings.timeout,
            )
        except requests.RequestException as e:
            raise TransportError(url, reason=str(e)) from e
        logger.debug(f"GET {url} -> {resp.status_code} ({len(resp.content)} bytes)")
        return FetchResponse(resp.status_code, resp.content)

    def close(self) -> None:
        """Close the session if this fetcher created it."""
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> "HttpFetcher":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
