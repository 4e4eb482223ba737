"""Exception hierarchy for URL resolution, page fetching, and extraction.

Every error is terminal for the call that raised it. Each one keeps the
context a caller needs (kind, name, URL, status code) as attributes so the
CLI or any other wrapper can build its own message.
"""

__all__ = [
    "TfDocError",
    "InvalidKindError",
    "InvalidNameError",
    "NotFoundError",
    "TransportError",
    "MarkupParseError",
]


class TfDocError(RuntimeError):
    """Base exception for all tfdoc-scraper failures."""


class InvalidKindError(TfDocError):
    """Raised when the document kind is neither provider nor resource."""

    def __init__(self, kind: str):
        super().__init__(f'document kind must be "provider" or "resource", got "{kind}"')
        self.kind = kind


class InvalidNameError(TfDocError):
    """Raised when a resource name has no provider separator."""

    def __init__(self, name: str):
        super().__init__(f'resource "{name}" is invalid: expected <provider>_<resource>')
        self.name = name


class NotFoundError(TfDocError):
    """Raised when the existence check for a documentation page fails."""

    def __init__(self, kind: str, name: str, url: str, status_code: int | None = None):
        detail = f"status {status_code}" if status_code is not None else "unreachable"
        super().__init__(f'{kind} "{name}" is not found ({url}: {detail})')
        self.kind = kind
        self.name = name
        self.url = url
        self.status_code = status_code


class TransportError(TfDocError):
    """Raised when a page cannot be fetched or is served with a non-200 status."""

    def __init__(self, url: str, status_code: int | None = None, reason: str = ""):
        if status_code is not None:
            message = f"status code error: {status_code} fetching {url}"
        else:
            message = f"URL query error: {reason or 'request failed'} ({url})"
        super().__init__(message)
        self.url = url
        self.status_code = status_code
        self.reason = reason


class MarkupParseError(TfDocError):
    """Raised when a fetched body cannot be parsed as HTML at all."""

    def __init__(self, reason: str):
        super().__init__(f"HTML read error: {reason}")
        self.reason = reason
