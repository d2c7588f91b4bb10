"""Custom exceptions for the status loader module."""


class StatusLoaderError(Exception):
    """Base class for errors raised while loading the sync status document."""

    def __init__(self, url: str, message: str) -> None:
        super().__init__(f"{message} ({url})")
        self.url = url


class StatusDocumentFetchError(StatusLoaderError):
    """Raised when the sync status document cannot be fetched."""


class StatusDocumentDecodeError(StatusLoaderError):
    """Raised when the sync status document is not valid UTF-8."""


class StatusDocumentParseError(StatusLoaderError):
    """Raised when the sync status document is not a valid list of sync statuses."""
