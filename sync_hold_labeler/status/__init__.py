"""Loads the distro sync status document into a status map."""

from .exceptions import (
    StatusDocumentDecodeError,
    StatusDocumentFetchError,
    StatusDocumentParseError,
    StatusLoaderError,
)
from .loader import (
    build_sync_status_url,
    fetch_sync_status_document,
    load_status_map,
    parse_sync_statuses,
    sync_statuses_to_status_map,
)

__all__ = [
    "StatusLoaderError",
    "StatusDocumentFetchError",
    "StatusDocumentDecodeError",
    "StatusDocumentParseError",
    "build_sync_status_url",
    "fetch_sync_status_document",
    "load_status_map",
    "parse_sync_statuses",
    "sync_statuses_to_status_map",
]
