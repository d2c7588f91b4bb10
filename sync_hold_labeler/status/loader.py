"""Fetches and parses the distro sync status document.

The document is a YAML sequence of mappings, each with a ``distro`` name and an
``in_sync_hold`` flag. It is fetched anonymously from a raw file hosting
endpoint, decoded as strict UTF-8, validated with Pydantic and folded into a
status map. Any failure along the way is fatal and no partial map is returned.
"""

from typing import Any

import httpx
import structlog
from pydantic import TypeAdapter, ValidationError
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from sync_hold_labeler.configuration.models import DEFAULT_REQUEST_TIMEOUT
from sync_hold_labeler.schemas.sync_status import StatusMap, SyncStatusModel
from sync_hold_labeler.status.exceptions import (
    StatusDocumentDecodeError,
    StatusDocumentFetchError,
    StatusDocumentParseError,
)

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

yaml = YAML(typ="safe")

_sync_statuses_adapter = TypeAdapter(list[SyncStatusModel])


def build_sync_status_url(host: str, org: str, repo: str, branch: str, path: str) -> str:
    """Build the raw content URL of the sync status file.

    Segments are slash-joined exactly as given, e.g.
    ``https://raw.githubusercontent.com/<org>/<repo>/<branch>/<path>``.
    """
    return f"https://{host}/{org}/{repo}/{branch}/{path}"


async def fetch_sync_status_document(
    url: str,
    timeout: float = DEFAULT_REQUEST_TIMEOUT,
    client: httpx.AsyncClient | None = None,
) -> str:
    """Fetch the sync status document and return its body decoded as UTF-8.

    Args:
        url: Fully formed URL of the YAML document.
        timeout: Request timeout in seconds, used when no client is supplied.
        client: Optional pre-configured HTTP client. A short-lived client is
            created (and closed) when omitted.

    Raises:
        StatusDocumentFetchError: On any transport failure or non-2xx response.
        StatusDocumentDecodeError: If the body is not valid UTF-8.
    """
    try:
        if client is None:
            async with httpx.AsyncClient(timeout=timeout, follow_redirects=True) as owned_client:
                response = await owned_client.get(url)
        else:
            response = await client.get(url)
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        raise StatusDocumentFetchError(url, f"Request for sync status YAML returned HTTP {exc.response.status_code}") from exc
    except httpx.HTTPError as exc:
        raise StatusDocumentFetchError(url, f"Request to get sync status YAML failed: {exc}") from exc

    try:
        contents = response.content.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise StatusDocumentDecodeError(url, "Sync status YAML is not valid UTF-8") from exc

    logger.debug("Fetched sync status document", url=url, contents=contents)
    return contents


def parse_sync_statuses(contents: str, url: str = "<string>") -> list[SyncStatusModel]:
    """Parse the YAML text of a sync status document into validated records.

    Raises:
        StatusDocumentParseError: If the text is not YAML, or is not a sequence
            of mappings with a string ``distro`` and a boolean ``in_sync_hold``.
    """
    try:
        data: Any = yaml.load(contents)
    except YAMLError as exc:
        raise StatusDocumentParseError(url, f"Unable to parse sync status YAML: {exc}") from exc

    if not isinstance(data, list):
        raise StatusDocumentParseError(url, f"Sync status YAML must be a list of entries, got {type(data).__name__}")

    try:
        return _sync_statuses_adapter.validate_python(data)
    except ValidationError as exc:
        raise StatusDocumentParseError(url, f"Invalid sync status entries: {exc}") from exc


def sync_statuses_to_status_map(sync_statuses: list[SyncStatusModel]) -> StatusMap:
    """Fold sync status records into a status map.

    Later records silently overwrite earlier ones with the same distro.
    """
    status_map: StatusMap = {}
    for sync_status in sync_statuses:
        if sync_status.distro in status_map:
            logger.debug("Duplicate distro in sync status document, later entry wins", distro=sync_status.distro)
        status_map[sync_status.distro] = sync_status.in_sync_hold
    return status_map


async def load_status_map(
    url: str,
    timeout: float = DEFAULT_REQUEST_TIMEOUT,
    client: httpx.AsyncClient | None = None,
) -> StatusMap:
    """Fetch, decode and parse the sync status document at ``url`` into a status map."""
    contents = await fetch_sync_status_document(url, timeout=timeout, client=client)
    status_map = sync_statuses_to_status_map(parse_sync_statuses(contents, url=url))
    logger.info("Loaded distro sync statuses", url=url, distro_to_sync_status=status_map)
    return status_map
