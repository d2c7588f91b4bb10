"""Models for configuration between CLI arguments and environment variables."""

from dataclasses import dataclass

DEFAULT_SYNC_HOLD_LABEL = "in_sync_hold"
DEFAULT_RAW_CONTENT_HOST = "raw.githubusercontent.com"
DEFAULT_GITHUB_API_URL = "https://api.github.com"
DEFAULT_REQUEST_TIMEOUT = 30.0


@dataclass
class SyncHoldConfig:
    """Reconciled configuration for a single sync-hold labeling run."""

    repo_org: str
    repo_name: str
    repo_branch_name: str
    repo_path_to_sync_status: str
    github_personal_access_token: str
    github_api_url: str = DEFAULT_GITHUB_API_URL
    raw_content_host: str = DEFAULT_RAW_CONTENT_HOST
    sync_hold_label: str = DEFAULT_SYNC_HOLD_LABEL
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    dry_run: bool = False
    debug: bool = False
