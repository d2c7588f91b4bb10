"""Reconcile sync-hold labeling configuration between CLI arguments and environment variables."""

from sync_hold_labeler.configuration.env import settings
from sync_hold_labeler.configuration.exceptions import RequiredConfigurationElementError
from sync_hold_labeler.configuration.models import SyncHoldConfig


def _require(value: str | None, name: str, cli_name: str, env_name: str) -> str:
    """Return the value, or raise if it is missing or empty."""
    if not value:
        raise RequiredConfigurationElementError(name=name, cli_name=cli_name, env_name=env_name)
    return value


async def reconcile_sync_hold_configuration(
    cli_repo_org: str | None = None,
    cli_repo_name: str | None = None,
    cli_repo_branch_name: str | None = None,
    cli_repo_path_to_sync_status: str | None = None,
    cli_github_personal_access_token: str | None = None,
    cli_github_api_url: str | None = None,
    cli_raw_content_host: str | None = None,
    cli_sync_hold_label: str | None = None,
    cli_request_timeout: float | None = None,
    cli_dry_run: bool = False,
    cli_debug: bool = False,
) -> SyncHoldConfig:
    """Reconciles CLI arguments with environment settings into a SyncHoldConfig.

    CLI values take precedence over environment values. Required elements are
    checked in a fixed order and the first missing one is reported.

    Raises:
        RequiredConfigurationElementError: If a required element is undefined in both sources.

    Returns:
        SyncHoldConfig: The fully populated configuration.
    """
    repo_org = _require(cli_repo_org or settings.GITHUB_REPO_ORG, "GitHub repository organization", "--repo-org", "GITHUB_REPO_ORG")
    repo_name = _require(cli_repo_name or settings.GITHUB_REPO_NAME, "GitHub repository name", "--repo-name", "GITHUB_REPO_NAME")
    repo_branch_name = _require(
        cli_repo_branch_name or settings.GITHUB_REPO_BRANCH_NAME,
        "GitHub repository branch name",
        "--repo-branch-name",
        "GITHUB_REPO_BRANCH_NAME",
    )
    repo_path_to_sync_status = _require(
        cli_repo_path_to_sync_status or settings.GITHUB_REPO_PATH_TO_SYNC_STATUS,
        "Path to sync status file in repository",
        "--repo-path-to-sync-status",
        "GITHUB_REPO_PATH_TO_SYNC_STATUS",
    )
    github_personal_access_token = _require(
        cli_github_personal_access_token or settings.GITHUB_PERSONAL_ACCESS_TOKEN,
        "GitHub personal access token",
        "--github-personal-access-token",
        "GITHUB_PERSONAL_ACCESS_TOKEN",
    )

    return SyncHoldConfig(
        repo_org=repo_org,
        repo_name=repo_name,
        repo_branch_name=repo_branch_name,
        repo_path_to_sync_status=repo_path_to_sync_status,
        github_personal_access_token=github_personal_access_token,
        github_api_url=cli_github_api_url or settings.GITHUB_API_URL,
        raw_content_host=cli_raw_content_host or settings.RAW_CONTENT_HOST,
        sync_hold_label=cli_sync_hold_label or settings.SYNC_HOLD_LABEL,
        request_timeout=cli_request_timeout if cli_request_timeout is not None else settings.REQUEST_TIMEOUT,
        dry_run=cli_dry_run or settings.DRY_RUN,
        debug=cli_debug or settings.DEBUG,
    )
