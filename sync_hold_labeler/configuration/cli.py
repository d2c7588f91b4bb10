"""Defines the Command Line Interface (CLI) using Typer."""

import asyncio

import httpx
import structlog
import typer
from dotenv import load_dotenv
from githubkit.exception import GitHubException
from typer import Option
from typing_extensions import Annotated

from sync_hold_labeler.configuration.exceptions import RequiredConfigurationElementError
from sync_hold_labeler.configuration.reconcile import reconcile_sync_hold_configuration
from sync_hold_labeler.status.exceptions import StatusLoaderError
from sync_hold_labeler.synchronize.driver import run_sync_hold_workflow
from sync_hold_labeler.synchronize.exceptions import SyncHoldError
from sync_hold_labeler.utils.logging import configure_logging

load_dotenv()

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

typer_app = typer.Typer(pretty_exceptions_show_locals=False)

# Failures that end the run with a message instead of a traceback.
FATAL_ERRORS = (
    RequiredConfigurationElementError,
    StatusLoaderError,
    SyncHoldError,
    GitHubException,
    httpx.HTTPError,
    ValueError,
)


@typer_app.command(name="sync")
def sync_cli(
    repo_org: Annotated[str | None, Option(envvar="GITHUB_REPO_ORG", help="Organization owning the repository.")] = None,
    repo_name: Annotated[str | None, Option(envvar="GITHUB_REPO_NAME", help="Repository holding the sync status file and the issues.")] = None,
    repo_branch_name: Annotated[
        str | None, Option(envvar="GITHUB_REPO_BRANCH_NAME", help="Branch to read the sync status file from.")
    ] = None,
    repo_path_to_sync_status: Annotated[
        str | None, Option(envvar="GITHUB_REPO_PATH_TO_SYNC_STATUS", help="Path of the sync status YAML file within the repository.")
    ] = None,
    github_personal_access_token: Annotated[
        str | None, Option(envvar="GITHUB_PERSONAL_ACCESS_TOKEN", help="GitHub Personal Access Token.", show_default=False)
    ] = None,
    github_api_url: Annotated[str | None, Option(envvar="GITHUB_API_URL", help="GitHub API URL.")] = None,
    raw_content_host: Annotated[str | None, Option(envvar="RAW_CONTENT_HOST", help="Host serving raw repository files.")] = None,
    sync_hold_label: Annotated[str | None, Option(envvar="SYNC_HOLD_LABEL", help="Label marking issues of distros in a sync hold.")] = None,
    request_timeout: Annotated[float | None, Option(envvar="REQUEST_TIMEOUT", help="Timeout in seconds for each HTTP request.")] = None,
    dry_run: Annotated[bool, Option(envvar="DRY_RUN", help="Log label changes without applying them.")] = False,
    debug: Annotated[bool, Option(envvar="DEBUG", help="Enable debug mode.")] = False,
) -> None:
    """Adds or removes the sync-hold label on open issues to match each distro's sync status."""
    configure_logging(debug=debug)

    try:
        config = asyncio.run(
            reconcile_sync_hold_configuration(
                cli_repo_org=repo_org,
                cli_repo_name=repo_name,
                cli_repo_branch_name=repo_branch_name,
                cli_repo_path_to_sync_status=repo_path_to_sync_status,
                cli_github_personal_access_token=github_personal_access_token,
                cli_github_api_url=github_api_url,
                cli_raw_content_host=raw_content_host,
                cli_sync_hold_label=sync_hold_label,
                cli_request_timeout=request_timeout,
                cli_dry_run=dry_run,
                cli_debug=debug,
            )
        )
        if config.debug and not debug:
            configure_logging(debug=True)
        if config.dry_run:
            typer.echo("Dry run is enabled - no issues will be updated")
        results = asyncio.run(run_sync_hold_workflow(config))
    except FATAL_ERRORS as exc:
        logger.error("Sync-hold labeling failed", error_type=type(exc).__name__, error=str(exc))
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1) from exc

    action = "would be" if results.dry_run else "were"
    typer.echo(
        f"Processed {len(results.results)} open issues: {results.added} {action} labeled, "
        f"{results.removed} {action} unlabeled, {results.unchanged} already correct"
    )


if __name__ == "__main__":
    typer_app()
