"""Orchestrates the synchronization of the sync-hold label."""

import time

import httpx
import structlog

from sync_hold_labeler.configuration.models import SyncHoldConfig
from sync_hold_labeler.github.adapter import GitHubKitAdapter
from sync_hold_labeler.status.loader import build_sync_status_url, load_status_map
from sync_hold_labeler.synchronize.results import AllSyncHoldResults
from sync_hold_labeler.synchronize.sync_hold import sync_sync_hold_labels

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


async def run_sync_hold_workflow(config: SyncHoldConfig, http_client: httpx.AsyncClient | None = None) -> AllSyncHoldResults:
    """Run the sync-hold workflow: load distro statuses once, then reconcile every open issue once."""
    url = build_sync_status_url(
        host=config.raw_content_host,
        org=config.repo_org,
        repo=config.repo_name,
        branch=config.repo_branch_name,
        path=config.repo_path_to_sync_status,
    )
    status_map = await load_status_map(url, timeout=config.request_timeout, client=http_client)

    github_adapter = await GitHubKitAdapter.create(
        owner=config.repo_org,
        repo_name=config.repo_name,
        github_personal_access_token=config.github_personal_access_token,
        github_api_url=config.github_api_url,
        request_timeout=config.request_timeout,
    )

    start_time = time.time()
    logger.info("Processing issues", start_time=start_time)
    results = await sync_sync_hold_labels(
        github_adapter,
        status_map,
        sync_hold_label=config.sync_hold_label,
        dry_run=config.dry_run,
    )
    end_time = time.time()
    logger.info(
        "Processed issues",
        start_time=start_time,
        end_time=end_time,
        duration=round(end_time - start_time, 2),
        issue_count=len(results.results),
    )
    return results
