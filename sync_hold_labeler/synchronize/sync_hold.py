"""Contains synchronization logic for the sync-hold label on GitHub issues."""

from typing import Any

import structlog

from sync_hold_labeler.github.abc import GitHubClientBase
from sync_hold_labeler.schemas.sync_status import StatusMap
from sync_hold_labeler.synchronize.exceptions import AmbiguousDistroLabelError, MissingDistroLabelError
from sync_hold_labeler.synchronize.models import SyncDecision
from sync_hold_labeler.synchronize.results import AllSyncHoldResults, IssueSyncHoldResult

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def get_issue_label_names(issue: Any) -> list[str]:
    """Return the names of an issue's labels in their listed order.

    GitHub may return labels either as plain strings or as label objects.
    Duplicates are kept.
    """
    label_names: list[str] = []
    for github_label in getattr(issue, "labels", None) or []:
        if isinstance(github_label, str):
            label_names.append(github_label)
        elif github_label.name:
            label_names.append(github_label.name)
    return label_names


def find_distro_label(issue_number: int, label_names: list[str], status_map: StatusMap) -> str:
    """Return the single label of an issue that names a known distro.

    Raises:
        MissingDistroLabelError: If no label is a key of the status map.
        AmbiguousDistroLabelError: If more than one distinct label is a key of the status map.
    """
    distros = sorted({label_name for label_name in label_names if label_name in status_map})
    if not distros:
        raise MissingDistroLabelError(issue_number, label_names)
    if len(distros) > 1:
        raise AmbiguousDistroLabelError(issue_number, distros)
    return distros[0]


async def decide_sync_hold_label_action(is_in_sync: bool, is_labeled_as_hold: bool) -> SyncDecision:
    """Decide whether the sync-hold label must be added, removed, or left alone."""
    if is_in_sync == is_labeled_as_hold:
        return SyncDecision.NOOP
    if is_in_sync and not is_labeled_as_hold:
        return SyncDecision.ADD_LABEL
    if not is_in_sync and is_labeled_as_hold:
        return SyncDecision.REMOVE_LABEL
    raise AssertionError(f"Unreachable sync-hold state: is_in_sync={is_in_sync}, is_labeled_as_hold={is_labeled_as_hold}")


def apply_sync_hold_label_decision(label_names: list[str], decision: SyncDecision, sync_hold_label: str) -> list[str]:
    """Return the full label set an issue should have after applying ``decision``.

    The input list is left untouched.
    """
    if decision == SyncDecision.ADD_LABEL:
        return [*label_names, sync_hold_label]
    if decision == SyncDecision.REMOVE_LABEL:
        return [label_name for label_name in label_names if label_name != sync_hold_label]
    return list(label_names)


async def sync_issue_sync_hold_label(
    github_adapter: GitHubClientBase,
    issue: Any,
    status_map: StatusMap,
    sync_hold_label: str,
    dry_run: bool = False,
) -> IssueSyncHoldResult:
    """Reconcile the sync-hold label of a single issue with its distro's status.

    At most one label update call is made, and only when the label set has to
    change. The call replaces the issue's entire label set.
    """
    label_names = get_issue_label_names(issue)
    distro = find_distro_label(issue.number, label_names, status_map)
    is_in_sync = status_map[distro]
    is_labeled_as_hold = sync_hold_label in label_names

    decision = await decide_sync_hold_label_action(is_in_sync, is_labeled_as_hold)
    if decision == SyncDecision.NOOP:
        logger.debug(
            f"Issue is labeled correctly {'with' if is_in_sync else 'without'} the sync-hold label",
            issue_number=issue.number,
            distro=distro,
            label=sync_hold_label,
        )
        return IssueSyncHoldResult(issue.number, issue.title, distro, decision, label_names, label_names, updated=False)

    if decision == SyncDecision.ADD_LABEL:
        logger.info("Adding sync-hold label to issue", label=sync_hold_label, issue_number=issue.number, issue_title=issue.title, distro=distro)
    else:
        logger.info("Removing sync-hold label from issue", label=sync_hold_label, issue_number=issue.number, issue_title=issue.title, distro=distro)
    new_label_names = apply_sync_hold_label_decision(label_names, decision, sync_hold_label)

    if dry_run:
        logger.info("Dry run, not updating issue", issue_number=issue.number, labels=new_label_names)
        return IssueSyncHoldResult(issue.number, issue.title, distro, decision, label_names, new_label_names, updated=False)

    await github_adapter.update_issue(issue.number, labels=new_label_names)
    logger.debug("Updated issue", issue_number=issue.number, issue_title=issue.title, labels=new_label_names)
    return IssueSyncHoldResult(issue.number, issue.title, distro, decision, label_names, new_label_names, updated=True)


async def sync_sync_hold_labels(
    github_adapter: GitHubClientBase,
    status_map: StatusMap,
    sync_hold_label: str,
    dry_run: bool = False,
) -> AllSyncHoldResults:
    """Reconcile the sync-hold label on every open issue of the repository.

    Issues are processed one at a time in listing order. The first error aborts
    the run; updates already sent are not rolled back.
    """
    issues = await github_adapter.list_issues(state="open", per_page=100)
    logger.info("Reconciling sync-hold label on open issues", issue_count=len(issues), label=sync_hold_label, dry_run=dry_run)

    results: list[IssueSyncHoldResult] = []
    for issue in issues:
        result = await sync_issue_sync_hold_label(github_adapter, issue, status_map, sync_hold_label, dry_run=dry_run)
        results.append(result)

    all_results = AllSyncHoldResults(results, dry_run=dry_run)
    logger.info(
        "Reconciled sync-hold label on open issues",
        added=all_results.added,
        removed=all_results.removed,
        unchanged=all_results.unchanged,
        updated=all_results.updated,
    )
    return all_results
