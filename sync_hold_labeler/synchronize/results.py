"""Contains results of application execution."""

from sync_hold_labeler.synchronize.models import SyncDecision


class IssueSyncHoldResult:
    """Contains the result of reconciling the sync-hold label of a single issue."""

    def __init__(
        self,
        issue_number: int,
        title: str,
        distro: str,
        decision: SyncDecision,
        labels_before: list[str],
        labels_after: list[str],
        updated: bool,
    ) -> None:
        """Initialize the result with the issue, its distro, the decision and the label sets."""
        self.issue_number = issue_number
        self.title = title
        self.distro = distro
        self.decision = decision
        self.labels_before = labels_before
        self.labels_after = labels_after
        self.updated = updated


class AllSyncHoldResults:
    """Contains results of the sync-hold labeling workflow for all issues."""

    def __init__(self, results: list[IssueSyncHoldResult], dry_run: bool = False) -> None:
        """Initialize the result with a list of per-issue results."""
        self.results = results
        self.dry_run = dry_run

    def _count(self, decision: SyncDecision) -> int:
        return sum(1 for result in self.results if result.decision == decision)

    @property
    def added(self) -> int:
        """Number of issues that gained the sync-hold label."""
        return self._count(SyncDecision.ADD_LABEL)

    @property
    def removed(self) -> int:
        """Number of issues that lost the sync-hold label."""
        return self._count(SyncDecision.REMOVE_LABEL)

    @property
    def unchanged(self) -> int:
        """Number of issues that were already labeled correctly."""
        return self._count(SyncDecision.NOOP)

    @property
    def updated(self) -> int:
        """Number of label update calls actually sent."""
        return sum(1 for result in self.results if result.updated)
