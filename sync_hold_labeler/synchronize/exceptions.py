"""Custom exceptions for the synchronization module."""


class SyncHoldError(Exception):
    """Base class for errors raised while reconciling sync-hold labels."""

    def __init__(self, issue_number: int, message: str) -> None:
        super().__init__(f"Issue #{issue_number}: {message}")
        self.issue_number = issue_number


class MissingDistroLabelError(SyncHoldError):
    """Raised when an issue carries none of the known distro labels."""

    def __init__(self, issue_number: int, labels: list[str]) -> None:
        super().__init__(issue_number, f"no known distro label found in labels {labels}")
        self.labels = labels


class AmbiguousDistroLabelError(SyncHoldError):
    """Raised when an issue carries more than one known distro label."""

    def __init__(self, issue_number: int, distros: list[str]) -> None:
        super().__init__(issue_number, f"expected exactly one distro label, found {len(distros)}: {distros}")
        self.distros = distros
