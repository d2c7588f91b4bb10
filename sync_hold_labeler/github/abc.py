"""Base ABC for GitHub clients."""

from abc import ABC, abstractmethod
from typing import Any, Literal


class GitHubClientBase(ABC):
    """Base ABC for GitHub clients."""

    # Issue CRUD
    @abstractmethod
    async def list_issues(self, state: Literal["open", "closed", "all"] = "open", per_page: int = 100, **kwargs: Any) -> list[Any]:
        """List issues for a repository."""
        pass

    @abstractmethod
    async def update_issue(self, issue_number: int, labels: list[str] | None = None, **kwargs: Any) -> Any:
        """Update an issue for a repository."""
        pass
