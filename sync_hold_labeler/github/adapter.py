"""GitHub client adapter for the githubkit library."""

from functools import wraps
from typing import Any, Awaitable, Callable, Literal, Self, TypeVar

import structlog
from githubkit import Response
from githubkit.exception import RequestFailed
from githubkit.versions.latest.models import Issue

from sync_hold_labeler.configuration.models import DEFAULT_GITHUB_API_URL, DEFAULT_REQUEST_TIMEOUT

from .abc import GitHubClientBase
from .client import GitHubClient, get_github_pat_client

logger = structlog.get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Awaitable[Any]])


def handle_github_422(func: F) -> F:
    """Decorator to handle GitHub 422 Unprocessable Entity errors, logging and raising with details."""

    @wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)
        except RequestFailed as exc:
            if exc.response.status_code == 422:
                try:
                    error_data = exc.response.json()
                except ValueError:
                    error_data = {}
                message = error_data.get("message", "Unprocessable Entity")
                errors = error_data.get("errors", [])
                logger.error(
                    "GitHub 422 Unprocessable Entity",
                    function=func.__name__,
                    message=message,
                    errors=errors,
                    url=getattr(exc.response, "url", None),
                    status_code=422,
                )
                raise ValueError(
                    f"GitHub 422 error in {func.__name__}: {message} | errors: {errors} | url: {getattr(exc.response, 'url', None)}"
                ) from exc
            raise

    return wrapper  # type: ignore


class GitHubKitAdapter(GitHubClientBase):
    """GitHub client adapter for the githubkit library."""

    def __init__(self, client: GitHubClient, owner: str, repo_name: str) -> None:
        """Initialize the GitHub client adapter with an already-initialized client."""
        self.client = client
        self.owner = owner
        self.repo_name = repo_name

    def _omit_null_parameters(self, **kwargs: Any) -> dict[str, Any]:
        """Omit parameters that are None."""
        return {k: v for k, v in kwargs.items() if v is not None}

    @classmethod
    async def create(
        cls,
        owner: str,
        repo_name: str,
        github_personal_access_token: str,
        github_api_url: str = DEFAULT_GITHUB_API_URL,
        request_timeout: float = DEFAULT_REQUEST_TIMEOUT,
    ) -> Self:
        """Create a new GitHub client adapter.

        Args:
            owner: Organization or user owning the repository
            repo_name: Name of the repository
            github_personal_access_token: Personal access token
            github_api_url: GitHub API URL (defaults to https://api.github.com)
            request_timeout: Timeout in seconds applied to every API request

        Returns:
            Configured GitHubKitAdapter instance
        """
        logger.info(
            "Creating client for GitHub instance and repository",
            github_api_url=github_api_url,
            owner=owner,
            repo_name=repo_name,
        )
        client = await get_github_pat_client(
            github_personal_access_token=github_personal_access_token,
            github_api_url=github_api_url,
            request_timeout=request_timeout,
        )
        return cls(client, owner, repo_name)

    # Issue CRUD
    async def list_issues(self, state: Literal["open", "closed", "all"] = "open", per_page: int = 100, **kwargs: Any) -> list[Issue]:
        """List all issues for a repository, handling pagination."""
        all_issues: list[Issue] = []
        page: int = 1
        while True:
            response: Response[list[Issue]] = await self.client.rest.issues.async_list_for_repo(
                owner=self.owner,
                repo=self.repo_name,
                state=state,
                per_page=per_page,
                page=page,
                **kwargs,
            )
            issues: list[Issue] = response.parsed_data
            if not issues:
                break
            all_issues.extend(issues)
            if len(issues) < per_page:
                break
            page += 1
        logger.debug("Listed issues", owner=self.owner, repo_name=self.repo_name, state=state, count=len(all_issues), pages=page)
        return all_issues

    @handle_github_422
    async def update_issue(self, issue_number: int, labels: list[str] | None = None, **kwargs: Any) -> Issue:
        """Update an issue for a repository.

        When ``labels`` is given it replaces the issue's entire label set.
        """
        params = self._omit_null_parameters(
            labels=labels,  # type: ignore
            **kwargs,
        )
        response: Response[Issue] = await self.client.rest.issues.async_update(
            owner=self.owner,
            repo=self.repo_name,
            issue_number=issue_number,
            **params,
        )
        return response.parsed_data
