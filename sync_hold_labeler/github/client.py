# This file is intended to hold the setup for the authenticated githubkit client.

"""Sets up the authenticated githubkit client."""

from typing import TypeAlias

from githubkit import GitHub
from githubkit.auth import TokenAuthStrategy

from sync_hold_labeler.configuration.models import DEFAULT_GITHUB_API_URL, DEFAULT_REQUEST_TIMEOUT

GitHubClient: TypeAlias = GitHub[TokenAuthStrategy]


async def get_github_pat_client(
    github_personal_access_token: str,
    github_api_url: str = DEFAULT_GITHUB_API_URL,
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT,
) -> GitHubClient:
    """Returns an authenticated GitHub client using GitHub PAT credentials.

    Supports custom base URL for GitHub Enterprise Server (GHES).
    Raises RuntimeError if no token is provided.
    """
    if not github_personal_access_token:
        raise RuntimeError("GitHub PAT authentication requires a personal access token in config.")
    # Disable HTTP caching to always get fresh data
    return GitHub(
        auth=TokenAuthStrategy(github_personal_access_token),
        base_url=github_api_url,
        http_cache=False,
        timeout=request_timeout,
    )
