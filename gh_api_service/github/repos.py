"""
GitHub repository operations for the GitHub API service
"""

from typing import Optional

from ..config.settings import settings
from .client import GitHubClient
from .exceptions import ClientCreationFailed
from .models import Repository


async def read_github_repo(
    repo: str,
    api_key: Optional[str] = None,
    base_url: Optional[str] = None,
) -> Repository:
    """
    Fetch repository metadata with a short-lived client

    Args:
        repo: Repository in 'owner/repo' format
        api_key: GitHub personal access token (falls back to GITHUB_TOKEN)
        base_url: API root override (falls back to GITHUB_API_BASE_URL)

    Returns:
        Repository metadata

    Raises:
        GitHubAPIError: any failure of the underlying client
    """
    # Add settings values if not provided
    api_key = api_key or settings.github_token
    base_url = base_url or settings.github_api_base_url
    if not api_key:
        raise ClientCreationFailed() from ValueError("GITHUB_TOKEN is not set")

    async with GitHubClient(api_key, base_url) as client:
        return await client.get_repository_details(repo)
