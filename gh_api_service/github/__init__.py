"""
GitHub module for the GitHub API service
"""

from .client import DEFAULT_BASE_URL, GitHubClient
from .exceptions import (
    ClientCreationFailed,
    FailedToDeserialize,
    GitHubAPIError,
    RequestFailed,
    ResponseBodyUnreadable,
    ResponseUnsuccessful,
)
from .models import Repository
from .repos import read_github_repo

__all__ = [
    'DEFAULT_BASE_URL',
    'GitHubClient',
    'Repository',
    'read_github_repo',
    'GitHubAPIError',
    'ClientCreationFailed',
    'RequestFailed',
    'ResponseUnsuccessful',
    'FailedToDeserialize',
    'ResponseBodyUnreadable',
]
