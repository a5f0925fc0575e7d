"""
Error types raised by the GitHub API client
"""

from typing import Optional


class GitHubAPIError(Exception):
    """Base class for every GitHub client failure"""

    message = "GitHub API error"

    def __str__(self) -> str:
        return self.message


class ClientCreationFailed(GitHubAPIError):
    """The underlying HTTP client could not be built"""

    message = "Creating HTTP client failed"


class RequestFailed(GitHubAPIError):
    """The request never got a response (DNS, connect, transport timeout)"""

    message = "Sending request failed"


class ResponseUnsuccessful(GitHubAPIError):
    """GitHub answered with a non-2xx status"""

    def __init__(self, body: str, status_code: Optional[int] = None):
        super().__init__(body)
        self.body = body
        self.status_code = status_code

    def __str__(self) -> str:
        return f"Request unsuccessful - {self.body}"


class FailedToDeserialize(GitHubAPIError):
    """The response body could not be turned into the expected model"""

    message = "Failed to deserialize"


class ResponseBodyUnreadable(FailedToDeserialize):
    """Reading the body of an unsuccessful response failed"""

    message = "Failed to read unsuccessful response body"
