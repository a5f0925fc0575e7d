"""
GitHub API client for the GitHub API service
"""

import logging
import re
from typing import Dict, Optional

import httpx
from pydantic import ValidationError

from ..config.settings import settings as app_settings
from .exceptions import (
    ClientCreationFailed,
    FailedToDeserialize,
    RequestFailed,
    ResponseBodyUnreadable,
    ResponseUnsuccessful,
)
from .models import Repository

log = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.github.com"
USER_AGENT = "gh-api-service"

# Control characters are never valid inside an HTTP header value
_INVALID_HEADER_VALUE = re.compile(r"[\x00-\x1f\x7f]")


def default_headers(api_key: str) -> Dict[str, str]:
    """Headers sent with every request"""
    headers = {
        "Authorization": f"token {api_key}",
        "User-Agent": USER_AGENT,
        "Accept": "application/json",
    }
    for name, value in headers.items():
        if not value.isascii() or _INVALID_HEADER_VALUE.search(value):
            raise ValueError(f"Invalid character in {name} header value")
    return headers


class GitHubClient:
    """Minimal GitHub REST API client

    Holds a single httpx.AsyncClient configured with the token, user agent and
    accept headers. Nothing about the client changes after construction, so one
    instance can be shared between tasks.

    Redirects are followed (a renamed repository answers 301). No timeout is
    set here, so httpx's 5 second default applies: a stalled connect or send
    raises RequestFailed, a stalled body read raises FailedToDeserialize
    (ResponseBodyUnreadable for non-2xx responses).
    """

    def __init__(self, api_key: str, base_url: Optional[str] = None):
        """Initialize the client

        Args:
            api_key: GitHub personal access token
            base_url: Override for the API root (defaults to api.github.com)

        Raises:
            ClientCreationFailed: if the HTTP client cannot be built
        """
        self._base_url = (base_url or DEFAULT_BASE_URL).rstrip("/")
        try:
            self._headers = default_headers(api_key)
            self.client = httpx.AsyncClient(headers=self._headers, follow_redirects=True)
        except Exception as e:
            raise ClientCreationFailed() from e

    @classmethod
    def from_settings(cls, settings=None) -> "GitHubClient":
        """Build a client from the application settings"""
        settings = settings or app_settings
        if not settings.github_token:
            raise ClientCreationFailed() from ValueError("GITHUB_TOKEN is not set")
        return cls(settings.github_token, settings.github_api_base_url)

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def headers(self) -> Dict[str, str]:
        return dict(self._headers)

    async def close(self):
        """Close the HTTP client"""
        await self.client.aclose()

    async def __aenter__(self) -> "GitHubClient":
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.close()

    async def get_repository_details(self, path: str) -> Repository:
        """Fetch repository metadata

        Args:
            path: Repository in 'owner/repo' format

        Returns:
            The repository's full name, description and web URL

        Raises:
            RequestFailed: the request could not be sent
            ResponseUnsuccessful: GitHub answered with a non-2xx status
            FailedToDeserialize: the body did not match the Repository shape
        """
        url = f"{self._base_url}/repos/{path}"
        log.debug("GET %s", url)

        request = self.client.build_request("GET", url)
        try:
            response = await self.client.send(request, stream=True)
        except httpx.TransportError as e:
            log.warning("Request to %s failed: %s", url, e)
            raise RequestFailed() from e

        try:
            if not response.is_success:
                try:
                    await response.aread()
                    body = response.text
                except (httpx.HTTPError, httpx.StreamError) as e:
                    raise ResponseBodyUnreadable() from e
                log.warning("GitHub API returned HTTP %s for %s", response.status_code, path)
                raise ResponseUnsuccessful(body, status_code=response.status_code)

            try:
                content = await response.aread()
            except (httpx.HTTPError, httpx.StreamError) as e:
                raise FailedToDeserialize() from e
            try:
                return Repository.model_validate_json(content)
            except ValidationError as e:
                log.warning("Unexpected repository payload for %s", path)
                raise FailedToDeserialize() from e
        finally:
            await response.aclose()
