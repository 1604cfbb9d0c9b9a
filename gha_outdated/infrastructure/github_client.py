"""GitHub REST API client for looking up the latest release of a repository."""

import logging
from datetime import datetime, timezone
from typing import Optional

import requests

from gha_outdated.config import CheckerConfig

logger = logging.getLogger(__name__)


class GitHubClientError(Exception):
    """Base class for failed release lookups."""
    pass


class RepositoryNotFound(GitHubClientError):
    """Raised when the repository or its latest release does not exist."""
    pass


class RateLimitExceeded(GitHubClientError):
    """Raised when GitHub API rate limit is exceeded."""

    def __init__(self, message: str, reset_at: Optional[datetime] = None):
        super().__init__(message)
        self.reset_at = reset_at


class ReleaseLookupError(GitHubClientError):
    """Raised for any other failed lookup (bad status, bad body, transport error)."""
    pass


class GitHubReleasesClient:
    """Client for the GitHub "latest release" endpoint."""

    # Unauthenticated requests get 60 calls per hour. No token is sent, and a
    # throttled lookup is reported rather than retried.

    RATE_LIMIT_STATUSES = (403, 429)

    def __init__(self, config: CheckerConfig):
        """
        Initialize GitHub releases client.

        Args:
            config: Run configuration (API URL, user agent, timeout)
        """
        self.api_url = config.api_url
        self.timeout = config.timeout
        self.headers = {
            "Accept": "application/vnd.github+json",
            "User-Agent": config.user_agent,
        }

    def get_latest_tag(self, owner: str, repo: str) -> str:
        """
        Fetch the tag name of the latest release of `owner/repo`.

        Exactly one request is issued per call.

        Args:
            owner: Repository owner
            repo: Repository name

        Returns:
            Latest release tag name

        Raises:
            RepositoryNotFound: If GitHub answers 404
            RateLimitExceeded: If GitHub answers 403 or 429
            ReleaseLookupError: For any other failure
        """
        url = f"{self.api_url}/repos/{owner}/{repo}/releases/latest"

        try:
            response = requests.get(url, headers=self.headers, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise ReleaseLookupError(f"Request to {url} failed: {e}") from e

        if response.status_code == 200:
            try:
                data = response.json()
            except ValueError as e:
                raise ReleaseLookupError(f"Invalid JSON in response for {owner}/{repo}: {e}") from e

            tag_name = data.get("tag_name") if isinstance(data, dict) else None
            if not tag_name or not isinstance(tag_name, str):
                raise ReleaseLookupError(f"No tag_name in latest release of {owner}/{repo}")
            return tag_name

        elif response.status_code == 404:
            raise RepositoryNotFound(f"Repository not found: {owner}/{repo}")

        elif response.status_code in self.RATE_LIMIT_STATUSES:
            reset_at = self._parse_reset(response.headers.get("X-RateLimit-Reset"))
            raise RateLimitExceeded(f"GitHub API rate limit exceeded: {owner}/{repo}", reset_at=reset_at)

        else:
            raise ReleaseLookupError(f"API error for {owner}/{repo}: {response.status_code}")

    @staticmethod
    def _parse_reset(value: Optional[str]) -> Optional[datetime]:
        if not value:
            return None
        try:
            return datetime.fromtimestamp(int(value), tz=timezone.utc)
        except (ValueError, OverflowError, OSError):
            logger.debug(f"Ignoring unparseable X-RateLimit-Reset header: {value!r}")
            return None
