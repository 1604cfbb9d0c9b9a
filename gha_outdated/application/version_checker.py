"""Compares declared action versions against their latest release."""

import logging
from typing import Optional

from gha_outdated.config import CheckerConfig
from gha_outdated.domain.action import ActionReference, VersionCheckResult, is_major_update
from gha_outdated.infrastructure.github_client import (
    GitHubReleasesClient,
    RateLimitExceeded,
    ReleaseLookupError,
    RepositoryNotFound,
)

logger = logging.getLogger(__name__)


class VersionChecker:
    """Checks one action reference at a time against the releases API."""

    def __init__(self, github_client: GitHubReleasesClient, config: CheckerConfig):
        """
        Initialize version checker.

        Args:
            github_client: GitHub releases client
            config: Run configuration (major-only mode)
        """
        self.github_client = github_client
        self.config = config

    def check(self, reference: ActionReference) -> Optional[VersionCheckResult]:
        """
        Look up the latest release of a reference and compare versions.

        Lookup failures are logged and produce no result; they are never
        raised to the caller.

        Args:
            reference: Action reference to check

        Returns:
            A result if the reference is outdated (and, in major-only mode,
            the update is major), otherwise None
        """
        try:
            latest_version = self.github_client.get_latest_tag(reference.owner, reference.repo)
        except RepositoryNotFound:
            logger.warning(f"Repository not found: {reference.full_name}")
            return None
        except RateLimitExceeded as e:
            if e.reset_at is not None:
                wait_hint = f"Please wait until {e.reset_at:%Y-%m-%d %H:%M:%S} UTC and try again"
            else:
                wait_hint = "Please wait 60 minutes and try again"
            logger.warning(f"GitHub API rate limit exceeded: {reference.full_name}. {wait_hint}")
            return None
        except ReleaseLookupError as e:
            logger.warning(f"Error checking {reference}: {e}")
            return None

        if latest_version == reference.version:
            logger.debug(f"{reference} is up to date")
            return None

        major = is_major_update(reference.version, latest_version)
        if self.config.major_only and not major:
            logger.debug(f"Skipping non-major update for {reference}: {latest_version}")
            return None

        return VersionCheckResult(
            reference=reference,
            latest_version=latest_version,
            is_major_update=major,
        )
