"""Command-line entry point for gha-outdated."""

import logging
import os
import sys
from typing import List, Optional, Tuple

from gha_outdated.application.outdated_service import OutdatedActionsService
from gha_outdated.application.report import exit_code, render_report
from gha_outdated.application.version_checker import VersionChecker
from gha_outdated.config import CheckerConfig
from gha_outdated.infrastructure.github_client import GitHubReleasesClient
from gha_outdated.infrastructure.workflow_files import WorkflowLocator

logger = logging.getLogger(__name__)

USAGE = """
gha-outdated - Check for outdated GitHub Actions in workflow files

Usage:
  gha-outdated [options]

Options:
  -m, -M, --major    Only check for major version updates
  -h, -H, --help     Show this help message

Environment:
  GHA_OUTDATED_API_URL            GitHub API base URL (default: https://api.github.com)
  GHA_OUTDATED_TIMEOUT            Request timeout in seconds (default: 30)
  GHA_OUTDATED_MAX_WORKERS        Concurrent lookups (default: 8)
  GHA_OUTDATED_STRICT             Stricter `uses:` matching (default: off)
  GHA_OUTDATED_COLLAPSE_VERSIONS  Check each owner/repo once (default: off)
  GHA_OUTDATED_LOG_LEVEL          Log level (default: WARNING)

Example:
  gha-outdated -m    # Only show actions with major version updates
"""


MAJOR_FLAGS = ("-m", "-M", "--major")
HELP_FLAGS = ("-h", "-H", "--help")


def parse_flags(argv: List[str]) -> Tuple[bool, bool, List[str]]:
    """
    Match command-line flags by exact token.

    Args:
        argv: Arguments without the program name

    Returns:
        Tuple of (major only, help requested, unrecognised arguments)
    """
    major_only = any(arg in MAJOR_FLAGS for arg in argv)
    show_help = any(arg in HELP_FLAGS for arg in argv)
    unknown = [arg for arg in argv if arg not in MAJOR_FLAGS + HELP_FLAGS]
    return major_only, show_help, unknown


def setup_logging() -> None:
    """Configure stdlib logging from GHA_OUTDATED_LOG_LEVEL."""
    level = os.getenv("GHA_OUTDATED_LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Check workflow actions for updates and return the process exit code."""
    if argv is None:
        argv = sys.argv[1:]

    major_only, show_help, unknown = parse_flags(argv)
    if show_help:
        print(USAGE)
        return 0

    setup_logging()
    if unknown:
        logger.warning(f"Ignoring unknown arguments: {' '.join(unknown)}")

    try:
        config = CheckerConfig.from_env(major_only=major_only)

        service = OutdatedActionsService(
            locator=WorkflowLocator(config),
            version_checker=VersionChecker(GitHubReleasesClient(config), config),
            config=config,
        )
        run = service.run()

        for line in render_report(run, config):
            print(line)
        run.complete()
        return exit_code(run)

    except Exception as e:
        logger.error(f"Check failed: {e}", exc_info=True)
        print(f"Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
