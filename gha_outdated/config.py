"""Runtime configuration for a single gha-outdated run."""

import os
from dataclasses import dataclass
from typing import Optional, Tuple

DEFAULT_WORKFLOW_DIRS = (".github/workflows", ".gitlab/workflows")
DEFAULT_EXTENSIONS = (".yml", ".yaml")
DEFAULT_API_URL = "https://api.github.com"
DEFAULT_USER_AGENT = "gha-outdated"

_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class CheckerConfig:
    """Settings shared by every stage of a run. Built once at startup."""

    major_only: bool = False
    base_dir: str = "."
    workflow_dirs: Tuple[str, ...] = DEFAULT_WORKFLOW_DIRS
    extensions: Tuple[str, ...] = DEFAULT_EXTENSIONS
    api_url: str = DEFAULT_API_URL
    user_agent: str = DEFAULT_USER_AGENT
    timeout: float = 30.0
    max_workers: int = 8
    strict: bool = False
    collapse_versions: bool = False

    def __post_init__(self):
        if self.max_workers < 1:
            raise ValueError(f"max_workers must be at least 1, got {self.max_workers}")
        if self.timeout <= 0:
            raise ValueError(f"timeout must be positive, got {self.timeout}")

    @classmethod
    def from_env(cls, major_only: bool = False, base_dir: Optional[str] = None) -> "CheckerConfig":
        """
        Build configuration from GHA_OUTDATED_* environment variables.

        Args:
            major_only: Only report major version updates
            base_dir: Directory the workflow folders are resolved against.
                If None, uses the current working directory.

        Raises:
            ValueError: If a numeric variable cannot be parsed
        """
        return cls(
            major_only=major_only,
            base_dir=base_dir if base_dir is not None else os.getcwd(),
            api_url=os.getenv("GHA_OUTDATED_API_URL", DEFAULT_API_URL).rstrip("/"),
            user_agent=os.getenv("GHA_OUTDATED_USER_AGENT", DEFAULT_USER_AGENT),
            timeout=float(os.getenv("GHA_OUTDATED_TIMEOUT", "30")),
            max_workers=int(os.getenv("GHA_OUTDATED_MAX_WORKERS", "8")),
            strict=_env_flag("GHA_OUTDATED_STRICT"),
            collapse_versions=_env_flag("GHA_OUTDATED_COLLAPSE_VERSIONS"),
        )


def _env_flag(name: str) -> bool:
    """Read a boolean environment variable; unset or unrecognised values are False."""
    return os.getenv(name, "").strip().lower() in _TRUE_VALUES
