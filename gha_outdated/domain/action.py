"""Domain entities for action references and version checks."""

import re
from dataclasses import dataclass
from typing import Optional

_LEADING_DIGITS = re.compile(r"^(\d+)")


@dataclass(frozen=True)
class ActionReference:
    """Immutable `owner/repo@version` reference parsed from a workflow file."""

    owner: str
    repo: str
    version: str
    raw: str

    @classmethod
    def parse(cls, raw: str) -> "ActionReference":
        """
        Parse a raw `owner/repo@version` token.

        Args:
            raw: Token as found in the workflow file

        Returns:
            Parsed reference

        Raises:
            ValueError: If the token is not of the `owner/repo@version` shape
        """
        token = raw.strip()
        path, sep, version = token.partition("@")
        if not sep:
            raise ValueError(f"missing '@version' in action reference: {raw!r}")

        parts = path.split("/")
        if len(parts) < 2 or not all(parts[:2]) or not version:
            raise ValueError(f"malformed action reference: {raw!r}")

        return cls(owner=parts[0], repo=parts[1], version=version, raw=token)

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"

    def __str__(self) -> str:
        return self.raw


@dataclass(frozen=True)
class VersionCheckResult:
    """An outdated reference together with the latest release tag."""

    reference: ActionReference
    latest_version: str
    is_major_update: bool

    @property
    def action(self) -> str:
        return self.reference.raw

    @property
    def current_version(self) -> str:
        return self.reference.version


def major_version(version: str) -> Optional[int]:
    """
    Extract the leading major number from a version tag.

    A single leading marker character such as the `v` in `v4` is dropped
    before reading the digits.

    Returns:
        The major number, or None when the tag does not start with digits
    """
    if version and not version[0].isdigit():
        version = version[1:]

    match = _LEADING_DIGITS.match(version)
    return int(match.group(1)) if match else None


def is_major_update(current_version: str, latest_version: str) -> bool:
    """Return True when the latest tag's major number is above the current one."""
    current_major = major_version(current_version)
    latest_major = major_version(latest_version)

    # Unparseable tags are never reported as major updates
    if current_major is None or latest_major is None:
        return False

    return latest_major > current_major
