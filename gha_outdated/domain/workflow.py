"""Workflow file entity and action reference extraction."""

import re
from dataclasses import dataclass
from typing import List

# `uses: owner/repo@version`, anywhere on a line. Indentation and list
# markers before the keyword are tolerated; the token must be on the same line.
USES_PATTERN = re.compile(r"uses:[ \t]+[A-Za-z0-9_.-]+/[A-Za-z0-9_.-]+@\S+")

# Strict variant: the version may not contain `@` or `/` and has to end the token.
STRICT_USES_PATTERN = re.compile(
    r"uses:[ \t]+[A-Za-z0-9_.-]+/[A-Za-z0-9_.-]+@[^\s@/]+(?=\s|$)",
    re.MULTILINE,
)

_USES_PREFIX = re.compile(r"^uses:[ \t]+")


@dataclass(frozen=True)
class WorkflowFile:
    """Workflow definition read from disk."""

    path: str
    content: str


def extract_action_references(text: str, strict: bool = False) -> List[str]:
    """
    Extract `owner/repo@version` tokens from workflow text.

    The document structure is not validated, so a commented-out `uses:` line
    is reported like any other.

    Args:
        text: Raw workflow file content
        strict: Use the stricter version token pattern

    Returns:
        Unique tokens in order of first appearance
    """
    pattern = STRICT_USES_PATTERN if strict else USES_PATTERN

    references = dict.fromkeys(
        _USES_PREFIX.sub("", match.group(0)).strip()
        for match in pattern.finditer(text)
    )
    return list(references)
