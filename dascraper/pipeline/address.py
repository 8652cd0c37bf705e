"""Address normalisation."""

from __future__ import annotations

import re

_WHITESPACE_RUN_RE = re.compile(r"\s\s+")


def combine_address(part1: str, part2: str, separator: str = " ") -> str:
    """Join two address fragments into one string.

    The separator is only inserted when both fragments are non-empty. Runs of
    two or more whitespace characters collapse to a single space.
    """
    joiner = separator if part1 and part2 else ""
    combined = f"{part1}{joiner}{part2}".strip()
    return _WHITESPACE_RUN_RE.sub(" ", combined)
