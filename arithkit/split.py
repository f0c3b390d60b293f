"""String splitting on a literal separator."""

from __future__ import annotations


def split(s: str, sep: str) -> list[str]:
    """Return the substrings of s between occurrences of sep."""
    if not sep:
        raise ValueError("empty separator")
    return s.split(sep)