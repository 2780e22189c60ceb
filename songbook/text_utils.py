from __future__ import annotations

from typing import Iterable

WHITESPACE = " \t\n\r"


def trim(value: str) -> str:
    return value.strip(WHITESPACE)


def fold(value: str) -> str:
    return value.lower()


def normalize_key(value: str) -> str:
    """Trimmed, lower-cased form used for case-insensitive comparisons."""
    return fold(trim(value))


def contains_folded(haystack: str, needle: str) -> bool:
    # needle is expected to be folded already
    return needle in fold(haystack)


def join_tags(tags: Iterable[str]) -> str:
    return ", ".join(tags)
