"""Canonical form of free-text answers."""

from __future__ import annotations

import re

_WHITESPACE_RUN = re.compile(r"\s+")


def normalize_answer(answer: str, case_sensitive: bool = False) -> str:
    """
    Normalize a free-text answer for comparison.

    Strips leading/trailing whitespace, lowercases unless ``case_sensitive``,
    and collapses every whitespace run into a single space.

    Examples:
        >>> normalize_answer("  New   York ")
        'new york'
        >>> normalize_answer(" Au ", case_sensitive=True)
        'Au'
    """
    normalized = answer.strip()
    if not case_sensitive:
        normalized = normalized.lower()
    return _WHITESPACE_RUN.sub(" ", normalized)
