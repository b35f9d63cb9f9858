"""
String similarity for partial credit.

Plain Levenshtein distance (unit-cost insert, delete and substitute). Time is
O(n*m), so callers cap the input length before scoring long free text.
"""

from __future__ import annotations


def levenshtein_distance(first: str, second: str) -> int:
    """
    Minimum number of single-character edits turning ``first`` into ``second``.

    Uses two rolling rows sized by the shorter string.
    """
    longer, shorter = (first, second) if len(first) >= len(second) else (second, first)

    previous = list(range(len(shorter) + 1))
    for i, long_char in enumerate(longer, start=1):
        current = [i] + [0] * len(shorter)
        for j, short_char in enumerate(shorter, start=1):
            if long_char == short_char:
                current[j] = previous[j - 1]
            else:
                current[j] = 1 + min(
                    previous[j - 1],  # substitute
                    current[j - 1],  # insert
                    previous[j],  # delete
                )
        previous = current

    return previous[len(shorter)]


def similarity(first: str, second: str) -> float:
    """
    Similarity in [0, 1]: ``(longest - distance) / longest``.

    Two empty strings are identical (1.0).

    Examples:
        >>> similarity("london", "londn")
        0.8333333333333334
    """
    longest = max(len(first), len(second))
    if longest == 0:
        return 1.0
    return (longest - levenshtein_distance(first, second)) / longest
