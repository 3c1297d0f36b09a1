"""
Fuzzy matching and ranking over command history.

A candidate matches when the query is a case-insensitive subsequence of it.
Matches are ranked by score, lower first:

- query found as a contiguous substring: index of its first occurrence
- otherwise: number of candidate characters skipped while greedily
  consuming the query from left to right
"""

from __future__ import annotations

from typing import Iterable


def fuzzy_match(query: str, candidate: str) -> bool:
    """Return True if query is a case-insensitive subsequence of candidate."""
    return _is_subsequence(query.lower(), candidate.lower())


def fuzzy_score(query: str, candidate: str) -> int:
    """Score a candidate against a query (lower is better).

    Only meaningful for candidates that match; see fuzzy_match().
    """
    return _score(query.lower(), candidate.lower())


def search(query: str, candidates: Iterable[str]) -> list[str]:
    """Return every candidate matching query, best match first.

    Ties keep their input order. The full ranked list is returned;
    callers decide how many results to show.

    Args:
        query: Search text. An empty query matches every candidate.
        candidates: Strings to search, typically history entries oldest first.

    Returns:
        Matching candidates ranked by ascending score.
    """
    needle = query.lower()
    scored = []
    for candidate in candidates:
        hay = candidate.lower()
        if _is_subsequence(needle, hay):
            scored.append((_score(needle, hay), candidate))
    # list.sort is stable, so equal scores keep input order
    scored.sort(key=lambda item: item[0])
    return [candidate for _, candidate in scored]


def _is_subsequence(needle: str, hay: str) -> bool:
    if len(needle) > len(hay):
        return False
    pos = 0
    for ch in hay:
        if pos == len(needle):
            break
        if ch == needle[pos]:
            pos += 1
    return pos == len(needle)


def _score(needle: str, hay: str) -> int:
    idx = hay.find(needle)
    if idx >= 0:
        return idx

    skipped = 0
    pos = 0
    for ch in hay:
        if pos == len(needle):
            break
        if ch == needle[pos]:
            pos += 1
        else:
            skipped += 1
    return skipped
