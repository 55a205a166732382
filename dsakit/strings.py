"""String algorithms: run-length compression, anagrams, prefixes, reversal."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from functools import lru_cache
from itertools import groupby

MAX_COMPRESSION_INPUT = 100
_INFINITY = float("inf")


def _run_length(count: int) -> int:
    """Characters needed to encode a run of ``count`` equal characters."""
    if count == 0:
        return 0
    if count == 1:
        return 1
    return 1 + len(str(count))


def optimal_compression_length(text: str, k: int) -> int:
    """Shortest run-length encoding of ``text`` after deleting at most ``k`` characters."""
    if k < 0:
        raise ValueError(f"deletion budget must not be negative, got {k}")
    if len(text) > MAX_COMPRESSION_INPUT:
        raise ValueError(
            f"text must be at most {MAX_COMPRESSION_INPUT} characters, got {len(text)}"
        )

    @lru_cache(maxsize=None)
    def solve(i: int, budget: int, prev: str | None, prev_count: int) -> float:
        if budget < 0:
            return _INFINITY
        if i == len(text):
            return 0
        ch = text[i]
        if ch == prev:
            grown = prev_count + 1
            return (
                _run_length(grown)
                - _run_length(prev_count)
                + solve(i + 1, budget, prev, grown)
            )
        delete = solve(i + 1, budget - 1, prev, prev_count)
        keep = _run_length(1) + solve(i + 1, budget, ch, 1)
        return min(delete, keep)

    return int(solve(0, k, None, 0))


def is_anagram(first: str, second: str) -> bool:
    """True if ``first`` and ``second`` hold the same characters equally often."""
    return len(first) == len(second) and Counter(first) == Counter(second)


def longest_common_prefix(words: Sequence[str]) -> str:
    """Longest prefix shared by every word; empty if there is none."""
    if not words:
        return ""
    prefix = words[0]
    for word in words[1:]:
        while not word.startswith(prefix):
            prefix = prefix[:-1]
            if not prefix:
                return ""
    return prefix


def is_palindrome(text: str) -> bool:
    """True if ``text`` reads the same backwards."""
    return text == text[::-1]


def reverse_words(text: str) -> str:
    """Reverse the order of space-separated words, keeping each word intact."""
    return " ".join(reversed(text.split(" ")))


def compress(chars: Iterable[str]) -> str:
    """Run-length encode ``chars``: each run becomes its character plus a count above one."""
    parts = []
    for ch, run in groupby(chars):
        count = sum(1 for _ in run)
        parts.append(ch if count == 1 else f"{ch}{count}")
    return "".join(parts)