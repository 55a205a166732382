"""Solutions to a handful of array and string puzzles."""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Iterable, Sequence
from itertools import accumulate, chain


def min_swaps(text: str) -> int:
    """Fewest swaps that balance a string of '[' and ']' with equal counts of each."""
    open_count = 0
    unmatched = 0
    for ch in text:
        if ch == "[":
            open_count += 1
        elif open_count:
            open_count -= 1
        else:
            unmatched += 1
    return (unmatched + 1) // 2


def min_groups(intervals: Iterable[Sequence[int]]) -> int:
    """Fewest groups of pairwise disjoint closed intervals covering all ``intervals``."""
    events = sorted(
        chain.from_iterable(
            ((interval[0], 1), (interval[1] + 1, -1)) for interval in intervals
        )
    )
    active = peak = 0
    for _, delta in events:
        active += delta
        peak = max(peak, active)
    return peak


def maximum_coins(
    heroes: Sequence[int], monsters: Sequence[int], coins: Sequence[int]
) -> list[int]:
    """Coins each hero collects by beating every monster no stronger than itself."""
    if len(monsters) != len(coins):
        raise ValueError(
            f"monsters and coins must have equal length, got {len(monsters)} and {len(coins)}"
        )
    pairs = sorted(zip(monsters, coins))
    powers = [power for power, _ in pairs]
    prefix = list(accumulate((coin for _, coin in pairs), initial=0))
    return [prefix[bisect_right(powers, hero)] for hero in heroes]


def max_width_ramp(nums: Sequence[int]) -> int:
    """Largest ``j - i`` with ``i <= j`` and ``nums[i] <= nums[j]``; 0 for an empty sequence."""
    if not nums:
        return 0
    right_max = list(accumulate(reversed(nums), max))[::-1]
    left = 0
    best = 0
    for right, ceiling in enumerate(right_max):
        while left < right and nums[left] > ceiling:
            left += 1
        best = max(best, right - left)
    return best