"""Sorting and searching problems."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable


def apartments(budgets: Iterable[int], sizes: Iterable[int], k: int) -> int:
    """Most applicants that get an apartment within k of their desired size."""
    wanted = sorted(budgets)
    offered = sorted(sizes)
    count = i = j = 0
    while i < len(wanted) and j < len(offered):
        if wanted[i] - k <= offered[j] <= wanted[i] + k:
            count += 1
            i += 1
            j += 1
        elif offered[j] < wanted[i]:
            j += 1
        else:
            i += 1
    return count


def distinct_numbers(values: Iterable[int]) -> int:
    """Number of distinct values."""
    return len(set(values))


def longest_increasing_subsequence(values: Iterable[int]) -> int:
    """Length of the longest strictly increasing subsequence."""
    tails: list[int] = []
    for value in values:
        pos = bisect_left(tails, value)
        if pos == len(tails):
            tails.append(value)
        else:
            tails[pos] = value
    return len(tails)