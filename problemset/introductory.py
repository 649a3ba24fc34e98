"""Introductory problems: counting, constructions and simple simulations."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Iterator
from itertools import groupby

MOD = 1_000_000_007


def palindrome_reorder(s: str) -> str | None:
    """Rearrange upper-case letters into a palindrome, or None if impossible."""
    counts = Counter(s)
    invalid = sorted(c for c in counts if not "A" <= c <= "Z")
    if invalid:
        raise ValueError(f"only letters A-Z are allowed, got {invalid!r}")
    odd = [c for c in sorted(counts) if counts[c] % 2]
    if len(odd) > 1:
        return None
    half = "".join(c * (counts[c] // 2) for c in sorted(counts) if counts[c] % 2 == 0)
    middle = "".join(c * counts[c] for c in odd)
    return half + middle + half[::-1]


def bit_strings(n: int) -> int:
    """Number of bit strings of length n, modulo 1e9+7."""
    if n < 0:
        raise ValueError("length must be non-negative")
    return pow(2, n, MOD)


def coin_piles(a: int, b: int) -> bool:
    """Whether both piles can be emptied by taking 1 and 2 coins per move."""
    return (a + b) % 3 == 0 and max(a, b) <= 2 * min(a, b)


def gray_code(n: int) -> list[str]:
    """All n-bit Gray codes in reflected order."""
    if n < 0:
        raise ValueError("bit width must be non-negative")
    codes = []
    for i in range(1 << n):
        gray = i ^ (i >> 1)
        codes.append("".join(str((gray >> j) & 1) for j in reversed(range(n))))
    return codes


def increasing_array(nums: Iterable[int]) -> int:
    """Minimum total increments that make the sequence non-decreasing."""
    moves = 0
    highest: int | None = None
    for value in nums:
        if highest is not None and value < highest:
            moves += highest - value
        else:
            highest = value
    return moves


def missing_number(n: int, nums: Iterable[int]) -> int:
    """The number from 1..n absent from nums, which holds the other n-1."""
    return n * (n + 1) // 2 - sum(nums)


def number_spiral(y: int, x: int) -> int:
    """Value at row y, column x of the number spiral."""
    if y < 1 or x < 1:
        raise ValueError("coordinates start at 1")
    layer = max(x, y)
    square = (layer - 1) ** 2
    if layer % 2 == 0:
        return square + y if x > y else layer * layer - x + 1
    return layer * layer - y + 1 if x > y else square + x


def beautiful_permutation(n: int) -> list[int] | None:
    """A permutation of 1..n with no adjacent values differing by 1, or None."""
    if n in (2, 3):
        return None
    if n == 4:
        return [2, 4, 1, 3]
    if n < 1:
        return []
    result = [0] * n
    numbers = iter(range(1, n + 1))
    for positions in (range(0, n, 2), range(1, n, 2)):
        for pos in positions:
            result[pos] = next(numbers)
    return result


def longest_repetition(s: str) -> int:
    """Length of the longest run of one repeated character."""
    if not s:
        raise ValueError("sequence must not be empty")
    return max(sum(1 for _ in run) for _, run in groupby(s))


def _hanoi(source: int, spare: int, target: int, n: int) -> Iterator[tuple[int, int]]:
    if n == 0:
        return
    yield from _hanoi(source, target, spare, n - 1)
    yield (source, target)
    yield from _hanoi(spare, source, target, n - 1)


def tower_of_hanoi(n: int) -> list[tuple[int, int]]:
    """Moves (from, to) that carry n disks from stack 1 to stack 3."""
    if n < 0:
        raise ValueError("disk count must be non-negative")
    return list(_hanoi(1, 2, 3, n))


def trailing_zeros(n: int) -> int:
    """Number of trailing zeros of n!."""
    count = 0
    divisor = 5
    while n >= divisor:
        count += n // divisor
        divisor *= 5
    return count


def two_knights(n: int) -> list[int]:
    """For k = 1..n, ways to place two non-attacking knights on a k x k board."""
    results = []
    for k in range(1, n + 1):
        total = k * k * (k * k - 1) // 2
        attacking = 4 * (k - 1) * (k - 2)
        results.append(total - attacking)
    return results


def two_sets(n: int) -> tuple[list[int], list[int]] | None:
    """Split 1..n into two sets of equal sum, or None if impossible."""
    total = n * (n + 1) // 2
    if total % 2:
        return None
    target = total // 2
    first: list[int] = []
    second: list[int] = []
    for i in range(n, 0, -1):
        if i <= target:
            first.append(i)
            target -= i
        else:
            second.append(i)
    return first, second


def weird_algorithm(n: int) -> list[int]:
    """The halve-or-3n+1 sequence starting at n and ending at 1."""
    if n < 1:
        raise ValueError("start value must be positive")
    sequence = []
    while n != 1:
        sequence.append(n)
        n = n // 2 if n % 2 == 0 else 3 * n + 1
    sequence.append(1)
    return sequence