"""Dynamic programming problems: counting, knapsacks and grid paths."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from math import inf

MOD = 1_000_000_007
_INV2 = 500_000_004


def _validated_grid(grid: Iterable[str]) -> list[str]:
    rows = list(grid)
    if not rows or not rows[0]:
        raise ValueError("grid must not be empty")
    if any(len(row) != len(rows[0]) for row in rows):
        raise ValueError("grid rows must all have the same length")
    return rows


def array_description(values: Iterable[int], m: int) -> int:
    """Ways to fill the zeros so neighbours differ by at most 1, within 1..m."""
    values = list(values)
    if not values:
        raise ValueError("array must not be empty")
    if m < 1:
        raise ValueError("upper bound must be positive")
    bad = [v for v in values if not 0 <= v <= m]
    if bad:
        raise ValueError(f"values must lie in 0..{m}, got {bad!r}")

    ways = [0] * (m + 2)
    if values[0] == 0:
        ways[1 : m + 1] = [1] * m
    else:
        ways[values[0]] = 1

    for value in values[1:]:
        following = [0] * (m + 2)
        targets = range(1, m + 1) if value == 0 else (value,)
        for j in targets:
            following[j] = (ways[j - 1] + ways[j] + ways[j + 1]) % MOD
        ways = following

    return sum(ways[1 : m + 1]) % MOD


def book_shop(prices: Sequence[int], pages: Sequence[int], budget: int) -> int:
    """Most pages obtainable by buying each book at most once within budget."""
    if len(prices) != len(pages):
        raise ValueError("prices and pages must have the same length")
    if budget < 0:
        raise ValueError("budget must be non-negative")
    if any(price < 0 for price in prices):
        raise ValueError("prices must be non-negative")
    best = [0] * (budget + 1)
    for price, value in zip(prices, pages):
        for spent in range(budget, price - 1, -1):
            best[spent] = max(best[spent], best[spent - price] + value)
    return best[budget]


def _check_coins(coins: Iterable[int], target: int) -> list[int]:
    coins = list(coins)
    if any(c < 1 for c in coins):
        raise ValueError("coin values must be positive")
    if target < 0:
        raise ValueError("target must be non-negative")
    return coins


def coin_combinations_ordered(coins: Iterable[int], target: int) -> int:
    """Ordered ways to reach target as a sum of coins, modulo 1e9+7."""
    coins = _check_coins(coins, target)
    ways = [1] + [0] * target
    for total in range(1, target + 1):
        ways[total] = sum(ways[total - c] for c in coins if c <= total) % MOD
    return ways[target]


def coin_combinations_unordered(coins: Iterable[int], target: int) -> int:
    """Distinct multisets of coins summing to target, modulo 1e9+7."""
    coins = _check_coins(coins, target)
    if not coins:
        return 0
    ways = [1] + [0] * target
    for coin in coins:
        for total in range(coin, target + 1):
            ways[total] = (ways[total] + ways[total - coin]) % MOD
    return ways[target]


def counting_towers(n: int) -> int:
    """Ways to build a tower of width 2 and height n, modulo 1e9+7."""
    if n < 1:
        raise ValueError("height must be positive")
    split, joined = 1, 1
    for _ in range(n - 1):
        split, joined = (joined + 4 * split) % MOD, (2 * joined + split) % MOD
    return (split + joined) % MOD


def dice_combinations(n: int) -> int:
    """Ways to reach sum n by throwing a six-sided die, modulo 1e9+7."""
    if n < 0:
        raise ValueError("sum must be non-negative")
    ways = [1] + [0] * n
    for total in range(1, n + 1):
        ways[total] = sum(ways[max(0, total - 6) : total]) % MOD
    return ways[n]


def grid_paths(grid: Iterable[str]) -> int:
    """Paths moving right or down from top-left to bottom-right avoiding '*'."""
    rows = _validated_grid(grid)
    paths = [0] * len(rows[0])
    for r, row in enumerate(rows):
        for c, cell in enumerate(row):
            if cell == "*":
                paths[c] = 0
            elif r == 0 and c == 0:
                paths[c] = 1
            elif c > 0:
                paths[c] = (paths[c] + paths[c - 1]) % MOD
    return paths[-1]


def minimal_grid_path(grid: Iterable[str]) -> str:
    """Lexicographically smallest string read along a right/down path."""
    rows = _validated_grid(grid)
    height, width = len(rows), len(rows[0])
    frontier = {(0, 0)}
    letters = [rows[0][0]]
    for _ in range(height + width - 2):
        candidates = {
            (x + dx, y + dy)
            for x, y in frontier
            for dx, dy in ((1, 0), (0, 1))
            if x + dx < height and y + dy < width
        }
        smallest = min(rows[x][y] for x, y in candidates)
        frontier = {(x, y) for x, y in candidates if rows[x][y] == smallest}
        letters.append(smallest)
    return "".join(letters)


def minimizing_coins(coins: Iterable[int], target: int) -> int | None:
    """Fewest coins summing to target, or None if it cannot be reached."""
    coins = _check_coins(coins, target)
    fewest: list[float] = [0] + [inf] * target
    for total in range(1, target + 1):
        fewest[total] = min(
            (fewest[total - c] + 1 for c in coins if c <= total), default=inf
        )
    return None if fewest[target] == inf else int(fewest[target])


def money_sums(values: Iterable[int]) -> list[int]:
    """All positive sums formed by subsets of the coins, ascending."""
    reachable = 1
    for value in values:
        if value < 0:
            raise ValueError("coin values must be non-negative")
        reachable |= reachable << value
    return [s for s in range(1, reachable.bit_length()) if reachable >> s & 1]


def rectangle_cutting(width: int, height: int) -> int:
    """Fewest straight cuts that split a width x height rectangle into squares."""
    if width < 1 or height < 1:
        raise ValueError("dimensions must be positive")
    cuts = [[0] * (height + 1) for _ in range(width + 1)]
    for w in range(1, width + 1):
        for h in range(1, height + 1):
            if w == h:
                continue
            vertical = min(
                (cuts[k][h] + cuts[w - k][h] + 1 for k in range(1, w)), default=inf
            )
            horizontal = min(
                (cuts[w][k] + cuts[w][h - k] + 1 for k in range(1, h)), default=inf
            )
            cuts[w][h] = int(min(vertical, horizontal))
    return cuts[width][height]


def removing_digits(n: int) -> int:
    """Fewest steps to reach 0, each step subtracting one of the digits."""
    if n < 0:
        raise ValueError("number must be non-negative")
    steps = [0] * (n + 1)
    for value in range(1, n + 1):
        steps[value] = 1 + min(steps[value - int(d)] for d in str(value) if d != "0")
    return steps[n]


def two_sets_count(n: int) -> int:
    """Ways to split 1..n into two sets of equal sum, modulo 1e9+7."""
    if n < 0:
        raise ValueError("n must be non-negative")
    total = n * (n + 1) // 2
    if total % 2:
        return 0
    target = total // 2
    ways = [1] + [0] * target
    for number in range(1, n + 1):
        for s in range(target, number - 1, -1):
            ways[s] = (ways[s] + ways[s - number]) % MOD
    return ways[target] * _INV2 % MOD