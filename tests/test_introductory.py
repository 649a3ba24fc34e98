import math
from functools import lru_cache
from itertools import combinations

import pytest

from problemset.introductory import (
    beautiful_permutation,
    bit_strings,
    coin_piles,
    gray_code,
    increasing_array,
    longest_repetition,
    missing_number,
    number_spiral,
    palindrome_reorder,
    tower_of_hanoi,
    trailing_zeros,
    two_knights,
    two_sets,
    weird_algorithm,
)

MOD = 1_000_000_007


@pytest.mark.parametrize("text", ["AAAACACBA", "AABB", "Z", "ABCABCD", ""])
def test_palindrome_reorder_builds_palindrome(text):
    result = palindrome_reorder(text)
    assert result == result[::-1]
    assert sorted(result) == sorted(text)


@pytest.mark.parametrize("text", ["AB", "ABC", "AAABBBC"])
def test_palindrome_reorder_no_solution(text):
    assert palindrome_reorder(text) is None


def test_palindrome_reorder_rejects_lowercase():
    with pytest.raises(ValueError):
        palindrome_reorder("abba")


def test_bit_strings_doubles_modulo():
    for n in (0, 5, 29, 30, 31, 1000):
        assert bit_strings(n + 1) == bit_strings(n) * 2 % MOD


def test_bit_strings_negative():
    with pytest.raises(ValueError):
        bit_strings(-1)


@lru_cache(maxsize=None)
def _can_empty(a, b):
    if a == 0 and b == 0:
        return True
    moves = [(a - 1, b - 2), (a - 2, b - 1)]
    return any(x >= 0 and y >= 0 and _can_empty(x, y) for x, y in moves)


def test_coin_piles_matches_search():
    for a in range(13):
        for b in range(13):
            assert coin_piles(a, b) == _can_empty(a, b)
            assert coin_piles(a, b) == coin_piles(b, a)


def test_gray_code_from_documented_sequence():
    assert gray_code(1) == ["0", "1"]
    assert gray_code(3) == ["000", "001", "011", "010", "110", "111", "101", "100"]


@pytest.mark.parametrize("n", [1, 2, 4, 6])
def test_gray_code_neighbours_differ_in_one_bit(n):
    codes = gray_code(n)
    assert len(set(codes)) == 2**n
    assert all(len(code) == n for code in codes)
    for left, right in zip(codes, codes[1:]):
        assert sum(a != b for a, b in zip(left, right)) == 1


def test_increasing_array_sorted_needs_nothing():
    assert increasing_array([1, 2, 2, 5, 9]) == 0


def test_increasing_array_below_maximum():
    head = 10
    tail = [3, 7, 10, 1]
    assert increasing_array([head, *tail]) == sum(head - x for x in tail)


@pytest.mark.parametrize("missing", [1, 4, 8])
def test_missing_number(missing):
    n = 8
    nums = [x for x in range(n, 0, -1) if x != missing]
    assert missing_number(n, nums) == missing


@pytest.mark.parametrize("size", [1, 2, 3, 4, 5, 6])
def test_number_spiral_fills_square(size):
    values = {number_spiral(y, x) for y in range(1, size + 1) for x in range(1, size + 1)}
    assert values == set(range(1, size * size + 1))


def test_number_spiral_rejects_zero():
    with pytest.raises(ValueError):
        number_spiral(0, 3)


def test_beautiful_permutation_small_cases():
    assert beautiful_permutation(4) == [2, 4, 1, 3]
    assert beautiful_permutation(1) == [1]
    assert beautiful_permutation(2) is None
    assert beautiful_permutation(3) is None


@pytest.mark.parametrize("n", range(5, 21))
def test_beautiful_permutation_property(n):
    perm = beautiful_permutation(n)
    assert sorted(perm) == list(range(1, n + 1))
    assert all(abs(a - b) != 1 for a, b in zip(perm, perm[1:]))


def test_longest_repetition_example():
    assert longest_repetition("ATTCGGGA") == 3


@pytest.mark.parametrize("k", [1, 2, 7])
def test_longest_repetition_single_run(k):
    assert longest_repetition("C" * k) == k
    assert longest_repetition("A" + "G" * k + "A") == k


def test_longest_repetition_empty():
    with pytest.raises(ValueError):
        longest_repetition("")


@pytest.mark.parametrize("n", [0, 1, 2, 5])
def test_tower_of_hanoi_is_legal(n):
    moves = tower_of_hanoi(n)
    assert len(moves) == 2**n - 1
    pegs = {1: list(range(n, 0, -1)), 2: [], 3: []}
    for src, dst in moves:
        disk = pegs[src].pop()
        assert not pegs[dst] or pegs[dst][-1] > disk
        pegs[dst].append(disk)
    assert pegs[3] == list(range(n, 0, -1))


@pytest.mark.parametrize("n", [0, 4, 5, 24, 25, 100, 126])
def test_trailing_zeros_matches_factorial(n):
    digits = str(math.factorial(n))
    assert trailing_zeros(n) == len(digits) - len(digits.rstrip("0"))


def _non_attacking_pairs(k):
    squares = [(r, c) for r in range(k) for c in range(k)]
    return sum(
        1
        for (r1, c1), (r2, c2) in combinations(squares, 2)
        if {abs(r1 - r2), abs(c1 - c2)} != {1, 2}
    )


def test_two_knights_matches_enumeration():
    results = two_knights(6)
    assert len(results) == 6
    for k, value in enumerate(results, start=1):
        assert value == _non_attacking_pairs(k)


@pytest.mark.parametrize("n", [1, 2, 5, 6, 9])
def test_two_sets_impossible(n):
    assert two_sets(n) is None


@pytest.mark.parametrize("n", [3, 4, 7, 8, 20])
def test_two_sets_balanced(n):
    first, second = two_sets(n)
    assert sum(first) == sum(second)
    assert sorted(first + second) == list(range(1, n + 1))


def test_weird_algorithm_example():
    assert weird_algorithm(3) == [3, 10, 5, 16, 8, 4, 2, 1]


@pytest.mark.parametrize("n", [1, 7, 27, 1024])
def test_weird_algorithm_steps(n):
    seq = weird_algorithm(n)
    assert seq[0] == n and seq[-1] == 1
    for a, b in zip(seq, seq[1:]):
        assert b == (a // 2 if a % 2 == 0 else 3 * a + 1)


def test_weird_algorithm_rejects_zero():
    with pytest.raises(ValueError):
        weird_algorithm(0)