"""Command-line front end: read a problem's input text and print its answer."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable, Sequence

from problemset import dynamic, graphs, introductory, sorting, trees


class _Reader:
    """Whitespace-separated tokens of a problem's input, read in order."""

    def __init__(self, text: str) -> None:
        self._tokens = iter(text.split())

    def word(self) -> str:
        try:
            return next(self._tokens)
        except StopIteration:
            raise ValueError("input ended early") from None

    def number(self) -> int:
        token = self.word()
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"expected an integer, got {token!r}") from None

    def numbers(self, count: int) -> list[int]:
        return [self.number() for _ in range(count)]

    def pairs(self, count: int) -> list[tuple[int, int]]:
        return [(self.number(), self.number()) for _ in range(count)]

    def rows(self, count: int, width: int) -> list[str]:
        rows = [self.word() for _ in range(count)]
        for row in rows:
            if len(row) != width:
                raise ValueError(f"grid row {row!r} is not {width} cells wide")
        return rows


_Solver = Callable[[_Reader], list[str]]
_SOLVERS: dict[str, _Solver] = {}


def _problem(name: str) -> Callable[[_Solver], _Solver]:
    def register(func: _Solver) -> _Solver:
        _SOLVERS[name] = func
        return func

    return register


def _join(values: Iterable[object]) -> str:
    return " ".join(map(str, values))


def _sized(values: Sequence[object]) -> list[str]:
    return [str(len(values)), _join(values)]


@_problem("palindrome-reorder")
def _palindrome_reorder(r: _Reader) -> list[str]:
    result = introductory.palindrome_reorder(r.word())
    return ["NO SOLUTION" if result is None else result]


@_problem("bit-strings")
def _bit_strings(r: _Reader) -> list[str]:
    return [str(introductory.bit_strings(r.number()))]


@_problem("coin-piles")
def _coin_piles(r: _Reader) -> list[str]:
    return [
        "YES" if introductory.coin_piles(a, b) else "NO"
        for a, b in r.pairs(r.number())
    ]


@_problem("gray-code")
def _gray_code(r: _Reader) -> list[str]:
    return introductory.gray_code(r.number())


@_problem("increasing-array")
def _increasing_array(r: _Reader) -> list[str]:
    return [str(introductory.increasing_array(r.numbers(r.number())))]


@_problem("missing-number")
def _missing_number(r: _Reader) -> list[str]:
    n = r.number()
    return [str(introductory.missing_number(n, r.numbers(n - 1)))]


@_problem("number-spiral")
def _number_spiral(r: _Reader) -> list[str]:
    return [str(introductory.number_spiral(y, x)) for y, x in r.pairs(r.number())]


@_problem("permutations")
def _permutations(r: _Reader) -> list[str]:
    result = introductory.beautiful_permutation(r.number())
    return ["NO SOLUTION" if result is None else _join(result)]


@_problem("repetitions")
def _repetitions(r: _Reader) -> list[str]:
    return [str(introductory.longest_repetition(r.word()))]


@_problem("tower-of-hanoi")
def _tower_of_hanoi(r: _Reader) -> list[str]:
    moves = introductory.tower_of_hanoi(r.number())
    return [str(len(moves)), *(f"{a} {b}" for a, b in moves)]


@_problem("trailing-zeros")
def _trailing_zeros(r: _Reader) -> list[str]:
    return [str(introductory.trailing_zeros(r.number()))]


@_problem("two-knights")
def _two_knights(r: _Reader) -> list[str]:
    return [str(ways) for ways in introductory.two_knights(r.number())]


@_problem("two-sets")
def _two_sets(r: _Reader) -> list[str]:
    result = introductory.two_sets(r.number())
    if result is None:
        return ["NO"]
    first, second = result
    return ["YES", *_sized(first), *_sized(second)]


@_problem("weird-algorithm")
def _weird_algorithm(r: _Reader) -> list[str]:
    return [_join(introductory.weird_algorithm(r.number()))]


@_problem("apartments")
def _apartments(r: _Reader) -> list[str]:
    n, m, k = r.numbers(3)
    budgets = r.numbers(n)
    sizes = r.numbers(m)
    return [str(sorting.apartments(budgets, sizes, k))]


@_problem("distinct-numbers")
def _distinct_numbers(r: _Reader) -> list[str]:
    return [str(sorting.distinct_numbers(r.numbers(r.number())))]


@_problem("increasing-subsequence")
def _increasing_subsequence(r: _Reader) -> list[str]:
    return [str(sorting.longest_increasing_subsequence(r.numbers(r.number())))]


@_problem("array-description")
def _array_description(r: _Reader) -> list[str]:
    n, m = r.numbers(2)
    return [str(dynamic.array_description(r.numbers(n), m))]


@_problem("book-shop")
def _book_shop(r: _Reader) -> list[str]:
    n, budget = r.numbers(2)
    prices = r.numbers(n)
    pages = r.numbers(n)
    return [str(dynamic.book_shop(prices, pages, budget))]


@_problem("coin-combinations-1")
def _coin_combinations_1(r: _Reader) -> list[str]:
    n, target = r.numbers(2)
    return [str(dynamic.coin_combinations_ordered(r.numbers(n), target))]


@_problem("coin-combinations-2")
def _coin_combinations_2(r: _Reader) -> list[str]:
    n, target = r.numbers(2)
    return [str(dynamic.coin_combinations_unordered(r.numbers(n), target))]


@_problem("counting-towers")
def _counting_towers(r: _Reader) -> list[str]:
    return [str(dynamic.counting_towers(n)) for n in r.numbers(r.number())]


@_problem("dice-combinations")
def _dice_combinations(r: _Reader) -> list[str]:
    return [str(dynamic.dice_combinations(r.number()))]


@_problem("grid-paths")
def _grid_paths(r: _Reader) -> list[str]:
    n = r.number()
    return [str(dynamic.grid_paths(r.rows(n, n)))]


@_problem("minimal-grid-path")
def _minimal_grid_path(r: _Reader) -> list[str]:
    n = r.number()
    return [dynamic.minimal_grid_path(r.rows(n, n))]


@_problem("minimizing-coins")
def _minimizing_coins(r: _Reader) -> list[str]:
    n, target = r.numbers(2)
    result = dynamic.minimizing_coins(r.numbers(n), target)
    return [str(-1 if result is None else result)]


@_problem("money-sums")
def _money_sums(r: _Reader) -> list[str]:
    return _sized(dynamic.money_sums(r.numbers(r.number())))


@_problem("rectangle-cutting")
def _rectangle_cutting(r: _Reader) -> list[str]:
    width, height = r.numbers(2)
    return [str(dynamic.rectangle_cutting(width, height))]


@_problem("removing-digits")
def _removing_digits(r: _Reader) -> list[str]:
    return [str(dynamic.removing_digits(r.number()))]


@_problem("two-sets-2")
def _two_sets_2(r: _Reader) -> list[str]:
    return [str(dynamic.two_sets_count(r.number()))]


@_problem("building-roads")
def _building_roads(r: _Reader) -> list[str]:
    n, m = r.numbers(2)
    roads = graphs.building_roads(n, r.pairs(m))
    return [str(len(roads)), *(f"{a} {b}" for a, b in roads)]


@_problem("building-teams")
def _building_teams(r: _Reader) -> list[str]:
    n, m = r.numbers(2)
    teams = graphs.building_teams(n, r.pairs(m))
    return ["IMPOSSIBLE" if teams is None else _join(teams)]


@_problem("counting-rooms")
def _counting_rooms(r: _Reader) -> list[str]:
    n, m = r.numbers(2)
    return [str(graphs.counting_rooms(r.rows(n, m)))]


@_problem("labyrinth")
def _labyrinth(r: _Reader) -> list[str]:
    n, m = r.numbers(2)
    path = graphs.labyrinth(r.rows(n, m))
    if path is None:
        return ["NO"]
    return ["YES", str(len(path)), path]


@_problem("message-routes")
def _message_routes(r: _Reader) -> list[str]:
    n, m = r.numbers(2)
    route = graphs.message_route(n, r.pairs(m))
    return ["IMPOSSIBLE"] if route is None else _sized(route)


@_problem("round-trip")
def _round_trip(r: _Reader) -> list[str]:
    n, m = r.numbers(2)
    cycle = graphs.round_trip(n, r.pairs(m))
    return ["IMPOSSIBLE"] if cycle is None else _sized(cycle)


@_problem("company-queries-1")
def _company_queries_1(r: _Reader) -> list[str]:
    n, q = r.numbers(2)
    parents = r.numbers(n - 1)
    answers = trees.company_ancestors(parents, r.pairs(q))
    return [str(-1 if boss is None else boss) for boss in answers]


@_problem("company-queries-2")
def _company_queries_2(r: _Reader) -> list[str]:
    n, q = r.numbers(2)
    parents = r.numbers(n - 1)
    return [str(boss) for boss in trees.company_lca(parents, r.pairs(q))]


@_problem("counting-paths")
def _counting_paths(r: _Reader) -> list[str]:
    n, m = r.numbers(2)
    edges = r.pairs(n - 1)
    return [_join(trees.counting_paths(n, edges, r.pairs(m)))]


@_problem("distance-queries")
def _distance_queries(r: _Reader) -> list[str]:
    n, q = r.numbers(2)
    edges = r.pairs(n - 1)
    return [str(d) for d in trees.distance_queries(n, edges, r.pairs(q))]


@_problem("subordinates")
def _subordinates(r: _Reader) -> list[str]:
    n = r.number()
    return [_join(trees.subordinates(r.numbers(n - 1)))]


@_problem("tree-diameter")
def _tree_diameter(r: _Reader) -> list[str]:
    n = r.number()
    return [str(trees.tree_diameter(n, r.pairs(n - 1)))]


@_problem("tree-distances-1")
def _tree_distances_1(r: _Reader) -> list[str]:
    n = r.number()
    return [_join(trees.tree_distances_max(n, r.pairs(n - 1)))]


@_problem("tree-distances-2")
def _tree_distances_2(r: _Reader) -> list[str]:
    n = r.number()
    return [_join(trees.tree_distances_sum(n, r.pairs(n - 1)))]


def solve(name: str, text: str) -> str:
    """Answer the named problem for the given input text, one line per output line."""
    try:
        solver = _SOLVERS[name]
    except KeyError:
        raise ValueError(f"unknown problem {name!r}") from None
    return "\n".join(solver(_Reader(text)))


def main(argv: Sequence[str] | None = None) -> int:
    """Read a problem's input from a file or standard input and print the answer."""
    parser = argparse.ArgumentParser(
        prog="problemset",
        description="Solve a competitive programming problem from its input text.",
    )
    parser.add_argument(
        "problem",
        choices=sorted(_SOLVERS),
        metavar="PROBLEM",
        help="one of: " + ", ".join(sorted(_SOLVERS)),
    )
    parser.add_argument("-i", "--input", help="file to read instead of standard input")
    args = parser.parse_args(argv)
    try:
        if args.input:
            with open(args.input, encoding="utf-8") as handle:
                text = handle.read()
        else:
            text = sys.stdin.read()
        answer = solve(args.problem, text)
    except (OSError, ValueError) as exc:
        print(f"problemset: {exc}", file=sys.stderr)
        return 1
    print(answer)
    return 0


if __name__ == "__main__":
    sys.exit(main())