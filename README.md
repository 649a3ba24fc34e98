# problemset

Solutions to classic competitive-programming problems. You can call them
as plain Python functions or run them from the command line on input in
the usual contest text format.

The package has no dependencies outside the standard library. It needs
Python 3.10 or later.

## Installation

```
pip install .
```

To install with the test tools:

```
pip install ".[test]"
```

## Library use

The functions are grouped by topic:

- `problemset.introductory`: `palindrome_reorder`, `bit_strings`,
  `coin_piles`, `gray_code`, `increasing_array`, `missing_number`,
  `number_spiral`, `beautiful_permutation`, `longest_repetition`,
  `tower_of_hanoi`, `trailing_zeros`, `two_knights`, `two_sets`,
  `weird_algorithm`
- `problemset.sorting`: `apartments`, `distinct_numbers`,
  `longest_increasing_subsequence`
- `problemset.dynamic`: `array_description`, `book_shop`,
  `coin_combinations_ordered`, `coin_combinations_unordered`,
  `counting_towers`, `dice_combinations`, `grid_paths`,
  `minimal_grid_path`, `minimizing_coins`, `money_sums`,
  `rectangle_cutting`, `removing_digits`, `two_sets_count`
- `problemset.graphs`: `building_roads`, `building_teams`,
  `counting_rooms`, `labyrinth`, `message_route`, `round_trip`
- `problemset.trees`: the `BinaryLifting` class (`from_parents`,
  `ancestor`, `lca`, `distance`), plus `company_ancestors`, `company_lca`,
  `distance_queries`, `counting_paths`, `subordinates`, `tree_diameter`,
  `tree_distances_max`, `tree_distances_sum`

Each function takes ordinary Python values: integers, strings, lists of
numbers, lists of `(a, b)` edge pairs with nodes numbered from 1, and
grids as lists of equal-length strings. It returns the answer.

Some problems can have no solution. For those, the function returns
`None`: `palindrome_reorder`, `beautiful_permutation`, `two_sets`,
`minimizing_coins`, `building_teams`, `labyrinth`, `message_route`,
`round_trip`, and `BinaryLifting.ancestor` (with `company_ancestors`)
when the tree is not deep enough. Input that breaks a problem's rules
raises `ValueError`. Examples are a negative length, letters outside
A–Z, grid rows of unequal length, edge endpoints out of range, or edges
that do not form a tree.

```python
from problemset.introductory import weird_algorithm, gray_code
from problemset.dynamic import dice_combinations
from problemset.trees import BinaryLifting

weird_algorithm(3)     # [3, 10, 5, 16, 8, 4, 2, 1]
gray_code(2)           # ['00', '01', '11', '10']
dice_combinations(3)   # 4

tree = BinaryLifting(5, [(1, 2), (1, 3), (3, 4), (3, 5)])
tree.lca(4, 5)         # 3
tree.distance(2, 4)    # 3
tree.ancestor(4, 3)    # None
```

Several counting problems give their answers modulo 10^9 + 7. These are
`bit_strings`, `array_description`, both coin-combination functions,
`counting_towers`, `dice_combinations`, `grid_paths` and
`two_sets_count`.

## Command line

The `problemset` command takes a problem name. It reads that problem's
input from standard input, or from a file given with `-i`/`--input`, and
prints the answer in the usual output format:

```
problemset weird-algorithm <<< 3
problemset labyrinth -i maze.txt
problemset --help
```

The problem names are:

- `apartments`
- `array-description`
- `bit-strings`
- `book-shop`
- `building-roads`
- `building-teams`
- `coin-combinations-1`
- `coin-combinations-2`
- `coin-piles`
- `company-queries-1`
- `company-queries-2`
- `counting-paths`
- `counting-rooms`
- `counting-towers`
- `dice-combinations`
- `distance-queries`
- `distinct-numbers`
- `gray-code`
- `grid-paths`
- `increasing-array`
- `increasing-subsequence`
- `labyrinth`
- `message-routes`
- `minimal-grid-path`
- `minimizing-coins`
- `missing-number`
- `money-sums`
- `number-spiral`
- `palindrome-reorder`
- `permutations`
- `rectangle-cutting`
- `removing-digits`
- `repetitions`
- `round-trip`
- `subordinates`
- `tower-of-hanoi`
- `trailing-zeros`
- `tree-diameter`
- `tree-distances-1`
- `tree-distances-2`
- `two-knights`
- `two-sets`
- `two-sets-2`
- `weird-algorithm`

Problems with no solution print the customary word instead:
`NO SOLUTION`, `NO`, `IMPOSSIBLE`, or `-1`. If the input is malformed or
the file cannot be read, the command prints a message to standard error
and exits with status 1.

The same behaviour is available in code through
`problemset.cli.solve(name, text)`. It takes a problem name and the input
text and returns the output text. An unknown name or bad input raises
`ValueError`.

## Running the tests

```
pytest
```