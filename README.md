# olympiad

Solutions to a collection of olympiad and contest problems (IOI, BOI, CEOI,
APIO, COCI, JOI, CSES and two interview puzzles) as plain Python functions.
Each one takes ordinary Python values and returns its answer.

## Installation

```
pip install .
```

To also install the test dependencies:

```
pip install ".[test]"
```

## Modules

| Module | Contents |
| --- | --- |
| `olympiad.numtheory` | `mod_divide`: division modulo 998244353 |
| `olympiad.ioi` | `min_palindrome_insertions`, `valley_route`, `raisins_min_payment`, `locate_centre`, `locate_centre_by_dfs`, `TypeWriter`, `valid_gondola`, `gondola_replacement`, `count_replacements`, `world_peace_min_weight`, `delivery`, `coin_flips`, `find_coin` |
| `olympiad.leetcode` | `optimal_compression_length`, `min_difficulty` |
| `olympiad.boi` | `count_bracket_sequences`, `pipe_flows`, `net_connections`, `city_destination`, `min_dna_window_binary_search`, `min_dna_window`, `count_colourful_paths`, `min_love_polygon_changes` |
| `olympiad.apio` | `dispatch_max_satisfaction`, `skyscraper_jumps` |
| `olympiad.ceoi` | `count_reachable_east`, `find_treasure`, `guess_costumes` |
| `olympiad.coci` | `count_monochrome_rectangles`, `max_independent_suspects`, `largest_simultaneous_region`, `min_magic_path`, `karte_arrangement` |
| `olympiad.cses` | `distinct_value_counts` |
| `olympiad.joi` | `robot_min_cost` |

Where a task has no answer, the function returns `None` (for example
`skyscraper_jumps` when the news cannot reach doge 1, or `karte_arrangement`
when no order works). Malformed input, such as an edge naming a node outside
the graph, raises `ValueError`. `min_magic_path` returns a
`fractions.Fraction`.

## Examples

```python
from olympiad.numtheory import mod_divide
from olympiad.ioi import min_palindrome_insertions, TypeWriter
from olympiad.leetcode import min_difficulty
from olympiad.cses import distinct_value_counts

mod_divide(6, 3)                          # 2, that is 6 / 3 modulo 998244353
min_palindrome_insertions("Ab3bd")        # 2

writer = TypeWriter()
writer.type_letter("a")
writer.type_letter("b")
writer.undo_commands(1)
writer.get_letter(0)                      # "a"

min_difficulty([6, 5, 4, 3, 2, 1], 2)     # 7

distinct_value_counts([2, 3, 1, 3, 2], [(1, 3), (2, 4), (1, 5)])  # [3, 2, 3]
```

## Interactive tasks

The interactive tasks take a callable in place of the judge:

- `olympiad.ceoi.find_treasure(n, count_treasure)` calls
  `count_treasure(r1, c1, r2, c2)` and returns the treasure cells in row-major
  order.
- `olympiad.ceoi.guess_costumes(n, ask)` calls `ask(people)` with a list of
  people and returns one label per person, equal labels meaning a shared
  costume.
- `olympiad.ioi.coin_flips(board, c)` and `olympiad.ioi.find_coin(board)` work
  on a board of 64 coins.

## What the package does not do

There is no command-line program: nothing is read from standard input or
printed. To solve a contest input file, parse it yourself and call the
function for that task.

## Running the tests

```
pytest
```