# olimpiada

Solutions to programming olympiad problems (editions 2015 to 2020). Each
problem is a small, pure function that takes the problem's input as Python
values and returns the answer.

The problems are grouped by year in the modules `olimpiada.y2015` through
`olimpiada.y2020`.

## Installation

```
pip install .
```

## Examples

```python
from olimpiada.y2015 import add_binary, count_box_ways
from olimpiada.y2017 import cheapest_freight, game_ten
from olimpiada.y2018 import floor_tiles
from olimpiada.y2020 import three_for_two

count_box_ways(5, 3)         # ordered triples in 1..3 that sum to 5
game_ten(10, 3, 7)           # steps forward from 7 to 3 on a ring of 10 -> 6
floor_tiles(2, 3)            # (type-1 tiles, type-2 tiles) for a 2 x 3 floor
three_for_two([10, 20, 30])  # every third item, dearest first, is free -> 50
cheapest_freight(3, [(1, 2, 5), (2, 3, 4), (1, 3, 20)])  # town 1 to town 3 -> 9
add_binary([1, 0, 1], [1, 1])  # binary fractions, digits after the point
```

Inputs are plain lists, tuples, strings and integers. Grids are given as
lists of strings (or, for `burrow_length`, lists of integer rows), and
functions that change a grid return a new list of strings.

## Modules

- `olimpiada.y2015`: `count_box_ways`, `coral_is_false`, `assemble_puzzle`,
  `add_binary`, `splits_evenly`
- `olimpiada.y2016`: `braces_balanced`, `lamp_presses`, `sandwich_ways`,
  `burrow_length`, `missing_permutation`, `pokemon_count`,
  `count_almost_primes`
- `olimpiada.y2017`: `boot_pairs`, `game_ten`, `cheapest_freight`, `map_end`,
  `xerxes_winner`, `empire_min_difference`, `pole_repairs`
- `olimpiada.y2018`: `missing_stamped`, `floor_tiles`, `elevator_possible`,
  `balls_possible`, `multiple_of_five`, `spot_is_regular`
- `olimpiada.y2019`: `rain`, `eldest_age`, `rectangle_count`,
  `cheapest_price`, `free_chair`
- `olimpiada.y2020`: `accelerator`, `fissure`, `pandemic`, `three_for_two`,
  `shirts_available`, `third_sibling_age`, `best_frame`, `atlanta`

Malformed input raises `ValueError`: for example a grid with no starting
cell, a puzzle whose pieces form a cycle, or an empty list of offers.

## What the package does not do

There are no command-line programs. Nothing reads problem input from
standard input or prints answers in a judge's output format; parse the
input yourself and call the functions.

## Running the tests

```
pip install .[test]
pytest
```