# algoset

A small library of self-contained algorithm solutions, grouped by theme.
Every function takes plain Python values (ints, strings, lists) and returns
plain Python values. It is a library only: there is no command-line tool.

## Installation

```
pip install .
```

To run the test suite, install the test extra and run pytest:

```
pip install .[test]
pytest
```

## Modules

- `algoset.text`
  - `remove_duplicates(s)`: repeatedly removes adjacent equal pairs of characters.
  - `second_highest(s)`: second largest distinct ASCII digit in `s`, or `-1`.
  - `check_zero_ones(s)`: whether the longest run of `'1'` is longer than the longest run of `'0'`.
  - `cells_in_range(s)`: cells of a range such as `"K1:L2"`, column by column.
- `algoset.arrays`
  - `kids_with_candies`, `min_operations`, `contains_duplicate`,
    `minimum_operations_to_zero`, `delete_greatest_value`, `h_index`,
    `find_peaks`, `minimum_operations_to_distinct`, `count_partitions`,
    `max_sub_array`, `plus_one`, `repeated_n_times`.
- `algoset.arithmetic`
  - `tribonacci(n)` for `0 <= n <= 37`.
  - `check_powers_of_three(n)`: whether `n` is a sum of distinct powers of three.
  - `smallest_good_base(n)`: takes and returns decimal strings; `n` must fit in an unsigned 64-bit integer.
  - `subarray_bitwise_ors(arr)`: number of distinct ORs over contiguous subarrays.
  - `add_operators(num, target)`: expressions with `+`, `-`, `*` between digits that evaluate to `target`.
- `algoset.heaps`
  - `furthest_building(heights, bricks, ladders)`, `max_kelements(nums, k)`,
    `find_relative_ranks(score)` (medals for the top three, then rank numbers).
- `algoset.alternation`
  - `FooBar(n)`: two threads call `foo` and `bar`; the callbacks run in strict
    turns, `foo` first, `n` times each.
- `algoset.graphs`
  - `find_smallest_set_of_vertices(n, edges)`: vertices no edge points to.
  - `shortest_distance_after_queries(n, queries)` and
    `shortest_distance_after_non_crossing_queries(n, queries)`: distance from
    city `0` to city `n - 1` after each added one-way road.
  - `game_of_life(board)`: advances the board one generation, in place.
- `algoset.counting`
  - `column_transitions(m)`: for each valid 3-colouring of an `m`-cell column,
    the indices of the columns that may follow it.
  - `color_the_grid(m, n)`: 3-colourings of an `m` by `n` grid with no equal
    neighbours, modulo 1 000 000 007 (values of `m` outside 1..4 are treated as 5).
  - `sum_subseq_widths(nums)` and `sum_subseq_widths_exhaustive(nums)`: sum of
    max minus min over all non-empty subsequences, modulo 1 000 000 007.

Invalid input (an empty list where one element is needed, an index out of
range, a malformed number) raises `ValueError` or `IndexError`.

## Examples

```python
from algoset.text import remove_duplicates
from algoset.arrays import h_index
from algoset.arithmetic import smallest_good_base
from algoset.counting import color_the_grid

remove_duplicates("abbaca")      # "ca"
h_index([3, 0, 6, 1, 5])         # 3
smallest_good_base("13")         # "3"
color_the_grid(5, 5)             # 580986
```

`game_of_life` changes the board it is given:

```python
from algoset.graphs import game_of_life

board = [[1, 1], [1, 0]]
game_of_life(board)
board                            # [[1, 1], [1, 1]]
```

`FooBar` is meant to be shared by two threads:

```python
import threading
from algoset.alternation import FooBar

out = []
fb = FooBar(3)
t1 = threading.Thread(target=fb.foo, args=(lambda: out.append("foo"),))
t2 = threading.Thread(target=fb.bar, args=(lambda: out.append("bar"),))
t1.start(); t2.start(); t1.join(); t2.join()
"".join(out)                     # "foobarfoobarfoobar"
```