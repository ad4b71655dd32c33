# algodrills

A small library of classic algorithm exercises. Each one is a plain Python
function (plus one small class) that takes ordinary Python values and returns
its answer. Invalid input raises `ValueError`.

The package has no dependencies beyond the standard library. Install it with
pip; the `test` extra adds pytest for running the test suite.

## Modules

### `algodrills.textproc`

- `letter_frequency(word)`: a list of 26 counts, one per letter `a`..`z`.
  Any character other than a lowercase ASCII letter raises `ValueError`.
- `is_balanced(line)`: whether the round and square brackets in a line pair up
  correctly; other characters are ignored.
- `balance_report(lines)`: `"yes"` or `"no"` for each line, stopping at a line
  that holds only `"."`. Trailing newlines are stripped first.
- `LineEditor(text)`: a line with a cursor that starts at the end. Methods
  `move_left()`, `move_right()`, `insert(char)` (exactly one character) and
  `backspace()`; `str(editor)` gives the current text. Moves and deletions at
  either end do nothing.
- `apply_editor_commands(text, commands)`: runs commands `"L"`, `"D"`, `"B"`
  and `"P x"` on a `LineEditor` and returns the resulting text.

### `algodrills.search`

- `count_zero_sum_triples(levels)`: number of index triples summing to zero.
- `closest_to_zero_pair_sum(values)`: the sum of two distinct elements closest
  to zero (needs at least two values).
- `count_subarrays_with_sum(values, target)`: contiguous runs adding up to a
  positive `target`.
- `max_sushi_variety(belt, window, coupon)`: most distinct kinds in `window`
  consecutive plates of a circular belt, counting the coupon kind too.
- `min_difference_at_least(values, threshold)`: smallest difference between two
  elements that is at least `threshold`.
- `max_snack_length(snacks, nephews)`: longest equal piece length that gives
  every nephew a piece, or 0.
- `max_min_piece(cut_points, length, cuts)` and
  `cake_cut_answers(cut_points, length, queries)`: largest possible smallest
  piece of a cake cut a given number of times at the given points.
- `max_min_group_score(scores, groups)`: largest minimum group total when the
  scores are split into consecutive groups.
- `apply_range_updates(heights, updates)`: applies `(first, last, delta)`
  updates, 1-based and inclusive, via a prefix-sum of deltas.

### `algodrills.backtracking`

- `operator_extremes(numbers, operator_counts)`: `(largest, smallest)` result
  of placing the given counts of `+`, `-`, `*`, `/` between the numbers,
  evaluated left to right with division truncating toward zero.
- `permutations_of_range(n, m)`, `combinations_of_range(n, m)`: sequences from
  `1..n`, as tuples in lexicographic order.
- `permutations_of_values(values, m)`: arrangements of the sorted values.
- `min_chicken_distance(grid, keep)`: smallest total Manhattan distance from
  houses (1) to the nearest kept restaurant (2).
- `zero_sum_expressions(n)`: expressions over `1..n` joined by `" "`, `"+"` or
  `"-"` that evaluate to zero, where a space glues digits together.
- `count_n_queens(n)`: number of N-Queens solutions.

### `algodrills.bruteforce`

- `clap_count(n)`: claps when counting `1..n`, one per digit 3, 6 or 9.
- `median_filter(matrix)`: medians of every 3x3 window.
- `count_filtered_at_least(matrix, threshold)`: filtered values `>= threshold`.
- `solve_linear_system(a, b, c, d, e, f)`: integer solution of
  `ax + by = c`, `dx + ey = f` by Cramer's rule.
- `count_roman_sums(n)`: distinct totals from exactly `n` of 1, 5, 10, 50.
- `clock_number(digits)`: smallest number read around a circular card.
- `clock_number_rank(digits)`: rank of a four-digit card's clock number among
  all clock numbers, counting from 1.

### `algodrills.dp`

- `max_sticker_score(top, bottom)`: best total from a two-row sticker sheet
  with no two chosen stickers sharing an edge.
- `count_grid_paths(rows, cols, waypoint=0)`: right/down paths across a grid,
  through cell `waypoint` (row-major, 1-based) when it is not 0.
- `count_campus_walks(minutes)`: walks that start and end at building 0,
  modulo `MODULUS` (1,000,000,007).

### `algodrills.simulation`

- `transform_rows(rows)`: replaces each row by `(value, count)` pairs sorted
  by count then value (zeros dropped, at most `MAX_WIDTH` entries), padded
  with zeros to a common width.
- `array_operation_time(row, col, target, grid)`: seconds until the 1-based
  cell holds `target`, or -1 if that has not happened after `TIME_LIMIT`
  seconds.

## Examples

```python
from algodrills.textproc import is_balanced, apply_editor_commands
from algodrills.backtracking import count_n_queens
from algodrills.search import count_subarrays_with_sum

is_balanced("So when I die (the [first] I will see in (heaven) is a score list).")
# True

apply_editor_commands("abcd", ["P x", "L", "P y"])
# 'abcdyx'

count_n_queens(8)
# 92

count_subarrays_with_sum([1, 1, 1, 1], 2)
# 3
```

## What it does not do

This is a library only. It has no command-line program and does not read
problem input from standard input or write answers to standard output; parse
your input into Python values and call the functions directly.