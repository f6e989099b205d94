# contestkit

A collection of solutions to competitive-programming problems, each exposed
as an ordinary Python function. The functions take already-parsed Python
values and return the answer; nothing reads from standard input or prints.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

- `contestkit.beecrowd`: `josephus_primes`, `solve_symbol_grid`,
  `knapsack_pyramid`, `star_trek`, `minimum_spanning_cost`, `days_to_goal`,
  `max_grouped_value`.
- `contestkit.codeforces_early`: `count_deputies`, `semifinal_candidates`,
  `plant_crops`, `combination`, `count_groups`, `cut_ribbon`,
  `lightest_fence_start`, `max_hamburgers`.
- `contestkit.codeforces_middle`: `max_sold`, `stone_queries`,
  `find_reversal`, `stabilize_towers`, `palindrome_double`, `has_triangle`.
- `contestkit.graphs`: the `Graph` adjacency-matrix class (`add_edge`,
  `format`, `matrix`), `count_rooms` and `two_color`.
- `contestkit.leetcode_early`: `letter_combinations`, `find_peak_element`,
  `rob`, `find_kth_largest`, `combination_sum3`, `min_patches`,
  `increasing_triplet`, `guess_number`, `find_maximized_capital`,
  `check_subarray_sum`, `judge_square_sum`, `replace_words`,
  `min_eating_speed`, `min_increment_for_unique`, `subarrays_div_by_k`.
- `contestkit.leetcode_late`: `oranges_rotting`, `relative_sort_array`,
  `tribonacci`, `max_split_score`, `nearest_exit`, `min_moves_to_seat`,
  `successful_pairs`, the `SmallestInfiniteSet` class (`pop_smallest`,
  `add_back`), `smallest_number`, `total_cost`, `max_subsequence_score`,
  `punishment_number`.

## Conventions

- Invalid input (mismatched lengths, out-of-range indices, negative sizes)
  raises `ValueError` (`Graph.add_edge` raises `IndexError`).
- Where a problem has no answer, the function returns `None`: for example
  `cut_ribbon` when the ribbon cannot be cut exactly,
  `minimum_spanning_cost` when the graph is disconnected, `find_reversal`
  when no single reversal sorts the values, and `two_color` when no
  two-colouring exists.
- Grids are given as sequences of strings or of lists; edges as tuples.

## Examples

```python
from contestkit.codeforces_early import combination, cut_ribbon
from contestkit.leetcode_early import letter_combinations
from contestkit.leetcode_late import SmallestInfiniteSet
from contestkit.graphs import Graph

combination(5, 2)                 # 10
cut_ribbon(5, [5, 3, 2])          # 2
letter_combinations("23")         # ['ad', 'ae', 'af', 'bd', ...]

numbers = SmallestInfiniteSet()
numbers.pop_smallest()            # 1
numbers.add_back(1)

graph = Graph(4)
graph.add_edge(0, 1)
print(graph.format())
```

## What it does not do

The package is a library only. It has no command-line program: there is
nothing that reads a judge's input format from standard input and prints the
answer. Parse the input yourself and call the function.