# algodrills

Small, self-contained algorithm drills written as plain functions and a few
classes. Every function takes ordinary Python values and returns a result;
none of them prints anything or reads input. The package uses only the
standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `algodrills.arrays`: scans over number sequences.
  - `can_afford_exact`, `grade_split`, `count_peaks`, `count_surges`
  - `count_overstocked_rows`, `longest_rising_streak`, `max_profit`
  - `shortest_session_span`
- `algodrills.patterns`: text patterns returned as lists of lines.
  - `diagonal_pattern` returns the lines.
  - `zigzag_pyramid` and `seating_grid` return the lines together with a count.
- `algodrills.strings`: string drills.
  - `is_balanced_frequency`, `count_jewels`, `vowel_names`, `count_one_groups`
  - `reverse_words`, `find_anagrams`, `rabin_karp`, `letter_combinations`
- `algodrills.linked`: singly linked lists made of `Node` cells
  (`value` and `next`).
  - `build`, `build_with_cycle`, `values`
  - `remove_sorted_duplicates`, `zigzag_order`, `remove_cycle`
  - `move_negatives_front`, `sort_colors`, `split_parts`, `sort_values`, `second_half`
- `algodrills.listmath`: arithmetic and splicing on linked lists.
  - `reverse`, `double_number`, `add_numbers`, `remove_value`
  - `merge_sorted`, `reverse_between`
- `algodrills.stacks`: stack-based drills and two stack classes.
  - `reverse_string`, `postfix_to_prefix`, `is_valid_brackets`, `eval_rpn`
  - `remove_outer_parentheses`, `next_greater_then_smaller`
  - `MinStack` (`push`, `pop`, `minimum`) and
    `FrequencyStack` (`push`, `pop`, `top_frequency`); on an empty stack,
    `pop` and the queries return `None`.
- `algodrills.queues`: queue-based drills.
  - `ticket_time`, `reveal_order`, `trapped_water`, `students_unable`
  - `max_jump_score`, `senate_winner`, `first_unique_stream`, `reverse_queue`
- `algodrills.sorting`: drills that sort first.
  - `has_triplet_sum`, `largest_number`, `closest_triplet_sum`, `sort_by_frequency`
  - `rank_labels`, `find_error_pair`, `reorganize`, `max_token_score`
  - `can_win_all`, `sorted_squares`, `distinct_pair_count`, `prefix_ranks`

## Notes on behaviour

- Most functions in `algodrills.linked` and `algodrills.listmath` relink or
  rewrite the nodes they are given and return the new head. `values` raises
  `ValueError` when it meets a cycle; `remove_cycle` cuts one and returns
  `True`, or returns `False` when there was none.
- `double_number` treats the list as digits with the most significant first;
  `add_numbers` treats both lists as digits with the least significant first.
- Input that the drills cannot work with, such as an empty price list for
  `max_profit`, a non-keypad digit for `letter_combinations` or a position
  outside the list for `reverse_between`, raises `ValueError`.

## Example

```python
from algodrills.strings import find_anagrams, letter_combinations
from algodrills.linked import build, values
from algodrills.listmath import add_numbers
from algodrills.stacks import MinStack

find_anagrams("cbaebabacd", "abc")        # [0, 6]
letter_combinations("23")[:3]             # ['ad', 'ae', 'af']
values(add_numbers(build([2, 4, 3]), build([5, 6, 4])))   # [7, 0, 8]

stack = MinStack()
stack.push(5)
stack.push(2)
stack.minimum()                           # 2
```

## What it does not do

There is no command-line program: nothing in the package reads from standard
input or prints results. Call the functions from your own code and format
their return values as you need.