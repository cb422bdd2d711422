# algosuite

A library of small, self-contained algorithms on plain Python data:
lists, strings, integers, singly linked lists and binary trees. It has no
dependencies outside the standard library and needs Python 3.10 or later.

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

- `algosuite.arrays`: `two_sum`, `max_area`, `four_sum`, `remove_duplicates`,
  `remove_element`, `plus_one`, `remove_duplicates_at_most_twice`,
  `merge_sorted_into`, `longest_consecutive`, `candy`, `single_number`,
  `majority_element`, `rotate_in_place`, `contains_nearby_duplicate`
- `algosuite.strings`: `longest_palindrome`, `int_to_roman`, `roman_to_int`,
  `length_of_last_word`, `add_binary`, `reverse_words`, `word_pattern`,
  `can_construct`, `longest_diverse_string`
- `algosuite.integers`: `is_palindrome`, `my_pow`, `climb_stairs`,
  `hamming_weight`, `is_happy`, `maximum_swap`
- `algosuite.searching`: `find_median_sorted_arrays`, `search_rotated`,
  `search_range`, `find_min_rotated`
- `algosuite.dynamic`: `min_path_sum`, `minimum_total`, `max_profit`,
  `max_profit_multiple`
- `algosuite.linkedlist`: `ListNode` plus `add_two_numbers`,
  `remove_nth_from_end`, `merge_two_lists`, `rotate_right`,
  `delete_duplicated_values`, `partition`, `has_cycle`, `sort_list`
- `algosuite.trees`: `TreeNode` plus `is_same_tree`, `max_depth`,
  `invert_tree`, `average_of_levels`

## Examples

```python
from algosuite.arrays import two_sum, rotate_in_place
from algosuite.searching import search_range
from algosuite.strings import int_to_roman, roman_to_int
from algosuite.linkedlist import ListNode, add_two_numbers
from algosuite.trees import TreeNode, max_depth

two_sum([2, 7, 11, 15], 9)          # (0, 1); None when no pair matches
search_range([5, 7, 7, 8, 8, 10], 8)  # (3, 4); (-1, -1) when absent
int_to_roman(1994)                  # "MCMXCIV"
roman_to_int("LVIII")               # 58

nums = [1, 2, 3, 4, 5]
rotate_in_place(nums, 2)            # returns None
nums                                # [4, 5, 1, 2, 3]

total = add_two_numbers(ListNode.from_values([2, 4, 3]),
                        ListNode.from_values([5, 6, 4]))
total.to_list()                     # [7, 0, 8]

root = TreeNode.from_level_order([3, 9, 20, None, None, 15, 7])
max_depth(root)                     # 3
```

## Notes on behaviour

- Linked lists are built with `ListNode.from_values` (an empty input gives
  `None`) and read back with `ListNode.to_list`. Trees use
  `TreeNode.from_level_order` and `TreeNode.to_level_order`, where `None`
  marks a missing child.
- Some functions change their argument in place: `remove_duplicates`,
  `remove_element`, `plus_one`, `remove_duplicates_at_most_twice`,
  `merge_sorted_into`, `rotate_in_place`, and on nodes
  `remove_nth_from_end`, `merge_two_lists`, `rotate_right`,
  `delete_duplicated_values`, `sort_list` and `invert_tree`.
  `partition` and `add_two_numbers` build new lists.
- Inputs that have no answer raise `ValueError`, for instance an empty list
  given to `remove_duplicates`, `find_min_rotated` or `min_path_sum`, an
  out-of-range `n` in `remove_nth_from_end`, a number outside 0 to 3999 in
  `int_to_roman`, an unknown symbol in `roman_to_int`, or text without words
  in `length_of_last_word` and `reverse_words`.
- `majority_element` returns 0 when no value occurs more than half the time.

## What it does not do

This is a library only: it has no command-line tool, and it does not read or
write files.