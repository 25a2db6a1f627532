# algobox

A library of classic algorithms written in plain Python, using only the
standard library.

## Installation

From a checkout of the project:

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `algobox.arrays`: problems on integer sequences: `two_sum`,
  `two_sum_sorted`, `max_area`, `three_sum`, `three_sum_closest`, `four_sum`,
  `remove_duplicates`, `next_permutation`, `trap`, `max_subarray`,
  `can_jump`, `merge_intervals`, `plus_one`, `merge_sorted`,
  `single_number`, `majority_element`, `rotate`, `min_subarray_len`,
  `contains_duplicate`, `missing_number`, `find_duplicate`, `intersection`,
  `find_right_interval`, `fair_candy_swap` and `sort_array` (merge sort).
- `algobox.strings`: text algorithms: `longest_palindromic_substring`,
  `my_atoi` (clamped to the 32-bit signed range), `is_match` (patterns with
  `.` and `*`), `longest_common_prefix`, `is_valid_parentheses`,
  `multiply_strings`, `length_of_last_word`, `add_binary`, `simplify_path`,
  `is_alphanumeric_palindrome`, `word_break`, `is_anagram`,
  `reverse_string`, `longest_palindrome_length`, `add_strings`,
  `reverse_only_letters`, `defang_ip_address`, `is_pangram` and
  `sort_vowels`.
- `algobox.numbers`: integer routines: `reverse_integer`,
  `is_palindrome_number`, `int_to_roman`, `roman_to_int`, `divide`,
  `my_pow`, `trailing_zeroes`, `is_happy`, `is_power_of_two`,
  `diff_ways_to_compute`, `can_win_nim`, `bitwise_complement` and
  `count_triples`.
- `algobox.searching`: binary-search variants: `binary_search`,
  `search_insert`, `search_range`, `search_rotated`,
  `search_rotated_with_duplicates`, `find_min_rotated`,
  `find_min_rotated_with_duplicates`, `find_peak_element`,
  `peak_index_in_mountain`, `find_median_sorted_arrays`, `int_sqrt`,
  `search_matrix`, `search_sorted_matrix`, `min_eating_speed`,
  `find_kth_positive`, `max_distance`, and `find_in_mountain_array` with its
  read-only `MountainArray` (`get(index)` and `len()`).
- `algobox.matrices`: grid algorithms: `rotate_matrix`, `spiral_order`,
  `generate_spiral_matrix`, `word_exists`, `minimum_total`,
  `maximal_square`, `diagonal_sum` and `find_rotation`.
- `algobox.combinatorics`: backtracking enumerations:
  `generate_parenthesis`, `combination_sum`, `permute` and `subsets`.
- `algobox.linked_lists`: the `ListNode` type, `build_list` and
  `list_values` for converting to and from Python lists, and
  `add_two_numbers`, `swap_pairs`, `delete_duplicates`,
  `delete_all_duplicates`, `partition`, `has_cycle`, `reorder_list`,
  `insertion_sort_list` and `sort_list`.
- `algobox.trees`: the `TreeNode` type, `build_tree` and `tree_values`
  (level order, `None` marking a missing child), and `num_trees`,
  `is_valid_bst`, `recover_tree`, `is_same_tree`, `max_depth`,
  `has_path_sum` and `count_nodes`.
- `algobox.snapshot`: `SnapshotArray`, an integer array of fixed length,
  initially all zeros, whose values can be read back as they were at any
  earlier snapshot.

## Examples

```python
from algobox.arrays import two_sum, merge_intervals
from algobox.strings import is_match
from algobox.numbers import int_to_roman
from algobox.linked_lists import build_list, list_values, add_two_numbers
from algobox.trees import build_tree, max_depth
from algobox.snapshot import SnapshotArray

two_sum([2, 7, 11, 15], 9)                        # [0, 1]
merge_intervals([[1, 3], [2, 6], [8, 10]])        # [[1, 6], [8, 10]]
is_match("aab", "c*a*b")                          # True
int_to_roman(1994)                                # "MCMXCIV"

total = add_two_numbers(build_list([2, 4, 3]), build_list([5, 6, 4]))
list_values(total)                                # [7, 0, 8]

max_depth(build_tree([3, 9, 20, None, None, 15, 7]))  # 3

arr = SnapshotArray(3)
arr.set(0, 5)
snap_id = arr.snap()                              # 0
arr.set(0, 6)
arr.get(0, snap_id)                               # 5
```

## Behaviour worth knowing

- Some functions change their argument in place and return `None`:
  `next_permutation`, `merge_sorted`, `rotate`, `reverse_string`,
  `rotate_matrix`, `reorder_list` and `recover_tree`. `remove_duplicates`
  rewrites the front of its list and returns the count of distinct values.
  The linked-list functions relink the nodes they are given.
- Invalid input is reported with exceptions: for example `max_subarray`,
  `majority_element` and `minimum_total` raise `ValueError` on empty input,
  `roman_to_int` on a character that is not a Roman digit, `recover_tree`
  when no pair of nodes is out of order, and `divide` raises
  `ZeroDivisionError` for a zero divisor. `SnapshotArray` raises
  `IndexError` for an index outside the array.
- `reverse_integer`, `divide` and `my_atoi` follow 32-bit signed integer
  limits.

## What it does not do

algobox is a library only: it has no command-line program, and it keeps
nothing on disk. Every function works on values held in memory.