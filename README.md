# drills

A collection of classic algorithm exercises written as plain Python functions
and small classes. It depends only on the standard library.

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

- `drills.trees`: the `TreeNode` dataclass (nodes compare by identity),
  `build_tree` and `to_level_order` to convert to and from level-order lists
  with `None` for missing children, and the functions `is_same_tree`,
  `is_symmetric`, `zigzag_level_order`, `tree_height`, `is_balanced`,
  `path_sum`, `deepest_leaves_sum`, `pseudo_palindromic_paths`,
  `right_side_view`, `check_tree`, `inorder_traversal` and `tree_to_str`.
  `is_symmetric` raises `ValueError` for an empty tree. `check_tree` raises
  `ValueError` when the root lacks either child.
- `drills.bst`: `kth_smallest` (raises `IndexError` when `k` is out of range),
  `search_bst`, `is_valid_bst`, `convert_bst` (rewrites values in place),
  `lowest_common_ancestor` and `get_target_copy`.
- `drills.linked`: the `ListNode` dataclass, `build_list`, `list_values` and
  `remove_nth_from_end`. The last raises `ValueError` when `n` is out of range.
- `drills.designs`:
  - `UndergroundSystem` records check-ins and check-outs and reports average
    trip times.
  - `CircularQueue(k)` is a FIFO queue bounded to `k` items. `front()` and
    `rear()` return -1 when the queue is empty.
  - `HashMap` maps keys in 0..1,000,000 to integers and returns -1 for absent
    keys.
- `drills.maze`: `solve_maze` finds a path of open (1) cells from the top-left
  to the bottom-right corner, moving down first and then right. It returns the
  path grid, or `None` if no path exists. `format_solution` renders that grid.
- `drills.strings`: `roman_to_int`, `remove_palindrome_sub`,
  `repeated_character`, `length_of_longest_substring`, `can_construct`,
  `first_uniq_char`, `reverse_str`, `reverse_words`,
  `unique_morse_representations` and `valid_utf8`.
- `drills.integers`: `number_of_steps`, `concatenated_binary`,
  `hamming_weight`, `is_power_of_two`, `is_power_of_three`,
  `is_power_of_four`, `add`, `fib` and `mirror_reflection`.
- `drills.arrays`: `max_profit`, `running_sum`, `two_sum_sorted`,
  `max_operations`, `maximum_unique_subarray`, `maximum_score`,
  `number_of_weak_characters`, `find_original_array`, `contains_duplicate`,
  `contains_nearby_duplicate`, `missing_number`, `can_partition`, `trap`,
  `rotate` (in place), `find_length`, `transpose`, `merge_sorted` (in place),
  `sort_array_by_parity`, `bag_of_tokens_score` and `sum_even_after_queries`.

## Examples

```python
from drills.trees import build_tree, zigzag_level_order
from drills.strings import roman_to_int
from drills.arrays import trap

root = build_tree([3, 9, 20, None, None, 15, 7])
zigzag_level_order(root)                     # [[3], [20, 9], [15, 7]]
roman_to_int("MCMXCIV")                      # 1994
trap([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1])   # 6
```

```python
from drills.designs import CircularQueue

queue = CircularQueue(2)
queue.enqueue(1)
queue.enqueue(2)
queue.is_full()   # True
queue.front()     # 1
```

## Command line

The command below solves the built-in 4x4 maze:

```
drills-maze
```

It prints the path as a grid of 1s and 0s. If the maze has no path, it prints
`Solution doesn't exist` instead.

## Limitations

The `drills-maze` command solves only the built-in maze and takes no input of
its own. To solve other mazes, call `solve_maze` from Python.