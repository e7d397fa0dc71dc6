# algodrills

A collection of classic algorithm exercises: searching, arrays, strings,
trees, linked lists, stacks and queues, combinations and a handful of
short contest problems. Each one is a small, plain Python function or
class that you can call, read and test. The package has no dependencies
beyond the standard library.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Modules

| Module | What it holds |
| --- | --- |
| `algodrills.searching` | `binary_search`, `search_matrix_rows`, `search_matrix`, `find_min_rotated`, `can_finish`, `min_eating_speed` |
| `algodrills.text` | `is_anagram`, `is_palindrome`, `is_valid_parentheses`, `wifi_range` |
| `algodrills.arrays` | `max_profit`, `has_duplicate`, `two_sum`, `two_sum_sorted`, `max_area`, `daily_temperatures`, `largest_rectangle_area`, `largest_rectangle_area_brute`, `max_smaller_difference`, `min_passes`, `place_at_index`, `min_operations`, `greater_tower_sum` |
| `algodrills.combinations` | `find_ways`, `generate_parentheses` |
| `algodrills.trees` | `TreeNode`, `height`, `is_balanced`, `max_depth`, `invert_tree`, `is_same_tree` |
| `algodrills.linked_list` | `ListNode`, `reverse_list` |
| `algodrills.stacks_queues` | `MinStack`, `ArrayQueue`, `StackQueue`, `QueueStack`, `reverse_first_k`, `eval_rpn` |
| `algodrills.contests` | `binary_string_winner`, `blackboard_winner`, `mex_counts`, `extreme_marks`, `tournament_verdict`, `main` |

## Examples

```python
from algodrills.searching import binary_search
from algodrills.text import is_valid_parentheses
from algodrills.combinations import find_ways, generate_parentheses
from algodrills.stacks_queues import MinStack, eval_rpn

binary_search([-1, 0, 3, 5, 9, 12], 9)      # 4
is_valid_parentheses("()[]{}")              # True
generate_parentheses(2)                     # ['(())', '()()']
find_ways([2, 1, 2], 2)                     # [[1, 2], [2, 2]]
eval_rpn(["2", "1", "+", "3", "*"])         # 9

stack = MinStack()
for value in (5, 2, 7):
    stack.push(value)
stack.get_min()                             # 2
```

Binary trees are built from `TreeNode` values:

```python
from algodrills.trees import TreeNode, max_depth, is_balanced

root = TreeNode(1, TreeNode(2), TreeNode(3, TreeNode(4)))
max_depth(root)     # 3
is_balanced(root)   # True
```

A few behaviours worth knowing:

- `ArrayQueue`, `StackQueue` and `QueueStack` return `-1` from `pop()`
  when they are empty; `MinStack` raises `IndexError` instead.
- `eval_rpn` works on integers and its division truncates toward zero.
- `place_at_index` and `reverse_list` change their argument in place;
  `invert_tree` builds a new tree and leaves the input untouched.
- `is_palindrome` keeps only ASCII letters and digits and ignores case.
- Functions that need a non-empty input raise `ValueError` when given an
  empty one.

## Command line

The contest problems can be run from a terminal with the
`algodrills-contests` command. It takes the name of a problem, reads its
input from standard input and writes the answers to standard output:

```
algodrills-contests mex-count < cases.txt
```

The problems and the input each one expects (all values separated by
whitespace):

| Problem | Input | Output per case |
| --- | --- | --- |
| `binary-string-battle` | case count, then per case `n k s` | `Alice` or `Bob` |
| `blackboard` | case count, then one `n` per case | `Alice` or `Bob` |
| `mex-count` | case count, then per case `n` and `n` values | `n + 1` counts, space separated |
| `prefix-suffix` | case count, then per case `n` and `n` values | a string of `0` and `1` |
| `tournament` | case count, then per case `n j k` and `n` strengths | `YES` or `NO` |
| `coin-distribution` | `N`, then `N` values, then `r` | prompts, then every distinct combination of size `r`, one per line |

On malformed or incomplete input the command prints a message starting
with `algodrills:` to standard error and exits with status 1.