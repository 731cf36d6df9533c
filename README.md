# algobox

A library of classic algorithms and small data structures, written in plain
Python with no runtime dependencies. Every routine is an ordinary function or
class that takes Python values (lists, strings, ints, tree nodes) and returns
Python values. Bad input raises an exception (`ValueError`, `IndexError` or
`KeyError`); the routines do not return error codes.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `algobox.trees`

`TreeNode(val=0, left=None, right=None)` is a dataclass; nodes compare by
identity.

- `inorder_traversal`, `preorder_traversal`, `postorder_traversal` return lists of values.
- `right_side_view` returns the rightmost value on each level; `largest_values` the largest.
- `build_tree_from_preorder_inorder(preorder, inorder)` and
  `build_tree_from_inorder_postorder(inorder, postorder)` rebuild a tree. They
  raise `ValueError` when a value is missing from `inorder`.
- `has_path_sum(root, target_sum)` checks root-to-leaf sums.
- `path_sum_count(root, target_sum)` counts downward paths with the given sum.
- `flatten(root)` turns the tree, in place, into a right-leaning chain in preorder.
- `lowest_common_ancestor(root, p, q)` finds the lowest common ancestor by node identity.
- `average_of_subtree(root)` counts the nodes equal to the average of their
  subtree. The average is rounded toward zero.

### `algobox.bst`

- `is_valid_bst`, `search_bst`, `insert_into_bst` (equal values go right), and
  `delete_node` (a node with two children takes the value of its in-order
  successor).
- `kth_smallest(root, k)` counts from 1 and raises `ValueError` when `k` is out of range.
- `bst_lowest_common_ancestor(root, p, q)` finds the lowest common ancestor by value.
- `find_mode(root)` returns the most frequent values in ascending order. It
  raises `ValueError` on an empty tree.
- `bst_from_preorder(preorder)` builds a search tree from its preorder traversal.
- `balance_bst(root)` returns a height-balanced tree that holds the same values.

### `algobox.backtracking`

- `letter_combinations(digits)` lists the letter strings a phone keypad
  sequence can spell. It raises `ValueError` on a non-digit.
- `generate_parenthesis(n)` lists the balanced strings of `n` pairs.
- `solve_n_queens(n)` returns the boards as lists of `"Q"`/`"."` rows.
  `total_n_queens(n)` counts them.
- `word_exists(board, word)` checks whether `word` can be traced through
  adjacent grid cells without reusing a cell.
- `palindrome_partitions(s)` lists every split of `s` into palindromes.

### `algobox.sudoku`

A board is nine rows of nine one-character strings, with `"."` for an empty cell.

- `is_valid_sudoku(board)` reports whether any row, column or 3×3 box repeats
  a digit.
- `solve_sudoku(board)` fills the board in place. It raises `ValueError` if the
  puzzle has no solution, and the board is then left unchanged.

Both functions raise `ValueError` if the board is not 9×9.

### `algobox.structures`

- `Trie`: `insert`, `search`, `starts_with`.
- `WordDictionary`: `add_word`, and `search`, in which `"."` matches any one character.
- `MedianFinder`: `add_num`, `find_median`. `find_median` raises `ValueError`
  before any number has been added.
- `HashMap`: `put`, `get` (raises `KeyError` for a missing key), `remove`, and
  support for `in` and `len`.
- `CircularDeque(k)` is a bounded deque with `insert_front`, `insert_last`,
  `delete_front`, `delete_last`, `get_front`, `get_rear`, `is_empty`,
  `is_full` and `len`. It raises `IndexError` when it is full or empty.
- `SeatManager(n)`: `reserve` returns the lowest free seat and raises
  `IndexError` when none is left. `unreserve` raises `ValueError` for a seat
  that is not reserved.

### `algobox.arrays`

- Search: `three_sum`, `search_range`, `search_insert`, `find_duplicate`.
- Counting: `majority_element` (values occurring more than n // 3 times),
  `subarray_sum`, `num_identical_pairs`, `subset_xor_sum`.
- `smallest_range` returns the narrowest range that covers every sorted list.
- Sorting and ordering:
  - `is_monotonic`
  - `sort_array`, a merge sort
  - `sort_by_bits`, by set-bit count and then by value
  - `sort_array_by_parity`, which puts evens first in their order and then the
    odds in reverse order
- Puzzles and games: `build_array`, `max_product`, `get_last_moment`,
  `get_winner`, `eliminate_maximum`.
- `find_array` recovers an array from its prefix XOR.

### `algobox.strings`

- `longest_valid_parentheses`
- `find_the_difference`
- `is_subsequence`
- `reverse_words`
- `backspace_compare`, in which `"#"` is a backspace
- `remove_subfolders`
- `count_palindromic_subsequence`, which counts distinct length-3 palindromes
- `winner_of_game`
- `shortest_beautiful_substring`

### `algobox.numeric`

- `my_pow(x, n)` computes a power by repeated squaring.
- `spiral_matrix(n)` returns an n×n matrix filled in clockwise spiral order.
- `integer_break(n)` returns the largest product of a split of `n`.
- `num_of_arrays(n, m, k)` returns a count modulo 1 000 000 007.
- `is_reachable_at_time(sx, sy, fx, fy, t)` checks whether the target can be
  reached in exactly `t` king moves.

### `algobox.graphs`

- `sliding_puzzle(board)` returns the fewest moves that solve a 2×3 puzzle, or
  `-1` when it cannot be solved.
- `find_champion(n, edges)` returns the only unbeaten team, or `-1`.
- `shortest_distance_after_queries(n, queries)` adds the one-way roads one at
  a time and reports the shortest distance from 0 to n-1 after each.

## Examples

```python
from algobox.trees import TreeNode, inorder_traversal
from algobox.backtracking import generate_parenthesis, total_n_queens
from algobox.structures import Trie
from algobox.arrays import three_sum

root = TreeNode(2, TreeNode(1), TreeNode(3))
inorder_traversal(root)          # [1, 2, 3]

generate_parenthesis(2)          # ['(())', '()()']
total_n_queens(8)                # 92

trie = Trie()
trie.insert("apple")
trie.search("apple")             # True
trie.starts_with("app")          # True

three_sum([-1, 0, 1, 2, -1, -4]) # [[-1, -1, 2], [-1, 0, 1]]
```

## What it does not do

algobox is a library only. It has no command-line program, and it neither
reads nor stores data. You call its functions from your own code.