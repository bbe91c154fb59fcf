# dsakit

A compact collection of classic data structures and algorithms in plain Python,
with no third-party dependencies.

## Installation

```
pip install dsakit
```

For running the test suite:

```
pip install "dsakit[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `dsakit.sorting` | `quick_sort`, `quick_sort_middle_pivot`, `radix_sort` (non-negative integers), `heap_sort`, `insertion_sort`, `merge_sort`, `bubble_sort`, `selection_sort`, `merge_sorted`, `merge_k_sorted` |
| `dsakit.searching` | `has_pair_with_sum`, `find_positions`, `ternary_search`, `is_subset_sum` |
| `dsakit.numbers` | `is_armstrong`, `binary_to_decimal`, `decimal_to_binary`, `is_prime`, `countdown` |
| `dsakit.dynamic` | `matrix_chain_order`, `minimal_badness` |
| `dsakit.recursion` | `combination`, `josephus`, `count_digit_one`, `combinations`, `factorial`, `fibonacci`, `fibonacci_series`, `keypad_combinations`, `taylor_exp`, `hanoi_moves` |
| `dsakit.backtracking` | `solve_n_queens`, `rat_in_a_maze`, `solve_sudoku` |
| `dsakit.huffman` | `HuffmanNode`, `build_tree`, `huffman_codes` |
| `dsakit.hashing` | `ChainedHashTable` (separate chaining), `QuadraticProbingMap` (open addressing) |
| `dsakit.graph` | `Graph`, `bfs_order`, `dfs_order`, `topological_order`, `is_connected`, `has_eulerian_path`, `count_islands` |
| `dsakit.matching` | `BipartiteGraph` (Hopcroft–Karp maximum matching) and the `dsakit-matching` command |
| `dsakit.floyd` | `floyd_warshall`, `format_distances`, `INF` |
| `dsakit.coloring` | `color_graph` |
| `dsakit.avl` | `AVLNode`, `AVLTree` |
| `dsakit.bst` | `TreeNode`, `build_level_order`, `search`, `search_iterative`, `insert`, `height`, `level_order`, `is_symmetric` |
| `dsakit.doubly` | `DoublyLinkedList` |
| `dsakit.circular` | `CircularList` |
| `dsakit.linkedqueue` | `LinkedQueue` |
| `dsakit.singly` | `ListNode`, `LinkedList`, `from_values`, `to_values`, `push`, `append`, `insert_sorted`, `reversed_values`, `find_position`, `node_sum`, `reverse` |
| `dsakit.list_ops` | `rotate`, `merge_sorted_lists`, `is_palindrome`, `intersection` |
| `dsakit.cycles` | `has_cycle` |
| `dsakit.reordering` | `swap_nodes`, `swap_pair_values`, `swap_pairs`, `k_reverse`, `remove_nth_from_end`, `nth_from_end`, `reorder` |

The sorting functions return a new sorted list and leave their input alone.
Linked-list helpers work on chains of `ListNode` objects; `from_values` and
`to_values` convert between those chains and ordinary Python lists.

## A few examples

```python
from dsakit.searching import is_subset_sum
from dsakit.recursion import josephus
from dsakit.singly import from_values, to_values
from dsakit.reordering import k_reverse
from dsakit.hashing import QuadraticProbingMap

is_subset_sum([3, 34, 4, 12, 5, 2], 9)   # True
josephus(14, 2)                          # 13

head = from_values([1, 2, 3, 4, 5])
to_values(k_reverse(head, 2))            # [2, 1, 4, 3, 5]

table = QuadraticProbingMap(11)
table.insert(10, 100)
table.get(10)                            # 100
```

## Command line

`dsakit-matching` reads a bipartite graph and prints the size of its maximum
matching. The input is the number of left vertices, the number of right
vertices and the number of edges, followed by one `u v` pair per edge
(vertices are numbered from 1). It reads standard input, or a file named as
its only argument:

```
printf '3 3 3\n1 1\n2 1\n3 2\n' | dsakit-matching
```

It prints `Maximum matching is 2` for the input above.

## Not included

There is no minimum spanning tree routine; for weighted graphs the package
offers only all-pairs shortest paths (`dsakit.floyd`). Apart from
`dsakit-matching`, everything is used as a library; there are no other
commands.