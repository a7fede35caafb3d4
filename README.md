# algosolve

Classic algorithm and data-structure solutions in plain Python, with no
third-party dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

**Binary trees** (`algosolve.tree`, with `TreeNode`)
- `min_depth` and `compare_tree` (in `tree`)
- `max_depth` and `is_balanced` (in `tree_checks`)
- `is_symmetric` (in `symmetric`)
- Traversals in recursive and iterative form: `preorder_*`, `inorder_*`, `postorder_*` and `levelorder_*` (in `traversal`)
- Rebuilding a tree from its traversals: `build_from_preorder_inorder` and `build_from_inorder_postorder` (in `reconstruct`)
- Root-to-leaf paths: `has_path_sum`, `path_sums`, `leaf_path_sums` and `all_paths` (in `tree_paths`)
- `lowest_common_ancestor` and `lowest_common_ancestor_by_path` (in `ancestor`)
- `connect_next_right`, which works on `Node` (in `next_pointer`)
- `flatten_to_list` and `right_chain` (in `flatten`)
- Binary `serialize` and `deserialize` (in `codec`)

**Binary search trees**
- `search_bst`, `insert_bst`, `delete_bst` and `bst_min_node` (in `bst`)
- `sorted_array_to_bst` and `BSTIterator` (in `bst_tools`)
- `is_valid_bst` (in `validate`)
- `KthLargest`, `bst_value_span` and `bst_min_gap` (in `kth_largest`)
- `contains_nearby_almost_duplicate` (in `nearby_duplicate`)

**Stacks and monotonic stacks**
- `is_valid_parentheses` and `longest_valid_parentheses` (in `parentheses`)
- `daily_temperatures`, `next_greater_elements`, `sum_subarray_mins`, `sum_subarray_ranges` and `trap_rain_water` (in `monotonic_stack`)
- `largest_rectangle` and `maximal_rectangle` (in `histogram`)
- `MinStack` (in `min_stack`); `Stack` and `Queue` (in `containers`)

**Heaps, graphs and caches**
- `dijkstra`, `bounded_dijkstra` and `with_return_roads` (in `shortest_path`)
- `FlightMap` and `find_cheapest_price` (in `flights`)
- `MedianFinder` (in `median_finder`)
- `TaskManager` and `Task` (in `task_manager`)
- `LRUCache` (in `lru`)

**Arrays, strings and dynamic programming**
- `max_area`, `is_monotonic`, `largest_perimeter`, `median_sorted_arrays`, `two_sum` and `monotone_increasing_digits` (in `arrays`)
- `repeated_substring_pattern`, `longest_palindrome`, `length_of_longest_substring`, `min_changes`, `apply_backspaces` and `backspace_compare` (in `text`)
- `coin_change` (in `coin_change`)

## Examples

```python
from algosolve.tree import TreeNode
from algosolve.traversal import levelorder_iterative
from algosolve.monotonic_stack import daily_temperatures
from algosolve.lru import LRUCache

root = TreeNode(1, right=TreeNode(2, left=TreeNode(3)))
levelorder_iterative(root)          # [1, 2, 3]

daily_temperatures([30, 40, 50, 60])  # [1, 1, 1, 0]

cache = LRUCache(2)
cache.put(1, "a")
cache.put(2, "b")
cache.put(3, "c")
1 in cache                          # False
```

```python
from algosolve.shortest_path import bounded_dijkstra

edges = [[0, 1, 100], [1, 2, 100], [1, 3, 600], [2, 3, 200], [2, 0, 100]]
bounded_dijkstra(3, edges, 0, 3, 1)   # 700
```