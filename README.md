# algobox

Classic algorithms and data structures in plain Python, with no
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

| Module | Contents |
| --- | --- |
| `algobox.sorting` | `merge_sort`, `bubble_sort`, `selection_sort`, and `counting_sort` / `radix_sort` for non-negative integers; each returns a new list |
| `algobox.arrays` | `trapped_water`, `two_sum`, `subsets_with_dup`, `number_complement`, `factorial` |
| `algobox.linked` | `ListNode`, `from_values`, `to_list`, `reverse_list`, `reverse_list_recursive`, and `LinkedList` with `push_front`, `append`, `find`, `delete_at`, `remove`, `middle`, `reverse` |
| `algobox.trees` | `TreeNode`, `preorder` |
| `algobox.patterns` | `hollow_butterfly`, `string_report`, and the `algobox-patterns` command |
| `algobox.currency` | `Currency`, `parse_currency`, `convert`, and the `algobox-currency` command |
| `algobox.traversal` | `bfs`, `dfs`, `adjacency_rows`, `topological_sort`, `kahn_topological_sort`, `can_visit_all_rooms`, `Employee`, `employee_importance`, `find_judge`, `time_to_inform` |
| `algobox.cycles` | `has_cycle_directed`, `has_cycle_directed_kahn`, `has_cycle_undirected`, `has_cycle_undirected_bfs`, `can_finish`, `find_order`, `EulerKind`, `euler_kind`, `eventual_safe_nodes` |
| `algobox.components` | `strongly_connected_count`, `is_bipartite`, `possible_bipartition` |
| `algobox.grid_search` | `flood_fill`, `num_islands`, `max_area_of_island`, `capture_surrounded`, `num_enclaves`, `closed_islands`, `color_border`, `find_paths` |
| `algobox.grid_distance` | `nearest_zero`, `max_distance_from_land`, `oranges_rotting`, `shortest_path_binary_matrix` |
| `algobox.shortest_paths` | `dijkstra`, `dijkstra_matrix`, `bellman_ford`, `has_negative_cycle`, `floyd_warshall`, `unit_distances`, `spfa`, `dag_shortest_paths`, `network_delay_time`, `cheapest_price`, `find_the_city`, `NegativeCycleError` |
| `algobox.disjoint_set` | `DisjointSet` (`add`, `find`, `union`, `connected`, `count`) and `has_cycle`, `find_circle_num`, `find_redundant_connection`, `remove_stones`, `make_connected`, `equations_possible`, `accounts_merge` |
| `algobox.spanning_tree` | `Edge`, `kruskal`, `prim_matrix`, `mst_weight_kruskal`, `mst_weight_prim` |

Graphs are adjacency lists indexed by vertex number from 0; weighted
adjacency lists hold `(to, weight)` pairs. Unreachable vertices get the
distance `math.inf`. Grids are lists of rows, and the grid functions return
new grids instead of changing their argument.

## Examples

```python
from algobox.sorting import merge_sort
from algobox.traversal import bfs
from algobox.shortest_paths import dijkstra
from algobox.disjoint_set import DisjointSet

print(merge_sort([12, 11, 13, 5, 6, 7]))   # [5, 6, 7, 11, 12, 13]

print(bfs([[1, 2], [3], [3], []]))         # [0, 1, 2, 3]

print(dijkstra([[(1, 4), (2, 1)], [], [(1, 2)]], 0))  # [0, 3, 1]

sets = DisjointSet(range(4))
sets.union(0, 1)
print(sets.connected(0, 1), sets.count)    # True 3
```

## Command-line tools

`algobox-patterns` prints a hollow butterfly of a given size, or reports on
two strings (their lengths, their concatenation, and the two with their
first letters swapped):

```
algobox-patterns butterfly 4
algobox-patterns strings hello world
```

`algobox-currency` converts between dollar (`a`), rupees (`b`), euro (`c`)
and pound (`d`) at fixed rates. Given an amount and two currencies it
converts once; with no arguments it asks for them interactively:

```
algobox-currency 10 a b
algobox-currency
```

## What is not included

The package offers no stack or queue container of its own; Python's `list`
and `collections.deque` serve for those.