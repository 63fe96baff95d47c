# interviewkit

A library of classic interview-style data structures and algorithms in
plain Python, with no dependencies outside the standard library.

## Installation

    pip install .

To install the test requirements as well:

    pip install ".[test]"

## Modules

### `interviewkit.linked_lists`

`Node` is a singly linked list node (`data`, `next`); iterating over a node
yields it and every node after it. Nodes compare by identity.

- `from_iterable(values)` builds a list and returns its head; `to_list(head)`
  returns the values; `add_front(head, data)` returns a new head.
- `delete_node(node)` removes a node given only that node (raises
  `ValueError` for the last node).
- `find_intersection(first, second)` returns the first shared node, or `None`.
- `kth_to_last(head, k)` returns the node `k` places before the last
  (`k == 0` is the last); raises `IndexError` if the list is too short.
- `find_loop(head)` returns the node where a loop begins, or `None`.
- `is_palindrome(head)`, `partition(head, pivot)` (returns the new head),
  `remove_duplicates(head)` (in place) and `sum_lists(first, second)`
  (digits stored ones-first).

### `interviewkit.stacks_queues`

- `AnimalShelter` with `Dog` and `Cat` (subclasses of `Animal`):
  `enqueue`, `dequeue_any`, `dequeue_dog`, `dequeue_cat`. Dequeues return
  `None` when nothing suitable is left; enqueuing anything else raises
  `TypeError`.
- `TwoStackQueue`: `push`, `pop`, `front`, `len()`.
- `MinStack`: `push`, `pop`, `top`, `min`, all constant time.
- `SetOfStacks(threshold)`: `push`, `pop`, `top`, starting a new sub-stack
  when the top one is full.
- `sort_stack(stack)` sorts a list in place so the smallest item is on top
  (at the end).

Popping or peeking an empty structure raises `IndexError`.

### `interviewkit.bits`

`get_bit`, `set_bit`, `clear_bit`, `clear_bits_through`, `update_bit`,
`insert_bits(n, m, j, i)`, `pairwise_swap`, `bit_flips(a, b)`,
`next_number(n)`, `longest_sequence_of_ones(n)`, `binary_to_string(num)`
for numbers in [0, 1] (at most 32 digits) and
`draw_line(screen, width, x1, x2, y)` on a packed monochrome `bytearray`.
Invalid arguments raise `ValueError`.

### `interviewkit.trees`

`TreeNode(key, left, right)` sets the parent link of the children it is
given.

- `minimal_tree(values)`, `lists_of_depth(root)`, `match_trees`,
  `is_subtree(tree, candidate)`.
- `node_depth`, `common_ancestor_by_parent(p, q)` (parent links) and
  `common_ancestor(root, p, q)` (by key, using `covers`).
- `leftmost(node)` and `successor(node)` (in-order, via parent links).
- `is_valid_bst_inorder`, `is_valid_bst` and
  `is_valid_bst_range(root, low, high)`.
- `paths_with_sum(root, target)` returns `(start, end)` node pairs of
  downward paths adding up to `target`.
- `RandomBST`: `insert`, `ith_node(i)`, `random_node(rng)`, in-order
  iteration over keys and `len()`.

### `interviewkit.graphs`

- `Package`, `DependencyGraph`, `build_graph(packages, dependencies)`,
  `order_packages(packages)` and `build_order(packages, dependencies)`;
  a dependency cycle raises `ValueError`.
- `GraphNode` and `path_exists(start, end)`.
- `bfs(edges, source)`, `shortest_path(edges, source, dest)` and
  `bidirectional_bfs(neighbours, source, dest)`, where the adjacency list is
  a mapping or a sequence indexed by vertex. The path functions return a
  list of vertices, or `None` when there is no path.

### `interviewkit.recursion`

`balanced_parens(n)`, `count_evaluations(expr, result)` for expressions of
`0`, `1`, `&`, `|`, `^`, `change_ways` and `change_ways_memo`
(default coins 25, 10, 5, 1), `is_valid_placement` and
`place_queens(grid_size=8)`, `magic_index(values)`, and
`paint_fill(screen, row, col, new_color)` with the `Color` enum.

### `interviewkit.combinatorics`

`permutations_iterative`, `permutations_recursive`, `unique_permutations`,
`power_set_bitmask` and `power_set`.

### `interviewkit.dynamic`

`multiply(a, b)` with shifts and additions, `find_path(grid)` and
`find_path_memo(grid)` for a robot moving right or down, `Box` and
`max_stack_height(boxes)`, `hanoi_moves(n)` returning
`(disc, from, to)` moves, and `triple_steps(n)`.

### `interviewkit.cards`

`Rank`, `Suit`, `Card` (ordered by suit, then rank), `create_card(num)`,
`Deck` (`shuffle`, `sort`, `draw`, `add_card`, iteration, `len()`),
`Player` and `Dealer(deck_size, rng)` with `deal(players, num_cards)`.

### `interviewkit.circular_array`

`CircularArray(capacity)`: `append`, `len()` and iteration from oldest to
newest; appending to a full array drops the oldest item.

## Example

```python
from interviewkit.linked_lists import from_iterable, sum_lists, to_list
from interviewkit.graphs import build_order

# 617 + 295, digits stored least significant first
total = sum_lists(from_iterable([7, 1, 6]), from_iterable([5, 9, 2]))
print(to_list(total))  # [2, 1, 9]

print(build_order(
    ["a", "b", "c", "d", "e", "f"],
    [("a", "d"), ("f", "b"), ("b", "d"), ("f", "a"), ("d", "c")],
))  # ['e', 'f', 'b', 'a', 'd', 'c']
```

## What it does not do

This is a library only: it has no command-line program, and nothing
prints results. Call the functions and use what they return.

## Running the tests

    pytest