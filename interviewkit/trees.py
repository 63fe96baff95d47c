"""Binary tree algorithms: subtrees, ancestors, levels, paths, BST checks."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Any, Iterator, Optional, Sequence


@dataclass(eq=False)
class TreeNode:
    """A binary tree node; children passed in get their parent link set."""

    key: Any
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None
    parent: Optional["TreeNode"] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        for child in (self.left, self.right):
            if child is not None:
                child.parent = self


def _inorder(root: Optional[TreeNode]) -> Iterator[TreeNode]:
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node
        node = node.right


def _preorder(root: Optional[TreeNode]) -> Iterator[TreeNode]:
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        yield node
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def match_trees(first: Optional[TreeNode], second: Optional[TreeNode]) -> bool:
    """Tell whether two trees have the same shape and the same keys."""
    if first is None or second is None:
        return first is None and second is None
    if first.key != second.key:
        return False
    return match_trees(first.left, second.left) and match_trees(first.right, second.right)


def is_subtree(tree: Optional[TreeNode], candidate: Optional[TreeNode]) -> bool:
    """Tell whether some node of ``tree`` roots a copy of ``candidate``.

    An empty candidate is a subtree of every tree.
    """
    if candidate is None:
        return True
    return any(
        node.key == candidate.key and match_trees(node, candidate)
        for node in _preorder(tree)
    )


def node_depth(node: TreeNode) -> int:
    """Number of parent links between ``node`` and its root."""
    depth = 0
    while node.parent is not None:
        node = node.parent
        depth += 1
    return depth


def common_ancestor_by_parent(p: Optional[TreeNode], q: Optional[TreeNode]) -> Optional[TreeNode]:
    """First common ancestor of two nodes, following parent links.

    Returns None when the nodes are not in the same tree.
    """
    if p is None or q is None:
        return None
    p_depth, q_depth = node_depth(p), node_depth(q)
    for _ in range(p_depth - q_depth):
        p = p.parent
    for _ in range(q_depth - p_depth):
        q = q.parent
    while p is not q:
        p, q = p.parent, q.parent
        if p is None or q is None:
            return None
    return p


def covers(node: Optional[TreeNode], key: Any) -> bool:
    """Tell whether ``key`` occurs in the tree rooted at ``node``."""
    return any(n.key == key for n in _preorder(node))


def common_ancestor(root: Optional[TreeNode], p: Any, q: Any) -> Optional[TreeNode]:
    """First common ancestor of the nodes keyed ``p`` and ``q``, without parent links.

    Returns None when either key is missing from the tree.
    """
    if not covers(root, p) or not covers(root, q):
        return None
    node = root
    while True:
        if node.key == p or node.key == q:
            return node
        p_left = covers(node.left, p)
        q_left = covers(node.left, q)
        if p_left != q_left:
            return node
        node = node.left if p_left else node.right


def lists_of_depth(root: Optional[TreeNode]) -> list[list[TreeNode]]:
    """The nodes of each level of the tree, top level first, left to right."""
    levels: list[list[TreeNode]] = []
    current = [root] if root is not None else []
    while current:
        levels.append(current)
        current = [
            child
            for node in current
            for child in (node.left, node.right)
            if child is not None
        ]
    return levels


def minimal_tree(values: Sequence[Any]) -> Optional[TreeNode]:
    """Build a binary search tree of minimal height from sorted ``values``."""

    def build(low: int, high: int) -> Optional[TreeNode]:
        if low > high:
            return None
        mid = (low + high) // 2
        return TreeNode(values[mid], build(low, mid - 1), build(mid + 1, high))

    return build(0, len(values) - 1)


def paths_with_sum(root: Optional[TreeNode], target: Any) -> list[tuple[TreeNode, TreeNode]]:
    """Every downward path whose keys add up to ``target``, as (start, end) pairs.

    Pairs come in pre-order of their end node; for one end node, higher starts first.
    """
    found: list[tuple[TreeNode, TreeNode]] = []

    def visit(node: Optional[TreeNode], open_paths: list[tuple[TreeNode, Any]]) -> None:
        if node is None:
            return
        extended = [(start, total + node.key) for start, total in open_paths]
        extended.append((node, node.key))
        found.extend((start, node) for start, total in extended if total == target)
        visit(node.left, extended)
        visit(node.right, extended)

    visit(root, [])
    return found


def leftmost(node: Optional[TreeNode]) -> Optional[TreeNode]:
    """The leftmost node below ``node`` (its smallest key in a BST)."""
    if node is None:
        return None
    while node.left is not None:
        node = node.left
    return node


def successor(node: Optional[TreeNode]) -> Optional[TreeNode]:
    """The in-order successor of ``node``, using parent links; None for the last."""
    if node is None:
        return None
    if node.right is not None:
        return leftmost(node.right)
    child, parent = node, node.parent
    while parent is not None and parent.right is child:
        child, parent = parent, parent.parent
    return parent


def is_valid_bst_inorder(root: Optional[TreeNode]) -> bool:
    """Check the BST property by collecting the in-order keys and testing their order."""
    keys = [node.key for node in _inorder(root)]
    return all(a <= b for a, b in zip(keys, keys[1:]))


def is_valid_bst(root: Optional[TreeNode]) -> bool:
    """Check the BST property in one in-order walk, keeping only the previous key."""
    previous = None
    started = False
    for node in _inorder(root):
        if started and node.key < previous:
            return False
        previous, started = node.key, True
    return True


def is_valid_bst_range(root: Optional[TreeNode], low: Any = None, high: Any = None) -> bool:
    """Check that left <= node <= right holds everywhere and keys lie in [low, high].

    A bound of None means unbounded.
    """
    stack: list[tuple[Optional[TreeNode], Any, Any]] = [(root, low, high)]
    while stack:
        node, lo, hi = stack.pop()
        if node is None:
            continue
        if (lo is not None and node.key < lo) or (hi is not None and node.key > hi):
            return False
        stack.append((node.left, lo, node.key))
        stack.append((node.right, node.key, hi))
    return True


@dataclass(eq=False)
class _SizedNode:
    key: Any
    size: int = 1
    left: Optional["_SizedNode"] = None
    right: Optional["_SizedNode"] = None


def _size(node: Optional[_SizedNode]) -> int:
    return node.size if node is not None else 0


class RandomBST:
    """A binary search tree that can return a uniformly random node."""

    def __init__(self) -> None:
        self._root: Optional[_SizedNode] = None

    def insert(self, key: Any) -> None:
        """Insert ``key``; equal keys go to the left."""
        if self._root is None:
            self._root = _SizedNode(key)
            return
        node = self._root
        while True:
            node.size += 1
            side = "left" if key <= node.key else "right"
            child = getattr(node, side)
            if child is None:
                setattr(node, side, _SizedNode(key))
                return
            node = child

    def ith_node(self, i: int) -> _SizedNode:
        """The node at position ``i`` (from 0) of the in-order walk."""
        if not 0 <= i < len(self):
            raise IndexError("node index out of range")
        node = self._root
        while True:
            left_size = _size(node.left)
            if i < left_size:
                node = node.left
            elif i == left_size:
                return node
            else:
                i -= left_size + 1
                node = node.right

    def random_node(self, rng: Optional[random.Random] = None) -> _SizedNode:
        """A node chosen uniformly at random, drawing from ``rng`` if given."""
        if self._root is None:
            raise IndexError("random node of an empty tree")
        source = rng if rng is not None else random
        return self.ith_node(source.randrange(len(self)))

    def __iter__(self) -> Iterator[Any]:
        stack: list[_SizedNode] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.key
            node = node.right

    def __len__(self) -> int:
        return _size(self._root)