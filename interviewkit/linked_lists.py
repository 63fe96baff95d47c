"""Singly linked list nodes and classic algorithms over them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional


@dataclass(eq=False)
class Node:
    """A node of a singly linked list; equality is by identity."""

    data: Any
    next: Optional["Node"] = None

    def __iter__(self) -> Iterator["Node"]:
        node: Optional[Node] = self
        while node is not None:
            yield node
            node = node.next


def _nodes(head: Optional[Node]) -> Iterator[Node]:
    return iter(head) if head is not None else iter(())


def from_iterable(values: Iterable[Any]) -> Optional[Node]:
    """Build a list holding ``values`` in order and return its head."""
    head: Optional[Node] = None
    for value in reversed(list(values)):
        head = Node(value, head)
    return head


def to_list(head: Optional[Node]) -> list:
    """Return the values of the list starting at ``head``."""
    return [node.data for node in _nodes(head)]


def add_front(head: Optional[Node], data: Any) -> Node:
    """Put a new node holding ``data`` in front of ``head``; return it."""
    return Node(data, head)


def delete_node(node: Node) -> None:
    """Remove ``node`` from its list given access to that node only.

    The node must not be the last one in its list.
    """
    following = node.next
    if following is None:
        raise ValueError("cannot delete the last node of a list")
    node.data = following.data
    node.next = following.next


def find_intersection(first: Optional[Node], second: Optional[Node]) -> Optional[Node]:
    """Return the first node of ``second`` that is also a node of ``first``."""
    seen = {id(node) for node in _nodes(first)}
    return next((node for node in _nodes(second) if id(node) in seen), None)


def kth_to_last(head: Optional[Node], k: int) -> Node:
    """Return the node ``k`` places before the last one (``k == 0`` is the last)."""
    if k < 0:
        raise ValueError("k must not be negative")
    runner = head
    for _ in range(k):
        if runner is None:
            break
        runner = runner.next
    if runner is None:
        raise IndexError("list is shorter than k + 1 nodes")
    trailer = head
    while runner.next is not None:
        runner = runner.next
        trailer = trailer.next
    return trailer


def find_loop(head: Optional[Node]) -> Optional[Node]:
    """Return the node where a loop begins, or None if the list ends."""
    seen: set[int] = set()
    node = head
    while node is not None:
        if id(node) in seen:
            return node
        seen.add(id(node))
        node = node.next
    return None


def is_palindrome(head: Optional[Node]) -> bool:
    """Tell whether the values read the same in both directions."""
    values = to_list(head)
    return values == values[::-1]


def partition(head: Optional[Node], pivot: Any) -> Optional[Node]:
    """Move every node after the head whose value is <= ``pivot`` to the front.

    Returns the new head. Afterwards every value <= ``pivot`` precedes every
    value greater than it.
    """
    new_head = head
    prev: Optional[Node] = None
    curr = head
    while curr is not None:
        if prev is not None and curr.data <= pivot:
            prev.next = curr.next
            curr.next = new_head
            new_head = curr
            curr = prev
        prev = curr
        curr = curr.next
    return new_head


def remove_duplicates(head: Optional[Node]) -> None:
    """Unlink, in place, every node whose value appeared earlier in the list."""
    seen: set = set()
    prev: Optional[Node] = None
    curr = head
    while curr is not None:
        if curr.data in seen:
            prev.next = curr.next
        else:
            seen.add(curr.data)
            prev = curr
        curr = curr.next


def sum_lists(first: Optional[Node], second: Optional[Node]) -> Optional[Node]:
    """Add two numbers stored as digit lists, ones digit first."""
    digits = []
    carry = 0
    a, b = first, second
    while a is not None or b is not None:
        total = carry
        if a is not None:
            total += a.data
            a = a.next
        if b is not None:
            total += b.data
            b = b.next
        carry, digit = divmod(total, 10)
        digits.append(digit)
    if carry:
        digits.append(carry)
    return from_iterable(digits)