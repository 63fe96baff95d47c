"""Stack and queue structures: animal shelter, two-stack queue, min stack, plates."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(eq=False)
class Animal:
    """An animal kept in the shelter; ``order`` is its arrival stamp."""

    name: str = ""
    order: int = field(default=0, init=False)


@dataclass(eq=False)
class Dog(Animal):
    """A dog."""


@dataclass(eq=False)
class Cat(Animal):
    """A cat."""


class AnimalShelter:
    """A first-in, first-out shelter holding dogs and cats."""

    def __init__(self) -> None:
        self._timestamp = 0
        self._dogs: deque[Dog] = deque()
        self._cats: deque[Cat] = deque()

    def enqueue(self, animal: Animal) -> None:
        """Admit ``animal``, stamping it with its arrival order."""
        if isinstance(animal, Dog):
            queue: deque = self._dogs
        elif isinstance(animal, Cat):
            queue = self._cats
        else:
            raise TypeError("the shelter only takes dogs and cats")
        self._timestamp += 1
        animal.order = self._timestamp
        queue.append(animal)

    def dequeue_any(self) -> Optional[Animal]:
        """Hand out the animal that arrived first, or None if the shelter is empty."""
        if not self._dogs:
            return self.dequeue_cat()
        if not self._cats:
            return self.dequeue_dog()
        if self._dogs[0].order < self._cats[0].order:
            return self._dogs.popleft()
        return self._cats.popleft()

    def dequeue_dog(self) -> Optional[Dog]:
        """Hand out the oldest dog, or None if there is none."""
        return self._dogs.popleft() if self._dogs else None

    def dequeue_cat(self) -> Optional[Cat]:
        """Hand out the oldest cat, or None if there is none."""
        return self._cats.popleft() if self._cats else None


class TwoStackQueue:
    """A queue built from two stacks."""

    def __init__(self) -> None:
        self._incoming: list[Any] = []
        self._outgoing: list[Any] = []

    def _shift(self) -> None:
        if not self._outgoing:
            while self._incoming:
                self._outgoing.append(self._incoming.pop())

    def push(self, item: Any) -> None:
        """Add ``item`` at the back of the queue."""
        self._incoming.append(item)

    def pop(self) -> Any:
        """Remove and return the item at the front of the queue."""
        self._shift()
        if not self._outgoing:
            raise IndexError("pop from an empty queue")
        return self._outgoing.pop()

    def front(self) -> Any:
        """Return the item at the front of the queue without removing it."""
        self._shift()
        if not self._outgoing:
            raise IndexError("front of an empty queue")
        return self._outgoing[-1]

    def __len__(self) -> int:
        return len(self._incoming) + len(self._outgoing)


def sort_stack(stack: list) -> None:
    """Sort ``stack`` in place so that the smallest item is on top.

    The end of the list is the top. Only one extra stack is used.
    """
    ordered: list = []  # largest item on top
    while stack:
        item = stack.pop()
        while ordered and ordered[-1] > item:
            stack.append(ordered.pop())
        ordered.append(item)
    while ordered:
        stack.append(ordered.pop())


class MinStack:
    """A stack that reports its minimum in constant time."""

    def __init__(self) -> None:
        self._items: list[tuple[Any, Any]] = []

    def push(self, value: Any) -> None:
        """Push ``value``."""
        current = value if not self._items or value < self._items[-1][1] else self._items[-1][1]
        self._items.append((value, current))

    def pop(self) -> Any:
        """Remove and return the top value."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.pop()[0]

    def top(self) -> Any:
        """Return the top value."""
        if not self._items:
            raise IndexError("top of an empty stack")
        return self._items[-1][0]

    def min(self) -> Any:
        """Return the smallest value on the stack."""
        if not self._items:
            raise IndexError("min of an empty stack")
        return self._items[-1][1]


class SetOfStacks:
    """A stack made of sub-stacks, each holding at most ``threshold`` items."""

    def __init__(self, threshold: int) -> None:
        if threshold < 1:
            raise ValueError("threshold must be at least 1")
        self._threshold = threshold
        self._stacks: list[list[Any]] = [[]]

    def push(self, value: Any) -> None:
        """Push ``value``, starting a new sub-stack when the top one is full."""
        if len(self._stacks[-1]) >= self._threshold:
            self._stacks.append([])
        self._stacks[-1].append(value)

    def pop(self) -> Any:
        """Remove and return the top value."""
        if not self._stacks[-1]:
            raise IndexError("pop from an empty stack")
        value = self._stacks[-1].pop()
        if not self._stacks[-1] and len(self._stacks) > 1:
            self._stacks.pop()
        return value

    def top(self) -> Any:
        """Return the top value."""
        if not self._stacks[-1]:
            raise IndexError("top of an empty stack")
        return self._stacks[-1][-1]