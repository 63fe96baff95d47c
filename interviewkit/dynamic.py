"""Recursion and dynamic programming: multiplication, grid paths, boxes, Hanoi, stairs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

Cell = tuple[int, int]


def multiply(a: int, b: int) -> int:
    """Product of two non-negative integers using only shifts and additions."""
    if a < 0 or b < 0:
        raise ValueError("both factors must be non-negative")
    if b > a:
        a, b = b, a
    result = 0
    while b:
        if b & 1:
            result += a
        b >>= 1
        a <<= 1
    return result


def _shape(grid: Sequence[Sequence[bool]]) -> tuple[int, int]:
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    if any(len(row) != cols for row in grid):
        raise ValueError("grid rows must all have the same length")
    return rows, cols


def find_path(grid: Sequence[Sequence[bool]]) -> Optional[list[Cell]]:
    """A path of open cells from the top left to the bottom right, or None.

    Each step goes right or down; a true cell is open. Right is tried first.
    """
    rows, cols = _shape(grid)
    if not rows or not cols:
        return None

    def walk(row: int, col: int) -> Optional[list[Cell]]:
        if row >= rows or col >= cols or not grid[row][col]:
            return None
        if (row, col) == (rows - 1, cols - 1):
            return [(row, col)]
        rest = walk(row, col + 1) or walk(row + 1, col)
        return [(row, col)] + rest if rest else None

    return walk(0, 0)


def find_path_memo(grid: Sequence[Sequence[bool]]) -> Optional[list[Cell]]:
    """Same as :func:`find_path`, remembering dead ends; down is tried first.

    Runs in time proportional to the number of cells.
    """
    rows, cols = _shape(grid)
    if not rows or not cols:
        return None
    failed: set[Cell] = set()
    path: list[Cell] = []

    def walk(row: int, col: int) -> bool:
        if row >= rows or col >= cols or not grid[row][col]:
            return False
        cell = (row, col)
        if cell in failed:
            return False
        if cell == (rows - 1, cols - 1) or walk(row + 1, col) or walk(row, col + 1):
            path.append(cell)
            return True
        failed.add(cell)
        return False

    return path[::-1] if walk(0, 0) else None


@dataclass(frozen=True)
class Box:
    """A box that cannot be rotated."""

    width: int
    height: int
    depth: int

    def fits_on(self, other: "Box") -> bool:
        """Whether this box is strictly smaller than ``other`` in every dimension."""
        return (
            self.width < other.width
            and self.height < other.height
            and self.depth < other.depth
        )


def max_stack_height(boxes: Sequence[Box]) -> int:
    """Height of the tallest stack in which each box is strictly smaller than the one below."""
    ordered = sorted(boxes, key=lambda box: box.height)
    best: list[int] = []
    for index, box in enumerate(ordered):
        below = max(
            (best[j] for j, smaller in enumerate(ordered[:index]) if smaller.fits_on(box)),
            default=0,
        )
        best.append(box.height + below)
    return max(best, default=0)


def hanoi_moves(
    n: int, source: int = 1, buffer: int = 2, destination: int = 3
) -> list[tuple[int, int, int]]:
    """Moves that carry ``n`` discs from ``source`` to ``destination``.

    Each move is (disc, from tower, to tower); disc 1 is the smallest.
    """
    moves: list[tuple[int, int, int]] = []

    def move(count: int, src: int, buf: int, dst: int) -> None:
        if count <= 0:
            return
        move(count - 1, src, dst, buf)
        moves.append((count, src, dst))
        move(count - 1, buf, src, dst)

    move(n, source, buffer, destination)
    return moves


def triple_steps(n: int) -> int:
    """Number of ways to climb ``n`` stairs taking 1, 2 or 3 steps at a time."""
    if n < 0:
        raise ValueError("n must not be negative")
    a, b, c = 1, 1, 2  # ways for 0, 1 and 2 steps
    if n < 3:
        return (a, b, c)[n]
    for _ in range(n - 2):
        a, b, c = b, c, a + b + c
    return c