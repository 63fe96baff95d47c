"""Recursive search problems: parentheses, boolean parsing, change, queens, fills."""

from __future__ import annotations

from enum import Enum
from functools import cache
from typing import Any, Iterable, Optional, Sequence

_OPERANDS = "01"
_OPERATORS = "&|^"


def balanced_parens(n: int) -> list[str]:
    """Every properly matched string of ``n`` pairs of parentheses.

    Strings that open earlier come first.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    found: list[str] = []

    def build(opened: int, closed: int, prefix: str) -> None:
        if closed == n:
            found.append(prefix)
            return
        if opened < n:
            build(opened + 1, closed, prefix + "(")
        if opened > closed:
            build(opened, closed + 1, prefix + ")")

    build(0, 0, "")
    return found


def count_evaluations(expr: str, result: bool) -> int:
    """Number of ways to parenthesize ``expr`` so that it evaluates to ``result``.

    ``expr`` alternates the operands 0 and 1 with the operators & | ^;
    whitespace is ignored. An empty expression has no ways.
    """
    expr = "".join(expr.split())
    if not expr:
        return 0
    if len(expr) % 2 == 0:
        raise ValueError("expression must alternate operands and operators")
    for position, symbol in enumerate(expr):
        allowed = _OPERANDS if position % 2 == 0 else _OPERATORS
        if symbol not in allowed:
            raise ValueError(f"unexpected symbol {symbol!r} at position {position}")

    @cache
    def ways(low: int, high: int) -> tuple[int, int]:
        """(false count, true count) for expr[low:high + 1]."""
        if low == high:
            return (0, 1) if expr[low] == "1" else (1, 0)
        false_total = true_total = 0
        for split in range(low + 1, high, 2):
            left_false, left_true = ways(low, split - 1)
            right_false, right_true = ways(split + 1, high)
            total = (left_false + left_true) * (right_false + right_true)
            operator = expr[split]
            if operator == "&":
                true_count = left_true * right_true
            elif operator == "|":
                true_count = total - left_false * right_false
            else:
                true_count = left_true * right_false + left_false * right_true
            true_total += true_count
            false_total += total - true_count
        return false_total, true_total

    return ways(0, len(expr) - 1)[1 if result else 0]


def _denominations(amount: int, denominations: Iterable[int]) -> tuple[int, ...]:
    if amount < 0:
        raise ValueError("amount must not be negative")
    denoms = tuple(denominations)
    if any(d <= 0 for d in denoms):
        raise ValueError("denominations must be positive")
    return denoms


def change_ways(amount: int, denominations: Iterable[int] = (25, 10, 5, 1)) -> int:
    """Number of ways to make ``amount`` from unlimited coins of ``denominations``."""
    denoms = _denominations(amount, denominations)
    if not denoms:
        return 1 if amount == 0 else 0
    last = len(denoms) - 1

    def ways(remaining: int, index: int) -> int:
        coin = denoms[index]
        if index == last:
            return 1 if remaining % coin == 0 else 0
        return sum(
            ways(remaining - count * coin, index + 1)
            for count in range(remaining // coin + 1)
        )

    return ways(amount, 0)


def change_ways_memo(amount: int, denominations: Iterable[int] = (25, 10, 5, 1)) -> int:
    """Same as :func:`change_ways`, remembering results for each sub-amount."""
    denoms = _denominations(amount, denominations)
    if not denoms:
        return 1 if amount == 0 else 0
    last = len(denoms) - 1

    @cache
    def ways(remaining: int, index: int) -> int:
        coin = denoms[index]
        if index == last:
            return 1 if remaining % coin == 0 else 0
        return sum(
            ways(remaining - count * coin, index + 1)
            for count in range(remaining // coin + 1)
        )

    return ways(amount, 0)


def is_valid_placement(row: int, col: int, columns: Sequence[int]) -> bool:
    """Whether a queen fits at (``row``, ``col``) given queens in earlier rows.

    ``columns[r]`` is the column of the queen in row ``r``, for ``r < row``.
    """
    for placed_row, placed_col in enumerate(columns[:row]):
        if placed_col == col:
            return False
        if abs(row - placed_row) == abs(col - placed_col):
            return False
    return True


def place_queens(grid_size: int = 8) -> list[list[int]]:
    """Every way to place ``grid_size`` non-attacking queens on a square board.

    Each solution lists the queen's column for each row.
    """
    if grid_size < 0:
        raise ValueError("grid size must not be negative")
    solutions: list[list[int]] = []
    columns: list[int] = []

    def place(row: int) -> None:
        if row == grid_size:
            solutions.append(list(columns))
            return
        for col in range(grid_size):
            if is_valid_placement(row, col, columns):
                columns.append(col)
                place(row + 1)
                columns.pop()

    place(0)
    return solutions


def magic_index(values: Sequence[int]) -> Optional[int]:
    """An index ``i`` with ``values[i] == i`` in sorted distinct ``values``, or None."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = (low + high) // 2
        if values[mid] == mid:
            return mid
        if values[mid] > mid:
            high = mid - 1
        else:
            low = mid + 1
    return None


class Color(Enum):
    """Colors of a screen pixel."""

    RED = "red"
    GREEN = "green"
    BLUE = "blue"


def paint_fill(screen: list[list[Any]], row: int, col: int, new_color: Any) -> None:
    """Recolor, in place, the region of equal color around (``row``, ``col``).

    The region spreads up, down, left and right. A start outside the screen
    changes nothing.
    """
    if not 0 <= row < len(screen) or not 0 <= col < len(screen[row]):
        return
    original = screen[row][col]
    if original == new_color:
        return
    pending = [(row, col)]
    while pending:
        r, c = pending.pop()
        if not 0 <= r < len(screen) or not 0 <= c < len(screen[r]):
            continue
        if screen[r][c] != original:
            continue
        screen[r][c] = new_color
        pending.extend(((r + 1, c), (r, c + 1), (r - 1, c), (r, c - 1)))