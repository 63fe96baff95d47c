"""Permutations of strings and power sets of sequences."""

from __future__ import annotations

from typing import Any, Sequence


def permutations_iterative(text: str) -> list[str]:
    """All permutations of ``text``, built by inserting one character at a time."""
    current = [text[:1]]
    for char in text[1:]:
        current = [
            perm[:pos] + char + perm[pos:]
            for perm in current
            for pos in range(len(perm) + 1)
        ]
    return current


def permutations_recursive(text: str) -> list[str]:
    """All permutations of ``text``, choosing each next character in turn."""
    found: list[str] = []

    def build(remaining: str, prefix: str) -> None:
        if not remaining:
            found.append(prefix)
            return
        for index, char in enumerate(remaining):
            build(remaining[:index] + remaining[index + 1:], prefix + char)

    build(text, "")
    return found


def unique_permutations(text: str) -> list[str]:
    """All distinct permutations of ``text``, each listed once."""
    current = [text[:1]]
    for char in text[1:]:
        following = []
        for perm in current:
            # Inserting only up to the first equal character generates each
            # result from exactly one shorter permutation.
            first = perm.find(char)
            limit = len(perm) if first < 0 else first
            following.extend(perm[:pos] + char + perm[pos:] for pos in range(limit + 1))
        current = following
    return current


def power_set_bitmask(items: Sequence[Any]) -> list[list[Any]]:
    """All subsets of ``items``; subset ``i`` holds the items at the set bits of ``i``."""
    return [
        [item for bit, item in enumerate(items) if mask >> bit & 1]
        for mask in range(1 << len(items))
    ]


def power_set(items: Sequence[Any]) -> list[list[Any]]:
    """All subsets of ``items``, doubling the collection with each item."""
    subsets: list[list[Any]] = [[]]
    for item in items:
        subsets = [
            variant
            for subset in subsets
            for variant in (subset, subset + [item])
        ]
    return subsets