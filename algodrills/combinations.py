"""Combination and bracket generators built by backtracking."""

from __future__ import annotations

from typing import Iterator, Sequence

__all__ = ["find_ways", "generate_parentheses"]


def _unique_combinations(values: list[int], r: int, start: int, chosen: list[int]) -> Iterator[list[int]]:
    if len(chosen) == r:
        yield list(chosen)
        return
    previous = None
    for i in range(start, len(values)):
        if i > start and values[i] == previous:
            continue
        previous = values[i]
        chosen.append(values[i])
        yield from _unique_combinations(values, r, i + 1, chosen)
        chosen.pop()


def find_ways(arr: Sequence[int], r: int) -> list[list[int]]:
    """Return every distinct sorted combination of r values from arr, in lexicographic order."""
    return list(_unique_combinations(sorted(arr), r, 0, []))


def _brackets(prefix: str, opened: int, closed: int, n: int) -> Iterator[str]:
    if len(prefix) == 2 * n:
        yield prefix
        return
    if opened < n:
        yield from _brackets(prefix + "(", opened + 1, closed, n)
    if closed < opened:
        yield from _brackets(prefix + ")", opened, closed + 1, n)


def generate_parentheses(n: int) -> list[str]:
    """Return every well-formed string of n bracket pairs, openings tried first."""
    return list(_brackets("", 0, 0, n))