"""String checks."""

from __future__ import annotations

from collections import Counter

__all__ = ["is_anagram", "is_palindrome", "is_valid_parentheses", "wifi_range"]

_PAIRS = {")": "(", "]": "[", "}": "{"}


def is_anagram(s: str, t: str) -> bool:
    """Tell whether t is a rearrangement of s."""
    return len(s) == len(t) and Counter(s) == Counter(t)


def is_palindrome(s: str) -> bool:
    """Tell whether s reads the same both ways, ignoring case and non-alphanumerics."""
    cleaned = [c.lower() for c in s if c.isascii() and c.isalnum()]
    return cleaned == cleaned[::-1]


def is_valid_parentheses(s: str) -> bool:
    """Tell whether every bracket in s is closed in the right order."""
    stack: list[str] = []
    for c in s:
        if c in "([{":
            stack.append(c)
        elif c in _PAIRS:
            if not stack or stack.pop() != _PAIRS[c]:
                return False
    return not stack


def wifi_range(s: str, x: int) -> bool:
    """Tell whether routers at the '1' positions of s, each reaching x rooms, cover every room."""
    positions = [i for i, c in enumerate(s) if c == "1"]
    if not positions:
        return False
    if any(b - a > 2 * x + 1 for a, b in zip(positions, positions[1:])):
        return False
    if positions[0] - x > 0:
        return False
    return positions[-1] + x >= len(s) - 1