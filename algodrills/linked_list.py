"""Singly linked list reversal."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

__all__ = ["ListNode", "reverse_list"]


@dataclass
class ListNode:
    """A node of a singly linked list."""

    val: int
    next: Optional[ListNode] = None


def reverse_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse the list in place and return its new head."""
    prev = None
    curr = head
    while curr is not None:
        curr.next, prev, curr = prev, curr, curr.next
    return prev