"""Singly linked list node type and list edits."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(eq=False)
class ListNode:
    """A singly linked list node; nodes compare by identity."""

    val: int = 0
    next: ListNode | None = None


def _nodes(head: ListNode | None) -> Iterator[ListNode]:
    node = head
    while node is not None:
        yield node
        node = node.next


def build_list(values: Iterable[int]) -> ListNode | None:
    """Build a linked list holding values in order; an empty input gives None."""
    head = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def list_values(head: ListNode | None) -> list[int]:
    """Return the values of a linked list in order."""
    return [node.val for node in _nodes(head)]


def remove_nth_from_end(head: ListNode | None, n: int) -> ListNode | None:
    """Unlink the n-th node from the end (1-based) and return the new head."""
    if head is None:
        return None
    length = sum(1 for _ in _nodes(head))
    if not 1 <= n <= length:
        raise ValueError(f"n={n} is out of range for a list of {length} nodes")
    if n == length:
        return head.next
    prev = head
    for _ in range(length - n - 1):
        prev = prev.next
    prev.next = prev.next.next
    return head