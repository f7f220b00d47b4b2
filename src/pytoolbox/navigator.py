"""
List Navigator - find the ends of a linked list.

Both walks are O(n) and require an acyclic chain: a cycle makes them loop
forever.
"""

from __future__ import annotations

from pytoolbox.errors import InvalidArgument
from pytoolbox.nodes import DoubleNode, SingleNode


def find_tail(head: SingleNode) -> SingleNode:
    """
    Return the last node reachable from ``head`` via ``next``.

    A single-node list returns ``head`` itself.
    """
    if head is None:
        raise InvalidArgument("Head cannot be None.")

    current = head
    while current.next is not None:
        current = current.next
    return current


def find_head(tail: DoubleNode) -> DoubleNode:
    """Return the first node reachable from ``tail`` via ``prev``."""
    if tail is None:
        raise InvalidArgument("Tail cannot be None.")

    current = tail
    while current.prev is not None:
        current = current.prev
    return current
