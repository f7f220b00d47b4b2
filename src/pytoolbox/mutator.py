"""
List Mutator - node surgery on linked lists.

None of these operations know about a list container. A caller holding
head or tail handles must update them itself after removing or inserting
at an end of the list.
"""

from __future__ import annotations

from pytoolbox.errors import InvalidArgument, check_int
from pytoolbox.nodes import DoubleNode, SingleNode


def remove_node(node: DoubleNode) -> None:
    """
    Unlink ``node`` from a doubly linked list.

    The neighbours are joined to each other. ``node`` keeps its own stale
    ``prev``/``next`` references and must not be traversed from afterwards.
    If ``node`` was the head or tail, the caller's handle still points at it.

    Raises:
        InvalidArgument: if ``node`` is None.
    """
    if node is None:
        raise InvalidArgument("Node cannot be None.")

    if node.prev is not None:
        node.prev.next = node.next

    if node.next is not None:
        node.next.prev = node.prev


def insert_node(node: SingleNode, new_node: SingleNode) -> None:
    """
    Insert ``new_node`` directly after ``node`` in a singly linked list.

    Raises:
        InvalidArgument: if either node is None.
    """
    if node is None or new_node is None:
        raise InvalidArgument("Node and new_node cannot be None.")

    # Capture the remainder before node.next is overwritten.
    new_node.next = node.next
    node.next = new_node


def find_nth_element(head: SingleNode, n: int) -> SingleNode | None:
    """
    Return the node ``n`` steps after ``head`` (0-based).

    Returns None when the list ends before ``n`` steps; running off the end
    is an expected outcome, not an error.

    Raises:
        InvalidArgument: if ``head`` is None or ``n`` is not a
            non-negative int.
    """
    if head is None:
        raise InvalidArgument("Head cannot be None.")
    check_int("n", n)
    if n < 0:
        raise InvalidArgument(f"n cannot be negative, got {n}.")

    current: SingleNode | None = head
    for _ in range(n):
        if current is None:
            return None
        current = current.next
    return current
