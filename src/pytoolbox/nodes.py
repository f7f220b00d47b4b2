"""
Node types for singly and doubly linked lists.

A chain of nodes *is* the list: its identity is the head reference. The
library never owns, caches or frees nodes; callers build chains and keep
whatever head/tail handles they need.

All chain walkers here assume acyclic input.
"""

from __future__ import annotations

from typing import Iterable


class SingleNode:
    """Singly linked node holding an integer value."""

    def __init__(self, value: int) -> None:
        self.value = value
        self.next: SingleNode | None = None

    def __repr__(self) -> str:
        return f"SingleNode({self.value})"


class DoubleNode:
    """
    Doubly linked node holding an integer value.

    Adjacent nodes keep ``a.next is b`` if and only if ``b.prev is a``.
    """

    def __init__(self, value: int) -> None:
        self.value = value
        self.next: DoubleNode | None = None
        self.prev: DoubleNode | None = None

    def __repr__(self) -> str:
        return f"DoubleNode({self.value})"


def build_single_chain(values: Iterable[int]) -> SingleNode | None:
    """Link a fresh SingleNode per value and return the head (None if empty)."""
    head: SingleNode | None = None
    tail: SingleNode | None = None
    for value in values:
        node = SingleNode(value)
        if tail is None:
            head = tail = node
        else:
            tail.next = node
            tail = node
    return head


def build_double_chain(
    values: Iterable[int],
) -> tuple[DoubleNode | None, DoubleNode | None]:
    """Link fresh DoubleNodes both ways and return (head, tail)."""
    head: DoubleNode | None = None
    tail: DoubleNode | None = None
    for value in values:
        node = DoubleNode(value)
        if tail is None:
            head = tail = node
        else:
            node.prev = tail
            tail.next = node
            tail = node
    return head, tail


def chain_values(node: SingleNode | DoubleNode | None) -> list[int]:
    """Collect values following ``next`` until the first absent link."""
    result = []
    while node is not None:
        result.append(node.value)
        node = node.next
    return result


def chain_values_backward(node: DoubleNode | None) -> list[int]:
    """Collect values following ``prev`` until the first absent link."""
    result = []
    while node is not None:
        result.append(node.value)
        node = node.prev
    return result
