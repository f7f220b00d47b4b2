"""Occurrence Counter - value frequencies over a singly linked list."""

from __future__ import annotations

from pytoolbox.errors import InvalidArgument
from pytoolbox.nodes import SingleNode


def count_occurrences(head: SingleNode) -> dict[int, int]:
    """
    Count how often each value appears in the list starting at ``head``.

    Keys iterate in the order their value is first met during the walk::

        3 -> 8 -> 3 -> 9 -> 3   gives   {3: 3, 8: 1, 9: 1}

    A new dict is returned each call; the list is not modified.

    Raises:
        InvalidArgument: if ``head`` is None.
    """
    if head is None:
        raise InvalidArgument("Head cannot be None.")

    occurrences: dict[int, int] = {}
    current: SingleNode | None = head
    while current is not None:
        occurrences[current.value] = occurrences.get(current.value, 0) + 1
        current = current.next
    return occurrences
