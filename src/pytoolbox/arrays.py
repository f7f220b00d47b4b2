"""
Array Editor - in-place edits on fixed-length string arrays.

The array keeps its length N across every edit. ``None`` marks an empty
slot.
"""

from __future__ import annotations

from typing import MutableSequence

from pytoolbox.errors import InvalidArgument, check_int


def _check_bounds(array: MutableSequence[str | None] | None, index: int) -> None:
    """Reject an absent array or an index outside [0, len)."""
    if array is None:
        raise InvalidArgument("Array cannot be None.")
    check_int("Index", index)
    if index < 0 or index >= len(array):
        raise InvalidArgument(
            f"Index {index} out of bounds for array of length {len(array)}."
        )


def remove_element_in_place(array: MutableSequence[str | None], index: int) -> None:
    """
    Remove the element at ``index``, shifting the rest left.

    The trailing slot is cleared to None; the length is unchanged.

    Raises:
        InvalidArgument: if ``array`` is None or ``index`` is outside [0, len).
    """
    _check_bounds(array, index)

    last = len(array) - 1
    for i in range(index, last):
        array[i] = array[i + 1]
    array[last] = None


def add_element_in_place(
    array: MutableSequence[str | None], index: int, value: str | None
) -> None:
    """
    Insert ``value`` at ``index``, shifting the rest right.

    The original last element is evicted; the length is unchanged.

    Raises:
        InvalidArgument: if ``array`` is None or ``index`` is outside [0, len).
    """
    _check_bounds(array, index)

    for i in range(len(array) - 1, index, -1):
        array[i] = array[i - 1]
    array[index] = value
