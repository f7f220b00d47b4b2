"""
Sequence Tools - queue rotation and parenthesis balancing.

The queue is treated as an opaque FIFO: only its size, dequeue-at-front
and enqueue-at-back are used.
"""

from __future__ import annotations

import queue as queue_module
from collections import deque
from typing import Any, Callable

from pytoolbox.errors import InvalidArgument, check_int


def _fifo_ops(
    fifo: Any,
) -> tuple[Callable[[], int], Callable[[], Any], Callable[[Any], None]]:
    """
    Resolve (size, dequeue, enqueue) for a supported FIFO.

    Supports collections.deque, queue.Queue and its FIFO subclasses, and a
    plain list used as a queue. LifoQueue and PriorityQueue do not take
    from the front, so they are rejected.
    """
    if isinstance(fifo, deque):
        return fifo.__len__, fifo.popleft, fifo.append
    if isinstance(fifo, (queue_module.LifoQueue, queue_module.PriorityQueue)):
        raise InvalidArgument(f"Queue must be FIFO, got {type(fifo).__name__}.")
    if isinstance(fifo, queue_module.Queue):

        def requeue(item: Any) -> None:
            # task_done offsets the put so join() sees no new work.
            fifo.put_nowait(item)
            fifo.task_done()

        return fifo.qsize, fifo.get_nowait, requeue
    if isinstance(fifo, list):
        return fifo.__len__, lambda: fifo.pop(0), fifo.append
    raise InvalidArgument(f"Unsupported queue type: {type(fifo).__name__}.")


def rotate_queue_left(queue: Any, k: int) -> None:
    """
    Rotate ``queue`` left by ``k`` positions in place.

    The first ``k`` elements (mod size) move to the back in their
    original order::

        [1, 2, 3, 4, 5], k=2   ->   [3, 4, 5, 1, 2]

    An empty queue or ``k == 0`` is a no-op.

    Raises:
        InvalidArgument: if ``queue`` is None or not a supported FIFO, or
            ``k`` is not a non-negative int.
    """
    if queue is None:
        raise InvalidArgument("Queue cannot be None.")
    check_int("k", k)
    if k < 0:
        raise InvalidArgument(f"k cannot be negative, got {k}.")

    size, dequeue, enqueue = _fifo_ops(queue)

    count = size()
    if count == 0 or k == 0:
        return

    for _ in range(k % count):
        enqueue(dequeue())


def has_balanced_parentheses(text: str) -> bool:
    """
    Check that every '(' in ``text`` has a matching, correctly nested ')'.

    Only round brackets are tracked; every other character is ignored.
    The empty string is balanced.

    Raises:
        InvalidArgument: if ``text`` is None.
    """
    if text is None:
        raise InvalidArgument("Input string cannot be None.")

    stack: list[str] = []
    for char in text:
        if char == "(":
            stack.append(char)
        elif char == ")":
            if not stack:
                return False
            stack.pop()
    return len(stack) == 0
