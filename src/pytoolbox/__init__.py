"""
PyToolbox - self-contained data-structure manipulation primitives.

Independent, stateless operations over caller-supplied arrays, linked
lists, queues and strings.
"""

from pytoolbox.errors import InvalidArgument
from pytoolbox.nodes import (
    SingleNode,
    DoubleNode,
    build_single_chain,
    build_double_chain,
    chain_values,
    chain_values_backward,
)
from pytoolbox.arrays import remove_element_in_place, add_element_in_place
from pytoolbox.navigator import find_tail, find_head
from pytoolbox.mutator import remove_node, insert_node, find_nth_element
from pytoolbox.counter import count_occurrences
from pytoolbox.sequences import rotate_queue_left, has_balanced_parentheses

__version__ = "0.1.0"
__all__ = [
    # Errors
    "InvalidArgument",
    # Nodes
    "SingleNode",
    "DoubleNode",
    "build_single_chain",
    "build_double_chain",
    "chain_values",
    "chain_values_backward",
    # Array Editor
    "remove_element_in_place",
    "add_element_in_place",
    # List Navigator
    "find_tail",
    "find_head",
    # List Mutator
    "remove_node",
    "insert_node",
    "find_nth_element",
    # Occurrence Counter
    "count_occurrences",
    # Sequence Tools
    "rotate_queue_left",
    "has_balanced_parentheses",
]
