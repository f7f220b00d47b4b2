"""
Pytest configuration and fixtures for pytoolbox tests.
"""

from pathlib import Path
from typing import Callable

import pytest

from pytoolbox.nodes import (
    DoubleNode,
    SingleNode,
    build_double_chain,
    build_single_chain,
)

EXAMPLES_ROOT = Path(__file__).resolve().parent.parent / "examples"


@pytest.fixture
def examples_root() -> Path:
    """Directory holding the runnable example scripts."""
    return EXAMPLES_ROOT


@pytest.fixture
def single_chain() -> Callable[..., list[SingleNode]]:
    """Build a singly linked chain and return its nodes in order."""

    def _build(*values: int) -> list[SingleNode]:
        nodes = []
        node = build_single_chain(values)
        while node is not None:
            nodes.append(node)
            node = node.next
        return nodes

    return _build


@pytest.fixture
def double_chain() -> Callable[..., list[DoubleNode]]:
    """Build a doubly linked chain and return its nodes in order."""

    def _build(*values: int) -> list[DoubleNode]:
        nodes = []
        node, _ = build_double_chain(values)
        while node is not None:
            nodes.append(node)
            node = node.next
        return nodes

    return _build
