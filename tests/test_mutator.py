"""
Tests for the List Mutator.
"""

import pytest

from pytoolbox.errors import InvalidArgument
from pytoolbox.mutator import find_nth_element, insert_node, remove_node
from pytoolbox.nodes import SingleNode, chain_values, chain_values_backward


class TestRemoveNode:
    """Tests for remove_node."""

    def test_remove_middle(self, double_chain) -> None:
        """Neighbours are joined in both directions."""
        nodes = double_chain(1, 2, 3)
        remove_node(nodes[1])
        assert nodes[0].next is nodes[2]
        assert nodes[2].prev is nodes[0]
        assert chain_values(nodes[0]) == [1, 3]
        assert chain_values_backward(nodes[2]) == [3, 1]

    def test_remove_head_leaves_handle(self, double_chain) -> None:
        """The removed head keeps its stale link; the caller moves its handle."""
        nodes = double_chain(1, 2, 3)
        remove_node(nodes[0])
        assert nodes[1].prev is None
        assert nodes[0].next is nodes[1]
        assert chain_values(nodes[1]) == [2, 3]

    def test_remove_tail(self, double_chain) -> None:
        nodes = double_chain(1, 2, 3)
        remove_node(nodes[2])
        assert nodes[1].next is None
        assert chain_values(nodes[0]) == [1, 2]

    def test_remove_singleton(self, double_chain) -> None:
        """A lone node has no neighbours to rewrite."""
        (node,) = double_chain(1)
        remove_node(node)
        assert node.next is None
        assert node.prev is None

    def test_none_node(self) -> None:
        with pytest.raises(InvalidArgument):
            remove_node(None)


class TestInsertNode:
    """Tests for insert_node."""

    def test_insert_middle(self, single_chain) -> None:
        nodes = single_chain(1, 2, 3)
        new = SingleNode(9)
        insert_node(nodes[0], new)
        assert nodes[0].next is new
        assert new.next is nodes[1]
        assert chain_values(nodes[0]) == [1, 9, 2, 3]

    def test_insert_after_tail(self, single_chain) -> None:
        nodes = single_chain(1, 2)
        new = SingleNode(9)
        insert_node(nodes[1], new)
        assert new.next is None
        assert chain_values(nodes[0]) == [1, 2, 9]

    def test_none_arguments(self) -> None:
        """Either argument being None is rejected without mutation."""
        node = SingleNode(1)
        with pytest.raises(InvalidArgument):
            insert_node(node, None)
        with pytest.raises(InvalidArgument):
            insert_node(None, node)
        assert node.next is None


class TestFindNthElement:
    """Tests for find_nth_element."""

    def test_zero_is_head(self, single_chain) -> None:
        nodes = single_chain(1, 2, 3)
        assert find_nth_element(nodes[0], 0) is nodes[0]

    def test_each_index(self, single_chain) -> None:
        nodes = single_chain(10, 20, 30, 40)
        for i, node in enumerate(nodes):
            assert find_nth_element(nodes[0], i) is node

    def test_past_end_is_none(self, single_chain) -> None:
        """Running off the end is signalled with None, not an error."""
        nodes = single_chain(1, 2, 3)
        assert find_nth_element(nodes[0], 3) is None
        assert find_nth_element(nodes[0], 100) is None

    def test_none_head(self) -> None:
        with pytest.raises(InvalidArgument):
            find_nth_element(None, 0)

    def test_negative_n(self) -> None:
        with pytest.raises(InvalidArgument):
            find_nth_element(SingleNode(1), -1)

    @pytest.mark.parametrize("n", [1.5, False, "0", None])
    def test_non_int_n(self, n: object) -> None:
        """n that is not a plain int raises InvalidArgument, not TypeError."""
        with pytest.raises(InvalidArgument):
            find_nth_element(SingleNode(1), n)
