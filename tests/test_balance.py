"""Tests for the balance predicate and rebalancing."""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from bstreelib import Tree, Node


class TestIsBalanced:

    def test_empty_and_single(self):
        assert Tree().is_balanced()
        assert Tree([1]).is_balanced()

    def test_two_level_chain_is_balanced(self):
        tree = Tree([1])
        tree.insert(2)
        assert tree.is_balanced()

    def test_three_level_chain_is_not(self):
        tree = Tree([1])
        tree.insert(2)
        tree.insert(3)
        assert not tree.is_balanced()

    def test_checks_every_node_not_just_root(self):
        # Root heights are equal (2 and 2) but both children are chains
        tree = Tree()
        root = Node(10)
        root.left = Node(5, left=Node(3, left=Node(1)))
        root.right = Node(15, right=Node(17, right=Node(20)))
        tree.root = root
        assert tree.height(root.left) == tree.height(root.right)
        assert not tree.is_balanced()

    def test_subtree_heights_carried_up(self):
        assert Tree(range(1, 13)).is_balanced()
        tree = Tree(range(1, 8))
        tree.insert(8)
        assert tree.is_balanced()
        tree.insert(9)
        assert not tree.is_balanced()

    def test_insert_skew(self):
        tree = Tree(range(1, 16))
        assert tree.is_balanced()
        for value in range(16, 26):
            tree.insert(value)
        assert not tree.is_balanced()
        tree.rebalance()
        assert tree.is_balanced()


class TestRebalance:

    def test_rebalance_keeps_values(self):
        tree = Tree(range(1, 16))
        for value in range(16, 26):
            tree.insert(value)
        tree.rebalance()
        assert tree.in_order() == list(range(1, 26))
        assert tree.height() == 4

    def test_rebalance_after_deletes(self):
        tree = Tree(range(1, 32))
        for value in range(1, 16):
            tree.delete(value)
        tree.rebalance()
        assert tree.is_balanced()
        assert tree.in_order() == list(range(16, 32))
        assert tree.height() == 4

    def test_rebalance_is_idempotent(self):
        tree = Tree()
        for value in [9, 1, 8, 2, 7, 3, 6, 4, 5]:
            tree.insert(value)

        tree.rebalance()
        first = (tree.in_order(), tree.level_order())
        assert tree.is_balanced()

        tree.rebalance()
        assert (tree.in_order(), tree.level_order()) == first
        assert tree.is_balanced()

    def test_rebalance_matches_fresh_build(self):
        tree = Tree()
        for value in [50, 10, 90, 20, 80, 30, 70, 40, 60]:
            tree.insert(value)
        tree.rebalance()
        assert tree.level_order() == Tree(tree.in_order()).level_order()

    def test_rebalance_empty(self):
        tree = Tree()
        tree.rebalance()
        assert tree.root is None
        assert tree.is_balanced()

    @pytest.mark.parametrize("count", [2, 5, 17, 64])
    def test_rebalance_chain(self, count):
        tree = Tree()
        for value in range(count, 0, -1):
            tree.insert(value)
        tree.rebalance()
        assert tree.is_balanced()
        assert tree.height() == count.bit_length() - 1
