"""Tests for the functional API in bstreelib.api."""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from bstreelib import api, Tree, CollectMode, TraversalConfig, TraversalOrder


class TestCoreOperations:
    """The programmatic surface: build, insert, delete, find and friends."""

    def test_build(self):
        tree = api.build([5, 3, 8, 1, 4, 7, 9])
        assert isinstance(tree, Tree)
        assert tree.root.value == 5

    def test_insert_delete_find(self):
        tree = api.build([])
        api.insert(tree, 3)
        api.insert(tree, 1)
        api.insert(tree, 3)
        assert api.in_order(tree) == [1, 3]
        assert api.find(tree, 1).value == 1
        api.delete(tree, 1)
        api.delete(tree, 99)
        assert api.find(tree, 1) is None
        assert api.in_order(tree) == [3]

    def test_orders(self):
        tree = api.build([5, 3, 8, 1, 4, 7, 9])
        assert api.level_order(tree) == [5, 3, 8, 1, 4, 7, 9]
        assert api.in_order(tree) == [1, 3, 4, 5, 7, 8, 9]
        assert api.pre_order(tree) == [5, 3, 1, 4, 8, 7, 9]
        assert api.post_order(tree) == [1, 4, 3, 7, 9, 8, 5]

    def test_height_and_depth(self):
        tree = api.build(range(1, 8))
        assert api.height(None) == -1
        assert api.height(tree.root) == 2
        assert api.height(api.find(tree, 7)) == 0
        assert api.depth(tree, api.find(tree, 7)) == 2
        assert api.depth(tree, None) == -1

    def test_balance(self):
        tree = api.build(range(1, 16))
        for value in range(16, 26):
            api.insert(tree, value)
        assert not api.is_balanced(tree)
        api.rebalance(tree)
        assert api.is_balanced(tree)

    def test_visit_with_string_order(self):
        seen = []
        api.visit(api.build([2, 1, 3]), lambda node: seen.append(node.value), "pre")
        assert seen == [2, 1, 3]

    def test_walk(self):
        nodes = api.walk(api.build([2, 1, 3]), "level")
        assert [node.value for node in nodes] == [2, 1, 3]

    def test_breadth_first_name(self):
        tree = api.build([2, 1, 3])
        assert [node.value for node in api.walk(tree, "breadth_first")] == [2, 1, 3]
        seen = []
        api.visit(tree, lambda node: seen.append(node.value), "breadth_first")
        assert seen == [2, 1, 3]

    def test_visit_unknown_order(self):
        calls = []
        with pytest.raises(ValueError, match="Unknown traversal order"):
            api.visit(api.build([1]), calls.append, "spiral")
        assert calls == []

    def test_unknown_order(self):
        with pytest.raises(ValueError, match="Unknown traversal order"):
            api.walk(api.build([1]), "spiral")


class TestTraversalHelpers:
    """Traversal helpers built on TraversalPlan."""

    def setup_method(self):
        self.tree = api.build(range(1, 8))

    def test_traverse_tree_depth_window(self):
        nodes = api.traverse_tree(self.tree, "level", max_depth=1)
        assert [node.value for node in nodes] == [4, 2, 6]
        nodes = api.traverse_tree(self.tree, TraversalOrder.IN_ORDER, min_depth=2)
        assert [node.value for node in nodes] == [1, 3, 5, 7]

    def test_collect_tree_data_kwargs(self):
        data = [d for _, d in api.collect_tree_data(
            self.tree, order="pre", collect=CollectMode.VALUE_WITH_DEPTH, max_depth=1
        )]
        assert data == [(4, 0), (2, 1), (6, 1)]

    def test_collect_tree_data_visitor_kwarg(self):
        data = [d for _, d in api.collect_tree_data(self.tree, visitor=lambda n: -n.value)]
        assert data == [-1, -2, -3, -4, -5, -6, -7]

    def test_collect_tree_data_config(self):
        config = TraversalConfig.levels(max_depth=0)
        assert [d for _, d in api.collect_tree_data(self.tree, config)] == [(4, 0)]

    def test_collect_tree_data_rejects_unknown_option(self):
        with pytest.raises(TypeError, match="Unexpected traversal options"):
            list(api.collect_tree_data(self.tree, lazy=True))

    def test_count_nodes(self):
        assert api.count_nodes(self.tree) == 7
        assert api.count_nodes(self.tree, max_depth=1) == 3
        assert api.count_nodes(api.build([])) == 0

    def test_get_leaf_nodes(self):
        assert [n.value for n in api.get_leaf_nodes(self.tree)] == [1, 3, 5, 7]
        assert [n.value for n in api.get_leaf_nodes(self.tree, max_depth=1)] == []

    def test_get_tree_stats(self):
        stats = api.get_tree_stats(self.tree)
        assert stats == {
            'total_nodes': 7,
            'leaf_nodes': 4,
            'internal_nodes': 3,
            'height': 2,
            'depths': {0: 1, 1: 2, 2: 4},
            'is_balanced': True,
            'min': 1,
            'max': 7,
        }

    def test_get_tree_stats_empty(self):
        stats = api.get_tree_stats(api.build([]))
        assert stats['total_nodes'] == 0
        assert stats['height'] == -1
        assert stats['depths'] == {}
        assert stats['is_balanced'] is True
        assert stats['min'] is None
        assert stats['max'] is None
