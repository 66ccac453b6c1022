"""High-level API for bstreelib.

This module provides simple, functional interfaces over the Tree engine.
Every function takes the tree as its first argument, so callers that
prefer plain functions never need to touch the Tree methods directly.
"""

from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional, Tuple, Union

from .core.node import Node
from .core.tree import Tree, height as _subtree_height
from .config import TraversalConfig, TraversalOrder, CollectMode, DepthConfig, parse_order
from .planning import TraversalPlan


def build(values: Iterable[Any]) -> Tree:
    """Build a minimal-height tree from an arbitrary sequence.

    Duplicates are dropped and the values sorted before building.

    Example:
        >>> tree = build([5, 3, 8, 1, 4, 7, 9])
        >>> tree.root.value
        5
    """
    return Tree.build(values)


def insert(tree: Tree, value: Any) -> None:
    """Insert value into tree; a value already present is ignored."""
    tree.insert(value)


def delete(tree: Tree, value: Any) -> None:
    """Delete value from tree; a missing value is ignored."""
    tree.delete(value)


def find(tree: Tree, value: Any) -> Optional[Node]:
    """Return the node holding value, or None."""
    return tree.find(value)


def level_order(tree: Tree) -> List[Any]:
    return tree.level_order()


def in_order(tree: Tree) -> List[Any]:
    return tree.in_order()


def pre_order(tree: Tree) -> List[Any]:
    return tree.pre_order()


def post_order(tree: Tree) -> List[Any]:
    return tree.post_order()


def walk(tree: Tree,
         order: Union[TraversalOrder, str] = TraversalOrder.IN_ORDER) -> Iterator[Node]:
    """Lazily yield node handles in the given order."""
    return tree.walk(parse_order(order))


def visit(tree: Tree,
          visitor: Callable[[Node], Any],
          order: Union[TraversalOrder, str] = TraversalOrder.IN_ORDER) -> None:
    """Call visitor on every node of tree in the given order.

    Example:
        >>> seen = []
        >>> visit(build([2, 1, 3]), lambda node: seen.append(node.value), "pre")
        >>> seen
        [2, 1, 3]
    """
    config = TraversalConfig.visiting(visitor, parse_order(order))
    for _ in TraversalPlan(config).execute(tree.root):
        pass


def height(node: Optional[Node]) -> int:
    """Height of the subtree rooted at node (-1 for None)."""
    return _subtree_height(node)


def depth(tree: Tree, node: Optional[Node]) -> int:
    """Edges from tree's root to node (-1 if node is not in tree)."""
    return tree.depth(node)


def is_balanced(tree: Tree) -> bool:
    return tree.is_balanced()


def rebalance(tree: Tree) -> None:
    tree.rebalance()


def traverse_tree(
    tree: Tree,
    order: Union[TraversalOrder, str] = TraversalOrder.IN_ORDER,
    max_depth: Optional[int] = None,
    min_depth: int = 0,
) -> Iterator[Node]:
    """Traverse tree with a depth window.

    Args:
        tree: Tree to traverse
        order: Traversal order (enum or name such as "level", "pre")
        max_depth: Maximum depth to traverse (None = unlimited)
        min_depth: Minimum depth before yielding nodes

    Yields:
        Nodes within the depth window, in the given order

    Example:
        >>> tree = build(range(1, 8))
        >>> [n.value for n in traverse_tree(tree, "level", max_depth=1)]
        [4, 2, 6]
    """
    config = TraversalConfig(
        order=parse_order(order),
        depth=DepthConfig(min_depth=min_depth, max_depth=max_depth),
        collect=CollectMode.NODE,
    )
    for node, _ in TraversalPlan(config).execute(tree.root):
        yield node


def collect_tree_data(
    tree: Tree,
    config: Optional[TraversalConfig] = None,
    **kwargs
) -> Iterator[Tuple[Node, Any]]:
    """Traverse tree and collect data per node.

    Args:
        tree: Tree to traverse
        config: Complete TraversalConfig; built from kwargs when omitted
        **kwargs: order, max_depth, min_depth, collect, visitor

    Yields:
        Tuples of (node, collected_data)

    Example:
        >>> tree = build([1, 2, 3])
        >>> [data for _, data in collect_tree_data(tree, collect=CollectMode.VALUE_WITH_DEPTH)]
        [(1, 1), (2, 0), (3, 1)]
    """
    if config is None:
        config = _build_config_from_kwargs(**kwargs)
    yield from TraversalPlan(config).execute(tree.root)


def count_nodes(tree: Tree, **kwargs) -> int:
    """Count nodes within an optional depth window (see traverse_tree)."""
    count = 0
    for _ in traverse_tree(tree, **kwargs):
        count += 1
    return count


def get_leaf_nodes(tree: Tree, **kwargs) -> Iterator[Node]:
    """Yield nodes with no children (see traverse_tree for options)."""
    for node in traverse_tree(tree, **kwargs):
        if node.is_leaf():
            yield node


def get_tree_stats(tree: Tree) -> Dict[str, Any]:
    """Get statistics about a tree.

    Returns:
        Dictionary with total_nodes, leaf_nodes, internal_nodes, height,
        depths (node count per depth), is_balanced, min and max
        (None for an empty tree)
    """
    stats = {
        'total_nodes': 0,
        'leaf_nodes': 0,
        'height': -1,
        'depths': {},
    }

    for node, node_depth in collect_tree_data(tree, config=TraversalConfig.levels()):
        stats['total_nodes'] += 1
        if node.is_leaf():
            stats['leaf_nodes'] += 1
        _, level = node_depth
        stats['height'] = max(stats['height'], level)
        stats['depths'][level] = stats['depths'].get(level, 0) + 1

    stats['internal_nodes'] = stats['total_nodes'] - stats['leaf_nodes']
    stats['is_balanced'] = tree.is_balanced()
    stats['min'] = tree.min() if tree else None
    stats['max'] = tree.max() if tree else None

    return stats


# Helper functions

def _build_config_from_kwargs(**kwargs) -> TraversalConfig:
    """Build TraversalConfig from keyword arguments."""
    config = TraversalConfig.sorted_values()

    if 'order' in kwargs:
        config.order = parse_order(kwargs.pop('order'))

    if 'max_depth' in kwargs:
        config.depth.max_depth = kwargs.pop('max_depth')

    if 'min_depth' in kwargs:
        config.depth.min_depth = kwargs.pop('min_depth')

    if 'visitor' in kwargs:
        config.visitor = kwargs.pop('visitor')
        config.collect = CollectMode.CUSTOM

    if 'collect' in kwargs:
        config.collect = kwargs.pop('collect')

    if kwargs:
        raise TypeError(f"Unexpected traversal options: {', '.join(sorted(kwargs))}")

    return config
