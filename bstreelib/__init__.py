"""bstreelib - Balanced Binary Search Tree Library.

bstreelib builds a minimal-height binary search tree from any sequence of
orderable values, mutates it in place with insert and delete, and restores
balance on request.

    from bstreelib import Tree

    tree = Tree([5, 3, 8, 1, 4, 7, 9])
    tree.insert(10)
    tree.is_balanced()
    tree.rebalance()

A functional interface with the same operations lives in bstreelib.api.
"""

__version__ = "0.1.0"

from .core.node import Node
from .core.tree import Tree
from .core.traverser import (
    TreeTraverser,
    LevelOrderTraverser,
    InOrderTraverser,
    PreOrderTraverser,
    PostOrderTraverser,
    create_traverser,
)
from .config import TraversalOrder, CollectMode, DepthConfig, TraversalConfig, ORDER_NAMES, parse_order
from .planning import TraversalPlan
from .errors import BSTError, EmptyTreeError, InvalidConfigurationError
from .render import render_tree, pretty_print
from . import api

__all__ = [
    "__version__",
    "Node",
    "Tree",
    "TreeTraverser",
    "LevelOrderTraverser",
    "InOrderTraverser",
    "PreOrderTraverser",
    "PostOrderTraverser",
    "create_traverser",
    "TraversalOrder",
    "CollectMode",
    "DepthConfig",
    "TraversalConfig",
    "ORDER_NAMES",
    "parse_order",
    "TraversalPlan",
    "BSTError",
    "EmptyTreeError",
    "InvalidConfigurationError",
    "render_tree",
    "pretty_print",
    "api",
]
