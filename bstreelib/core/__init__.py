"""Core components of bstreelib: nodes, the tree engine, traversers and collectors."""

from .node import Node
from .tree import Tree, build_balanced, height, sorted_unique
from .traverser import (
    TreeTraverser,
    LevelOrderTraverser,
    InOrderTraverser,
    PreOrderTraverser,
    PostOrderTraverser,
    create_traverser,
    traverser_for,
)
from .collector import (
    DataCollector,
    ValueCollector,
    NodeCollector,
    DepthCollector,
    VisitorCollector,
)

__all__ = [
    "Node",
    "Tree",
    "build_balanced",
    "height",
    "sorted_unique",
    "traverser_for",
    "TreeTraverser",
    "LevelOrderTraverser",
    "InOrderTraverser",
    "PreOrderTraverser",
    "PostOrderTraverser",
    "create_traverser",
    "DataCollector",
    "ValueCollector",
    "NodeCollector",
    "DepthCollector",
    "VisitorCollector",
]
