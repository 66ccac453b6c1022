"""Textual tree diagrams.

The diagram is drawn sideways: the right subtree sits above its parent and
the left subtree below, so reading top to bottom gives descending values.

    │       ┌── 9
    │   ┌── 8
    │   │   └── 7
    └── 5
        │   ┌── 4
        └── 3
            └── 1
"""

import sys
from typing import List, Optional, TextIO, Union

from .core.node import Node
from .core.tree import Tree


def render_tree(tree: Union[Tree, Node, None]) -> str:
    """Render a tree (or a subtree rooted at a node) as a multi-line string.

    An empty tree renders as the empty string.
    """
    root = tree.root if isinstance(tree, Tree) else tree
    lines: List[str] = []

    # Explicit stack of (node, prefix, is_left, expanded) keeps deep trees safe
    stack = [(root, "", True, False)] if root is not None else []
    while stack:
        node, prefix, is_left, expanded = stack.pop()
        if expanded:
            lines.append(f"{prefix}{'└── ' if is_left else '┌── '}{node.value}")
            continue

        # Pushed in reverse: right subtree, then this node, then left subtree
        if node.left is not None:
            stack.append((node.left, prefix + ("    " if is_left else "│   "), True, False))
        stack.append((node, prefix, is_left, True))
        if node.right is not None:
            stack.append((node.right, prefix + ("│   " if is_left else "    "), False, False))

    return "\n".join(lines)


def pretty_print(tree: Union[Tree, Node, None], file: Optional[TextIO] = None) -> None:
    """Write the diagram for tree to file (stdout by default)."""
    text = render_tree(tree)
    if text:
        print(text, file=file or sys.stdout)
