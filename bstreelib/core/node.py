"""Node type for bstreelib.

A Node is a plain container: one value and two optional children. It
carries no parent link and no cached height; the Tree recomputes those
on demand.
"""

from typing import Any, Iterator, Optional


class Node:
    """One vertex of a binary search tree.

    The value is both the ordering key and the payload. A node exclusively
    owns its left and right subtrees; an absent child is None.
    """

    def __init__(self, value: Any,
                 left: Optional['Node'] = None,
                 right: Optional['Node'] = None):
        self.value = value
        self.left = left
        self.right = right

    def is_leaf(self) -> bool:
        """Check if this node has no children."""
        return self.left is None and self.right is None

    def children(self) -> Iterator['Node']:
        """Iterate over present children, left before right."""
        if self.left is not None:
            yield self.left
        if self.right is not None:
            yield self.right

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(value={self.value!r})"
