"""Binary search tree engine for bstreelib.

The Tree owns a hierarchy of Nodes ordered by value. It is built as a
minimal-height tree from any input sequence, mutated in place by insert
and delete, and brought back to balance only when rebalance() is called.

Height, depth and balance are recomputed on every call. Nothing is cached
on the nodes, so a tree is always consistent with its own structure.
"""

import logging
from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional, Sequence

from .._common.config import TraversalOrder
from ..errors import EmptyTreeError
from .node import Node
from .traverser import LevelOrderTraverser, PostOrderTraverser, traverser_for

logger = logging.getLogger(__name__)

# Default for Tree.height(), distinct from an explicit None subtree
_WHOLE_TREE = object()


def sorted_unique(values: Iterable[Any]) -> List[Any]:
    """Sort values ascending and drop duplicates.

    Two values count as duplicates when neither is less than the other,
    the same rule the tree uses when placing them.
    """
    result: List[Any] = []
    for value in sorted(values):
        if not result or result[-1] < value:
            result.append(value)
    return result


def build_balanced(values: Sequence[Any], lo: int = 0,
                   hi: Optional[int] = None) -> Optional[Node]:
    """Build a minimal-height subtree from sorted, unique values[lo:hi].

    The element at the middle index (floor of length / 2) becomes the
    subtree root; the halves on either side become its children.
    """
    if hi is None:
        hi = len(values)
    if lo >= hi:
        return None

    mid = lo + (hi - lo) // 2
    node = Node(values[mid])
    node.left = build_balanced(values, lo, mid)
    node.right = build_balanced(values, mid + 1, hi)
    return node


def height(node: Optional[Node]) -> int:
    """Height of the subtree rooted at node.

    An empty subtree has height -1 and a single leaf has height 0.
    """
    if node is None:
        return -1
    return max(depth for _, depth in LevelOrderTraverser().traverse(node))


class Tree:
    """A binary search tree over unique, mutually orderable values.

    Example:
        >>> tree = Tree([5, 3, 8, 1, 4, 7, 9])
        >>> tree.root.value
        5
        >>> tree.insert(6)
        >>> tree.in_order()
        [1, 3, 4, 5, 6, 7, 8, 9]
    """

    def __init__(self, values: Optional[Iterable[Any]] = None):
        """Build a tree from values.

        Args:
            values: Any finite iterable; may be unsorted and contain duplicates
        """
        self.root: Optional[Node] = None
        if values is not None:
            self.root = self._build_root(values)

    @classmethod
    def build(cls, values: Iterable[Any]) -> 'Tree':
        """Create a minimal-height tree from an arbitrary sequence."""
        return cls(values)

    def _build_root(self, values: Iterable[Any]) -> Optional[Node]:
        ordered = sorted_unique(values)
        root = build_balanced(ordered)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Built tree of %d values, height %d", len(ordered), height(root))
        return root

    # ---------- Mutation ----------

    def insert(self, value: Any) -> None:
        """Insert value as a new leaf.

        Inserting a value that is already present does nothing. No
        rebalancing happens, so repeated inserts can skew the tree.
        """
        if self.root is None:
            self.root = Node(value)
            return

        current = self.root
        while True:
            if value < current.value:
                if current.left is None:
                    current.left = Node(value)
                    return
                current = current.left
            elif value > current.value:
                if current.right is None:
                    current.right = Node(value)
                    return
                current = current.right
            else:
                logger.debug("Insert of existing value %r ignored", value)
                return

    def delete(self, value: Any) -> None:
        """Remove value from the tree.

        Deleting a value that is not present does nothing. A node with two
        children takes the value of its in-order successor, and the
        successor's original node is removed from the right subtree.
        """
        parent: Optional[Node] = None
        current = self.root

        while current is not None:
            if value < current.value:
                parent, current = current, current.left
            elif value > current.value:
                parent, current = current, current.right
            else:
                break
        else:
            logger.debug("Delete of missing value %r ignored", value)
            return

        self._replace_child(parent, current, self._remove_node(current))

    def _remove_node(self, node: Node) -> Optional[Node]:
        """Unlink node's value from its subtree and return the new subtree root."""
        if node.left is None:
            return node.right
        if node.right is None:
            return node.left

        successor_parent = node
        successor = node.right
        while successor.left is not None:
            successor_parent = successor
            successor = successor.left

        node.value = successor.value
        # The successor has no left child, so it is a zero/one-child removal
        self._replace_child(successor_parent, successor, successor.right)
        return node

    def _replace_child(self, parent: Optional[Node], old_child: Node,
                       new_child: Optional[Node]) -> None:
        if parent is None:
            self.root = new_child
        elif parent.left is old_child:
            parent.left = new_child
        else:
            parent.right = new_child

    # ---------- Lookup ----------

    def find(self, value: Any) -> Optional[Node]:
        """Return the node holding value, or None if it is absent."""
        current = self.root
        while current is not None:
            if value < current.value:
                current = current.left
            elif value > current.value:
                current = current.right
            else:
                return current
        return None

    def min(self) -> Any:
        """Smallest value in the tree.

        Raises:
            EmptyTreeError: If the tree holds no values
        """
        if self.root is None:
            raise EmptyTreeError("min() of an empty tree")
        current = self.root
        while current.left is not None:
            current = current.left
        return current.value

    def max(self) -> Any:
        """Largest value in the tree.

        Raises:
            EmptyTreeError: If the tree holds no values
        """
        if self.root is None:
            raise EmptyTreeError("max() of an empty tree")
        current = self.root
        while current.right is not None:
            current = current.right
        return current.value

    # ---------- Shape ----------

    def height(self, node: Any = _WHOLE_TREE) -> int:
        """Height of node's subtree, or of the whole tree if node is omitted.

        Passing None explicitly asks for the height of an empty subtree, -1.
        """
        return height(self.root if node is _WHOLE_TREE else node)

    def depth(self, node: Optional[Node]) -> int:
        """Number of edges from the root to node.

        The node is located by descending from the root with its value.
        Returns -1 if node is None, is not in this tree, is a handle from
        another tree that happens to share the value, or holds a value that
        cannot be ordered against this tree's values.
        """
        if node is None:
            return -1

        current = self.root
        depth = 0
        while current is not None:
            if current is node:
                return depth
            try:
                if node.value < current.value:
                    current = current.left
                elif node.value > current.value:
                    current = current.right
                else:
                    return -1
            except TypeError:
                # A value that cannot be ordered against this tree is not in it
                return -1
            depth += 1
        return -1

    def is_balanced(self) -> bool:
        """Check that left and right heights differ by at most 1 at every node."""
        heights: Dict[int, int] = {}
        for node, _ in PostOrderTraverser().traverse(self.root):
            left = heights.pop(id(node.left)) if node.left is not None else -1
            right = heights.pop(id(node.right)) if node.right is not None else -1
            if abs(left - right) > 1:
                return False
            heights[id(node)] = 1 + max(left, right)
        return True

    def rebalance(self) -> None:
        """Rebuild the tree at minimal height, keeping the same values.

        The in-order walk already yields sorted, unique values, so they go
        straight into the balanced builder. The old hierarchy is dropped
        only once the new one is complete.
        """
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Rebalancing tree of height %d", height(self.root))
        self.root = build_balanced(self.in_order())
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Rebalanced tree to height %d", height(self.root))

    # ---------- Traversal ----------

    def walk(self, order: TraversalOrder = TraversalOrder.IN_ORDER) -> Iterator[Node]:
        """Lazily yield node handles in the given order."""
        for node, _ in traverser_for(order).traverse(self.root):
            yield node

    def visit(self, visitor: Callable[[Node], Any],
              order: TraversalOrder = TraversalOrder.IN_ORDER) -> None:
        """Call visitor on every node in the given order."""
        for node in self.walk(order):
            visitor(node)

    def level_order(self) -> List[Any]:
        return [node.value for node in self.walk(TraversalOrder.LEVEL_ORDER)]

    def in_order(self) -> List[Any]:
        return [node.value for node in self.walk(TraversalOrder.IN_ORDER)]

    def pre_order(self) -> List[Any]:
        return [node.value for node in self.walk(TraversalOrder.PRE_ORDER)]

    def post_order(self) -> List[Any]:
        return [node.value for node in self.walk(TraversalOrder.POST_ORDER)]

    # ---------- Container protocol ----------

    def is_empty(self) -> bool:
        return self.root is None

    def __len__(self) -> int:
        return sum(1 for _ in self.walk(TraversalOrder.PRE_ORDER))

    def __bool__(self) -> bool:
        return self.root is not None

    def __contains__(self, value: Any) -> bool:
        return self.find(value) is not None

    def __iter__(self) -> Iterator[Any]:
        """Iterate over values in ascending order."""
        for node in self.walk(TraversalOrder.IN_ORDER):
            yield node.value

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.in_order()!r})"
