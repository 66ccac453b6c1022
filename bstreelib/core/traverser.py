"""Tree traversal strategies for bstreelib.

Traversers implement the four classic walks over a binary tree. Each one
is a lazy generator of (node, depth) pairs, so callers can collect values,
call a visitor, or stop early without building intermediate lists.

Depth-first walks use an explicit stack instead of recursion: a tree grown
by sorted inserts degenerates into a list, and recursive generators would
hit the interpreter's recursion limit on it.
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import Deque, Iterator, List, Optional, Tuple, Union

from .._common.config import DepthConfig, TraversalOrder, parse_order
from .node import Node


class TreeTraverser(ABC):
    """Abstract base class for tree traversal strategies.

    The depth window is a DepthConfig. Callers either pass one as window
    or give min_depth / max_depth and let the traverser build it.
    """

    def traverse(self,
                 root: Optional[Node],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0,
                 window: Optional[DepthConfig] = None) -> Iterator[Tuple[Node, int]]:
        """Traverse the tree starting from root.

        Args:
            root: Starting node for traversal (None = empty tree)
            max_depth: Maximum depth to traverse (None = unlimited)
            min_depth: Minimum depth before yielding nodes
            window: DepthConfig to use instead of min_depth / max_depth

        Yields:
            Tuples of (node, depth) where depth is relative to root
        """
        if window is None:
            window = DepthConfig(min_depth=min_depth, max_depth=max_depth)
        if root is None:
            return iter(())
        return self._walk(root, window)

    @abstractmethod
    def _walk(self, root: Node, window: DepthConfig) -> Iterator[Tuple[Node, int]]:
        pass


class LevelOrderTraverser(TreeTraverser):
    """Breadth-first traversal strategy.

    Visits the root, then every node at depth 1 left to right, and so on,
    using a FIFO queue.
    """

    def _walk(self, root: Node, window: DepthConfig) -> Iterator[Tuple[Node, int]]:
        queue: Deque[Tuple[Node, int]] = deque([(root, 0)])

        while queue:
            node, depth = queue.popleft()

            if window.should_yield(depth):
                yield (node, depth)

            if window.should_explore(depth):
                for child in node.children():
                    queue.append((child, depth + 1))


class InOrderTraverser(TreeTraverser):
    """Depth-first in-order traversal strategy.

    Left subtree, node, right subtree. On a valid BST this yields values
    in strictly ascending order.
    """

    def _walk(self, root: Node, window: DepthConfig) -> Iterator[Tuple[Node, int]]:
        stack: List[Tuple[Node, int]] = []
        node: Optional[Node] = root
        depth = 0

        while stack or node is not None:
            # Slide down the left spine, stopping at the depth limit
            while node is not None:
                stack.append((node, depth))
                if not window.should_explore(depth):
                    node = None
                    break
                node, depth = node.left, depth + 1

            node, depth = stack.pop()
            if window.should_yield(depth):
                yield (node, depth)

            if window.should_explore(depth):
                node, depth = node.right, depth + 1
            else:
                node = None


class PreOrderTraverser(TreeTraverser):
    """Depth-first pre-order traversal strategy.

    Node, left subtree, right subtree. Rebuilding a BST by inserting
    values in this order reproduces the same shape.
    """

    def _walk(self, root: Node, window: DepthConfig) -> Iterator[Tuple[Node, int]]:
        stack: List[Tuple[Node, int]] = [(root, 0)]

        while stack:
            node, depth = stack.pop()

            if window.should_yield(depth):
                yield (node, depth)

            if window.should_explore(depth):
                # Right first so left is popped first
                if node.right is not None:
                    stack.append((node.right, depth + 1))
                if node.left is not None:
                    stack.append((node.left, depth + 1))


class PostOrderTraverser(TreeTraverser):
    """Depth-first post-order traversal strategy.

    Left subtree, right subtree, node. Every node is yielded after its
    whole subtree, which suits bottom-up aggregation such as heights.
    """

    def _walk(self, root: Node, window: DepthConfig) -> Iterator[Tuple[Node, int]]:
        # Entries are (node, depth, children_done)
        stack: List[Tuple[Node, int, bool]] = [(root, 0, False)]

        while stack:
            node, depth, children_done = stack.pop()

            if children_done:
                if window.should_yield(depth):
                    yield (node, depth)
                continue

            stack.append((node, depth, True))
            if window.should_explore(depth):
                if node.right is not None:
                    stack.append((node.right, depth + 1, False))
                if node.left is not None:
                    stack.append((node.left, depth + 1, False))


_TRAVERSERS = {
    TraversalOrder.LEVEL_ORDER: LevelOrderTraverser,
    TraversalOrder.IN_ORDER: InOrderTraverser,
    TraversalOrder.PRE_ORDER: PreOrderTraverser,
    TraversalOrder.POST_ORDER: PostOrderTraverser,
}


def traverser_for(order: TraversalOrder) -> TreeTraverser:
    """Return a traverser instance for the given order."""
    return _TRAVERSERS[order]()


def create_traverser(strategy: Union[TraversalOrder, str]) -> TreeTraverser:
    """Create a traverser instance by order or name.

    Args:
        strategy: TraversalOrder or a name from config.ORDER_NAMES

    Returns:
        TreeTraverser instance

    Raises:
        ValueError: If strategy name is not recognized
    """
    return traverser_for(parse_order(strategy))
