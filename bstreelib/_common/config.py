"""Configuration system for bstreelib.

This module defines how callers describe a traversal: which order to walk
the tree in, which depths to report, and what to collect from each node.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Callable, Any, List, Union


class TraversalOrder(Enum):
    """Order in which tree nodes are visited."""
    LEVEL_ORDER = "level"   # Breadth-first, root first
    IN_ORDER = "in"         # Left, node, right (ascending values)
    PRE_ORDER = "pre"       # Node, left, right
    POST_ORDER = "post"     # Left, right, node


# Every name accepted wherever a traversal order may be given as a string
ORDER_NAMES = {
    'level': TraversalOrder.LEVEL_ORDER,
    'level_order': TraversalOrder.LEVEL_ORDER,
    'bfs': TraversalOrder.LEVEL_ORDER,
    'breadth_first': TraversalOrder.LEVEL_ORDER,
    'in': TraversalOrder.IN_ORDER,
    'in_order': TraversalOrder.IN_ORDER,
    'inorder': TraversalOrder.IN_ORDER,
    'pre': TraversalOrder.PRE_ORDER,
    'pre_order': TraversalOrder.PRE_ORDER,
    'preorder': TraversalOrder.PRE_ORDER,
    'dfs_pre': TraversalOrder.PRE_ORDER,
    'post': TraversalOrder.POST_ORDER,
    'post_order': TraversalOrder.POST_ORDER,
    'postorder': TraversalOrder.POST_ORDER,
    'dfs_post': TraversalOrder.POST_ORDER,
}


def parse_order(order: Union[TraversalOrder, str]) -> TraversalOrder:
    """Parse traversal order from string or enum.

    Args:
        order: TraversalOrder or one of the names in ORDER_NAMES (any case)

    Returns:
        TraversalOrder enum value

    Raises:
        ValueError: If the name is not recognized
    """
    if isinstance(order, TraversalOrder):
        return order

    order_lower = order.lower() if isinstance(order, str) else str(order)
    if order_lower in ORDER_NAMES:
        return ORDER_NAMES[order_lower]

    raise ValueError(
        f"Unknown traversal order: {order}. "
        f"Choose from: {', '.join(ORDER_NAMES.keys())}"
    )


class CollectMode(Enum):
    """Specifies what is produced for each visited node."""
    VALUE = "value"                         # The node's value
    NODE = "node"                           # The node handle itself
    VALUE_WITH_DEPTH = "value_with_depth"   # (value, depth) pairs
    CUSTOM = "custom"                       # Result of a user visitor


@dataclass
class DepthConfig:
    """Configuration for depth-based filtering."""

    min_depth: int = 0                  # Minimum depth to yield
    max_depth: Optional[int] = None     # Maximum depth to traverse

    def should_yield(self, depth: int) -> bool:
        """Check if nodes at this depth should be yielded.

        Args:
            depth: Current depth (root = 0)

        Returns:
            True if depth is within configured range
        """
        if depth < self.min_depth:
            return False
        if self.max_depth is not None and depth > self.max_depth:
            return False
        return True

    def should_explore(self, depth: int) -> bool:
        """Check if children of a node at this depth should be explored."""
        if self.max_depth is not None:
            return depth < self.max_depth
        return True


@dataclass
class TraversalConfig:
    """Complete configuration for a tree traversal.

    The TraversalPlan validates this configuration and assembles the
    traverser and collector that carry it out.
    """

    order: TraversalOrder = TraversalOrder.IN_ORDER
    depth: DepthConfig = field(default_factory=DepthConfig)
    collect: CollectMode = CollectMode.VALUE

    # Called with each node when collect is CUSTOM
    visitor: Optional[Callable[[Any], Any]] = None

    @classmethod
    def sorted_values(cls) -> 'TraversalConfig':
        """Config producing the tree's values in ascending order."""
        return cls(order=TraversalOrder.IN_ORDER, collect=CollectMode.VALUE)

    @classmethod
    def levels(cls, max_depth: Optional[int] = None) -> 'TraversalConfig':
        """Config producing (value, depth) pairs breadth-first.

        Args:
            max_depth: Deepest level to report (None = whole tree)

        Returns:
            TraversalConfig for level scanning
        """
        return cls(
            order=TraversalOrder.LEVEL_ORDER,
            depth=DepthConfig(max_depth=max_depth),
            collect=CollectMode.VALUE_WITH_DEPTH,
        )

    @classmethod
    def visiting(cls, visitor: Callable[[Any], Any],
                 order: TraversalOrder = TraversalOrder.IN_ORDER) -> 'TraversalConfig':
        """Config calling visitor on every node in the given order."""
        return cls(order=order, collect=CollectMode.CUSTOM, visitor=visitor)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.order, TraversalOrder):
            errors.append(f"order must be a TraversalOrder, got {self.order!r}")

        if not isinstance(self.collect, CollectMode):
            errors.append(f"collect must be a CollectMode, got {self.collect!r}")

        if self.depth.min_depth < 0:
            errors.append("min_depth cannot be negative")

        if self.depth.max_depth is not None:
            if self.depth.max_depth < 0:
                errors.append("max_depth cannot be negative")
            if self.depth.max_depth < self.depth.min_depth:
                errors.append("max_depth cannot be less than min_depth")

        if self.collect == CollectMode.CUSTOM and self.visitor is None:
            errors.append("visitor required when collect is CUSTOM")

        if self.visitor is not None and not callable(self.visitor):
            errors.append("visitor must be callable")

        return errors
