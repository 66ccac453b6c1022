"""Data collection strategies for bstreelib.

DataCollectors decide what is produced for each node a traverser reaches.
The same walk can collect plain values, node handles, values tagged with
depth, or the result of a caller-supplied visitor.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Tuple

from .node import Node


class DataCollector(ABC):
    """Abstract base class for data collection strategies."""

    @abstractmethod
    def collect(self, node: Node, depth: int) -> Any:
        """Collect data from a node.

        Args:
            node: The node to collect data from
            depth: Current depth in traversal

        Returns:
            Collected data (type depends on collector)
        """
        pass


class ValueCollector(DataCollector):
    """Collects only node values."""

    def collect(self, node: Node, depth: int) -> Any:
        return node.value


class NodeCollector(DataCollector):
    """Collects the node handles themselves.

    Useful when callers need to pass nodes back into height() or depth().
    """

    def collect(self, node: Node, depth: int) -> Node:
        return node


class DepthCollector(DataCollector):
    """Collects (value, depth) pairs."""

    def collect(self, node: Node, depth: int) -> Tuple[Any, int]:
        return (node.value, depth)


class VisitorCollector(DataCollector):
    """Collector that hands every node to a user-provided visitor.

    The visitor's return value is what gets collected, so a visitor run
    purely for side effects collects None for each node.
    """

    def __init__(self, visitor: Callable[[Node], Any]):
        """Initialize with a visitor.

        Args:
            visitor: Function(node) -> Any
        """
        self.visitor = visitor

    def collect(self, node: Node, depth: int) -> Any:
        return self.visitor(node)
