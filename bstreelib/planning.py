"""Execution planning for bstreelib traversals.

A TraversalPlan validates a TraversalConfig up front and assembles the
traverser and collector that carry it out, so a bad configuration fails
before any node is visited.
"""

import logging
from typing import Any, Dict, Iterator, Optional, Tuple

from .config import TraversalConfig, CollectMode
from .core.node import Node
from .core.traverser import TreeTraverser, traverser_for
from .core.collector import (
    DataCollector,
    ValueCollector,
    NodeCollector,
    DepthCollector,
    VisitorCollector,
)
from .errors import InvalidConfigurationError

logger = logging.getLogger(__name__)


class TraversalPlan:
    """Validated execution plan for a tree traversal.

    Example:
        >>> plan = TraversalPlan(TraversalConfig.levels(max_depth=1))
        >>> list(data for _, data in plan.execute(Tree([1, 2, 3]).root))
        [(2, 0), (1, 1), (3, 1)]
    """

    def __init__(self, config: Optional[TraversalConfig] = None):
        """Create and validate an execution plan.

        Args:
            config: Traversal configuration (default: ascending values)

        Raises:
            InvalidConfigurationError: If the configuration is inconsistent
        """
        self.config = config or TraversalConfig.sorted_values()

        config_errors = self.config.validate()
        if config_errors:
            raise InvalidConfigurationError(
                f"Invalid configuration: {'; '.join(config_errors)}"
            )

        self.traverser = self._select_traverser()
        self.collector = self._select_collector()
        self.nodes_processed = 0

        logger.debug("Planned traversal: %s", self.get_summary())

    def _select_traverser(self) -> TreeTraverser:
        return traverser_for(self.config.order)

    def _select_collector(self) -> DataCollector:
        if self.config.collect == CollectMode.CUSTOM:
            return VisitorCollector(self.config.visitor)

        collector_map = {
            CollectMode.VALUE: ValueCollector,
            CollectMode.NODE: NodeCollector,
            CollectMode.VALUE_WITH_DEPTH: DepthCollector,
        }
        return collector_map[self.config.collect]()

    def execute(self, root: Optional[Node]) -> Iterator[Tuple[Node, Any]]:
        """Execute the traversal plan.

        Args:
            root: Root node to start traversal from (None = empty tree)

        Yields:
            Tuples of (node, collected_data)
        """
        self.nodes_processed = 0

        for node, depth in self.traverser.traverse(root, window=self.config.depth):
            data = self.collector.collect(node, depth)
            self.nodes_processed += 1
            yield (node, data)

    def get_summary(self) -> Dict[str, Any]:
        """Get summary of execution plan.

        Returns:
            Dictionary with plan details
        """
        return {
            'order': self.config.order.value,
            'collect': self.config.collect.value,
            'max_depth': self.config.depth.max_depth,
            'min_depth': self.config.depth.min_depth,
            'traverser': self.traverser.__class__.__name__,
            'collector': self.collector.__class__.__name__,
        }
