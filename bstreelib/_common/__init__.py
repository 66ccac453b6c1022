"""Common components shared across bstreelib.

This internal package holds pure-data configuration with no dependency
on the tree engine. It should NOT be imported directly by users.

Important: This package must NEVER import from bstreelib.core to avoid
circular dependencies.
"""

from .config import (
    TraversalOrder,
    CollectMode,
    DepthConfig,
    TraversalConfig,
    ORDER_NAMES,
    parse_order,
)

__all__ = [
    'TraversalOrder',
    'CollectMode',
    'DepthConfig',
    'TraversalConfig',
    'ORDER_NAMES',
    'parse_order',
]
