"""Configuration re-export.

Public import path for the configuration components that live in
the _common package.
"""

from ._common.config import (
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
