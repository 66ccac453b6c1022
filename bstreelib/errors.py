"""Exceptions raised by bstreelib.

Missing values are never errors: inserting an existing value or deleting
an absent one is a no-op, and lookups report absence with None or -1.
"""


class BSTError(Exception):
    """Base class for all bstreelib errors."""
    pass


class EmptyTreeError(BSTError, ValueError):
    """Raised when an operation needs at least one value but the tree is empty."""
    pass


class InvalidConfigurationError(BSTError, ValueError):
    """Raised when a TraversalConfig fails validation."""
    pass
