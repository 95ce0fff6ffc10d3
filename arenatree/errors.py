"""Exception types raised by arenatree.

Every validating operation raises one of the ``TreeError`` subclasses
before it touches the tree, so catching them never leaves a half-finished
mutation behind.
"""


class TreeError(Exception):
    """Base class for all caller-facing tree errors."""
    pass


class HandleInvalidError(TreeError):
    """Raised when a NodeId does not resolve to a live node.

    This covers ids whose slot is out of range, currently free, reused
    by a later node (generation mismatch), or owned by a different tree.
    """
    pass


class InvalidOperationError(TreeError):
    """Raised when a structural change would break the tree's shape."""
    pass


class TreeConfigError(TreeError, ValueError):
    """Raised when a TreeConfig fails validation."""
    pass


class TreeCorruptionError(RuntimeError):
    """Internal inconsistency found by an unchecked accessor.

    This is a bug in arenatree itself, not something callers are
    expected to handle.
    """
    pass
