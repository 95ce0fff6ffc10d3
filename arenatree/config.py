"""Configuration system for arenatree.

This module defines how users pre-size a tree's arena and which traversal
orders the high-level API understands. None of these options change how a
tree behaves, only how it starts out.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Optional


class TraversalStrategy(Enum):
    """Order in which a traversal visits nodes."""
    PRE_ORDER = "pre"        # Parent before children
    POST_ORDER = "post"      # Children before parent
    LEVEL_ORDER = "level"    # Breadth-first, level by level


class TreeKind(Enum):
    """Node storage strategy backing a tree."""
    LINKED = "opt"      # Sibling-linked nodes (OptTree)
    VECTOR = "vec"      # Child list per node (VecTree)


@dataclass
class TreeConfig:
    """Construction options for a Tree.

    Attributes:
        initial_node_capacity: Number of arena slots to create up front.
            Pre-created slots start out vacant and are handed out before
            the arena grows.
        initial_free_list_capacity: Expected number of removals to hold
            freed slots for. Recorded for introspection only.
        root: Data for an initial root node. ``None`` builds an empty tree.
    """

    initial_node_capacity: int = 0
    initial_free_list_capacity: int = 0
    root: Optional[Any] = None

    @classmethod
    def with_root(cls, data: Any, node_capacity: int = 0) -> 'TreeConfig':
        """Create config for a tree that starts with a root node.

        Args:
            data: Data stored in the root node
            node_capacity: Arena slots to reserve

        Returns:
            TreeConfig bootstrapping a single root
        """
        return cls(initial_node_capacity=node_capacity, root=data)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.initial_node_capacity, int) or isinstance(self.initial_node_capacity, bool):
            errors.append("initial_node_capacity must be an integer")
        elif self.initial_node_capacity < 0:
            errors.append("initial_node_capacity cannot be negative")

        if not isinstance(self.initial_free_list_capacity, int) or isinstance(self.initial_free_list_capacity, bool):
            errors.append("initial_free_list_capacity must be an integer")
        elif self.initial_free_list_capacity < 0:
            errors.append("initial_free_list_capacity cannot be negative")

        return errors
