"""Behavior selectors for tree mutations.

Each mutating Tree method takes one of these to say *how* the change
should be applied. Variants that carry a target node are small frozen
dataclasses, the rest are plain enum members or singletons.

Example:
    root = tree.insert("root", InsertBehavior.AsRoot)
    child = tree.insert("child", InsertBehavior.UnderNode(root))
    tree.remove(child, RemoveBehavior.DropChildren)
"""

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .core.handle import NodeId


@dataclass(frozen=True)
class _AsRoot:
    """Insert the node as the new root."""

    def __repr__(self) -> str:
        return "InsertBehavior.AsRoot"


@dataclass(frozen=True)
class _UnderNode:
    """Insert the node as the last child of ``parent``."""
    parent: "NodeId"


class InsertBehavior:
    """Where ``Tree.insert`` places a new node."""
    AsRoot = _AsRoot()
    UnderNode = _UnderNode


class RemoveBehavior(Enum):
    """What happens to the children of a removed node."""
    DropChildren = "drop_children"    # Free the whole subtree
    LiftChildren = "lift_children"    # Splice children into the node's place


@dataclass(frozen=True)
class _ToRoot:
    """Move the node to the root position."""

    def __repr__(self) -> str:
        return "MoveBehavior.ToRoot"


@dataclass(frozen=True)
class _ToParent:
    """Move the node to be the last child of ``parent``."""
    parent: "NodeId"


class MoveBehavior:
    """Where ``Tree.move_node`` re-attaches a node."""
    ToRoot = _ToRoot()
    ToParent = _ToParent


class SwapBehavior(Enum):
    """What ``Tree.swap_nodes`` exchanges."""
    DataOnly = "data_only"    # Only the stored data, links untouched
    Subtrees = "subtrees"     # Positions, each node carrying its descendants
