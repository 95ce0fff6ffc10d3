"""Core abstractions for arenatree.

This package holds the arena, the handle type, node representations,
the abstract Tree and the traversal iterators.
"""

from .handle import NodeId
from .arena import Arena
from .node import Node, OptNode, VecNode
from .tree import Tree
from .traverser import (
    TreeTraverser,
    Ancestors,
    Children,
    PreOrderTraversal,
    PostOrderTraversal,
    LevelOrderTraversal,
)

__all__ = [
    "NodeId",
    "Arena",
    "Node",
    "OptNode",
    "VecNode",
    "Tree",
    "TreeTraverser",
    "Ancestors",
    "Children",
    "PreOrderTraversal",
    "PostOrderTraversal",
    "LevelOrderTraversal",
]
