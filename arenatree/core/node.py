"""Node representations stored in the arena.

A node is a data container plus structural links to other nodes, always
expressed as NodeIds. The links are read-only for callers; only the tree
that owns the node rewrites them, which keeps the shape invariants in one
place. The ``data`` attribute is free for callers to change.
"""

from typing import Any, List, Optional, Tuple

from .handle import NodeId


class Node:
    """Base node: user data plus a parent link."""

    __slots__ = ("data", "_parent")

    def __init__(self, data: Any):
        self.data = data
        self._parent: Optional[NodeId] = None

    @property
    def parent(self) -> Optional[NodeId]:
        return self._parent

    def is_root(self) -> bool:
        return self._parent is None

    def is_leaf(self) -> bool:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(data={self.data!r})"


class OptNode(Node):
    """Node linked into a doubly-linked sibling list.

    The parent keeps only its first and last child; each child knows its
    neighbours. Appending, detaching and re-attaching touch a constant
    number of nodes regardless of how many siblings there are.
    """

    __slots__ = ("_first_child", "_last_child", "_prev_sibling", "_next_sibling")

    def __init__(self, data: Any):
        super().__init__(data)
        self._first_child: Optional[NodeId] = None
        self._last_child: Optional[NodeId] = None
        self._prev_sibling: Optional[NodeId] = None
        self._next_sibling: Optional[NodeId] = None

    @property
    def first_child(self) -> Optional[NodeId]:
        return self._first_child

    @property
    def last_child(self) -> Optional[NodeId]:
        return self._last_child

    @property
    def prev_sibling(self) -> Optional[NodeId]:
        return self._prev_sibling

    @property
    def next_sibling(self) -> Optional[NodeId]:
        return self._next_sibling

    def is_leaf(self) -> bool:
        return self._first_child is None


class VecNode(Node):
    """Node that keeps its children as an ordered list of ids."""

    __slots__ = ("_children",)

    def __init__(self, data: Any):
        super().__init__(data)
        self._children: List[NodeId] = []

    @property
    def children(self) -> Tuple[NodeId, ...]:
        return tuple(self._children)

    def is_leaf(self) -> bool:
        return not self._children
