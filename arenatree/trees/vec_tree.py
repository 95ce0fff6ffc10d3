"""Vector-backed tree.

Each VecNode keeps its children as a Python list of NodeIds. Appending is
O(1); detaching costs a scan of the parent's child list. Child lookup by
position is direct, which suits wide, mostly read-only trees.
"""

from typing import Any, Iterator, List

from ..core.handle import NodeId
from ..core.node import VecNode
from ..core.tree import Tree


class VecTree(Tree):
    """Tree of VecNodes storing child lists directly."""

    def _new_node(self, data: Any) -> VecNode:
        return VecNode(data)

    def _iter_child_ids(self, node_id: NodeId) -> Iterator[NodeId]:
        return iter(tuple(self._arena.get(node_id)._children))

    def _append_child(self, parent_id: NodeId, child_id: NodeId) -> None:
        parent = self._arena.get_unchecked_mut(parent_id)
        child = self._arena.get_unchecked_mut(child_id)
        child._parent = parent_id
        parent._children.append(child_id)

    def _detach(self, node_id: NodeId) -> None:
        node = self._arena.get_unchecked_mut(node_id)
        parent = self._arena.get_unchecked_mut(node._parent)
        parent._children.remove(node_id)
        node._parent = None

    def _replace_with_children(self, node_id: NodeId) -> None:
        node = self._arena.get_unchecked_mut(node_id)
        parent_id = node._parent
        parent = self._arena.get_unchecked_mut(parent_id)
        for child_id in node._children:
            self._arena.get_unchecked_mut(child_id)._parent = parent_id
        position = parent._children.index(node_id)
        parent._children[position:position + 1] = node._children
        node._children = []
        node._parent = None

    def _set_children(self, parent_id: NodeId, child_ids: List[NodeId]) -> None:
        parent = self._arena.get_unchecked_mut(parent_id)
        for child_id in child_ids:
            self._arena.get_unchecked_mut(child_id)._parent = parent_id
        parent._children = list(child_ids)

    def child_at(self, node_id: NodeId, position: int) -> NodeId:
        """Return the id of the child at ``position`` (negative counts from the end).

        Raises:
            HandleInvalidError: If node_id does not resolve
            IndexError: If the node has no child at that position
        """
        return self._arena.get(node_id)._children[position]
