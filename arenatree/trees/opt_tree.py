"""Sibling-linked tree.

Each OptNode knows its parent, its first and last child, and its previous
and next sibling. Appending a child, detaching a subtree and re-attaching
it all touch a fixed number of nodes; no other node's storage moves.
"""

from typing import Any, Iterator, List, Optional

from ..core.handle import NodeId
from ..core.node import OptNode
from ..core.tree import Tree
from ..errors import TreeCorruptionError


class OptTree(Tree):
    """Tree of OptNodes linked through parent and sibling pointers.

    Example:
        tree = OptTree()
        root = tree.insert(1, InsertBehavior.AsRoot)
        a = tree.insert(2, InsertBehavior.UnderNode(root))
        b = tree.insert(3, InsertBehavior.UnderNode(root))
        assert tree.get(a).next_sibling == b
    """

    def _new_node(self, data: Any) -> OptNode:
        return OptNode(data)

    def _iter_child_ids(self, node_id: NodeId) -> Iterator[NodeId]:
        child_id = self._arena.get(node_id).first_child
        while child_id is not None:
            next_id = self._arena.get(child_id).next_sibling
            yield child_id
            child_id = next_id

    def _append_child(self, parent_id: NodeId, child_id: NodeId) -> None:
        parent = self._arena.get_unchecked_mut(parent_id)
        child = self._arena.get_unchecked_mut(child_id)
        child._parent = parent_id

        last_id = parent._last_child
        if last_id is None:
            if parent._first_child is not None:
                raise TreeCorruptionError("Found an OptNode with a first child but no last child")
            parent._first_child = child_id
        else:
            if parent._first_child is None:
                raise TreeCorruptionError("Found an OptNode with a last child but no first child")
            last = self._arena.get_unchecked_mut(last_id)
            last._next_sibling = child_id
            child._prev_sibling = last_id
        parent._last_child = child_id

    def _unlink_range(self, node: OptNode, first_id: Optional[NodeId],
                      last_id: Optional[NodeId]) -> None:
        """Point ``node``'s neighbours (or its parent) at ``first_id``/``last_id``.

        With both set to None the node simply drops out of the sibling list.
        """
        parent = self._arena.get_unchecked_mut(node._parent)
        prev_id, next_id = node._prev_sibling, node._next_sibling
        head = first_id if first_id is not None else next_id
        tail = last_id if last_id is not None else prev_id

        if prev_id is None:
            parent._first_child = head
        else:
            self._arena.get_unchecked_mut(prev_id)._next_sibling = head
        if next_id is None:
            parent._last_child = tail
        else:
            self._arena.get_unchecked_mut(next_id)._prev_sibling = tail

        if first_id is not None:
            self._arena.get_unchecked_mut(first_id)._prev_sibling = prev_id
            self._arena.get_unchecked_mut(last_id)._next_sibling = next_id

        node._parent = None
        node._prev_sibling = None
        node._next_sibling = None

    def _detach(self, node_id: NodeId) -> None:
        node = self._arena.get_unchecked_mut(node_id)
        self._unlink_range(node, None, None)

    def _replace_with_children(self, node_id: NodeId) -> None:
        node = self._arena.get_unchecked_mut(node_id)
        first_id, last_id = node._first_child, node._last_child

        child_id = first_id
        while child_id is not None:
            child = self._arena.get_unchecked_mut(child_id)
            child._parent = node._parent
            child_id = child._next_sibling

        self._unlink_range(node, first_id, last_id)
        node._first_child = None
        node._last_child = None

    def _set_children(self, parent_id: NodeId, child_ids: List[NodeId]) -> None:
        parent = self._arena.get_unchecked_mut(parent_id)
        prev_id = None
        for child_id in child_ids:
            child = self._arena.get_unchecked_mut(child_id)
            child._parent = parent_id
            child._prev_sibling = prev_id
            if prev_id is not None:
                self._arena.get_unchecked_mut(prev_id)._next_sibling = child_id
            prev_id = child_id
        if prev_id is not None:
            self._arena.get_unchecked_mut(prev_id)._next_sibling = None

        parent._first_child = child_ids[0] if child_ids else None
        parent._last_child = prev_id
