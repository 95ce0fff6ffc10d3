"""Tree abstraction for arenatree.

The Tree is the public facade over an Arena. It owns no state of its own
beyond the arena; everything it does is validation followed by link
surgery on the nodes stored there.

The structural algorithms (insert, remove, move, swap, sort, traversal)
live here once. Concrete trees only decide how a node stores its children
by implementing a handful of link primitives:

- ``_new_node``: build an empty node for some data
- ``_iter_child_ids``: walk a node's children in order
- ``_append_child``: attach a detached node as the last child
- ``_detach``: unlink a non-root node from its parent and siblings
- ``_replace_with_children``: put a node's children where the node was
- ``_set_children``: rewrite a node's full child order

Every public method validates all NodeIds and preconditions before it
calls any primitive, so a raised error means nothing changed.
"""

import functools
import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Iterator, List, Optional

from ..behaviors import (
    InsertBehavior,
    RemoveBehavior,
    SwapBehavior,
    _AsRoot,
    _ToParent,
    _ToRoot,
    _UnderNode,
)
from ..config import TreeConfig
from ..errors import InvalidOperationError, TreeConfigError
from .arena import Arena
from .handle import NodeId
from .node import Node
from .traverser import (
    Ancestors,
    Children,
    LevelOrderTraversal,
    PostOrderTraversal,
    PreOrderTraversal,
)

logger = logging.getLogger(__name__)


class Tree(ABC):
    """Abstract arena-backed tree.

    Nodes are named by NodeIds handed out from ``insert``. A NodeId stays
    valid until its node is removed; after that every operation given the
    old id raises HandleInvalidError, even if the slot has been reused.

    Not thread-safe. Traversers returned by this class must not be alive
    across a mutating call.
    """

    def __init__(self, config: Optional[TreeConfig] = None):
        """Initialize a tree.

        Args:
            config: Optional pre-sizing and bootstrap options

        Raises:
            TreeConfigError: If the config does not validate
        """
        config = config or TreeConfig()
        config_errors = config.validate()
        if config_errors:
            raise TreeConfigError(
                f"Invalid configuration: {'; '.join(config_errors)}"
            )

        self._arena = Arena(
            node_capacity=config.initial_node_capacity,
            free_list_capacity=config.initial_free_list_capacity,
        )
        if config.root is not None:
            self.insert(config.root, InsertBehavior.AsRoot)

    # ------------------------------------------------------------------
    # Link primitives
    # ------------------------------------------------------------------

    @abstractmethod
    def _new_node(self, data: Any) -> Node:
        """Create a detached node holding ``data``."""
        pass

    @abstractmethod
    def _iter_child_ids(self, node_id: NodeId) -> Iterator[NodeId]:
        """Yield the children of ``node_id`` in sibling order."""
        pass

    @abstractmethod
    def _append_child(self, parent_id: NodeId, child_id: NodeId) -> None:
        """Attach detached ``child_id`` as the last child of ``parent_id``."""
        pass

    @abstractmethod
    def _detach(self, node_id: NodeId) -> None:
        """Unlink ``node_id`` from its parent; its subtree stays attached to it."""
        pass

    @abstractmethod
    def _replace_with_children(self, node_id: NodeId) -> None:
        """Splice the children of ``node_id`` into its place and detach it."""
        pass

    @abstractmethod
    def _set_children(self, parent_id: NodeId, child_ids: List[NodeId]) -> None:
        """Make ``child_ids`` the complete ordered child list of ``parent_id``."""
        pass

    def _child_ids(self, node_id: NodeId) -> List[NodeId]:
        return list(self._iter_child_ids(node_id))

    # ------------------------------------------------------------------
    # Access
    # ------------------------------------------------------------------

    def get(self, node_id: NodeId) -> Node:
        """Return the node for ``node_id``.

        Raises:
            HandleInvalidError: If node_id does not resolve
        """
        return self._arena.get(node_id)

    def get_mut(self, node_id: NodeId) -> Node:
        """Same as ``get``; the returned node's ``data`` may be assigned."""
        return self._arena.get_mut(node_id)

    def get_unchecked(self, node_id: NodeId) -> Node:
        """Return the node for ``node_id`` without validating it.

        The caller guarantees ``node_id`` is live. Breaking that promise
        raises TreeCorruptionError or returns an unrelated node.
        """
        return self._arena.get_unchecked(node_id)

    def get_unchecked_mut(self, node_id: NodeId) -> Node:
        return self._arena.get_unchecked_mut(node_id)

    def root_node_id(self) -> Optional[NodeId]:
        return self._arena.root

    def __len__(self) -> int:
        return len(self._arena)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._arena

    def is_empty(self) -> bool:
        return self._arena.root is None

    def height(self) -> int:
        """Number of levels in the tree (0 when empty, 1 for a lone root)."""
        root_id = self._arena.root
        if root_id is None:
            return 0
        height = 0
        stack = [(root_id, 1)]
        while stack:
            node_id, level = stack.pop()
            height = max(height, level)
            for child_id in self._iter_child_ids(node_id):
                stack.append((child_id, level + 1))
        return height

    def depth(self, node_id: NodeId) -> int:
        """Number of edges between ``node_id`` and the root."""
        return sum(1 for _ in self.ancestor_ids(node_id)) - 1

    def is_ancestor(self, ancestor_id: NodeId, node_id: NodeId) -> bool:
        """Check whether ``ancestor_id`` is a proper ancestor of ``node_id``.

        Raises:
            HandleInvalidError: If either id does not resolve
        """
        self._arena.validate(ancestor_id)
        current = self._arena.get(node_id).parent
        while current is not None:
            if current == ancestor_id:
                return True
            current = self._arena.get_unchecked(current).parent
        return False

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def insert(self, data: Any, behavior: Any) -> NodeId:
        """Insert a new node holding ``data``.

        Args:
            data: Data for the new node
            behavior: ``InsertBehavior.AsRoot`` or
                ``InsertBehavior.UnderNode(parent_id)``

        Returns:
            NodeId of the new node

        Raises:
            HandleInvalidError: If the UnderNode parent does not resolve
        """
        if isinstance(behavior, _UnderNode):
            self._arena.validate(behavior.parent)
            new_id = self._arena.allocate(self._new_node(data))
            self._append_child(behavior.parent, new_id)
            return new_id

        if isinstance(behavior, _AsRoot):
            new_id = self._arena.allocate(self._new_node(data))
            self._attach_as_root(new_id)
            return new_id

        raise TypeError(f"Unknown insert behavior: {behavior!r}")

    def _attach_as_root(self, node_id: NodeId) -> None:
        """Make a detached node the root; the old root becomes its last child."""
        old_root = self._arena.root
        self._arena.set_root(node_id)
        if old_root is not None:
            logger.debug("Replacing root %r with %r", old_root, node_id)
            self._append_child(node_id, old_root)

    def remove(self, node_id: NodeId, behavior: RemoveBehavior) -> Any:
        """Remove a node and return its data.

        Args:
            node_id: Node to remove
            behavior: ``RemoveBehavior.DropChildren`` frees the whole subtree
                (descendant data is discarded). ``RemoveBehavior.LiftChildren``
                puts the node's children where the node was.

        Returns:
            The removed node's data

        Raises:
            HandleInvalidError: If node_id does not resolve
            InvalidOperationError: If lifting the children of a root that
                has more than one child
        """
        node = self._arena.get(node_id)

        if behavior is RemoveBehavior.DropChildren:
            if node.parent is None:
                self._arena.set_root(None)
            else:
                self._detach(node_id)
            freed = 0
            stack = [node_id]
            while stack:
                current = stack.pop()
                stack.extend(self._iter_child_ids(current))
                self._arena.free(current)
                freed += 1
            logger.debug("Removed %r with its subtree (%d nodes)", node_id, freed)
            return node.data

        if behavior is RemoveBehavior.LiftChildren:
            if node.parent is None:
                children = self._child_ids(node_id)
                if len(children) > 1:
                    raise InvalidOperationError(
                        f"Cannot lift {len(children)} children of root {node_id!r}: "
                        "a tree has exactly one root"
                    )
                if children:
                    self._detach(children[0])
                    self._arena.set_root(children[0])
                    logger.debug("Promoted %r to root", children[0])
                else:
                    self._arena.set_root(None)
            else:
                self._replace_with_children(node_id)
            self._arena.free(node_id)
            logger.debug("Removed %r, children lifted", node_id)
            return node.data

        raise TypeError(f"Unknown remove behavior: {behavior!r}")

    def move_node(self, node_id: NodeId, behavior: Any) -> None:
        """Move a node, together with its subtree, to a new position.

        Args:
            node_id: Node to move
            behavior: ``MoveBehavior.ToParent(parent_id)`` appends the node
                as the parent's last child. ``MoveBehavior.ToRoot`` makes it
                the root; the old root becomes its last child.

        Raises:
            HandleInvalidError: If either id does not resolve
            InvalidOperationError: If the destination is the node itself or
                lies inside its subtree
        """
        node = self._arena.get(node_id)

        if isinstance(behavior, _ToParent):
            parent_id = behavior.parent
            self._arena.validate(parent_id)
            if parent_id == node_id or self.is_ancestor(node_id, parent_id):
                raise InvalidOperationError(
                    f"Moving {node_id!r} under {parent_id!r} would create a cycle"
                )
            self._detach(node_id)
            self._append_child(parent_id, node_id)
            logger.debug("Moved %r under %r", node_id, parent_id)
            return

        if isinstance(behavior, _ToRoot):
            if node.parent is None:
                return
            self._detach(node_id)
            self._attach_as_root(node_id)
            return

        raise TypeError(f"Unknown move behavior: {behavior!r}")

    def swap_nodes(self, first_id: NodeId, second_id: NodeId,
                   behavior: SwapBehavior) -> None:
        """Exchange two nodes.

        Args:
            first_id: One node
            second_id: The other node
            behavior: ``SwapBehavior.DataOnly`` exchanges stored data and
                leaves every link alone. ``SwapBehavior.Subtrees`` exchanges
                the nodes' positions, each taking its descendants along.

        Raises:
            HandleInvalidError: If either id does not resolve
            InvalidOperationError: If swapping subtrees where one node is an
                ancestor of the other
        """
        first = self._arena.get(first_id)
        second = self._arena.get(second_id)

        if behavior is SwapBehavior.DataOnly:
            first.data, second.data = second.data, first.data
            return

        if behavior is not SwapBehavior.Subtrees:
            raise TypeError(f"Unknown swap behavior: {behavior!r}")

        if first_id == second_id:
            return
        if self.is_ancestor(first_id, second_id) or self.is_ancestor(second_id, first_id):
            raise InvalidOperationError(
                f"Cannot swap {first_id!r} and {second_id!r}: one contains the other"
            )

        # Neither can be the root here, the root is an ancestor of everything.
        first_parent, second_parent = first.parent, second.parent
        if first_parent == second_parent:
            order = self._child_ids(first_parent)
            i, j = order.index(first_id), order.index(second_id)
            order[i], order[j] = order[j], order[i]
            self._set_children(first_parent, order)
        else:
            first_order = [second_id if c == first_id else c
                           for c in self._iter_child_ids(first_parent)]
            second_order = [first_id if c == second_id else c
                            for c in self._iter_child_ids(second_parent)]
            self._set_children(first_parent, first_order)
            self._set_children(second_parent, second_order)
        logger.debug("Swapped subtrees %r and %r", first_id, second_id)

    def sort_children_by(self, node_id: NodeId,
                         compare: Callable[[Node, Node], int]) -> None:
        """Stable-sort the children of ``node_id`` with a comparator.

        Args:
            node_id: Parent whose children are reordered
            compare: ``compare(a, b)`` returning negative, zero or positive,
                called with child nodes
        """
        self._arena.validate(node_id)
        get = self._arena.get_unchecked
        key = functools.cmp_to_key(lambda a, b: compare(get(a), get(b)))
        self._set_children(node_id, sorted(self._iter_child_ids(node_id), key=key))

    def sort_children_by_key(self, node_id: NodeId,
                             key: Callable[[Node], Any]) -> None:
        """Stable-sort the children of ``node_id`` by ``key(child_node)``."""
        self._arena.validate(node_id)
        get = self._arena.get_unchecked
        self._set_children(
            node_id,
            sorted(self._iter_child_ids(node_id), key=lambda c: key(get(c))),
        )

    def sort_children_by_data(self, node_id: NodeId) -> None:
        """Stable-sort the children of ``node_id`` by their data."""
        self.sort_children_by_key(node_id, lambda node: node.data)

    def clear(self) -> None:
        """Remove every node. All outstanding NodeIds become invalid."""
        self._arena.clear()

    # ------------------------------------------------------------------
    # Traversal
    # ------------------------------------------------------------------

    def ancestors(self, node_id: NodeId) -> Ancestors:
        """Nodes from ``node_id`` (inclusive) up to the root."""
        self._arena.validate(node_id)
        return Ancestors(self, node_id)

    def ancestor_ids(self, node_id: NodeId) -> Ancestors:
        self._arena.validate(node_id)
        return Ancestors(self, node_id, ids=True)

    def children(self, node_id: NodeId) -> Children:
        """Child nodes of ``node_id`` in sibling order."""
        self._arena.validate(node_id)
        return Children(self, node_id)

    def children_ids(self, node_id: NodeId) -> Children:
        self._arena.validate(node_id)
        return Children(self, node_id, ids=True)

    def traverse_pre_order(self, node_id: NodeId) -> PreOrderTraversal:
        self._arena.validate(node_id)
        return PreOrderTraversal(self, node_id)

    def traverse_pre_order_ids(self, node_id: NodeId) -> PreOrderTraversal:
        self._arena.validate(node_id)
        return PreOrderTraversal(self, node_id, ids=True)

    def traverse_post_order(self, node_id: NodeId) -> PostOrderTraversal:
        self._arena.validate(node_id)
        return PostOrderTraversal(self, node_id)

    def traverse_post_order_ids(self, node_id: NodeId) -> PostOrderTraversal:
        self._arena.validate(node_id)
        return PostOrderTraversal(self, node_id, ids=True)

    def traverse_level_order(self, node_id: NodeId) -> LevelOrderTraversal:
        self._arena.validate(node_id)
        return LevelOrderTraversal(self, node_id)

    def traverse_level_order_ids(self, node_id: NodeId) -> LevelOrderTraversal:
        self._arena.validate(node_id)
        return LevelOrderTraversal(self, node_id, ids=True)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(nodes={len(self)}, root={self.root_node_id()!r})"
