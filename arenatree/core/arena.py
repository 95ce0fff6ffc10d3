"""Slot arena that owns every node of one tree.

The arena is a growable table of optional node slots plus a stack of
freed slot indices. It hands out NodeIds, checks them on the way back in,
and is the only place node storage is created or released.
"""

import itertools
import logging
from typing import Any, Iterator, List, Optional

from ..errors import HandleInvalidError, TreeCorruptionError
from .handle import NodeId

logger = logging.getLogger(__name__)

_arena_ids = itertools.count(1)


class Arena:
    """Slot storage with free-list reuse and generation-stamped ids.

    Invariants:
    - ``_nodes[i] is None`` iff slot ``i`` is free
    - ``_free_ids`` holds exactly the free slot indices
    - ``_root`` is None iff no root has been set
    """

    def __init__(self, node_capacity: int = 0, free_list_capacity: int = 0):
        """Initialize an empty arena.

        Args:
            node_capacity: Vacant slots to create up front
            free_list_capacity: Expected number of freed slots (informational)
        """
        self._arena_id = next(_arena_ids)
        self._nodes: List[Optional[Any]] = [None] * node_capacity
        self._generations: List[int] = [0] * node_capacity
        # Reversed so slot 0 is handed out first
        self._free_ids: List[int] = list(range(node_capacity - 1, -1, -1))
        self._root: Optional[NodeId] = None
        self.free_list_capacity = free_list_capacity

    @property
    def root(self) -> Optional[NodeId]:
        return self._root

    def set_root(self, node_id: Optional[NodeId]) -> None:
        self._root = node_id

    @property
    def capacity(self) -> int:
        """Total slots, occupied or free."""
        return len(self._nodes)

    @property
    def free_count(self) -> int:
        return len(self._free_ids)

    def __len__(self) -> int:
        return len(self._nodes) - len(self._free_ids)

    def __contains__(self, node_id: object) -> bool:
        return isinstance(node_id, NodeId) and self.is_valid(node_id)

    def allocate(self, node: Any) -> NodeId:
        """Store a node, reusing a freed slot when one is available.

        Args:
            node: Node to store

        Returns:
            NodeId naming the new slot contents
        """
        if self._free_ids:
            index = self._free_ids.pop()
            self._nodes[index] = node
        else:
            index = len(self._nodes)
            self._nodes.append(node)
            self._generations.append(0)
        return NodeId(index, self._generations[index], self._arena_id)

    def free(self, node_id: NodeId) -> Any:
        """Release a slot and return the node it held.

        The slot's generation is bumped so ``node_id`` and any copies of it
        stop resolving.

        Raises:
            HandleInvalidError: If node_id does not resolve
        """
        self.validate(node_id)
        index = node_id.index
        node = self._nodes[index]
        self._nodes[index] = None
        self._generations[index] += 1
        self._free_ids.append(index)
        return node

    def is_valid(self, node_id: NodeId) -> bool:
        index = node_id.index
        return (node_id.arena_id == self._arena_id
                and 0 <= index < len(self._nodes)
                and self._nodes[index] is not None
                and self._generations[index] == node_id.generation)

    def validate(self, node_id: NodeId) -> None:
        """Check that a NodeId names a live node in this arena.

        Raises:
            HandleInvalidError: If the id is foreign, out of range, freed or stale
        """
        if not isinstance(node_id, NodeId):
            raise HandleInvalidError(f"Expected a NodeId, got {type(node_id).__name__}")
        if node_id.arena_id != self._arena_id:
            raise HandleInvalidError(f"{node_id!r} belongs to a different tree")
        index = node_id.index
        if not 0 <= index < len(self._nodes):
            raise HandleInvalidError(f"{node_id!r} is out of range")
        if self._nodes[index] is None:
            raise HandleInvalidError(f"{node_id!r} refers to a removed node")
        if self._generations[index] != node_id.generation:
            raise HandleInvalidError(f"{node_id!r} is stale; its slot has been reused")

    def get(self, node_id: NodeId) -> Any:
        """Validate ``node_id`` and return its node."""
        self.validate(node_id)
        return self._nodes[node_id.index]

    # Python has no shared/exclusive borrow split; both return the live node.
    get_mut = get

    def get_unchecked(self, node_id: NodeId) -> Any:
        """Return a node without validating the id.

        Only for call sites that validated ``node_id`` earlier in the same
        operation.

        Raises:
            TreeCorruptionError: If the slot turns out to be empty
        """
        node = self._nodes[node_id.index]
        if node is None:
            raise TreeCorruptionError(
                f"get_unchecked() called with an invalid NodeId {node_id!r}; "
                "please report this as a bug"
            )
        return node

    get_unchecked_mut = get_unchecked

    def node_ids(self) -> Iterator[NodeId]:
        """Iterate ids of all occupied slots in slot order."""
        for index, node in enumerate(self._nodes):
            if node is not None:
                yield NodeId(index, self._generations[index], self._arena_id)

    def free_ids(self) -> List[int]:
        """Snapshot of the free slot indices (top of stack last)."""
        return list(self._free_ids)

    def clear(self) -> None:
        """Free every slot, invalidating all outstanding ids."""
        logger.debug("Clearing arena %d with %d live nodes", self._arena_id, len(self))
        for index, node in enumerate(self._nodes):
            if node is not None:
                self._nodes[index] = None
                self._generations[index] += 1
                self._free_ids.append(index)
        self._root = None

    def __repr__(self) -> str:
        return f"Arena(id={self._arena_id}, live={len(self)}, capacity={self.capacity})"
