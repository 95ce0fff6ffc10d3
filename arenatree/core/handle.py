"""NodeId - the opaque handle used to name nodes in an arena."""

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class NodeId:
    """Opaque handle naming one node in one tree.

    A NodeId records the arena slot it was issued for together with the
    slot's generation at allocation time. Once the node is removed the
    slot's generation moves on, so the old id stops resolving even if the
    slot is later reused for a new node.

    Callers never build these themselves; they come back from
    ``Tree.insert`` and are passed to every other tree operation.
    Ordering follows the slot index first.
    """

    index: int
    generation: int = 0
    arena_id: int = 0

    def __repr__(self) -> str:
        return f"NodeId({self.index}v{self.generation})"
