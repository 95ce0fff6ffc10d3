"""Tree traversal iterators for arenatree.

Every traverser borrows a tree and a starting NodeId and walks node links
lazily. None of them recurse: depth-first orders keep an explicit stack and
level order keeps a FIFO queue, so very deep trees cannot exhaust the call
stack.

Traversers are single-pass. Ask the tree for a fresh one to start over.
They only read the tree; mutating it while a traverser is alive is a
caller error and gives undefined results.
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import TYPE_CHECKING, Any, Deque, Iterator, List, Tuple

from .handle import NodeId

if TYPE_CHECKING:
    from .tree import Tree


class TreeTraverser(ABC):
    """Abstract base class for lazy tree walks.

    Subclasses implement ``_walk`` to produce NodeIds in their order. The
    base class turns those ids into nodes unless ``ids=True`` was asked for.
    """

    def __init__(self, tree: "Tree", node_id: NodeId, ids: bool = False):
        """Initialize traverser.

        Args:
            tree: Tree to walk; ``node_id`` must already be validated
            node_id: Starting node
            ids: Yield NodeIds instead of nodes
        """
        self.tree = tree
        self.start = node_id
        self.ids = ids
        self._walker = self._walk()

    @abstractmethod
    def _walk(self) -> Iterator[NodeId]:
        """Yield NodeIds in traversal order."""
        pass

    def __iter__(self) -> "TreeTraverser":
        return self

    def __next__(self) -> Any:
        node_id = next(self._walker)
        if self.ids:
            return node_id
        return self.tree.get(node_id)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(start={self.start!r}, ids={self.ids})"


class Ancestors(TreeTraverser):
    """The starting node, then its parent, and so on up to the root.

    Each step re-validates the id it is about to yield, so a handle that
    went stale since the walk started raises HandleInvalidError exactly at
    that step.
    """

    def _walk(self) -> Iterator[NodeId]:
        current = self.start
        while current is not None:
            node = self.tree.get(current)
            yield current
            current = node.parent


class Children(TreeTraverser):
    """Direct children of the starting node in sibling order."""

    def _walk(self) -> Iterator[NodeId]:
        return self.tree._iter_child_ids(self.start)


class PreOrderTraversal(TreeTraverser):
    """Depth-first, node before its children.

    Children are pushed in reverse sibling order so the leftmost child is
    popped first.
    """

    def _walk(self) -> Iterator[NodeId]:
        stack: List[NodeId] = [self.start]
        while stack:
            node_id = stack.pop()
            yield node_id
            stack.extend(reversed(self.tree._child_ids(node_id)))


class PostOrderTraversal(TreeTraverser):
    """Depth-first, children before their parent.

    Uses a single stack of ``(node_id, expanded)`` pairs: a node is
    yielded the second time it is popped, after its children were pushed
    above it.
    """

    def _walk(self) -> Iterator[NodeId]:
        stack: List[Tuple[NodeId, bool]] = [(self.start, False)]
        while stack:
            node_id, expanded = stack.pop()
            if expanded:
                yield node_id
                continue
            stack.append((node_id, True))
            for child_id in reversed(self.tree._child_ids(node_id)):
                stack.append((child_id, False))


class LevelOrderTraversal(TreeTraverser):
    """Breadth-first, all nodes at depth N before any at depth N+1."""

    def _walk(self) -> Iterator[NodeId]:
        queue: Deque[NodeId] = deque([self.start])
        while queue:
            node_id = queue.popleft()
            yield node_id
            queue.extend(self.tree._child_ids(node_id))
