"""Test fixtures for arenatree consumers.

These fixtures give controlled access to a tree's internal state for
testing purposes without making arena internals part of the public API.
"""

from typing import Any, Dict, List, Optional, Set, Tuple

from ..core.handle import NodeId
from ..core.node import OptNode, VecNode
from ..core.tree import Tree


class TreeTestHelper:
    """Public test fixture for verifying tree structure.

    Example:
        tree = OptTree()
        ...
        helper = TreeTestHelper(tree)
        helper.assert_valid()

        before = helper.snapshot()
        with pytest.raises(InvalidOperationError):
            tree.move_node(parent, MoveBehavior.ToParent(child))
        assert helper.snapshot() == before
    """

    def __init__(self, tree: Tree):
        """Initialize with the tree to inspect.

        Args:
            tree: OptTree or VecTree instance
        """
        self._tree = tree
        self._arena = tree._arena

    def live_ids(self) -> List[NodeId]:
        return list(self._arena.node_ids())

    def check_invariants(self) -> List[str]:
        """Check arena and node-link invariants.

        Returns:
            List of violations (empty if the tree is consistent)
        """
        problems = []
        arena = self._arena
        live = self.live_ids()
        live_set = set(live)

        # Arena bookkeeping
        free = arena.free_ids()
        if len(free) != len(set(free)):
            problems.append("free list contains duplicates")
        empty_slots = {i for i, node in enumerate(arena._nodes) if node is None}
        if set(free) != empty_slots:
            problems.append(
                f"free list {sorted(free)} does not match empty slots {sorted(empty_slots)}"
            )

        # Single root
        parentless = [node_id for node_id in live if arena.get(node_id).parent is None]
        root = arena.root
        if not live:
            if root is not None:
                problems.append(f"empty arena has root {root!r}")
        else:
            if len(parentless) != 1:
                problems.append(f"expected exactly one parentless node, found {parentless!r}")
            if root not in live_set:
                problems.append(f"root {root!r} is not a live node")
            elif arena.get(root).parent is not None:
                problems.append(f"root {root!r} has a parent")

        # Child lists and parent back-links
        seen_as_child: Set[NodeId] = set()
        for node_id in live:
            children, chain_problems = self._collect_children(node_id)
            problems.extend(chain_problems)
            for child_id in children:
                if child_id not in live_set:
                    problems.append(f"{node_id!r} has dead child {child_id!r}")
                    continue
                if child_id in seen_as_child:
                    problems.append(f"{child_id!r} is a child of more than one node")
                seen_as_child.add(child_id)
                if arena.get(child_id).parent != node_id:
                    problems.append(f"{child_id!r} does not point back to parent {node_id!r}")

        for node_id in live:
            parent_id = arena.get(node_id).parent
            if parent_id is not None and node_id not in seen_as_child:
                problems.append(f"{node_id!r} claims parent {parent_id!r} but is not in its children")

        # Parent chains reach the root without revisiting a node
        for node_id in live:
            visited: Set[NodeId] = set()
            current: Optional[NodeId] = node_id
            while current is not None and current in live_set:
                if current in visited:
                    problems.append(f"parent chain from {node_id!r} cycles")
                    break
                visited.add(current)
                current = arena.get(current).parent
            else:
                if current is not None:
                    problems.append(f"parent chain from {node_id!r} reaches dead {current!r}")
                elif root is not None and root not in visited:
                    problems.append(f"parent chain from {node_id!r} does not reach the root")

        return problems

    def _collect_children(self, node_id: NodeId) -> Tuple[List[NodeId], List[str]]:
        """Read a node's children straight from its links."""
        node = self._arena.get(node_id)
        if isinstance(node, VecNode):
            children = list(node.children)
            problems = []
            if len(children) != len(set(children)):
                problems.append(f"{node_id!r} lists a child twice")
            return children, problems

        if not isinstance(node, OptNode):
            return [], [f"{node_id!r} holds unknown node type {type(node).__name__}"]

        problems = []
        if (node.first_child is None) != (node.last_child is None):
            problems.append(f"{node_id!r} has only one of first_child/last_child")
            return [], problems

        forward: List[NodeId] = []
        limit = len(self._arena)
        child_id = node.first_child
        prev_id = None
        while child_id is not None:
            if len(forward) > limit or child_id not in self._arena:
                problems.append(f"sibling chain under {node_id!r} is broken or cyclic")
                return forward, problems
            child = self._arena.get(child_id)
            if child.prev_sibling != prev_id:
                problems.append(f"{child_id!r} prev_sibling is {child.prev_sibling!r}, expected {prev_id!r}")
            forward.append(child_id)
            prev_id = child_id
            child_id = child.next_sibling

        if forward and forward[-1] != node.last_child:
            problems.append(f"sibling chain under {node_id!r} does not end at last_child")

        backward: List[NodeId] = []
        child_id = node.last_child
        while child_id is not None and len(backward) <= limit and child_id in self._arena:
            backward.append(child_id)
            child_id = self._arena.get(child_id).prev_sibling
        if backward != list(reversed(forward)):
            problems.append(f"backward sibling walk under {node_id!r} disagrees with forward walk")

        return forward, problems

    def assert_valid(self) -> None:
        """Raise AssertionError listing every invariant violation."""
        problems = self.check_invariants()
        assert not problems, "Tree invariants violated:\n  " + "\n  ".join(problems)

    def snapshot(self) -> Dict[str, Any]:
        """Capture the full structural state for before/after comparison.

        Returns:
            Dictionary with the root, free list, and each live node's data
            and links keyed by NodeId
        """
        nodes = {}
        for node_id in self.live_ids():
            node = self._arena.get(node_id)
            if isinstance(node, OptNode):
                links = (node.parent, node.first_child, node.last_child,
                         node.prev_sibling, node.next_sibling)
            else:
                links = (node.parent, tuple(node.children))
            nodes[node_id] = (node.data, links)
        return {
            'root': self._arena.root,
            'free_ids': self._arena.free_ids(),
            'nodes': nodes,
        }

    def shape(self, node_id: Optional[NodeId] = None) -> Any:
        """Return the subtree as nested ``(data, [children...])`` tuples.

        Handy for comparing trees without caring about NodeId values.
        ``None`` for an empty tree.
        """
        if node_id is None:
            node_id = self._arena.root
            if node_id is None:
                return None

        # Built bottom-up from post-order so deep trees do not recurse
        built: Dict[NodeId, Any] = {}
        for current in self._tree.traverse_post_order_ids(node_id):
            kids = [built.pop(child_id) for child_id in self._tree.children_ids(current)]
            built[current] = (self._arena.get(current).data, kids)
        return built[node_id]
