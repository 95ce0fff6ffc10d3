"""High-level API for arenatree.

This module provides simple, functional interfaces for common tree
operations. They wrap the Tree methods and traversers for the cases where
a caller just wants "every node" or "some numbers about this tree".
"""

from typing import Any, Callable, Dict, Iterator, Optional, Union

from .config import TraversalStrategy, TreeConfig, TreeKind
from .core.handle import NodeId
from .core.node import Node
from .core.tree import Tree
from .trees.opt_tree import OptTree
from .trees.vec_tree import VecTree


def create_tree(kind: Union[TreeKind, str] = TreeKind.LINKED,
                config: Optional[TreeConfig] = None) -> Tree:
    """Create an empty (or root-bootstrapped) tree by storage kind.

    Args:
        kind: TreeKind or one of "opt", "linked", "vec", "vector"
        config: Optional TreeConfig

    Returns:
        OptTree or VecTree instance

    Raises:
        ValueError: If kind is not recognized

    Example:
        >>> tree = create_tree("vec", TreeConfig.with_root("root"))
        >>> tree.get(tree.root_node_id()).data
        'root'
    """
    kinds = {
        'opt': TreeKind.LINKED,
        'linked': TreeKind.LINKED,
        'vec': TreeKind.VECTOR,
        'vector': TreeKind.VECTOR,
    }
    if not isinstance(kind, TreeKind):
        kind_lower = str(kind).lower()
        if kind_lower not in kinds:
            raise ValueError(
                f"Unknown tree kind: {kind}. "
                f"Choose from: {', '.join(kinds.keys())}"
            )
        kind = kinds[kind_lower]

    if kind is TreeKind.VECTOR:
        return VecTree(config)
    return OptTree(config)


def traverse_tree(
    tree: Tree,
    start: Optional[NodeId] = None,
    strategy: Union[TraversalStrategy, str] = TraversalStrategy.PRE_ORDER,
    ids: bool = False,
) -> Iterator[Any]:
    """Simple interface for tree traversal.

    Args:
        tree: Tree to walk
        start: Starting node (defaults to the root)
        strategy: Traversal order (pre, post, level)
        ids: Yield NodeIds instead of nodes

    Yields:
        Nodes (or NodeIds) in the requested order. Nothing for an empty tree.

    Raises:
        HandleInvalidError: If start does not resolve
        ValueError: If strategy is not recognized

    Example:
        >>> for node in traverse_tree(tree, strategy="level"):
        ...     print(node.data)
    """
    strategy = _parse_strategy(strategy)
    if start is None:
        start = tree.root_node_id()
        if start is None:
            return

    if strategy is TraversalStrategy.PRE_ORDER:
        walker = tree.traverse_pre_order_ids(start) if ids else tree.traverse_pre_order(start)
    elif strategy is TraversalStrategy.POST_ORDER:
        walker = tree.traverse_post_order_ids(start) if ids else tree.traverse_post_order(start)
    else:
        walker = tree.traverse_level_order_ids(start) if ids else tree.traverse_level_order(start)
    yield from walker


def count_nodes(tree: Tree, start: Optional[NodeId] = None) -> int:
    """Count nodes in the subtree rooted at ``start`` (whole tree by default)."""
    count = 0
    for _ in traverse_tree(tree, start, ids=True):
        count += 1
    return count


def find_nodes(
    tree: Tree,
    predicate: Callable[[Node], bool],
    start: Optional[NodeId] = None,
    strategy: Union[TraversalStrategy, str] = TraversalStrategy.PRE_ORDER,
) -> Iterator[NodeId]:
    """Find nodes that match a predicate.

    Args:
        tree: Tree to search
        predicate: Function that returns True for matching nodes
        start: Starting node (defaults to the root)
        strategy: Traversal order

    Yields:
        NodeIds of matching nodes

    Example:
        >>> evens = list(find_nodes(tree, lambda n: n.data % 2 == 0))
    """
    for node_id in traverse_tree(tree, start, strategy, ids=True):
        if predicate(tree.get(node_id)):
            yield node_id


def get_leaf_nodes(tree: Tree, start: Optional[NodeId] = None) -> Iterator[NodeId]:
    """Yield ids of nodes without children, in pre-order."""
    for node_id in traverse_tree(tree, start, ids=True):
        if tree.get(node_id).is_leaf():
            yield node_id


def get_tree_stats(tree: Tree, start: Optional[NodeId] = None) -> Dict[str, Any]:
    """Get statistics about a tree.

    Args:
        tree: Tree to measure
        start: Subtree root (defaults to the root)

    Returns:
        Dictionary with total_nodes, leaf_nodes, internal_nodes, max_depth,
        depths (node count per depth), max_branching and average_branching

    Example:
        >>> stats = get_tree_stats(tree)
        >>> print(f"Total nodes: {stats['total_nodes']}")
    """
    stats = {
        'total_nodes': 0,
        'leaf_nodes': 0,
        'max_depth': 0,
        'max_branching': 0,
        'depths': {}
    }

    if start is None:
        start = tree.root_node_id()

    # Level order keeps each depth contiguous, so depth is tracked per node
    depth_of: Dict[NodeId, int] = {}
    if start is not None:
        depth_of[start] = 0
        for node_id in tree.traverse_level_order_ids(start):
            depth = depth_of.pop(node_id)
            child_ids = list(tree.children_ids(node_id))
            for child_id in child_ids:
                depth_of[child_id] = depth + 1

            stats['total_nodes'] += 1
            if not child_ids:
                stats['leaf_nodes'] += 1
            stats['max_depth'] = max(stats['max_depth'], depth)
            stats['max_branching'] = max(stats['max_branching'], len(child_ids))
            stats['depths'][depth] = stats['depths'].get(depth, 0) + 1

    stats['internal_nodes'] = stats['total_nodes'] - stats['leaf_nodes']
    stats['average_branching'] = (
        (stats['total_nodes'] - 1) / stats['internal_nodes']
        if stats['internal_nodes'] > 0 else 0
    )

    return stats


# Helper functions

def _parse_strategy(strategy: Union[TraversalStrategy, str]) -> TraversalStrategy:
    """Parse strategy from string or enum.

    Args:
        strategy: Strategy as enum or string

    Returns:
        TraversalStrategy enum value
    """
    if isinstance(strategy, TraversalStrategy):
        return strategy

    strategy_map = {
        'pre': TraversalStrategy.PRE_ORDER,
        'pre_order': TraversalStrategy.PRE_ORDER,
        'dfs': TraversalStrategy.PRE_ORDER,
        'dfs_pre': TraversalStrategy.PRE_ORDER,
        'post': TraversalStrategy.POST_ORDER,
        'post_order': TraversalStrategy.POST_ORDER,
        'dfs_post': TraversalStrategy.POST_ORDER,
        'level': TraversalStrategy.LEVEL_ORDER,
        'level_order': TraversalStrategy.LEVEL_ORDER,
        'bfs': TraversalStrategy.LEVEL_ORDER,
    }

    strategy_lower = strategy.lower() if isinstance(strategy, str) else str(strategy)
    if strategy_lower in strategy_map:
        return strategy_map[strategy_lower]

    raise ValueError(f"Unknown traversal strategy: {strategy}")
