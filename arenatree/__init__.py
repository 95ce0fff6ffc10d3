"""arenatree - Arena-backed trees with stable node handles.

Nodes live in a slot arena owned by the tree and are named by NodeIds
instead of object references. A NodeId stays valid across any other
insert, move, swap or sort, and reliably stops working once its node is
removed.

Choose your node storage:
━━━━━━━━━━━━━━━━━━━━━━━━━━
Sibling-linked (O(1) append, detach and re-attach):
    from arenatree import OptTree

Child vectors (direct positional child access):
    from arenatree import VecTree
━━━━━━━━━━━━━━━━━━━━━━━━━━

Both implement the same Tree interface and the same invariants.
"""

import logging

__version__ = "0.1.0"

from .errors import (
    TreeError,
    HandleInvalidError,
    InvalidOperationError,
    TreeConfigError,
    TreeCorruptionError,
)
from .behaviors import InsertBehavior, RemoveBehavior, MoveBehavior, SwapBehavior
from .config import TreeConfig, TraversalStrategy, TreeKind
from .core import (
    NodeId,
    Arena,
    Node,
    OptNode,
    VecNode,
    Tree,
    Ancestors,
    Children,
    PreOrderTraversal,
    PostOrderTraversal,
    LevelOrderTraversal,
)
from .trees import OptTree, VecTree
from .api import (
    create_tree,
    traverse_tree,
    count_nodes,
    find_nodes,
    get_leaf_nodes,
    get_tree_stats,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    # Errors
    "TreeError",
    "HandleInvalidError",
    "InvalidOperationError",
    "TreeConfigError",
    "TreeCorruptionError",
    # Behaviors
    "InsertBehavior",
    "RemoveBehavior",
    "MoveBehavior",
    "SwapBehavior",
    # Config
    "TreeConfig",
    "TraversalStrategy",
    "TreeKind",
    # Core
    "NodeId",
    "Arena",
    "Node",
    "OptNode",
    "VecNode",
    "Tree",
    "Ancestors",
    "Children",
    "PreOrderTraversal",
    "PostOrderTraversal",
    "LevelOrderTraversal",
    # Trees
    "OptTree",
    "VecTree",
    # API
    "create_tree",
    "traverse_tree",
    "count_nodes",
    "find_nodes",
    "get_leaf_nodes",
    "get_tree_stats",
]
