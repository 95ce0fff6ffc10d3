#!/usr/bin/env python3
"""
Basic arenatree example: mirror a directory as an in-memory tree.

This example demonstrates:
- Building a tree with insert
- Sorting children
- Moving and removing subtrees
- Traversal and tree statistics
"""

import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from arenatree import (
    OptTree,
    InsertBehavior,
    RemoveBehavior,
    MoveBehavior,
    get_tree_stats,
)


def build_directory_tree(root_path: Path, max_depth: int = 2) -> OptTree:
    """Mirror ``root_path`` into a tree whose node data is a Path."""
    tree = OptTree()
    root_id = tree.insert(root_path, InsertBehavior.AsRoot)

    pending = [(root_id, root_path, 0)]
    while pending:
        parent_id, path, depth = pending.pop()
        if depth >= max_depth or not path.is_dir():
            continue
        try:
            entries = list(path.iterdir())
        except PermissionError:
            continue
        for entry in entries:
            child_id = tree.insert(entry, InsertBehavior.UnderNode(parent_id))
            pending.append((child_id, entry, depth + 1))
    return tree


def print_tree(tree: OptTree) -> None:
    root_id = tree.root_node_id()
    for node_id in tree.traverse_pre_order_ids(root_id):
        indent = "  " * tree.depth(node_id)
        print(f"{indent}{tree.get(node_id).data.name or tree.get(node_id).data}")


def main():
    root_path = Path(sys.argv[1]) if len(sys.argv) > 1 else Path.cwd()
    tree = build_directory_tree(root_path)

    # Directories first, then by name
    for node_id in list(tree.traverse_pre_order_ids(tree.root_node_id())):
        tree.sort_children_by_key(
            node_id, lambda node: (not node.data.is_dir(), node.data.name.lower())
        )

    print(f"Directory tree of {root_path}")
    print("-" * 50)
    print_tree(tree)

    stats = get_tree_stats(tree)
    print("-" * 50)
    print(f"Nodes: {stats['total_nodes']}  Leaves: {stats['leaf_nodes']}  "
          f"Height: {tree.height()}")

    # Hide every dot-entry but keep whatever was under it
    root_id = tree.root_node_id()
    hidden = [node_id for node_id in tree.traverse_post_order_ids(root_id)
              if node_id != root_id and tree.get(node_id).data.name.startswith(".")]
    for node_id in hidden:
        tree.remove(node_id, RemoveBehavior.LiftChildren)
    print(f"Removed {len(hidden)} hidden entries, {len(tree)} nodes remain")

    # Pull the first subdirectory up to the root
    first = next(iter(tree.children_ids(tree.root_node_id())), None)
    if first is not None:
        tree.move_node(first, MoveBehavior.ToRoot)
        print(f"New root: {tree.get(tree.root_node_id()).data}")


if __name__ == "__main__":
    main()
