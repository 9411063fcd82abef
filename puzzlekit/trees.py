"""Binary tree nodes and node counting."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class TreeNode:
    """A node of a binary tree."""

    val: int = 0
    left: TreeNode | None = None
    right: TreeNode | None = None


def count_nodes(root: TreeNode | None) -> int:
    """Return the number of nodes in the tree rooted at ``root``."""
    count = 0
    pending = [root] if root is not None else []
    while pending:
        node = pending.pop()
        count += 1
        pending.extend(child for child in (node.left, node.right) if child is not None)
    return count