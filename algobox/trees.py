"""Binary tree nodes and traversal."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class TreeNode:
    """One node of a binary tree."""

    val: Any = 0
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def preorder(root: Optional[TreeNode]) -> list[Any]:
    """Return the values in root, left, right order."""
    values: list[Any] = []
    pending = [root] if root is not None else []
    while pending:
        node = pending.pop()
        values.append(node.val)
        if node.right is not None:
            pending.append(node.right)
        if node.left is not None:
            pending.append(node.left)
    return values