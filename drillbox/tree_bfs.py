"""Breadth-first (level order) traversal of a binary tree."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class TreeNode:
    """A binary tree node."""

    key: Any
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


def height(root: Optional[TreeNode]) -> int:
    """Number of levels in the tree; 0 for an empty tree."""
    if root is None:
        return 0
    return 1 + max(height(root.left), height(root.right))


def level_order(root: Optional[TreeNode]) -> list[Any]:
    """Keys in level order, using a queue."""
    if root is None:
        return []
    keys = []
    queue = deque([root])
    while queue:
        node = queue.popleft()
        keys.append(node.key)
        queue.extend(child for child in (node.left, node.right) if child is not None)
    return keys


def _keys_at_level(node: Optional[TreeNode], level: int) -> Iterator[Any]:
    if node is None:
        return
    if level == 1:
        yield node.key
        return
    yield from _keys_at_level(node.left, level - 1)
    yield from _keys_at_level(node.right, level - 1)


def level_order_recursive(root: Optional[TreeNode]) -> list[Any]:
    """Keys in level order, walking the tree once per level."""
    return [
        key
        for level in range(1, height(root) + 1)
        for key in _keys_at_level(root, level)
    ]