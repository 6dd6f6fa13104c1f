"""Binary tree nodes and the usual traversals and measurements over them."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterator


@dataclass
class Node:
    """A binary tree node holding an integer key."""

    key: int
    left: Node | None = None
    right: Node | None = None


def max_width(root: Node | None) -> int:
    """Return the largest number of nodes on any one level."""
    return max((len(level) for level in level_order_by_line(root)), default=0)


def height(root: Node | None) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return max(height(root.left), height(root.right)) + 1


def is_balanced(root: Node | None) -> bool:
    """Tell whether every node's subtrees differ in height by at most one."""

    def balanced_height(node: Node | None) -> int | None:
        if node is None:
            return 0
        left = balanced_height(node.left)
        if left is None:
            return None
        right = balanced_height(node.right)
        if right is None or abs(left - right) > 1:
            return None
        return max(left, right) + 1

    return balanced_height(root) is not None


def has_children_sum_property(root: Node | None) -> bool:
    """Tell whether every inner node's key equals the sum of its children's keys."""
    if root is None or (root.left is None and root.right is None):
        return True
    children = sum(child.key for child in (root.left, root.right) if child is not None)
    return (
        root.key == children
        and has_children_sum_property(root.left)
        and has_children_sum_property(root.right)
    )


def nodes_at_distance(root: Node | None, k: int) -> list[int]:
    """Return the keys ``k`` levels below the root, left to right."""

    def walk(node: Node | None, depth: int) -> Iterator[int]:
        if node is None:
            return
        if depth == 0:
            yield node.key
        else:
            yield from walk(node.left, depth - 1)
            yield from walk(node.right, depth - 1)

    if k < 0:
        return []
    return list(walk(root, k))


def _inorder(node: Node | None) -> Iterator[int]:
    if node is not None:
        yield from _inorder(node.left)
        yield node.key
        yield from _inorder(node.right)


def _preorder(node: Node | None) -> Iterator[int]:
    if node is not None:
        yield node.key
        yield from _preorder(node.left)
        yield from _preorder(node.right)


def _postorder(node: Node | None) -> Iterator[int]:
    if node is not None:
        yield from _postorder(node.left)
        yield from _postorder(node.right)
        yield node.key


def inorder(root: Node | None) -> list[int]:
    """Return the keys in left, node, right order."""
    return list(_inorder(root))


def preorder(root: Node | None) -> list[int]:
    """Return the keys in node, left, right order."""
    return list(_preorder(root))


def postorder(root: Node | None) -> list[int]:
    """Return the keys in left, right, node order."""
    return list(_postorder(root))


def level_order(root: Node | None) -> list[int]:
    """Return the keys level by level, left to right."""
    return [key for level in level_order_by_line(root) for key in level]


def level_order_by_line(root: Node | None) -> list[list[int]]:
    """Return the keys grouped by level, top level first."""
    levels: list[list[int]] = []
    current = [root] if root is not None else []
    while current:
        levels.append([node.key for node in current])
        pending: deque[Node] = deque()
        for node in current:
            pending.extend(child for child in (node.left, node.right) if child is not None)
        current = list(pending)
    return levels


def size(root: Node | None) -> int:
    """Return the number of nodes in the tree."""
    if root is None:
        return 0
    return 1 + size(root.left) + size(root.right)


def maximum(root: Node | None) -> int:
    """Return the largest key in a non-empty tree."""
    if root is None:
        raise ValueError("maximum() of an empty tree")
    return max(_preorder(root))