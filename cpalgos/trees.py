"""Binary search trees built by repeated insertion, with traversals and shape queries."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from functools import reduce


@dataclass
class TreeNode:
    """A node of a binary search tree."""

    data: int
    left: TreeNode | None = None
    right: TreeNode | None = None


def insert(root: TreeNode | None, data: int) -> TreeNode:
    """Insert ``data`` below ``root`` and return the (possibly new) root.

    Smaller values go left; equal and larger values go right.
    """
    node = TreeNode(data)
    if root is None:
        return node
    current = root
    while True:
        if data < current.data:
            if current.left is None:
                current.left = node
                return root
            current = current.left
        else:
            if current.right is None:
                current.right = node
                return root
            current = current.right


def build_tree(values: Iterable[int]) -> TreeNode | None:
    """Build a tree by inserting ``values`` in order."""
    return reduce(insert, values, None)


def inorder(root: TreeNode | None) -> Iterator[int]:
    """Yield values in left, node, right order."""
    stack: list[TreeNode] = []
    current = root
    while stack or current is not None:
        while current is not None:
            stack.append(current)
            current = current.left
        current = stack.pop()
        yield current.data
        current = current.right


def preorder(root: TreeNode | None) -> Iterator[int]:
    """Yield values in node, left, right order."""
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        yield node.data
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def postorder(root: TreeNode | None) -> Iterator[int]:
    """Yield values in left, right, node order."""
    stack: list[tuple[TreeNode, bool]] = [(root, False)] if root is not None else []
    while stack:
        node, expanded = stack.pop()
        if expanded:
            yield node.data
            continue
        stack.append((node, True))
        if node.right is not None:
            stack.append((node.right, False))
        if node.left is not None:
            stack.append((node.left, False))


def height(root: TreeNode | None) -> int:
    """Number of nodes on the longest root-to-leaf path; 0 for an empty tree."""
    if root is None:
        return 0
    best = 0
    stack = [(root, 1)]
    while stack:
        node, depth = stack.pop()
        best = max(best, depth)
        for child in (node.left, node.right):
            if child is not None:
                stack.append((child, depth + 1))
    return best


def is_balanced(root: TreeNode | None) -> bool:
    """True if at every node the subtree heights differ by at most one."""
    if root is None:
        return True
    return (
        abs(height(root.left) - height(root.right)) <= 1
        and is_balanced(root.left)
        and is_balanced(root.right)
    )


def ancestor_sum(n: int) -> int:
    """Sum of ``n`` and all its ancestors in a heap-numbered complete binary tree."""
    total = 0
    while n >= 1:
        total += n
        n //= 2
    return total