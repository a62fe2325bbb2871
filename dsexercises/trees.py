"""Binary trees: construction from traversals, traversals, shape and metrics."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import Any

EMPTY_MARK = "#"
INDENT = "   "


@dataclass
class TreeNode:
    """A binary tree node holding one value."""

    data: Any
    left: TreeNode | None = None
    right: TreeNode | None = None


def build_preorder(tokens: Iterable[str]) -> TreeNode | None:
    """Build a tree from its preorder listing with ``#`` marking empty subtrees.

    Whitespace tokens are skipped, so a plain string such as ``"AB##C##"``
    works. Tokens left over once the tree is complete are not read.
    """
    stream: Iterator[str] = (token for token in tokens if not token.isspace())

    def build() -> TreeNode | None:
        try:
            token = next(stream)
        except StopIteration:
            raise ValueError("preorder listing ends before the tree is complete") from None
        if token == EMPTY_MARK:
            return None
        node = TreeNode(token)
        node.left = build()
        node.right = build()
        return node

    return build()


def build_from_post_in(postorder: Sequence, inorder: Sequence) -> TreeNode | None:
    """Rebuild a tree of distinct values from its postorder and inorder listings."""
    if len(postorder) != len(inorder):
        raise ValueError("postorder and inorder listings differ in length")
    position = {value: index for index, value in enumerate(inorder)}
    if len(position) != len(inorder):
        raise ValueError("tree values must be distinct")
    if set(postorder) != set(position):
        raise ValueError("postorder and inorder listings hold different values")
    remaining = reversed(postorder)

    def build(low: int, high: int) -> TreeNode | None:
        if low > high:
            return None
        value = next(remaining)
        index = position[value]
        if not low <= index <= high:
            raise ValueError("postorder and inorder listings do not describe one tree")
        node = TreeNode(value)
        node.right = build(index + 1, high)
        node.left = build(low, index - 1)
        return node

    return build(0, len(inorder) - 1)


def preorder(root: TreeNode | None) -> list:
    """Return the values in root, left, right order."""
    if root is None:
        return []
    return [root.data, *preorder(root.left), *preorder(root.right)]


def inorder(root: TreeNode | None) -> list:
    """Return the values in left, root, right order."""
    if root is None:
        return []
    return [*inorder(root.left), root.data, *inorder(root.right)]


def postorder(root: TreeNode | None) -> list:
    """Return the values in left, right, root order."""
    if root is None:
        return []
    return [*postorder(root.left), *postorder(root.right), root.data]


def preorder_iterative(root: TreeNode | None) -> list:
    """Preorder traversal with an explicit stack."""
    result = []
    stack: list[TreeNode] = []
    node = root
    while node is not None or stack:
        while node is not None:
            result.append(node.data)
            stack.append(node)
            node = node.left
        node = stack.pop().right
    return result


def inorder_iterative(root: TreeNode | None) -> list:
    """Inorder traversal with an explicit stack."""
    result = []
    stack: list[TreeNode] = []
    node = root
    while node is not None or stack:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        result.append(node.data)
        node = node.right
    return result


def postorder_iterative(root: TreeNode | None) -> list:
    """Postorder traversal with an explicit stack and a last-visited marker."""
    result = []
    stack: list[TreeNode] = []
    node = root
    visited: TreeNode | None = None
    while node is not None or stack:
        while node is not None:
            stack.append(node)
            node = node.left
        top = stack[-1]
        if top.right is None or top.right is visited:
            stack.pop()
            result.append(top.data)
            visited = top
        else:
            node = top.right
    return result


def shape(root: TreeNode | None) -> list[str]:
    """Return the tree drawn sideways, one line per node, right subtree on top.

    Each line is indented by three spaces per level, the root by one step.
    """
    lines: list[str] = []

    def draw(node: TreeNode | None, level: int) -> None:
        if node is None:
            return
        draw(node.right, level + 1)
        lines.append(f"{INDENT * level}{node.data}")
        draw(node.left, level + 1)

    draw(root, 1)
    return lines


def leaf_count(root: TreeNode | None) -> int:
    """Return the number of nodes without children."""
    if root is None:
        return 0
    if root.left is None and root.right is None:
        return 1
    return leaf_count(root.left) + leaf_count(root.right)


def height(root: TreeNode | None) -> int:
    """Return the number of edges on the longest path down from the root.

    Both an empty tree and a single node have height 0.
    """
    if root is None:
        return 0
    deepest = 0
    pending = [(root, 0)]
    while pending:
        node, level = pending.pop()
        deepest = max(deepest, level)
        for child in (node.left, node.right):
            if child is not None:
                pending.append((child, level + 1))
    return deepest