"""Binary search tree queries and node lookups across trees."""

from __future__ import annotations

import math

from drills.trees import TreeNode, inorder_traversal


def kth_smallest(root: TreeNode | None, k: int) -> int:
    """Return the k-th smallest value (1-based) in a binary search tree."""
    values = inorder_traversal(root)
    if not 1 <= k <= len(values):
        raise IndexError(f"k={k} is out of range for a tree of {len(values)} nodes")
    return values[k - 1]


def search_bst(root: TreeNode | None, val: int) -> TreeNode | None:
    """Return the node holding val in a binary search tree, or None."""
    node = root
    while node is not None and node.val != val:
        node = node.right if node.val < val else node.left
    return node


def is_valid_bst(root: TreeNode | None) -> bool:
    """Return True if the tree is a binary search tree with strictly ordered values."""

    def within(node: TreeNode | None, low: float, high: float) -> bool:
        if node is None:
            return True
        if not low < node.val < high:
            return False
        return within(node.left, low, node.val) and within(node.right, node.val, high)

    return within(root, -math.inf, math.inf)


def convert_bst(root: TreeNode | None) -> TreeNode | None:
    """Replace each value with the sum of all values greater than or equal to it, in place."""
    total = 0
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.right
        node = stack.pop()
        total += node.val
        node.val = total
        node = node.left
    return root


def lowest_common_ancestor(
    root: TreeNode | None, p: TreeNode, q: TreeNode
) -> TreeNode | None:
    """Return the deepest node that has both p and q as descendants."""
    if root is None or root is p or root is q:
        return root
    left = lowest_common_ancestor(root.left, p, q)
    right = lowest_common_ancestor(root.right, p, q)
    if left is not None and right is not None:
        return root
    return left if left is not None else right


def get_target_copy(
    original: TreeNode | None, cloned: TreeNode | None, target: TreeNode
) -> TreeNode | None:
    """Return the node of cloned at the position target occupies in original."""
    stack = [(original, cloned)]
    while stack:
        node, copy = stack.pop()
        if node is None:
            continue
        if node is target:
            return copy
        stack.append((node.right, copy.right))
        stack.append((node.left, copy.left))
    return None