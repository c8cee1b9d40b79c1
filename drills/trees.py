"""Binary tree node type and common whole-tree queries."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

_END = object()


@dataclass(eq=False)
class TreeNode:
    """A binary tree node; nodes compare by identity."""

    val: int = 0
    left: TreeNode | None = None
    right: TreeNode | None = None


def build_tree(values: Iterable[int | None]) -> TreeNode | None:
    """Build a tree from level-order values, where None marks a missing child."""
    items = iter(values)
    first = next(items, _END)
    if first is _END or first is None:
        return None
    root = TreeNode(first)
    queue = deque([root])
    while queue:
        node = queue.popleft()
        left = next(items, _END)
        if left is _END:
            break
        if left is not None:
            node.left = TreeNode(left)
            queue.append(node.left)
        right = next(items, _END)
        if right is _END:
            break
        if right is not None:
            node.right = TreeNode(right)
            queue.append(node.right)
    return root


def to_level_order(root: TreeNode | None) -> list[int | None]:
    """Return the level-order values of a tree, None for missing children."""
    result: list[int | None] = []
    queue: deque[TreeNode | None] = deque([root])
    while queue:
        node = queue.popleft()
        if node is None:
            result.append(None)
            continue
        result.append(node.val)
        queue.append(node.left)
        queue.append(node.right)
    while result and result[-1] is None:
        result.pop()
    return result


def _levels(root: TreeNode | None) -> Iterator[list[TreeNode]]:
    level = [root] if root is not None else []
    while level:
        yield level
        level = [child for node in level for child in (node.left, node.right) if child is not None]


def is_same_tree(p: TreeNode | None, q: TreeNode | None) -> bool:
    """Return True if both trees have the same shape and values."""
    if p is None or q is None:
        return p is q
    return p.val == q.val and is_same_tree(p.right, q.right) and is_same_tree(p.left, q.left)


def _mirror(a: TreeNode | None, b: TreeNode | None) -> bool:
    if a is None or b is None:
        return a is b
    return a.val == b.val and _mirror(a.left, b.right) and _mirror(a.right, b.left)


def is_symmetric(root: TreeNode | None) -> bool:
    """Return True if the tree is a mirror image of itself."""
    if root is None:
        raise ValueError("tree is empty")
    return _mirror(root.left, root.right)


def zigzag_level_order(root: TreeNode | None) -> list[list[int]]:
    """Return node values level by level, alternating left-to-right and right-to-left."""
    result = []
    for depth, level in enumerate(_levels(root)):
        values = [node.val for node in level]
        result.append(values[::-1] if depth % 2 else values)
    return result


def tree_height(root: TreeNode | None) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return max(tree_height(root.left), tree_height(root.right)) + 1


def is_balanced(root: TreeNode | None) -> bool:
    """Return True if every node's subtrees differ in height by at most one."""

    def checked_height(node: TreeNode | None) -> int:
        if node is None:
            return 0
        left = checked_height(node.left)
        if left < 0:
            return -1
        right = checked_height(node.right)
        if right < 0 or abs(left - right) > 1:
            return -1
        return max(left, right) + 1

    return checked_height(root) >= 0


def path_sum(root: TreeNode | None, target_sum: int) -> list[list[int]]:
    """Return every root-to-leaf path whose values add up to target_sum."""
    paths: list[list[int]] = []
    path: list[int] = []

    def walk(node: TreeNode | None, remaining: int) -> None:
        if node is None:
            return
        remaining -= node.val
        path.append(node.val)
        if node.left is None and node.right is None and remaining == 0:
            paths.append(list(path))
        walk(node.left, remaining)
        walk(node.right, remaining)
        path.pop()

    walk(root, target_sum)
    return paths


def deepest_leaves_sum(root: TreeNode | None) -> int:
    """Return the sum of the values on the deepest level."""
    deepest: list[TreeNode] = []
    for deepest in _levels(root):
        pass
    return sum(node.val for node in deepest)


def pseudo_palindromic_paths(root: TreeNode | None) -> int:
    """Count root-to-leaf paths whose values can be rearranged into a palindrome."""
    if root is None:
        return 0
    count = 0
    stack: list[tuple[TreeNode, frozenset[int]]] = [(root, frozenset({root.val}))]
    while stack:
        node, odd = stack.pop()
        if node.left is None and node.right is None:
            if len(odd) <= 1:
                count += 1
            continue
        for child in (node.right, node.left):
            if child is not None:
                stack.append((child, odd ^ {child.val}))
    return count


def right_side_view(root: TreeNode | None) -> list[int]:
    """Return the rightmost value on each level, top to bottom."""
    return [level[-1].val for level in _levels(root)]


def check_tree(root: TreeNode) -> bool:
    """Return True if the root's value equals the sum of its two children's values."""
    if root.left is None or root.right is None:
        raise ValueError("root must have two children")
    return root.val == root.left.val + root.right.val


def inorder_traversal(root: TreeNode | None) -> list[int]:
    """Return node values in in-order sequence."""
    values = []
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        values.append(node.val)
        node = node.right
    return values


def tree_to_str(root: TreeNode | None) -> str:
    """Render a tree in parenthesised preorder form, omitting needless empty pairs."""
    if root is None:
        return " "

    def render(node: TreeNode) -> str:
        text = str(node.val)
        if node.left is not None:
            text += f"({render(node.left)})"
        elif node.right is not None:
            text += "()"
        if node.right is not None:
            text += f"({render(node.right)})"
        return text

    return render(root)