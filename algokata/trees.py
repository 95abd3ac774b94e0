"""Binary trees: traversals, shape checks and search-tree exercises."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any

from algokata.linked_lists import ListNode, build_list

_END = object()


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree; nodes compare by identity."""

    val: Any = 0
    left: TreeNode | None = None
    right: TreeNode | None = None


def build_tree(values: Iterable[Any]) -> TreeNode | None:
    """Build a tree from level-order values, with None marking a missing child."""
    values = list(values)
    if not values or values[0] is None:
        return None
    root = TreeNode(values[0])
    queue = deque([root])
    pending = iter(values[1:])
    while queue:
        node = queue.popleft()
        left = next(pending, _END)
        if left is _END:
            break
        if left is not None:
            node.left = TreeNode(left)
            queue.append(node.left)
        right = next(pending, _END)
        if right is _END:
            break
        if right is not None:
            node.right = TreeNode(right)
            queue.append(node.right)
    return root


def dfs(root: TreeNode | None) -> list[Any]:
    """Visit the tree depth first (left, node, right) and return the values."""
    if root is None:
        return []
    return [*dfs(root.left), root.val, *dfs(root.right)]


def bfs(root: TreeNode | None) -> list[Any]:
    """Visit the tree level by level, left to right, and return the values."""
    if root is None:
        return []
    visited = []
    queue = deque([root])
    while queue:
        node = queue.popleft()
        visited.append(node.val)
        queue.extend(child for child in (node.left, node.right) if child is not None)
    return visited


def inorder(root: TreeNode | None) -> list[Any]:
    """Return the values in in-order (left, node, right)."""
    if root is None:
        return []
    return [*inorder(root.left), root.val, *inorder(root.right)]


def preorder(root: TreeNode | None) -> list[Any]:
    """Return the values in pre-order (node, left, right)."""
    if root is None:
        return []
    return [root.val, *preorder(root.left), *preorder(root.right)]


def postorder(root: TreeNode | None) -> list[Any]:
    """Return the values in post-order (left, right, node)."""
    if root is None:
        return []
    return [*postorder(root.left), *postorder(root.right), root.val]


def is_same_tree(p: TreeNode | None, q: TreeNode | None) -> bool:
    """Tell whether two trees have the same shape and values."""
    if p is None and q is None:
        return True
    if p is None or q is None or p.val != q.val:
        return False
    return is_same_tree(p.left, q.left) and is_same_tree(p.right, q.right)


def _mirrored(left: TreeNode | None, right: TreeNode | None) -> bool:
    if left is None and right is None:
        return True
    if left is None or right is None or left.val != right.val:
        return False
    return _mirrored(left.left, right.right) and _mirrored(left.right, right.left)


def is_symmetric(root: TreeNode | None) -> bool:
    """Tell whether a tree is a mirror image of itself."""
    return root is None or _mirrored(root.left, root.right)


def _balanced_height(root: TreeNode | None) -> tuple[bool, int]:
    if root is None:
        return True, 0
    ok, left = _balanced_height(root.left)
    if not ok:
        return False, 0
    ok, right = _balanced_height(root.right)
    if not ok:
        return False, 0
    difference = abs(left - right)
    if difference >= 1:
        return False, difference + 1
    return True, max(left, right) + 1


def is_balanced(root: TreeNode | None) -> bool:
    """Tell whether every node has subtrees of exactly equal height."""
    return _balanced_height(root)[0]


def height(root: TreeNode | None) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return max(height(root.left), height(root.right)) + 1


def check_balanced(root: TreeNode | None) -> bool:
    """Tell whether the root's two subtrees have exactly equal height."""
    if root is None or (root.left is None and root.right is None):
        return True
    return height(root.left) == height(root.right)


def first_common_ancestor(
    root: TreeNode | None, p: TreeNode | None, q: TreeNode | None
) -> TreeNode | None:
    """Return the lowest node having both ``p`` and ``q`` below or at it."""
    if root is None:
        return None
    if root is p or root is q:
        return root
    left = first_common_ancestor(root.left, p, q)
    right = first_common_ancestor(root.right, p, q)
    if left is not None and right is not None:
        return root
    return right if left is None else left


def _closest(values: Sequence[int], query: int) -> list[int]:
    result = [-1, -1]
    low, high = 0, len(values) - 1
    while low <= high:
        pivot = (low + high) // 2
        value = values[pivot]
        if value == query:
            return [value, value]
        if value < query:
            result[0] = value
            low = pivot + 1
        else:
            result[1] = value
            high = pivot - 1
    return result


def closest_nodes(root: TreeNode | None, queries: Iterable[int]) -> list[list[int]]:
    """For each query, return the largest value <= it and the smallest >= it.

    -1 stands for a missing bound.
    """
    values = inorder(root)
    return [_closest(values, query) for query in queries]


def create_minimal_bst(values: Sequence[Any]) -> TreeNode | None:
    """Build a search tree of minimal height from sorted ``values``."""
    if not values:
        return None
    pivot = (len(values) - 1) // 2
    return TreeNode(
        values[pivot],
        create_minimal_bst(values[:pivot]),
        create_minimal_bst(values[pivot + 1 :]),
    )


def _bst_bound(root: TreeNode) -> tuple[bool, int]:
    if root.left is None and root.right is None:
        return True, root.val
    if root.left is not None:
        ok, left = _bst_bound(root.left)
        if not ok or left > root.val:
            return False, left
    right = 0
    if root.right is not None:
        ok, right = _bst_bound(root.right)
        if not ok or right < root.val:
            return False, right
    return True, max(root.val, right)


def validate_bst(root: TreeNode | None) -> bool:
    """Tell whether the tree is a binary search tree."""
    return root is None or _bst_bound(root)[0]


def list_of_depths(root: TreeNode | None) -> list[ListNode]:
    """Return one linked list of values per tree level, top level first."""
    levels: list[ListNode] = []
    level = [root] if root is not None else []
    while level:
        head = build_list(node.val for node in level)
        assert head is not None
        levels.append(head)
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]
    return levels