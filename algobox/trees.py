"""Binary trees and binary search tree algorithms."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
import math

_MISSING = object()


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    val: int = 0
    left: TreeNode | None = None
    right: TreeNode | None = None


def build_tree(values: Iterable[int | None]) -> TreeNode | None:
    """Build a tree from level-order values where ``None`` marks a missing child."""
    items = iter(values)
    first = next(items, None)
    if first is None:
        return None
    root = TreeNode(first)
    queue = deque([root])
    while queue:
        node = queue.popleft()
        left = next(items, _MISSING)
        if left is _MISSING:
            break
        if left is not None:
            node.left = TreeNode(left)
            queue.append(node.left)
        right = next(items, _MISSING)
        if right is _MISSING:
            break
        if right is not None:
            node.right = TreeNode(right)
            queue.append(node.right)
    return root


def tree_values(root: TreeNode | None) -> list[int | None]:
    """Return the level-order values of a tree, the inverse of :func:`build_tree`."""
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


def num_trees(n: int) -> int:
    """Count the structurally distinct BSTs holding the keys 1..n."""
    counts = [1] * (n + 1)
    for nodes in range(2, n + 1):
        counts[nodes] = sum(
            counts[root - 1] * counts[nodes - root] for root in range(1, nodes + 1)
        )
    return counts[n]


def is_valid_bst(root: TreeNode | None) -> bool:
    """Tell whether the tree is a strict binary search tree."""

    def validate(node: TreeNode | None, low: float, high: float) -> bool:
        if node is None:
            return True
        if not low < node.val < high:
            return False
        return validate(node.left, low, node.val) and validate(node.right, node.val, high)

    return validate(root, -math.inf, math.inf)


def _morris_inorder(root: TreeNode | None) -> Iterator[TreeNode]:
    curr = root
    while curr is not None:
        if curr.left is None:
            yield curr
            curr = curr.right
            continue
        pred = curr.left
        while pred.right is not None and pred.right is not curr:
            pred = pred.right
        if pred.right is None:
            pred.right = curr
            curr = curr.left
        else:
            pred.right = None
            yield curr
            curr = curr.right


def recover_tree(root: TreeNode | None) -> None:
    """Swap back the values of the two nodes that break BST order, in place.

    Raises ValueError if the tree has no out-of-order pair.
    """
    first = second = prev = None
    for node in _morris_inorder(root):
        if prev is not None and prev.val > node.val:
            if first is None:
                first = prev
            second = node
        prev = node
    if first is None or second is None:
        raise ValueError("tree has no swapped pair of nodes")
    first.val, second.val = second.val, first.val


def is_same_tree(p: TreeNode | None, q: TreeNode | None) -> bool:
    """Tell whether two trees have the same shape and values."""
    if p is None and q is None:
        return True
    if p is None or q is None or p.val != q.val:
        return False
    return is_same_tree(p.left, q.left) and is_same_tree(p.right, q.right)


def max_depth(root: TreeNode | None) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return 1 + max(max_depth(root.left), max_depth(root.right))


def has_path_sum(root: TreeNode | None, target_sum: int) -> bool:
    """Tell whether some root-to-leaf path adds up to ``target_sum``."""
    if root is None:
        return False
    if root.left is None and root.right is None:
        return target_sum == root.val
    remaining = target_sum - root.val
    return has_path_sum(root.left, remaining) or has_path_sum(root.right, remaining)


def _edge_height(node: TreeNode | None, side: str) -> int:
    height = 0
    while node is not None:
        height += 1
        node = node.left if side == "left" else node.right
    return height


def count_nodes(root: TreeNode | None) -> int:
    """Count the nodes of a complete binary tree."""
    if root is None:
        return 0
    left_height = _edge_height(root, "left")
    if left_height == _edge_height(root, "right"):
        return (1 << left_height) - 1
    return 1 + count_nodes(root.left) + count_nodes(root.right)