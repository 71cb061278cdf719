"""
Checks a tree against the invariants the balancing code is meant to keep.
Nothing here trusts the cached heights, every height is worked out again from
the leaves up.
"""
import math

from .settings import AVL_HEIGHT_COEFFICIENT


class InvariantViolation(Exception):
    pass


def height_bound(size):
    """
    The tallest an AVL tree holding `size` keys can legally be.
    """
    return AVL_HEIGHT_COEFFICIENT * math.log2(size + 2)


def _check(node, low, high):
    # returns (height, size) of the subtree rooted at node
    if node is None:
        return 0, 0

    if low is not None and not low < node.key:
        raise InvariantViolation(f"key {node.key!r} is out of order, not above {low!r}")
    if high is not None and not node.key < high:
        raise InvariantViolation(f"key {node.key!r} is out of order, not below {high!r}")

    left_height, left_size = _check(node.left, low, node.key)
    right_height, right_size = _check(node.right, node.key, high)
    height = 1 + max(left_height, right_height)

    if node.height != height:
        raise InvariantViolation(
            f"key {node.key!r} caches height {node.height}, actual height is {height}"
        )
    if abs(left_height - right_height) > 1:
        raise InvariantViolation(
            f"key {node.key!r} is unbalanced, left height {left_height} "
            f"right height {right_height}"
        )

    return height, left_size + right_size + 1


def check_invariants(tree):
    """
    Validate a tree (or a bare root node) and return its height.

    Raises `InvariantViolation` describing the first broken invariant found:
    key order, the cached height, the balance of a node or, for a whole tree,
    the number of keys it reports holding.
    """
    root = getattr(tree, "root", tree)
    height, size = _check(root, None, None)

    if root is not tree and len(tree) != size:
        raise InvariantViolation(f"tree reports {len(tree)} keys but holds {size}")

    return height
