"""
Walks over the nodes of a tree in one of the four classic orders. Every walk
is a generator so the tree is only visited as far as the caller consumes it.

Each step yields a `Record` with the node's key, value and level, the level
being the number of edges between the node and the root. Levels are worked out
while walking and are never stored on the nodes themselves.
"""
from collections import deque, namedtuple

PREORDER = "pre"
INORDER = "in"
POSTORDER = "post"
LEVELORDER = "level"

ORDERS = (PREORDER, INORDER, POSTORDER, LEVELORDER)


class Record(namedtuple("Record", ["key", "value", "level"])):
    __slots__ = ()

    def __str__(self):
        return f"Level {self.level}: {self.key} - {self.value}"


def iter_preorder(node, level=0):
    if node is None:
        return

    yield Record(node.key, node.value, level)
    yield from iter_preorder(node.left, level + 1)
    yield from iter_preorder(node.right, level + 1)


def iter_inorder(node, level=0):
    if node is None:
        return

    yield from iter_inorder(node.left, level + 1)
    yield Record(node.key, node.value, level)
    yield from iter_inorder(node.right, level + 1)


def iter_postorder(node, level=0):
    if node is None:
        return

    yield from iter_postorder(node.left, level + 1)
    yield from iter_postorder(node.right, level + 1)
    yield Record(node.key, node.value, level)


def iter_levelorder(node):
    """
    Breadth first walk, top to bottom and left to right within a level.
    """
    if node is None:
        return

    queue = deque([(node, 0)])
    while queue:
        node, level = queue.popleft()
        yield Record(node.key, node.value, level)

        if node.left is not None:
            queue.append((node.left, level + 1))
        if node.right is not None:
            queue.append((node.right, level + 1))


_WALKERS = {
    PREORDER: iter_preorder,
    INORDER: iter_inorder,
    POSTORDER: iter_postorder,
    LEVELORDER: iter_levelorder,
}


def traverse(root, order=INORDER):
    try:
        walker = _WALKERS[order]
    except KeyError:
        raise ValueError(
            f"unknown traversal order {order!r}, expected one of {ORDERS}"
        ) from None

    return walker(root)
