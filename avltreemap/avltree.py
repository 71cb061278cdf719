"""
AVL tree map as described by Adelson-Velsky and Landis. Every node caches the
height of its subtree and after each insert or remove the nodes on the path
back to the root are rotated until their children differ in height by at most
one. That keeps the tree height logarithmic in the number of keys.

Nodes are updated in place. The tree is strictly owned top down, no node has
more than one parent.
"""
import logging

from . import settings
from .traversal import INORDER, traverse
from .validation import check_invariants

logger = logging.getLogger(__name__)

LEFT_HEAVY = -1
BALANCED = 0
RIGHT_HEAVY = 1


class Node:
    def __init__(self, key, value, left=None, right=None):
        self.key = key
        self.value = value
        self.left = left
        self.right = right
        self.height = 1 + max(
            left.height if left is not None else 0,
            right.height if right is not None else 0,
        )

    def __repr__(self):
        return f"Node(key={self.key!r}, value={self.value!r}, height={self.height})"


class AVLTree:
    def __init__(self, validate=None):
        self.root = None
        self._len = 0

        if validate is None:
            validate = settings.CHECK_INVARIANTS
        self.validate = validate

    def __len__(self):
        return self._len

    def __repr__(self):
        items = ", ".join(f"{k!r}: {v!r}" for k, v in self.items())
        return f"AVLTree({{{items}}})"

    @property
    def height(self):
        return self._height(self.root)

    def _height(self, node):
        if node is None:
            return 0
        return node.height

    def _update_height(self, node):
        node.height = 1 + max(self._height(node.left), self._height(node.right))

    def _balance_factor(self, node):
        return self._height(node.left) - self._height(node.right)

    def _balance_state(self, node):
        assert node is not None, "balance state of an absent node"

        factor = self._balance_factor(node)
        if factor >= 2:
            return LEFT_HEAVY
        elif factor <= -2:
            return RIGHT_HEAVY
        return BALANCED

    def _rotate_left(self, old_root):
        """
        Rotates the root of a subtree so that it's right child
        is the new root and the old root becomes the left child.
        """
        assert old_root.right is not None, "rotate left without a right child"

        new_root = old_root.right
        old_root.right = new_root.left
        new_root.left = old_root
        self._update_height(old_root)
        self._update_height(new_root)
        logger.debug("rotated %r left under %r", old_root.key, new_root.key)
        return new_root

    def _rotate_right(self, old_root):
        """
        Inverse of `_rotate_left`.
        """
        assert old_root.left is not None, "rotate right without a left child"

        new_root = old_root.left
        old_root.left = new_root.right
        new_root.right = old_root
        self._update_height(old_root)
        self._update_height(new_root)
        logger.debug("rotated %r right under %r", old_root.key, new_root.key)
        return new_root

    def _balance(self, node):
        """
        Restore the balance of `node` assuming both of its subtrees are
        already balanced. A heavy child that leans the other way (a zig-zag)
        gets rotated first so the final rotation actually evens out the
        heights.
        """
        self._update_height(node)
        state = self._balance_state(node)

        if state == RIGHT_HEAVY:
            if self._balance_factor(node.right) > 0:
                node.right = self._rotate_right(node.right)
            return self._rotate_left(node)
        if state == LEFT_HEAVY:
            if self._balance_factor(node.left) < 0:
                node.left = self._rotate_left(node.left)
            return self._rotate_right(node)
        return node

    def _insert_recursive(self, node, key, value):
        if node is None:
            self._len += 1
            return Node(key, value)

        if key < node.key:
            node.left = self._insert_recursive(node.left, key, value)
        elif key > node.key:
            node.right = self._insert_recursive(node.right, key, value)
        else:
            assert key == node.key, f"key {key!r} is not ordered against {node.key!r}"
            node.value = value
            return node

        return self._balance(node)

    def insert(self, key, value):
        """
        Add `key` to the tree. An existing key keeps its place in the tree and
        has its value replaced. Keys must be totally ordered, a key like
        `float("nan")` that compares unequal to everything fails an assertion
        once it meets another key.
        """
        self.root = self._insert_recursive(self.root, key, value)
        self._after_mutation()

    def __setitem__(self, key, value):
        self.insert(key, value)

    def _min_node(self, node):
        while node.left is not None:
            node = node.left
        return node

    def _max_node(self, node):
        while node.right is not None:
            node = node.right
        return node

    def _remove_recursive(self, node, key):
        if node is None:
            return None

        if key < node.key:
            node.left = self._remove_recursive(node.left, key)
        elif key > node.key:
            node.right = self._remove_recursive(node.right, key)
        else:
            if node.left is None and node.right is None:
                self._len -= 1
                return None

            # a lone child is already balanced
            if node.left is None:
                self._len -= 1
                return node.right
            if node.right is None:
                self._len -= 1
                return node.left

            successor = self._min_node(node.right)
            node.key = successor.key
            node.value = successor.value
            node.right = self._remove_recursive(node.right, successor.key)

        return self._balance(node)

    def remove(self, key):
        """
        Remove `key` and its value. Removing a key that isn't in the tree does
        nothing.
        """
        size = self._len
        self.root = self._remove_recursive(self.root, key)

        if self._len == size:
            logger.debug("remove of missing key %r ignored", key)
        self._after_mutation()

    def __delitem__(self, key):
        if key not in self:
            raise KeyError(key)
        self.remove(key)

    def remove_value(self, value):
        missing = object()
        key = self.key_of(value, default=missing)

        if key is missing:
            logger.debug("remove of missing value %r ignored", value)
            return
        self.remove(key)

    def clear(self):
        self.root = None
        self._len = 0

    def _after_mutation(self):
        if self.validate:
            check_invariants(self)

    def _find(self, key):
        current = self.root

        while current is not None:
            if key < current.key:
                current = current.left
            elif key > current.key:
                current = current.right
            else:
                return current

        return None

    def contains(self, key):
        return self._find(key) is not None

    def __contains__(self, key):
        return self.contains(key)

    def value_of(self, key, default=None):
        node = self._find(key)
        if node is None:
            return default
        return node.value

    def get(self, key, default=None):
        return self.value_of(key, default)

    def __getitem__(self, key):
        node = self._find(key)
        if node is None:
            raise KeyError(key)
        return node.value

    def key_of(self, value, default=None):
        """
        Reverse lookup. Values aren't ordered so this walks the whole tree and
        returns the smallest key holding `value`.
        """
        for record in traverse(self.root, INORDER):
            if record.value == value:
                return record.key
        return default

    def min_key(self):
        if self.root is None:
            return None
        return self._min_node(self.root).key

    def max_key(self):
        if self.root is None:
            return None
        return self._max_node(self.root).key

    def traverse(self, order=INORDER):
        return traverse(self.root, order)

    def __iter__(self):
        for record in traverse(self.root, INORDER):
            yield record.key

    def keys(self):
        return iter(self)

    def values(self):
        for record in traverse(self.root, INORDER):
            yield record.value

    def items(self):
        for record in traverse(self.root, INORDER):
            yield record.key, record.value
