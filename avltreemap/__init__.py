"""
An ordered map backed by a self-balancing AVL tree.

- Keys must be orderable with `<` and unique, values can be anything.
- `insert`, `remove`, lookups and membership tests all run in O(log n) time
  since the tree is rebalanced on the way back up from every insert or remove.
- Inserting a key that's already present replaces its value.
- Removing a key or value that isn't present is a no-op, only the dict style
  `del tree[key]` and `tree[key]` raise `KeyError`.
- Traversals are lazy and come in pre, in, post and level order, each step
  yielding `(key, value, level)`.

Not thread safe. Guard the whole tree with a single lock if it's shared.
"""
from .avltree import AVLTree, Node
from .traversal import INORDER, LEVELORDER, POSTORDER, PREORDER, Record
from .validation import InvariantViolation, check_invariants

__all__ = [
    "AVLTree",
    "Node",
    "Record",
    "PREORDER",
    "INORDER",
    "POSTORDER",
    "LEVELORDER",
    "InvariantViolation",
    "check_invariants",
]
