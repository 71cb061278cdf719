# When enabled, every insert and remove is followed by a full walk of the tree
# checking key order, the height cache and the balance of each node. A broken
# tree raises `validation.InvariantViolation` at the mutation that caused it.
#
# This turns every mutation into an O(n) operation so it should only be
# switched on while debugging or testing.
CHECK_INVARIANTS = False

# An AVL tree with n nodes never grows taller than roughly 1.44 * log2(n + 2).
# Used when reporting on how close a tree sits to its worst case.
AVL_HEIGHT_COEFFICIENT = 1.44

# How many keys `python -m avltreemap` inserts (0..DEMO_SIZE-1, each mapped to
# its square) and which traversal it prints by default.
DEMO_SIZE = 10
DEFAULT_ORDER = "level"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
