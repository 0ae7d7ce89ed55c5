HEIGHT_EMPTY = -1
HEIGHT_LEAF = 0
MAX_BALANCE = 1

# upper bound on height / log2(n + 2) for any avl tree
AVL_HEIGHT_FACTOR = 1.4405

ROTATE_LEFT = "left"
ROTATE_RIGHT = "right"
ROTATE_LEFT_RIGHT = "left-right"
ROTATE_RIGHT_LEFT = "right-left"

EVENT_ROTATE = "avltree.rotate"
EVENT_CLEAR = "avltree.clear"
