from .avltree import AVLTree, Node
from .errors import EmptyTree
from .util import max_height

__all__ = [
    "AVLTree",
    "Node",
    "EmptyTree",
    "max_height",
]
