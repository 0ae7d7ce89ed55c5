from __future__ import annotations
from dataclasses import dataclass
from typing import Generic, Iterator, List, Optional, Tuple
from structlog import get_logger
from avl import const, errors as err, types, util

_LOGGER = get_logger()


@dataclass
class Node(Generic[types.T]):
    """tree nodes"""

    value: types.T
    left: Optional[Node[types.T]] = None
    right: Optional[Node[types.T]] = None
    height: types.Height = const.HEIGHT_LEAF


class AVLTree(Generic[types.T]):
    """avl tree implementation"""

    def __init__(self, key: types.KeyFunc = util.identity):
        self.root: Optional[Node[types.T]] = None
        self._key = key
        self._size = 0
        self.logger = _LOGGER.bind(tree=id(self))

    def insert(self, value: types.T) -> bool:
        """add value, false if already present"""

        inserted, self.root = self._insert(self.root, value)

        if inserted:
            self._size += 1

        return inserted

    def remove(self, value: types.T) -> bool:
        """drop value, false if not present"""

        removed, self.root = self._remove(self.root, value)

        if removed:
            self._size -= 1

        return removed

    def contains(self, value: types.T) -> bool:
        """bst search"""

        node = self.root

        while node:
            cmp = self._compare(value, node.value)

            if cmp == 0:
                return True

            node = node.left if cmp < 0 else node.right

        return False

    def min(self) -> types.T:
        """smallest value"""

        if not self.root:
            raise err.EmptyTree()

        return self._min_node(self.root).value

    def max(self) -> types.T:
        """largest value"""

        if not self.root:
            raise err.EmptyTree()

        node = self.root

        while node.right:
            node = node.right

        return node.value

    def height(self) -> types.Height:
        """cached height of the root, -1 when empty"""

        return self._getheight(self.root)

    def size(self) -> int:
        """number of values stored"""

        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def clear(self) -> None:
        """drop every node"""

        self.logger.debug(const.EVENT_CLEAR, size=self._size)
        self.root = None
        self._size = 0

    def in_order(self) -> List[types.T]:
        """left, node, right"""

        result: List[types.T] = []
        self._in_order(self.root, result)
        return result

    def pre_order(self) -> List[types.T]:
        """node, left, right"""

        result: List[types.T] = []
        self._pre_order(self.root, result)
        return result

    def post_order(self) -> List[types.T]:
        """left, right, node"""

        result: List[types.T] = []
        self._post_order(self.root, result)
        return result

    def is_balanced(self) -> bool:
        """
        check the avl invariant at every node. heights are recomputed from
        the structure, the cached values are not trusted
        """

        balanced, _ = self._is_balanced(self.root)
        return balanced

    def _insert(
        self, root: Optional[Node[types.T]], value: types.T
    ) -> Tuple[bool, Node[types.T]]:
        """bst insert then rebalance on the way back up"""

        if not root:
            return True, Node(value=value)

        cmp = self._compare(value, root.value)

        if cmp == 0:
            return False, root

        if cmp < 0:
            inserted, root.left = self._insert(root.left, value)
        else:
            inserted, root.right = self._insert(root.right, value)

        if not inserted:
            return False, root

        self._update_height(root)
        return True, self._rebalance(root)

    def _remove(
        self, root: Optional[Node[types.T]], value: types.T
    ) -> Tuple[bool, Optional[Node[types.T]]]:
        """
        bst delete. a node with two children takes the value of its in-order
        successor, which is then removed from the right subtree by value
        """

        if not root:
            return False, None

        cmp = self._compare(value, root.value)

        if cmp < 0:
            removed, root.left = self._remove(root.left, value)
        elif cmp > 0:
            removed, root.right = self._remove(root.right, value)
        elif not root.left:
            return True, root.right
        elif not root.right:
            return True, root.left
        else:
            successor = self._min_node(root.right)
            root.value = successor.value
            removed, root.right = self._remove(root.right, successor.value)

        if not removed:
            return False, root

        self._update_height(root)
        return True, self._rebalance(root)

    def _rebalance(self, node: Node[types.T]) -> Node[types.T]:
        """rotate if balance factor +/- 2, returns the new subtree root"""

        balance = self._getheight(node.left) - self._getheight(node.right)

        if balance > const.MAX_BALANCE and node.left:
            kind = const.ROTATE_RIGHT

            # equal heights take the single rotation
            if self._getheight(node.left.right) > self._getheight(node.left.left):
                kind = const.ROTATE_LEFT_RIGHT
                node.left = self._left_rotate(node.left)

            self.logger.debug(const.EVENT_ROTATE, kind=kind, pivot=node.value)
            return self._right_rotate(node)

        if balance < -const.MAX_BALANCE and node.right:
            kind = const.ROTATE_LEFT

            if self._getheight(node.right.left) > self._getheight(node.right.right):
                kind = const.ROTATE_RIGHT_LEFT
                node.right = self._right_rotate(node.right)

            self.logger.debug(const.EVENT_ROTATE, kind=kind, pivot=node.value)
            return self._left_rotate(node)

        self._update_height(node)
        return node

    def _left_rotate(self, node: Node[types.T]) -> Node[types.T]:
        """l rotate"""

        right = node.right

        if not right:
            return node

        node.right = right.left
        right.left = node
        self._update_height(node)
        self._update_height(right)
        return right

    def _right_rotate(self, node: Node[types.T]) -> Node[types.T]:
        """r rotate"""

        left = node.left

        if not left:
            return node

        node.left = left.right
        left.right = node
        self._update_height(node)
        self._update_height(left)
        return left

    def _in_order(self, node: Optional[Node[types.T]], result: List[types.T]):
        if not node:
            return

        self._in_order(node.left, result)
        result.append(node.value)
        self._in_order(node.right, result)

    def _pre_order(self, node: Optional[Node[types.T]], result: List[types.T]):
        if not node:
            return

        result.append(node.value)
        self._pre_order(node.left, result)
        self._pre_order(node.right, result)

    def _post_order(self, node: Optional[Node[types.T]], result: List[types.T]):
        if not node:
            return

        self._post_order(node.left, result)
        self._post_order(node.right, result)
        result.append(node.value)

    def _is_balanced(
        self, node: Optional[Node[types.T]]
    ) -> Tuple[bool, types.Height]:
        """(balanced, recomputed height)"""

        if not node:
            return True, const.HEIGHT_EMPTY

        lbalanced, lheight = self._is_balanced(node.left)
        rbalanced, rheight = self._is_balanced(node.right)
        balanced = (
            lbalanced and rbalanced and abs(lheight - rheight) <= const.MAX_BALANCE
        )

        return balanced, 1 + max(lheight, rheight)

    def _compare(self, one: types.T, other: types.T) -> int:
        """simple comparator"""

        keyone, keyother = self._key(one), self._key(other)

        if keyone == keyother:
            return 0
        if keyone < keyother:
            return -1

        return 1

    def _min_node(self, node: Node[types.T]) -> Node[types.T]:
        """leftmost node of a subtree"""

        while node.left:
            node = node.left

        return node

    def _update_height(self, node: Node[types.T]) -> None:
        node.height = 1 + max(self._getheight(node.left), self._getheight(node.right))

    def _getheight(self, node: Optional[Node[types.T]]) -> types.Height:
        """helper"""

        if not node:
            return const.HEIGHT_EMPTY

        return node.height

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def __contains__(self, value: types.T) -> bool:
        return self.contains(value)

    def __iter__(self) -> Iterator[types.T]:
        return iter(self.in_order())

    def __repr__(self) -> str:
        return f"AVLTree({self.in_order()})"
