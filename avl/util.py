from math import log2
from typing import Any
from avl import const, types


def identity(value: Any) -> Any:
    """default comparison key"""

    return value


def max_height(size: int) -> types.Height:
    """worst case height of an avl tree holding size values"""

    if size <= 0:
        return const.HEIGHT_EMPTY

    return int(const.AVL_HEIGHT_FACTOR * log2(size + 2))
