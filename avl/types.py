from typing import Any, Callable, TypeVar

T = TypeVar("T")
Height = int
KeyFunc = Callable[[Any], Any]
