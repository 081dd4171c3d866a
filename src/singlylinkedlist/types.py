"""Type definitions for singlylinkedlist."""

from typing import Callable, TypeAlias, TypeVar

# Element type stored in a list
T = TypeVar("T")

# Callable producing the stored copy of an inserted element
Copier: TypeAlias = Callable[[T], T]
