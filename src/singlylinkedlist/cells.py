"""Cell records making up the singly-linked chain."""

from typing import Generic

from singlylinkedlist.types import T


class Cell(Generic[T]):
    """A cell in the singly-linked chain: one element and a link to the next cell."""

    __slots__ = ("value", "next")

    def __init__(self, value: T, next: "Cell[T] | None" = None) -> None:
        self.value = value
        self.next = next


class Sentinel(Cell[T]):
    """Head cell embedded in a list. Its value is never read; only ``next`` is used."""

    __slots__ = ()

    def __init__(self) -> None:
        super().__init__(None, None)  # type: ignore[arg-type]
