"""Forward cursors over a singly-linked chain."""

import copy
from typing import Generic

from singlylinkedlist.cells import Cell, Sentinel
from singlylinkedlist.errors import InvalidCursorError
from singlylinkedlist.types import Copier, T


class ConstCursor(Generic[T]):
    """
    Read-only forward cursor.

    A cursor refers to a list's sentinel (the before-begin position), to one of
    its cells, or to the terminal position (``None``), which is also where a
    default-constructed cursor points. Cursors own nothing: they neither keep a
    list alive nor stop a cell from being erased.
    """

    __slots__ = ("_node",)

    def __init__(self, node: Cell[T] | None = None) -> None:
        self._node = node

    @property
    def value(self) -> T:
        """The element of the current cell."""
        return self._cell().value

    def advance(self) -> "ConstCursor[T]":
        """Move to the following cell and return this cursor."""
        if self._node is None:
            raise InvalidCursorError("Cannot advance a cursor past the end")
        self._node = self._node.next
        return self

    def post_advance(self) -> "ConstCursor[T]":
        """Move to the following cell and return a cursor at the prior position."""
        prior = self.copy()
        self.advance()
        return prior

    def next(self) -> "ConstCursor[T]":
        """Return a new cursor one step ahead, leaving this one in place."""
        return self.copy().advance()

    def copy(self) -> "ConstCursor[T]":
        """Return an independent cursor at the same position."""
        return type(self)(self._node)

    def __copy__(self) -> "ConstCursor[T]":
        return self.copy()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConstCursor):
            return NotImplemented
        return self._node is other._node

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        if self._node is None:
            position = "end"
        elif isinstance(self._node, Sentinel):
            position = "before_begin"
        else:
            position = f"value={self._node.value!r}"
        return f"{type(self).__name__}({position})"

    def _cell(self) -> Cell[T]:
        """Return the current cell, rejecting the sentinel and the end position."""
        if self._node is None:
            raise InvalidCursorError("Cannot dereference the end cursor")
        if isinstance(self._node, Sentinel):
            raise InvalidCursorError("Cannot dereference the before-begin cursor")
        return self._node


class Cursor(ConstCursor[T]):
    """
    Read-write forward cursor.

    Accepted anywhere a ConstCursor is; assigning ``value`` replaces the element
    of the current cell with a copy made by the owning list's copier.
    """

    __slots__ = ("_copier",)

    def __init__(self, node: Cell[T] | None = None, copier: Copier[T] = copy.copy) -> None:
        super().__init__(node)
        self._copier = copier

    @property
    def value(self) -> T:
        """The element of the current cell."""
        return self._cell().value

    @value.setter
    def value(self, value: T) -> None:
        cell = self._cell()
        cell.value = self._copier(value)

    def copy(self) -> "Cursor[T]":
        """Return an independent cursor at the same position."""
        return Cursor(self._node, self._copier)

    def as_const(self) -> ConstCursor[T]:
        """Return a read-only cursor at the same position."""
        return ConstCursor(self._node)
