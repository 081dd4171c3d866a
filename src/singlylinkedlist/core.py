"""Main SingleLinkedList implementation."""

import copy
import functools
import logging
from collections.abc import Iterable, Iterator
from typing import Generic

from singlylinkedlist.cells import Cell, Sentinel
from singlylinkedlist.cursor import ConstCursor, Cursor
from singlylinkedlist.errors import EmptyListError, InvalidCursorError
from singlylinkedlist.formatting import format_list
from singlylinkedlist.types import Copier, T

logger = logging.getLogger(__name__)


@functools.total_ordering
class SingleLinkedList(Generic[T]):
    """
    Singly-linked list with a before-begin sentinel and positional mutation.

    Elements are stored as copies made by the list's copier. Every insertion
    builds its new cell, copy included, before touching any link of the chain,
    so a failing copy leaves the list exactly as it was.
    """

    def __init__(self, values: Iterable[T] = (), *, copier: Copier[T] | None = None) -> None:
        """
        Initialize the list.

        Args:
            values: Elements to copy into the list, in order. May be another
                SingleLinkedList, whose copier is inherited unless one is given.
            copier: Callable producing the stored copy of each inserted element
                (default copy.copy).
        """
        if copier is None:
            copier = values._copier if isinstance(values, SingleLinkedList) else copy.copy
        self._copier: Copier[T] = copier
        self._head: Sentinel[T] = Sentinel()
        self._size = 0
        self._copy_and_swap(values)

    def copy(self) -> "SingleLinkedList[T]":
        """Return an element-wise copy of the list."""
        return type(self)(self)

    def __copy__(self) -> "SingleLinkedList[T]":
        return self.copy()

    def assign(self, other: Iterable[T]) -> "SingleLinkedList[T]":
        """
        Replace the contents with copies of another sequence's elements.

        Returns:
            This list

        If copying fails the list keeps its previous contents.
        """
        if other is not self:
            replacement = type(self)(other, copier=self._copier)
            self.swap(replacement)
        return self

    def swap(self, other: "SingleLinkedList[T]") -> None:
        """
        Exchange contents with another list.

        Only the chains and sizes move; each list keeps its own sentinel, so a
        before_begin() cursor stays with its list while other cursors follow
        their cells.
        """
        self._head.next, other._head.next = other._head.next, self._head.next
        self._size, other._size = other._size, self._size

    def size(self) -> int:
        """Return the number of elements."""
        return self._size

    def is_empty(self) -> bool:
        """Return True if the list holds no elements."""
        return self._size == 0

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def before_begin(self) -> Cursor[T]:
        """Return a cursor at the sentinel, the position before the first element."""
        return Cursor(self._head, self._copier)

    def begin(self) -> Cursor[T]:
        """Return a cursor at the first element, or end() if the list is empty."""
        return Cursor(self._head.next, self._copier)

    def end(self) -> Cursor[T]:
        """Return the end cursor."""
        return Cursor(None, self._copier)

    def cbefore_begin(self) -> ConstCursor[T]:
        """Read-only before_begin()."""
        return ConstCursor(self._head)

    def cbegin(self) -> ConstCursor[T]:
        """Read-only begin()."""
        return ConstCursor(self._head.next)

    def cend(self) -> ConstCursor[T]:
        """Read-only end()."""
        return ConstCursor(None)

    def push_front(self, value: T) -> None:
        """Insert a copy of value before the first element. O(1)."""
        self._head.next = Cell(self._copier(value), self._head.next)
        self._size += 1

    def pop_front(self) -> None:
        """
        Remove the first element. O(1).

        Raises:
            EmptyListError: If the list is empty
        """
        first = self._head.next
        if first is None:
            raise EmptyListError("Cannot pop from an empty list")
        self._head.next = first.next
        first.next = None
        self._size -= 1

    def push_back(self, value: T) -> None:
        """Append a copy of value after the last element. O(n)."""
        cell = Cell(self._copier(value))
        self._last_cell().next = cell
        self._size += 1

    def pop_back(self) -> None:
        """
        Remove the last element. O(n).

        Raises:
            EmptyListError: If the list is empty
        """
        if self._head.next is None:
            raise EmptyListError("Cannot pop from an empty list")
        before_last: Cell[T] = self._head
        while before_last.next is not None and before_last.next.next is not None:
            before_last = before_last.next
        before_last.next = None
        self._size -= 1

    def insert_after(self, pos: ConstCursor[T], value: T) -> Cursor[T]:
        """
        Insert a copy of value right after pos.

        Args:
            pos: Cursor at the sentinel or at an element of this list. Cursors
                obtained from another list are not detected and corrupt both
                lists.

        Returns:
            Cursor at the inserted element

        Raises:
            InvalidCursorError: If pos is the end cursor
        """
        node = self._cell_at(pos)
        cell = Cell(self._copier(value), node.next)
        node.next = cell
        self._size += 1
        return Cursor(cell, self._copier)

    def erase_after(self, pos: ConstCursor[T]) -> Cursor[T]:
        """
        Remove the element right after pos.

        Args:
            pos: Cursor at the sentinel or at an element of this list that is
                followed by another element. Cursors obtained from
                another list are not detected and corrupt both lists.

        Returns:
            Cursor at the element that followed the removed one (possibly end)

        Raises:
            InvalidCursorError: If pos is the end cursor or the last element
        """
        node = self._cell_at(pos)
        erased = node.next
        if erased is None:
            raise InvalidCursorError("No element follows the given cursor")
        node.next = erased.next
        erased.next = None
        self._size -= 1
        return Cursor(node.next, self._copier)

    def clear(self) -> None:
        """Remove all elements, releasing them front to back."""
        if self._size:
            logger.debug("Clearing list of %d elements", self._size)
        while self._head.next is not None:
            first = self._head.next
            self._head.next = first.next
            first.next = None
        self._size = 0

    def __iter__(self) -> Iterator[T]:
        node = self._head.next
        while node is not None:
            yield node.value
            node = node.next

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SingleLinkedList):
            return NotImplemented
        if other is self:
            return True
        mine = self._head.next
        theirs = other._head.next
        while mine is not None and theirs is not None:
            if not mine.value == theirs.value:
                return False
            mine = mine.next
            theirs = theirs.next
        return mine is None and theirs is None

    __hash__ = None  # type: ignore[assignment]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, SingleLinkedList):
            return NotImplemented
        mine = self._head.next
        theirs = other._head.next
        while theirs is not None:
            if mine is None or mine.value < theirs.value:
                return True
            if theirs.value < mine.value:
                return False
            mine = mine.next
            theirs = theirs.next
        return False

    def __str__(self) -> str:
        return format_list(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}([{', '.join(repr(value) for value in self)}])"

    @classmethod
    def _empty(cls, copier: Copier[T]) -> "SingleLinkedList[T]":
        """Return an empty list without going through __init__."""
        lst = cls.__new__(cls)
        lst._copier = copier
        lst._head = Sentinel()
        lst._size = 0
        return lst

    def _copy_and_swap(self, values: Iterable[T]) -> None:
        """Build a temporary list from values, then take over its chain."""
        temporary = self._empty(self._copier)
        back: Cell[T] = temporary._head
        try:
            for value in values:
                back.next = Cell(self._copier(value))
                back = back.next
                temporary._size += 1
        except BaseException:
            logger.debug("Discarding %d copied elements after a failed copy", temporary._size)
            # back still points at the last copied cell
            del back
            temporary.clear()
            raise
        self.swap(temporary)

    def _last_cell(self) -> Cell[T]:
        """Return the last cell of the chain, or the sentinel if the list is empty."""
        back: Cell[T] = self._head
        while back.next is not None:
            back = back.next
        return back

    def _cell_at(self, pos: ConstCursor[T]) -> Cell[T]:
        """Return the cell a positional cursor refers to, which may be the sentinel."""
        if not isinstance(pos, ConstCursor):
            raise InvalidCursorError(f"Expected a cursor, got {type(pos).__name__}")
        node = pos._node
        if node is None:
            raise InvalidCursorError("Cannot insert or erase after the end cursor")
        return node


def swap(lhs: SingleLinkedList[T], rhs: SingleLinkedList[T]) -> None:
    """Exchange the contents of two lists."""
    lhs.swap(rhs)
