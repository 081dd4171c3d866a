"""singlylinkedlist - Singly-linked list with before-begin cursors and copy-on-insert semantics."""

from singlylinkedlist.core import SingleLinkedList, swap
from singlylinkedlist.cursor import ConstCursor, Cursor
from singlylinkedlist.errors import (
    EmptyListError,
    InvalidCursorError,
    SingleLinkedListError,
)
from singlylinkedlist.formatting import format_list, write_list
from singlylinkedlist.types import Copier

__version__ = "0.0.1"

__all__ = [
    "SingleLinkedList",
    "swap",
    "Cursor",
    "ConstCursor",
    "SingleLinkedListError",
    "EmptyListError",
    "InvalidCursorError",
    "format_list",
    "write_list",
    "Copier",
]
