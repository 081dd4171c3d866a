"""Exception classes for singlylinkedlist."""


class SingleLinkedListError(Exception):
    """Base exception for all singlylinkedlist errors."""


class EmptyListError(SingleLinkedListError, IndexError):
    """Raised when removing an element from an empty list."""


class InvalidCursorError(SingleLinkedListError, ValueError):
    """Raised when a cursor is used at a position where the operation is undefined."""
