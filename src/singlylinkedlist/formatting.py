"""Textual representation of lists: ``{a, b, c}``."""

from collections.abc import Iterable
from typing import TextIO

OPEN_BRACKET = "{"
CLOSE_BRACKET = "}"
DELIMITER = ", "


def write_list(sink: TextIO, values: Iterable[object]) -> None:
    """Write the elements in iteration order, delimited and enclosed in braces."""
    sink.write(OPEN_BRACKET)
    first = True
    for value in values:
        if not first:
            sink.write(DELIMITER)
        first = False
        sink.write(str(value))
    sink.write(CLOSE_BRACKET)


def format_list(values: Iterable[object]) -> str:
    """Return the text write_list() would emit."""
    return OPEN_BRACKET + DELIMITER.join(str(value) for value in values) + CLOSE_BRACKET
