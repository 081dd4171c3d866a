"""Demonstration of SingleLinkedList positional operations on a list of points."""

import logging
import sys
from dataclasses import dataclass
from typing import TextIO

from singlylinkedlist.core import SingleLinkedList
from singlylinkedlist.formatting import write_list


@dataclass
class Point:
    """A 2D point printed as ``(x, y)``."""

    x: int = 0
    y: int = 0

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


def _show(out: TextIO, points: SingleLinkedList[Point]) -> None:
    write_list(out, points)
    out.write("\n")


def main(out: TextIO = sys.stdout) -> None:
    """Run the demonstration, writing each intermediate list to out."""
    points = SingleLinkedList([Point(1, 2), Point(3, 4), Point(5, 6), Point(7, 8)])
    _show(out, points)

    points.pop_front()
    points.pop_back()
    _show(out, points)

    points.push_front(Point(-1, -2))
    points.push_back(Point(-7, -8))
    _show(out, points)

    inserted = points.insert_after(points.begin().advance(), Point(10, 20))
    _show(out, points)

    points.erase_after(inserted)
    _show(out, points)


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    main()
