"""Tests for the cell records of the chain."""

from singlylinkedlist.cells import Cell, Sentinel


def test_cell_creation() -> None:
    """Test creating a cell."""
    cell = Cell("value1")
    assert cell.value == "value1"
    assert cell.next is None


def test_cell_links_to_next() -> None:
    """Test chaining cells through next links."""
    tail = Cell(2)
    head = Cell(1, tail)
    assert head.next is tail
    assert tail.next is None


def test_sentinel_is_a_cell() -> None:
    """Test the sentinel takes part in the chain like any cell."""
    sentinel = Sentinel[int]()
    assert isinstance(sentinel, Cell)
    assert sentinel.next is None
    sentinel.next = Cell(1)
    assert sentinel.next.value == 1


def test_cells_have_no_instance_dict() -> None:
    """Test cells only carry the value and the next link."""
    cell = Cell(1)
    assert not hasattr(cell, "__dict__")
    assert not hasattr(Sentinel(), "__dict__")
