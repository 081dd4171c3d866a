"""Example: a failing element copy leaves the list untouched."""

from singlylinkedlist import SingleLinkedList


class Fragile:
    """Value whose copy fails when flagged."""

    def __init__(self, name: str, fail_on_copy: bool = False) -> None:
        self.name = name
        self.fail_on_copy = fail_on_copy

    def __copy__(self) -> "Fragile":
        if self.fail_on_copy:
            raise MemoryError(f"cannot copy {self.name}")
        return Fragile(self.name)

    def __str__(self) -> str:
        return self.name


def main() -> None:
    """Show that insertion, construction and assignment are all-or-nothing."""
    items = SingleLinkedList([Fragile("a"), Fragile("b"), Fragile("c")])
    print(f"Start: {items}")

    try:
        items.insert_after(items.begin(), Fragile("x", fail_on_copy=True))
    except MemoryError as exc:
        print(f"insert_after failed ({exc}); list is still {items}, size {items.size()}")

    try:
        items.assign([Fragile("y"), Fragile("z", fail_on_copy=True)])
    except MemoryError as exc:
        print(f"assign failed ({exc}); list is still {items}, size {items.size()}")


if __name__ == "__main__":
    main()
