"""Basic usage example for singlylinkedlist."""

from singlylinkedlist import SingleLinkedList


def main() -> None:
    """Demonstrate cursor-based list operations."""
    print("=== Building a list ===\n")
    numbers = SingleLinkedList([1, 2, 3, 4])
    print(f"List: {numbers} (size {numbers.size()})\n")

    print("=== Head operations ===\n")
    numbers.push_front(0)
    print(f"After push_front(0): {numbers}")
    numbers.pop_front()
    print(f"After pop_front():   {numbers}\n")

    print("=== Positional operations ===\n")
    # Walk to the element holding 2 and insert after it
    position = numbers.begin()
    while position != numbers.end() and position.value != 2:
        position.advance()
    inserted = numbers.insert_after(position, 25)
    print(f"Inserted {inserted.value} after 2: {numbers}")

    following = numbers.erase_after(numbers.before_begin())
    print(f"Erased the first element: {numbers}, now at {following.value}\n")

    print("=== Iteration and comparison ===\n")
    for value in numbers:
        print(f"  {value}")
    print(f"\n{numbers} < {{2, 25, 4}}: {numbers < SingleLinkedList([2, 25, 4])}")


if __name__ == "__main__":
    main()
