"""Walk-throughs of the array list, linked list and stack."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from typing import Optional

from listkit.arraylist import ArrayList
from listkit.singly_linked_list import SinglyLinkedList, UnderflowError
from listkit.stack import Stack


def _report(lst: ArrayList) -> None:
    print(lst)


def arraylist_demo() -> None:
    """Exercise the array list: growth, insertion, search, deletion, clearing."""
    print("--- Initializing ArrayList ---")
    my_list = ArrayList(2)
    _report(my_list)

    print("\n--- Appending elements ---")
    my_list.append(10)
    my_list.append(20)
    _report(my_list)

    print("\n--- Appending beyond capacity (triggers resize) ---")
    my_list.append(30)
    _report(my_list)
    my_list.append(40)
    _report(my_list)

    print("\n--- Inserting elements ---")
    my_list.insert(0, 5)
    _report(my_list)
    my_list.insert(3, 25)
    _report(my_list)

    print("\n--- Searching for elements ---")
    print(f"Index of 30: {my_list.index_of(30)}")
    print(f"Index of 5: {my_list.index_of(5)}")
    print(f"Index of 25: {my_list.index_of(25)}")
    print(f"Index of 99 (not found): {my_list.index_of(99)}")

    print("\n--- Deleting elements ---")
    my_list.delete_at(3)
    _report(my_list)
    my_list.remove_last()
    _report(my_list)

    print("\n--- Clearing ArrayList ---")
    my_list.clear()
    _report(my_list)

    print("\n--- Attempting to remove from empty list ---")
    try:
        my_list.remove_last()
    except IndexError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        print("Correctly handled removal from empty list.")

    print("\n--- Re-appending after clear ---")
    my_list.append(100)
    _report(my_list)


def _announce_search(lst: SinglyLinkedList, value: int) -> None:
    print(f"'{value}' Found" if lst.search(value) else f"'{value}' Not Found")


def linked_list_demo() -> None:
    """Exercise the singly linked list: pushes, pop, search, modify, peeks, clear."""
    lst = SinglyLinkedList()
    for value in (6, 7, 13, 45, 43356, 465, 5, 3):
        lst.push_head(value)
    lst.push_tail(100)
    print(lst)

    lst.pop()
    print(lst)

    _announce_search(lst, 4)
    _announce_search(lst, 43356)

    lst.modify(43356, 4)
    print(lst)
    _announce_search(lst, 4)

    print(f"Head element: {lst.peek_head()}")
    print(f"Tail element: {lst.peek_tail()}")

    print("Empty" if lst.is_empty() else "Not Empty")
    lst.clear()
    try:
        lst.pop()
    except UnderflowError:
        print("!!!UnderFlow!!!", file=sys.stderr)
    print("Empty" if lst.is_empty() else "Not Empty")


def stack_demo() -> None:
    """Exercise the stack: push, peek, pop, emptiness and clearing."""
    stack = Stack()
    for value in (10, 20, 30):
        stack.push(value)

    print(f"Top element: {stack.peek()}")
    print(f"Popped element: {stack.pop()}")
    print(f"Popped element: {stack.pop()}")

    print("Stack is empty" if stack.is_empty() else "Stack is not empty")
    stack.clear()
    print(
        "Stack is empty after clearing"
        if stack.is_empty()
        else "Stack is not empty after clearing"
    )


_DEMOS = {
    "arraylist": arraylist_demo,
    "linkedlist": linked_list_demo,
    "stack": stack_demo,
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run one demo by name, or all of them."""
    parser = argparse.ArgumentParser(description="Run the list demos.")
    parser.add_argument(
        "demo",
        nargs="?",
        default="all",
        choices=[*_DEMOS, "all"],
        help="which demo to run (default: all)",
    )
    args = parser.parse_args(argv)
    selected = _DEMOS.values() if args.demo == "all" else [_DEMOS[args.demo]]
    for demo in selected:
        demo()
    return 0


if __name__ == "__main__":
    sys.exit(main())