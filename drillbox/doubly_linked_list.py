"""A doubly linked list of unique integer keys, each carrying a data value."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Optional

EMPTY_MESSAGE = "no nodes in doubly linked list"

_MENU = "\n".join(
    [
        "",
        "What operation do you want to perform? Select Option number. Enter 0 to exit.",
        "1. appendNode()",
        "2. prependNode()",
        "3. insertNodeAfter()",
        "4. deleteNodeByKey()",
        "5. updateNodeByKey()",
        "6. print()",
        "7. Clear Screen",
        "",
    ]
)
_CLEAR_SCREEN = "\033[2J\033[H"


@dataclass(eq=False)
class Node:
    """A list node linked in both directions."""

    key: int
    data: int
    next: Optional[Node] = field(default=None, repr=False)
    previous: Optional[Node] = field(default=None, repr=False)


class DoublyLinkedList:
    """Nodes with unique keys, linked forwards and backwards from ``head``."""

    def __init__(self) -> None:
        self.head: Optional[Node] = None

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def find(self, key: int) -> Optional[Node]:
        """The node holding ``key``, or None."""
        return next((node for node in self._nodes() if node.key == key), None)

    def _require_absent(self, key: int) -> None:
        if self.find(key) is not None:
            raise ValueError(f"Node already exists with key value: {key}")

    def _require(self, key: int) -> Node:
        node = self.find(key)
        if node is None:
            raise KeyError(key)
        return node

    def append(self, key: int, data: int) -> Node:
        """Add a node at the end; ValueError if ``key`` is already present."""
        self._require_absent(key)
        node = Node(key, data)
        if self.head is None:
            self.head = node
            return node
        *_, tail = self._nodes()
        tail.next = node
        node.previous = tail
        return node

    def prepend(self, key: int, data: int) -> Node:
        """Add a node at the front; ValueError if ``key`` is already present."""
        self._require_absent(key)
        node = Node(key, data, next=self.head)
        if self.head is not None:
            self.head.previous = node
        self.head = node
        return node

    def insert_after(self, after_key: int, key: int, data: int) -> Node:
        """Insert a node right after the one holding ``after_key``.

        KeyError if ``after_key`` is absent, ValueError if ``key`` is present.
        """
        anchor = self._require(after_key)
        self._require_absent(key)
        node = Node(key, data, next=anchor.next, previous=anchor)
        if anchor.next is not None:
            anchor.next.previous = node
        anchor.next = node
        return node

    def delete(self, key: int) -> Node:
        """Unlink and return the node holding ``key``; KeyError if absent."""
        node = self._require(key)
        if node.previous is None:
            self.head = node.next
        else:
            node.previous.next = node.next
        if node.next is not None:
            node.next.previous = node.previous
        node.next = node.previous = None
        return node

    def update(self, key: int, data: int) -> Node:
        """Replace the data of the node holding ``key``; KeyError if absent."""
        node = self._require(key)
        node.data = data
        return node

    def __iter__(self) -> Iterator[tuple[int, int]]:
        return ((node.key, node.data) for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __contains__(self, key: object) -> bool:
        return any(node.key == key for node in self._nodes())

    def render(self) -> str:
        """Printable form of the list, or a note that it is empty."""
        if self.head is None:
            return EMPTY_MESSAGE
        pairs = "".join(f"({key},{data}) <--> " for key, data in self)
        return f"Doubly Linked List Values : {pairs}"


def _tokens(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        yield from line.split()


def _read_int(tokens: Iterator[str]) -> int:
    try:
        token = next(tokens)
    except StopIteration:
        raise EOFError from None
    return int(token)


def _run_option(option: int, dll: DoublyLinkedList, tokens: Iterator[str]) -> None:
    if option == 1:
        print("Append Node Operation \nEnter key & data of the Node to be Appended")
        key, data = _read_int(tokens), _read_int(tokens)
        was_empty = dll.head is None
        try:
            dll.append(key, data)
        except ValueError as exc:
            print(exc)
            return
        print("Node appended as head node" if was_empty else "Node Appended.")
    elif option == 2:
        print("Prepend Node Operation \nEnter key & data of the Node to be Prepended")
        key, data = _read_int(tokens), _read_int(tokens)
        was_empty = dll.head is None
        try:
            dll.prepend(key, data)
        except ValueError as exc:
            print(exc)
            return
        print("Node appended as head node" if was_empty else "Node Prepended")
    elif option == 3:
        print(
            "Insert Node After Operation \nEnter key of existing Node after which "
            "you want to Insert this New node: "
        )
        after_key = _read_int(tokens)
        print("Enter key & data of the New Node first: ")
        key, data = _read_int(tokens), _read_int(tokens)
        try:
            node = dll.insert_after(after_key, key, data)
        except KeyError:
            print(f"No node exists with key value: {after_key}")
            return
        except ValueError as exc:
            print(exc)
            return
        print("Node Inserted at the END" if node.next is None else "Node inserted in Between")
    elif option == 4:
        print("Delete Node By Key Operation - \nEnter key of the Node to be deleted: ")
        key = _read_int(tokens)
        node = dll.find(key)
        if node is None:
            print(f"No node exists with key value: {key}")
            return
        if node.previous is None:
            message = "node unlinked"
        elif node.next is None:
            message = "Node deleted at the end"
        else:
            message = "Node deleted in between"
        dll.delete(key)
        print(message)
    elif option == 5:
        print("Update Node By Key Operation - \nEnter key & NEW data to be updated")
        key, data = _read_int(tokens), _read_int(tokens)
        try:
            dll.update(key, data)
        except KeyError:
            print(f"node doesn't exist with key value {key}")
            return
        print("Node data updated.")
    elif option == 6:
        print()
        print(dll.render())
    elif option == 7:
        print(_CLEAR_SCREEN, end="")
    else:
        print("Enter Proper Option number ")


def main(argv: list[str] | None = None) -> int:
    """Run the interactive menu over standard input until option 0 or end of input."""
    parser = argparse.ArgumentParser(
        prog="doubly-linked-list",
        description="Edit a doubly linked list through a numbered menu read from standard input.",
    )
    parser.parse_args(argv)
    dll = DoublyLinkedList()
    tokens = _tokens(sys.stdin)
    while True:
        print(_MENU)
        try:
            option = _read_int(tokens)
        except EOFError:
            return 0
        except ValueError:
            print("Enter Proper Option number ")
            continue
        if option == 0:
            return 0
        try:
            _run_option(option, dll, tokens)
        except EOFError:
            return 0
        except ValueError:
            print("Enter Proper Option number ")