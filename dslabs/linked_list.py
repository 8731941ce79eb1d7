"""A singly linked list of keys."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import zip_longest
from typing import Iterable, Iterator, List, Optional


@dataclass
class Node:
    """One link in a LinkedList."""

    key: int
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list whose head is its first element."""

    def __init__(self, keys: Iterable[int] = ()) -> None:
        self.head: Optional[Node] = None
        tail: Optional[Node] = None
        for key in keys:
            node = Node(key)
            if tail is None:
                self.head = node
            else:
                tail.next = node
            tail = node

    def _nodes(self) -> Iterator[Node]:
        current = self.head
        while current is not None:
            yield current
            current = current.next

    def __iter__(self) -> Iterator[int]:
        return (node.key for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __str__(self) -> str:
        return "[" + ", ".join(str(key) for key in self) + "]"

    def __repr__(self) -> str:
        return f"LinkedList({self.to_list()!r})"

    def insert(self, new_key: int) -> None:
        """Insert new_key at the head of the list."""
        self.head = Node(new_key, self.head)

    def to_list(self) -> List[int]:
        """Return the keys from head to tail."""
        return list(self)

    def delete_last_element(self) -> None:
        """Remove the last node; an empty list is left as it is."""
        if self.head is None:
            return
        if self.head.next is None:
            self.head = None
            return
        current = self.head
        while current.next is not None and current.next.next is not None:
            current = current.next
        current.next = None

    def remove(self, old_key: int) -> None:
        """Remove the first node holding old_key, if there is one."""
        previous: Optional[Node] = None
        for node in self._nodes():
            if node.key == old_key:
                if previous is None:
                    self.head = node.next
                else:
                    previous.next = node.next
                return
            previous = node

    def insert_after(self, old_key: int, new_key: int) -> None:
        """Insert a node holding new_key after every node holding old_key.

        Nodes inserted by this call are not themselves matched.
        """
        current = self.head
        while current is not None:
            following = current.next
            if current.key == old_key:
                current.next = Node(new_key, following)
            current = following


def interleave(first: Optional[LinkedList], second: Optional[LinkedList]) -> LinkedList:
    """Return a new list alternating keys of first and second, starting with first.

    When one runs out, the rest come from the other. None counts as empty.
    """
    missing = object()
    first_keys = first if first is not None else ()
    second_keys = second if second is not None else ()
    return LinkedList(
        key
        for pair in zip_longest(first_keys, second_keys, fillvalue=missing)
        for key in pair
        if key is not missing
    )