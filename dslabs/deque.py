"""A double-ended queue built on a doubly linked list."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional, Sequence


@dataclass(eq=False)
class _Node:
    data: Any
    next: Optional["_Node"] = None
    prev: Optional["_Node"] = None


class Deque:
    """A deque with a left and a right end."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._left: Optional[_Node] = None
        self._right: Optional[_Node] = None
        for item in items:
            self.push_right(item)

    def __iter__(self) -> Iterator[Any]:
        node = self._left
        while node is not None:
            yield node.data
            node = node.next

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __repr__(self) -> str:
        return f"Deque({list(self)!r})"

    def push_left(self, item: Any) -> None:
        """Add item at the left end."""
        node = _Node(item, next=self._left)
        if self._left is None:
            self._right = node
        else:
            self._left.prev = node
        self._left = node

    def push_right(self, item: Any) -> None:
        """Add item at the right end."""
        node = _Node(item, prev=self._right)
        if self._right is None:
            self._left = node
        else:
            self._right.next = node
        self._right = node

    def pop_left(self) -> Any:
        """Remove and return the item at the left end."""
        if self._left is None:
            raise IndexError("pop from an empty deque")
        node = self._left
        self._left = node.next
        if self._left is None:
            self._right = None
        else:
            self._left.prev = None
        return node.data

    def pop_right(self) -> Any:
        """Remove and return the item at the right end."""
        if self._right is None:
            raise IndexError("pop from an empty deque")
        node = self._right
        self._right = node.prev
        if self._right is None:
            self._left = None
        else:
            self._right.next = None
        return node.data

    def is_empty(self) -> bool:
        """Return True if the deque holds no items."""
        return self._left is None

    def remove_duplicates(self) -> None:
        """Replace every run of equal consecutive items with a single copy."""
        current = self._left
        while current is not None:
            following = current.next
            while following is not None and following.data == current.data:
                following = following.next
            current.next = following
            if following is None:
                self._right = current
            else:
                following.prev = current
            current = following


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Push sample strings, remove runs of duplicates and print them from the right."""
    items = list(argv) if argv else ["ba", "ba", "ab", "ab", "ab", "ab", "ba", "ba"]
    deque = Deque()
    for item in items:
        deque.push_left(item)
    deque.remove_duplicates()
    while not deque.is_empty():
        sys.stdout.write(f"{deque.pop_right()}\n")
    return 0