"""Stack and queue exercises.

A stack is a list whose last element is the top; a queue is a
collections.deque whose left end is the front.
"""

from __future__ import annotations

from collections import deque
from typing import Any, Deque, List, Sequence


def stack_sum(stack: Sequence[Any]) -> Any:
    """Return the sum of the items in stack, leaving it unchanged.

    Items are added top first: top + (next + (... + (bottom + 0))).
    """
    total: Any = 0
    for item in stack:
        total = item + total
    return total


def scramble(queue: Deque[Any]) -> None:
    """Reverse the even-numbered blocks of queue in place.

    Blocks have sizes 1, 2, 3, ...; the second, fourth and later even
    blocks are reversed. A short final block is treated as complete.
    """
    items = list(queue)
    queue.clear()
    start = 0
    size = 1
    reverse = False
    while start < len(items):
        block = items[start:start + size]
        queue.extend(reversed(block) if reverse else block)
        start += size
        size += 1
        reverse = not reverse


def verify_same(stack: Sequence[Any], queue: Deque[Any]) -> bool:
    """Return True if stack (bottom to top) and queue (front to back) hold equal items in order.

    Neither container is changed.
    """
    return list(stack) == list(queue)


def _braced(items: List[Any]) -> str:
    return "{" + ", ".join(str(item) for item in items) + "}"


def stack_to_string(stack: Sequence[Any]) -> str:
    """Render a stack as "{top, ..., bottom}"."""
    return _braced(list(reversed(stack)))


def queue_to_string(queue: "deque[Any]") -> str:
    """Render a queue as "{back, ..., front}"."""
    return _braced(list(reversed(queue)))