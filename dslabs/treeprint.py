"""ASCII drawing of binary trees.

A node is any object with ``elem``, ``left`` and ``right`` attributes;
a missing child is None. The key drawn for a node is ``str(node.elem)``.
"""

from __future__ import annotations

import sys
from typing import Any, List, Optional, TextIO


def _half(value: int) -> int:
    """Integer division by two, truncating toward zero."""
    return int(value / 2)


def _print_height(node: Any) -> int:
    if node is None:
        return -1
    return 1 + max(_print_height(node.left), _print_height(node.right))


def _put(rows: List[List[str]], row: int, col: int, char: str) -> None:
    line = rows[row]
    if 0 <= col < len(line):
        line[col] = char


def _draw(node: Any, rows: List[List[str]], left: int, top: int, width: int) -> None:
    key = str(node.elem)
    start_shift = 1 - (len(key) - 1) // 2
    middle = left + _half(width)

    for i, char in enumerate(key):
        if middle + i >= len(rows[top]):
            break
        _put(rows, top, middle + start_shift + i, char)

    branch_offset = (width + 3) >> 3
    left_center = left + _half(_half(width) - 1)
    right_center = left + _half(width) + 2 + _half(_half(width) - 1)
    child_width = _half(width) - 1

    if node.left is not None:
        branch_pos = middle - branch_offset + 1
        for pos in range(middle + start_shift - 2, branch_pos, -1):
            _put(rows, top, pos, "_")
        _put(rows, top + 1, branch_pos, "/")
        for pos in range(branch_pos - 1, left_center + 2, -1):
            _put(rows, top + 1, pos, "_")
        _draw(node.left, rows, left, top + 2, child_width)

    if node.right is not None:
        branch_pos = middle + branch_offset + 1
        for pos in range(middle + start_shift + len(key) + 1, branch_pos):
            _put(rows, top, pos, "_")
        _put(rows, top + 1, branch_pos, "\\")
        for pos in range(branch_pos + 1, right_center):
            _put(rows, top + 1, pos, "_")
        _draw(node.right, rows, middle + 2, top + 2, child_width)


def render_tree(root: Optional[Any]) -> str:
    """Return the drawing of the tree rooted at root, one line per row."""
    if root is None:
        return "(empty)\n"
    height = _print_height(root)
    width = (4 << height) - 3
    # Four extra columns leave room for long keys near the right edge.
    rows = [[" "] * (width + 4) for _ in range(2 * height + 1)]
    _draw(root, rows, 0, 0, width)
    return "".join("".join(row) + "\n" for row in rows)


def print_tree(root: Optional[Any], out: Optional[TextIO] = None) -> None:
    """Write the drawing of the tree rooted at root to out (standard output by default)."""
    (out if out is not None else sys.stdout).write(render_tree(root))