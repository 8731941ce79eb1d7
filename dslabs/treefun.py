"""Print information about a few sample binary trees."""

from __future__ import annotations

import argparse
import io
import sys
from contextlib import redirect_stdout
from typing import List, MutableSequence, Optional, Sequence, TextIO

from dslabs.binarytree import BinaryTree
from dslabs.coloredout import colorize_against, output_bold
from dslabs.lcg import usrand

_BAR = "~" * 79
_DEFAULT_EXPECTED = "soln_treefun.out"


class _MinStdRand0:
    """Park-Miller minimal standard generator (multiplier 16807)."""

    modulus = 2**31 - 1
    min = 1
    max = modulus - 1

    def __init__(self, seed: int) -> None:
        state = seed % self.modulus
        self._state = state if state != 0 else 1

    def __call__(self) -> int:
        self._state = self._state * 16807 % self.modulus
        return self._state


def _uniform(gen: _MinStdRand0, low: int, high: int) -> int:
    """Uniform integer in [low, high] by rejection and down-scaling."""
    erange = high - low + 1
    scaling = (gen.max - gen.min) // erange
    past = erange * scaling
    while True:
        value = gen() - gen.min
        if value < past:
            return value // scaling + low


def _shuffle(items: MutableSequence[int], gen: _MinStdRand0) -> None:
    """Shuffle items in place, drawing two positions per generator value."""
    n = len(items)
    if n < 2:
        return
    if (gen.max - gen.min) // n < n:
        for i in range(1, n):
            j = _uniform(gen, 0, i)
            items[i], items[j] = items[j], items[i]
        return
    i = 1
    if n % 2 == 0:
        j = _uniform(gen, 0, 1)
        items[i], items[j] = items[j], items[i]
        i += 1
    while i < n:
        span = i + 1
        first, second = divmod(_uniform(gen, 0, span * (span + 1) - 1), span + 1)
        items[i], items[first] = items[first], items[i]
        i += 1
        items[i], items[second] = items[second], items[i]
        i += 1


def _shuffled(seed: int) -> List[int]:
    ordering = list(range(1, 11))
    _shuffle(ordering, _MinStdRand0(seed))
    return ordering


def output_header(name: str, description: str, out: Optional[TextIO] = None) -> None:
    """Write a section header: a bar, the bold name with its description, and a bar."""
    stream = out if out is not None else sys.stdout
    stream.write(_BAR + "\n")
    output_bold(name, stream)
    stream.write(f" - {description}\n")
    stream.write(_BAR + "\n")


def print_tree_info(
    tree: BinaryTree, name: str, description: str, out: Optional[TextIO] = None
) -> None:
    """Write a header followed by the tree's statistics, drawing, order and paths."""
    stream = out if out is not None else sys.stdout
    output_header(name, description, stream)
    stream.write(f"height: {tree.height()}\n")
    stream.write(f"ordered: {'true' if tree.is_ordered() else 'false'}\n")
    stream.write(f"sumDistances: {tree.sum_distances()}\n")
    tree.print(stream)
    stream.write("\n")
    stream.write("printLeftRight: ")
    tree.print_left_to_right(stream)
    tree.print_paths(stream)
    stream.write("\n\n")


def _run() -> None:
    usrand(3)

    tree = BinaryTree()
    for value in _shuffled(86):
        tree.insert(value)
    print_tree_info(tree, "Tree", "random unordered tree")
    tree.mirror()
    print_tree_info(tree, "Mirrored", "the mirror image of the above tree")

    bst = BinaryTree()
    for value in _shuffled(221):
        bst.insert(value, True)
    print_tree_info(bst, "BST", "random ordered tree")
    bst.mirror()
    print_tree_info(bst, "BST Mirrored", "the mirror image of the above BST")

    ordering = _shuffled(1)
    bst.clear()
    for value in ordering[:4]:
        bst.insert(value, True)
    bst.insert(ordering[4])
    for value in ordering[5:]:
        bst.insert(value, True)
    print_tree_info(bst, "Almost BST", "a tree that has one element out of place")


def _read_expected(path: str) -> str:
    try:
        with open(path, encoding="utf-8", newline="") as handle:
            return handle.read()
    except OSError:
        return ""


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the sample trees; with a mode starting with 'c', colour them against expected output."""
    parser = argparse.ArgumentParser(description="Print information about sample binary trees.")
    parser.add_argument("mode", nargs="?", default="", help="'c' to colour output on a terminal")
    parser.add_argument("--expected", default=_DEFAULT_EXPECTED, help="expected output file")
    args = parser.parse_args(argv)

    colored = args.mode[:1].lower() == "c" and sys.stdout.isatty()
    if not colored:
        _run()
        return 0

    expected = _read_expected(args.expected)
    buffer = io.StringIO()
    with redirect_stdout(buffer):
        _run()
    sys.stdout.write(colorize_against(buffer.getvalue(), expected))
    sys.stdout.flush()
    return 0