"""A linked binary tree with random or ordered insertion."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from itertools import pairwise
from typing import Any, Iterator, List, Optional, TextIO

from dslabs.lcg import urand
from dslabs.treeprint import render_tree


@dataclass(eq=False)
class TreeNode:
    """A tree node holding elem and links to its two children."""

    elem: Any
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def _stream(out: Optional[TextIO]) -> TextIO:
    return out if out is not None else sys.stdout


class BinaryTree:
    """A binary tree; ``root`` is None when the tree is empty."""

    def __init__(self) -> None:
        self.root: Optional[TreeNode] = None

    def __iter__(self) -> Iterator[Any]:
        """Yield the elements in order (left subtree, node, right subtree)."""
        stack: List[TreeNode] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.elem
            node = node.right

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def clear(self) -> None:
        """Remove every node."""
        self.root = None

    def insert(self, elem: Any, sorted: bool = False) -> None:
        """Insert elem at a new leaf.

        With sorted, smaller elements go left as in a search tree;
        otherwise each step picks a side from the shared generator.
        """
        new_node = TreeNode(elem)
        if self.root is None:
            self.root = new_node
            return
        node = self.root
        while True:
            go_left = elem < node.elem if sorted else urand() % 2 == 0
            child = node.left if go_left else node.right
            if child is None:
                if go_left:
                    node.left = new_node
                else:
                    node.right = new_node
                return
            node = child

    def render(self) -> str:
        """Return an ASCII drawing of the tree."""
        return render_tree(self.root)

    def print(self, out: Optional[TextIO] = None) -> None:
        """Write the drawing of the tree to out."""
        _stream(out).write(self.render())

    def height(self) -> int:
        """Length of the longest root-to-leaf path; -1 for an empty tree."""
        height = -1
        level = [self.root] if self.root is not None else []
        while level:
            height += 1
            level = [child for node in level for child in (node.left, node.right) if child is not None]
        return height

    def left_to_right(self) -> List[Any]:
        """Return the elements in order."""
        return list(self)

    def print_left_to_right(self, out: Optional[TextIO] = None) -> None:
        """Write the in-order elements, each followed by a space, then a newline."""
        _stream(out).write("".join(f"{elem} " for elem in self) + "\n")

    def mirror(self) -> None:
        """Flip the tree over a vertical axis in place."""
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            node.left, node.right = node.right, node.left
            stack.extend(child for child in (node.left, node.right) if child is not None)

    def paths(self) -> List[List[Any]]:
        """Return every root-to-leaf path, leftmost leaf first."""
        result: List[List[Any]] = []
        stack = [(self.root, [self.root.elem])] if self.root is not None else []
        while stack:
            node, path = stack.pop()
            if node.left is None and node.right is None:
                result.append(path)
                continue
            for child in (node.right, node.left):
                if child is not None:
                    stack.append((child, path + [child.elem]))
        return result

    def print_paths(self, out: Optional[TextIO] = None) -> None:
        """Write each root-to-leaf path on its own line, prefixed by "Path: "."""
        stream = _stream(out)
        for path in self.paths():
            stream.write("Path: " + "".join(f"{elem} " for elem in path) + "\n")

    def sum_distances(self) -> int:
        """Return the sum of the depths of all nodes."""
        total = 0
        stack = [(self.root, 0)] if self.root is not None else []
        while stack:
            node, depth = stack.pop()
            total += depth
            stack.extend((child, depth + 1) for child in (node.left, node.right) if child is not None)
        return total

    def is_ordered(self) -> bool:
        """Return True if the in-order elements are nondecreasing."""
        return all(first <= second for first, second in pairwise(self))

    def copy(self) -> "BinaryTree":
        """Return a tree with the same shape and elements but new nodes."""
        duplicate = BinaryTree()
        if self.root is None:
            return duplicate
        duplicate.root = TreeNode(self.root.elem)
        stack = [(self.root, duplicate.root)]
        while stack:
            source, target = stack.pop()
            if source.left is not None:
                target.left = TreeNode(source.left.elem)
                stack.append((source.left, target.left))
            if source.right is not None:
                target.right = TreeNode(source.right.elem)
                stack.append((source.right, target.right))
        return duplicate

    __copy__ = copy