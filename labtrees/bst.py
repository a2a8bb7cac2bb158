"""Unbalanced binary search tree with level-order serialisation."""

from __future__ import annotations

import sys
from collections import deque
from dataclasses import dataclass
from typing import Any, Iterator


@dataclass(eq=False)
class Node:
    """A tree node holding one value."""

    value: Any
    left: Node | None = None
    right: Node | None = None


class BinarySearchTree:
    """Binary search tree; equal values go to the right subtree."""

    def __init__(self) -> None:
        self._root: Node | None = None

    @property
    def root(self) -> Node | None:
        return self._root

    def add(self, value: Any) -> None:
        new_node = Node(value)
        if self._root is None:
            self._root = new_node
            return
        current = self._root
        while True:
            if value < current.value:
                if current.left is None:
                    current.left = new_node
                    return
                current = current.left
            else:
                if current.right is None:
                    current.right = new_node
                    return
                current = current.right

    def find(self, value: Any) -> Node | None:
        """Return the first node holding value, or None."""
        current = self._root
        while current:
            if value == current.value:
                return current
            current = current.left if value < current.value else current.right
        return None

    def _find_parent(self, child: Node) -> Node | None:
        if child is self._root:
            return None
        current = self._root
        while current:
            if current.left is child or current.right is child:
                return current
            current = current.left if child.value < current.value else current.right
        return None

    def _replace_child(self, parent: Node | None, node: Node, new_child: Node | None) -> None:
        if parent is None:
            self._root = new_child
        elif parent.left is node:
            parent.left = new_child
        else:
            parent.right = new_child

    def remove(self, node: Node | None) -> None:
        """Remove the given node from the tree; None is ignored."""
        if node is None:
            return
        if node.left is None or node.right is None:
            child = node.left or node.right
            self._replace_child(self._find_parent(node), node, child)
            return
        successor, succ_parent = node.right, node
        while successor.left:
            succ_parent, successor = successor, successor.left
        node.value = successor.value
        if succ_parent.left is successor:
            succ_parent.left = successor.right
        else:
            succ_parent.right = successor.right

    def postorder(self) -> Iterator[Any]:
        """Yield values in post-order: left, right, node."""
        stack: list[tuple[Node, bool]] = []
        if self._root:
            stack.append((self._root, False))
        while stack:
            node, visited = stack.pop()
            if visited:
                yield node.value
                continue
            stack.append((node, True))
            if node.right:
                stack.append((node.right, False))
            if node.left:
                stack.append((node.left, False))

    def serialize(self) -> str:
        """Comma-separated level-order listing with N for empty slots."""
        if self._root is None:
            return "N"
        queue: deque[Node | None] = deque([self._root])
        tokens: list[str] = []
        more = True
        while queue and more:
            more = False
            for _ in range(len(queue)):
                node = queue.popleft()
                if node is None:
                    tokens.append("N")
                    continue
                tokens.append(str(node.value))
                queue.append(node.left)
                queue.append(node.right)
                if node.left or node.right:
                    more = True
        return ",".join(tokens)

    def deserialize(self, data: str) -> None:
        """Replace the contents with a tree read from serialize() output."""
        self._root = None
        if data in ("", "N"):
            return
        tokens = data.split(",")
        if tokens[-1] == "":
            tokens.pop()
        if not tokens or tokens[0] == "N":
            return
        self._root = Node(int(tokens[0]))
        queue: deque[Node] = deque([self._root])
        rest = iter(tokens[1:])
        for token_left in rest:
            if not queue:
                break
            node = queue.popleft()
            if token_left != "N":
                node.left = Node(int(token_left))
                queue.append(node.left)
            token_right = next(rest, "N")
            if token_right != "N":
                node.right = Node(int(token_right))
                queue.append(node.right)


def main(argv: list[str] | None = None) -> int:
    bst = BinarySearchTree()
    for value in (5, 3, 7, 6, 9, 11):
        bst.add(value)

    def show(tree: BinarySearchTree) -> str:
        return "".join(f"{value} " for value in tree.postorder())

    sys.stdout.write(f"Postorder Traversal: {show(bst)}\n")
    serialized = bst.serialize()
    sys.stdout.write(f"Serialized: {serialized}\n")
    restored = BinarySearchTree()
    restored.deserialize(serialized)
    sys.stdout.write(f"Postorder after deserialization: {show(restored)}\n")
    return 0