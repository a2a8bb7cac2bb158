"""Subtree sizes of a rooted tree given by an undirected edge list."""

from __future__ import annotations

import sys
from collections import defaultdict, deque
from dataclasses import dataclass, field
from typing import Iterable


@dataclass(eq=False)
class TreeNode:
    """A node with its children and the size of the subtree it roots."""

    id: int
    children: list[TreeNode] = field(default_factory=list)
    subtree_size: int = 1


class Tree:
    """A tree rooted at root_id, built breadth-first from undirected edges."""

    def __init__(self, root_id: int, edges: Iterable[tuple[int, int]]) -> None:
        self.root = TreeNode(root_id)
        self.nodes: dict[int, TreeNode] = {root_id: self.root}
        adjacency: defaultdict[int, list[int]] = defaultdict(list)
        for u, v in edges:
            adjacency[u].append(v)
            adjacency[v].append(u)
        queue = deque([root_id])
        while queue:
            u = queue.popleft()
            for v in adjacency[u]:
                if v not in self.nodes:
                    child = TreeNode(v)
                    self.nodes[u].children.append(child)
                    self.nodes[v] = child
                    queue.append(v)

    def compute_subtree_sizes(self) -> None:
        """Fill in subtree_size for every node reachable from the root."""
        order = []
        stack = [self.root]
        while stack:
            node = stack.pop()
            order.append(node)
            stack.extend(node.children)
        for node in reversed(order):
            node.subtree_size = 1 + sum(child.subtree_size for child in node.children)

    def subtree_sizes(self, count: int) -> list[int]:
        """List of count + 1 sizes indexed by node id; unreached ids are 0."""
        sizes = [0] * (count + 1)
        for node_id, node in self.nodes.items():
            if not 0 <= node_id <= count:
                raise ValueError(f"node id {node_id} outside 0..{count}")
            sizes[node_id] = node.subtree_size
        return sizes


def parse_input(text: str) -> tuple[int, list[tuple[int, int]]]:
    """Read a vertex count followed by count - 1 edges as whitespace-separated integers."""
    tokens = text.split()
    if not tokens:
        raise ValueError("missing vertex count")
    count = int(tokens[0])
    if count < 1:
        raise ValueError("vertex count must be at least 1")
    numbers = [int(token) for token in tokens[1 : 1 + 2 * (count - 1)]]
    if len(numbers) < 2 * (count - 1):
        raise ValueError(f"expected {count - 1} edges")
    edges = list(zip(numbers[::2], numbers[1::2]))
    return count, edges


def main(argv: list[str] | None = None) -> int:
    count, edges = parse_input(sys.stdin.read())
    tree = Tree(1, edges)
    tree.compute_subtree_sizes()
    sizes = tree.subtree_sizes(count)
    sys.stdout.write("".join(f"{size} " for size in sizes[1:]))
    return 0