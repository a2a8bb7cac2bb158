"""Priority task scheduling across processors, with an AVL index of task history."""

from __future__ import annotations

import argparse
import math
import random
import sys
from dataclasses import dataclass
from typing import Iterable, Iterator, TextIO

TIMELINE_WIDTH = 80
PROMPT = "Enter task ID to search (-1 to exit): "


@dataclass
class Task:
    """A unit of work with a base priority and a duration."""

    id: int
    base_priority: float
    duration: int
    time_created: int = 0
    current_priority: float = 0.0
    start_time: int = 0
    end_time: int = 0


@dataclass
class _AVLNode:
    key: int
    task: Task
    left: _AVLNode | None = None
    right: _AVLNode | None = None
    height: int = 1


def _height(node: _AVLNode | None) -> int:
    return node.height if node else 0


def _balance_factor(node: _AVLNode | None) -> int:
    return _height(node.left) - _height(node.right) if node else 0


def _update_height(node: _AVLNode) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _rotate_right(y: _AVLNode) -> _AVLNode:
    x = y.left
    y.left = x.right
    x.right = y
    _update_height(y)
    _update_height(x)
    return x


def _rotate_left(x: _AVLNode) -> _AVLNode:
    y = x.right
    x.right = y.left
    y.left = x
    _update_height(x)
    _update_height(y)
    return y


def _rebalance(node: _AVLNode) -> _AVLNode:
    _update_height(node)
    bf = _balance_factor(node)
    if bf > 1:
        if _balance_factor(node.left) < 0:
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if bf < -1:
        if _balance_factor(node.right) > 0:
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


class AVLTree:
    """Self-balancing search tree mapping unique integer keys to tasks."""

    def __init__(self) -> None:
        self._root: _AVLNode | None = None
        self._size = 0

    def _find(self, key: int) -> _AVLNode | None:
        node = self._root
        while node:
            if key == node.key:
                return node
            node = node.left if key < node.key else node.right
        return None

    def insert(self, key: int, task: Task) -> None:
        """Insert a task under key; an existing key is left unchanged."""
        if self._find(key) is not None:
            return
        self._root = self._insert(self._root, key, task)
        self._size += 1

    def _insert(self, node: _AVLNode | None, key: int, task: Task) -> _AVLNode:
        if node is None:
            return _AVLNode(key, task)
        if key < node.key:
            node.left = self._insert(node.left, key, task)
        else:
            node.right = self._insert(node.right, key, task)
        return _rebalance(node)

    def remove(self, key: int) -> None:
        """Remove key if present."""
        if self._find(key) is None:
            return
        self._root = self._delete(self._root, key)
        self._size -= 1

    def _delete(self, node: _AVLNode | None, key: int) -> _AVLNode | None:
        if node is None:
            return None
        if key < node.key:
            node.left = self._delete(node.left, key)
        elif key > node.key:
            node.right = self._delete(node.right, key)
        elif node.left is None or node.right is None:
            node = node.left or node.right
        else:
            successor = node.right
            while successor.left:
                successor = successor.left
            node.key, node.task = successor.key, successor.task
            node.right = self._delete(node.right, successor.key)
        if node is None:
            return None
        return _rebalance(node)

    def search(self, key: int) -> Task | None:
        """Return the task stored under key, or None."""
        node = self._find(key)
        return node.task if node else None

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        stack: list[_AVLNode] = []
        node = self._root
        while stack or node:
            while node:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.key
            node = node.right

    def height(self) -> int:
        """Height of the tree; 0 when empty."""
        return _height(self._root)


class MaxHeap:
    """Binary max-heap of tasks ordered by aged priority."""

    def __init__(self, current_time: int = 0, aging_factor: float = 0.1) -> None:
        self.current_time = current_time
        self.aging_factor = aging_factor
        self._heap: list[Task] = []

    def add(self, task: Task) -> None:
        self._heap.append(task)

    def _sift_down(self, index: int) -> None:
        heap = self._heap
        size = len(heap)
        while True:
            largest = index
            left, right = 2 * index + 1, 2 * index + 2
            if left < size and heap[left].current_priority > heap[largest].current_priority:
                largest = left
            if right < size and heap[right].current_priority > heap[largest].current_priority:
                largest = right
            if largest == index:
                return
            heap[index], heap[largest] = heap[largest], heap[index]
            index = largest

    def extract_max(self) -> Task:
        """Re-age every task, then remove and return the highest-priority one."""
        if not self._heap:
            raise IndexError("extract from an empty heap")
        for task in self._heap:
            task.current_priority = (
                task.base_priority
                + (self.current_time - task.time_created) * self.aging_factor
            )
        for index in reversed(range(len(self._heap) // 2)):
            self._sift_down(index)
        top = self._heap[0]
        last = self._heap.pop()
        if self._heap:
            self._heap[0] = last
            self._sift_down(0)
        return top

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)


def generate_tasks(n: int, rng: random.Random | None = None) -> list[Task]:
    """Create n tasks with priority 1-100 and duration 1-10, all created at time 0."""
    rng = rng or random.Random()
    tasks = []
    for task_id in range(n):
        priority = float(rng.randint(1, 100))
        duration = rng.randint(1, 10)
        tasks.append(Task(id=task_id, base_priority=priority, duration=duration))
    return tasks


def schedule(
    tasks: Iterable[Task], num_processors: int = 3, rng: random.Random | None = None
) -> list[list[Task]]:
    """Assign tasks to random processors and run each; return tasks per processor in run order."""
    if num_processors < 1:
        raise ValueError("num_processors must be at least 1")
    rng = rng or random.Random()
    processors = [MaxHeap() for _ in range(num_processors)]
    for task in tasks:
        processors[rng.randrange(num_processors)].add(task)

    completed: list[list[Task]] = []
    for heap in processors:
        clock = 0
        heap.current_time = clock
        done = []
        while heap:
            task = heap.extract_max()
            task.start_time = clock
            clock += task.duration
            task.end_time = clock
            done.append(task)
        completed.append(done)
    return completed


def _round(value: float) -> int:
    return int(math.floor(value + 0.5)) if value >= 0 else -int(math.floor(-value + 0.5))


def render_timeline(tasks: list[Task], total_time: int, processor_id: int) -> str:
    """Draw an ASCII timeline of the executed tasks of one processor."""
    if not tasks:
        return f"Processor {processor_id}: No tasks executed.\n"
    if total_time <= 0:
        raise ValueError("total_time must be positive when tasks were executed")

    width = TIMELINE_WIDTH
    scale = width / total_time
    top, body, bottom = ([" "] * width for _ in range(3))

    for task in tasks:
        start = _round(task.start_time * scale)
        end = min(_round(task.end_time * scale), width)
        if start >= width:
            continue
        for pos in range(start, end):
            top[pos] = "[" if pos == start else "-"
            if pos == end - 1:
                top[pos] = "]"
            bottom[pos] = "|" if pos in (start, end - 1) else "-"
        label = f"T{task.id}"
        for offset, char in enumerate(label):
            pos = start + 1 + offset
            if pos >= end - 1:
                break
            body[pos] = char

    lines = [f"Processor {processor_id} timeline:"]
    lines.extend("".join(band) for band in (top, body, bottom))

    marks = ["0"]
    for step in range(1, 11):
        pos = _round(step * total_time / 10.0 * scale)
        if pos < width:
            marks.append(str(step * total_time // 10).rjust(pos))
    lines.append("".join(marks))
    return "\n".join(lines) + "\n\n"


def describe_task(task: Task) -> str:
    """One-line summary of a task and its execution window."""
    return (
        f"Task {task.id}: Priority={task.base_priority:g}, "
        f"Duration={task.duration}, Created at={task.time_created}, "
        f"Executed=[{task.start_time}-{task.end_time}]"
    )


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Simulate priority scheduling of random tasks.")
    parser.add_argument("--tasks", type=int, default=20)
    parser.add_argument("--processors", type=int, default=3)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    rng = random.Random(args.seed)
    tasks = generate_tasks(args.tasks, rng)
    history = AVLTree()
    for task in tasks:
        history.insert(task.id, task)

    for processor_id, done in enumerate(schedule(tasks, args.processors, rng)):
        total_time = done[-1].end_time if done else 0
        sys.stdout.write(render_timeline(done, total_time, processor_id))

    sys.stdout.write(PROMPT)
    for token in _tokens(sys.stdin):
        try:
            search_id = int(token)
        except ValueError:
            break
        if search_id == -1:
            break
        found = history.search(search_id)
        print(describe_task(found) if found else "Task not found.")
        sys.stdout.write(PROMPT)
    return 0