# labtrees

This package holds three small tree data structures. Each one has a command-line demo.

- `labtrees.scheduler` is a task scheduler that uses aging priorities. It runs tasks from a max-heap and keeps an AVL tree of the task history.
- `labtrees.bst` is an unbalanced binary search tree. It can be serialized level by level.
- `labtrees.subtree` builds a rooted tree from an undirected edge list and computes the size of every subtree.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

## Commands

### `labtrees-schedule`

```
labtrees-schedule [--tasks N] [--processors P] [--seed S]
```

1. The command generates `N` random tasks. The default is 20.
   - Each task gets a base priority from 1 to 100 and a duration from 1 to 10.
   - Every task is created at time 0.
2. It assigns each task at random to one of `P` processors. The default is 3.
3. Each processor runs its tasks from a `MaxHeap`.
   - Before each extraction, every waiting task's priority is recomputed as `base_priority + (current_time - time_created) * 0.1`.
   - The task with the highest priority runs next.
4. For each processor, the command prints an 80-column ASCII timeline of the tasks it ran.
5. It then reads task IDs from standard input and looks each one up in an `AVLTree` that holds the task history.
   - For a task it finds, it prints the priority, duration, creation time and execution window.
   - For an ID it cannot find, it prints `Task not found.`
   - Input ends at `-1`, at end of input, or at a token that is not an integer.

`--seed` makes a run reproducible. Without it, every run is random.

### `labtrees-bst`

This command builds a binary search tree from `5 3 7 6 9 11` and prints its postorder traversal. Next it serializes the tree. Last, it deserializes that string into a second tree and prints the second tree's postorder traversal.

```
labtrees-bst
```

### `labtrees-subtree`

This command reads a tree from standard input:

- The first number is the vertex count `V`.
- `V - 1` edges follow, each written as a `u v` pair.

The tree is rooted at vertex 1. The command prints the size of the subtree under each vertex from 1 to `V`. Bad input raises `ValueError`, for example a missing count, a count below 1, or too few edges.

```
printf '5\n1 2\n1 3\n2 4\n2 5\n' | labtrees-subtree
```

The output is:

```
5 3 1 1 1
```

## Library use

### Scheduler

```python
import random
from labtrees.scheduler import (
    AVLTree, MaxHeap, Task, generate_tasks, schedule, render_timeline, describe_task,
)

rng = random.Random(1)
tasks = generate_tasks(10, rng)
per_processor = schedule(tasks, num_processors=2, rng=rng)
for processor_id, done in enumerate(per_processor):
    total = done[-1].end_time if done else 0
    print(render_timeline(done, total, processor_id), end="")

history = AVLTree()
for task in tasks:
    history.insert(task.id, task)
print(describe_task(history.search(3)))
```

#### `AVLTree`

| Member | Behaviour |
| --- | --- |
| `insert(key, task)` | Inserts a task under a key. A key that is already present is left unchanged. |
| `remove(key)` | Removes the key. A missing key is ignored. |
| `search(key)` | Returns the task for the key, or `None`. |
| `len()` | Gives the number of keys. |
| iteration | Yields the keys in ascending order. |
| `height()` | Gives the tree height. An empty tree has height 0. |

#### `MaxHeap(current_time=0, aging_factor=0.1)`

| Member | Behaviour |
| --- | --- |
| `add(task)` | Adds a task. |
| `extract_max()` | Re-ages all tasks, then removes and returns the task with the highest priority. It raises `IndexError` when the heap is empty. |

#### Functions

- `schedule` raises `ValueError` if `num_processors` is below 1.
- `render_timeline` raises `ValueError` if tasks were run but `total_time` is not positive.

### Binary search tree

```python
from labtrees.bst import BinarySearchTree

bst = BinarySearchTree()
for value in (5, 3, 7):
    bst.add(value)
list(bst.postorder())           # [3, 7, 5]
data = bst.serialize()          # "5,3,7"

copy = BinarySearchTree()
copy.deserialize(data)
node = copy.find(3)
copy.remove(node)
```

How the tree behaves:

- Equal values go to the right subtree.
- `remove` takes a node returned by `find`. Passing `None` does nothing.
- `root` is the root node, or `None` when the tree is empty.

The serialized form:

- Values are listed in level order, separated by commas.
- `N` marks an empty child slot.
- An empty tree serializes to `"N"`.
- `deserialize` reads values back as integers.

### Subtree sizes

```python
from labtrees.subtree import Tree, parse_input

tree = Tree(1, [(1, 2), (1, 3)])
tree.compute_subtree_sizes()
tree.subtree_sizes(3)           # [0, 3, 1, 1]

count, edges = parse_input("3\n1 2\n1 3\n")
```

What `subtree_sizes(count)` returns:

- The list has `count + 1` entries, indexed by node id.
- An id that is not reachable from the root gets 0.
- A node id outside `0..count` raises `ValueError`.

## Limitations

- The scheduler only simulates execution. It runs no real work.
- The task history lives in memory only and is not saved between runs.