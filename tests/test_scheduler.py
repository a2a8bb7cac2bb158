import io
import math
import random

import pytest

from labtrees.scheduler import (
    AVLTree,
    MaxHeap,
    Task,
    describe_task,
    generate_tasks,
    main,
    render_timeline,
    schedule,
)


def make_task(task_id, priority=1.0, duration=1, created=0):
    return Task(id=task_id, base_priority=priority, duration=duration, time_created=created)


def test_avl_insert_and_search():
    tree = AVLTree()
    tasks = {k: make_task(k) for k in [5, 1, 9, 3, 7]}
    for key, task in tasks.items():
        tree.insert(key, task)
    for key, task in tasks.items():
        assert tree.search(key) is task
    assert tree.search(42) is None


def test_avl_duplicate_keys_ignored():
    tree = AVLTree()
    first = make_task(1)
    tree.insert(1, first)
    tree.insert(1, make_task(1, priority=50))
    assert len(tree) == 1
    assert tree.search(1) is first


def test_avl_iterates_in_key_order():
    tree = AVLTree()
    keys = random.Random(3).sample(range(1000), 200)
    for key in keys:
        tree.insert(key, make_task(key))
    assert list(tree) == sorted(keys)


def test_avl_stays_balanced_on_sorted_insert():
    tree = AVLTree()
    n = 1023
    for key in range(n):
        tree.insert(key, make_task(key))
    assert tree.height() <= 1.45 * math.log2(n + 2)


def test_avl_remove():
    tree = AVLTree()
    for key in range(50):
        tree.insert(key, make_task(key))
    for key in range(0, 50, 2):
        tree.remove(key)
    assert list(tree) == list(range(1, 50, 2))
    assert len(tree) == 25
    assert tree.search(4) is None
    assert tree.search(5).id == 5
    tree.remove(1000)
    assert len(tree) == 25


def test_avl_empty_height():
    tree = AVLTree()
    assert tree.height() == 0
    assert len(tree) == 0


def test_heap_extracts_by_priority():
    heap = MaxHeap()
    for task_id, priority in enumerate([10.0, 70.0, 30.0, 90.0, 50.0]):
        heap.add(make_task(task_id, priority))
    order = [heap.extract_max().base_priority for _ in range(5)]
    assert order == sorted(order, reverse=True)
    assert not heap
    assert len(heap) == 0


def test_heap_aging_favours_older_tasks():
    heap = MaxHeap(current_time=10, aging_factor=0.1)
    old = make_task(1, priority=5.0, created=0)
    new = make_task(2, priority=5.5, created=10)
    heap.add(new)
    heap.add(old)
    assert heap.extract_max() is old


def test_heap_empty_raises():
    with pytest.raises(IndexError):
        MaxHeap().extract_max()


def test_generate_tasks_ranges():
    tasks = generate_tasks(200, random.Random(1))
    assert [t.id for t in tasks] == list(range(200))
    assert all(1 <= t.base_priority <= 100 for t in tasks)
    assert all(1 <= t.duration <= 10 for t in tasks)
    assert all(t.time_created == 0 for t in tasks)


def test_generate_tasks_deterministic_with_seed():
    a = generate_tasks(10, random.Random(7))
    b = generate_tasks(10, random.Random(7))
    assert a == b


def test_schedule_runs_every_task_contiguously():
    tasks = generate_tasks(30, random.Random(2))
    result = schedule(tasks, 4, random.Random(2))
    assert len(result) == 4
    ids = sorted(t.id for done in result for t in done)
    assert ids == list(range(30))
    for done in result:
        clock = 0
        for task in done:
            assert task.start_time == clock
            assert task.end_time - task.start_time == task.duration
            clock = task.end_time
        priorities = [t.base_priority for t in done]
        assert priorities == sorted(priorities, reverse=True)


def test_schedule_rejects_no_processors():
    with pytest.raises(ValueError):
        schedule([], 0)


def test_render_empty_timeline():
    assert render_timeline([], 0, 2) == "Processor 2: No tasks executed.\n"


def test_render_single_task_bands():
    task = make_task(0, duration=10)
    task.start_time, task.end_time = 0, 10
    text = render_timeline([task], 10, 1)
    lines = text.split("\n")
    assert lines[0] == "Processor 1 timeline:"
    assert lines[1] == "[" + "-" * 78 + "]"
    assert lines[2] == (" T0").ljust(80)
    assert lines[3] == "|" + "-" * 78 + "|"
    assert lines[4].startswith("0")
    assert text.endswith("\n\n")


def test_render_bands_have_fixed_width():
    tasks = generate_tasks(8, random.Random(4))
    done = schedule(tasks, 1, random.Random(4))[0]
    lines = render_timeline(done, done[-1].end_time, 0).split("\n")
    assert all(len(line) == 80 for line in lines[1:4])
    assert lines[1].count("[") == len(done) or lines[1].count("[") <= len(done)
    assert lines[1].startswith("[")


def test_render_rejects_zero_total_time():
    with pytest.raises(ValueError):
        render_timeline([make_task(0)], 0, 0)


def test_describe_task():
    task = Task(id=3, base_priority=42.0, duration=5, start_time=0, end_time=5)
    assert describe_task(task) == (
        "Task 3: Priority=42, Duration=5, Created at=0, Executed=[0-5]"
    )


def test_main_searches_history(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("0 999\n-1\n"))
    assert main(["--seed", "5", "--tasks", "6", "--processors", "2"]) == 0
    out = capsys.readouterr().out
    assert "Task 0: Priority=" in out
    assert "Task not found." in out
    assert out.count("Enter task ID to search (-1 to exit): ") == 3