from typing import Any

from .task import Task


def wait_all(*tasks: Task[Any]) -> None:
    """Step every task until all of them are done.

    Each round steps the tasks once, in the order they were given.
    Results are left in the tasks to be taken by the caller.
    """
    while not all(task.is_done() for task in tasks):
        for task in tasks:
            task.advance()


def wait_any(*tasks: Task[Any]) -> int:
    """Step the tasks until one of them is done, and give its index.

    Tasks are stepped in the order they were given, and stepping stops
    right after the step that finishes a task. If some tasks are done
    already, the lowest such index is given without stepping anything.
    """
    if not tasks:
        raise ValueError("wait_any() needs at least one task.")

    for index, task in enumerate(tasks):
        if task.is_done():
            return index

    while True:
        for index, task in enumerate(tasks):
            task.advance()
            if task.is_done():
                return index
