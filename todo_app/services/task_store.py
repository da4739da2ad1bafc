# todo_app/services/task_store.py

import logging
import threading
from dataclasses import replace
from typing import Callable, List, Optional, Tuple

from ..models.task import Task
from .errors import InvalidInput, IndexOutOfRange, NotFound

logger = logging.getLogger(__name__)


def reject_blank_names(name: str) -> None:
    """Name policy that refuses empty or whitespace-only task names."""
    if not name.strip():
        raise InvalidInput("task name must not be empty")


class TaskStore:
    """
    In-memory ordered list of tasks, addressed by positional index.

    Every public method runs under one exclusive lock, so no two operations
    interleave and no caller ever sees a half-applied mutation. Tasks handed
    out are copies.

    Indices are only meaningful at the moment they are read: any removal
    shifts the tasks after it. Looking a name up with ``index_of`` and then
    calling ``remove`` is two separate atomic steps, not one, and another
    caller may mutate the list in between.
    """

    def __init__(self, validator: Optional[Callable[[str], None]] = None):
        self._tasks: List[Task] = []
        self._lock = threading.Lock()
        self._validator = validator

    def __len__(self):
        with self._lock:
            return len(self._tasks)

    def _check_index(self, index: int) -> None:
        # Caller must hold the lock.
        if isinstance(index, bool) or not isinstance(index, int):
            raise InvalidInput(f"index must be an integer, got {index!r}")
        if index < 0 or index >= len(self._tasks):
            raise IndexOutOfRange(f"no task at index {index} (have {len(self._tasks)})")

    def list(self) -> List[Task]:
        with self._lock:
            return [replace(task) for task in self._tasks]

    def add(self, name: str) -> Tuple[Task, int]:
        """Append a new, not-done task and return it with its index."""
        if not isinstance(name, str):
            raise InvalidInput(f"task name must be a string, got {type(name).__name__}")
        if self._validator is not None:
            self._validator(name)

        task = Task(name=name)
        with self._lock:
            self._tasks.append(task)
            index = len(self._tasks) - 1
        logger.info("Adding task %r at index %d", name, index)
        return replace(task), index

    def remove(self, index: int) -> Task:
        with self._lock:
            self._check_index(index)
            task = self._tasks.pop(index)
        logger.info("Removing task with index %d: %r", index, task.name)
        return task

    def mark_done(self, index: int) -> Task:
        return self._set_done(index, True)

    def mark_undone(self, index: int) -> Task:
        return self._set_done(index, False)

    def _set_done(self, index: int, done: bool) -> Task:
        with self._lock:
            self._check_index(index)
            task = self._tasks[index]
            task.done = done
            snapshot = replace(task)
        logger.info(
            "Marking task with index %d as %s: %r",
            index,
            "done" if done else "undone",
            snapshot.name,
        )
        return snapshot

    def clear(self) -> None:
        with self._lock:
            removed = len(self._tasks)
            self._tasks.clear()
        logger.info("Clearing tasks (%d removed)", removed)

    def clear_done(self) -> None:
        with self._lock:
            before = len(self._tasks)
            self._tasks[:] = [task for task in self._tasks if not task.done]
            removed = before - len(self._tasks)
        logger.info("Clearing done tasks (%d removed)", removed)

    def index_of(self, name: str) -> int:
        """Index of the first task named exactly ``name``."""
        with self._lock:
            for index, task in enumerate(self._tasks):
                if task.name == name:
                    return index
        raise NotFound(f"no task named {name!r}")

    def close(self) -> None:
        with self._lock:
            self._tasks.clear()
        logger.info("Task store closed")
