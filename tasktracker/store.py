"""
Task Store
==========

Thread-safe in-memory registry of tasks.

Features:
- Monotonically increasing integer ids, never reused after deletion
- Partial updates that validate before touching the stored record
- Filtered enumeration over a consistent snapshot

Every public operation runs entirely under one exclusive lock, so concurrent
callers observe a serializable sequence of states. Nothing slow (logging,
I/O) happens while the lock is held.

Author: jetgause
Created: 2025-12-12
"""

import logging
import threading
from dataclasses import replace
from typing import Any, Dict, List, Optional

from .errors import InvalidTitleError, TaskNotFoundError
from .models import Task

logger = logging.getLogger(__name__)


class TaskStore:
    """
    Owns the task collection and the next-id counter.

    One instance is created per process and handed to the request handlers.
    Tasks returned from any method are copies; changing them does not
    change stored state.
    """

    def __init__(self):
        """Initialize an empty TaskStore."""
        self._tasks: Dict[int, Task] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return self.count()

    def create_task(
        self,
        title: str,
        description: str = "",
        completed: Optional[bool] = None
    ) -> Task:
        """
        Create and store a new task.

        The caller is responsible for passing a non-blank, trimmed title.

        Args:
            title: Task title
            description: Task description
            completed: Initial completion state, False when not given

        Returns:
            The stored task including its assigned id
        """
        with self._lock:
            task = Task(
                id=self._next_id,
                title=title,
                description=description,
                completed=bool(completed),
            )
            self._next_id += 1
            self._tasks[task.id] = task
            result = replace(task)

        logger.debug("Task created id=%s completed=%s", result.id, result.completed)
        return result

    def list_tasks(self, completed: Optional[bool] = None) -> List[Task]:
        """
        List tasks, optionally filtered by completion state.

        Args:
            completed: When given, only tasks with this state are returned

        Returns:
            Snapshot of matching tasks in id order
        """
        with self._lock:
            return [
                replace(task)
                for task in self._tasks.values()
                if completed is None or task.completed == completed
            ]

    def get_task(self, task_id: int) -> Task:
        """
        Get a task by id.

        Raises:
            TaskNotFoundError: If no task with that id exists
        """
        with self._lock:
            task = self._tasks.get(task_id)
            if task is None:
                raise TaskNotFoundError(task_id)
            return replace(task)

    def update_task(
        self,
        task_id: int,
        title: Optional[str] = None,
        description: Optional[str] = None,
        completed: Optional[bool] = None
    ) -> Task:
        """
        Apply a partial update to a task.

        Only the fields passed as non-None change. A supplied title is
        trimmed and must not end up empty; on any failure the stored task
        is left exactly as it was.

        Args:
            task_id: Id of the task to update
            title: Replacement title
            description: Replacement description
            completed: Replacement completion state

        Returns:
            The task in its post-update state

        Raises:
            TaskNotFoundError: If no task with that id exists
            InvalidTitleError: If the supplied title is blank
        """
        changes: Dict[str, Any] = {}
        if title is not None:
            changes["title"] = title.strip()
        if description is not None:
            changes["description"] = description
        if completed is not None:
            changes["completed"] = completed

        with self._lock:
            current = self._tasks.get(task_id)
            if current is None:
                raise TaskNotFoundError(task_id)
            if "title" in changes and not changes["title"]:
                raise InvalidTitleError()

            updated = replace(current, **changes)
            self._tasks[task_id] = updated
            result = replace(updated)

        logger.debug("Task updated id=%s fields=%s", task_id, sorted(changes))
        return result

    def delete_task(self, task_id: int) -> None:
        """
        Delete a task. Its id is never handed out again.

        Raises:
            TaskNotFoundError: If no task with that id exists
        """
        with self._lock:
            if task_id not in self._tasks:
                raise TaskNotFoundError(task_id)
            del self._tasks[task_id]

        logger.debug("Task deleted id=%s", task_id)

    def count(self) -> int:
        """Number of tasks currently stored."""
        with self._lock:
            return len(self._tasks)

    def get_stats(self) -> Dict[str, Any]:
        """Get store statistics from a single snapshot."""
        with self._lock:
            total = len(self._tasks)
            done = sum(1 for task in self._tasks.values() if task.completed)
            next_id = self._next_id

        return {
            "total": total,
            "completed": done,
            "pending": total - done,
            "next_id": next_id,
        }
