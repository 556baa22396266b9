"""
Task Tracker
============

In-memory task tracking service:
- TaskStore: thread-safe registry with monotonically increasing ids
- TaskHandlers: request adapters mapping store outcomes to HTTP responses

Author: jetgause
Created: 2025-12-12
"""

from .errors import InputError, InvalidTitleError, TaskError, TaskNotFoundError
from .handlers import ERROR_KEY, HandlerResponse, TaskHandlers
from .models import Task
from .schemas import TaskCreate, TaskUpdate
from .store import TaskStore

__all__ = [
    # Models
    "Task",
    "TaskCreate",
    "TaskUpdate",
    # Core
    "TaskStore",
    "TaskHandlers",
    "HandlerResponse",
    "ERROR_KEY",
    # Errors
    "TaskError",
    "InputError",
    "InvalidTitleError",
    "TaskNotFoundError",
]

__version__ = "1.0.0"
