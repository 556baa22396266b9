"""
Task Tracker Errors
===================

Exception hierarchy shared by the store and the request handlers.

Every error carries a short, machine-stable message and the HTTP status
code it maps to, so handlers can turn any TaskError into a response
without a lookup table.

Author: jetgause
Created: 2025-12-12
"""


class TaskError(Exception):
    """Base class for all task tracker errors."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InputError(TaskError, ValueError):
    """Client-supplied data is malformed (bad id, payload or filter)."""

    status_code = 400


class InvalidTitleError(InputError):
    """A supplied title is blank after trimming."""

    def __init__(self, message: str = "title cannot be empty"):
        super().__init__(message)


class TaskNotFoundError(TaskError, LookupError):
    """No task with the requested id currently exists."""

    status_code = 404

    def __init__(self, task_id: int, message: str = "task not found"):
        super().__init__(message)
        self.task_id = task_id
