"""
Task Request Handlers
=====================

Framework-independent adapters between raw request data and the TaskStore.

Each handler:
- parses the path id and query values
- decodes the JSON body against a strict schema
- calls exactly one TaskStore operation
- returns a HandlerResponse with the status code and JSON-ready body

Author: jetgause
Created: 2025-12-12
"""

import logging
from dataclasses import dataclass
from typing import Any, Optional, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError

from .errors import InputError, TaskError
from .schemas import TaskCreate, TaskUpdate
from .store import TaskStore

logger = logging.getLogger(__name__)

ERROR_KEY = "error"

TRUE_VALUES = frozenset({"1", "t", "T", "TRUE", "true", "True"})
FALSE_VALUES = frozenset({"0", "f", "F", "FALSE", "false", "False"})

# Ids are signed 64-bit integers on the wire
MAX_TASK_ID = 2 ** 63 - 1
MAX_ID_DIGITS = len(str(MAX_TASK_ID))

SchemaT = TypeVar("SchemaT", bound=BaseModel)


@dataclass
class HandlerResponse:
    """Status code plus JSON-ready body (None for an empty body)."""
    status_code: int
    body: Any = None


def error_response(exc: TaskError) -> HandlerResponse:
    """Build the error payload for a TaskError."""
    return HandlerResponse(exc.status_code, {ERROR_KEY: exc.message})


def parse_task_id(raw: Optional[str]) -> int:
    """
    Parse a path identifier as a positive integer.

    Args:
        raw: Identifier as received in the request path

    Returns:
        The parsed id

    Raises:
        InputError: If the id is missing, not made of ASCII digits, not
            positive, or larger than a signed 64-bit integer
    """
    if not raw or not raw.isascii() or not raw.isdigit():
        raise InputError("invalid id")

    digits = raw.lstrip("0")
    if len(digits) > MAX_ID_DIGITS:
        raise InputError("invalid id")

    try:
        task_id = int(digits or "0")
    except ValueError as e:
        raise InputError("invalid id") from e

    if task_id <= 0 or task_id > MAX_TASK_ID:
        raise InputError("invalid id")
    return task_id


def parse_completed_filter(raw: Optional[str]) -> Optional[bool]:
    """
    Parse the ``completed`` query value.

    An absent or empty value means no filter.

    Raises:
        InputError: If the value is not a recognised boolean spelling
    """
    if not raw:
        return None
    if raw in TRUE_VALUES:
        return True
    if raw in FALSE_VALUES:
        return False
    raise InputError("invalid completed query parameter")


def decode_body(body: Union[bytes, str], schema: Type[SchemaT]) -> SchemaT:
    """
    Decode a JSON request body against a strict schema.

    Raises:
        InputError: On malformed JSON, a non-object body, wrong field types
            or unknown fields
    """
    try:
        return schema.model_validate_json(body)
    except ValidationError as e:
        logger.info("Rejected %s body: %s", schema.__name__, e.errors(include_url=False))
        raise InputError("invalid JSON or unknown fields") from e


class TaskHandlers:
    """
    Request handlers for the task endpoints.

    Holds a reference to the process-wide TaskStore; no task state is kept
    here.
    """

    def __init__(self, store: TaskStore):
        """
        Initialize the handlers.

        Args:
            store: The TaskStore every request operates on
        """
        self.store = store

    def create(self, body: Union[bytes, str]) -> HandlerResponse:
        """Handle ``POST /tasks``."""
        try:
            data = decode_body(body, TaskCreate)
            title = (data.title or "").strip()
            if not title:
                raise InputError("title is required")

            task = self.store.create_task(
                title=title,
                description=data.description or "",
                completed=data.completed,
            )
        except TaskError as e:
            return error_response(e)

        logger.info("Created task %s", task.id)
        return HandlerResponse(201, task.to_payload())

    def list(self, completed: Optional[str] = None) -> HandlerResponse:
        """Handle ``GET /tasks`` with an optional ``completed`` filter."""
        try:
            flag = parse_completed_filter(completed)
        except TaskError as e:
            return error_response(e)

        tasks = self.store.list_tasks(completed=flag)
        return HandlerResponse(200, [task.to_payload() for task in tasks])

    def get(self, raw_id: Optional[str]) -> HandlerResponse:
        """Handle ``GET /tasks/{id}``."""
        try:
            task = self.store.get_task(parse_task_id(raw_id))
        except TaskError as e:
            return error_response(e)

        return HandlerResponse(200, task.to_payload())

    def update(self, raw_id: Optional[str], body: Union[bytes, str]) -> HandlerResponse:
        """Handle ``PUT /tasks/{id}``; only supplied fields change."""
        try:
            task_id = parse_task_id(raw_id)
            data = decode_body(body, TaskUpdate)
            task = self.store.update_task(
                task_id,
                title=data.title,
                description=data.description,
                completed=data.completed,
            )
        except TaskError as e:
            return error_response(e)

        logger.info("Updated task %s", task.id)
        return HandlerResponse(200, task.to_payload())

    def delete(self, raw_id: Optional[str]) -> HandlerResponse:
        """Handle ``DELETE /tasks/{id}``."""
        try:
            task_id = parse_task_id(raw_id)
            self.store.delete_task(task_id)
        except TaskError as e:
            return error_response(e)

        logger.info("Deleted task %s", task_id)
        return HandlerResponse(204)
