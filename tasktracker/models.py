"""
Task Tracker Data Models
========================

The Task record held by the store and returned to clients.

Author: jetgause
Created: 2025-12-12
"""

from dataclasses import dataclass
from typing import Any, Dict

from dataclasses_json import dataclass_json


@dataclass_json
@dataclass
class Task:
    """
    A single tracked task.

    Attributes:
        id: Store-assigned identifier, unique for the lifetime of the store
        title: Non-empty, whitespace-trimmed title
        description: Free-form description, may be empty
        completed: Whether the task is done
    """
    id: int
    title: str
    description: str = ""
    completed: bool = False

    def to_payload(self) -> Dict[str, Any]:
        """Convert the task to its JSON response form."""
        return self.to_dict(encode_json=False)
