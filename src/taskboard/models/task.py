"""Task model."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import Field

from taskboard.constants import TaskPriority
from taskboard.models.base import TaskboardModel


class Task(TaskboardModel):
    """
    A single to-do item.

    ``position`` orders a user's tasks ascending. Values are not required
    to be unique; a reorder assigns dense 0..n-1 values to the ids it is
    given.
    """

    id: str
    title: str
    description: Optional[str] = None
    completed: bool = False
    priority: TaskPriority = TaskPriority.MEDIUM
    category_id: Optional[str] = None
    progress: int = Field(default=0, ge=0, le=100)
    due_time: Optional[str] = None
    position: int = 0
    user_id: str
    created_at: datetime
    updated_at: datetime
