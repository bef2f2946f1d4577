"""
Taskboard Data Models.

Canonical pydantic models for the entities held by the entity store.

Models:
    - Category: User-owned task label with a palette color
    - Task: To-do item with priority, progress and display position
    - UserStats: Per-user productivity figures
    - Suggestion: Static task idea
"""

from taskboard.models.base import TaskboardModel
from taskboard.models.category import Category
from taskboard.models.task import Task
from taskboard.models.stats import UserStats
from taskboard.models.suggestion import Suggestion, get_suggestions

__all__ = [
    "TaskboardModel",
    "Category",
    "Task",
    "UserStats",
    "Suggestion",
    "get_suggestions",
]
