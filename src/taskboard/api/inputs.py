"""
Pydantic Input Models for Taskboard Requests.

This module defines the request-body models the handlers validate against
before anything reaches the store. Field names are camelCase on the wire
and snake_case in Python; both spellings are accepted.
"""

from __future__ import annotations

from typing import Any, List, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictInt,
    StrictStr,
    model_validator,
)
from pydantic.alias_generators import to_camel

from taskboard.constants import CategoryColor, TaskPriority

# Task columns that may be omitted from a patch but never set to null.
_NON_NULLABLE_TASK_FIELDS = ("title", "completed", "priority", "progress", "position")


class BaseRequestInput(BaseModel):
    """Base input model with common configuration."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
        validate_assignment=True,
        # Server-owned keys such as id, userId, createdAt are dropped silently.
        extra="ignore",
    )

    def to_fields(self) -> dict[str, Any]:
        """Only the fields the caller actually sent, keyed by attribute name."""
        return self.model_dump(exclude_unset=True)


# =============================================================================
# Category Input Models
# =============================================================================


class CategoryCreateInput(BaseRequestInput):
    """Input for creating a category."""

    name: StrictStr = Field(
        ...,
        description="Category name (e.g., 'Work', 'Personal')",
        min_length=1,
        max_length=100,
    )
    color: CategoryColor = Field(
        ...,
        description="Palette color: blue, green, purple, red, yellow, orange",
    )


# =============================================================================
# Task Input Models
# =============================================================================


class TaskCreateInput(BaseRequestInput):
    """Input for creating a new task."""

    title: StrictStr = Field(
        ...,
        description="Task title (e.g., 'Write report', 'Buy milk')",
        min_length=1,
        max_length=500,
    )
    description: Optional[StrictStr] = Field(
        default=None,
        description="Longer free-text notes",
        max_length=5000,
    )
    completed: StrictBool = Field(
        default=False,
        description="Whether the task is done",
    )
    priority: TaskPriority = Field(
        default=TaskPriority.MEDIUM,
        description="Priority level: 'low', 'medium', 'high'",
    )
    category_id: Optional[StrictStr] = Field(
        default=None,
        description="Category the task belongs to",
    )
    progress: StrictInt = Field(
        default=0,
        description="Completion progress in percent",
        ge=0,
        le=100,
    )
    due_time: Optional[StrictStr] = Field(
        default=None,
        description="Free-text due time (e.g., '5:00 PM')",
        max_length=100,
    )
    position: StrictInt = Field(
        default=0,
        description="Display order; lower comes first",
    )


class TaskUpdateInput(BaseRequestInput):
    """Input for a partial task update. Every field is optional."""

    title: Optional[StrictStr] = Field(
        default=None,
        description="New task title",
        min_length=1,
        max_length=500,
    )
    description: Optional[StrictStr] = Field(
        default=None,
        description="New notes; null clears them",
        max_length=5000,
    )
    completed: Optional[StrictBool] = Field(
        default=None,
        description="New completion state",
    )
    priority: Optional[TaskPriority] = Field(
        default=None,
        description="New priority: 'low', 'medium', 'high'",
    )
    category_id: Optional[StrictStr] = Field(
        default=None,
        description="New category id; null detaches the task",
    )
    progress: Optional[StrictInt] = Field(
        default=None,
        description="New progress in percent",
        ge=0,
        le=100,
    )
    due_time: Optional[StrictStr] = Field(
        default=None,
        description="New due time; null clears it",
        max_length=100,
    )
    position: Optional[StrictInt] = Field(
        default=None,
        description="New display position",
    )

    @model_validator(mode="after")
    def reject_null_for_required_columns(self) -> TaskUpdateInput:
        for name in _NON_NULLABLE_TASK_FIELDS:
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{name} cannot be null")
        return self


class TaskReorderInput(BaseRequestInput):
    """Input for reordering tasks."""

    task_ids: List[StrictStr] = Field(
        ...,
        description="Task ids in their new display order",
    )
