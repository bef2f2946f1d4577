"""User statistics model."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import Field

from taskboard.models.base import TaskboardModel


class UserStats(TaskboardModel):
    """
    Per-user productivity figures.

    ``total_tasks``, ``completed_tasks`` and ``last_active_date`` are a
    projection of the user's task set, refreshed after task mutations.
    ``current_streak`` and ``weekly_progress`` are display data that only
    change when written explicitly.
    """

    id: str
    user_id: str
    current_streak: int = 0
    total_tasks: int = 0
    completed_tasks: int = 0
    weekly_progress: dict[str, int] = Field(default_factory=dict)
    last_active_date: Optional[datetime] = None

    @property
    def completion_percentage(self) -> int:
        """Share of completed tasks, rounded to a whole percent."""
        if self.total_tasks <= 0:
            return 0
        return round(self.completed_tasks / self.total_tasks * 100)
