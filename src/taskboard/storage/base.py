"""
Entity Store Interface.

Defines the capability set every storage backend provides. The lifecycle
manager and the request layers only ever talk to this interface, so an
in-memory backend and a table-backed one are interchangeable.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from typing import Any

from taskboard.models import Category, Task, UserStats


class EntityStore(ABC):
    """
    Abstract keyed store for categories, tasks and per-user statistics.

    Contract:
        - Every call is atomic: a failing call leaves no partial mutation.
        - Returned entities are copies; mutating them does not touch the store.
        - Deletes of absent ids are silent no-ops.
        - Store calls do not recompute statistics; that is the job of
          TaskLifecycleManager.
    """

    # -------------------------------------------------------------------------
    # Categories
    # -------------------------------------------------------------------------

    @abstractmethod
    async def list_categories(self, user_id: str) -> list[Category]:
        """Return the user's categories in insertion order."""

    @abstractmethod
    async def create_category(self, data: Mapping[str, Any]) -> Category:
        """Store a category under a fresh id and return it."""

    @abstractmethod
    async def delete_category(self, category_id: str) -> None:
        """Remove a category if present. Referencing tasks are not touched."""

    # -------------------------------------------------------------------------
    # Tasks
    # -------------------------------------------------------------------------

    @abstractmethod
    async def list_tasks(self, user_id: str) -> list[Task]:
        """Return the user's tasks sorted ascending by position."""

    @abstractmethod
    async def get_task(self, task_id: str) -> Task | None:
        """Return a task by id, or None."""

    @abstractmethod
    async def create_task(self, data: Mapping[str, Any]) -> Task:
        """
        Store a task under a fresh id.

        Omitted optional fields take their defaults; created_at and
        updated_at are set to now.
        """

    @abstractmethod
    async def update_task(self, task_id: str, changes: Mapping[str, Any]) -> Task:
        """
        Merge the given fields over an existing task and bump updated_at.

        Raises:
            TaskboardNotFoundError: If no task has this id.
        """

    @abstractmethod
    async def delete_task(self, task_id: str) -> None:
        """Remove a task if present."""

    @abstractmethod
    async def reorder_tasks(self, ordered_ids: Sequence[str]) -> None:
        """
        Set each listed task's position to its index in ``ordered_ids``.

        Unknown ids are skipped. Tasks not listed keep their position.
        """

    # -------------------------------------------------------------------------
    # User Stats
    # -------------------------------------------------------------------------

    @abstractmethod
    async def get_user_stats(self, user_id: str) -> UserStats | None:
        """Return the user's stats record, or None."""

    @abstractmethod
    async def update_user_stats(self, user_id: str, changes: Mapping[str, Any]) -> UserStats:
        """Merge fields into the user's stats, creating a zeroed record first if needed."""

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    async def close(self) -> None:
        """Release backend resources. No-op by default."""
        return None
