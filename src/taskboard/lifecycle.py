"""
Task Lifecycle Manager.

Wraps the entity store so that every task mutation which changes the
shape of a user's task set is followed by a statistics recomputation
pass, and so that each such sequence runs as one critical section.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Mapping, Sequence
from datetime import datetime
from typing import Any

from taskboard.models import Category, Task, UserStats
from taskboard.storage.base import EntityStore
from taskboard.storage.memory import utc_now

logger = logging.getLogger(__name__)


class TaskLifecycleManager:
    """
    Consistent task operations on top of an EntityStore.

    Recomputation refreshes ``total_tasks``, ``completed_tasks`` and
    ``last_active_date`` only. ``current_streak`` and ``weekly_progress``
    are left exactly as stored.

    Cross-entity integrity is not enforced: a task may name a category id
    that does not exist.
    """

    def __init__(
        self,
        store: EntityStore,
        *,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._store = store
        self._clock = clock
        self._lock = asyncio.Lock()

    @property
    def store(self) -> EntityStore:
        """The underlying entity store."""
        return self._store

    async def close(self) -> None:
        """Close the underlying store."""
        await self._store.close()

    # =========================================================================
    # Categories
    # =========================================================================

    async def list_categories(self, user_id: str) -> list[Category]:
        return await self._store.list_categories(user_id)

    async def create_category(self, data: Mapping[str, Any]) -> Category:
        async with self._lock:
            return await self._store.create_category(data)

    async def delete_category(self, category_id: str) -> None:
        async with self._lock:
            await self._store.delete_category(category_id)

    # =========================================================================
    # Tasks
    # =========================================================================

    async def list_tasks(self, user_id: str) -> list[Task]:
        return await self._store.list_tasks(user_id)

    async def get_task(self, task_id: str) -> Task | None:
        return await self._store.get_task(task_id)

    async def next_position(self, user_id: str) -> int:
        """Position that places a new task after every existing one."""
        tasks = await self._store.list_tasks(user_id)
        return max((t.position for t in tasks), default=-1) + 1

    async def create_task(self, data: Mapping[str, Any], *, append: bool = False) -> Task:
        """
        Store a new task and refresh its owner's stats.

        With ``append`` and no explicit position, the task is placed after
        every existing one. If the stats refresh fails the task is removed
        again before the error propagates.
        """
        async with self._lock:
            if append and "position" not in data:
                data = {**data, "position": await self.next_position(data["user_id"])}
            task = await self._store.create_task(data)
            try:
                await self._recompute_stats(task.user_id, at=task.created_at)
            except Exception:
                await self._store.delete_task(task.id)
                raise
        logger.info("Task created id=%s user=%s", task.id, task.user_id)
        return task

    async def update_task(self, task_id: str, changes: Mapping[str, Any]) -> Task:
        """
        Apply a partial update.

        A patch carrying ``completed`` triggers recomputation even if the
        value did not actually change.

        Raises:
            TaskboardNotFoundError: If no task has this id.
        """
        async with self._lock:
            task = await self._store.update_task(task_id, changes)
            if "completed" in changes:
                await self._recompute_stats(task.user_id, at=task.updated_at)
        return task

    async def delete_task(self, task_id: str) -> None:
        async with self._lock:
            task = await self._store.get_task(task_id)
            if task is None:
                return
            await self._store.delete_task(task_id)
            await self._recompute_stats(task.user_id)
        logger.info("Task deleted id=%s user=%s", task_id, task.user_id)

    async def reorder_tasks(self, ordered_ids: Sequence[str]) -> None:
        async with self._lock:
            await self._store.reorder_tasks(ordered_ids)

    # =========================================================================
    # User Stats
    # =========================================================================

    async def get_user_stats(self, user_id: str) -> UserStats | None:
        return await self._store.get_user_stats(user_id)

    async def update_user_stats(self, user_id: str, changes: Mapping[str, Any]) -> UserStats:
        """Explicit stats write; the only way streak and weekly progress change."""
        async with self._lock:
            return await self._store.update_user_stats(user_id, changes)

    async def _recompute_stats(self, user_id: str, *, at: datetime | None = None) -> UserStats:
        # Caller holds the lock.
        tasks = await self._store.list_tasks(user_id)
        completed = sum(1 for t in tasks if t.completed)
        stats = await self._store.update_user_stats(
            user_id,
            {
                "total_tasks": len(tasks),
                "completed_tasks": completed,
                "last_active_date": at or self._clock(),
            },
        )
        logger.debug(
            "Stats recomputed user=%s total=%d completed=%d",
            user_id,
            stats.total_tasks,
            stats.completed_tasks,
        )
        return stats
