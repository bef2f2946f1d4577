"""
In-Memory Entity Store.

Dict-backed implementation of EntityStore. Data lives for the lifetime of
the instance only.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Callable, Mapping, Sequence
from datetime import datetime, timedelta, timezone
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError
from pydantic.alias_generators import to_camel

from taskboard.constants import DEMO_CATEGORIES, DEMO_STREAK, DEMO_WEEKLY_PROGRESS
from taskboard.exceptions import TaskboardNotFoundError, TaskboardStoreError
from taskboard.models import Category, Task, UserStats
from taskboard.settings import Settings
from taskboard.storage.base import EntityStore

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def _with_aliases(*names: str) -> frozenset[str]:
    # Models accept both the field name and its camelCase alias.
    return frozenset(n for name in names for n in (name, to_camel(name)))


# Fields the server owns; callers can never overwrite them through a patch.
_SERVER_TASK_FIELDS = _with_aliases("id", "created_at", "updated_at")
_PROTECTED_TASK_FIELDS = _with_aliases("id", "user_id", "created_at", "updated_at")
_PROTECTED_STATS_FIELDS = _with_aliases("id", "user_id")


def utc_now() -> datetime:
    """Get current UTC time."""
    return datetime.now(timezone.utc)


def new_id() -> str:
    """Generate a random unique identifier."""
    return str(uuid.uuid4())


def _build(model: type[ModelT], data: Mapping[str, Any]) -> ModelT:
    """Validate a record before it is written; nothing is stored on failure."""
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise TaskboardStoreError(
            f"Rejected {model.__name__} record: {e.error_count()} invalid field(s)",
            details={"errors": e.errors(include_url=False)},
        ) from e


class MemoryStore(EntityStore):
    """
    Entity store holding everything in plain dicts.

    Method bodies never await, so on a single event loop every call runs
    to completion without interleaving.

    Usage:
        store = MemoryStore()
        category = await store.create_category(
            {"name": "Work", "color": "blue", "user_id": "demo-user"}
        )
    """

    def __init__(
        self,
        *,
        clock: Callable[[], datetime] = utc_now,
        id_factory: Callable[[], str] = new_id,
    ) -> None:
        self._clock = clock
        self._id_factory = id_factory

        self._categories: dict[str, Category] = {}
        self._tasks: dict[str, Task] = {}
        self._user_stats: dict[str, UserStats] = {}

    @classmethod
    def from_settings(cls, settings: Settings) -> MemoryStore:
        """Create a store, seeding demo data when configured to."""
        store = cls()
        if settings.seed_demo_data:
            store.seed_demo_data(settings.user_id)
        return store

    def seed_demo_data(self, user_id: str) -> None:
        """Install the default categories and stats record for a user."""
        for name, color in DEMO_CATEGORIES:
            category = Category(id=self._next_id(), name=name, color=color, user_id=user_id)
            self._categories[category.id] = category

        self._user_stats[user_id] = UserStats(
            id=self._next_id(),
            user_id=user_id,
            current_streak=DEMO_STREAK,
            total_tasks=0,
            completed_tasks=0,
            weekly_progress=dict(DEMO_WEEKLY_PROGRESS),
            last_active_date=self._clock(),
        )
        logger.info(
            "Seeded demo data user=%s categories=%d",
            user_id,
            len(DEMO_CATEGORIES),
        )

    def _next_id(self) -> str:
        # Collisions are practically impossible with uuid4, but an injected
        # factory might repeat itself.
        while True:
            candidate = self._id_factory()
            if (
                candidate not in self._categories
                and candidate not in self._tasks
                and all(s.id != candidate for s in self._user_stats.values())
            ):
                return candidate

    # =========================================================================
    # Categories
    # =========================================================================

    async def list_categories(self, user_id: str) -> list[Category]:
        return [
            c.model_copy(deep=True)
            for c in self._categories.values()
            if c.user_id == user_id
        ]

    async def create_category(self, data: Mapping[str, Any]) -> Category:
        fields = {k: v for k, v in data.items() if k != "id"}
        category = _build(Category, {**fields, "id": self._next_id()})
        self._categories[category.id] = category
        logger.debug("Category created id=%s name=%s", category.id, category.name)
        return category.model_copy(deep=True)

    async def delete_category(self, category_id: str) -> None:
        if self._categories.pop(category_id, None) is not None:
            logger.debug("Category deleted id=%s", category_id)

    # =========================================================================
    # Tasks
    # =========================================================================

    async def list_tasks(self, user_id: str) -> list[Task]:
        tasks = [t for t in self._tasks.values() if t.user_id == user_id]
        tasks.sort(key=lambda t: t.position)
        return [t.model_copy(deep=True) for t in tasks]

    async def get_task(self, task_id: str) -> Task | None:
        task = self._tasks.get(task_id)
        return task.model_copy(deep=True) if task else None

    async def create_task(self, data: Mapping[str, Any]) -> Task:
        now = self._clock()
        fields = {k: v for k, v in data.items() if k not in _SERVER_TASK_FIELDS}
        task = _build(
            Task,
            {
                **fields,
                "id": self._next_id(),
                "created_at": now,
                "updated_at": now,
            },
        )
        self._tasks[task.id] = task
        logger.debug(
            "Task created id=%s user=%s position=%s",
            task.id,
            task.user_id,
            task.position,
        )
        return task.model_copy(deep=True)

    async def update_task(self, task_id: str, changes: Mapping[str, Any]) -> Task:
        existing = self._tasks.get(task_id)
        if existing is None:
            raise TaskboardNotFoundError("Task", task_id)

        now = self._clock()
        if now <= existing.updated_at:
            now = existing.updated_at + timedelta(microseconds=1)

        patch = {k: v for k, v in changes.items() if k not in _PROTECTED_TASK_FIELDS}
        updated = _build(Task, {**existing.model_dump(), **patch, "updated_at": now})
        self._tasks[task_id] = updated
        logger.debug("Task updated id=%s fields=%s", task_id, sorted(patch))
        return updated.model_copy(deep=True)

    async def delete_task(self, task_id: str) -> None:
        if self._tasks.pop(task_id, None) is not None:
            logger.debug("Task deleted id=%s", task_id)

    async def reorder_tasks(self, ordered_ids: Sequence[str]) -> None:
        moved = 0
        for index, task_id in enumerate(ordered_ids):
            task = self._tasks.get(task_id)
            if task is None:
                continue
            self._tasks[task_id] = task.model_copy(update={"position": index})
            moved += 1
        logger.debug("Tasks reordered requested=%d moved=%d", len(ordered_ids), moved)

    # =========================================================================
    # User Stats
    # =========================================================================

    async def get_user_stats(self, user_id: str) -> UserStats | None:
        stats = self._user_stats.get(user_id)
        return stats.model_copy(deep=True) if stats else None

    async def update_user_stats(self, user_id: str, changes: Mapping[str, Any]) -> UserStats:
        existing = self._user_stats.get(user_id)
        if existing is None:
            existing = UserStats(id=self._next_id(), user_id=user_id)

        patch = {k: v for k, v in changes.items() if k not in _PROTECTED_STATS_FIELDS}
        updated = _build(UserStats, {**existing.model_dump(), **patch})
        self._user_stats[user_id] = updated
        return updated.model_copy(deep=True)
