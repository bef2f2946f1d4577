"""
Pytest Configuration and Fixtures for Taskboard Tests.

This module provides fixtures, data factories, and shared utilities for
testing the entity store, the lifecycle manager, and both request surfaces.

Architecture:
    - ManualClock: Deterministic clock injected into store and manager
    - Factories: Generate request payloads for tasks and categories
    - Fixtures: Provide configured stores, managers, handlers and clients
    - Markers: Custom pytest markers for test categorization
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from types import SimpleNamespace
from typing import Any, Iterator

import pytest
from fastapi.testclient import TestClient

from taskboard.api.app import create_app
from taskboard.api.handlers import RequestHandlers
from taskboard.lifecycle import TaskLifecycleManager
from taskboard.settings import Settings
from taskboard.storage import MemoryStore


USER_ID = "demo-user"
OTHER_USER_ID = "other-user"


# =============================================================================
# Pytest Configuration
# =============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "store: Entity store tests")
    config.addinivalue_line("markers", "lifecycle: Lifecycle manager tests")
    config.addinivalue_line("markers", "inputs: Input validation tests")
    config.addinivalue_line("markers", "handlers: Request handler tests")
    config.addinivalue_line("markers", "api: HTTP API tests")
    config.addinivalue_line("markers", "tools: MCP tool tests")


# =============================================================================
# Time Utilities
# =============================================================================


class ManualClock:
    """Clock that only moves when told to."""

    def __init__(self, start: datetime | None = None) -> None:
        self.now = start or datetime(2025, 1, 6, 9, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> datetime:
        """Move the clock forward (kwargs as for timedelta)."""
        self.now = self.now + timedelta(**kwargs)
        return self.now


# =============================================================================
# Test Data Factories
# =============================================================================


class CategoryPayloadFactory:
    """Factory for category request bodies."""

    @staticmethod
    def create(name: str = "Work", color: str = "blue", **kwargs: Any) -> dict[str, Any]:
        return {"name": name, "color": color, **kwargs}


class TaskPayloadFactory:
    """Factory for task request bodies (wire form, camelCase)."""

    @staticmethod
    def create(title: str = "Test Task", **kwargs: Any) -> dict[str, Any]:
        """Create a task body with only the given fields set."""
        return {"title": title, **kwargs}

    @staticmethod
    def create_batch(count: int, **kwargs: Any) -> list[dict[str, Any]]:
        """Create bodies with ascending positions."""
        return [
            TaskPayloadFactory.create(title=f"Task {i + 1}", position=i, **kwargs)
            for i in range(count)
        ]


def task_fields(title: str = "Test Task", user_id: str = USER_ID, **kwargs: Any) -> dict[str, Any]:
    """Store-level task data (snake_case) for direct store and manager calls."""
    return {"title": title, "user_id": user_id, **kwargs}


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def clock() -> ManualClock:
    """Provide a manual clock."""
    return ManualClock()


@pytest.fixture
def store(clock: ManualClock) -> MemoryStore:
    """Create an empty in-memory store."""
    return MemoryStore(clock=clock)


@pytest.fixture
def manager(store: MemoryStore, clock: ManualClock) -> TaskLifecycleManager:
    """Create a lifecycle manager over the empty store."""
    return TaskLifecycleManager(store, clock=clock)


@pytest.fixture
def handlers(manager: TaskLifecycleManager) -> RequestHandlers:
    """Create request handlers for the fixed user."""
    return RequestHandlers(manager, USER_ID)


@pytest.fixture
def settings() -> Settings:
    """Settings for an unseeded store."""
    return Settings(user_id=USER_ID, seed_demo_data=False)


@pytest.fixture
def api_client(settings: Settings, store: MemoryStore) -> Iterator[TestClient]:
    """
    HTTP client bound to an app that uses the test store.

    Entering the client runs the app lifespan, which wires the handlers.
    """
    with TestClient(create_app(settings, store)) as client:
        yield client


@pytest.fixture
def seeded_api_client() -> Iterator[TestClient]:
    """HTTP client bound to an app with demo data seeded."""
    app = create_app(Settings(user_id=USER_ID, seed_demo_data=True))
    with TestClient(app) as client:
        yield client


@pytest.fixture
def mcp_ctx(handlers: RequestHandlers) -> SimpleNamespace:
    """Stand-in for an MCP Context carrying the lifespan state."""
    return SimpleNamespace(
        request_context=SimpleNamespace(lifespan_context={"handlers": handlers})
    )


@pytest.fixture
def task_factory() -> type[TaskPayloadFactory]:
    """Provide TaskPayloadFactory class."""
    return TaskPayloadFactory


@pytest.fixture
def category_factory() -> type[CategoryPayloadFactory]:
    """Provide CategoryPayloadFactory class."""
    return CategoryPayloadFactory


# =============================================================================
# Parametrization Helpers
# =============================================================================


PRIORITY_NAMES = ["low", "medium", "high"]
PALETTE = ["blue", "green", "purple", "red", "yellow", "orange"]
