"""
Taskboard Exceptions.

All errors raised by the data layer derive from TaskboardError so callers
can catch the whole family at a request boundary.
"""

from __future__ import annotations

from typing import Any


class TaskboardError(Exception):
    """Base class for all taskboard errors."""

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        return self.message


class TaskboardValidationError(TaskboardError):
    """Request payload failed shape validation; nothing reached the store."""

    def __init__(
        self,
        message: str = "Validation failed",
        *,
        errors: list[dict[str, str]] | None = None,
    ) -> None:
        super().__init__(message, details={"errors": errors or []})
        self.errors = errors or []


class TaskboardNotFoundError(TaskboardError):
    """Referenced entity does not exist."""

    def __init__(self, resource: str, resource_id: str) -> None:
        super().__init__(
            f"{resource} not found: {resource_id}",
            details={"resource": resource, "id": resource_id},
        )
        self.resource = resource
        self.resource_id = resource_id


class TaskboardStoreError(TaskboardError):
    """Unexpected fault inside a storage backend."""


class TaskboardConfigurationError(TaskboardError):
    """Invalid or missing configuration."""
