"""
Taskboard - personal task tracking with productivity statistics.

This package provides the data layer of a task-tracking application
(categories, tasks, per-user stats) and two surfaces over it: an HTTP API
and an MCP server.

Architecture:
    HTTP API (FastAPI)     MCP Tools
            │                  │
            └────────┬─────────┘
                     ▼
             Request Handlers (validation, status mapping)
                     │
                     ▼
          Task Lifecycle Manager (stats recomputation)
                     │
                     ▼
             Entity Store (in-memory backend)
"""

__version__ = "0.1.0"
__author__ = "Taskboard Contributors"

from taskboard.exceptions import (
    TaskboardError,
    TaskboardValidationError,
    TaskboardNotFoundError,
    TaskboardStoreError,
    TaskboardConfigurationError,
)

__all__ = [
    "__version__",
    "TaskboardError",
    "TaskboardValidationError",
    "TaskboardNotFoundError",
    "TaskboardStoreError",
    "TaskboardConfigurationError",
]
