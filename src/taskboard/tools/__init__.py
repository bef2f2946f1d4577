"""
Taskboard MCP Tools Package.

Output formatting helpers used by the MCP tool definitions in
``taskboard.server``.
"""

from taskboard.tools.formatting import (
    error_message,
    format_categories_markdown,
    format_response,
    format_stats_markdown,
    format_suggestions_markdown,
    format_task_markdown,
    format_tasks_markdown,
    success_message,
)

__all__ = [
    "error_message",
    "format_categories_markdown",
    "format_response",
    "format_stats_markdown",
    "format_suggestions_markdown",
    "format_task_markdown",
    "format_tasks_markdown",
    "success_message",
]
