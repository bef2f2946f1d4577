"""
Response Formatting for Taskboard Tools.

Renders handler results as markdown for people or JSON for machines.
Inputs are the JSON-ready (camelCase) dicts produced by the handlers.
"""

from __future__ import annotations

import json
from typing import Any, Callable

from taskboard.api.handlers import HandlerResponse
from taskboard.constants import WEEKDAYS, ResponseFormat
from taskboard.models import UserStats


PRIORITY_MARKERS = {"low": "🟢", "medium": "🟡", "high": "🔴"}


# =============================================================================
# Generic Messages
# =============================================================================


def success_message(message: str) -> str:
    return f"✅ {message}"


def error_message(message: str, hint: str | None = None) -> str:
    text = f"❌ Error: {message}"
    if hint:
        text += f"\n\n💡 {hint}"
    return text


# =============================================================================
# Categories
# =============================================================================


def format_category_markdown(category: dict[str, Any]) -> str:
    return f"- **{category['name']}** ({category['color']}) `{category['id']}`"


def format_categories_markdown(categories: list[dict[str, Any]]) -> str:
    if not categories:
        return "No categories found."
    lines = [f"# Categories ({len(categories)})", ""]
    lines.extend(format_category_markdown(c) for c in categories)
    return "\n".join(lines)


# =============================================================================
# Tasks
# =============================================================================


def format_task_markdown(task: dict[str, Any]) -> str:
    """Format a single task as a markdown block."""
    check = "x" if task.get("completed") else " "
    marker = PRIORITY_MARKERS.get(task.get("priority", ""), "")
    lines = [f"- [{check}] {marker} **{task['title']}** `{task['id']}`"]

    details = [f"priority: {task.get('priority')}", f"position: {task.get('position')}"]
    if task.get("progress"):
        details.append(f"progress: {task['progress']}%")
    if task.get("dueTime"):
        details.append(f"due: {task['dueTime']}")
    if task.get("categoryId"):
        details.append(f"category: `{task['categoryId']}`")
    lines.append("  - " + ", ".join(details))

    if task.get("description"):
        lines.append(f"  - {task['description']}")
    return "\n".join(lines)


def format_tasks_markdown(tasks: list[dict[str, Any]]) -> str:
    if not tasks:
        return "No tasks found."
    done = sum(1 for t in tasks if t.get("completed"))
    lines = [f"# Tasks ({done}/{len(tasks)} completed)", ""]
    lines.extend(format_task_markdown(t) for t in tasks)
    return "\n".join(lines)


# =============================================================================
# Stats & Suggestions
# =============================================================================


def format_stats_markdown(stats: dict[str, Any] | None) -> str:
    if not stats:
        return "No statistics recorded yet."

    figures = UserStats.model_validate(stats)
    completed = f"{figures.completed_tasks}/{figures.total_tasks}"

    lines = [
        "# Productivity",
        "",
        f"- **Completed**: {completed} ({figures.completion_percentage}%)",
        f"- **Current Streak**: {figures.current_streak} days",
        f"- **Last Active**: {stats.get('lastActiveDate') or 'never'}",
    ]

    weekly = stats.get("weeklyProgress") or {}
    if weekly:
        lines.extend(["", "## Weekly Progress", ""])
        for day in WEEKDAYS:
            if day in weekly:
                lines.append(f"- {day}: {weekly[day]}%")
    return "\n".join(lines)


def format_suggestions_markdown(suggestions: list[dict[str, Any]]) -> str:
    lines = ["# Suggestions", ""]
    lines.extend(f"- {s['text']} ({s['icon']})" for s in suggestions)
    return "\n".join(lines)


# =============================================================================
# Dispatch
# =============================================================================


def format_response(
    result: HandlerResponse,
    response_format: ResponseFormat,
    to_markdown: Callable[[Any], str],
) -> str:
    """Render a handler result, or its error, in the requested format."""
    if not result.ok:
        body = result.body or {}
        message = body.get("message", f"Request failed with status {result.status_code}")
        errors = body.get("errors") or []
        hint = "; ".join(f"{e['field']}: {e['message']}" for e in errors) or None
        return error_message(message, hint)

    if response_format == ResponseFormat.JSON:
        return json.dumps(result.body, indent=2)
    return to_markdown(result.body)
