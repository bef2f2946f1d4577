#!/usr/bin/env python3
"""
Taskboard MCP Server.

Exposes the taskboard operations as MCP tools so an assistant can manage
the same tasks, categories and stats the HTTP API serves. Every tool goes
through RequestHandlers, so validation and status rules are identical on
both surfaces.

Features:
    - Task management (create, update, delete, reorder, list)
    - Category management (create, delete, list)
    - Productivity statistics
    - Static task suggestions

Environment Variables:
    TASKBOARD_USER_ID
    TASKBOARD_SEED_DEMO_DATA
    TASKBOARD_LOG_LEVEL
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, List

from mcp.server.fastmcp import Context, FastMCP

from taskboard.api.handlers import RequestHandlers
from taskboard.api.inputs import CategoryCreateInput, TaskCreateInput, TaskUpdateInput
from taskboard.constants import ResponseFormat
from taskboard.lifecycle import TaskLifecycleManager
from taskboard.settings import configure_logging, get_settings
from taskboard.storage import MemoryStore
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

logger = logging.getLogger(__name__)


# =============================================================================
# Lifespan Management
# =============================================================================


@asynccontextmanager
async def lifespan(mcp: FastMCP) -> AsyncIterator[dict[str, Any]]:
    """
    Manage the entity store lifecycle.

    Builds the store on startup and closes it on shutdown.
    """
    settings = get_settings()
    logger.info("Initializing Taskboard MCP Server user=%s", settings.user_id)

    manager = TaskLifecycleManager(MemoryStore.from_settings(settings))
    try:
        yield {"handlers": RequestHandlers(manager, settings.user_id)}
    finally:
        await manager.close()
        logger.info("Taskboard store closed")


mcp = FastMCP(
    "taskboard_mcp",
    lifespan=lifespan,
)


def get_handlers(ctx: Context) -> RequestHandlers:
    """Get the request handlers from context."""
    return ctx.request_context.lifespan_context["handlers"]


# =============================================================================
# Error Handling
# =============================================================================


def handle_error(e: Exception, operation: str) -> str:
    """Log an unexpected exception and return a user-friendly message."""
    logger.exception("Error in %s: %s", operation, e)
    return error_message(f"Unexpected error: {e}")


# =============================================================================
# Category Tools
# =============================================================================


@mcp.tool(
    name="taskboard_list_categories",
    annotations={
        "title": "List Categories",
        "readOnlyHint": True,
        "destructiveHint": False,
        "idempotentHint": True,
        "openWorldHint": False,
    },
)
async def taskboard_list_categories(
    ctx: Context,
    response_format: ResponseFormat = ResponseFormat.MARKDOWN,
) -> str:
    """
    List all categories.

    Returns:
        Formatted list of categories or error message.
    """
    try:
        result = await get_handlers(ctx).list_categories()
        return format_response(result, response_format, format_categories_markdown)
    except Exception as e:
        return handle_error(e, "list_categories")


@mcp.tool(
    name="taskboard_create_category",
    annotations={
        "title": "Create Category",
        "readOnlyHint": False,
        "destructiveHint": False,
        "idempotentHint": False,
        "openWorldHint": False,
    },
)
async def taskboard_create_category(
    params: CategoryCreateInput,
    ctx: Context,
    response_format: ResponseFormat = ResponseFormat.MARKDOWN,
) -> str:
    """
    Create a category.

    Args:
        params: Category parameters:
            - name (str): Category name (required)
            - color (str): blue, green, purple, red, yellow or orange (required)

    Returns:
        The created category or error message.
    """
    try:
        result = await get_handlers(ctx).create_category(params.to_fields())
        return format_response(
            result,
            response_format,
            lambda c: f"# Category Created\n\n{format_categories_markdown([c])}",
        )
    except Exception as e:
        return handle_error(e, "create_category")


@mcp.tool(
    name="taskboard_delete_category",
    annotations={
        "title": "Delete Category",
        "readOnlyHint": False,
        "destructiveHint": True,
        "idempotentHint": True,
        "openWorldHint": False,
    },
)
async def taskboard_delete_category(category_id: str, ctx: Context) -> str:
    """
    Delete a category.

    Tasks that reference the category keep their category id.

    Args:
        category_id: Category to delete

    Returns:
        Success confirmation or error message.
    """
    try:
        result = await get_handlers(ctx).delete_category(category_id)
        return format_response(
            result,
            ResponseFormat.MARKDOWN,
            lambda _: success_message(f"Category `{category_id}` deleted."),
        )
    except Exception as e:
        return handle_error(e, "delete_category")


# =============================================================================
# Task Tools
# =============================================================================


@mcp.tool(
    name="taskboard_list_tasks",
    annotations={
        "title": "List Tasks",
        "readOnlyHint": True,
        "destructiveHint": False,
        "idempotentHint": True,
        "openWorldHint": False,
    },
)
async def taskboard_list_tasks(
    ctx: Context,
    response_format: ResponseFormat = ResponseFormat.MARKDOWN,
) -> str:
    """
    List all tasks in display order.

    Returns:
        Formatted list of tasks sorted by position, or error message.
    """
    try:
        result = await get_handlers(ctx).list_tasks()
        return format_response(result, response_format, format_tasks_markdown)
    except Exception as e:
        return handle_error(e, "list_tasks")


@mcp.tool(
    name="taskboard_create_task",
    annotations={
        "title": "Create Task",
        "readOnlyHint": False,
        "destructiveHint": False,
        "idempotentHint": False,
        "openWorldHint": False,
    },
)
async def taskboard_create_task(
    params: TaskCreateInput,
    ctx: Context,
    response_format: ResponseFormat = ResponseFormat.MARKDOWN,
) -> str:
    """
    Create a new task.

    When no position is given the task is appended after the current last
    task.

    Args:
        params: Task creation parameters including:
            - title (str): Task title (required)
            - description (str): Notes
            - priority (str): 'low', 'medium', 'high'
            - category_id (str): Category to file the task under
            - progress (int): 0-100
            - due_time (str): Free-text due time
            - position (int): Display position

    Returns:
        Formatted task details on success, or error message on failure.

    Examples:
        - Create simple task: title="Buy milk"
        - Create with category: title="Write report", category_id="..."
    """
    try:
        result = await get_handlers(ctx).create_task(params.to_fields(), append=True)
        return format_response(
            result,
            response_format,
            lambda t: f"# Task Created\n\n{format_task_markdown(t)}",
        )
    except Exception as e:
        return handle_error(e, "create_task")


@mcp.tool(
    name="taskboard_update_task",
    annotations={
        "title": "Update Task",
        "readOnlyHint": False,
        "destructiveHint": False,
        "idempotentHint": True,
        "openWorldHint": False,
    },
)
async def taskboard_update_task(
    task_id: str,
    params: TaskUpdateInput,
    ctx: Context,
    response_format: ResponseFormat = ResponseFormat.MARKDOWN,
) -> str:
    """
    Update a task.

    Only the fields provided are changed. Setting ``completed`` refreshes
    the productivity statistics.

    Args:
        task_id: Task to update
        params: Fields to change (title, description, completed, priority,
            category_id, progress, due_time, position)

    Returns:
        Updated task details or error message.
    """
    try:
        result = await get_handlers(ctx).update_task(task_id, params.to_fields())
        return format_response(
            result,
            response_format,
            lambda t: f"# Task Updated\n\n{format_task_markdown(t)}",
        )
    except Exception as e:
        return handle_error(e, "update_task")


@mcp.tool(
    name="taskboard_delete_task",
    annotations={
        "title": "Delete Task",
        "readOnlyHint": False,
        "destructiveHint": True,
        "idempotentHint": True,
        "openWorldHint": False,
    },
)
async def taskboard_delete_task(task_id: str, ctx: Context) -> str:
    """
    Delete a task.

    Deleting an id that does not exist succeeds without changing anything.

    Args:
        task_id: Task to delete

    Returns:
        Success confirmation or error message.
    """
    try:
        result = await get_handlers(ctx).delete_task(task_id)
        return format_response(
            result,
            ResponseFormat.MARKDOWN,
            lambda _: success_message(f"Task `{task_id}` deleted."),
        )
    except Exception as e:
        return handle_error(e, "delete_task")


@mcp.tool(
    name="taskboard_reorder_tasks",
    annotations={
        "title": "Reorder Tasks",
        "readOnlyHint": False,
        "destructiveHint": False,
        "idempotentHint": True,
        "openWorldHint": False,
    },
)
async def taskboard_reorder_tasks(task_ids: List[str], ctx: Context) -> str:
    """
    Reorder tasks.

    Each listed task gets its index in ``task_ids`` as its new position.
    Unknown ids are skipped and unlisted tasks keep their position.

    Args:
        task_ids: Task ids in the desired order

    Returns:
        Success confirmation or error message.
    """
    try:
        result = await get_handlers(ctx).reorder_tasks({"taskIds": task_ids})
        return format_response(
            result,
            ResponseFormat.MARKDOWN,
            lambda _: success_message(f"Reordered {len(task_ids)} task(s)."),
        )
    except Exception as e:
        return handle_error(e, "reorder_tasks")


# =============================================================================
# Stats & Suggestion Tools
# =============================================================================


@mcp.tool(
    name="taskboard_get_stats",
    annotations={
        "title": "Get Statistics",
        "readOnlyHint": True,
        "destructiveHint": False,
        "idempotentHint": True,
        "openWorldHint": False,
    },
)
async def taskboard_get_stats(
    ctx: Context,
    response_format: ResponseFormat = ResponseFormat.MARKDOWN,
) -> str:
    """
    Get productivity statistics.

    Returns:
        Completion counts, streak and weekly progress, or error message.
    """
    try:
        result = await get_handlers(ctx).get_stats()
        return format_response(result, response_format, format_stats_markdown)
    except Exception as e:
        return handle_error(e, "get_stats")


@mcp.tool(
    name="taskboard_get_suggestions",
    annotations={
        "title": "Get Suggestions",
        "readOnlyHint": True,
        "destructiveHint": False,
        "idempotentHint": True,
        "openWorldHint": False,
    },
)
async def taskboard_get_suggestions(
    ctx: Context,
    response_format: ResponseFormat = ResponseFormat.MARKDOWN,
) -> str:
    """
    Get suggested tasks.

    Returns:
        A fixed list of task ideas.
    """
    try:
        result = await get_handlers(ctx).get_suggestions()
        return format_response(result, response_format, format_suggestions_markdown)
    except Exception as e:
        return handle_error(e, "get_suggestions")


# =============================================================================
# Main Entry Point
# =============================================================================


def main():
    """Main entry point for the Taskboard MCP server."""
    configure_logging(get_settings())
    mcp.run()


if __name__ == "__main__":
    main()
