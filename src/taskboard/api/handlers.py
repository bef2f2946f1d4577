"""
Request Handlers.

Framework-neutral translation of HTTP-shaped requests into lifecycle
manager calls. Each handler validates the payload, delegates, and maps the
outcome to a HandlerResponse carrying a status code and a JSON-ready body.

Status mapping:
    - create                 -> 201 with the entity
    - read / update          -> 200 with the entity
    - delete                 -> 204, no body (absent ids included)
    - reorder                -> 200 with {"success": true}
    - validation failure     -> 400 with field errors
    - update of absent task  -> 400 (same class as validation)
    - anything else          -> 500
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, TypeVar

from pydantic import BaseModel, ValidationError

from taskboard.api.inputs import (
    CategoryCreateInput,
    TaskCreateInput,
    TaskReorderInput,
    TaskUpdateInput,
)
from taskboard.exceptions import TaskboardNotFoundError, TaskboardValidationError
from taskboard.lifecycle import TaskLifecycleManager
from taskboard.models import get_suggestions

logger = logging.getLogger(__name__)

InputT = TypeVar("InputT", bound=BaseModel)


@dataclass(frozen=True)
class HandlerResponse:
    """Status code plus JSON-ready body (None means no body)."""

    status_code: int
    body: Any = None

    @property
    def ok(self) -> bool:
        return self.status_code < 400


def parse_input(model: type[InputT], payload: Any) -> InputT:
    """
    Validate a raw payload against an input model.

    Raises:
        TaskboardValidationError: If the payload does not fit the model.
    """
    try:
        return model.model_validate(payload)
    except ValidationError as e:
        errors = [
            {
                "field": ".".join(str(part) for part in err["loc"]) or "body",
                "message": err["msg"],
            }
            for err in e.errors()
        ]
        raise TaskboardValidationError(
            f"Invalid {model.__name__}: {e.error_count()} validation error(s)",
            errors=errors,
        ) from e


def validation_failure(error: TaskboardValidationError) -> HandlerResponse:
    return HandlerResponse(400, {"message": error.message, "errors": error.errors})


def error_response(status_code: int, error: Exception) -> HandlerResponse:
    return HandlerResponse(status_code, {"message": str(error)})


class RequestHandlers:
    """
    Request handlers bound to one lifecycle manager and one user identity.

    Every create is stamped with ``user_id``; every list and stats read is
    scoped to it.
    """

    def __init__(self, manager: TaskLifecycleManager, user_id: str) -> None:
        self._manager = manager
        self._user_id = user_id

    @property
    def manager(self) -> TaskLifecycleManager:
        return self._manager

    @property
    def user_id(self) -> str:
        return self._user_id

    async def _run(
        self,
        operation: str,
        action: Callable[[], Awaitable[HandlerResponse]],
        *,
        not_found_status: int = 500,
    ) -> HandlerResponse:
        try:
            return await action()
        except TaskboardValidationError as e:
            logger.info("Rejected %s: %s", operation, e)
            return validation_failure(e)
        except TaskboardNotFoundError as e:
            logger.info("%s failed: %s", operation, e)
            return error_response(not_found_status, e)
        except Exception as e:
            logger.exception("Error in %s: %s", operation, e)
            return error_response(500, e)

    # =========================================================================
    # Categories
    # =========================================================================

    async def list_categories(self) -> HandlerResponse:
        async def action() -> HandlerResponse:
            categories = await self._manager.list_categories(self._user_id)
            return HandlerResponse(200, [c.to_api() for c in categories])

        return await self._run("list_categories", action)

    async def create_category(self, payload: Any) -> HandlerResponse:
        async def action() -> HandlerResponse:
            params = parse_input(CategoryCreateInput, payload)
            category = await self._manager.create_category(
                {**params.to_fields(), "user_id": self._user_id}
            )
            return HandlerResponse(201, category.to_api())

        return await self._run("create_category", action)

    async def delete_category(self, category_id: str) -> HandlerResponse:
        async def action() -> HandlerResponse:
            await self._manager.delete_category(category_id)
            return HandlerResponse(204)

        return await self._run("delete_category", action)

    # =========================================================================
    # Tasks
    # =========================================================================

    async def list_tasks(self) -> HandlerResponse:
        async def action() -> HandlerResponse:
            tasks = await self._manager.list_tasks(self._user_id)
            return HandlerResponse(200, [t.to_api() for t in tasks])

        return await self._run("list_tasks", action)

    async def create_task(self, payload: Any, *, append: bool = False) -> HandlerResponse:
        async def action() -> HandlerResponse:
            params = parse_input(TaskCreateInput, payload)
            task = await self._manager.create_task(
                {**params.to_fields(), "user_id": self._user_id},
                append=append,
            )
            return HandlerResponse(201, task.to_api())

        return await self._run("create_task", action)

    async def update_task(self, task_id: str, payload: Any) -> HandlerResponse:
        async def action() -> HandlerResponse:
            params = parse_input(TaskUpdateInput, payload)
            task = await self._manager.update_task(task_id, params.to_fields())
            return HandlerResponse(200, task.to_api())

        # An absent task is reported like a bad request.
        return await self._run("update_task", action, not_found_status=400)

    async def delete_task(self, task_id: str) -> HandlerResponse:
        async def action() -> HandlerResponse:
            await self._manager.delete_task(task_id)
            return HandlerResponse(204)

        return await self._run("delete_task", action)

    async def reorder_tasks(self, payload: Any) -> HandlerResponse:
        async def action() -> HandlerResponse:
            params = parse_input(TaskReorderInput, payload)
            await self._manager.reorder_tasks(params.task_ids)
            return HandlerResponse(200, {"success": True})

        return await self._run("reorder_tasks", action)

    # =========================================================================
    # Stats & Suggestions
    # =========================================================================

    async def get_stats(self) -> HandlerResponse:
        async def action() -> HandlerResponse:
            stats = await self._manager.get_user_stats(self._user_id)
            return HandlerResponse(200, stats.to_api() if stats else None)

        return await self._run("get_stats", action)

    async def get_suggestions(self) -> HandlerResponse:
        async def action() -> HandlerResponse:
            return HandlerResponse(200, [s.to_api() for s in get_suggestions()])

        return await self._run("get_suggestions", action)
