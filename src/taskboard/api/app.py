"""
Taskboard HTTP API.

FastAPI application exposing the task, category, stats and suggestion
routes. Routes are thin: they decode the body, call RequestHandlers, and
render the HandlerResponse as-is.
"""

from __future__ import annotations

import json
import logging
from contextlib import asynccontextmanager
from typing import Annotated, Any, AsyncIterator, Awaitable, Callable

from fastapi import APIRouter, Depends, FastAPI, Request, Response
from fastapi.responses import JSONResponse

from taskboard import __version__
from taskboard.api.handlers import HandlerResponse, RequestHandlers, validation_failure
from taskboard.exceptions import TaskboardValidationError
from taskboard.lifecycle import TaskLifecycleManager
from taskboard.settings import Settings, configure_logging, get_settings
from taskboard.storage import EntityStore, MemoryStore

logger = logging.getLogger(__name__)


# =============================================================================
# Helpers
# =============================================================================


def get_handlers(request: Request) -> RequestHandlers:
    """Get the request handlers created at startup."""
    return request.app.state.handlers


Handlers = Annotated[RequestHandlers, Depends(get_handlers)]


class MalformedBody(Exception):
    """Raised when a request body is not valid JSON."""


async def read_json(request: Request, empty: Any = None) -> Any:
    raw = await request.body()
    if not raw:
        return empty
    try:
        return json.loads(raw)
    except ValueError as e:
        raise MalformedBody(str(e)) from e


def render(result: HandlerResponse) -> Response:
    if result.status_code == 204 or result.body is None:
        return Response(status_code=result.status_code)
    return JSONResponse(status_code=result.status_code, content=result.body)


async def with_body(
    request: Request,
    call: Callable[..., Awaitable[HandlerResponse]],
    *args: Any,
    empty: Any = None,
) -> Response:
    """
    Decode the JSON body and pass it as the last argument to a handler.

    A request without a body passes ``empty`` instead.
    """
    try:
        payload = await read_json(request, empty)
    except MalformedBody as e:
        return render(
            validation_failure(
                TaskboardValidationError(
                    "Malformed JSON body",
                    errors=[{"field": "body", "message": str(e)}],
                )
            )
        )
    return render(await call(*args, payload))


# =============================================================================
# Routes
# =============================================================================


router = APIRouter()


@router.get("/categories")
async def list_categories(handlers: Handlers) -> Response:
    return render(await handlers.list_categories())


@router.post("/categories")
async def create_category(request: Request, handlers: Handlers) -> Response:
    return await with_body(request, handlers.create_category)


@router.delete("/categories/{category_id}")
async def delete_category(category_id: str, handlers: Handlers) -> Response:
    return render(await handlers.delete_category(category_id))


@router.get("/tasks")
async def list_tasks(handlers: Handlers) -> Response:
    return render(await handlers.list_tasks())


@router.post("/tasks")
async def create_task(request: Request, handlers: Handlers) -> Response:
    return await with_body(request, handlers.create_task)


@router.post("/tasks/reorder")
async def reorder_tasks(request: Request, handlers: Handlers) -> Response:
    return await with_body(request, handlers.reorder_tasks)


@router.patch("/tasks/{task_id}")
async def update_task(task_id: str, request: Request, handlers: Handlers) -> Response:
    # A bare PATCH is an empty patch.
    return await with_body(request, handlers.update_task, task_id, empty={})


@router.delete("/tasks/{task_id}")
async def delete_task(task_id: str, handlers: Handlers) -> Response:
    return render(await handlers.delete_task(task_id))


@router.get("/stats")
async def get_stats(handlers: Handlers) -> Response:
    return render(await handlers.get_stats())


@router.get("/suggestions")
async def get_suggestions(handlers: Handlers) -> Response:
    return render(await handlers.get_suggestions())


# =============================================================================
# Application Factory
# =============================================================================


def create_app(
    settings: Settings | None = None,
    store: EntityStore | None = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    The store is created on startup (unless one is injected) and closed on
    shutdown, so its lifetime matches the server process.
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info("Starting taskboard API user=%s", settings.user_id)
        manager = TaskLifecycleManager(store or MemoryStore.from_settings(settings))
        app.state.handlers = RequestHandlers(manager, settings.user_id)
        try:
            yield
        finally:
            await manager.close()
            logger.info("Taskboard API stopped")

    app = FastAPI(title="Taskboard", version=__version__, lifespan=lifespan)
    app.include_router(router, prefix=settings.api_prefix)
    return app


def main() -> None:
    """Run the HTTP API with uvicorn."""
    import uvicorn

    settings = get_settings()
    configure_logging(settings)
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
