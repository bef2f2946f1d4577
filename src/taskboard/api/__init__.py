"""
Taskboard Request Layer.

    - inputs: pydantic request-body models
    - handlers: framework-neutral request handlers
    - app: FastAPI application built on the handlers
"""

from taskboard.api.handlers import HandlerResponse, RequestHandlers
from taskboard.api.inputs import (
    CategoryCreateInput,
    TaskCreateInput,
    TaskReorderInput,
    TaskUpdateInput,
)

__all__ = [
    "HandlerResponse",
    "RequestHandlers",
    "CategoryCreateInput",
    "TaskCreateInput",
    "TaskReorderInput",
    "TaskUpdateInput",
]
