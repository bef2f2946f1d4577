"""Category model."""

from __future__ import annotations

from taskboard.constants import CategoryColor
from taskboard.models.base import TaskboardModel


class Category(TaskboardModel):
    """
    A user-owned label tasks can point at through ``category_id``.

    Categories are immutable after creation. Deleting one leaves any
    referencing tasks untouched.
    """

    id: str
    name: str
    color: CategoryColor
    user_id: str
