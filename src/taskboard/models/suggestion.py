"""Suggestion model."""

from __future__ import annotations

from taskboard.constants import SUGGESTIONS
from taskboard.models.base import TaskboardModel


class Suggestion(TaskboardModel):
    """A canned task idea offered to the user."""

    id: str
    text: str
    icon: str


def get_suggestions() -> list[Suggestion]:
    """Return the fixed suggestion menu."""
    return [Suggestion.model_validate(s) for s in SUGGESTIONS]
