"""
Taskboard Constants.

Enumerations and fixed data shared by the models, the store and the
request layers.
"""

from __future__ import annotations

from enum import Enum


DEFAULT_USER_ID = "demo-user"


class TaskPriority(str, Enum):
    """Task priority levels."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class CategoryColor(str, Enum):
    """Closed palette a category color must come from."""

    BLUE = "blue"
    GREEN = "green"
    PURPLE = "purple"
    RED = "red"
    YELLOW = "yellow"
    ORANGE = "orange"


class ResponseFormat(str, Enum):
    """Output format for tool responses."""

    MARKDOWN = "markdown"
    JSON = "json"


WEEKDAYS = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)

# Demo data seeded for the fixed user on a fresh store
DEMO_CATEGORIES = (
    ("Work", CategoryColor.BLUE),
    ("Personal", CategoryColor.GREEN),
    ("Learning", CategoryColor.PURPLE),
)

DEMO_STREAK = 12

DEMO_WEEKLY_PROGRESS = {
    "Monday": 100,
    "Tuesday": 80,
    "Wednesday": 70,
    "Thursday": 0,
    "Friday": 0,
    "Saturday": 0,
    "Sunday": 0,
}

# Static menu served by the suggestions endpoint; not derived from tasks.
SUGGESTIONS = (
    {"id": "1", "text": "Review weekly goals", "icon": "lightbulb"},
    {"id": "2", "text": "Take a break", "icon": "coffee"},
    {"id": "3", "text": "Read documentation", "icon": "book-open"},
    {"id": "4", "text": "Update project status", "icon": "clipboard"},
    {"id": "5", "text": "Plan tomorrow", "icon": "calendar"},
)
