"""
Input Validation Tests.

This module tests the request-body models:
- required fields and defaults
- strict scalar types
- palette and priority enums
- camelCase and snake_case field names
- server-owned keys are dropped
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from taskboard.api.inputs import (
    CategoryCreateInput,
    TaskCreateInput,
    TaskReorderInput,
    TaskUpdateInput,
)
from taskboard.constants import CategoryColor, TaskPriority
from tests.conftest import PALETTE, PRIORITY_NAMES


pytestmark = [pytest.mark.inputs, pytest.mark.unit]


class TestCategoryCreateInput:
    """Tests for category creation input."""

    @pytest.mark.parametrize("color", PALETTE)
    def test_palette_colors_accepted(self, color: str):
        """Test every palette color validates."""
        params = CategoryCreateInput.model_validate({"name": "Work", "color": color})

        assert params.color == CategoryColor(color)

    @pytest.mark.parametrize("payload", [
        {"color": "blue"},
        {"name": "Work"},
        {"name": "", "color": "blue"},
        {"name": "   ", "color": "blue"},
        {"name": "Work", "color": "#0000FF"},
        {"name": 5, "color": "blue"},
    ])
    def test_invalid_payloads(self, payload: dict):
        """Test missing or malformed fields are rejected."""
        with pytest.raises(ValidationError):
            CategoryCreateInput.model_validate(payload)

    def test_name_stripped(self):
        """Test surrounding whitespace is removed."""
        params = CategoryCreateInput.model_validate({"name": "  Work ", "color": "blue"})

        assert params.name == "Work"


class TestTaskCreateInput:
    """Tests for task creation input."""

    def test_title_only(self):
        """Test only the title is required."""
        params = TaskCreateInput.model_validate({"title": "Buy milk"})

        assert params.to_fields() == {"title": "Buy milk"}
        assert params.priority == TaskPriority.MEDIUM
        assert params.completed is False

    def test_camel_case_fields(self):
        """Test wire names map to attributes."""
        params = TaskCreateInput.model_validate(
            {"title": "Write report", "categoryId": "c1", "dueTime": "5 PM"}
        )

        assert params.category_id == "c1"
        assert params.due_time == "5 PM"

    def test_snake_case_fields(self):
        """Test attribute names are accepted too."""
        params = TaskCreateInput.model_validate({"title": "x", "category_id": "c1"})

        assert params.category_id == "c1"

    @pytest.mark.parametrize("priority", PRIORITY_NAMES)
    def test_priorities(self, priority: str):
        """Test each priority validates."""
        params = TaskCreateInput.model_validate({"title": "x", "priority": priority})

        assert params.priority == TaskPriority(priority)

    def test_server_owned_keys_dropped(self):
        """Test id, userId and timestamps are ignored."""
        params = TaskCreateInput.model_validate({
            "title": "x",
            "id": "abc",
            "userId": "someone",
            "createdAt": "2020-01-01T00:00:00Z",
            "updatedAt": "2020-01-01T00:00:00Z",
        })

        assert params.to_fields() == {"title": "x"}

    @pytest.mark.parametrize("payload", [
        {},
        {"title": ""},
        {"title": None},
        {"title": "x", "completed": "true"},
        {"title": "x", "completed": 1},
        {"title": "x", "priority": "urgent"},
        {"title": "x", "progress": 101},
        {"title": "x", "progress": -1},
        {"title": "x", "progress": "50"},
        {"title": "x", "progress": True},
        {"title": "x", "position": 1.5},
        {"title": "x", "categoryId": 7},
    ])
    def test_invalid_payloads(self, payload: dict):
        """Test malformed task bodies are rejected."""
        with pytest.raises(ValidationError):
            TaskCreateInput.model_validate(payload)

    def test_nullable_fields_accept_null(self):
        """Test description, categoryId and dueTime may be null."""
        params = TaskCreateInput.model_validate(
            {"title": "x", "description": None, "categoryId": None, "dueTime": None}
        )

        assert params.description is None
        assert params.category_id is None


class TestTaskUpdateInput:
    """Tests for partial task updates."""

    def test_empty_patch(self):
        """Test an empty body is a valid no-field patch."""
        assert TaskUpdateInput.model_validate({}).to_fields() == {}

    def test_only_sent_fields(self):
        """Test unset fields are not part of the patch."""
        params = TaskUpdateInput.model_validate({"completed": True})

        assert params.to_fields() == {"completed": True}

    def test_explicit_null_on_nullable_field_kept(self):
        """Test clearing a nullable field survives to the patch."""
        params = TaskUpdateInput.model_validate({"categoryId": None})

        assert params.to_fields() == {"category_id": None}

    @pytest.mark.parametrize("field", ["title", "completed", "priority", "progress", "position"])
    def test_null_on_required_column_rejected(self, field: str):
        """Test non-nullable columns cannot be nulled."""
        with pytest.raises(ValidationError):
            TaskUpdateInput.model_validate({field: None})

    @pytest.mark.parametrize("payload", [
        {"completed": "yes"},
        {"progress": 150},
        {"priority": "HIGHEST"},
        {"title": ""},
    ])
    def test_invalid_values(self, payload: dict):
        """Test wrongly shaped values are rejected."""
        with pytest.raises(ValidationError):
            TaskUpdateInput.model_validate(payload)


class TestTaskReorderInput:
    """Tests for reorder input."""

    def test_ids_list(self):
        """Test a list of string ids validates."""
        params = TaskReorderInput.model_validate({"taskIds": ["a", "b"]})

        assert params.task_ids == ["a", "b"]

    def test_empty_list(self):
        """Test an empty list is allowed."""
        assert TaskReorderInput.model_validate({"taskIds": []}).task_ids == []

    @pytest.mark.parametrize("payload", [
        {},
        {"taskIds": "a"},
        {"taskIds": [1, 2]},
        {"taskIds": ["a", None]},
        ["a", "b"],
        None,
    ])
    def test_invalid_payloads(self, payload):
        """Test malformed id lists are rejected."""
        with pytest.raises(ValidationError):
            TaskReorderInput.model_validate(payload)
