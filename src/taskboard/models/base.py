"""Shared base for taskboard entity models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class TaskboardModel(BaseModel):
    """
    Base entity model.

    Attributes are snake_case in Python and camelCase on the wire.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_api(self) -> dict[str, Any]:
        """Render the JSON-ready wire form."""
        return self.model_dump(mode="json", by_alias=True)
