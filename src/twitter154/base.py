"""Base Pydantic model for API payloads."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator


class ApiModel(BaseModel):
    """Base model for everything decoded from the twitter154 API.

    - Immutable after creation (frozen=True)
    - Unknown fields are ignored (extra="ignore"), the API adds fields freely
    - No type coercion on the JSON path (strict=True)
    - A JSON null means "unset": the field falls back to its default
    """

    model_config = ConfigDict(
        strict=True,
        frozen=True,
        extra="ignore",
        populate_by_name=True,
    )

    @model_validator(mode="before")
    @classmethod
    def _null_as_default(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data
