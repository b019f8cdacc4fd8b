"""Check-in request payloads."""

from __future__ import annotations

from datetime import date
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator


class CheckinToggleForm(BaseModel):
    """Body of ``POST /api/checkins``."""

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    category: Union[int, str] = Field(alias="categoryId", description="Category id or slug")
    completed: bool = Field(default=True, description="True marks the day, False un-marks it")
    on: Optional[date] = Field(default=None, alias="date", description="Defaults to today")
    mood: Optional[int] = Field(default=None, ge=1, le=5)
    notes: Optional[str] = Field(default=None, max_length=1000)

    @field_validator("category")
    @classmethod
    def validate_category(cls, value: Union[int, str]) -> Union[int, str]:
        """Reject blank slugs before they reach the category lookup."""

        if isinstance(value, str) and not value:
            raise ValueError("Category ID is required")
        return value

    @field_validator("notes")
    @classmethod
    def blank_notes_to_none(cls, value: Optional[str]) -> Optional[str]:
        return value or None


def validation_errors(exc: ValidationError) -> dict[str, list[str]]:
    """Group pydantic errors by the field that raised them."""

    structured: dict[str, list[str]] = {}
    for error in exc.errors(include_url=False):
        loc = error.get("loc", ())
        key = str(loc[0]) if loc else "__root__"
        structured.setdefault(key, []).append(error.get("msg", "Invalid value"))
    return structured


def parse_toggle(payload: Any) -> CheckinToggleForm:
    """Validate a JSON body, raising ValidationError on bad input."""

    return CheckinToggleForm.model_validate(payload if isinstance(payload, dict) else {})


__all__ = ["CheckinToggleForm", "parse_toggle", "validation_errors"]
