from __future__ import annotations

from typing import Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator


Category = Literal["work", "school", "chores", "project"]

# Classifier precedence order; "chores" is the catch-all and comes last.
CATEGORIES: Tuple[str, ...] = ("work", "school", "project", "chores")

DEFAULT_CATEGORY: Category = "chores"
DEFAULT_TITLE = "New Task"
MAX_TITLE_WORDS = 6


def normalize_title(value: str) -> str:
    """Collapse whitespace and keep at most MAX_TITLE_WORDS words."""
    words = value.split()
    return " ".join(words[:MAX_TITLE_WORDS])


class ExtractionResult(BaseModel):
    """Canonical record shape produced by every extraction strategy."""

    title: str = Field(..., min_length=1)
    time: Optional[str] = None
    venue: Optional[str] = None
    category: Category = DEFAULT_CATEGORY

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, v: str) -> str:
        v2 = normalize_title(v)
        if not v2:
            raise ValueError("title must not be blank")
        return v2

    # "unknown" is always None, never an empty string
    @field_validator("time", "venue")
    @classmethod
    def blank_is_absent(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        v2 = v.strip()
        return v2 or None


class Task(ExtractionResult):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., min_length=1)
    completed: bool = False
    # ISO-8601; serialized as "createdAt" for the UI
    created_at: str = Field(..., alias="createdAt")

