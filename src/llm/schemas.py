from __future__ import annotations
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

class RemoteExtractionPayload(BaseModel):
    """Shape the service is instructed to return; category is checked separately."""

    model_config = ConfigDict(extra="ignore")

    title: str = Field(..., min_length=1)
    # required but nullable: the key must be present
    time: Optional[str] = Field(...)
    venue: Optional[str] = Field(...)
    category: str
