"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ParseRequest(BaseModel):
    path_data: str = Field(..., description="Path mini-language text, e.g. 'F1 M 0,0 L 10,10 Z'")
    trace: bool = Field(default=False, description="Return one line per drawing call")


class ValidateRequest(BaseModel):
    path_data: str = Field(..., description="Path mini-language text")
