"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class LoadScenarioRequest(BaseModel):
    text: str = Field(..., description="Raw scenario file contents")
