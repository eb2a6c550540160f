"""User settings schemas."""

from typing import Optional
from pydantic import BaseModel, Field


class SettingsResponse(BaseModel):
    country: str


class UpdateSettingsRequest(BaseModel):
    country: Optional[str] = Field(None, description="Two-letter ISO country code for holiday overlays")
