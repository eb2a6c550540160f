"""Holiday-related request/response schemas."""

from typing import Optional
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field


class HolidayResponse(BaseModel):
    country: str
    year: int
    date: str
    name: str
    is_public: bool

    model_config = ConfigDict(from_attributes=True)


class RefreshHolidaysRequest(BaseModel):
    country: str = Field(..., min_length=1, max_length=8, description="ISO country code, e.g. US")
    year: int = Field(..., ge=1, le=9999)


class RefreshHolidaysResponse(BaseModel):
    success: bool
    count: int = 0
    message: Optional[str] = None
    error: Optional[str] = None


class HolidayCacheStatusResponse(BaseModel):
    country: str
    year: int
    last_updated: Optional[datetime]
    is_stale: bool
    memory_cached: bool
    provider: str
