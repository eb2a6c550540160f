"""Event-related request/response schemas."""

import datetime as dt
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.calendar_bc.event.domain.entities import EVENT_CATEGORIES, DEFAULT_CATEGORY


class CreateEventRequest(BaseModel):
    date: dt.date
    text: str = Field(..., min_length=1, max_length=500)
    category: str = DEFAULT_CATEGORY
    emoji: Optional[str] = Field(None, max_length=64)

    @field_validator("text")
    @classmethod
    def text_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("text must not be blank")
        return v

    @field_validator("category")
    @classmethod
    def known_category(cls, v: str) -> str:
        if v not in EVENT_CATEGORIES:
            raise ValueError(f"unknown category '{v}'")
        return v


class EventResponse(BaseModel):
    id: int
    date: str
    text: str
    category: str
    emoji: Optional[str] = None
    created_at: dt.datetime

    model_config = ConfigDict(from_attributes=True)


class CreateEventResponse(BaseModel):
    success: bool
    event: Optional[EventResponse] = None


class DeleteEventResponse(BaseModel):
    success: bool
    deleted: bool


class CategoryResponse(BaseModel):
    name: str
    icon: str
    color: str
