"""Calendar event API endpoints."""
import datetime as dt
from typing import Dict, List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from core.database import get_db
from src.calendar_bc.event.domain.entities import EVENT_CATEGORIES
from src.calendar_bc.event.infrastructure.services import EventService
from adapters.http.api.calendar.schemas import (
    CreateEventRequest,
    CreateEventResponse,
    DeleteEventResponse,
    EventResponse,
    CategoryResponse,
)


router = APIRouter(tags=["Events"])


@router.post("/events", response_model=CreateEventResponse)
def create_event(payload: CreateEventRequest, db: Session = Depends(get_db)):
    """Attach a new event to a date."""
    event = EventService(db).add_event(
        date=payload.date.isoformat(),
        text=payload.text,
        category=payload.category,
        emoji=payload.emoji,
    )
    return CreateEventResponse(success=True, event=EventResponse(**event.to_dict()))


@router.get("/events/search", response_model=List[EventResponse])
def search_events(
    q: Optional[str] = Query(None, description="Text to search for (case-insensitive)"),
    category: Optional[str] = Query(None, description="Filter by category"),
    startDate: Optional[dt.date] = Query(None, description="Earliest date (inclusive)"),
    endDate: Optional[dt.date] = Query(None, description="Latest date (inclusive)"),
    db: Session = Depends(get_db),
):
    """Search events by text, newest first.

    Returns an empty list when no query text is given.
    """
    events = EventService(db).search(
        q,
        category=category,
        start_date=startDate.isoformat() if startDate else None,
        end_date=endDate.isoformat() if endDate else None,
    )
    return [EventResponse(**e.to_dict()) for e in events]


@router.get("/events/{date}", response_model=List[EventResponse])
def get_events(date: dt.date, db: Session = Depends(get_db)):
    """Get all events on a date."""
    events = EventService(db).get_events(date.isoformat())
    return [EventResponse(**e.to_dict()) for e in events]


@router.delete("/events/{date}/{event_id}", response_model=DeleteEventResponse)
def delete_event(date: dt.date, event_id: int, db: Session = Depends(get_db)):
    """Delete an event. Deleting an event that does not exist still succeeds."""
    deleted = EventService(db).delete_event(date.isoformat(), event_id)
    return DeleteEventResponse(success=True, deleted=deleted)


@router.get("/categories", response_model=Dict[str, CategoryResponse])
def get_categories():
    """Get the event categories with their icons and colors."""
    return {key: CategoryResponse(**value) for key, value in EVENT_CATEGORIES.items()}
