import logging
from collections import defaultdict
from typing import Dict, Iterable, List, Optional

from sqlalchemy.orm import Session

from src.calendar_bc.event.domain.entities import CalendarEvent, DEFAULT_CATEGORY
from src.calendar_bc.event.infrastructure.models import CalendarEventModel

logger = logging.getLogger(__name__)


def _to_entity(model: CalendarEventModel) -> CalendarEvent:
    return CalendarEvent(
        id=model.id,
        date=model.date,
        text=model.text,
        category=model.category,
        emoji=model.emoji,
        created_at=model.created_at,
    )


class EventService:
    """CRUD and search over calendar events."""

    def __init__(self, db: Session):
        self.db = db

    def add_event(
        self,
        date: str,
        text: str,
        category: str = DEFAULT_CATEGORY,
        emoji: Optional[str] = None,
    ) -> CalendarEvent:
        model = CalendarEventModel(date=date, text=text, category=category, emoji=emoji)
        self.db.add(model)
        self.db.commit()
        self.db.refresh(model)
        logger.info(f"Added event {model.id} on {date}")
        return _to_entity(model)

    def get_events(self, date: str) -> List[CalendarEvent]:
        rows = (
            self.db.query(CalendarEventModel)
            .filter(CalendarEventModel.date == date)
            .order_by(CalendarEventModel.created_at, CalendarEventModel.id)
            .all()
        )
        return [_to_entity(r) for r in rows]

    def get_events_between(self, start_date: str, end_date: str) -> Dict[str, List[CalendarEvent]]:
        """Events grouped by date for an inclusive date range."""
        rows = (
            self.db.query(CalendarEventModel)
            .filter(
                CalendarEventModel.date >= start_date,
                CalendarEventModel.date <= end_date,
            )
            .order_by(CalendarEventModel.date, CalendarEventModel.created_at, CalendarEventModel.id)
            .all()
        )
        grouped: Dict[str, List[CalendarEvent]] = defaultdict(list)
        for row in rows:
            grouped[row.date].append(_to_entity(row))
        return dict(grouped)

    def get_all_grouped(self) -> Dict[str, List[CalendarEvent]]:
        rows = (
            self.db.query(CalendarEventModel)
            .order_by(CalendarEventModel.date, CalendarEventModel.created_at, CalendarEventModel.id)
            .all()
        )
        grouped: Dict[str, List[CalendarEvent]] = defaultdict(list)
        for row in rows:
            grouped[row.date].append(_to_entity(row))
        return dict(grouped)

    def delete_event(self, date: str, event_id: int) -> bool:
        """Delete one event. Returns False when nothing matched."""
        deleted = (
            self.db.query(CalendarEventModel)
            .filter(CalendarEventModel.date == date, CalendarEventModel.id == event_id)
            .delete(synchronize_session=False)
        )
        self.db.commit()
        if deleted:
            logger.info(f"Deleted event {event_id} on {date}")
        return bool(deleted)

    def search(
        self,
        q: Optional[str],
        category: Optional[str] = None,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
    ) -> List[CalendarEvent]:
        """Case-insensitive text search, newest date first.

        An empty query returns no results rather than every event.
        """
        if not q:
            return []

        query = self.db.query(CalendarEventModel)
        if category:
            query = query.filter(CalendarEventModel.category == category)
        if start_date:
            query = query.filter(CalendarEventModel.date >= start_date)
        if end_date:
            query = query.filter(CalendarEventModel.date <= end_date)

        term = q.lower()
        # casefold in Python: SQLite LOWER() only folds ASCII
        matches = [row for row in query.all() if term in row.text.lower()]
        matches.sort(key=lambda row: (row.date, row.created_at, row.id), reverse=True)
        return [_to_entity(r) for r in matches]

    def replace_all(self, events: Iterable[CalendarEvent]) -> int:
        """Drop every stored event and insert ``events`` (no commit)."""
        self.db.query(CalendarEventModel).delete(synchronize_session=False)
        return self.append(events)

    def append(self, events: Iterable[CalendarEvent]) -> int:
        """Insert ``events`` alongside the existing ones (no commit)."""
        count = 0
        for event in events:
            self.db.add(CalendarEventModel(
                date=event.date,
                text=event.text,
                category=event.category,
                emoji=event.emoji,
                created_at=event.created_at,
            ))
            count += 1
        return count
