from datetime import datetime
from sqlalchemy import Column, String, Integer, DateTime, Text
from core.base import Base


class CalendarEventModel(Base):
    """SQLAlchemy model for user calendar events."""

    __tablename__ = "calendar_events"

    id = Column(Integer, primary_key=True, autoincrement=True)
    date = Column(String(10), nullable=False, index=True)  # YYYY-MM-DD
    text = Column(Text, nullable=False)
    category = Column(String(20), nullable=False, default="other")
    emoji = Column(String(64), nullable=True)  # unicode emoji or custom emoji name
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)

    def __repr__(self):
        return f"<CalendarEvent {self.id} {self.date}: {self.text[:30]}>"
