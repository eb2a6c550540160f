from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


DEFAULT_CATEGORY = "other"

# key -> (display name, icon, color)
EVENT_CATEGORIES = {
    "work": {"name": "Work", "icon": "💼", "color": "#FF6B6B"},
    "life": {"name": "Life", "icon": "🏠", "color": "#4ECDC4"},
    "study": {"name": "Study", "icon": "📚", "color": "#45B7D1"},
    "entertainment": {"name": "Entertainment", "icon": "🎮", "color": "#96CEB4"},
    "health": {"name": "Health", "icon": "💪", "color": "#FECA57"},
    "social": {"name": "Social", "icon": "👥", "color": "#FF9FF3"},
    "travel": {"name": "Travel", "icon": "✈️", "color": "#54A0FF"},
    "other": {"name": "Other", "icon": "📝", "color": "#5F27CD"},
}


@dataclass
class CalendarEvent:
    """A short note attached to a calendar date."""
    date: str  # YYYY-MM-DD
    text: str
    category: str = DEFAULT_CATEGORY
    emoji: Optional[str] = None
    id: Optional[int] = None
    created_at: datetime = field(default_factory=datetime.utcnow)

    @classmethod
    def from_snapshot_json(cls, date: str, entry: dict) -> "CalendarEvent":
        """Create CalendarEvent from an exported snapshot entry.

        Unknown categories fall back to the default one; ids are not kept
        because imported events get fresh ones.
        """
        text = entry.get("text")
        if not isinstance(text, str) or not text.strip():
            raise ValueError(f"Event on {date} has no text")

        category = entry.get("category")
        if not isinstance(category, str) or category not in EVENT_CATEGORIES:
            category = DEFAULT_CATEGORY

        emoji = entry.get("emoji")
        if not isinstance(emoji, str) or not emoji or len(emoji) > 64:
            emoji = None

        created_at = datetime.utcnow()
        raw_created = entry.get("createdAt") or entry.get("created_at")
        if isinstance(raw_created, str):
            try:
                created_at = datetime.fromisoformat(raw_created.replace("Z", "+00:00")).replace(tzinfo=None)
            except ValueError:
                pass

        return cls(
            date=date,
            text=text,
            category=category,
            emoji=emoji,
            created_at=created_at,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "date": self.date,
            "text": self.text,
            "category": self.category,
            "emoji": self.emoji,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
