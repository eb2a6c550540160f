from datetime import datetime
from sqlalchemy import Column, String, Integer, DateTime, LargeBinary
from core.base import Base


class CustomEmojiModel(Base):
    """SQLAlchemy model for user-uploaded emoji images."""

    __tablename__ = "custom_emojis"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(32), nullable=False, unique=True)
    content_type = Column(String(32), nullable=False)
    data = Column(LargeBinary, nullable=False)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)

    @property
    def size(self) -> int:
        return len(self.data) if self.data else 0

    def __repr__(self):
        return f"<CustomEmoji :{self.name}: ({self.content_type}, {self.size} bytes)>"
