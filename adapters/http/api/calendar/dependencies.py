"""FastAPI dependencies shared by the calendar routers."""

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from core.config import settings
from core.database import get_db
from src.calendar_bc.holiday.infrastructure.services import HolidayCacheManager
from src.calendar_bc.emoji.infrastructure.services import EmojiService
from src.calendar_bc.settings.infrastructure.services import SettingsService
from src.calendar_bc.snapshot.infrastructure.services import SnapshotService


def get_holiday_manager(request: Request) -> HolidayCacheManager:
    """The process-wide holiday manager built in the application lifespan."""
    return request.app.state.holiday_manager


def get_settings_service(db: Session = Depends(get_db)) -> SettingsService:
    return SettingsService(db, default_country=settings.DEFAULT_COUNTRY)


def get_emoji_service(db: Session = Depends(get_db)) -> EmojiService:
    return EmojiService(db, max_bytes=settings.EMOJI_MAX_BYTES)


def get_snapshot_service(db: Session = Depends(get_db)) -> SnapshotService:
    return SnapshotService(
        db,
        backup_dir=settings.backup_path,
        keep=settings.BACKUP_KEEP,
        emoji_max_bytes=settings.EMOJI_MAX_BYTES,
        default_country=settings.DEFAULT_COUNTRY,
    )
