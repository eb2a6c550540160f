"""JSON snapshots of user data: export, import and rotating backups.

Snapshot layout (version 1.0):

    {
      "events": {"YYYY-MM-DD": [{"id", "text", "category", "emoji", "createdAt"}, ...]},
      "emojis": [{"name", "content_type", "image_data"}],
      "settings": {"country": "US"},
      "exportDate": "<ISO timestamp>",
      "version": "1.0"
    }

Only "events" is required on import, so exports of the original
events-only format load as well.
"""
import base64
import json
import logging
from dataclasses import dataclass
from datetime import date, datetime
from pathlib import Path
from typing import Callable, List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from src.calendar_bc.event.domain.entities import CalendarEvent
from src.calendar_bc.event.infrastructure.services import EventService
from src.calendar_bc.emoji.infrastructure.services import EmojiService
from src.calendar_bc.settings.infrastructure.services import SettingsService, COUNTRY_SETTING

logger = logging.getLogger(__name__)

SNAPSHOT_VERSION = "1.0"
BACKUP_PREFIX = "events_backup_"
MERGE_MODES = ("replace", "merge")


class SnapshotError(Exception):
    """A snapshot could not be read, applied or written."""


@dataclass
class ImportResult:
    events_imported: int
    emojis_restored: int
    backup_file: Optional[str]


class SnapshotService:
    """Builds, applies and backs up data snapshots."""

    def __init__(
        self,
        db: Session,
        backup_dir: Path,
        keep: int = 10,
        emoji_max_bytes: int = 256 * 1024,
        default_country: str = "US",
        clock: Callable[[], datetime] = datetime.utcnow,
    ):
        self.db = db
        self.backup_dir = Path(backup_dir)
        self.keep = keep
        self._clock = clock
        self.events = EventService(db)
        self.emojis = EmojiService(db, max_bytes=emoji_max_bytes)
        self.settings = SettingsService(db, default_country=default_country)

    # ------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------

    def export(self) -> dict:
        events = {
            day: [
                {
                    "id": e.id,
                    "text": e.text,
                    "category": e.category,
                    "emoji": e.emoji,
                    "createdAt": e.created_at.isoformat() if e.created_at else None,
                }
                for e in day_events
            ]
            for day, day_events in self.events.get_all_grouped().items()
        }
        emojis = [
            {
                "name": e.name,
                "content_type": e.content_type,
                "image_data": base64.b64encode(e.data).decode("ascii"),
            }
            for e in self.emojis.list_emojis()
        ]
        return {
            "events": events,
            "emojis": emojis,
            "settings": self.settings.get_all(),
            "exportDate": self._clock().isoformat(),
            "version": SNAPSHOT_VERSION,
        }

    def export_filename(self) -> str:
        return f"calendar_export_{self._clock().strftime('%Y-%m-%d')}.json"

    # ------------------------------------------------------------------
    # Backups
    # ------------------------------------------------------------------

    def create_backup(self) -> Path:
        """Write the current snapshot to the backup directory and rotate old ones."""
        timestamp = self._clock().strftime("%Y-%m-%d_%H-%M-%S-%f")
        backup_file = self.backup_dir / f"{BACKUP_PREFIX}{timestamp}.json"
        try:
            self.backup_dir.mkdir(parents=True, exist_ok=True)
            with open(backup_file, "w", encoding="utf-8") as f:
                json.dump(self.export(), f, indent=2, ensure_ascii=False)
            self._rotate_backups()
        except OSError as e:
            raise SnapshotError(f"Backup failed: {e}") from e

        logger.info(f"Backup written to {backup_file}")
        return backup_file

    def list_backups(self) -> List[str]:
        """Backup file names, newest first."""
        if not self.backup_dir.exists():
            return []
        return sorted(
            (p.name for p in self.backup_dir.iterdir() if p.name.startswith(BACKUP_PREFIX)),
            reverse=True,
        )

    def _rotate_backups(self) -> None:
        for name in self.list_backups()[self.keep:]:
            (self.backup_dir / name).unlink()
            logger.debug(f"Removed old backup {name}")

    # ------------------------------------------------------------------
    # Import
    # ------------------------------------------------------------------

    def import_snapshot(self, import_data: Optional[dict], merge_mode: str = "replace") -> ImportResult:
        if merge_mode not in MERGE_MODES:
            raise SnapshotError(f"Unknown merge mode: {merge_mode}")
        if not isinstance(import_data, dict) or not isinstance(import_data.get("events"), dict):
            raise SnapshotError("Invalid import data: missing events")

        events = self._parse_events(import_data["events"])

        # Back up before touching anything; a failed backup does not block the import
        backup_name = None
        try:
            backup_name = self.create_backup().name
        except SnapshotError as e:
            logger.warning(f"Importing without backup: {e}")

        try:
            if merge_mode == "replace":
                imported = self.events.replace_all(events)
            else:
                imported = self.events.append(events)

            restored = 0
            emojis = import_data.get("emojis")
            if isinstance(emojis, list):
                restored = self.emojis.restore([e for e in emojis if isinstance(e, dict)])

            self._apply_settings(import_data.get("settings"))
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise SnapshotError(f"Saving imported data failed: {e}") from e

        logger.info(f"Imported {imported} events ({merge_mode}), restored {restored} emojis")
        return ImportResult(events_imported=imported, emojis_restored=restored, backup_file=backup_name)

    @staticmethod
    def _parse_events(raw_events: dict) -> List[CalendarEvent]:
        events: List[CalendarEvent] = []
        for day, entries in raw_events.items():
            try:
                day = date.fromisoformat(day).isoformat()
            except (TypeError, ValueError) as e:
                raise SnapshotError(f"Invalid event date: {day!r}") from e
            if not isinstance(entries, list):
                raise SnapshotError(f"Events for {day} must be a list")
            for entry in entries:
                if not isinstance(entry, dict):
                    raise SnapshotError(f"Invalid event entry on {day}")
                try:
                    events.append(CalendarEvent.from_snapshot_json(day, entry))
                except ValueError as e:
                    raise SnapshotError(str(e)) from e
        return events

    def _apply_settings(self, raw_settings) -> None:
        if not isinstance(raw_settings, dict):
            return
        country = raw_settings.get(COUNTRY_SETTING)
        if isinstance(country, str) and len(country) == 2 and country.isalpha():
            self.settings.set(COUNTRY_SETTING, country.upper())
