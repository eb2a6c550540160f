"""Tests for snapshot export, import and backup rotation."""

import base64
import json

import pytest

from src.calendar_bc.emoji.infrastructure.services import EmojiService
from src.calendar_bc.event.infrastructure.services import EventService
from src.calendar_bc.settings.infrastructure.services import SettingsService
from src.calendar_bc.snapshot.infrastructure.services import BACKUP_PREFIX, SnapshotError, SnapshotService


GIF_B64 = base64.b64encode(b"GIF89a-test-image").decode("ascii")


@pytest.fixture
def snapshots(db_session, backup_dir, clock):
    return SnapshotService(db_session, backup_dir=backup_dir, keep=3, clock=clock)


@pytest.fixture
def events(db_session):
    return EventService(db_session)


def snapshot_with(events):
    return {"events": events, "version": "1.0"}


class TestExport:

    def test_contains_all_sections(self, snapshots, events, db_session, clock):
        events.add_event("2025-03-01", "Climbing", category="health", emoji="🧗")
        EmojiService(db_session, max_bytes=1024).upload_emoji("party", "image/gif", GIF_B64)

        data = snapshots.export()

        assert data["version"] == "1.0"
        assert data["exportDate"] == clock.now.isoformat()
        assert list(data["events"]) == ["2025-03-01"]
        entry = data["events"]["2025-03-01"][0]
        assert entry["text"] == "Climbing"
        assert entry["category"] == "health"
        assert entry["emoji"] == "🧗"
        assert data["emojis"] == [{"name": "party", "content_type": "image/gif", "image_data": GIF_B64}]
        assert data["settings"] == {"country": "US"}

    def test_export_filename(self, snapshots):
        assert snapshots.export_filename() == "calendar_export_2025-06-01.json"


class TestBackups:

    def test_backup_is_valid_json(self, snapshots, events):
        events.add_event("2025-03-01", "Climbing")

        path = snapshots.create_backup()

        assert path.name.startswith(BACKUP_PREFIX)
        with open(path, encoding="utf-8") as f:
            assert json.load(f)["events"]["2025-03-01"][0]["text"] == "Climbing"

    def test_rotation_keeps_newest(self, snapshots, clock):
        names = []
        for _ in range(5):
            names.append(snapshots.create_backup().name)
            clock.advance(seconds=1)

        assert snapshots.list_backups() == list(reversed(names))[:3]

    def test_list_without_directory(self, snapshots):
        assert snapshots.list_backups() == []

    def test_unwritable_directory_raises(self, db_session, tmp_path, clock):
        blocker = tmp_path / "not-a-dir"
        blocker.write_text("x")
        service = SnapshotService(db_session, backup_dir=blocker / "backups", clock=clock)

        with pytest.raises(SnapshotError):
            service.create_backup()


class TestImport:

    def test_replace_mode_drops_existing(self, snapshots, events):
        events.add_event("2025-01-10", "Old note")

        result = snapshots.import_snapshot(snapshot_with({
            "2025-02-01": [{"text": "New note", "category": "work"}],
            "2025-02-02": [{"text": "Another"}, {"text": "Third", "category": "bogus"}],
        }), "replace")

        assert result.events_imported == 3
        assert result.backup_file is not None
        grouped = events.get_all_grouped()
        assert list(grouped) == ["2025-02-01", "2025-02-02"]
        assert [e.category for e in grouped["2025-02-02"]] == ["other", "other"]

    def test_merge_mode_keeps_existing(self, snapshots, events):
        events.add_event("2025-01-10", "Old note")

        result = snapshots.import_snapshot(snapshot_with({
            "2025-01-10": [{"text": "Imported"}],
        }), "merge")

        assert result.events_imported == 1
        assert [e.text for e in events.get_events("2025-01-10")] == ["Old note", "Imported"]

    def test_import_writes_backup_of_previous_state(self, snapshots, events):
        events.add_event("2025-01-10", "Before import")

        result = snapshots.import_snapshot(snapshot_with({}), "replace")

        with open(snapshots.backup_dir / result.backup_file, encoding="utf-8") as f:
            backup = json.load(f)
        assert backup["events"]["2025-01-10"][0]["text"] == "Before import"
        assert events.get_all_grouped() == {}

    def test_restores_emojis_and_settings(self, snapshots, db_session):
        result = snapshots.import_snapshot({
            "events": {},
            "emojis": [
                {"name": "party", "content_type": "image/gif", "image_data": GIF_B64},
                {"name": "broken", "content_type": "image/gif", "image_data": "***"},
            ],
            "settings": {"country": "de"},
        })

        assert result.emojis_restored == 1
        assert EmojiService(db_session, max_bytes=1024).get_emoji("party") is not None
        assert SettingsService(db_session, default_country="US").get_country() == "DE"

    def test_existing_emoji_is_not_overwritten(self, snapshots, db_session):
        emojis = EmojiService(db_session, max_bytes=1024)
        emojis.upload_emoji("party", "image/png", base64.b64encode(b"original").decode())

        result = snapshots.import_snapshot({
            "events": {},
            "emojis": [{"name": "party", "content_type": "image/gif", "image_data": GIF_B64}],
        })

        assert result.emojis_restored == 0
        assert emojis.get_emoji("party").data == b"original"

    @pytest.mark.parametrize("payload", [
        None,
        {},
        {"events": []},
        {"events": {"not-a-date": []}},
        {"events": {"2025-01-01": "text"}},
        {"events": {"2025-01-01": ["text"]}},
        {"events": {"2025-01-01": [{"text": "   "}]}},
    ])
    def test_invalid_data_is_rejected(self, snapshots, events, payload):
        events.add_event("2025-01-10", "Keep me")

        with pytest.raises(SnapshotError):
            snapshots.import_snapshot(payload)

        assert [e.text for e in events.get_events("2025-01-10")] == ["Keep me"]
        assert snapshots.list_backups() == []

    def test_type_malformed_fields_are_tolerated(self, snapshots, events, db_session):
        result = snapshots.import_snapshot({
            "events": {"2025-01-01": [
                {"text": "List category", "category": ["work"], "emoji": 7},
                {"text": "Dict category", "category": {"k": "v"}, "createdAt": 12345},
            ]},
            "emojis": [
                {"name": 5, "content_type": "image/gif", "image_data": GIF_B64},
                {"name": "typed", "content_type": ["image/gif"], "image_data": GIF_B64},
                {"name": "blob", "content_type": "image/gif", "image_data": 42},
                {"name": "party", "content_type": "image/gif", "image_data": GIF_B64},
            ],
        })

        assert result.events_imported == 2
        assert result.emojis_restored == 1
        imported = events.get_events("2025-01-01")
        assert [e.category for e in imported] == ["other", "other"]
        assert imported[0].emoji is None
        assert [e.name for e in EmojiService(db_session, max_bytes=1024).list_emojis()] == ["party"]

    def test_non_string_text_is_rejected(self, snapshots):
        with pytest.raises(SnapshotError):
            snapshots.import_snapshot(snapshot_with({"2025-01-01": [{"text": 5}]}))

    def test_unknown_merge_mode(self, snapshots):
        with pytest.raises(SnapshotError):
            snapshots.import_snapshot(snapshot_with({}), "append")

    def test_backup_failure_does_not_block_import(self, db_session, tmp_path, clock, events):
        blocker = tmp_path / "not-a-dir"
        blocker.write_text("x")
        service = SnapshotService(db_session, backup_dir=blocker / "backups", clock=clock)

        result = service.import_snapshot(snapshot_with({"2025-01-01": [{"text": "Hi"}]}))

        assert result.backup_file is None
        assert result.events_imported == 1
