"""Tests for EventService."""

import pytest

from src.calendar_bc.event.domain.entities import CalendarEvent
from src.calendar_bc.event.infrastructure.services import EventService


@pytest.fixture
def service(db_session):
    return EventService(db_session)


def test_add_and_get(service):
    created = service.add_event("2025-05-01", "Gym", category="health", emoji="💪")

    events = service.get_events("2025-05-01")

    assert created.id is not None
    assert [e.id for e in events] == [created.id]
    assert events[0].category == "health"
    assert service.get_events("2025-05-02") == []


def test_get_events_between_groups_by_date(service):
    service.add_event("2025-04-30", "Before")
    service.add_event("2025-05-01", "First")
    service.add_event("2025-05-01", "Second")
    service.add_event("2025-05-31", "Last")
    service.add_event("2025-06-01", "After")

    grouped = service.get_events_between("2025-05-01", "2025-05-31")

    assert list(grouped) == ["2025-05-01", "2025-05-31"]
    assert [e.text for e in grouped["2025-05-01"]] == ["First", "Second"]


def test_delete_event(service):
    event = service.add_event("2025-05-01", "Gym")

    assert service.delete_event("2025-05-02", event.id) is False
    assert service.delete_event("2025-05-01", event.id) is True
    assert service.delete_event("2025-05-01", event.id) is False
    assert service.get_events("2025-05-01") == []


class TestSearch:

    def test_empty_query_returns_nothing(self, service):
        service.add_event("2025-05-01", "Gym")

        assert service.search("") == []
        assert service.search(None) == []

    def test_case_insensitive_newest_first(self, service):
        service.add_event("2025-01-01", "Morning RUN")
        service.add_event("2025-03-01", "evening run")
        service.add_event("2025-02-01", "Read a book")

        results = service.search("Run")

        assert [e.date for e in results] == ["2025-03-01", "2025-01-01"]

    def test_non_ascii_text(self, service):
        service.add_event("2025-01-01", "Ärztetermin")

        assert len(service.search("ärzte")) == 1

    def test_filters(self, service):
        service.add_event("2025-01-01", "Run", category="health")
        service.add_event("2025-02-01", "Run for the bus", category="life")
        service.add_event("2025-03-01", "Run", category="health")

        assert [e.date for e in service.search("run", category="health")] == ["2025-03-01", "2025-01-01"]
        assert [e.date for e in service.search("run", start_date="2025-01-15", end_date="2025-02-15")] == ["2025-02-01"]


def test_replace_all_and_append_do_not_commit(service, db_session):
    service.add_event("2025-01-01", "Old")

    assert service.replace_all([CalendarEvent(date="2025-02-01", text="New")]) == 1
    db_session.rollback()

    assert [e.text for e in service.get_events("2025-01-01")] == ["Old"]
    assert service.get_events("2025-02-01") == []


class TestCalendarEventFromSnapshot:

    def test_parses_created_at(self):
        event = CalendarEvent.from_snapshot_json("2025-01-01", {
            "text": "Hi", "createdAt": "2025-01-01T10:30:00.000Z", "id": 99,
        })

        assert event.created_at.hour == 10
        assert event.id is None

    def test_missing_text_raises(self):
        with pytest.raises(ValueError):
            CalendarEvent.from_snapshot_json("2025-01-01", {"category": "work"})
