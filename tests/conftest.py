"""Pytest configuration and fixtures."""

import os
import tempfile

# Settings are read at import time: point them at an in-memory database first
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["ENVIRONMENT"] = "test"
os.environ["DATA_DIR"] = tempfile.mkdtemp(prefix="calendar-test-")

from datetime import datetime, timedelta
from typing import List

import pytest
from fastapi import Depends
from fastapi.testclient import TestClient

import models  # noqa: F401
from core.base import Base
from core.database import engine, SessionLocal, get_db
from src.calendar_bc.holiday.domain.entities import HolidayRecord
from src.calendar_bc.holiday.infrastructure.services import (
    HolidayCacheManager,
    HolidayProvider,
    HolidayProviderError,
)
from src.calendar_bc.snapshot.infrastructure.services import SnapshotService


class FakeClock:
    """Controllable replacement for datetime.utcnow."""

    def __init__(self, start: datetime = datetime(2025, 6, 1, 12, 0, 0)):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now = self.now + timedelta(**kwargs)


class FakeHolidayProvider(HolidayProvider):
    """Provider returning canned holidays and counting calls."""

    name = "fake"

    def __init__(self):
        self.calls = 0
        self.fail = False
        self.entries = {}  # (country, year) -> list of (date, name)

    def set(self, country: str, year: int, entries) -> None:
        self.entries[(country, year)] = list(entries)

    def fetch(self, country: str, year: int) -> List[HolidayRecord]:
        self.calls += 1
        if self.fail:
            raise HolidayProviderError("provider down")
        return [
            HolidayRecord(country=country, year=year, date=day, name=name)
            for day, name in self.entries.get((country, year), [])
        ]


@pytest.fixture(autouse=True)
def reset_database():
    """Fresh tables for every test."""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def db_session():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def provider():
    return FakeHolidayProvider()


@pytest.fixture
def holiday_manager(provider, clock):
    return HolidayCacheManager(provider=provider, session_factory=SessionLocal, clock=clock)


@pytest.fixture
def backup_dir(tmp_path):
    return tmp_path / "backups"


@pytest.fixture
def client(holiday_manager, backup_dir):
    """Test client with the fake holiday provider and a temporary backup directory."""
    from app import create_app
    from adapters.http.api.calendar.dependencies import get_snapshot_service

    app = create_app()
    app.state.holiday_manager = holiday_manager

    def snapshot_service(db=Depends(get_db)):
        return SnapshotService(db, backup_dir=backup_dir, keep=3)

    app.dependency_overrides[get_snapshot_service] = snapshot_service

    with TestClient(app) as c:
        yield c


@pytest.fixture
def api_base_url():
    """Base URL for calendar API endpoints."""
    return "/api/v1"
