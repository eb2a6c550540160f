"""Tests for user settings."""

import pytest

from src.calendar_bc.settings.infrastructure.services import COUNTRY_SETTING, SettingsService


@pytest.fixture
def service(db_session):
    return SettingsService(db_session, default_country="us")


def test_defaults(service):
    assert service.get_country() == "US"
    assert service.get_all() == {COUNTRY_SETTING: "US"}
    assert service.get("missing") is None


def test_set_country(service, db_session):
    assert service.set_country("de") == "DE"

    assert SettingsService(db_session, default_country="US").get_country() == "DE"
    assert service.get_all() == {COUNTRY_SETTING: "DE"}


@pytest.mark.parametrize("country", ["", "D", "DEU", "1A", None])
def test_invalid_country(service, country):
    with pytest.raises(ValueError):
        service.set_country(country)

    assert service.get_country() == "US"
