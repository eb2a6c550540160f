"""Holiday data providers.

Every provider returns the complete holiday list for a (country, year) pair
or raises HolidayProviderError. Network errors, timeouts, HTTP error statuses
and malformed payloads all surface as that single exception type so callers
can treat them uniformly as "remote unavailable".
"""
import logging
from abc import ABC, abstractmethod
from typing import Dict, List, Optional

import httpx
import holidays as holidays_lib

from src.calendar_bc.holiday.domain.entities import HolidayRecord

logger = logging.getLogger(__name__)


class HolidayProviderError(Exception):
    """The holiday provider could not deliver a usable holiday list."""


def collapse_duplicate_dates(records: List[HolidayRecord]) -> List[HolidayRecord]:
    """Merge records sharing a date into one record, sorted by date.

    Holidays are stored one row per (country, date), so two provider entries
    on the same day are joined ("A / B") and count as public if either is.
    """
    by_date: Dict[str, HolidayRecord] = {}
    for record in records:
        existing = by_date.get(record.date)
        if existing is None:
            by_date[record.date] = record
            continue
        names = existing.name.split(" / ")
        name = existing.name if record.name in names else f"{existing.name} / {record.name}"
        by_date[record.date] = HolidayRecord(
            country=existing.country,
            year=existing.year,
            date=existing.date,
            name=name,
            is_public=existing.is_public or record.is_public,
        )
    return [by_date[d] for d in sorted(by_date)]


class HolidayProvider(ABC):
    """Source of holiday data for a country and year."""

    name = "base"

    @abstractmethod
    def fetch(self, country: str, year: int) -> List[HolidayRecord]:
        """Fetch all holidays for the pair. Raises HolidayProviderError."""
        pass


class NagerDateProvider(HolidayProvider):
    """Holidays from the public Nager.Date API."""

    name = "nager"

    DEFAULT_URL = "https://date.nager.at/api/v3/PublicHolidays/{year}/{country}"

    def __init__(
        self,
        url_template: str = DEFAULT_URL,
        timeout: float = 10.0,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.url_template = url_template
        self.timeout = timeout
        self._transport = transport

    def fetch(self, country: str, year: int) -> List[HolidayRecord]:
        url = self.url_template.format(year=year, country=country)
        try:
            with httpx.Client(timeout=self.timeout, transport=self._transport) as client:
                response = client.get(url)
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPError as e:
            raise HolidayProviderError(f"HTTP error fetching holidays for {country}/{year}: {e}") from e
        except ValueError as e:
            # Empty body (Nager answers 204 for unknown countries) or invalid JSON
            raise HolidayProviderError(f"Invalid JSON from holiday provider for {country}/{year}") from e

        if not isinstance(data, list):
            raise HolidayProviderError(
                f"Unexpected holiday payload for {country}/{year}: {type(data).__name__}"
            )

        try:
            records = [HolidayRecord.from_provider_json(entry, country, year) for entry in data]
        except (AttributeError, TypeError, ValueError) as e:
            raise HolidayProviderError(str(e)) from e

        logger.info(f"Fetched {len(records)} holidays for {country}/{year} from Nager.Date")
        return collapse_duplicate_dates(records)


class LocalHolidaysProvider(HolidayProvider):
    """Holidays computed offline by the python-holidays library."""

    name = "local"

    def fetch(self, country: str, year: int) -> List[HolidayRecord]:
        try:
            country_holidays = holidays_lib.country_holidays(country, years=year)
        except NotImplementedError as e:
            raise HolidayProviderError(f"Country {country} is not supported by python-holidays") from e

        records = [
            HolidayRecord(
                country=country,
                year=year,
                date=day.isoformat(),
                name=name,
                is_public=True,
            )
            for day, name in sorted(country_holidays.items())
        ]
        return collapse_duplicate_dates(records)


def build_holiday_provider(settings) -> HolidayProvider:
    """Create the provider selected by HOLIDAY_PROVIDER."""
    if settings.HOLIDAY_PROVIDER == "local":
        return LocalHolidaysProvider()
    return NagerDateProvider(
        url_template=settings.HOLIDAY_API_URL,
        timeout=settings.HOLIDAY_FETCH_TIMEOUT,
    )
