"""Holiday cache manager.

Resolves "holidays for country X, year Y" through a fixed sequence of
attempts, each returning a result or None:

    memory -> persisted (if fresh) -> remote (then persist) -> persisted (stale) -> []

The memory cache belongs to the manager instance, which the application
builds once at startup, so cached lists live for the process lifetime.
"""
import logging
import threading
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Callable, Dict, List, Optional, Tuple

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from src.calendar_bc.holiday.domain.entities import HolidayRecord
from src.calendar_bc.holiday.infrastructure.services.holiday_provider import (
    HolidayProvider,
    HolidayProviderError,
)
from src.calendar_bc.holiday.infrastructure.services.holiday_store import HolidayStore

logger = logging.getLogger(__name__)

STALE_AFTER = timedelta(hours=24)


class HolidayMemoryCache:
    """In-process holiday lists keyed by "COUNTRY_YEAR"."""

    def __init__(self):
        self._entries: Dict[str, List[HolidayRecord]] = {}
        self._lock = threading.Lock()

    @staticmethod
    def key(country: str, year: int) -> str:
        return f"{country}_{year}"

    def get(self, country: str, year: int) -> Optional[List[HolidayRecord]]:
        with self._lock:
            entry = self._entries.get(self.key(country, year))
        return list(entry) if entry is not None else None

    def put(self, country: str, year: int, records: List[HolidayRecord]) -> List[HolidayRecord]:
        with self._lock:
            self._entries[self.key(country, year)] = list(records)
        return list(records)

    def invalidate(self, country: str, year: int) -> None:
        with self._lock:
            self._entries.pop(self.key(country, year), None)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __contains__(self, key: str) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


@dataclass
class RefreshOutcome:
    """Result of a forced refresh."""
    count: int
    from_remote: bool

    def to_dict(self) -> dict:
        return {"count": self.count}


@dataclass
class HolidayCacheStatus:
    country: str
    year: int
    last_updated: Optional[datetime]
    is_stale: bool
    memory_cached: bool


class HolidayCacheManager:
    """Serves holiday lists from memory, the persisted store or the provider."""

    def __init__(
        self,
        provider: HolidayProvider,
        session_factory: Callable[[], Session],
        memory_cache: Optional[HolidayMemoryCache] = None,
        stale_after: timedelta = STALE_AFTER,
        clock: Callable[[], datetime] = datetime.utcnow,
    ):
        self.provider = provider
        self.session_factory = session_factory
        self.memory = memory_cache if memory_cache is not None else HolidayMemoryCache()
        self.stale_after = stale_after
        self._clock = clock
        self._key_locks: Dict[str, threading.Lock] = {}
        self._key_locks_guard = threading.Lock()

    def get_holidays(self, country: str, year: int, force_refresh: bool = False) -> List[HolidayRecord]:
        """Return the holidays for (country, year). Never raises for provider or store failures."""
        records, _ = self._resolve(country.upper(), year, force_refresh)
        return records

    def refresh_holidays(self, country: str, year: int) -> RefreshOutcome:
        """Bypass every cache layer and hit the provider once."""
        records, from_remote = self._resolve(country.upper(), year, force_refresh=True)
        return RefreshOutcome(count=len(records), from_remote=from_remote)

    def cache_status(self, country: str, year: int) -> HolidayCacheStatus:
        country = country.upper()
        last_updated = None
        db = self.session_factory()
        try:
            last_updated = HolidayStore(db).get_last_updated(country, year)
        except SQLAlchemyError as e:
            logger.warning(f"Could not read holiday cache status for {country}/{year}: {e}")
        finally:
            db.close()

        return HolidayCacheStatus(
            country=country,
            year=year,
            last_updated=last_updated,
            is_stale=not self._is_fresh(last_updated),
            memory_cached=HolidayMemoryCache.key(country, year) in self.memory,
        )

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------

    def _resolve(self, country: str, year: int, force_refresh: bool) -> Tuple[List[HolidayRecord], bool]:
        # Same-key callers queue here; the first one populates memory for the rest
        with self._lock_for(HolidayMemoryCache.key(country, year)):
            if not force_refresh:
                cached = self.memory.get(country, year)
                if cached is not None:
                    return cached, False

                fresh = self._from_store_if_fresh(country, year)
                if fresh is not None:
                    return self.memory.put(country, year, fresh), False

            fetched = self._from_remote(country, year)
            if fetched is not None:
                self._persist(country, year, fetched)
                return self.memory.put(country, year, fetched), True

            fallback = self._from_store(country, year)
            if fallback:
                logger.info(f"Serving {len(fallback)} cached holidays for {country}/{year} (provider unavailable)")
                return self.memory.put(country, year, fallback), False

            # Nothing to serve: drop any older list so lookups agree with this result
            self.memory.invalidate(country, year)
            logger.warning(f"No holidays available for {country}/{year}")
            return [], False

    def _from_store_if_fresh(self, country: str, year: int) -> Optional[List[HolidayRecord]]:
        """Persisted records when the pair was fetched within the staleness window.

        An empty persisted set is not a valid fresh answer and yields None.
        """
        db = self.session_factory()
        try:
            store = HolidayStore(db)
            if not self._is_fresh(store.get_last_updated(country, year)):
                return None
            return store.get_records(country, year) or None
        except SQLAlchemyError as e:
            logger.warning(f"Holiday store read failed for {country}/{year}: {e}")
            return None
        finally:
            db.close()

    def _from_remote(self, country: str, year: int) -> Optional[List[HolidayRecord]]:
        try:
            return self.provider.fetch(country, year)
        except HolidayProviderError as e:
            logger.warning(f"Holiday provider '{self.provider.name}' unavailable for {country}/{year}: {e}")
        except Exception as e:
            logger.exception(f"Unexpected holiday provider error for {country}/{year}: {e}")
        return None

    def _from_store(self, country: str, year: int) -> List[HolidayRecord]:
        db = self.session_factory()
        try:
            return HolidayStore(db).get_records(country, year)
        except SQLAlchemyError as e:
            logger.warning(f"Holiday store read failed for {country}/{year}: {e}")
            return []
        finally:
            db.close()

    def _persist(self, country: str, year: int, records: List[HolidayRecord]) -> None:
        db = self.session_factory()
        try:
            HolidayStore(db).replace_records(country, year, records, fetched_at=self._clock())
            logger.info(f"Cached {len(records)} holidays for {country}/{year}")
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Failed to persist holidays for {country}/{year}: {e}")
        finally:
            db.close()

    def _is_fresh(self, last_updated: Optional[datetime]) -> bool:
        if last_updated is None:
            return False
        return self._clock() - last_updated < self.stale_after

    def _lock_for(self, key: str) -> threading.Lock:
        with self._key_locks_guard:
            lock = self._key_locks.get(key)
            if lock is None:
                lock = self._key_locks[key] = threading.Lock()
            return lock
