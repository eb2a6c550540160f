"""Persisted holiday cache (holiday_records + holiday_cache_status)."""
from datetime import datetime
from typing import List, Optional

from sqlalchemy.orm import Session
from sqlalchemy.dialects import postgresql, sqlite

from src.calendar_bc.holiday.domain.entities import HolidayRecord
from src.calendar_bc.holiday.infrastructure.models import HolidayRecordModel, HolidayCacheStatusModel


def dialect_insert(session: Session, model):
    """INSERT construct supporting ON CONFLICT for the session's backend."""
    if session.get_bind().dialect.name == "postgresql":
        return postgresql.insert(model)
    return sqlite.insert(model)


class HolidayStore:
    """Reads and writes the persisted holiday cache through one session."""

    def __init__(self, db: Session):
        self.db = db

    def get_last_updated(self, country: str, year: int) -> Optional[datetime]:
        status = self.db.query(HolidayCacheStatusModel).filter(
            HolidayCacheStatusModel.country == country,
            HolidayCacheStatusModel.year == year,
        ).first()
        return status.last_updated if status else None

    def get_records(self, country: str, year: int) -> List[HolidayRecord]:
        rows = (
            self.db.query(HolidayRecordModel)
            .filter(
                HolidayRecordModel.country == country,
                HolidayRecordModel.year == year,
            )
            .order_by(HolidayRecordModel.date)
            .all()
        )
        return [
            HolidayRecord(
                country=row.country,
                year=row.year,
                date=row.date,
                name=row.name,
                is_public=bool(row.is_public),
            )
            for row in rows
        ]

    def replace_records(
        self,
        country: str,
        year: int,
        records: List[HolidayRecord],
        fetched_at: datetime,
    ) -> None:
        """Make the stored set for (country, year) equal to ``records``.

        Rows whose date is absent from ``records`` are removed, the rest are
        upserted by (country, date), and the cache status is stamped with
        ``fetched_at``. Everything is committed as one transaction.
        """
        dates = [r.date for r in records]

        stale = self.db.query(HolidayRecordModel).filter(
            HolidayRecordModel.country == country,
            HolidayRecordModel.year == year,
        )
        if dates:
            stale = stale.filter(~HolidayRecordModel.date.in_(dates))
        stale.delete(synchronize_session=False)

        if records:
            stmt = dialect_insert(self.db, HolidayRecordModel).values([
                {
                    "country": country,
                    "year": year,
                    "date": r.date,
                    "name": r.name,
                    "is_public": r.is_public,
                    "updated_at": fetched_at,
                }
                for r in records
            ])
            stmt = stmt.on_conflict_do_update(
                index_elements=["country", "date"],
                set_={
                    "year": stmt.excluded.year,
                    "name": stmt.excluded.name,
                    "is_public": stmt.excluded.is_public,
                    "updated_at": stmt.excluded.updated_at,
                },
            )
            self.db.execute(stmt)

        status_stmt = dialect_insert(self.db, HolidayCacheStatusModel).values(
            country=country,
            year=year,
            last_updated=fetched_at,
        )
        status_stmt = status_stmt.on_conflict_do_update(
            index_elements=["country", "year"],
            set_={"last_updated": status_stmt.excluded.last_updated},
        )
        self.db.execute(status_stmt)

        self.db.commit()
