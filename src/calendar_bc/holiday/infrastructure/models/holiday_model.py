from datetime import datetime
from sqlalchemy import Column, String, Integer, Boolean, DateTime, Index, UniqueConstraint
from core.base import Base


class HolidayRecordModel(Base):
    """SQLAlchemy model for cached holidays.

    One row per (country, date). Rows for a (country, year) pair are replaced
    as a whole each time the provider is fetched successfully.
    """

    __tablename__ = "holiday_records"

    id = Column(Integer, primary_key=True, autoincrement=True)
    country = Column(String(8), nullable=False)
    year = Column(Integer, nullable=False)
    date = Column(String(10), nullable=False)  # YYYY-MM-DD
    name = Column(String(200), nullable=False)
    is_public = Column(Boolean, nullable=False, default=True)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    __table_args__ = (
        UniqueConstraint("country", "date", name="uq_holiday_records_country_date"),
        Index("ix_holiday_records_country_year", "country", "year"),
    )

    def __repr__(self):
        return f"<Holiday {self.country} {self.date}: {self.name}>"


class HolidayCacheStatusModel(Base):
    """Last successful provider fetch per (country, year)."""

    __tablename__ = "holiday_cache_status"

    id = Column(Integer, primary_key=True, autoincrement=True)
    country = Column(String(8), nullable=False)
    year = Column(Integer, nullable=False)
    last_updated = Column(DateTime, nullable=False)

    __table_args__ = (
        UniqueConstraint("country", "year", name="uq_holiday_cache_status_country_year"),
    )

    def __repr__(self):
        return f"<HolidayCacheStatus {self.country}/{self.year} @ {self.last_updated}>"
