from dataclasses import dataclass
from datetime import date as dt_date


@dataclass(frozen=True)
class HolidayRecord:
    """A single holiday for a country.

    Uniquely identified by (country, date); ``date`` is an ISO string
    (YYYY-MM-DD) so records compare and sort without conversion.
    """
    country: str
    year: int
    date: str
    name: str
    is_public: bool = True

    @classmethod
    def from_provider_json(cls, entry: dict, country: str, year: int) -> "HolidayRecord":
        """Create HolidayRecord from a Nager.Date style JSON entry.

        Raises ValueError when the entry has no usable date or name.
        """
        date_str = entry.get("date")
        name = entry.get("name") or entry.get("localName")
        if not isinstance(date_str, str) or not isinstance(name, str) or not name.strip():
            raise ValueError(f"Malformed holiday entry: {entry!r}")
        # Nager sends plain dates; tolerate a trailing time part
        day = dt_date.fromisoformat(date_str[:10])

        types = entry.get("types")
        if types is not None and not isinstance(types, list):
            raise ValueError(f"Malformed holiday types: {types!r}")
        is_public = True if types is None else "Public" in types

        return cls(
            country=country,
            year=year,
            date=day.isoformat(),
            name=name,
            is_public=is_public,
        )

    def to_dict(self) -> dict:
        return {
            "country": self.country,
            "year": self.year,
            "date": self.date,
            "name": self.name,
            "is_public": self.is_public,
        }
