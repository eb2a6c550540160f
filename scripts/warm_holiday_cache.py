#!/usr/bin/env python3
"""Pre-fill the holiday cache.

Fetches holidays for the given countries and years through the same cache
manager the API uses, so later page loads are served from the database.

Usage:
    # Current year for the default country
    python scripts/warm_holiday_cache.py

    # Several countries and years
    python scripts/warm_holiday_cache.py --country US --country DE --year 2025 --year 2026

    # Ignore cached data and hit the provider
    python scripts/warm_holiday_cache.py --country FR --force

Environment variables:
    DATABASE_URL, HOLIDAY_PROVIDER, HOLIDAY_API_URL (see core/config.py)
"""

import sys
import argparse
import logging
from datetime import date
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dotenv import load_dotenv
load_dotenv()

from core.config import settings
from core.database import init_db
from app import build_holiday_manager

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
)
logger = logging.getLogger(__name__)


def warm(countries, years, force: bool) -> int:
    """Fetch every (country, year) pair. Returns the number of empty results."""
    manager = build_holiday_manager()
    empty = 0
    for country in countries:
        for year in years:
            if force:
                outcome = manager.refresh_holidays(country, year)
                count, source = outcome.count, "provider" if outcome.from_remote else "cache"
            else:
                count, source = len(manager.get_holidays(country, year)), "cache/provider"
            logger.info(f"{country.upper()} {year}: {count} holidays ({source})")
            if count == 0:
                empty += 1
    return empty


def main():
    parser = argparse.ArgumentParser(description="Pre-fill the holiday cache")
    parser.add_argument(
        "--country", action="append", dest="countries",
        help=f"ISO country code (repeatable, default: {settings.DEFAULT_COUNTRY})",
    )
    parser.add_argument(
        "--year", action="append", type=int, dest="years",
        help="Year to fetch (repeatable, default: current year)",
    )
    parser.add_argument("--force", action="store_true", help="Bypass the cache")
    args = parser.parse_args()

    countries = args.countries or [settings.DEFAULT_COUNTRY]
    years = args.years or [date.today().year]

    init_db()
    empty = warm(countries, years, args.force)
    if empty:
        logger.warning(f"{empty} country/year pair(s) returned no holidays")
        sys.exit(1)


if __name__ == "__main__":
    main()
