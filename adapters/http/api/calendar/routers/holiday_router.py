"""Holiday overlay API endpoints."""
import logging
from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import JSONResponse

from core.rate_limiter import limiter, RateLimits
from src.calendar_bc.holiday.infrastructure.services import HolidayCacheManager
from src.calendar_bc.settings.infrastructure.services import SettingsService
from adapters.http.api.calendar.dependencies import get_holiday_manager, get_settings_service
from adapters.http.api.calendar.schemas import (
    HolidayResponse,
    RefreshHolidaysRequest,
    RefreshHolidaysResponse,
    HolidayCacheStatusResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/holidays", tags=["Holidays"])


@router.get("", response_model=List[HolidayResponse])
def get_holidays(
    country: Optional[str] = Query(None, description="ISO country code (defaults to the selected country)"),
    year: Optional[int] = Query(None, ge=1, le=9999, description="Year (defaults to the current year)"),
    refresh: bool = Query(False, description="Bypass the cache and hit the holiday provider"),
    manager: HolidayCacheManager = Depends(get_holiday_manager),
    settings_service: SettingsService = Depends(get_settings_service),
):
    """Get holidays for a country and year.

    Passive lookups never fail: when neither the provider nor the cache has
    data the list is simply empty.
    """
    country = country or settings_service.get_country()
    year = year or date.today().year
    records = manager.get_holidays(country, year, force_refresh=refresh)
    return [HolidayResponse(**r.to_dict()) for r in records]


@router.post("/refresh", response_model=RefreshHolidaysResponse)
@limiter.limit(RateLimits.HOLIDAY_REFRESH)
def refresh_holidays(
    request: Request,
    payload: RefreshHolidaysRequest,
    manager: HolidayCacheManager = Depends(get_holiday_manager),
):
    """Force a provider fetch for a country and year."""
    try:
        outcome = manager.refresh_holidays(payload.country, payload.year)
    except Exception as e:
        logger.exception(f"Holiday refresh failed for {payload.country}/{payload.year}")
        return JSONResponse(
            status_code=500,
            content={"success": False, "count": 0, "error": f"Holiday refresh failed: {e}"},
        )

    if outcome.from_remote:
        message = f"Refreshed {outcome.count} holidays for {payload.country.upper()} {payload.year}"
    else:
        message = "Holiday service is unavailable right now; showing saved holidays"
    return RefreshHolidaysResponse(success=True, count=outcome.count, message=message)


@router.get("/status", response_model=HolidayCacheStatusResponse)
def get_holiday_cache_status(
    country: Optional[str] = Query(None),
    year: Optional[int] = Query(None, ge=1, le=9999),
    manager: HolidayCacheManager = Depends(get_holiday_manager),
    settings_service: SettingsService = Depends(get_settings_service),
):
    """Report when a country/year was last fetched and whether it is stale."""
    country = country or settings_service.get_country()
    year = year or date.today().year
    status = manager.cache_status(country, year)
    return HolidayCacheStatusResponse(
        country=status.country,
        year=status.year,
        last_updated=status.last_updated,
        is_stale=status.is_stale,
        memory_cached=status.memory_cached,
        provider=manager.provider.name,
    )
