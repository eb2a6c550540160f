"""User settings API endpoints."""
from fastapi import APIRouter, Depends, HTTPException

from src.calendar_bc.settings.infrastructure.services import SettingsService
from adapters.http.api.calendar.dependencies import get_settings_service
from adapters.http.api.calendar.schemas import SettingsResponse, UpdateSettingsRequest


router = APIRouter(prefix="/settings", tags=["Settings"])


@router.get("", response_model=SettingsResponse)
def get_settings(service: SettingsService = Depends(get_settings_service)):
    """Get user settings (holiday country, ...)."""
    return SettingsResponse(country=service.get_country())


@router.put("", response_model=SettingsResponse)
def update_settings(
    payload: UpdateSettingsRequest,
    service: SettingsService = Depends(get_settings_service),
):
    """Update user settings. Omitted fields are left unchanged."""
    if payload.country is not None:
        try:
            service.set_country(payload.country)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))
    return SettingsResponse(country=service.get_country())
