from .settings_service import SettingsService, COUNTRY_SETTING

__all__ = ["SettingsService", "COUNTRY_SETTING"]
