import logging
import re
from typing import Dict, Optional

from sqlalchemy.orm import Session

from src.calendar_bc.settings.infrastructure.models import UserSettingModel

logger = logging.getLogger(__name__)

COUNTRY_SETTING = "country"
COUNTRY_PATTERN = re.compile(r"^[A-Za-z]{2}$")


class SettingsService:
    """Reads and writes user settings, filling in configured defaults."""

    def __init__(self, db: Session, default_country: str):
        self.db = db
        self.defaults = {COUNTRY_SETTING: default_country.upper()}

    def get_all(self) -> Dict[str, Optional[str]]:
        values: Dict[str, Optional[str]] = dict(self.defaults)
        for row in self.db.query(UserSettingModel).all():
            values[row.setting_name] = row.setting_value
        return values

    def get(self, name: str) -> Optional[str]:
        row = self.db.query(UserSettingModel).filter(UserSettingModel.setting_name == name).first()
        if row is not None:
            return row.setting_value
        return self.defaults.get(name)

    def set(self, name: str, value: Optional[str]) -> None:
        """Upsert one setting (no commit)."""
        row = self.db.query(UserSettingModel).filter(UserSettingModel.setting_name == name).first()
        if row is None:
            self.db.add(UserSettingModel(setting_name=name, setting_value=value))
        else:
            row.setting_value = value

    def get_country(self) -> str:
        return (self.get(COUNTRY_SETTING) or self.defaults[COUNTRY_SETTING]).upper()

    def set_country(self, country: str) -> str:
        if not COUNTRY_PATTERN.match(country or ""):
            raise ValueError(f"Invalid country code: {country!r}")
        country = country.upper()
        self.set(COUNTRY_SETTING, country)
        self.db.commit()
        logger.info(f"Holiday country set to {country}")
        return country
