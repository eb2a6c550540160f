from sqlalchemy import Column, String, Integer, Text
from core.base import Base


class UserSettingModel(Base):
    """Key/value user preferences (holiday country, ...)."""

    __tablename__ = "user_settings"

    id = Column(Integer, primary_key=True, autoincrement=True)
    setting_name = Column(String(64), nullable=False, unique=True)
    setting_value = Column(Text, nullable=True)

    def __repr__(self):
        return f"<UserSetting {self.setting_name}={self.setting_value}>"
