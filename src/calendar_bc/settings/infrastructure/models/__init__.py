from .user_setting_model import UserSettingModel

__all__ = ["UserSettingModel"]
