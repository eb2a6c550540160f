from .emoji_service import (
    EmojiService,
    EmojiValidationError,
    EmojiAlreadyExistsError,
    normalize_emoji_name,
)

__all__ = ["EmojiService", "EmojiValidationError", "EmojiAlreadyExistsError", "normalize_emoji_name"]
