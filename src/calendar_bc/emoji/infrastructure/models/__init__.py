from .emoji_model import CustomEmojiModel

__all__ = ["CustomEmojiModel"]
