import base64
import binascii
import logging
import re
from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from src.calendar_bc.emoji.infrastructure.models import CustomEmojiModel

logger = logging.getLogger(__name__)

EMOJI_NAME_PATTERN = re.compile(r"^[a-z0-9_-]{2,32}$")
ALLOWED_CONTENT_TYPES = {"image/png", "image/gif", "image/jpeg", "image/webp"}


class EmojiValidationError(ValueError):
    """Uploaded emoji has an invalid name, type or payload."""


class EmojiAlreadyExistsError(Exception):
    """An emoji with the same name is already stored."""


def normalize_emoji_name(name: str) -> str:
    """Lower-case and strip surrounding colons (":party:" -> "party")."""
    return (name or "").strip().strip(":").lower()


def decode_emoji_data(image_data: str, max_bytes: int) -> bytes:
    """Decode base64 image data, accepting an optional data-URI prefix."""
    payload = image_data or ""
    if payload.startswith("data:") and "," in payload:
        payload = payload.split(",", 1)[1]
    try:
        data = base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as e:
        raise EmojiValidationError("Emoji image must be base64 encoded") from e

    if not data:
        raise EmojiValidationError("Emoji image is empty")
    if len(data) > max_bytes:
        raise EmojiValidationError(f"Emoji image exceeds {max_bytes} bytes")
    return data


class EmojiService:
    """Stores and serves custom emoji images."""

    def __init__(self, db: Session, max_bytes: int):
        self.db = db
        self.max_bytes = max_bytes

    def list_emojis(self) -> List[CustomEmojiModel]:
        return self.db.query(CustomEmojiModel).order_by(CustomEmojiModel.name).all()

    def get_emoji(self, name: str) -> Optional[CustomEmojiModel]:
        return self.db.query(CustomEmojiModel).filter(
            CustomEmojiModel.name == normalize_emoji_name(name)
        ).first()

    def upload_emoji(self, name: str, content_type: str, image_data: str) -> CustomEmojiModel:
        name = normalize_emoji_name(name)
        if not EMOJI_NAME_PATTERN.match(name):
            raise EmojiValidationError(
                "Emoji name must be 2-32 characters of lowercase letters, digits, '_' or '-'"
            )
        if content_type not in ALLOWED_CONTENT_TYPES:
            raise EmojiValidationError(f"Unsupported emoji content type: {content_type}")

        data = decode_emoji_data(image_data, self.max_bytes)

        if self.get_emoji(name) is not None:
            raise EmojiAlreadyExistsError(name)

        emoji = CustomEmojiModel(name=name, content_type=content_type, data=data)
        self.db.add(emoji)
        try:
            self.db.commit()
        except IntegrityError as e:
            # Lost a race against a concurrent upload of the same name
            self.db.rollback()
            raise EmojiAlreadyExistsError(name) from e
        self.db.refresh(emoji)
        logger.info(f"Stored custom emoji :{name}: ({len(data)} bytes)")
        return emoji

    def delete_emoji(self, name: str) -> bool:
        emoji = self.get_emoji(name)
        if emoji is None:
            return False
        self.db.delete(emoji)
        self.db.commit()
        logger.info(f"Deleted custom emoji :{emoji.name}:")
        return True

    def restore(self, entries: List[dict]) -> int:
        """Insert snapshot emojis whose names are not taken yet (no commit)."""
        existing = {e.name for e in self.list_emojis()}
        restored = 0
        for entry in entries:
            raw_name = entry.get("name")
            content_type = entry.get("content_type")
            image_data = entry.get("image_data")
            if not all(isinstance(v, str) for v in (raw_name, content_type, image_data)):
                logger.warning(f"Skipping malformed emoji entry from snapshot: {raw_name!r}")
                continue

            name = normalize_emoji_name(raw_name)
            if not EMOJI_NAME_PATTERN.match(name) or name in existing:
                continue
            if content_type not in ALLOWED_CONTENT_TYPES:
                continue
            try:
                data = decode_emoji_data(image_data, self.max_bytes)
            except EmojiValidationError as e:
                logger.warning(f"Skipping emoji :{name}: from snapshot: {e}")
                continue
            self.db.add(CustomEmojiModel(name=name, content_type=content_type, data=data))
            existing.add(name)
            restored += 1
        return restored
