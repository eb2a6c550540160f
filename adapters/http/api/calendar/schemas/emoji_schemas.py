"""Custom emoji schemas."""

from datetime import datetime
from pydantic import BaseModel, Field


class UploadEmojiRequest(BaseModel):
    name: str = Field(..., description="Emoji name, e.g. 'party' or ':party:'")
    content_type: str = Field(..., description="image/png, image/gif, image/jpeg or image/webp")
    image_data: str = Field(..., description="Base64 image data, optionally as a data URI")


class EmojiResponse(BaseModel):
    name: str
    content_type: str
    size: int
    url: str
    created_at: datetime
