"""Custom emoji API endpoints."""
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request, Response

from core.rate_limiter import limiter, RateLimits
from src.calendar_bc.emoji.infrastructure.services import (
    EmojiService,
    EmojiValidationError,
    EmojiAlreadyExistsError,
)
from adapters.http.api.calendar.dependencies import get_emoji_service
from adapters.http.api.calendar.schemas import UploadEmojiRequest, EmojiResponse


router = APIRouter(prefix="/emojis", tags=["Emojis"])


def _to_response(emoji) -> EmojiResponse:
    return EmojiResponse(
        name=emoji.name,
        content_type=emoji.content_type,
        size=emoji.size,
        url=f"/api/v1/emojis/{emoji.name}/image",
        created_at=emoji.created_at,
    )


@router.get("", response_model=List[EmojiResponse])
def list_emojis(service: EmojiService = Depends(get_emoji_service)):
    """List custom emojis."""
    return [_to_response(e) for e in service.list_emojis()]


@router.post("", response_model=EmojiResponse, status_code=201)
@limiter.limit(RateLimits.EMOJI_UPLOAD)
def upload_emoji(
    request: Request,
    payload: UploadEmojiRequest,
    service: EmojiService = Depends(get_emoji_service),
):
    """Upload a custom emoji image (base64 encoded)."""
    try:
        emoji = service.upload_emoji(payload.name, payload.content_type, payload.image_data)
    except EmojiValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except EmojiAlreadyExistsError:
        raise HTTPException(status_code=409, detail=f"Emoji '{payload.name}' already exists")
    return _to_response(emoji)


@router.get("/{name}/image")
def get_emoji_image(name: str, service: EmojiService = Depends(get_emoji_service)):
    """Serve the raw emoji image."""
    emoji = service.get_emoji(name)
    if not emoji:
        raise HTTPException(status_code=404, detail=f"Emoji {name} not found")
    return Response(
        content=emoji.data,
        media_type=emoji.content_type,
        headers={"Cache-Control": "public, max-age=86400"},
    )


@router.delete("/{name}")
def delete_emoji(name: str, service: EmojiService = Depends(get_emoji_service)):
    """Delete a custom emoji."""
    if not service.delete_emoji(name):
        raise HTTPException(status_code=404, detail=f"Emoji {name} not found")
    return {"success": True}
