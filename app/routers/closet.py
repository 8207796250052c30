import asyncio
import logging
import uuid

from botocore.exceptions import BotoCoreError, ClientError
from fastapi import APIRouter, Depends, HTTPException

from app.auth.deps import get_current_user_id
from app.core.clothing import (
    CATEGORIES,
    FORMALITY_LEVELS,
    OPTIONAL_CATEGORIES,
    REQUIRED_CATEGORIES,
    WARMTH_LEVELS,
)
from app.core.config import settings
from app.schemas.closet import (
    PhotoPresignIn,
    PhotoPresignOut,
    PhotoResetIn,
    PhotoResetOut,
    VocabularyOut,
)
from app.storage.keys import owns_key, photo_key, user_prefix
from app.storage.r2 import delete_object, delete_prefix, photos_enabled, presign_put

router = APIRouter(prefix="/closet", tags=["closet"])
logger = logging.getLogger("uvicorn.error")

RESET_CONFIRMATION = "DELETE"
RESET_WARNING = "Some photo files may not have been removed."


def _require_storage() -> None:
    if not photos_enabled():
        raise HTTPException(status_code=503, detail="photo_storage_unavailable")


@router.get("/vocabulary", response_model=VocabularyOut)
async def read_vocabulary():
    return VocabularyOut(
        categories=list(CATEGORIES),
        required_categories=list(REQUIRED_CATEGORIES),
        optional_categories=list(OPTIONAL_CATEGORIES),
        warmth=list(WARMTH_LEVELS),
        formality=list(FORMALITY_LEVELS),
    )


@router.post("/photos/presign", response_model=PhotoPresignOut)
async def presign_photo(body: PhotoPresignIn, user_id: str = Depends(get_current_user_id)):
    if not body.content_type.startswith("image/"):
        raise HTTPException(status_code=422, detail="photo_must_be_image")
    _require_storage()

    item_id = body.item_id or str(uuid.uuid4())
    key = photo_key(user_id, item_id, body.filename)
    url, headers = presign_put(key, body.content_type, expires=settings.PHOTO_UPLOAD_TTL_S)
    logger.info("closet-photo: presigned upload user_id=%s item_id=%s", user_id, item_id)
    return PhotoPresignOut(item_id=item_id, key=key, upload_url=url, headers=headers)


@router.post("/photos/reset", response_model=PhotoResetOut)
async def reset_photos(body: PhotoResetIn, user_id: str = Depends(get_current_user_id)):
    """Remove every stored photo under the caller's prefix.

    Storage failures are reported as a warning; the caller's closet data
    lives elsewhere and its reset has already happened.
    """
    if body.confirmation.strip() != RESET_CONFIRMATION:
        raise HTTPException(status_code=400, detail="confirmation_required")
    _require_storage()

    warning = None
    deleted = 0
    try:
        deleted, failed = await asyncio.to_thread(
            delete_prefix, user_prefix(user_id), settings.PHOTO_DELETE_BATCH
        )
    except (BotoCoreError, ClientError) as e:
        logger.warning("closet-photo: reset listing failed user_id=%s reason=%s", user_id, e)
        warning = RESET_WARNING
    else:
        if failed:
            logger.warning("closet-photo: reset left %d objects user_id=%s", len(failed), user_id)
            warning = RESET_WARNING

    logger.info("closet-photo: reset user_id=%s deleted=%d", user_id, deleted)
    return PhotoResetOut(ok=True, deleted=deleted, message=warning or "Deleted all closet photos", warning=warning)


@router.delete("/photos/{key:path}", status_code=204)
async def delete_photo(key: str, user_id: str = Depends(get_current_user_id)):
    if not owns_key(user_id, key):
        raise HTTPException(status_code=403, detail="photo_forbidden")
    _require_storage()
    try:
        delete_object(key)
    except ClientError as e:
        raise HTTPException(status_code=500, detail="r2_delete_failed") from e
    logger.info("closet-photo: deleted user_id=%s key=%s", user_id, key)
    return None
