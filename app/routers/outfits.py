import asyncio
import logging
from typing import Dict, Optional

from botocore.exceptions import BotoCoreError, ClientError
from fastapi import APIRouter, Depends, HTTPException

from app.auth.deps import get_current_user_id
from app.core.config import settings
from app.routers.outfits_helpers import _item_out, _largest_category, _normalize_closet, _parse_temperature
from app.schemas.outfits import (
    OutfitItemsOut,
    OutfitSuggestIn,
    OutfitSuggestionOut,
    OutfitSuggestOut,
)
from app.services.outfits import ClothingItem, OutfitRequest, suggest_outfits
from app.storage.r2 import photos_enabled, presign_get

router = APIRouter(prefix="/outfits", tags=["outfits"])
# Use uvicorn logger so INFO messages show up in container logs
logger = logging.getLogger("uvicorn.error")


def _photo_url(item: Optional[ClothingItem], cache: Dict[str, Optional[str]]) -> Optional[str]:
    if item is None or not item.photo_path or not photos_enabled():
        return None
    if item.photo_path not in cache:
        try:
            cache[item.photo_path] = presign_get(item.photo_path, expires=settings.PHOTO_URL_TTL_S)
        except (BotoCoreError, ClientError) as e:
            logger.warning("outfit-suggest: photo url failed item_id=%s reason=%s", item.id, e)
            cache[item.photo_path] = None
    return cache[item.photo_path]


@router.post("/suggest", response_model=OutfitSuggestOut)
async def suggest(body: OutfitSuggestIn, user_id: str = Depends(get_current_user_id)):
    occasion = body.occasion.strip()
    if not occasion:
        raise HTTPException(status_code=400, detail="occasion_required")
    try:
        temperature_c = _parse_temperature(body.temperature_c)
    except ValueError:
        raise HTTPException(status_code=400, detail="invalid_temperature")

    if len(body.items) > settings.MAX_CLOSET_ITEMS:
        raise HTTPException(status_code=400, detail="closet_too_large")

    items = _normalize_closet(body.items, user_id)
    dropped = len(body.items) - len(items)
    if dropped:
        logger.info("outfit-suggest: skipped %d closet rows user_id=%s", dropped, user_id)
    category, count = _largest_category(items)
    if count > settings.MAX_ITEMS_PER_CATEGORY:
        logger.info("outfit-suggest: rejected %d %s rows user_id=%s", count, category, user_id)
        raise HTTPException(status_code=400, detail="closet_too_large")

    # scoring is CPU bound; keep it off the event loop
    result = await asyncio.to_thread(
        suggest_outfits,
        items,
        OutfitRequest(
            occasion=occasion,
            vibe=(body.vibe or "").strip(),
            temperature_c=temperature_c,
            weather=(body.weather or "").strip(),
            constraints=(body.constraints or "").strip(),
        ),
    )

    urls: Dict[str, Optional[str]] = {}
    suggestions = [
        OutfitSuggestionOut(
            score=s.score,
            explanation=s.explanation,
            items=OutfitItemsOut(
                top=_item_out(s.top, _photo_url(s.top, urls)),
                bottom=_item_out(s.bottom, _photo_url(s.bottom, urls)),
                shoes=_item_out(s.shoes, _photo_url(s.shoes, urls)),
                outerwear=_item_out(s.outerwear, _photo_url(s.outerwear, urls)),
                accessory=_item_out(s.accessory, _photo_url(s.accessory, urls)),
            ),
        )
        for s in result.suggestions
    ]
    return OutfitSuggestOut(
        suggestions=suggestions,
        missing_required_categories=result.missing_required_categories,
        constraints_applied=result.constraints_applied,
        limitations=result.limitations,
    )
