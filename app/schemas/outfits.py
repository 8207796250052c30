from pydantic import BaseModel, Field, field_validator
from typing import Optional, List, Any, Union

from app.core.clothing import parse_colors


class ClosetItemIn(BaseModel):
    """One row of the caller's closet snapshot, as stored.

    Enum fields stay plain strings here: rows with values outside the
    vocabulary are dropped before scoring rather than rejected.
    """
    id: str
    user_id: str
    name: Optional[str] = None
    brand: Optional[str] = None
    subtype: Optional[str] = None
    category: str
    colors: List[Any] = Field(default_factory=list)
    material: Optional[str] = None
    warmth: str
    formality: str
    notes: Optional[str] = None
    photo_path: Optional[str] = None

    @field_validator("colors", mode="before")
    @classmethod
    def _split_colors(cls, v):
        if v is None:
            return []
        if isinstance(v, str):
            return parse_colors(v)
        return v


class OutfitSuggestIn(BaseModel):
    occasion: str = ""
    vibe: Optional[str] = None
    weather: Optional[str] = None
    # form posts send the temperature as text
    temperature_c: Optional[Union[float, str]] = None
    constraints: Optional[str] = None
    items: List[ClosetItemIn] = Field(default_factory=list)


class SuggestedItemOut(BaseModel):
    id: str
    name: str
    brand: Optional[str] = None
    subtype: Optional[str] = None
    category: str
    colors: List[str]
    material: Optional[str] = None
    warmth: str
    formality: str
    notes: Optional[str] = None
    photo_path: Optional[str] = None
    photo_url: Optional[str] = None


class OutfitItemsOut(BaseModel):
    top: SuggestedItemOut
    bottom: SuggestedItemOut
    shoes: SuggestedItemOut
    outerwear: Optional[SuggestedItemOut] = None
    accessory: Optional[SuggestedItemOut] = None


class OutfitSuggestionOut(BaseModel):
    score: float
    explanation: str
    items: OutfitItemsOut


class OutfitSuggestOut(BaseModel):
    suggestions: List[OutfitSuggestionOut]
    missing_required_categories: List[str]
    constraints_applied: List[str]
    limitations: str
