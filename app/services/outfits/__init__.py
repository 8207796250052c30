from .engine import OutfitEngine, suggest_outfits, missing_required_categories
from .constraints import parse_constraints, filter_items
from .context import occasion_bucket, weather_band
from .types import (
    LIMITATIONS,
    ClothingItem,
    OutfitRequest,
    OutfitSuggestion,
    OutfitSuggestionResult,
)

__all__ = [
    "OutfitEngine",
    "suggest_outfits",
    "missing_required_categories",
    "parse_constraints",
    "filter_items",
    "occasion_bucket",
    "weather_band",
    "LIMITATIONS",
    "ClothingItem",
    "OutfitRequest",
    "OutfitSuggestion",
    "OutfitSuggestionResult",
]
