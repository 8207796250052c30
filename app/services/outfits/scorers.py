from abc import ABC, abstractmethod
from typing import Callable, Dict, Optional, Sequence, Tuple

from .constraints import normalize
from .types import ClothingItem, Formality, OccasionBucket, ScoringContext, Warmth, WeatherBand

NEUTRAL_COLORS = frozenset({"black", "white", "gray", "grey", "navy", "beige", "cream"})

FORMALITY_POINTS: Dict[OccasionBucket, Dict[Formality, int]] = {
    "interview": {"business": 6, "smart": 3, "casual": -4},
    "date": {"business": 2, "smart": 5, "casual": 3},
    "casual": {"business": -2, "smart": 2, "casual": 5},
}

WARMTH_POINTS: Dict[WeatherBand, Dict[Warmth, int]] = {
    "cold": {"heavy": 3, "medium": 1, "light": -2},
    "mild": {"heavy": 1, "medium": 3, "light": 1},
    "hot": {"heavy": -3, "medium": 1, "light": 3},
}

OUTERWEAR_WARMTH_POINTS: Dict[WeatherBand, Dict[Warmth, int]] = {
    "cold": {"heavy": 4, "medium": 2, "light": 1},
    "mild": {"heavy": 0, "medium": 2, "light": 1},
    "hot": {"heavy": -5, "medium": -2, "light": -1},
}

OUTERWEAR_MIN_BONUS = 1
ACCESSORY_MIN_BONUS = 0


def formality_score(formality: Formality, occasion: OccasionBucket) -> int:
    return FORMALITY_POINTS[occasion][formality]


def warmth_score(warmth: Warmth, weather: Optional[WeatherBand]) -> int:
    if not weather:
        return 0
    return WARMTH_POINTS[weather][warmth]


def dominant_color(item: ClothingItem) -> str:
    return normalize(item.colors[0]) if item.colors else ""


def color_pair_score(a: ClothingItem, b: ClothingItem) -> int:
    color_a = dominant_color(a)
    color_b = dominant_color(b)
    if not color_a or not color_b:
        return 0
    # neutrals go with anything
    if color_a in NEUTRAL_COLORS or color_b in NEUTRAL_COLORS:
        return 2
    if color_a == color_b:
        return 1
    return -2


def outerwear_bonus(item: ClothingItem, top: ClothingItem, bottom: ClothingItem, ctx: ScoringContext) -> float:
    score = formality_score(item.formality, ctx.occasion) / 2
    if ctx.weather:
        score += OUTERWEAR_WARMTH_POINTS[ctx.weather][item.warmth]
    return score + color_pair_score(item, top) + color_pair_score(item, bottom)


def accessory_bonus(item: ClothingItem, top: ClothingItem, shoes: ClothingItem, ctx: ScoringContext) -> float:
    score = formality_score(item.formality, ctx.occasion) / 2
    if ctx.occasion == "casual" and item.formality == "casual":
        score += 1
    return score + color_pair_score(item, top) + color_pair_score(item, shoes)


def pick_optional(
    candidates: Sequence[ClothingItem],
    bonus: Callable[[ClothingItem], float],
    min_bonus: float,
) -> Tuple[Optional[ClothingItem], float]:
    """Best candidate by bonus (first one wins ties), kept only if it beats ``min_bonus``."""
    best: Optional[ClothingItem] = None
    best_bonus = 0.0
    for candidate in candidates:
        value = bonus(candidate)
        if best is None or value > best_bonus:
            best, best_bonus = candidate, value
    if best is None or best_bonus <= min_bonus:
        return None, 0.0
    return best, best_bonus


class BaseScorer(ABC):
    """Base class for outfit dimension scorers."""

    @property
    @abstractmethod
    def dimension_name(self) -> str:
        pass

    @abstractmethod
    def score(self, ctx: ScoringContext, top: ClothingItem, bottom: ClothingItem, shoes: ClothingItem) -> float:
        pass


class FormalityScorer(BaseScorer):
    """How well each required piece fits the occasion bucket."""

    dimension_name = "formality"

    def score(self, ctx, top, bottom, shoes):
        return sum(formality_score(it.formality, ctx.occasion) for it in (top, bottom, shoes))


class WarmthScorer(BaseScorer):
    """Warmth against the weather band; contributes nothing without a band."""

    dimension_name = "warmth"

    def score(self, ctx, top, bottom, shoes):
        return sum(warmth_score(it.warmth, ctx.weather) for it in (top, bottom, shoes))


class ColorHarmonyScorer(BaseScorer):
    """Dominant-color harmony over the top/bottom, top/shoes and bottom/shoes pairs."""

    dimension_name = "color"

    def score(self, ctx, top, bottom, shoes):
        return color_pair_score(top, bottom) + color_pair_score(top, shoes) + color_pair_score(bottom, shoes)
