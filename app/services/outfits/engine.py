import itertools
import logging
from typing import Iterable, List, Sequence

from app.core.clothing import REQUIRED_CATEGORIES
from .constraints import filter_items, parse_constraints
from .context import occasion_bucket, weather_band
from .explain import explain_outfit
from .scorers import (
    ACCESSORY_MIN_BONUS,
    OUTERWEAR_MIN_BONUS,
    ColorHarmonyScorer,
    FormalityScorer,
    WarmthScorer,
    accessory_bonus,
    outerwear_bonus,
    pick_optional,
)
from .types import (
    ClothingItem,
    OutfitRequest,
    OutfitSuggestion,
    OutfitSuggestionResult,
    ScoringContext,
)

logger = logging.getLogger(__name__)

MAX_SUGGESTIONS = 3


def _by_category(items: Iterable[ClothingItem], category: str) -> List[ClothingItem]:
    return [it for it in items if it.category == category]


def missing_required_categories(items: Sequence[ClothingItem]) -> List[str]:
    present = {it.category for it in items}
    return [c for c in REQUIRED_CATEGORIES if c not in present]


class OutfitEngine:
    """Scores every top x bottom x shoes combination and keeps the best few.

    Pure and synchronous: no I/O, no shared state, so one instance can serve
    concurrent requests. Callers pass items already scoped to one owner with
    valid category/warmth/formality values.
    """

    def __init__(self, max_suggestions: int = MAX_SUGGESTIONS):
        self.max_suggestions = max_suggestions
        self.scorers = [FormalityScorer(), WarmthScorer(), ColorHarmonyScorer()]

    def suggest(self, items: Sequence[ClothingItem], request: OutfitRequest) -> OutfitSuggestionResult:
        constraints = parse_constraints(request.constraints)
        ctx = ScoringContext(
            occasion=occasion_bucket(request.occasion),
            weather=weather_band(request.temperature_c, request.weather),
            constraints=constraints,
        )
        filtered = filter_items(items, constraints)

        missing = missing_required_categories(filtered)
        if missing:
            logger.debug("outfits: missing required categories %s (items=%d)", missing, len(filtered))
            return OutfitSuggestionResult(
                missing_required_categories=missing,
                constraints_applied=list(constraints.applied),
            )

        tops = _by_category(filtered, "top")
        bottoms = _by_category(filtered, "bottom")
        shoes = _by_category(filtered, "shoes")
        outerwear = _by_category(filtered, "outerwear")
        accessories = _by_category(filtered, "accessory")
        logger.debug(
            "outfits: scoring %d combinations occasion=%s weather=%s",
            len(tops) * len(bottoms) * len(shoes), ctx.occasion, ctx.weather,
        )

        scored = [
            self._score_combination(ctx, top, bottom, shoe, outerwear, accessories)
            for top, bottom, shoe in itertools.product(tops, bottoms, shoes)
        ]
        scored.sort(key=lambda s: (-s.score, s.ranking_key))

        return OutfitSuggestionResult(
            suggestions=scored[: self.max_suggestions],
            missing_required_categories=[],
            constraints_applied=list(constraints.applied),
        )

    def _score_combination(
        self,
        ctx: ScoringContext,
        top: ClothingItem,
        bottom: ClothingItem,
        shoes: ClothingItem,
        outerwear: Sequence[ClothingItem],
        accessories: Sequence[ClothingItem],
    ) -> OutfitSuggestion:
        score = sum(scorer.score(ctx, top, bottom, shoes) for scorer in self.scorers)

        chosen_outerwear, bonus = pick_optional(
            outerwear, lambda it: outerwear_bonus(it, top, bottom, ctx), OUTERWEAR_MIN_BONUS
        )
        score += bonus
        chosen_accessory, bonus = pick_optional(
            accessories, lambda it: accessory_bonus(it, top, shoes, ctx), ACCESSORY_MIN_BONUS
        )
        score += bonus

        return OutfitSuggestion(
            score=score,
            explanation=explain_outfit(ctx, top, bottom, shoes, chosen_outerwear),
            top=top,
            bottom=bottom,
            shoes=shoes,
            outerwear=chosen_outerwear,
            accessory=chosen_accessory,
        )


_default_engine = OutfitEngine()


def suggest_outfits(items: Sequence[ClothingItem], request: OutfitRequest) -> OutfitSuggestionResult:
    return _default_engine.suggest(items, request)
