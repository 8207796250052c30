from typing import Optional

from .types import ClothingItem, ScoringContext

OCCASION_CLAUSES = {
    "interview": "to keep the look business-leaning for interview settings",
    "date": "to balance smart and approachable pieces for a date",
    "casual": "to keep things casual and easy to wear",
}


def _weather_clause(ctx: ScoringContext, outerwear: Optional[ClothingItem]) -> Optional[str]:
    if ctx.weather == "cold":
        if outerwear is not None:
            return "with added outerwear for cold weather"
        return "using warmer pieces for cold weather"
    if ctx.weather == "mild":
        return "with medium warmth for mild weather"
    if ctx.weather == "hot":
        return "with lighter pieces for hot weather"
    return None


def explain_outfit(
    ctx: ScoringContext,
    top: ClothingItem,
    bottom: ClothingItem,
    shoes: ClothingItem,
    outerwear: Optional[ClothingItem] = None,
) -> str:
    parts = [
        f"Built around {top.name}, {bottom.name}, and {shoes.name}",
        OCCASION_CLAUSES[ctx.occasion],
    ]
    weather = _weather_clause(ctx, outerwear)
    if weather:
        parts.append(weather)
    if ctx.constraints.applied:
        parts.append("while respecting your constraints")
    return " ".join(parts) + "."
