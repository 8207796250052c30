from __future__ import annotations

import math
import re
from collections import Counter
from typing import Iterable, Optional, Tuple, Union

from app.core.clothing import is_category, is_formality, is_warmth
from app.schemas.outfits import ClosetItemIn, SuggestedItemOut
from app.services.outfits import ClothingItem

# Numeric text accepted for temperatures: plain decimals with an optional
# exponent, or unsigned 0x/0o/0b integers. No digit separators.
_DECIMAL = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)
_PREFIXED = re.compile(r"0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)")


def _fallback_name(row: ClosetItemIn, colors: list[str]) -> str:
    first = colors[0] if colors else ""
    kind = row.subtype if row.subtype is not None else row.category
    return f"{first} {kind}".strip()


def _normalize_row(row: ClosetItemIn) -> ClothingItem:
    colors = [c for c in row.colors if isinstance(c, str)]
    name = (row.name or "").strip() or _fallback_name(row, colors)
    return ClothingItem(
        id=row.id,
        user_id=row.user_id,
        name=name,
        brand=row.brand,
        subtype=row.subtype,
        category=row.category,
        colors=tuple(colors),
        material=row.material,
        warmth=row.warmth,
        formality=row.formality,
        notes=row.notes,
        photo_path=row.photo_path,
    )


def _normalize_closet(rows: Iterable[ClosetItemIn], user_id: str) -> list[ClothingItem]:
    """Scope rows to ``user_id`` and drop rows the engine cannot score."""
    out = []
    for row in rows:
        if row.user_id != user_id:
            continue
        if not (is_category(row.category) and is_warmth(row.warmth) and is_formality(row.formality)):
            continue
        out.append(_normalize_row(row))
    return out


def _largest_category(items: Iterable[ClothingItem]) -> Tuple[Optional[str], int]:
    counts = Counter(it.category for it in items)
    if not counts:
        return None, 0
    return counts.most_common(1)[0]


def _parse_temperature(value: Union[float, str, None]) -> Optional[float]:
    """None for blank input; raises ValueError when not a finite number."""
    if value is None:
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
        if _PREFIXED.fullmatch(value):
            return float(int(value, 0))
        if not _DECIMAL.fullmatch(value):
            raise ValueError("not_a_number")
    parsed = float(value)
    if not math.isfinite(parsed):
        raise ValueError("non_finite")
    return parsed


def _item_out(item: Optional[ClothingItem], photo_url: Optional[str] = None) -> Optional[SuggestedItemOut]:
    if item is None:
        return None
    return SuggestedItemOut(
        id=item.id,
        name=item.name,
        brand=item.brand,
        subtype=item.subtype,
        category=item.category,
        colors=list(item.colors),
        material=item.material,
        warmth=item.warmth,
        formality=item.formality,
        notes=item.notes,
        photo_path=item.photo_path,
        photo_url=photo_url,
    )
