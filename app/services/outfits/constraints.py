import re
from typing import Iterable, List, Optional

from .types import ClothingItem, ExclusionRule, ParsedConstraints

SHOE_COLORS = (
    "black", "white", "gray", "grey", "navy", "beige", "cream",
    "red", "blue", "green", "yellow", "orange", "purple", "pink", "brown",
)
# Words already covered by the shoe rules; never treated as generic banned terms.
GENERIC_STOPWORDS = frozenset({"white", "black", "gray", "grey", "navy", "beige", "cream", "shoes", "shoe"})

# Word boundaries are ASCII: "no cafés" bans "caf".
_NO_HOODIES = re.compile(r"\bno\s+hoodies?\b", re.ASCII)
_NO_SNEAKERS = re.compile(r"\bno\s+sneakers?\b", re.ASCII)
_NO_JEANS = re.compile(r"\bno\s+jeans?\b", re.ASCII)
_NO_WHITE_SHOES = re.compile(r"\bno\s+white\s+shoes?\b", re.ASCII)
_NO_COLOR_SHOES = re.compile(r"\bno\s+(" + "|".join(SHOE_COLORS) + r")\s+shoes?\b", re.ASCII)
_NO_WORD = re.compile(r"\bno\s+([a-z]{3,})\b", re.ASCII)


def normalize(value: Optional[str]) -> str:
    return (value or "").strip().lower()


def item_text(item: ClothingItem) -> str:
    """Searchable text for keyword rules."""
    parts = [
        item.name,
        item.brand or "",
        item.subtype or "",
        item.category,
        item.material or "",
        item.notes or "",
        " ".join(item.colors),
    ]
    return " ".join(parts).lower()


def includes_text(item: ClothingItem, value: str) -> bool:
    return value.lower() in item_text(item)


def _has_color(item: ClothingItem, color: str) -> bool:
    return any(normalize(c) == color for c in item.colors)


def _dedupe(values: Iterable[str]) -> tuple[str, ...]:
    seen: set[str] = set()
    out: List[str] = []
    for v in values:
        if v not in seen:
            seen.add(v)
            out.append(v)
    return tuple(out)


def _build_rules(
    *,
    no_hoodies: bool,
    no_sneakers: bool,
    no_jeans: bool,
    no_white_shoes: bool,
    banned_shoe_colors: tuple[str, ...],
    banned_terms: tuple[str, ...],
) -> tuple[ExclusionRule, ...]:
    rules: List[ExclusionRule] = []
    if no_hoodies:
        rules.append(ExclusionRule("hoodies", lambda it: includes_text(it, "hoodie")))
    if no_sneakers:
        rules.append(
            ExclusionRule("sneakers", lambda it: it.category == "shoes" and includes_text(it, "sneaker"))
        )
    if no_jeans:
        rules.append(
            ExclusionRule("jeans", lambda it: includes_text(it, "jean") or includes_text(it, "denim"))
        )
    if no_white_shoes:
        rules.append(
            ExclusionRule("white-shoes", lambda it: it.category == "shoes" and _has_color(it, "white"))
        )
    if banned_shoe_colors:
        rules.append(
            ExclusionRule(
                "shoe-colors",
                lambda it: it.category == "shoes" and any(_has_color(it, c) for c in banned_shoe_colors),
            )
        )
    if banned_terms:
        rules.append(
            ExclusionRule("terms", lambda it: any(includes_text(it, t) for t in banned_terms))
        )
    return tuple(rules)


def parse_constraints(raw: Optional[str]) -> ParsedConstraints:
    """Turn free text like "no hoodies, no red shoes" into exclusion rules.

    Matching is keyword based: whole-word ``no <thing>`` phrases only. The
    ``applied`` labels are reported for every recognised phrase, whether or
    not any closet item actually matched it.
    """
    text = normalize(raw)
    if not text:
        return ParsedConstraints()

    no_hoodies = bool(_NO_HOODIES.search(text))
    no_sneakers = bool(_NO_SNEAKERS.search(text))
    no_jeans = bool(_NO_JEANS.search(text))
    no_white_shoes = bool(_NO_WHITE_SHOES.search(text))
    banned_shoe_colors = _dedupe(m.group(1) for m in _NO_COLOR_SHOES.finditer(text))
    banned_terms = _dedupe(
        m.group(1) for m in _NO_WORD.finditer(text) if m.group(1) not in GENERIC_STOPWORDS
    )

    applied = []
    if no_hoodies:
        applied.append("no hoodies")
    if no_white_shoes:
        applied.append("no white shoes")
    if no_sneakers:
        applied.append("no sneakers")
    if no_jeans:
        applied.append("no jeans")

    return ParsedConstraints(
        applied=tuple(applied),
        banned_terms=banned_terms,
        banned_shoe_colors=banned_shoe_colors,
        no_hoodies=no_hoodies,
        no_sneakers=no_sneakers,
        no_jeans=no_jeans,
        no_white_shoes=no_white_shoes,
        rules=_build_rules(
            no_hoodies=no_hoodies,
            no_sneakers=no_sneakers,
            no_jeans=no_jeans,
            no_white_shoes=no_white_shoes,
            banned_shoe_colors=banned_shoe_colors,
            banned_terms=banned_terms,
        ),
    )


def matches_constraints(item: ClothingItem, constraints: ParsedConstraints) -> bool:
    return not any(rule.excludes(item) for rule in constraints.rules)


def filter_items(items: Iterable[ClothingItem], constraints: ParsedConstraints) -> List[ClothingItem]:
    return [it for it in items if matches_constraints(it, constraints)]
