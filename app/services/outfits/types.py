from dataclasses import dataclass, field
from typing import Callable, List, Literal, Optional, Tuple

Category = Literal["top", "bottom", "shoes", "outerwear", "accessory"]
Warmth = Literal["light", "medium", "heavy"]
Formality = Literal["casual", "smart", "business"]
OccasionBucket = Literal["interview", "date", "casual"]
WeatherBand = Literal["cold", "mild", "hot"]

LIMITATIONS = (
    "Constraint parsing is keyword-based for now "
    "(hoodies, sneakers, jeans, and simple shoe-color exclusions)."
)


@dataclass(frozen=True)
class ClothingItem:
    """A single closet item, already validated and scoped to one owner."""
    id: str
    user_id: str
    name: str
    category: Category
    warmth: Warmth
    formality: Formality
    colors: Tuple[str, ...] = ()
    brand: Optional[str] = None
    subtype: Optional[str] = None
    material: Optional[str] = None
    notes: Optional[str] = None
    photo_path: Optional[str] = None


@dataclass(frozen=True)
class OutfitRequest:
    occasion: str
    vibe: str = ""  # reserved, not scored yet
    temperature_c: Optional[float] = None
    weather: Optional[str] = None
    constraints: Optional[str] = None


@dataclass(frozen=True)
class ExclusionRule:
    """Tagged predicate; returns True when the item must be dropped."""
    tag: str
    predicate: Callable[[ClothingItem], bool]

    def excludes(self, item: ClothingItem) -> bool:
        return self.predicate(item)


@dataclass(frozen=True)
class ParsedConstraints:
    applied: Tuple[str, ...] = ()
    banned_terms: Tuple[str, ...] = ()
    banned_shoe_colors: Tuple[str, ...] = ()
    no_hoodies: bool = False
    no_sneakers: bool = False
    no_jeans: bool = False
    no_white_shoes: bool = False
    rules: Tuple[ExclusionRule, ...] = ()


@dataclass(frozen=True)
class ScoringContext:
    """Per-request classification shared by every scorer."""
    occasion: OccasionBucket
    weather: Optional[WeatherBand]
    constraints: ParsedConstraints


@dataclass
class OutfitSuggestion:
    score: float
    explanation: str
    top: ClothingItem
    bottom: ClothingItem
    shoes: ClothingItem
    outerwear: Optional[ClothingItem] = None
    accessory: Optional[ClothingItem] = None

    @property
    def ranking_key(self) -> str:
        return f"{self.top.id}-{self.bottom.id}-{self.shoes.id}"


@dataclass
class OutfitSuggestionResult:
    suggestions: List[OutfitSuggestion] = field(default_factory=list)
    missing_required_categories: List[str] = field(default_factory=list)
    constraints_applied: List[str] = field(default_factory=list)
    limitations: str = LIMITATIONS
