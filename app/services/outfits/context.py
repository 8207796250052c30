import math
from typing import Optional

from .constraints import normalize
from .types import OccasionBucket, WeatherBand

COLD_WORDS = ("cold", "chilly", "winter")
HOT_WORDS = ("hot", "warm", "summer")
MILD_WORDS = ("mild", "cool")

COLD_MAX_C = 12
HOT_MIN_C = 24


def occasion_bucket(occasion: Optional[str]) -> OccasionBucket:
    text = normalize(occasion)
    if "interview" in text:
        return "interview"
    if "date" in text:
        return "date"
    return "casual"


def weather_band(temperature_c: Optional[float], weather: Optional[str]) -> Optional[WeatherBand]:
    """Coarse weather band; a finite temperature wins over the weather text.

    Returns None when neither input says anything usable.
    """
    if isinstance(temperature_c, (int, float)) and not isinstance(temperature_c, bool) and math.isfinite(temperature_c):
        if temperature_c <= COLD_MAX_C:
            return "cold"
        if temperature_c >= HOT_MIN_C:
            return "hot"
        return "mild"

    text = normalize(weather)
    if not text:
        return None
    if any(w in text for w in COLD_WORDS):
        return "cold"
    if any(w in text for w in HOT_WORDS):
        return "hot"
    if any(w in text for w in MILD_WORDS):
        return "mild"
    return None
