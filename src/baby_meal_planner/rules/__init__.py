"""Age-band resolution and guidance rules."""

from baby_meal_planner.rules.age_bands import AGE_BANDS, band_for_label, resolve_age_band
from baby_meal_planner.rules.engine import GuidanceEngine

__all__ = ["AGE_BANDS", "GuidanceEngine", "band_for_label", "resolve_age_band"]
