"""Canonical months-old to AgeBand mapping. All guidance and eligibility lookups go through here."""

from baby_meal_planner.errors import InvalidInputError
from baby_meal_planner.models.recipe import AgeBand

AGE_BANDS: tuple[AgeBand, ...] = tuple(AgeBand)


def resolve_age_band(age_months: int, *, ceiling: AgeBand | None = None) -> AgeBand:
    """
    Map months old to its band. Ages below the first band clamp to the first,
    ages at or past 24 land in the open-ended last band.
    ceiling: explicit truncation for callers with a coarser bucket set.
    """
    if isinstance(age_months, bool) or not isinstance(age_months, int):
        raise InvalidInputError(f"Age in months must be an integer, got {age_months!r}")
    if age_months < 0:
        raise InvalidInputError(f"Age in months cannot be negative: {age_months}")

    band = AGE_BANDS[0]
    for candidate in AGE_BANDS:
        upper = candidate.max_months
        if candidate.min_months <= age_months and (upper is None or age_months < upper):
            band = candidate
            break

    if ceiling is not None and band.order > ceiling.order:
        return ceiling
    return band


def band_for_label(text: str) -> AgeBand:
    """Parse '6-8' or '6-8 months'."""
    value = (text or "").strip().removesuffix("months").strip()
    try:
        return AgeBand(value)
    except ValueError:
        raise InvalidInputError(f"Unknown age band: {text!r}") from None
