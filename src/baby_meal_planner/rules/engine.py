"""Guidance engine - age-appropriate stage info, milestones, and ingredient prep."""

import logging
from typing import Any, Iterable

from pydantic import ValidationError

from baby_meal_planner.catalog.search import FilterQuery, filter_recipes
from baby_meal_planner.config import get_guidance_data
from baby_meal_planner.models import (
    DEFAULT_MEAL_TIMES,
    AgeBand,
    DevelopmentStage,
    IngredientGuide,
    MealType,
    Milestone,
    Recipe,
)
from baby_meal_planner.rules.age_bands import AGE_BANDS, band_for_label, resolve_age_band

logger = logging.getLogger(__name__)


class GuidanceEngine:
    """Looks up static guidance by age. Every age goes through resolve_age_band."""

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self._data = get_guidance_data() if data is None else data
        self._stages = self._load_stages()
        self._milestones = sorted(
            (Milestone.model_validate(m) for m in self._data.get("milestones", [])),
            key=lambda m: m.month,
        )
        self._guides = [IngredientGuide.model_validate(g) for g in self._data.get("ingredient_guides", [])]

    def _load_stages(self) -> dict[AgeBand, DevelopmentStage]:
        stages: dict[AgeBand, DevelopmentStage] = {}
        for key, raw in (self._data.get("development_stages") or {}).items():
            try:
                stages[band_for_label(str(key))] = DevelopmentStage.model_validate(raw)
            except (ValueError, ValidationError) as e:
                logger.warning("Skipping development stage %s: %s", key, e)
        return stages

    def default_meal_times(self) -> dict[MealType, str]:
        times = dict(DEFAULT_MEAL_TIMES)
        for key, value in (self._data.get("default_meal_times") or {}).items():
            try:
                times[MealType(key)] = str(value)
            except ValueError:
                logger.warning("Unknown meal type in default_meal_times: %s", key)
        return times

    def stage_ceiling(self) -> AgeBand | None:
        """Highest band that has stage info."""
        covered = [b for b in AGE_BANDS if b in self._stages]
        return covered[-1] if covered else None

    def development_stage(self, age_months: int) -> tuple[AgeBand, DevelopmentStage] | None:
        """Stage for the age. Older children get the oldest stage on file."""
        band = resolve_age_band(age_months)
        if band in self._stages:
            return band, self._stages[band]
        ceiling = self.stage_ceiling()
        if ceiling is None:
            return None
        truncated = resolve_age_band(age_months, ceiling=ceiling)
        while truncated not in self._stages and truncated.order > 0:
            truncated = AGE_BANDS[truncated.order - 1]
        if truncated not in self._stages:
            return None
        logger.info("No stage info for %s, using %s", band.value, truncated.value)
        return truncated, self._stages[truncated]

    def milestones(self, age_months: int) -> list[Milestone]:
        """All milestones, unlocked once the child has reached the month."""
        resolve_age_band(age_months)
        return [m.model_copy(update={"unlocked": m.month <= age_months}) for m in self._milestones]

    def next_milestone(self, age_months: int) -> Milestone | None:
        resolve_age_band(age_months)
        if not self._milestones:
            return None
        for m in self._milestones:
            if m.month > age_months:
                return m
        return self._milestones[-1]

    def milestone_progress(self, age_months: int) -> float:
        """Percent of the way to the next milestone, capped at 100."""
        nxt = self.next_milestone(age_months)
        if nxt is None or nxt.month <= 0:
            return 100.0
        return min(100.0, age_months / nxt.month * 100)

    def ingredient_guides(self, search: str = "") -> list[IngredientGuide]:
        needle = (search or "").strip().lower()
        return [g for g in self._guides if needle in g.name.lower()]

    def preparation_for(self, guide: IngredientGuide, age_months: int) -> str | None:
        return guide.preparation.get(resolve_age_band(age_months).value)

    def eligible_recipes(self, catalog: Iterable[Recipe], age_months: int) -> list[Recipe]:
        return filter_recipes(catalog, FilterQuery(age_band=resolve_age_band(age_months)))
