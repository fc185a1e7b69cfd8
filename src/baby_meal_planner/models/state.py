"""Aggregate planner state."""

from pydantic import BaseModel, ConfigDict, Field, model_validator

from baby_meal_planner.models.plan import DAYS_IN_WEEK, DayPlan
from baby_meal_planner.models.recipe import Recipe


class BabyProfile(BaseModel):
    """The child being planned for."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(default="")
    age_months: int = Field(default=0, ge=0)


class AppState(BaseModel):
    """Aggregate root. Only ever replaced by applying a command, never edited."""

    model_config = ConfigDict(frozen=True)

    baby: BabyProfile = Field(default_factory=BabyProfile)
    weekly_plan: tuple[DayPlan, ...]
    favorites: frozenset[str] = Field(default_factory=frozenset)
    catalog: tuple[Recipe, ...] = Field(default_factory=tuple)

    @model_validator(mode="after")
    def _seven_days(self) -> "AppState":
        if len(self.weekly_plan) != DAYS_IN_WEEK:
            raise ValueError(f"Weekly plan must have {DAYS_IN_WEEK} days, got {len(self.weekly_plan)}")
        return self

    @property
    def baby_age(self) -> int:
        return self.baby.age_months

    def recipe_by_id(self, recipe_id: str) -> Recipe | None:
        for recipe in self.catalog:
            if recipe.id == recipe_id:
                return recipe
        return None

    def is_favorite(self, recipe_id: str) -> bool:
        return recipe_id in self.favorites
