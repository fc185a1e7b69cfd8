"""Data models."""

from baby_meal_planner.models.guidance import DevelopmentStage, IngredientGuide, Milestone
from baby_meal_planner.models.plan import (
    DEFAULT_MEAL_TIMES,
    DayPlan,
    MealSlot,
    calendar_day,
    empty_day,
)
from baby_meal_planner.models.recipe import (
    AgeBand,
    Ingredient,
    IngredientCategory,
    MealType,
    Recipe,
    RecipeDraft,
)
from baby_meal_planner.models.state import AppState, BabyProfile

__all__ = [
    "DEFAULT_MEAL_TIMES",
    "AgeBand",
    "AppState",
    "BabyProfile",
    "DayPlan",
    "DevelopmentStage",
    "Ingredient",
    "IngredientCategory",
    "IngredientGuide",
    "MealSlot",
    "MealType",
    "Milestone",
    "Recipe",
    "RecipeDraft",
    "calendar_day",
    "empty_day",
]
