from datetime import date

import pytest

from baby_meal_planner.models import (
    AgeBand,
    AppState,
    BabyProfile,
    Ingredient,
    IngredientCategory,
    MealType,
    Recipe,
)
from baby_meal_planner.store import initial_state

# A Wednesday; its week starts Monday 2026-10-19
TODAY = date(2026, 10, 21)
MONDAY = date(2026, 10, 19)


@pytest.fixture
def avocado_smash() -> Recipe:
    return Recipe(
        id="r1",
        title="Avocado & Banana Smash",
        full_description="Creamy healthy fats, no cooking required.",
        age_groups={AgeBand.M4_6, AgeBand.M6_8, AgeBand.M8_10},
        meal_type=MealType.LUNCH,
        ingredients=[
            Ingredient(name="Avocado", amount="1/2 ripe", category=IngredientCategory.PRODUCE),
            Ingredient(name="Banana", amount="1/2 ripe", category=IngredientCategory.PRODUCE),
        ],
    )


@pytest.fixture
def muffins() -> Recipe:
    return Recipe(
        id="r2",
        title="Blueberry Oat Muffins",
        full_description="Sugar-free muffins sweetened only with fruit.",
        age_groups={AgeBand.M8_10, AgeBand.M10_12},
        meal_type=MealType.SNACK,
        ingredients=[
            Ingredient(name="Oats", amount="1 cup", category=IngredientCategory.PANTRY),
            Ingredient(name="Banana", amount="1 mashed", category=IngredientCategory.PRODUCE),
            Ingredient(name="Egg", amount="1", category=IngredientCategory.PROTEIN),
        ],
    )


@pytest.fixture
def yogurt_swirl() -> Recipe:
    return Recipe(
        id="r3",
        title="Yogurt & Berry Swirl",
        full_description="Full-fat Greek yogurt with stewed berries. Not dairy-free.",
        age_groups={AgeBand.M6_8, AgeBand.M24_PLUS},
        meal_type=MealType.BREAKFAST,
        ingredients=[
            Ingredient(name="Greek Yogurt", amount="1/2 cup", category=IngredientCategory.DAIRY),
            Ingredient(name="Strawberries", amount="3", category=IngredientCategory.PRODUCE),
        ],
    )


@pytest.fixture
def catalog(avocado_smash: Recipe, muffins: Recipe, yogurt_swirl: Recipe) -> tuple[Recipe, ...]:
    return (avocado_smash, muffins, yogurt_swirl)


@pytest.fixture
def state(catalog: tuple[Recipe, ...]) -> AppState:
    return initial_state(TODAY, catalog, baby=BabyProfile(name="Leo", age_months=7))
