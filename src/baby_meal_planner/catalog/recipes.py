"""Recipe catalog - seed loading, lookup, and building user-submitted recipes."""

import logging
import time
from typing import Any, Callable, Iterable

from pydantic import BaseModel, Field, ValidationError

from baby_meal_planner.config import get_recipe_data, get_settings
from baby_meal_planner.errors import RecipeNotFoundError
from baby_meal_planner.models import MealType, Recipe, RecipeDraft

logger = logging.getLogger(__name__)

DEFAULT_PREP_TIME = "15 mins"


class SeedAssignment(BaseModel):
    """Recipe placed into the starting week. day is the offset from Monday."""

    day: int = Field(..., ge=0, le=6)
    meal_type: MealType
    recipe_id: str


def load_seed_recipes(data: dict[str, Any] | None = None) -> tuple[Recipe, ...]:
    """Built-in catalog from reference data. Invalid entries are skipped."""
    data = get_recipe_data() if data is None else data
    recipes: list[Recipe] = []
    seen: set[str] = set()
    for raw in data.get("recipes", []):
        try:
            recipe = Recipe.model_validate(raw)
        except ValidationError as e:
            logger.warning("Skipping invalid seed recipe %s: %s", raw.get("id"), e)
            continue
        if recipe.id in seen:
            logger.warning("Skipping duplicate seed recipe id %s", recipe.id)
            continue
        seen.add(recipe.id)
        recipes.append(recipe)
    return tuple(recipes)


def load_seed_plan(data: dict[str, Any] | None = None) -> list[SeedAssignment]:
    """Starting-week assignments from reference data."""
    data = get_recipe_data() if data is None else data
    return [SeedAssignment.model_validate(raw) for raw in data.get("seed_plan", [])]


def find_recipe(catalog: Iterable[Recipe], recipe_id: str) -> Recipe:
    """Recipe by id or RecipeNotFoundError."""
    for recipe in catalog:
        if recipe.id == recipe_id:
            return recipe
    raise RecipeNotFoundError(recipe_id)


def timestamp_id() -> str:
    return str(int(time.time() * 1000))


def build_recipe(
    draft: RecipeDraft,
    catalog: Iterable[Recipe] = (),
    *,
    id_factory: Callable[[], str] = timestamp_id,
    default_image: str | None = None,
) -> Recipe:
    """
    Turn a submitted draft into a catalog recipe.
    Blank-name ingredients are dropped, missing text fields get defaults,
    and the generated id is suffixed until it does not collide with the catalog.
    """
    taken = {r.id for r in catalog}
    base_id = id_factory()
    recipe_id = base_id
    n = 1
    while recipe_id in taken:
        recipe_id = f"{base_id}-{n}"
        n += 1

    if default_image is None:
        default_image = get_settings().default_image_url

    return Recipe(
        id=recipe_id,
        title=draft.title.strip(),
        short_description=draft.short_description,
        full_description=draft.full_description or draft.short_description,
        image_ref=draft.image_ref or default_image,
        age_groups=frozenset(draft.age_groups),
        meal_type=draft.meal_type,
        ingredients=tuple(i for i in draft.ingredients if i.name.strip()),
        prep_time=draft.prep_time or DEFAULT_PREP_TIME,
        nutrition_highlight=draft.nutrition_highlight,
    )
