"""Recipe catalog and search."""

from baby_meal_planner.catalog.recipes import (
    SeedAssignment,
    build_recipe,
    find_recipe,
    load_seed_plan,
    load_seed_recipes,
    timestamp_id,
)
from baby_meal_planner.catalog.search import (
    KNOWN_ALLERGENS,
    FilterQuery,
    filter_recipes,
)

__all__ = [
    "KNOWN_ALLERGENS",
    "FilterQuery",
    "SeedAssignment",
    "build_recipe",
    "filter_recipes",
    "find_recipe",
    "load_seed_plan",
    "load_seed_recipes",
    "timestamp_id",
]
