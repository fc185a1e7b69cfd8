"""Business logic services."""

from baby_meal_planner.services.planner_service import PlannerService, create_planner_service
from baby_meal_planner.services.shopping_list import (
    ShoppingItem,
    aggregate_shopping_list,
    ingredients_by_category,
    is_empty,
)

__all__ = [
    "PlannerService",
    "ShoppingItem",
    "aggregate_shopping_list",
    "create_planner_service",
    "ingredients_by_category",
    "is_empty",
]
