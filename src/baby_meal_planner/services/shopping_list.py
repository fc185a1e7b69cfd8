"""Shopping list derived from the weekly plan."""

from datetime import date
from typing import Iterable

from pydantic import BaseModel, ConfigDict

from baby_meal_planner.models import DayPlan, Ingredient, IngredientCategory, MealType


class ShoppingItem(BaseModel):
    """One ingredient line and the slot it came from."""

    model_config = ConfigDict(frozen=True)

    ingredient: Ingredient
    recipe_id: str
    recipe_title: str
    day: date
    meal_type: MealType


ShoppingList = dict[IngredientCategory, list[ShoppingItem]]


def aggregate_shopping_list(plan: Iterable[DayPlan]) -> ShoppingList:
    """
    Group every assigned recipe's ingredients by category.

    Walks days in order, then slots in MealType order, then each recipe's own
    ingredient order. Every category is present, empty when nothing needs buying.
    Entries are never merged: the same ingredient in two recipes is listed twice.
    """
    result: ShoppingList = {category: [] for category in IngredientCategory}
    for day_plan in plan:
        for meal_type, slot in day_plan.ordered_slots():
            if slot.recipe is None:
                continue
            for ingredient in slot.recipe.ingredients:
                result[ingredient.category].append(
                    ShoppingItem(
                        ingredient=ingredient,
                        recipe_id=slot.recipe.id,
                        recipe_title=slot.recipe.title,
                        day=day_plan.date,
                        meal_type=meal_type,
                    )
                )
    return result


def ingredients_by_category(shopping_list: ShoppingList) -> dict[IngredientCategory, list[Ingredient]]:
    return {category: [item.ingredient for item in items] for category, items in shopping_list.items()}


def is_empty(shopping_list: ShoppingList) -> bool:
    return all(not items for items in shopping_list.values())
