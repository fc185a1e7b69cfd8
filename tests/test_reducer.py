from datetime import date, datetime, time

import pytest

from baby_meal_planner.catalog import SeedAssignment
from baby_meal_planner.errors import DuplicateIdError, InvalidInputError
from baby_meal_planner.models import AppState, MealSlot, MealType, Recipe
from baby_meal_planner.services import aggregate_shopping_list
from baby_meal_planner.store import (
    AddRecipeToCatalog,
    AssignRecipe,
    ClearSlot,
    ReanchorWeek,
    SetSlotTime,
    ToggleCompletion,
    ToggleFavorite,
    UpdateBabyProfile,
    apply_command,
    build_week,
    initial_state,
    week_start,
)

from conftest import MONDAY, TODAY


def test_week_starts_on_monday() -> None:
    assert week_start(TODAY) == MONDAY
    assert week_start(MONDAY) == MONDAY
    assert week_start(date(2026, 10, 25)) == MONDAY  # Sunday


def test_initial_week_has_seven_days_with_all_slots(state: AppState) -> None:
    days = [d.date for d in state.weekly_plan]
    assert days == [date(2026, 10, 19 + i) for i in range(7)]
    for day in state.weekly_plan:
        assert set(day.meals) == set(MealType)
        assert all(slot.recipe is None and not slot.completed for slot in day.meals.values())
    monday = state.weekly_plan[0].meals
    assert monday[MealType.BREAKFAST].scheduled_time == "08:00"
    assert monday[MealType.LUNCH].scheduled_time == "12:00"
    assert monday[MealType.DINNER].scheduled_time == "17:30"
    assert monday[MealType.SNACK].scheduled_time == "10:00"


def test_seed_plan_assigns_known_recipes_and_skips_unknown(catalog) -> None:
    seeds = [
        SeedAssignment(day=0, meal_type=MealType.LUNCH, recipe_id="r1"),
        SeedAssignment(day=1, meal_type=MealType.DINNER, recipe_id="missing"),
    ]
    state = initial_state(TODAY, catalog, seed_plan=seeds)
    assert state.weekly_plan[0].meals[MealType.LUNCH].recipe.id == "r1"
    assert state.weekly_plan[1].meals[MealType.DINNER].recipe is None


def test_assign_sets_recipe_by_reference(state: AppState, avocado_smash: Recipe) -> None:
    new = apply_command(state, AssignRecipe(day=MONDAY, meal_type=MealType.LUNCH, recipe=avocado_smash))
    slot = new.weekly_plan[0].meals[MealType.LUNCH]
    assert slot.recipe is avocado_smash
    assert slot.scheduled_time == "12:00"
    # Previous state untouched
    assert state.weekly_plan[0].meals[MealType.LUNCH].recipe is None
    # Other days are shared, not rebuilt
    assert new.weekly_plan[1] is state.weekly_plan[1]


def test_day_meals_cannot_be_edited_in_place(state: AppState, avocado_smash: Recipe) -> None:
    new = apply_command(state, AssignRecipe(day=MONDAY, meal_type=MealType.LUNCH, recipe=avocado_smash))
    for day in (state.weekly_plan[0], new.weekly_plan[0], state.weekly_plan[2]):
        with pytest.raises(TypeError):
            day.meals[MealType.LUNCH] = MealSlot(recipe=avocado_smash)
        with pytest.raises(TypeError):
            del day.meals[MealType.SNACK]
    assert state.weekly_plan[0].slot(MealType.LUNCH).recipe is None
    assert [t for t, _ in state.weekly_plan[2].ordered_slots()] == list(MealType)
    assert aggregate_shopping_list(state.weekly_plan) == aggregate_shopping_list(build_week(MONDAY))
    assert new.weekly_plan[0].model_dump(mode="json")["meals"]["Lunch"]["recipe"]["id"] == "r1"


def test_date_matching_ignores_time_of_day(state: AppState, avocado_smash: Recipe) -> None:
    evening = datetime(2026, 10, 20, 21, 45)
    new = apply_command(state, AssignRecipe(day=evening, meal_type=MealType.DINNER, recipe=avocado_smash))
    assert new.weekly_plan[1].meals[MealType.DINNER].recipe is avocado_smash


def test_assign_then_clear_preserves_time_and_completion(state: AppState, avocado_smash: Recipe) -> None:
    s = apply_command(state, SetSlotTime(day=MONDAY, meal_type=MealType.LUNCH, time="12:45"))
    s = apply_command(s, ToggleCompletion(day=MONDAY, meal_type=MealType.LUNCH))
    s = apply_command(s, AssignRecipe(day=MONDAY, meal_type=MealType.LUNCH, recipe=avocado_smash))
    s = apply_command(s, ClearSlot(day=MONDAY, meal_type=MealType.LUNCH))
    slot = s.weekly_plan[0].meals[MealType.LUNCH]
    assert slot.recipe is None
    assert slot.scheduled_time == "12:45"
    assert slot.completed is True


def test_toggle_completion_flips(state: AppState) -> None:
    once = apply_command(state, ToggleCompletion(day=MONDAY, meal_type=MealType.SNACK))
    twice = apply_command(once, ToggleCompletion(day=MONDAY, meal_type=MealType.SNACK))
    assert once.weekly_plan[0].meals[MealType.SNACK].completed is True
    assert twice.weekly_plan[0].meals[MealType.SNACK].completed is False


@pytest.mark.parametrize(
    "command",
    (
        ClearSlot(day=date(2026, 10, 26), meal_type=MealType.LUNCH),
        ToggleCompletion(day=date(2026, 10, 18), meal_type=MealType.LUNCH),
        SetSlotTime(day=date(2025, 1, 1), meal_type=MealType.LUNCH, time="09:00"),
    ),
)
def test_out_of_week_date_is_a_noop(state: AppState, command) -> None:
    assert apply_command(state, command) is state


def test_assign_out_of_week_is_a_noop(state: AppState, avocado_smash: Recipe) -> None:
    command = AssignRecipe(day=date(2026, 11, 2), meal_type=MealType.LUNCH, recipe=avocado_smash)
    assert apply_command(state, command) is state


def test_set_slot_time_accepts_time_objects(state: AppState) -> None:
    new = apply_command(state, SetSlotTime(day=MONDAY, meal_type=MealType.DINNER, time=time(18, 5)))
    assert new.weekly_plan[0].meals[MealType.DINNER].scheduled_time == "18:05"


@pytest.mark.parametrize("bad", ("7:00", "24:00", "12:60", "noon", ""))
def test_set_slot_time_rejects_malformed(state: AppState, bad: str) -> None:
    with pytest.raises(InvalidInputError):
        apply_command(state, SetSlotTime(day=MONDAY, meal_type=MealType.DINNER, time=bad))


def test_toggle_favorite_twice_restores(state: AppState) -> None:
    once = apply_command(state, ToggleFavorite(recipe_id="r1"))
    assert once.favorites == frozenset({"r1"})
    twice = apply_command(once, ToggleFavorite(recipe_id="r1"))
    assert twice.favorites == state.favorites


def test_favorite_does_not_need_catalog_entry(state: AppState) -> None:
    new = apply_command(state, ToggleFavorite(recipe_id="gone"))
    assert new.is_favorite("gone")


def test_add_recipe_appends(state: AppState) -> None:
    recipe = Recipe(id="new", title="Lentil Cakes", meal_type=MealType.DINNER)
    new = apply_command(state, AddRecipeToCatalog(recipe=recipe))
    assert new.catalog[-1] is recipe
    assert len(new.catalog) == len(state.catalog) + 1
    assert len(state.catalog) == 3


def test_add_recipe_duplicate_id(state: AppState) -> None:
    recipe = Recipe(id="r1", title="Impostor", meal_type=MealType.DINNER)
    with pytest.raises(DuplicateIdError) as excinfo:
        apply_command(state, AddRecipeToCatalog(recipe=recipe))
    assert excinfo.value.recipe_id == "r1"


def test_reanchor_moves_week_and_clears_slots(state: AppState, avocado_smash: Recipe) -> None:
    s = apply_command(state, AssignRecipe(day=MONDAY, meal_type=MealType.LUNCH, recipe=avocado_smash))
    s = apply_command(s, ToggleFavorite(recipe_id="r1"))
    moved = apply_command(s, ReanchorWeek(today=datetime(2026, 10, 29, 7, 30)))
    assert moved.weekly_plan[0].date == date(2026, 10, 26)
    assert len(moved.weekly_plan) == 7
    assert all(slot.recipe is None for d in moved.weekly_plan for slot in d.meals.values())
    assert moved.favorites == s.favorites
    assert moved.catalog == s.catalog


def test_update_baby_profile(state: AppState) -> None:
    new = apply_command(state, UpdateBabyProfile(age_months=9))
    assert new.baby_age == 9
    assert new.baby.name == "Leo"
    with pytest.raises(InvalidInputError):
        apply_command(state, UpdateBabyProfile(age_months=-1))


def test_state_requires_seven_days() -> None:
    with pytest.raises(ValueError):
        AppState(weekly_plan=build_week(MONDAY)[:6])
