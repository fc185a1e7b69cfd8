"""Pure state transitions for the weekly plan store."""

import logging
from datetime import date, timedelta
from typing import Callable, Iterable

from baby_meal_planner.catalog.recipes import SeedAssignment
from baby_meal_planner.errors import DuplicateIdError, InvalidInputError
from baby_meal_planner.models import (
    AppState,
    BabyProfile,
    DayPlan,
    MealSlot,
    MealType,
    Recipe,
    empty_day,
)
from baby_meal_planner.models.plan import DAYS_IN_WEEK, TIME_PATTERN
from baby_meal_planner.store.commands import (
    AddRecipeToCatalog,
    AssignRecipe,
    ClearSlot,
    Command,
    ReanchorWeek,
    SetSlotTime,
    ToggleCompletion,
    ToggleFavorite,
    UpdateBabyProfile,
)

logger = logging.getLogger(__name__)


def week_start(today: date) -> date:
    """Monday of the week containing today."""
    return today - timedelta(days=today.weekday())


def build_week(
    start: date,
    default_times: dict[MealType, str] | None = None,
) -> tuple[DayPlan, ...]:
    """Seven empty days from start."""
    return tuple(empty_day(start + timedelta(days=i), default_times) for i in range(DAYS_IN_WEEK))


def initial_state(
    today: date,
    catalog: Iterable[Recipe],
    baby: BabyProfile | None = None,
    seed_plan: Iterable[SeedAssignment] = (),
    default_times: dict[MealType, str] | None = None,
) -> AppState:
    """Starting state for the week containing today, with seed assignments applied."""
    catalog = tuple(catalog)
    state = AppState(
        baby=baby or BabyProfile(),
        weekly_plan=build_week(week_start(today), default_times),
        catalog=catalog,
    )
    by_id = {r.id: r for r in catalog}
    for seed in seed_plan:
        recipe = by_id.get(seed.recipe_id)
        if recipe is None:
            logger.warning("Seed plan references unknown recipe %s", seed.recipe_id)
            continue
        day = state.weekly_plan[seed.day].date
        state = apply_command(state, AssignRecipe(day=day, meal_type=seed.meal_type, recipe=recipe))
    return state


def _update_slot(
    state: AppState,
    day: date,
    meal_type: MealType,
    change: Callable[[MealSlot], MealSlot],
) -> AppState:
    """Replace one slot. Unknown day leaves the state untouched."""
    for index, day_plan in enumerate(state.weekly_plan):
        if not day_plan.matches(day):
            continue
        new_day = day_plan.with_slot(meal_type, change(day_plan.slot(meal_type)))
        plan = state.weekly_plan[:index] + (new_day,) + state.weekly_plan[index + 1:]
        return state.model_copy(update={"weekly_plan": plan})
    logger.info("No day %s in the current week, ignoring %s update", day, meal_type.value)
    return state


def apply_command(state: AppState, command: Command) -> AppState:
    """
    Apply one command and return the resulting state. The input state is never modified.

    Raises InvalidInputError for a malformed time or age, DuplicateIdError when
    adding a recipe whose id is already in the catalog.
    """
    if isinstance(command, AssignRecipe):
        return _update_slot(
            state, command.day, command.meal_type,
            lambda s: s.model_copy(update={"recipe": command.recipe}),
        )

    if isinstance(command, ClearSlot):
        return _update_slot(
            state, command.day, command.meal_type,
            lambda s: s.model_copy(update={"recipe": None}),
        )

    if isinstance(command, ToggleCompletion):
        return _update_slot(
            state, command.day, command.meal_type,
            lambda s: s.model_copy(update={"completed": not s.completed}),
        )

    if isinstance(command, SetSlotTime):
        if not TIME_PATTERN.match(command.time):
            raise InvalidInputError(f"Time must be HH:MM, got {command.time!r}")
        return _update_slot(
            state, command.day, command.meal_type,
            lambda s: s.model_copy(update={"scheduled_time": command.time}),
        )

    if isinstance(command, ToggleFavorite):
        if command.recipe_id in state.favorites:
            favorites = state.favorites - {command.recipe_id}
        else:
            favorites = state.favorites | {command.recipe_id}
        return state.model_copy(update={"favorites": favorites})

    if isinstance(command, AddRecipeToCatalog):
        if any(r.id == command.recipe.id for r in state.catalog):
            raise DuplicateIdError(command.recipe.id)
        return state.model_copy(update={"catalog": state.catalog + (command.recipe,)})

    if isinstance(command, ReanchorWeek):
        week = build_week(week_start(command.today), command.default_times)
        logger.info("Week re-anchored to %s", week[0].date)
        return state.model_copy(update={"weekly_plan": week})

    if isinstance(command, UpdateBabyProfile):
        update: dict = {}
        if command.name is not None:
            update["name"] = command.name
        if command.age_months is not None:
            if command.age_months < 0:
                raise InvalidInputError(f"Age in months cannot be negative: {command.age_months}")
            update["age_months"] = command.age_months
        return state.model_copy(update={"baby": state.baby.model_copy(update=update)})

    raise TypeError(f"Unknown command: {type(command).__name__}")
