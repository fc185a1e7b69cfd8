"""Weekly plan store - commands, reducer, and the owned store object."""

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
from baby_meal_planner.store.planner_store import PlannerStore
from baby_meal_planner.store.reducer import apply_command, build_week, initial_state, week_start

__all__ = [
    "AddRecipeToCatalog",
    "AssignRecipe",
    "ClearSlot",
    "Command",
    "PlannerStore",
    "ReanchorWeek",
    "SetSlotTime",
    "ToggleCompletion",
    "ToggleFavorite",
    "UpdateBabyProfile",
    "apply_command",
    "build_week",
    "initial_state",
    "week_start",
]
