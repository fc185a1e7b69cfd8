"""Planner commands. Each one is a request for exactly one state transition."""

from datetime import date, datetime, time
from typing import Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from baby_meal_planner.models import MealType, Recipe, calendar_day


class _Command(BaseModel):
    model_config = ConfigDict(frozen=True)


class _SlotCommand(_Command):
    """Addresses one (day, meal type) slot. Time-of-day on the date is ignored."""

    day: date
    meal_type: MealType

    @field_validator("day", mode="before")
    @classmethod
    def _calendar_day(cls, v):
        return calendar_day(v) if isinstance(v, (date, datetime)) else v


class AssignRecipe(_SlotCommand):
    recipe: Recipe


class ClearSlot(_SlotCommand):
    pass


class ToggleCompletion(_SlotCommand):
    pass


class SetSlotTime(_SlotCommand):
    """time is checked for HH:MM when applied."""

    time: str

    @field_validator("time", mode="before")
    @classmethod
    def _format_time(cls, v):
        if isinstance(v, time):
            return v.strftime("%H:%M")
        return v


class ToggleFavorite(_Command):
    recipe_id: str


class AddRecipeToCatalog(_Command):
    recipe: Recipe


class ReanchorWeek(_Command):
    """Rebuild the seven days around the week containing today."""

    today: date
    default_times: dict[MealType, str] | None = Field(default=None)

    @field_validator("today", mode="before")
    @classmethod
    def _calendar_day(cls, v):
        return calendar_day(v) if isinstance(v, (date, datetime)) else v


class UpdateBabyProfile(_Command):
    name: str | None = Field(default=None)
    age_months: int | None = Field(default=None)


Command = Union[
    AssignRecipe,
    ClearSlot,
    ToggleCompletion,
    SetSlotTime,
    ToggleFavorite,
    AddRecipeToCatalog,
    ReanchorWeek,
    UpdateBabyProfile,
]
