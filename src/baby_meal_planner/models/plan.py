"""Weekly plan data model."""

import re
from datetime import date, datetime
from types import MappingProxyType
from typing import Mapping

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator, model_validator

from baby_meal_planner.models.recipe import MealType, Recipe

TIME_PATTERN = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")

DEFAULT_MEAL_TIMES: dict[MealType, str] = {
    MealType.BREAKFAST: "08:00",
    MealType.LUNCH: "12:00",
    MealType.DINNER: "17:30",
    MealType.SNACK: "10:00",
}

DAYS_IN_WEEK = 7


def calendar_day(value: date | datetime) -> date:
    """Strip the time-of-day so dates compare by civil day."""
    if isinstance(value, datetime):
        return value.date()
    return value


class MealSlot(BaseModel):
    """One (date, meal type) slot. Holds the recipe object itself, never a copy."""

    model_config = ConfigDict(frozen=True)

    recipe: Recipe | None = Field(default=None)
    scheduled_time: str = Field(default="12:00", description="HH:MM")
    completed: bool = Field(default=False)

    @field_validator("scheduled_time")
    @classmethod
    def _check_time(cls, v: str) -> str:
        if not TIME_PATTERN.match(v):
            raise ValueError(f"Expected HH:MM, got {v!r}")
        return v


class DayPlan(BaseModel):
    """A calendar day with all four meal slots."""

    model_config = ConfigDict(frozen=True)

    date: date
    meals: Mapping[MealType, MealSlot]

    @field_validator("date", mode="before")
    @classmethod
    def _drop_time(cls, v):
        return calendar_day(v) if isinstance(v, (date, datetime)) else v

    @field_validator("meals")
    @classmethod
    def _read_only_meals(cls, v: Mapping[MealType, MealSlot]) -> Mapping[MealType, MealSlot]:
        return MappingProxyType({t: v[t] for t in MealType if t in v})

    @field_serializer("meals")
    def _dump_meals(self, meals: Mapping[MealType, MealSlot]):
        return {t.value: slot for t, slot in meals.items()}

    @model_validator(mode="after")
    def _all_slots_present(self) -> "DayPlan":
        missing = [t.value for t in MealType if t not in self.meals]
        if missing:
            raise ValueError(f"Day {self.date} is missing slots: {', '.join(missing)}")
        return self

    def matches(self, other: date | datetime) -> bool:
        return self.date == calendar_day(other)

    def slot(self, meal_type: MealType) -> MealSlot:
        return self.meals[meal_type]

    def ordered_slots(self) -> list[tuple[MealType, MealSlot]]:
        """Slots in MealType declaration order."""
        return [(t, self.meals[t]) for t in MealType]

    def with_slot(self, meal_type: MealType, slot: MealSlot) -> "DayPlan":
        """Copy of the day with one slot replaced."""
        return DayPlan(date=self.date, meals={**self.meals, meal_type: slot})


def empty_day(day: date, default_times: dict[MealType, str] | None = None) -> DayPlan:
    """Day with every slot empty at its default time."""
    times = default_times or DEFAULT_MEAL_TIMES
    return DayPlan(
        date=day,
        meals={t: MealSlot(scheduled_time=times.get(t, DEFAULT_MEAL_TIMES[t])) for t in MealType},
    )
