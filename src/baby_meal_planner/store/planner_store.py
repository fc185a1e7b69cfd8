"""Owned planner store - single writer, any number of readers."""

import logging
import threading
from datetime import date, datetime
from typing import Callable

from baby_meal_planner.models import AppState, DayPlan, calendar_day
from baby_meal_planner.store.commands import Command
from baby_meal_planner.store.reducer import apply_command

logger = logging.getLogger(__name__)


class PlannerStore:
    """
    Holds the current AppState for one application session.

    dispatch() applies one command at a time and swaps in the new state; readers
    holding an older state keep a consistent snapshot since states are never edited.
    """

    def __init__(self, state: AppState, clock: Callable[[], date] = date.today) -> None:
        self._state = state
        self._clock = clock
        self._lock = threading.Lock()

    @property
    def state(self) -> AppState:
        return self._state

    @property
    def clock(self) -> Callable[[], date]:
        return self._clock

    def dispatch(self, command: Command) -> AppState:
        """Apply command. Errors propagate and leave the current state in place."""
        return self.dispatch_with(lambda _state: command)

    def dispatch_with(self, make_command: Callable[[AppState], Command]) -> AppState:
        """
        Build the command from the current state and apply it under the same lock,
        for commands that depend on what is already stored (e.g. a fresh recipe id).
        """
        with self._lock:
            command = make_command(self._state)
            new_state = apply_command(self._state, command)
            if new_state is not self._state:
                logger.info("Applied %s", type(command).__name__)
            self._state = new_state
            return new_state

    def day_for(self, day: date | datetime) -> DayPlan | None:
        """Stored day matching the calendar day, if it is in the current week."""
        target = calendar_day(day)
        for day_plan in self._state.weekly_plan:
            if day_plan.date == target:
                return day_plan
        return None

    def today_plan(self) -> DayPlan | None:
        return self.day_for(self._clock())
