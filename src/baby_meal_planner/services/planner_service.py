"""Planner service - business logic layer between transport and the store."""

import logging
from datetime import date
from typing import Any, Callable, Iterable

from baby_meal_planner.catalog import (
    FilterQuery,
    build_recipe,
    filter_recipes,
    find_recipe,
    load_seed_plan,
    load_seed_recipes,
    timestamp_id,
)
from baby_meal_planner.config import Settings, get_guidance_data, get_recipe_data, get_settings
from baby_meal_planner.models import (
    AgeBand,
    AppState,
    BabyProfile,
    DayPlan,
    MealType,
    Recipe,
    RecipeDraft,
)
from baby_meal_planner.rules import GuidanceEngine
from baby_meal_planner.services.shopping_list import ShoppingList, aggregate_shopping_list
from baby_meal_planner.store import (
    AddRecipeToCatalog,
    AssignRecipe,
    ClearSlot,
    PlannerStore,
    ReanchorWeek,
    SetSlotTime,
    ToggleCompletion,
    ToggleFavorite,
    UpdateBabyProfile,
    initial_state,
)

logger = logging.getLogger(__name__)


class PlannerService:
    """Turns view-level requests (ids, filter selections) into store commands and views."""

    def __init__(
        self,
        store: PlannerStore,
        guidance: GuidanceEngine,
        *,
        id_factory: Callable[[], str] = timestamp_id,
        default_image: str | None = None,
    ) -> None:
        self._store = store
        self._guidance = guidance
        self._id_factory = id_factory
        self._default_image = default_image

    @property
    def state(self) -> AppState:
        return self._store.state

    @property
    def guidance(self) -> GuidanceEngine:
        return self._guidance

    # --- Plan -------------------------------------------------------------
    def assign(self, day: date, meal_type: MealType, recipe_id: str) -> AppState:
        recipe = find_recipe(self.state.catalog, recipe_id)
        return self._store.dispatch(AssignRecipe(day=day, meal_type=meal_type, recipe=recipe))

    def clear(self, day: date, meal_type: MealType) -> AppState:
        return self._store.dispatch(ClearSlot(day=day, meal_type=meal_type))

    def toggle_completion(self, day: date, meal_type: MealType) -> AppState:
        return self._store.dispatch(ToggleCompletion(day=day, meal_type=meal_type))

    def set_time(self, day: date, meal_type: MealType, time: str) -> AppState:
        return self._store.dispatch(SetSlotTime(day=day, meal_type=meal_type, time=time))

    def reanchor(self, today: date | None = None) -> AppState:
        """Move the plan to the week containing today (clock date by default)."""
        today = today or self._store.clock()
        return self._store.dispatch(
            ReanchorWeek(today=today, default_times=self._guidance.default_meal_times())
        )

    def day(self, day: date) -> DayPlan | None:
        return self._store.day_for(day)

    def today(self) -> DayPlan | None:
        return self._store.today_plan()

    def shopping_list(self) -> ShoppingList:
        return aggregate_shopping_list(self.state.weekly_plan)

    # --- Catalog ----------------------------------------------------------
    def recipe(self, recipe_id: str) -> Recipe:
        return find_recipe(self.state.catalog, recipe_id)

    def add_recipe(self, draft: RecipeDraft) -> Recipe:
        """Id is picked against the catalog the recipe is added to."""
        state = self._store.dispatch_with(
            lambda current: AddRecipeToCatalog(
                recipe=build_recipe(
                    draft,
                    current.catalog,
                    id_factory=self._id_factory,
                    default_image=self._default_image,
                )
            )
        )
        recipe = state.catalog[-1]
        logger.info("Added recipe %s (%s)", recipe.id, recipe.title)
        return recipe

    def toggle_favorite(self, recipe_id: str) -> bool:
        """Returns whether the recipe is a favorite afterwards."""
        state = self._store.dispatch(ToggleFavorite(recipe_id=recipe_id))
        return state.is_favorite(recipe_id)

    def search(
        self,
        text: str | None = None,
        age_band: AgeBand | None = None,
        meal_type: MealType | None = None,
        favorites_only: bool = False,
        exclude: Iterable[str] = (),
    ) -> list[Recipe]:
        state = self.state
        query = FilterQuery(
            text=text,
            age_band=age_band,
            meal_type=meal_type,
            favorites_only=favorites_only,
            excluded_allergen_terms=frozenset(exclude),
            favorites=state.favorites,
        )
        return filter_recipes(state.catalog, query)

    # --- Baby & guidance --------------------------------------------------
    def update_baby(self, name: str | None = None, age_months: int | None = None) -> BabyProfile:
        return self._store.dispatch(UpdateBabyProfile(name=name, age_months=age_months)).baby

    def guidance_summary(self) -> dict[str, Any]:
        """Stage, milestones and age-eligible recipes for the current child."""
        state = self.state
        age = state.baby_age
        stage = self._guidance.development_stage(age)
        nxt = self._guidance.next_milestone(age)
        return {
            "age_months": age,
            "stage_band": stage[0] if stage else None,
            "stage": stage[1] if stage else None,
            "next_milestone": nxt,
            "milestone_progress": self._guidance.milestone_progress(age),
            "milestones": self._guidance.milestones(age),
            "eligible_recipe_ids": [r.id for r in self._guidance.eligible_recipes(state.catalog, age)],
        }


def create_planner_service(
    settings: Settings | None = None,
    clock: Callable[[], date] = date.today,
) -> PlannerService:
    """Build store and guidance from settings and bundled reference data."""
    settings = settings or get_settings()
    config_dir = str(settings.config_dir) if settings.config_dir else ""
    recipe_data = get_recipe_data(config_dir)
    guidance = GuidanceEngine(get_guidance_data(config_dir))
    state = initial_state(
        today=clock(),
        catalog=load_seed_recipes(recipe_data),
        baby=BabyProfile(name=settings.baby_name, age_months=settings.baby_age_months),
        seed_plan=load_seed_plan(recipe_data),
        default_times=guidance.default_meal_times(),
    )
    logger.info(
        "Planner ready: week of %s, %d recipes", state.weekly_plan[0].date, len(state.catalog)
    )
    return PlannerService(
        PlannerStore(state, clock=clock), guidance, default_image=settings.default_image_url
    )
