"""FastAPI application - plan, catalog, shopping list and guidance endpoints."""

import logging
from contextlib import asynccontextmanager
from datetime import date
from typing import Callable

from fastapi import Depends, FastAPI, Query, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from baby_meal_planner.catalog import KNOWN_ALLERGENS
from baby_meal_planner.config import get_settings
from baby_meal_planner.errors import DuplicateIdError, InvalidInputError, RecipeNotFoundError
from baby_meal_planner.models import AgeBand, MealType, RecipeDraft
from baby_meal_planner.services import PlannerService, create_planner_service, is_empty

logger = logging.getLogger(__name__)


class AssignRequest(BaseModel):
    recipe_id: str


class TimeRequest(BaseModel):
    time: str = Field(..., description="HH:MM")


class ReanchorRequest(BaseModel):
    today: date | None = None


class BabyRequest(BaseModel):
    name: str | None = None
    age_months: int | None = None


def get_planner(request: Request) -> PlannerService:
    return request.app.state.planner


def create_app(planner_factory: Callable[[], PlannerService] = create_planner_service) -> FastAPI:
    """Application with one planner per process session, built at startup."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Initialize and cleanup."""
        app.state.planner = planner_factory()
        yield
        app.state.planner = None

    app = FastAPI(
        title="Baby Meal Planner",
        description="Weekly meal plan, recipe catalog, shopping list and age-appropriate guidance",
        version="0.1.0",
        lifespan=lifespan,
    )

    @app.exception_handler(InvalidInputError)
    async def invalid_input(request: Request, exc: InvalidInputError) -> JSONResponse:
        logger.warning("Invalid input on %s: %s", request.url.path, exc)
        return JSONResponse(status_code=422, content={"detail": str(exc)})

    @app.exception_handler(DuplicateIdError)
    async def duplicate_id(request: Request, exc: DuplicateIdError) -> JSONResponse:
        return JSONResponse(status_code=409, content={"detail": str(exc), "recipe_id": exc.recipe_id})

    @app.exception_handler(RecipeNotFoundError)
    async def recipe_not_found(request: Request, exc: RecipeNotFoundError) -> JSONResponse:
        return JSONResponse(status_code=404, content={"detail": str(exc), "recipe_id": exc.recipe_id})

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Health check for load balancers."""
        return {"status": "ok"}

    @app.get("/state")
    def get_state(planner: PlannerService = Depends(get_planner)):
        state = planner.state
        return {
            "baby": state.baby,
            "week_start": state.weekly_plan[0].date,
            "favorites": sorted(state.favorites),
            "recipe_count": len(state.catalog),
        }

    # --- Plan -------------------------------------------------------------
    @app.get("/plan")
    def get_plan(planner: PlannerService = Depends(get_planner)):
        return planner.state.weekly_plan

    @app.get("/plan/today")
    def get_today(planner: PlannerService = Depends(get_planner)):
        """Today's slots, or null when today is outside the stored week."""
        return planner.today()

    @app.put("/plan/{day}/{meal_type}")
    def assign(day: date, meal_type: MealType, body: AssignRequest, planner: PlannerService = Depends(get_planner)):
        state = planner.assign(day, meal_type, body.recipe_id)
        return _day_or_none(state, day)

    @app.delete("/plan/{day}/{meal_type}")
    def clear(day: date, meal_type: MealType, planner: PlannerService = Depends(get_planner)):
        return _day_or_none(planner.clear(day, meal_type), day)

    @app.post("/plan/{day}/{meal_type}/toggle")
    def toggle(day: date, meal_type: MealType, planner: PlannerService = Depends(get_planner)):
        return _day_or_none(planner.toggle_completion(day, meal_type), day)

    @app.put("/plan/{day}/{meal_type}/time")
    def set_time(day: date, meal_type: MealType, body: TimeRequest, planner: PlannerService = Depends(get_planner)):
        return _day_or_none(planner.set_time(day, meal_type, body.time), day)

    @app.post("/plan/reanchor")
    def reanchor(body: ReanchorRequest | None = None, planner: PlannerService = Depends(get_planner)):
        state = planner.reanchor(body.today if body else None)
        return state.weekly_plan

    @app.get("/shopping-list")
    def shopping_list(planner: PlannerService = Depends(get_planner)):
        result = planner.shopping_list()
        return {"empty": is_empty(result), "categories": result}

    # --- Recipes ----------------------------------------------------------
    @app.get("/allergens")
    async def allergens() -> list[str]:
        """Allergen terms offered for exclusion. Any other term works too."""
        return list(KNOWN_ALLERGENS)

    @app.get("/recipes")
    def search_recipes(
        q: str | None = None,
        age_band: AgeBand | None = None,
        meal_type: MealType | None = None,
        favorites_only: bool = False,
        exclude: list[str] = Query(default=[]),
        planner: PlannerService = Depends(get_planner),
    ):
        return planner.search(q, age_band, meal_type, favorites_only, exclude)

    @app.get("/recipes/{recipe_id}")
    def get_recipe(recipe_id: str, planner: PlannerService = Depends(get_planner)):
        return planner.recipe(recipe_id)

    @app.post("/recipes", status_code=201)
    def add_recipe(draft: RecipeDraft, planner: PlannerService = Depends(get_planner)):
        return planner.add_recipe(draft)

    @app.post("/favorites/{recipe_id}")
    def toggle_favorite(recipe_id: str, planner: PlannerService = Depends(get_planner)):
        return {"recipe_id": recipe_id, "favorite": planner.toggle_favorite(recipe_id)}

    # --- Baby & guidance --------------------------------------------------
    @app.put("/baby")
    def update_baby(body: BabyRequest, planner: PlannerService = Depends(get_planner)):
        return planner.update_baby(body.name, body.age_months)

    @app.get("/guidance")
    def guidance(planner: PlannerService = Depends(get_planner)):
        return planner.guidance_summary()

    @app.get("/ingredients")
    def ingredients(q: str = "", planner: PlannerService = Depends(get_planner)):
        age = planner.state.baby_age
        return [
            {"guide": g, "preparation_now": planner.guidance.preparation_for(g, age)}
            for g in planner.guidance.ingredient_guides(q)
        ]

    return app


def _day_or_none(state, day: date):
    for day_plan in state.weekly_plan:
        if day_plan.matches(day):
            return day_plan
    return None


logging.basicConfig(
    level=get_settings().log_level,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)

app = create_app()
