"""Recipe filter engine - conjunction of independent predicates over the catalog."""

from typing import Iterable

from pydantic import BaseModel, ConfigDict, Field, field_validator

from baby_meal_planner.models import AgeBand, MealType, Recipe

# Offered by the recipe browser; exclusion accepts any term
KNOWN_ALLERGENS = ("Dairy", "Egg", "Nuts", "Soy", "Wheat", "Fish")


class FilterQuery(BaseModel):
    """Filter selections. Empty/None values match everything."""

    model_config = ConfigDict(frozen=True)

    text: str | None = Field(default=None, description="Title or ingredient substring")
    age_band: AgeBand | None = Field(default=None)
    meal_type: MealType | None = Field(default=None)
    favorites_only: bool = Field(default=False)
    excluded_allergen_terms: frozenset[str] = Field(default_factory=frozenset)
    favorites: frozenset[str] = Field(default_factory=frozenset)

    @field_validator("text")
    @classmethod
    def _blank_is_empty(cls, v: str | None) -> str | None:
        # Whitespace-only search text means no text filter
        if v is None or not v.strip():
            return None
        return v

    @field_validator("excluded_allergen_terms", mode="before")
    @classmethod
    def _drop_blank_terms(cls, v):
        if isinstance(v, (list, tuple, set, frozenset)):
            return frozenset(t for t in v if isinstance(t, str) and t.strip())
        return v


def matches_text(recipe: Recipe, text: str | None) -> bool:
    if not text:
        return True
    needle = text.lower()
    if needle in recipe.title.lower():
        return True
    return any(needle in i.name.lower() for i in recipe.ingredients)


def contains_allergen(recipe: Recipe, term: str) -> bool:
    """
    Substring match over ingredient names and the full description.
    Editorial mentions count too: "dairy-free" in the description excludes on "dairy".
    """
    needle = term.lower()
    if any(needle in i.name.lower() for i in recipe.ingredients):
        return True
    return needle in recipe.full_description.lower()


def recipe_matches(recipe: Recipe, query: FilterQuery) -> bool:
    if not matches_text(recipe, query.text):
        return False
    if query.age_band is not None and query.age_band not in recipe.age_groups:
        return False
    if query.meal_type is not None and recipe.meal_type != query.meal_type:
        return False
    if query.favorites_only and recipe.id not in query.favorites:
        return False
    return not any(contains_allergen(recipe, term) for term in query.excluded_allergen_terms)


def filter_recipes(catalog: Iterable[Recipe], query: FilterQuery | None = None) -> list[Recipe]:
    """Recipes matching every predicate, in catalog order."""
    query = query or FilterQuery()
    return [r for r in catalog if recipe_matches(r, query)]
