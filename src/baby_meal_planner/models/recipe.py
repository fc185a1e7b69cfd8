"""Recipe catalog data model."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class AgeBand(str, Enum):
    """Developmental age band in months. Declaration order is band order."""

    M4_6 = "4-6"
    M6_8 = "6-8"
    M8_10 = "8-10"
    M10_12 = "10-12"
    M12_18 = "12-18"
    M18_24 = "18-24"
    M24_PLUS = "24+"

    @property
    def min_months(self) -> int:
        return int(self.value.split("-")[0].rstrip("+"))

    @property
    def max_months(self) -> int | None:
        """Exclusive upper bound, None for the open-ended last band."""
        if self.value.endswith("+"):
            return None
        return int(self.value.split("-")[1])

    @property
    def label(self) -> str:
        return f"{self.value} months"

    @property
    def order(self) -> int:
        return list(AgeBand).index(self)


class MealType(str, Enum):
    """Meal slot type, in display order."""

    BREAKFAST = "Breakfast"
    LUNCH = "Lunch"
    DINNER = "Dinner"
    SNACK = "Snack"


class IngredientCategory(str, Enum):
    """Shopping aisle category."""

    PRODUCE = "Produce"
    DAIRY = "Dairy"
    PANTRY = "Pantry"
    PROTEIN = "Protein"
    OTHER = "Other"


class Ingredient(BaseModel):
    """Single recipe ingredient. Amount is display text, e.g. '1/2 cup'."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Ingredient name")
    amount: str = Field(default="", description="Display amount")
    category: IngredientCategory = Field(default=IngredientCategory.OTHER)

    @field_validator("category", mode="before")
    @classmethod
    def _unknown_category_is_other(cls, v: Any) -> Any:
        if isinstance(v, IngredientCategory):
            return v
        try:
            return IngredientCategory(v)
        except ValueError:
            return IngredientCategory.OTHER


class Recipe(BaseModel):
    """Catalog recipe. Created once, never mutated."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Unique recipe identifier")
    title: str = Field(...)
    short_description: str = Field(default="")
    full_description: str = Field(default="")
    image_ref: str = Field(default="")
    age_groups: frozenset[AgeBand] = Field(default_factory=frozenset)
    meal_type: MealType = Field(...)
    ingredients: tuple[Ingredient, ...] = Field(default_factory=tuple)
    prep_time: str = Field(default="")
    nutrition_highlight: str | None = Field(default=None)

    @field_validator("age_groups", mode="before")
    @classmethod
    def _parse_band_labels(cls, v: Any) -> Any:
        # Reference data may use "6-8 months" labels
        if isinstance(v, (list, tuple, set, frozenset)):
            return frozenset(
                AgeBand(b.removesuffix(" months")) if isinstance(b, str) else b for b in v
            )
        return v

    @property
    def youngest_band(self) -> AgeBand | None:
        """Lowest band the recipe is suitable for, e.g. for a '6m+' badge."""
        if not self.age_groups:
            return None
        return min(self.age_groups, key=lambda b: b.order)


class RecipeDraft(BaseModel):
    """User-submitted recipe before it gets an id and defaults."""

    title: str = Field(..., min_length=1)
    short_description: str = Field(default="")
    full_description: str = Field(default="")
    image_ref: str = Field(default="")
    age_groups: list[AgeBand] = Field(default_factory=lambda: [AgeBand.M6_8])
    meal_type: MealType = Field(default=MealType.LUNCH)
    ingredients: list[Ingredient] = Field(default_factory=list)
    prep_time: str = Field(default="")
    nutrition_highlight: str | None = Field(default=None)

    @field_validator("title", mode="before")
    @classmethod
    def _strip_title(cls, v: Any) -> Any:
        return v.strip() if isinstance(v, str) else v
