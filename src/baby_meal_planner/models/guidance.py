"""Static guidance reference models."""

from pydantic import BaseModel, Field


class DevelopmentStage(BaseModel):
    """What to feed and expect within one age band."""

    title: str
    foods_to_try: list[str] = Field(default_factory=list)
    foods_to_avoid: list[str] = Field(default_factory=list)
    skills: list[str] = Field(default_factory=list)
    tips: str = ""


class Milestone(BaseModel):
    """Feeding milestone reached at a given month."""

    month: int = Field(..., ge=0)
    title: str
    description: str = ""
    unlocked: bool = False


class IngredientGuide(BaseModel):
    """How to serve one ingredient. preparation is keyed by AgeBand value."""

    id: str
    name: str
    category: str = ""
    image_ref: str = ""
    preparation: dict[str, str] = Field(default_factory=dict)
    choking_hazards: str = ""
    nutrition: str = ""
