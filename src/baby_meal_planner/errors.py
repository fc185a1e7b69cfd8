"""Planner error taxonomy."""


class PlannerError(Exception):
    """Base class for planner errors."""


class InvalidInputError(PlannerError, ValueError):
    """Malformed input: negative age, bad HH:MM time, unknown age band label."""


class DuplicateIdError(PlannerError):
    """A recipe with this id is already in the catalog."""

    def __init__(self, recipe_id: str) -> None:
        super().__init__(f"Recipe id already in catalog: {recipe_id}")
        self.recipe_id = recipe_id


class RecipeNotFoundError(PlannerError, LookupError):
    """No recipe with this id in the catalog."""

    def __init__(self, recipe_id: str) -> None:
        super().__init__(f"Recipe not found: {recipe_id}")
        self.recipe_id = recipe_id
