"""Baby meal planner - weekly plan, recipe catalog, shopping list, and age guidance."""

__version__ = "0.1.0"
