"""Run with: python -m baby_meal_planner"""

import uvicorn

from baby_meal_planner.config import get_settings

if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run(
        "baby_meal_planner.main:app",
        host=settings.host,
        port=settings.port,
    )
