"""FastAPI application factory."""

import logging
from dataclasses import asdict

from fastapi import FastAPI, Request

from nutrition_planner.api.models import ProfileRequest
from nutrition_planner.app_logging import configure_logging
from nutrition_planner.containers import AppContainer
from nutrition_planner.domain.plan import FoodCategory, NutritionPlan
from nutrition_planner.domain.profile import ActivityLevel
from nutrition_planner.services.catalog import food_catalog


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(debug=container.settings.debug)
    logger = logging.getLogger(__name__)

    app = FastAPI()
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/plan")
    async def create_plan(
        payload: ProfileRequest, request: Request
    ) -> dict[str, object]:
        """Compute a nutrition plan for the submitted profile."""
        state_container: AppContainer = request.app.state.container
        profile = payload.to_profile()
        plan = state_container.planner.plan(profile)
        logger.info(
            "Plan computed: goal=%s target=%s kcal",
            profile.goal.value,
            round(plan.target_calories),
        )
        return _plan_payload(plan)

    @app.get("/foods")
    async def list_foods() -> dict[str, object]:
        """Return the food reference table."""
        return {"categories": _catalog_payload(food_catalog())}

    @app.get("/activity-levels")
    async def list_activity_levels() -> dict[str, object]:
        """Return the preset activity multipliers."""
        return {
            "levels": [
                {"name": level.name.lower(), "multiplier": level.value}
                for level in ActivityLevel
            ]
        }

    return app


def _plan_payload(plan: NutritionPlan) -> dict[str, object]:
    payload = asdict(plan)
    payload["food_catalog"] = _catalog_payload(plan.food_catalog)
    return payload


def _catalog_payload(categories: tuple[FoodCategory, ...]) -> list[dict[str, object]]:
    return [
        {
            "name": category.name,
            "items": [
                {**asdict(item), "amount": item.amount} for item in category.items
            ],
        }
        for category in categories
    ]
