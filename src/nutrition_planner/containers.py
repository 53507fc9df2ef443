"""Dependency container wiring for the application."""

import random
from dataclasses import dataclass

from nutrition_planner.config import Settings
from nutrition_planner.services.planner import NutritionPlanner


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    planner: NutritionPlanner


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    planner = NutritionPlanner(
        rng=random.Random(resolved_settings.suggestion_seed),
        calorie_adjustment_kcal=resolved_settings.calorie_adjustment_kcal,
        weekly_weight_change_kg=resolved_settings.weekly_weight_change_kg,
        debug=resolved_settings.debug,
    )
    return AppContainer(settings=resolved_settings, planner=planner)
