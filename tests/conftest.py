"""Shared test fixtures."""

import random

import pytest

from nutrition_planner.config import Settings
from nutrition_planner.containers import AppContainer
from nutrition_planner.domain.profile import Goal, Profile, Sex
from nutrition_planner.services.planner import NutritionPlanner


@pytest.fixture
def settings() -> Settings:
    return Settings(suggestion_seed=42, environment="test")


@pytest.fixture
def planner() -> NutritionPlanner:
    return NutritionPlanner(rng=random.Random(7))


@pytest.fixture
def container(settings: Settings, planner: NutritionPlanner) -> AppContainer:
    return AppContainer(settings=settings, planner=planner)


@pytest.fixture
def male_profile() -> Profile:
    return Profile(
        age=30,
        sex=Sex.MALE,
        current_weight_kg=80,
        current_height_cm=180,
        goal_weight_kg=75,
        activity_multiplier=1.55,
        goal=Goal.LOSE,
    )
