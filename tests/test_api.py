"""Tests for the HTTP endpoints."""

from fastapi.testclient import TestClient

from nutrition_planner.api.app import create_app
from nutrition_planner.containers import AppContainer

PROFILE_PAYLOAD = {
    "age": 30,
    "sex": "male",
    "current_weight_kg": 80,
    "current_height_cm": 180,
    "goal_weight_kg": 75,
    "activity_multiplier": 1.55,
    "goal": "lose",
}


def test_health(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_plan_endpoint_returns_plan(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.post("/plan", json=PROFILE_PAYLOAD)

    assert response.status_code == 200
    data = response.json()
    assert data["current_bmi"] == 24.7
    assert data["goal_bmi"] == 23.1
    assert data["basal_metabolic_rate"] == 1780
    assert data["weekly_weight_change_kg"] == -0.5
    assert data["macros"]["fats"] == {"grams": 75, "calories": 678}
    assert [meal["name"] for meal in data["meal_plan"]] == [
        "Breakfast",
        "Lunch",
        "Dinner",
        "Snacks",
    ]
    first_food = data["food_catalog"][0]["items"][0]
    assert first_food["amount"] == "100g = 31g protein, 165 kcal"


def test_plan_endpoint_coerces_numeric_strings(container: AppContainer) -> None:
    client = TestClient(create_app(container))
    payload = {**PROFILE_PAYLOAD, "age": "30", "current_weight_kg": "80"}

    response = client.post("/plan", json=payload)

    assert response.status_code == 200
    assert response.json()["basal_metabolic_rate"] == 1780


def test_plan_endpoint_unknown_goal_is_maintenance(container: AppContainer) -> None:
    client = TestClient(create_app(container))
    payload = {**PROFILE_PAYLOAD, "goal": "bulk", "sex": "other"}

    response = client.post("/plan", json=payload)

    assert response.status_code == 200
    data = response.json()
    assert data["weekly_weight_change_kg"] == 0
    assert data["basal_metabolic_rate"] == 1614


def test_plan_endpoint_rejects_non_positive_height(container: AppContainer) -> None:
    client = TestClient(create_app(container))
    payload = {**PROFILE_PAYLOAD, "current_height_cm": 0}

    response = client.post("/plan", json=payload)

    assert response.status_code == 422


def test_foods_endpoint(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.get("/foods")

    assert response.status_code == 200
    categories = response.json()["categories"]
    assert len(categories) == 4
    assert categories[2]["name"] == "Healthy Fats"
    assert len(categories[2]["items"]) == 7


def test_activity_levels_endpoint(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.get("/activity-levels")

    assert response.status_code == 200
    levels = response.json()["levels"]
    assert levels[0] == {"name": "sedentary", "multiplier": 1.2}
    assert len(levels) == 5


def test_plan_endpoint_rejects_infinite_values(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    for field_name in ("current_weight_kg", "current_height_cm", "activity_multiplier"):
        payload = {**PROFILE_PAYLOAD, field_name: "inf"}

        response = client.post("/plan", json=payload)

        assert response.status_code == 422


def test_plan_endpoint_rejects_nan(container: AppContainer) -> None:
    client = TestClient(create_app(container))
    payload = {**PROFILE_PAYLOAD, "goal_weight_kg": "nan"}

    response = client.post("/plan", json=payload)

    assert response.status_code == 422
