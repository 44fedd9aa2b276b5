"""Tests for report endpoints."""

from datetime import UTC, datetime
from uuid import uuid4

from fastapi.testclient import TestClient

from fitness_reports.api.app import create_app
from fitness_reports.domain.logs import (
    FoodEntry,
    Goals,
    StepsLog,
    UserProfile,
    WeightLog,
    WorkoutLog,
)


def _headers(user_id) -> dict[str, str]:  # type: ignore[no-untyped-def]
    return {"X-Api-Token": "api-token", "X-User-Id": str(user_id)}


def test_health_endpoint(container) -> None:
    client = TestClient(create_app(container))

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_weekly_report_endpoint(container, report_repository, user_id) -> None:
    report_repository.profiles[user_id] = UserProfile(
        user_id=user_id, goals=Goals(target_weight=75, daily_protein_target=90)
    )
    report_repository.weight = [
        WeightLog(logged_at=datetime(2024, 3, 1, 8, tzinfo=UTC), weight=80),
        WeightLog(logged_at=datetime(2024, 3, 7, 8, tzinfo=UTC), weight=78),
    ]
    report_repository.food = [
        FoodEntry(
            logged_at=datetime(2024, 3, 3, 12, tzinfo=UTC), protein=63, calories=1400
        )
    ]
    report_repository.steps = [
        StepsLog(logged_at=datetime(2024, 3, 4, 20, tzinfo=UTC), steps=7000)
    ]
    report_repository.workouts = [
        WorkoutLog(logged_at=datetime(2024, 3, 5, 18, tzinfo=UTC), duration=40)
    ]
    client = TestClient(create_app(container))

    response = client.get(
        "/reports/weekly",
        params={"startDate": "2024-03-01", "endDate": "2024-03-07"},
        headers=_headers(user_id),
    )

    assert response.status_code == 200
    data = response.json()
    assert data["weightStart"] == 80
    assert data["weightEnd"] == 78
    assert data["weightChange"] == {
        "absolute": -2,
        "percent": -2.5,
        "isPositive": True,
    }
    assert data["weightStatus"] == "improving"
    assert data["weightGoalProgress"] == 40
    assert data["weightTrend"] == [
        {"date": "2024-03-01", "value": 80},
        {"date": "2024-03-07", "value": 78},
    ]
    assert data["waistStart"] is None
    assert data["waistChange"] is None
    assert data["waistStatus"] == "stable"
    assert data["waistTrend"] == []
    assert data["proteinStart"] == 63
    assert data["proteinGoalProgress"] == 10
    assert data["stepsStart"] == 7000
    assert data["stepsStatus"] == "stable"
    assert data["workoutStartIsDuration"] is True
    assert data["workoutEnd"] == 40
    assert data["avgCalories"] == 200
    assert data["avgProtein"] == 9
    assert data["avgSteps"] == 1000
    assert data["totalWorkoutMinutes"] == 40
    assert data["caloriesTrend"] == [{"date": "2024-03-03", "value": 1400}]
    assert data["period"] == {"start": "2024-03-01", "end": "2024-03-07"}
    assert data["summary"].startswith("Weight reduced by 2kg")


def test_weekly_report_defaults_to_recent_week(container, user_id) -> None:
    client = TestClient(create_app(container))

    response = client.get("/reports/weekly", headers=_headers(user_id))

    assert response.status_code == 200
    data = response.json()
    assert data["period"]["end"] == datetime.now(tz=UTC).date().isoformat()
    assert data["weightChange"] is None
    assert data["avgCalories"] == 0
    assert data["workoutStartIsDuration"] is False


def test_weekly_report_rejects_invalid_dates(container, user_id) -> None:
    client = TestClient(create_app(container))

    invalid = client.get(
        "/reports/weekly",
        params={"startDate": "not-a-date", "endDate": "2024-03-07"},
        headers=_headers(user_id),
    )
    reversed_range = client.get(
        "/reports/weekly",
        params={"startDate": "2024-03-08", "endDate": "2024-03-01"},
        headers=_headers(user_id),
    )
    partial = client.get(
        "/reports/weekly",
        params={"startDate": "2024-03-01"},
        headers=_headers(user_id),
    )

    assert invalid.status_code == 400
    assert invalid.json() == {"detail": "Invalid date format"}
    assert reversed_range.status_code == 400
    assert partial.status_code == 400


def test_weekly_report_requires_auth(container) -> None:
    client = TestClient(create_app(container))

    no_token = client.get("/reports/weekly", headers={"X-User-Id": str(uuid4())})
    bad_user = client.get(
        "/reports/weekly",
        headers={"X-Api-Token": "api-token", "X-User-Id": "admin"},
    )
    no_user = client.get("/reports/weekly", headers={"X-Api-Token": "api-token"})

    assert no_token.status_code == 401
    assert bad_user.status_code == 401
    assert no_user.status_code == 401
