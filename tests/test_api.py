"""Tests for the nutrition and dashboard API endpoints."""
from datetime import date
import pytest
from fastapi.testclient import TestClient
from api.dashboard import dashboard_stats
from api.nutrition import create_profile, validate_profile
from main import app
from schemas import DashboardRequest, MacroGoals, NutritionProfile, ProfileRequest, WorkoutRecord, MetricSample


def test_create_profile_returns_advisories():
    req = ProfileRequest(
        weight=70, height=175, age=30, sex="male",
        activity_level="moderate", goal="lose", experience_level="advanced",
    )
    res = create_profile(req)
    assert res.profile.target_calories == 2056
    assert res.profile.macro_goals.protein_g == 180
    assert res.warnings == []
    assert res.protein_needs_g == 154
    assert res.meal_distribution == {"breakfast": 514, "lunch": 617, "dinner": 617, "snack": 308}
    assert res.water_ml == 2940


def test_create_profile_defaults_to_beginner():
    req = ProfileRequest(weight=70, height=175, age=30, sex="male", activity_level="moderate", goal="maintain")
    assert create_profile(req).protein_needs_g == 84


def test_validate_profile_endpoint():
    profile = NutritionProfile(
        bmr=1500, tdee=1100, target_calories=1100,
        macro_goals=MacroGoals(protein_g=83, carbs_g=110, fats_g=37, calories=1100),
    )
    report = validate_profile(profile)
    assert report.valid is False
    assert [w.kind.value for w in report.warnings] == ["calories-too-low"]


def test_dashboard_stats_endpoint():
    req = DashboardRequest(
        sessions=[
            WorkoutRecord(date=date(2024, 5, 10), calories_burned=300),
            WorkoutRecord(date=date(2024, 5, 9), calories_burned=200),
        ],
        metrics=[MetricSample(date=date(2024, 5, 9), weight=70.2)],
        as_of=date(2024, 5, 10),
    )
    stats = dashboard_stats(req)
    assert stats.workout_streak == 2
    assert stats.total_workouts == 2
    assert stats.calories_burned_30d == 500
    assert stats.weekly_goal_progress == 50.0
    assert stats.most_recent_weight == 70.2


def test_dashboard_over_http():
    client = TestClient(app)
    payload = {
        "sessions": [
            {"date": "2024-05-10T07:15:00", "workout_type": "cardio", "calories_burned": 250},
            {"date": "2024-05-10T18:40:00", "workout_type": "strength", "calories_burned": 320},
        ],
        "metrics": [],
        "as_of": "2024-05-10",
    }
    res = client.post("/api/dashboard/stats", json=payload)
    assert res.status_code == 200
    body = res.json()
    assert body["workout_streak"] == 1
    assert body["total_workouts"] == 2
    assert body["calories_burned_30d"] == 570
    assert body["most_recent_weight"] is None


def test_health():
    res = TestClient(app).get("/health")
    assert res.status_code == 200
    assert res.json() == {"status": "healthy"}


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
