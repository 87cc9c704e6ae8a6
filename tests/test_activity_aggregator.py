"""Tests for workout streaks, rolling windows and dashboard stats."""
from datetime import date, datetime, timedelta, timezone
import pytest
from schemas import DashboardStats, MetricSample, WorkoutRecord
from services.activity_aggregator import (
    calculate_streak,
    calories_burned_in_window,
    compute_stats,
    most_recent_weight,
    sessions_in_window,
    weekly_goal_progress,
)

AS_OF = date(2024, 5, 10)


def _session(days_ago, calories=300, hour=8):
    day = AS_OF - timedelta(days=days_ago)
    return WorkoutRecord(date=datetime(day.year, day.month, day.day, hour), calories_burned=calories)


def test_streak_counts_consecutive_days():
    sessions = [_session(0), _session(1), _session(2), _session(5)]
    assert calculate_streak(sessions, AS_OF) == 3


def test_streak_ignores_input_order():
    sessions = [_session(2), _session(0), _session(1)]
    assert calculate_streak(sessions, AS_OF) == 3


def test_same_day_sessions_count_once():
    sessions = [_session(0, hour=7), _session(0, hour=18)]
    assert calculate_streak(sessions, AS_OF) == 1


def test_duplicate_days_inside_streak():
    sessions = [_session(0), _session(1, hour=7), _session(1, hour=19), _session(2)]
    assert calculate_streak(sessions, AS_OF) == 3


def test_no_session_today_means_no_streak():
    assert calculate_streak([_session(1), _session(2)], AS_OF) == 0


def test_future_sessions_are_skipped():
    sessions = [_session(-1), _session(-3), _session(0), _session(1)]
    assert calculate_streak(sessions, AS_OF) == 2


def test_as_of_datetime_is_truncated_to_day():
    as_of = datetime(2024, 5, 10, 23, 59)
    assert calculate_streak([_session(0, hour=1), _session(1)], as_of) == 2


def test_window_includes_as_of_day_and_excludes_future():
    sessions = [_session(0), _session(6), _session(7), _session(-1)]
    assert len(sessions_in_window(sessions, AS_OF, 7)) == 2


def test_calories_over_thirty_days():
    sessions = [_session(0, 100), _session(29, 200), _session(30, 400), _session(-1, 50)]
    assert calories_burned_in_window(sessions, AS_OF) == 300


@pytest.mark.parametrize("count,expected", [(0, 0.0), (2, 50.0), (4, 100.0), (6, 100.0)])
def test_weekly_goal_progress(count, expected):
    sessions = [_session(i % 7) for i in range(count)]
    assert weekly_goal_progress(sessions, AS_OF) == expected


def test_most_recent_weight_skips_missing_values():
    metrics = [
        MetricSample(date=date(2024, 5, 1), weight=74.0),
        MetricSample(date=date(2024, 5, 8), weight=73.2),
        MetricSample(date=date(2024, 5, 9), body_fat_percentage=17.5),
    ]
    assert most_recent_weight(metrics) == 73.2


def test_most_recent_weight_mixed_date_types():
    metrics = [
        MetricSample(date=date(2024, 5, 8), weight=73.0),
        MetricSample(date=datetime(2024, 5, 8, 9, 30), weight=72.8),
    ]
    assert most_recent_weight(metrics) == 72.8


def test_most_recent_weight_orders_aware_times_by_instant():
    """09:00 in Tokyo is 00:00 UTC, which is earlier than 08:00 UTC."""
    tokyo = timezone(timedelta(hours=9))
    metrics = [
        MetricSample(date=datetime(2024, 5, 8, 8, 0, tzinfo=timezone.utc), weight=72.1),
        MetricSample(date=datetime(2024, 5, 8, 9, 0, tzinfo=tokyo), weight=72.9),
    ]
    assert most_recent_weight(metrics) == 72.1


def test_most_recent_weight_absent():
    assert most_recent_weight([MetricSample(date=AS_OF)]) is None
    assert most_recent_weight([]) is None


def test_compute_stats_empty_inputs():
    stats = compute_stats([], [], AS_OF)
    assert stats == DashboardStats()
    assert stats.workout_streak == 0
    assert stats.total_workouts == 0
    assert stats.calories_burned_30d == 0
    assert stats.weekly_goal_progress == 0
    assert stats.most_recent_weight is None


def test_compute_stats_full_dashboard():
    sessions = [
        _session(0, 250, hour=7),
        _session(0, 250, hour=7),
        _session(1, 400),
        _session(3, 300),
        _session(45, 500),
    ]
    metrics = [MetricSample(date=AS_OF, weight=71.5)]
    stats = compute_stats(sessions, metrics, AS_OF)
    assert stats.workout_streak == 2
    assert stats.total_workouts == 5
    assert stats.calories_burned_30d == 1200
    assert stats.weekly_goal_progress == 100.0
    assert stats.most_recent_weight == 71.5


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
