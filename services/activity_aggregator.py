"""Dashboard statistics over logged workouts and body metrics.

Every function takes the raw records plus a reference `as_of` moment and
returns a fresh value; nothing is cached between calls. Timestamps are
compared at calendar-day granularity.
"""

import datetime as dt
from typing import Iterable, List, Optional, Sequence, Union

from core.logger import get_logger
from schemas.activity_schema import DashboardStats, MetricSample, WorkoutRecord

logger = get_logger("services.activity_aggregator")

WEEKLY_WORKOUT_GOAL = 4
WEEKLY_WINDOW_DAYS = 7
CALORIE_WINDOW_DAYS = 30

DateLike = Union[dt.datetime, dt.date]


def to_day(value: DateLike) -> dt.date:
    """Truncate a datetime to its calendar day; dates pass through."""
    if isinstance(value, dt.datetime):
        return value.date()
    return value


def calculate_streak(sessions: Iterable[WorkoutRecord], as_of: DateLike) -> int:
    """Count consecutive days, ending on `as_of`, with at least one session.

    Sessions dated after the cursor day are skipped, which also collapses
    several sessions on one day into a single streak day. The walk stops at
    the first day gap.
    """
    cursor = to_day(as_of)
    ordered = sorted(sessions, key=lambda s: to_day(s.date), reverse=True)
    streak = 0
    for session in ordered:
        day = to_day(session.date)
        if day == cursor:
            streak += 1
            cursor -= dt.timedelta(days=1)
        elif day < cursor:
            break
    return streak


def sessions_in_window(sessions: Iterable[WorkoutRecord], as_of: DateLike, days: int) -> List[WorkoutRecord]:
    """Return sessions falling within the trailing `days` calendar days.

    The window includes the `as_of` day itself; later sessions are excluded.
    """
    end = to_day(as_of)
    start = end - dt.timedelta(days=days - 1)
    return [s for s in sessions if start <= to_day(s.date) <= end]


def calories_burned_in_window(sessions: Iterable[WorkoutRecord], as_of: DateLike, days: int = CALORIE_WINDOW_DAYS) -> float:
    """Sum `calories_burned` over the trailing window ending at `as_of`."""
    return sum((s.calories_burned or 0) for s in sessions_in_window(sessions, as_of, days))


def weekly_goal_progress(sessions: Iterable[WorkoutRecord], as_of: DateLike) -> float:
    """Percentage of the weekly session goal reached, clamped to [0, 100]."""
    count = len(sessions_in_window(sessions, as_of, WEEKLY_WINDOW_DAYS))
    progress = count / WEEKLY_WORKOUT_GOAL * 100
    return max(0.0, min(100.0, progress))


def most_recent_weight(metrics: Iterable[MetricSample]) -> Optional[float]:
    """Weight from the latest-dated sample that recorded one, if any.

    Samples without a usable (positive) weight are treated as no data.
    """
    latest = None
    for sample in metrics:
        if sample.weight is None or sample.weight <= 0:
            continue
        if latest is None or _sort_key(sample.date) > _sort_key(latest.date):
            latest = sample
    return latest.weight if latest is not None else None


def _sort_key(value: DateLike):
    # dates and datetimes do not compare with each other; a bare date sorts
    # as the start of its day. Aware datetimes are ordered by UTC instant,
    # naive ones by wall clock.
    if isinstance(value, dt.datetime):
        if value.tzinfo is not None and value.utcoffset() is not None:
            value = value.astimezone(dt.timezone.utc).replace(tzinfo=None)
        return (value.date(), value.time())
    return (value, dt.time.min)


def compute_stats(
    sessions: Sequence[WorkoutRecord],
    metrics: Sequence[MetricSample],
    as_of: DateLike,
) -> DashboardStats:
    """Compute the dashboard statistics for one user.

    Args:
        sessions: Logged workout sessions, in any order.
        metrics: Logged body-metric samples, in any order.
        as_of: Reference moment; streaks and windows end on its calendar day.

    Returns:
        A new `DashboardStats`; empty inputs give all zeros and no weight.
    """
    sessions = list(sessions)
    stats = DashboardStats(
        workout_streak=calculate_streak(sessions, as_of),
        total_workouts=len(sessions),
        calories_burned_30d=calories_burned_in_window(sessions, as_of),
        weekly_goal_progress=weekly_goal_progress(sessions, as_of),
        most_recent_weight=most_recent_weight(metrics),
    )
    logger.debug("Dashboard stats as of %s: %s", to_day(as_of), stats)
    return stats


__all__ = [
    "WEEKLY_WORKOUT_GOAL",
    "WEEKLY_WINDOW_DAYS",
    "CALORIE_WINDOW_DAYS",
    "to_day",
    "calculate_streak",
    "sessions_in_window",
    "calories_burned_in_window",
    "weekly_goal_progress",
    "most_recent_weight",
    "compute_stats",
]
