"""Dashboard API router.

Aggregates the workout sessions and body metrics supplied in the request
into `DashboardStats`. Nothing is persisted; stats are recomputed per call.
"""

from datetime import date
from fastapi import APIRouter
from core.logger import get_logger
from schemas import DashboardRequest, DashboardStats
from services.activity_aggregator import compute_stats

logger = get_logger("api.dashboard")
router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])


@router.post("/stats", response_model=DashboardStats)
def dashboard_stats(payload: DashboardRequest):
    """Return streak, totals, 30-day calories and weekly goal progress.

    Args:
        payload: `DashboardRequest` with sessions, metrics and an optional
            `as_of` reference (defaults to today).

    Returns:
        `DashboardStats` computed from the supplied records.
    """
    as_of = payload.as_of or date.today()
    logger.info(
        "Computing dashboard stats for %s sessions, %s metrics as of %s",
        len(payload.sessions),
        len(payload.metrics),
        as_of,
    )
    return compute_stats(payload.sessions, payload.metrics, as_of)
