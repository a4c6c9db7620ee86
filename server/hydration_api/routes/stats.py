"""History statistics API routes."""
from datetime import date
from typing import Optional

from fastapi import APIRouter, Query

from hydration.stats import aggregate_stats, longest_streak, streak, weekly_data

from ..models.drinks import to_history
from ..models.stats import HistoryRequest, StatsResponse, WeeklyDay

router = APIRouter(prefix="/api/hydration", tags=["Stats"])


@router.post("/stats", response_model=StatsResponse, response_model_by_alias=True)
async def get_history_stats(
    request: HistoryRequest,
    today: Optional[date] = Query(default=None, description="Reference date (defaults to today)"),
):
    """Aggregate totals, averages, trend, streaks and the seven-day chart."""
    history = to_history(request.history)
    stats = aggregate_stats(history)

    return StatsResponse(
        **stats.to_dict(),
        streak=streak(history, today),
        longest_streak=longest_streak(history),
        weekly=[WeeklyDay(**day) for day in weekly_data(history, today)],
    )
