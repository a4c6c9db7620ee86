"""Daily hydration quality API routes."""
from fastapi import APIRouter, HTTPException

from hydration.calculators import caffeine_total, effective_hydration
from hydration.periods import time_periods
from hydration.quality import hydration_quality

from ..config import get_settings
from ..models.quality import QualityRequest, QualityResponse, HydrationWarningOut, TimePeriodOut

router = APIRouter(prefix="/api/hydration", tags=["Quality"])


@router.post("/quality", response_model=QualityResponse, response_model_by_alias=True)
async def get_hydration_quality(request: QualityRequest):
    """
    Grade a day's drinks.

    Returns distribution, spacing, timing and overall grades together
    with intake warnings, insights and the per-period breakdown.
    """
    settings = get_settings()
    goal = request.goal if request.goal is not None else settings.default_daily_goal
    bedtime_hour = (
        request.bedtime_hour if request.bedtime_hour is not None else settings.default_bedtime_hour
    )
    if goal <= 0:
        raise HTTPException(status_code=400, detail="Daily goal must be positive")

    logs = [log.to_event() for log in request.logs]
    quality = hydration_quality(logs, goal, bedtime_hour)
    periods = time_periods(logs, goal)

    return QualityResponse(
        overall=quality.overall.value,
        distribution=quality.distribution.value,
        spacing=quality.spacing.value,
        timing=quality.timing.value,
        warnings=[HydrationWarningOut(**w.to_dict()) for w in quality.warnings],
        insights=quality.insights,
        periods=[TimePeriodOut(**p.to_dict()) for p in periods],
        effective_hydration=effective_hydration(logs),
        caffeine_mg=caffeine_total(logs),
    )
