"""Circadian guidance and reminder API routes."""
from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Query

from hydration.insights import circadian_guidance, motivational_message
from hydration.reminders import (
    analyze_drinking_patterns,
    regular_reminder_times,
    smart_reminder_times,
)

from ..models.drinks import to_history
from ..models.guidance import GuidanceResponse, ReminderRequest, ReminderResponse

router = APIRouter(prefix="/api/hydration", tags=["Guidance"])


@router.get("/guidance", response_model=GuidanceResponse)
async def get_guidance(
    hour: Optional[int] = Query(default=None, ge=0, le=23, description="Local hour (defaults to now)"),
    percentage: float = Query(default=0, ge=0, description="Progress toward today's goal in %"),
):
    """Recommendation for the current part of the day plus a motivational line."""
    if hour is None:
        hour = datetime.now().hour
    return GuidanceResponse(
        **circadian_guidance(hour),
        motivation=motivational_message(percentage),
    )


@router.post("/reminders", response_model=ReminderResponse, response_model_by_alias=True)
async def get_reminder_hours(request: ReminderRequest):
    """Hours at which to remind the user, learned from history or on a fixed schedule."""
    history = to_history(request.history)
    active = analyze_drinking_patterns(history)["active_hours"]
    hours = smart_reminder_times(history) if request.smart_schedule else regular_reminder_times()
    return ReminderResponse(hours=hours, active_hours=active)
