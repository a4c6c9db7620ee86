"""Achievement API routes.

Evaluation is stateless: the client sends its history and the ids it
has already seen. Anything newly unlocked is also pushed onto the
popup queue, which the client drains with current/dismiss.
"""
from datetime import date
from typing import Optional

from fastapi import APIRouter, Query

from hydration.achievements import AchievementTracker
from hydration.stats import achievement_progress

from ..models.achievements import AchievementOut, EvaluateRequest, EvaluateResponse
from ..models.drinks import to_history
from ..services.achievement_queue import achievement_queue, publish_unlocks

router = APIRouter(prefix="/api/hydration", tags=["Achievements"])


@router.post(
    "/achievements/evaluate",
    response_model=EvaluateResponse,
    response_model_by_alias=True,
)
async def evaluate_history_achievements(
    request: EvaluateRequest,
    today: Optional[date] = Query(default=None, description="Reference date (defaults to today)"),
):
    """
    Check the history against every achievement threshold.

    Returns only achievements not already in ``unlocked``; the returned
    ``unlocked`` list is the caller's set plus the new ids.
    """
    tracker = AchievementTracker(request.unlocked)
    newly = tracker.check_history(achievement_progress(to_history(request.history), today))
    publish_unlocks(newly)

    return EvaluateResponse(
        newly_unlocked=[AchievementOut(**a.to_dict()) for a in newly],
        unlocked=sorted(tracker.unlocked),
    )


@router.get("/achievements/current")
async def get_current_achievement():
    """The achievement popup to show now, or null."""
    notice = achievement_queue.current()
    return notice.to_dict() if notice else None


@router.post("/achievements/dismiss")
async def dismiss_current_achievement():
    """Close the current popup and return the next one, or null."""
    notice = achievement_queue.dismiss()
    return notice.to_dict() if notice else None


@router.get("/achievements/history")
async def get_achievement_history(
    count: int = Query(50, ge=1, le=100, description="Number of notices to return")
):
    """Recently published unlocks, newest first."""
    return [notice.to_dict() for notice in achievement_queue.get_history(count)]


@router.get("/achievements/stats")
async def get_achievement_queue_stats():
    """Counts of published and dismissed popups and the pending backlog."""
    return achievement_queue.get_stats()
