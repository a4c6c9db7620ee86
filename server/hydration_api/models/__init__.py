"""Pydantic models for hydration API requests and responses."""
from .drinks import DrinkLogIn, DayLogIn, HistoryPayload
from .quality import QualityRequest, QualityResponse, HydrationWarningOut, TimePeriodOut
from .stats import HistoryRequest, StatsResponse, WeeklyDay
from .achievements import AchievementOut, EvaluateRequest, EvaluateResponse
from .guidance import GuidanceResponse, ReminderRequest, ReminderResponse

__all__ = [
    "DrinkLogIn",
    "DayLogIn",
    "HistoryPayload",
    "QualityRequest",
    "QualityResponse",
    "HydrationWarningOut",
    "TimePeriodOut",
    "HistoryRequest",
    "StatsResponse",
    "WeeklyDay",
    "AchievementOut",
    "EvaluateRequest",
    "EvaluateResponse",
    "GuidanceResponse",
    "ReminderRequest",
    "ReminderResponse",
]
