"""History statistics models."""
from pydantic import BaseModel, Field, ConfigDict
from typing import Literal

from .drinks import HistoryPayload


class HistoryRequest(HistoryPayload):
    """Full drink history keyed by YYYY-MM-DD."""


class WeeklyDay(BaseModel):
    """One day of the seven-day chart."""

    model_config = ConfigDict(populate_by_name=True)

    date: str
    day_name: str = Field(serialization_alias="dayName")
    total: int
    goal: float


class StatsResponse(BaseModel):
    """Aggregate statistics across the history."""

    model_config = ConfigDict(populate_by_name=True)

    total_drinks: int = Field(serialization_alias="totalDrinks")
    days_met_goal: int = Field(serialization_alias="daysWithGoalMet")
    total_days: int = Field(serialization_alias="totalDays")
    total_hydration: int = Field(serialization_alias="totalHydration")
    avg_daily: int = Field(serialization_alias="avgDaily")
    avg_last_7_days: int = Field(serialization_alias="avgLast7Days")
    trend: Literal["up", "down", "stable"]
    most_logged_kind: str = Field(serialization_alias="mostLoggedType")
    success_rate: int = Field(serialization_alias="goalSuccessRate")
    streak: int
    longest_streak: int = Field(serialization_alias="longestStreak")
    weekly: list[WeeklyDay]
