"""Circadian guidance and reminder models."""
from pydantic import BaseModel, Field, ConfigDict

from .drinks import HistoryPayload


class GuidanceResponse(BaseModel):
    """What to drink right now and how today is going."""

    period: str
    recommendation: str
    emoji: str
    motivation: str


class ReminderRequest(HistoryPayload):
    """History used to derive smart reminder hours."""

    model_config = ConfigDict(populate_by_name=True)

    smart_schedule: bool = Field(default=True, alias="smartSchedule")


class ReminderResponse(BaseModel):
    """Hours of the day (0-23) at which to remind the user."""

    model_config = ConfigDict(populate_by_name=True)

    hours: list[int]
    active_hours: list[int] = Field(serialization_alias="activeHours")
