"""Drink log and history request models."""
import datetime

from pydantic import BaseModel, Field, ConfigDict, field_validator
from typing import Optional

from hydration.models import DayRecord, DrinkEvent, History

# 9999-12-31T00:00:00Z; leaves room for any local UTC offset
MAX_TIMESTAMP_MS = 253402214400000


class DrinkLogIn(BaseModel):
    """One logged drink as sent by the client."""

    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = None
    timestamp: int = Field(ge=0, le=MAX_TIMESTAMP_MS, description="Epoch milliseconds")
    amount: float = Field(ge=0, description="Volume in ml")
    type: str = "water"

    def to_event(self) -> DrinkEvent:
        return DrinkEvent.from_dict(self.model_dump())


class DayLogIn(BaseModel):
    """One day's log with the goal captured when it was created."""

    model_config = ConfigDict(populate_by_name=True)

    date: datetime.date
    logs: list[DrinkLogIn] = []
    goal: float = Field(ge=0)

    def to_record(self) -> DayRecord:
        return DayRecord.from_dict(self.model_dump(mode="json"))


class HistoryPayload(BaseModel):
    """Base for requests carrying a full history keyed by YYYY-MM-DD."""

    history: dict[str, DayLogIn] = {}

    @field_validator("history")
    @classmethod
    def validate_keys(cls, value: dict[str, DayLogIn]) -> dict[str, DayLogIn]:
        for key, day in value.items():
            if key != day.date.isoformat():
                raise ValueError(f"history key {key} does not match day date {day.date.isoformat()}")
        return value


def to_history(days: dict[str, DayLogIn]) -> History:
    """Convert a request's history mapping into engine records."""
    return {key: day.to_record() for key, day in days.items()}
