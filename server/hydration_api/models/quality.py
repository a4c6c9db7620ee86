"""Hydration quality request and response models."""
from pydantic import BaseModel, Field, ConfigDict
from typing import Literal, Optional

from .drinks import DrinkLogIn

GradeLetter = Literal["A", "B", "C", "D", "F"]
WarningType = Literal["absorption", "bedtime", "caffeine", "gap", "overload"]
WarningSeverity = Literal["info", "warning", "critical"]


class QualityRequest(BaseModel):
    """A day's drinks to be graded."""

    model_config = ConfigDict(populate_by_name=True)

    logs: list[DrinkLogIn] = []
    goal: Optional[float] = None
    bedtime_hour: Optional[int] = Field(default=None, ge=0, le=23, alias="bedtimeHour")


class HydrationWarningOut(BaseModel):
    """A warning raised by one of the intake checks."""

    type: WarningType
    severity: WarningSeverity
    message: str
    timestamp: Optional[int] = None


class TimePeriodOut(BaseModel):
    """Effective volume for one circadian period."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    start: int
    end: int
    target_percentage: float = Field(serialization_alias="targetPercentage")
    actual: float


class QualityResponse(BaseModel):
    """Grades, warnings and insights for a day."""

    model_config = ConfigDict(populate_by_name=True)

    overall: GradeLetter
    distribution: GradeLetter
    spacing: GradeLetter
    timing: GradeLetter
    warnings: list[HydrationWarningOut]
    insights: list[str]
    periods: list[TimePeriodOut]
    effective_hydration: float = Field(serialization_alias="effectiveHydration")
    caffeine_mg: float = Field(serialization_alias="caffeineMg")
