"""
Data model for the hydration analytics engine.

Plain dataclasses passed between the engine and its callers. History
and settings always arrive as explicit parameters; the engine never
holds on to them.
"""

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional, Union

from .catalog import DrinkKind


class Grade(str, Enum):
    """Letter grade, ordered A > B > C > D > F."""

    A = "A"
    B = "B"
    C = "C"
    D = "D"
    F = "F"

    @property
    def score(self) -> int:
        return _GRADE_SCORES[self]

    @classmethod
    def from_score(cls, score: float) -> "Grade":
        """Map a weighted score back to a letter."""
        if score >= 3.5:
            return cls.A
        if score >= 2.5:
            return cls.B
        if score >= 1.5:
            return cls.C
        if score >= 0.5:
            return cls.D
        return cls.F

    # str ordering would put A below B; compare by score instead
    def __lt__(self, other):
        if not isinstance(other, Grade):
            return NotImplemented
        return self.score < other.score

    def __le__(self, other):
        if not isinstance(other, Grade):
            return NotImplemented
        return self.score <= other.score

    def __gt__(self, other):
        if not isinstance(other, Grade):
            return NotImplemented
        return self.score > other.score

    def __ge__(self, other):
        if not isinstance(other, Grade):
            return NotImplemented
        return self.score >= other.score


_GRADE_SCORES = {Grade.A: 4, Grade.B: 3, Grade.C: 2, Grade.D: 1, Grade.F: 0}


class Severity(str, Enum):
    """Severity of a hydration warning."""

    INFO = "info"
    WARNING = "warning"
    CRITICAL = "critical"


class WarningKind(str, Enum):
    """Rule that produced a hydration warning."""

    ABSORPTION = "absorption"
    BEDTIME = "bedtime"
    CAFFEINE = "caffeine"
    GAP = "gap"
    OVERLOAD = "overload"


@dataclass(frozen=True)
class DrinkEvent:
    """One logged drink."""

    timestamp: int  # epoch milliseconds
    amount: float  # ml
    kind: Union[DrinkKind, str] = DrinkKind.WATER
    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    @property
    def logged_at(self) -> datetime:
        """Local wall-clock time of the event."""
        return datetime.fromtimestamp(self.timestamp / 1000)

    @property
    def kind_value(self) -> str:
        return self.kind.value if isinstance(self.kind, DrinkKind) else str(self.kind)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "id": self.id,
            "timestamp": self.timestamp,
            "amount": self.amount,
            "type": self.kind_value,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "DrinkEvent":
        return cls(
            id=data.get("id") or str(uuid.uuid4()),
            timestamp=int(data["timestamp"]),
            amount=float(data["amount"]),
            kind=data.get("type", DrinkKind.WATER.value),
        )


@dataclass
class DayRecord:
    """One calendar day's log with the goal that was active that day."""

    date: str  # YYYY-MM-DD, local time
    goal: float
    logs: List[DrinkEvent] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "date": self.date,
            "logs": [log.to_dict() for log in self.logs],
            "goal": self.goal,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "DayRecord":
        return cls(
            date=data["date"],
            goal=float(data["goal"]),
            logs=[DrinkEvent.from_dict(log) for log in data.get("logs", [])],
        )


History = Dict[str, DayRecord]


@dataclass
class UserSettings:
    """User configuration supplied by the settings collaborator."""

    daily_goal: float = 2500
    bedtime_hour: int = 20
    use_ounces: bool = False
    reminders_enabled: bool = False
    smart_schedule: bool = False
    show_quality_scores: bool = True
    has_onboarded: bool = False
    name: Optional[str] = None
    weight: Optional[float] = None
    activity_level: Optional[str] = None  # low, moderate, high


@dataclass
class HydrationWarning:
    """A single rule violation found in a day's events."""

    kind: WarningKind
    severity: Severity
    message: str
    timestamp: Optional[int] = None

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        result = {
            "type": self.kind.value,
            "severity": self.severity.value,
            "message": self.message,
        }
        if self.timestamp is not None:
            result["timestamp"] = self.timestamp
        return result


@dataclass
class TimePeriod:
    """Circadian period with its target share and actual effective volume."""

    name: str
    start: int  # hour, inclusive
    end: int  # hour, exclusive; end < start wraps midnight
    target_percentage: float
    actual: float = 0.0

    def contains(self, hour: int) -> bool:
        if self.start < self.end:
            return self.start <= hour < self.end
        if self.start > self.end:
            return hour >= self.start or hour < self.end
        return False

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "name": self.name,
            "start": self.start,
            "end": self.end,
            "target_percentage": self.target_percentage,
            "actual": self.actual,
        }


@dataclass
class HydrationQuality:
    """Graded assessment of one day's drinking pattern."""

    overall: Grade
    distribution: Grade
    spacing: Grade
    timing: Grade
    warnings: List[HydrationWarning] = field(default_factory=list)
    insights: List[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "overall": self.overall.value,
            "distribution": self.distribution.value,
            "spacing": self.spacing.value,
            "timing": self.timing.value,
            "warnings": [w.to_dict() for w in self.warnings],
            "insights": list(self.insights),
        }
