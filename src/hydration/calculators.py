"""Effective hydration and caffeine reductions over drink events."""

import math
from typing import Iterable

from .catalog import lookup
from .models import DayRecord, DrinkEvent


def effective_hydration(logs: Iterable[DrinkEvent]) -> float:
    """Total volume weighted by each drink's hydration factor."""
    return sum((log.amount * lookup(log.kind).hydration_factor for log in logs), 0.0)


def caffeine_total(logs: Iterable[DrinkEvent]) -> float:
    """Total caffeine in mg."""
    return sum((log.amount * lookup(log.kind).caffeine_per_ml for log in logs), 0.0)


def raw_volume(logs: Iterable[DrinkEvent]) -> float:
    return sum((log.amount for log in logs), 0.0)


def local_hour(log: DrinkEvent) -> int:
    """Hour of day (0-23) on the device's local clock."""
    return log.logged_at.hour


def goal_met(day: DayRecord) -> bool:
    """True if the day's effective hydration reached the goal stored on it."""
    return effective_hydration(day.logs) >= day.goal


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up, as the UI displays."""
    return math.floor(value + 0.5)
