"""
History operations.

Recompute-and-return helpers used by the storage collaborator: each
returns a new History mapping and leaves the one passed in untouched.
A DayRecord is created lazily on the first drink of a date and keeps
the goal that was active at that moment.
"""

import logging
import uuid
from dataclasses import replace
from datetime import date, datetime
from typing import Dict, Optional, Tuple, Union

from .calculators import effective_hydration
from .catalog import DrinkKind
from .models import DayRecord, DrinkEvent, History, UserSettings

logger = logging.getLogger(__name__)


def add_drink(
    history: History,
    amount: float,
    daily_goal: float,
    kind: Union[DrinkKind, str] = DrinkKind.WATER,
    now: Optional[datetime] = None,
) -> Tuple[History, DrinkEvent]:
    """
    Log a drink on the local date of ``now``.

    Args:
        history: Current history
        amount: Volume in ml
        daily_goal: Goal to capture if this creates the day's record
        kind: Drink kind
        now: Time of the drink (defaults to now, local)

    Returns:
        Tuple of (new history, the created DrinkEvent)
    """
    now = now or datetime.now()
    event = DrinkEvent(
        id=str(uuid.uuid4()),
        timestamp=int(now.timestamp() * 1000),
        amount=amount,
        kind=kind,
    )
    key = now.date().isoformat()

    current = history.get(key) or DayRecord(date=key, goal=daily_goal)
    updated = dict(history)
    updated[key] = replace(current, logs=[*current.logs, event])

    logger.debug(f"[HISTORY] Added {amount}ml {event.kind_value} on {key}")
    return updated, event


def remove_drink(history: History, drink_id: str, day: Optional[date] = None) -> History:
    """Drop a drink from the given day's record (today by default)."""
    key = (day or date.today()).isoformat()
    current = history.get(key)
    if current is None:
        return history

    updated = dict(history)
    updated[key] = replace(current, logs=[log for log in current.logs if log.id != drink_id])
    return updated


def update_goal(
    history: History,
    settings: UserSettings,
    new_goal: float,
    today: Optional[date] = None,
) -> Tuple[History, UserSettings]:
    """
    Change the daily goal.

    Only today's record (if any) picks up the new goal; past days keep
    the goal they were logged against.
    """
    key = (today or date.today()).isoformat()
    new_settings = replace(settings, daily_goal=new_goal)

    if key not in history:
        return history, new_settings

    updated = dict(history)
    updated[key] = replace(history[key], goal=new_goal)
    logger.info(f"[HISTORY] Goal changed to {new_goal}ml")
    return updated, new_settings


def today_progress(
    history: History,
    settings: UserSettings,
    today: Optional[date] = None,
) -> Dict[str, float]:
    """Today's effective hydration against the configured goal."""
    record = history.get((today or date.today()).isoformat())
    hydration = effective_hydration(record.logs) if record else 0.0
    goal = settings.daily_goal
    percentage = min(100.0, hydration / goal * 100) if goal > 0 else 0.0
    return {"hydration": hydration, "goal": goal, "percentage": percentage}
