"""Reminder scheduling from a user's drinking patterns."""

from datetime import date, datetime, timedelta
from typing import Dict, List, Optional

from .calculators import local_hour
from .models import History

PATTERN_WINDOW_DAYS = 14
MAX_REMINDERS = 5
DEFAULT_REMINDER_HOURS = [9, 12, 15, 18]
REGULAR_REMINDER_HOURS = [8, 10, 12, 14, 16, 18, 20]

# (window start, window end, fallback hour) filled in when no active hour covers the window
COVERAGE_WINDOWS = [(7, 10, 9), (14, 16, 15), (17, 19, 18)]


def analyze_drinking_patterns(history: History, now: Optional[datetime] = None) -> Dict:
    """
    Count logs per local hour over the last two weeks.

    Returns:
        Dict with ``hourly_activity`` (hour -> count) and
        ``active_hours`` (up to three busiest hours, busiest first)
    """
    now = now or datetime.now()
    cutoff = (now - timedelta(days=PATTERN_WINDOW_DAYS)).date()

    hourly: Dict[int, int] = {}
    for record in history.values():
        if date.fromisoformat(record.date) < cutoff:
            continue
        for log in record.logs:
            hour = local_hour(log)
            hourly[hour] = hourly.get(hour, 0) + 1

    # Stable sort keeps ascending hour order among equal counts
    active = sorted(sorted(hourly), key=lambda h: hourly[h], reverse=True)[:3]
    return {"hourly_activity": hourly, "active_hours": active}


def smart_reminder_times(history: History, now: Optional[datetime] = None) -> List[int]:
    """Busiest hours plus fillers for uncovered morning/afternoon/evening windows."""
    active = analyze_drinking_patterns(history, now)["active_hours"]
    if not active:
        return list(DEFAULT_REMINDER_HOURS)

    times = list(active)
    for start, end, fallback in COVERAGE_WINDOWS:
        if not any(start <= h <= end for h in times):
            times.append(fallback)

    return sorted(times)[:MAX_REMINDERS]


def regular_reminder_times() -> List[int]:
    """Every two hours from 8am to 8pm."""
    return list(REGULAR_REMINDER_HOURS)
