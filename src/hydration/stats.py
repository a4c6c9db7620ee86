"""
Streak and Aggregate Statistics over the full drink history.

All functions take the History mapping explicitly and never modify
it. Days are ordered by their ISO date key, which sorts
chronologically as a string.
"""

import logging
from dataclasses import dataclass, asdict
from datetime import date, timedelta
from typing import Dict, List, Optional

from .calculators import effective_hydration, goal_met, raw_volume, round_half_up
from .catalog import DrinkKind
from .models import DayRecord, History

logger = logging.getLogger(__name__)

TREND_UP_RATIO = 1.1
TREND_DOWN_RATIO = 0.9
WEEKLY_FALLBACK_GOAL = 2000
_WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


def date_key(day: date) -> str:
    return day.isoformat()


def sorted_days(history: History) -> List[DayRecord]:
    """Day records in ascending date order."""
    return [history[key] for key in sorted(history)]


def streak(history: History, today: Optional[date] = None) -> int:
    """
    Count consecutive goal-met days ending today.

    Today counts only if already met, but an unmet today does not break
    the chain: the walk continues from yesterday regardless. From
    yesterday backward, the first missing or unmet day ends the streak.

    Args:
        history: Date key to DayRecord mapping
        today: Reference date (defaults to the local date)

    Returns:
        Current streak length in days
    """
    today = today or date.today()
    count = 0

    today_record = history.get(date_key(today))
    if today_record is not None and goal_met(today_record):
        count += 1

    current = today - timedelta(days=1)
    while True:
        record = history.get(date_key(current))
        if record is None or not goal_met(record):
            break
        count += 1
        current -= timedelta(days=1)

    return count


def longest_streak(history: History) -> int:
    """Longest run of goal-met days among recorded days, in date order."""
    longest = 0
    running = 0
    for record in sorted_days(history):
        if goal_met(record):
            running += 1
            longest = max(longest, running)
        else:
            running = 0
    return longest


def _average(days: List[DayRecord]) -> float:
    if not days:
        return 0.0
    return sum(effective_hydration(day.logs) for day in days) / len(days)


def most_logged_kind(history: History) -> str:
    """
    Drink kind with the most logged events.

    Ties go to the kind encountered first when scanning days in date
    order and each day's logs in insertion order. Defaults to water.
    """
    counts: Dict[str, int] = {}
    for record in sorted_days(history):
        for log in record.logs:
            counts[log.kind_value] = counts.get(log.kind_value, 0) + 1

    if not counts:
        return DrinkKind.WATER.value

    best_kind, best_count = DrinkKind.WATER.value, -1
    for kind, count in counts.items():
        if count > best_count:
            best_kind, best_count = kind, count
    return best_kind


@dataclass
class AggregateStats:
    """Summary statistics across the whole history."""

    total_drinks: int = 0
    days_met_goal: int = 0
    total_days: int = 0
    total_hydration: int = 0
    avg_daily: int = 0
    avg_last_7_days: int = 0
    avg_previous_7_days: float = 0.0
    trend: str = "stable"  # up, down, stable
    most_logged_kind: str = DrinkKind.WATER.value
    success_rate: int = 0

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return asdict(self)


def aggregate_stats(history: History) -> AggregateStats:
    """
    Compute totals, averages, trend and success rate for the history.

    Rolling windows take the last 7 and the 7 before that among the
    recorded days (not contiguous calendar weeks). Every ratio falls
    back to 0 on an empty denominator.
    """
    days = sorted_days(history)
    if not days:
        return AggregateStats()

    total_drinks = sum(len(day.logs) for day in days)
    days_met = sum(1 for day in days if goal_met(day))
    total_hydration = sum(effective_hydration(day.logs) for day in days)

    avg_last_7 = round_half_up(_average(days[-7:]))
    avg_previous_7 = _average(days[-14:-7])

    trend = "stable"
    if avg_last_7 > avg_previous_7 * TREND_UP_RATIO:
        trend = "up"
    elif avg_last_7 < avg_previous_7 * TREND_DOWN_RATIO:
        trend = "down"

    stats = AggregateStats(
        total_drinks=total_drinks,
        days_met_goal=days_met,
        total_days=len(days),
        total_hydration=round_half_up(total_hydration),
        avg_daily=round_half_up(total_hydration / len(days)),
        avg_last_7_days=avg_last_7,
        avg_previous_7_days=avg_previous_7,
        trend=trend,
        most_logged_kind=most_logged_kind(history),
        success_rate=round_half_up(days_met / len(days) * 100),
    )
    logger.debug(
        f"[STATS] {stats.total_days} days, {stats.total_drinks} drinks, "
        f"success={stats.success_rate}%, trend={stats.trend}"
    )
    return stats


def weekly_data(history: History, today: Optional[date] = None) -> List[dict]:
    """The seven calendar days ending today, oldest first."""
    today = today or date.today()
    days = []
    for offset in range(6, -1, -1):
        day = today - timedelta(days=offset)
        record = history.get(date_key(day))
        total = effective_hydration(record.logs) if record else 0.0
        days.append({
            "date": date_key(day),
            "day_name": _WEEKDAYS[day.weekday()],
            "total": round_half_up(total),
            "goal": record.goal if record and record.goal else WEEKLY_FALLBACK_GOAL,
        })
    return days


@dataclass
class AchievementStats:
    """History snapshot that achievement predicates are evaluated against."""

    total_volume: float = 0.0  # raw ml, not factor-weighted
    days_met_goal: int = 0
    total_days: int = 0
    longest_streak: int = 0
    current_streak: int = 0


def achievement_progress(history: History, today: Optional[date] = None) -> AchievementStats:
    """Collect the stats the achievement engine needs from a history."""
    return AchievementStats(
        total_volume=sum((raw_volume(day.logs) for day in history.values()), 0.0),
        days_met_goal=sum(1 for day in history.values() if goal_met(day)),
        total_days=len(history),
        longest_streak=longest_streak(history),
        current_streak=streak(history, today),
    )
