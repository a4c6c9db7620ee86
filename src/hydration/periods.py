"""Circadian time-period distribution of a day's effective hydration."""

from typing import Iterable, List

from .calculators import local_hour
from .catalog import lookup
from .models import DrinkEvent, TimePeriod

# (name, start hour, end hour, target share of daily intake in %)
TIME_PERIODS = [
    ("Morning", 6, 12, 37.5),
    ("Afternoon", 12, 18, 37.5),
    ("Evening", 18, 22, 25.0),
    ("Night", 22, 6, 0.0),  # should avoid
]


def time_periods(logs: Iterable[DrinkEvent], daily_goal: float) -> List[TimePeriod]:
    """
    Bucket effective volume into circadian periods by local hour.

    Periods do not overlap, so every event lands in exactly one bucket
    and the actuals sum to the day's effective hydration.

    Args:
        logs: The day's drink events
        daily_goal: The day's goal (kept for callers that grade against it)

    Returns:
        Morning, Afternoon, Evening and Night periods, in that order
    """
    periods = [TimePeriod(name, start, end, pct) for name, start, end, pct in TIME_PERIODS]

    for log in logs:
        hour = local_hour(log)
        effective = log.amount * lookup(log.kind).hydration_factor
        for period in periods:
            if period.contains(hour):
                period.actual += effective

    return periods
