"""
Warning Detection for a day's drink events.

Five independent rule checks (rapid intake, hourly overload, caffeine,
bedtime drinking, long gaps). Each returns zero or more
HydrationWarning records; detect_warnings concatenates them in that
order without deduplication.
"""

import logging
from typing import Dict, List, Sequence

from .calculators import caffeine_total, local_hour, round_half_up
from .grading import MS_PER_HOUR, is_late
from .models import DrinkEvent, HydrationWarning, Severity, WarningKind

logger = logging.getLogger(__name__)

HOURLY_ABSORPTION_LIMIT = 800  # ml per hour
RAPID_INTAKE_THRESHOLD = 500  # ml within the window
RAPID_INTAKE_WINDOW_MS = 15 * 60 * 1000
MAX_CAFFEINE_DAILY = 400  # mg
WARNING_CAFFEINE_DAILY = 300  # mg
LONG_GAP_HOURS = 3


def _ml(value: float):
    """Render a volume as-is, dropping the trailing .0 of whole numbers."""
    return int(value) if float(value).is_integer() else value


def check_rapid_intake(logs: Sequence[DrinkEvent]) -> List[HydrationWarning]:
    """Flag any 15-minute window starting at a drink that totals 500ml or more."""
    warnings: List[HydrationWarning] = []
    ordered = sorted(logs, key=lambda log: log.timestamp)

    i = 0
    while i < len(ordered):
        window_start = ordered[i].timestamp
        window_end = window_start + RAPID_INTAKE_WINDOW_MS
        in_window = [log for log in ordered if window_start <= log.timestamp < window_end]
        total = sum(log.amount for log in in_window)

        if total >= RAPID_INTAKE_THRESHOLD:
            warnings.append(
                HydrationWarning(
                    kind=WarningKind.ABSORPTION,
                    severity=Severity.WARNING,
                    message=(
                        f"⚠️ Rapid intake detected ({_ml(total)}ml in 15 min). "
                        "Your body can only absorb ~800ml/hour effectively. "
                        "Consider spacing drinks."
                    ),
                    timestamp=window_start,
                )
            )
            # Skip the drinks already counted so one burst warns once
            i += len(in_window)
        else:
            i += 1

    return warnings


def check_hourly_limits(logs: Sequence[DrinkEvent]) -> List[HydrationWarning]:
    """Flag clock hours whose raw volume exceeds the absorption limit."""
    hourly: Dict[int, Dict[str, float]] = {}
    for log in logs:
        hour = local_hour(log)
        bucket = hourly.setdefault(hour, {"total": 0.0, "timestamp": log.timestamp})
        bucket["total"] += log.amount

    warnings = []
    for hour, bucket in hourly.items():
        if bucket["total"] > HOURLY_ABSORPTION_LIMIT:
            warnings.append(
                HydrationWarning(
                    kind=WarningKind.OVERLOAD,
                    severity=Severity.INFO,
                    message=(
                        f"💡 {_ml(bucket['total'])}ml consumed during {hour}:00-{hour + 1}:00. "
                        "Body absorbs ~800ml/hour max. Excess may not be fully utilized."
                    ),
                    timestamp=int(bucket["timestamp"]),
                )
            )
    return warnings


def check_caffeine(logs: Sequence[DrinkEvent]) -> List[HydrationWarning]:
    """Warn at 300mg of caffeine, critical at 400mg (inclusive)."""
    total = caffeine_total(logs)

    if total >= MAX_CAFFEINE_DAILY:
        return [
            HydrationWarning(
                kind=WarningKind.CAFFEINE,
                severity=Severity.CRITICAL,
                message=(
                    f"☕ High caffeine intake ({round_half_up(total)}mg). "
                    "FDA recommends max 400mg/day. Consider switching to water."
                ),
            )
        ]
    if total >= WARNING_CAFFEINE_DAILY:
        return [
            HydrationWarning(
                kind=WarningKind.CAFFEINE,
                severity=Severity.WARNING,
                message=(
                    f"☕ Moderate caffeine intake ({round_half_up(total)}mg). "
                    "Consider balancing with water for better hydration."
                ),
            )
        ]
    return []


def check_bedtime(logs: Sequence[DrinkEvent], bedtime_hour: int = 20) -> List[HydrationWarning]:
    """One aggregate warning for everything drunk after bedtime or before 6am."""
    late = [log for log in logs if is_late(log, bedtime_hour)]
    if not late:
        return []

    total_late = sum(log.amount for log in late)
    return [
        HydrationWarning(
            kind=WarningKind.BEDTIME,
            severity=Severity.WARNING,
            message=(
                f"🌙 {_ml(total_late)}ml consumed after {bedtime_hour}:00. "
                "Late hydration may disrupt sleep due to bathroom trips."
            ),
        )
    ]


def check_gaps(logs: Sequence[DrinkEvent]) -> List[HydrationWarning]:
    """Flag every gap between consecutive drinks longer than three hours."""
    if len(logs) < 2:
        return []

    ordered = sorted(logs, key=lambda log: log.timestamp)
    max_gap_ms = LONG_GAP_HOURS * MS_PER_HOUR

    warnings = []
    for previous, current in zip(ordered, ordered[1:]):
        gap = current.timestamp - previous.timestamp
        if gap > max_gap_ms:
            warnings.append(
                HydrationWarning(
                    kind=WarningKind.GAP,
                    severity=Severity.INFO,
                    message=(
                        f"⏰ {round_half_up(gap / MS_PER_HOUR)}-hour gap detected. "
                        "Regular hydration throughout the day is more effective "
                        "than playing catch-up."
                    ),
                    timestamp=current.timestamp,
                )
            )
    return warnings


def detect_warnings(logs: Sequence[DrinkEvent], bedtime_hour: int = 20) -> List[HydrationWarning]:
    """Run every check and concatenate the results."""
    warnings = [
        *check_rapid_intake(logs),
        *check_hourly_limits(logs),
        *check_caffeine(logs),
        *check_bedtime(logs, bedtime_hour),
        *check_gaps(logs),
    ]
    if warnings:
        logger.debug(
            f"[WARNINGS] {len(warnings)} warning(s): "
            f"{[w.kind.value for w in warnings]}"
        )
    return warnings
