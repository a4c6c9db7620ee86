"""
Quality grading for a day's drinking pattern.

Three independent sub-grades (distribution, spacing, timing) are
combined into a weighted overall grade. Thresholds are fixed cutoffs.
"""

import logging
from typing import List, Sequence

from .calculators import local_hour, raw_volume
from .models import DrinkEvent, Grade, TimePeriod

logger = logging.getLogger(__name__)

MS_PER_HOUR = 60 * 60 * 1000
EARLY_MORNING_END = 6  # drinks before this hour count as late

DISTRIBUTION_WEIGHT = 0.4
SPACING_WEIGHT = 0.3
TIMING_WEIGHT = 0.3


def is_late(log: DrinkEvent, bedtime_hour: int) -> bool:
    hour = local_hour(log)
    return hour >= bedtime_hour or hour < EARLY_MORNING_END


def grade_distribution(periods: Sequence[TimePeriod], daily_goal: float) -> Grade:
    """
    Grade how closely intake matched each period's target share.

    Night is excluded; the average normalized deviation of the first
    three periods decides the grade.
    """
    if daily_goal <= 0:
        return Grade.F

    total_deviation = 0.0
    for period in periods[:3]:
        target = daily_goal * period.target_percentage / 100
        total_deviation += abs(period.actual - target) / daily_goal

    avg_deviation = total_deviation / 3

    if avg_deviation < 0.1:
        return Grade.A
    if avg_deviation < 0.2:
        return Grade.B
    if avg_deviation < 0.3:
        return Grade.C
    if avg_deviation < 0.4:
        return Grade.D
    return Grade.F


def grade_spacing(logs: Sequence[DrinkEvent]) -> Grade:
    """Grade the gaps between drinks; fewer than two drinks is a neutral C."""
    if len(logs) < 2:
        return Grade.C

    ordered = sorted(logs, key=lambda log: log.timestamp)
    gaps: List[int] = [
        current.timestamp - previous.timestamp
        for previous, current in zip(ordered, ordered[1:])
    ]

    avg_gap = sum(gaps) / len(gaps) / MS_PER_HOUR
    max_gap = max(gaps) / MS_PER_HOUR

    # Ideal: a drink every 1-2 hours
    if 1 <= avg_gap <= 2 and max_gap < 3:
        return Grade.A
    if avg_gap <= 3 and max_gap < 4:
        return Grade.B
    if max_gap < 5:
        return Grade.C
    if max_gap < 7:
        return Grade.D
    return Grade.F


def grade_timing(logs: Sequence[DrinkEvent], bedtime_hour: int = 20) -> Grade:
    """Grade the share of raw volume drunk after bedtime or before 6am."""
    total = raw_volume(logs)
    late = raw_volume(log for log in logs if is_late(log, bedtime_hour))
    late_fraction = late / total if total > 0 else 0.0

    if late_fraction == 0:
        return Grade.A
    if late_fraction < 0.1:
        return Grade.B
    if late_fraction < 0.2:
        return Grade.C
    if late_fraction < 0.3:
        return Grade.D
    return Grade.F


def overall_grade(distribution: Grade, spacing: Grade, timing: Grade) -> Grade:
    """Weighted combination of the three sub-grades."""
    score = (
        distribution.score * DISTRIBUTION_WEIGHT
        + spacing.score * SPACING_WEIGHT
        + timing.score * TIMING_WEIGHT
    )
    grade = Grade.from_score(score)
    logger.debug(
        f"[QUALITY] distribution={distribution.value} spacing={spacing.value} "
        f"timing={timing.value} -> score={score:.2f} ({grade.value})"
    )
    return grade
