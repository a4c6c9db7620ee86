"""Hydration quality evaluation for a single day's events."""

import logging
from typing import Sequence

from .calculators import caffeine_total
from .grading import grade_distribution, grade_spacing, grade_timing, overall_grade
from .insights import generate_insights
from .intake_warnings import detect_warnings
from .models import DrinkEvent, HydrationQuality
from .periods import time_periods

logger = logging.getLogger(__name__)


def hydration_quality(
    logs: Sequence[DrinkEvent],
    daily_goal: float,
    bedtime_hour: int = 20,
) -> HydrationQuality:
    """
    Grade a day's drinking pattern and collect its warnings and insights.

    Pure function: identical inputs always give identical output.

    Args:
        logs: The day's drink events, in any order
        daily_goal: The day's goal in ml
        bedtime_hour: Hour after which drinking counts as late

    Returns:
        HydrationQuality with overall and sub-grades, warnings and insights
    """
    warnings = detect_warnings(logs, bedtime_hour)

    periods = time_periods(logs, daily_goal)
    distribution = grade_distribution(periods, daily_goal)
    spacing = grade_spacing(logs)
    timing = grade_timing(logs, bedtime_hour)
    overall = overall_grade(distribution, spacing, timing)

    insights = generate_insights(periods, distribution, spacing, timing, caffeine_total(logs))

    logger.debug(
        f"[QUALITY] {len(logs)} drinks, goal={daily_goal}: overall={overall.value}, "
        f"{len(warnings)} warnings, {len(insights)} insights"
    )

    return HydrationQuality(
        overall=overall,
        distribution=distribution,
        spacing=spacing,
        timing=timing,
        warnings=warnings,
        insights=insights,
    )
