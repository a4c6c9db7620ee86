"""
Hydration Analytics Engine.

Turns timestamped drink events into quality grades, warnings, insights,
time-period distributions, streaks and achievement unlocks.
"""

from .achievements import (
    ACHIEVEMENTS,
    Achievement,
    AchievementTracker,
    evaluate_achievements,
)
from .calculators import caffeine_total, effective_hydration
from .catalog import DRINK_CATALOG, DrinkKind, lookup
from .models import (
    DayRecord,
    DrinkEvent,
    Grade,
    HydrationQuality,
    HydrationWarning,
    UserSettings,
)
from .periods import time_periods
from .quality import hydration_quality
from .stats import (
    achievement_progress,
    aggregate_stats,
    longest_streak,
    streak,
    weekly_data,
)

__all__ = [
    "ACHIEVEMENTS",
    "Achievement",
    "AchievementTracker",
    "evaluate_achievements",
    "caffeine_total",
    "effective_hydration",
    "DRINK_CATALOG",
    "DrinkKind",
    "lookup",
    "DayRecord",
    "DrinkEvent",
    "Grade",
    "HydrationQuality",
    "HydrationWarning",
    "UserSettings",
    "time_periods",
    "hydration_quality",
    "achievement_progress",
    "aggregate_stats",
    "longest_streak",
    "streak",
    "weekly_data",
]
