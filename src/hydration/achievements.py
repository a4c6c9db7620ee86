"""
Achievement Engine.

Achievements are one-way milestones: locked until their predicate first
holds, then unlocked for good. Most are pure predicates over an
AchievementStats snapshot of the history. A few are session triggers
that fire when a value crosses a threshold between two consecutive
observations, which is why AchievementTracker remembers the previous
values.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Iterable, List, Optional, Set, Tuple

from .stats import AchievementStats

logger = logging.getLogger(__name__)


class Rarity(str, Enum):
    """Rarity tier shown with an unlocked achievement."""

    COMMON = "common"
    RARE = "rare"
    EPIC = "epic"
    LEGENDARY = "legendary"


@dataclass(frozen=True)
class Achievement:
    """An unlockable milestone."""

    id: str
    title: str
    description: str
    icon: str  # trophy, star, flame, target, zap, award
    color: str
    rarity: Rarity = Rarity.COMMON

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "icon": self.icon,
            "color": self.color,
            "rarity": self.rarity.value,
        }


_CATALOG = [
    Achievement("first_drink", "First Sip", "Log your first drink. Your hydration journey begins!", "star", "blue", Rarity.COMMON),
    Achievement("goal_getter", "Goal Getter", "Reach your daily goal 3 times", "target", "green", Rarity.COMMON),
    Achievement("week_warrior", "Week Warrior", "Log drinks for 7 days total", "award", "purple", Rarity.COMMON),
    Achievement("hydration_hero", "Hydration Hero", "Reach your goal 10 times", "trophy", "silver", Rarity.RARE),
    Achievement("streak_3", "Streak Starter", "Maintain a 3-day streak", "flame", "bronze", Rarity.RARE),
    Achievement("hydration_master", "Hydration Master", "Drink over 10,000ml total", "zap", "blue", Rarity.RARE),
    Achievement("consistency_king", "Consistency King", "Reach your goal 30 times", "trophy", "gold", Rarity.EPIC),
    Achievement("streak_7", "Streak Legend", "Maintain a 7-day streak", "flame", "gold", Rarity.EPIC),
    Achievement("hydration_champion", "Hydration Champion", "Drink over 50,000ml total", "award", "gold", Rarity.LEGENDARY),
    Achievement("dedication_master", "Dedication Master", "Log for 30 days total", "target", "purple", Rarity.EPIC),
    # Session-only achievements
    Achievement("goal_reached", "Goal Crusher", "You reached your daily hydration goal!", "trophy", "gold", Rarity.COMMON),
    Achievement("overachiever", "Overachiever", "Exceeded your goal by 50%!", "award", "purple", Rarity.LEGENDARY),
    Achievement("early_bird", "Early Bird", "Logged a drink before 8 AM. Great start!", "zap", "purple", Rarity.RARE),
]

ACHIEVEMENTS: Dict[str, Achievement] = {a.id: a for a in _CATALOG}

# Evaluated in this order; ids unlock at most once
HISTORY_RULES: List[Tuple[str, Callable[[AchievementStats], bool]]] = [
    ("first_drink", lambda s: s.total_volume > 0),
    ("goal_getter", lambda s: s.days_met_goal >= 3),
    ("week_warrior", lambda s: s.total_days >= 7),
    ("hydration_hero", lambda s: s.days_met_goal >= 10),
    ("streak_3", lambda s: s.longest_streak >= 3),
    ("hydration_master", lambda s: s.total_volume >= 10000),
    ("consistency_king", lambda s: s.days_met_goal >= 30),
    ("streak_7", lambda s: s.longest_streak >= 7),
    ("hydration_champion", lambda s: s.total_volume >= 50000),
    ("dedication_master", lambda s: s.total_days >= 30),
]

EARLY_BIRD_HOUR = 8
OVERACHIEVER_PERCENT = 150


def evaluate_achievements(stats: AchievementStats, unlocked: Iterable[str]) -> List[str]:
    """
    Ids whose predicate holds and that are not yet unlocked.

    Does not modify ``unlocked``; the caller records the returned ids.
    """
    already = set(unlocked)
    return [
        achievement_id
        for achievement_id, predicate in HISTORY_RULES
        if achievement_id not in already and predicate(stats)
    ]


class AchievementTracker:
    """
    Tracks which achievements a user has unlocked.

    Holds the unlocked set (append-only) plus the previous session
    observation, so threshold crossings such as reaching the goal fire
    once when they happen rather than on every check.
    """

    def __init__(self, unlocked: Optional[Iterable[str]] = None):
        """
        Initialize the tracker.

        Args:
            unlocked: Ids the user has already seen (from storage)
        """
        self._unlocked: Set[str] = set(unlocked or [])
        self._prev_hydration = 0.0
        self._prev_streak = 0

        logger.info(f"[ACHIEVEMENTS] Initialized tracker with {len(self._unlocked)} unlocked")

    @property
    def unlocked(self) -> frozenset:
        return frozenset(self._unlocked)

    def unlock(self, achievement_id: str) -> Optional[Achievement]:
        """
        Move an achievement from locked to unlocked.

        Returns:
            The Achievement if this call unlocked it, None if unknown or
            already unlocked
        """
        achievement = ACHIEVEMENTS.get(achievement_id)
        if achievement is None:
            logger.debug(f"[ACHIEVEMENTS] Unknown achievement {achievement_id}")
            return None
        if achievement_id in self._unlocked:
            return None

        self._unlocked.add(achievement_id)
        logger.info(f"[ACHIEVEMENTS] Unlocked {achievement_id} ({achievement.title})")
        return achievement

    def check_history(self, stats: AchievementStats) -> List[Achievement]:
        """Unlock every history achievement whose predicate now holds."""
        newly = []
        for achievement_id in evaluate_achievements(stats, self._unlocked):
            achievement = self.unlock(achievement_id)
            if achievement:
                newly.append(achievement)
        return newly

    def observe_session(
        self,
        hydration: float,
        goal: float,
        logs_count: int,
        current_streak: int,
        hour: int,
    ) -> List[Achievement]:
        """
        Compare the current session values with the previous call.

        Args:
            hydration: Today's effective hydration
            goal: Today's goal
            logs_count: Number of drinks logged today
            current_streak: Current goal streak
            hour: Local hour of the observation

        Returns:
            Achievements unlocked by this observation
        """
        prev_hydration = self._prev_hydration
        prev_streak = self._prev_streak
        percentage = hydration / goal * 100 if goal > 0 else 0.0
        prev_percentage = prev_hydration / goal * 100 if goal > 0 else 0.0

        triggered = []
        if hydration > 0 and prev_hydration == 0 and logs_count == 1:
            triggered.append("first_drink")
        if goal > 0 and hydration >= goal and prev_hydration < goal:
            triggered.append("goal_reached")
        if percentage >= OVERACHIEVER_PERCENT and prev_percentage < OVERACHIEVER_PERCENT:
            triggered.append("overachiever")
        if hour < EARLY_BIRD_HOUR and logs_count > 0 and prev_hydration == 0:
            triggered.append("early_bird")
        if current_streak >= 3 and prev_streak < 3:
            triggered.append("streak_3")
        if current_streak >= 7 and prev_streak < 7:
            triggered.append("streak_7")

        self._prev_hydration = hydration
        self._prev_streak = current_streak

        newly = []
        for achievement_id in triggered:
            achievement = self.unlock(achievement_id)
            if achievement:
                newly.append(achievement)
        return newly

    def reset_session(self) -> None:
        """Forget the previous observation (e.g. at the start of a new day)."""
        self._prev_hydration = 0.0
        self._prev_streak = 0

    def get_status(self) -> Dict:
        """Unlocked ids and progress against the full catalog."""
        return {
            "unlocked": sorted(self._unlocked),
            "unlocked_count": len(self._unlocked & set(ACHIEVEMENTS)),
            "total": len(ACHIEVEMENTS),
        }
