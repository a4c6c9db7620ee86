"""Thread-safe FIFO of achievement unlocks waiting to be shown.

Unlocks are evaluated by the engine; this module handles presenting
them one at a time. The first unlock becomes the current popup, later
ones wait in order until the current one is dismissed.
"""
import logging
import threading
import uuid
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterable, Optional

from hydration.achievements import Achievement

from ..config import get_settings

logger = logging.getLogger(__name__)


@dataclass
class AchievementNotice:
    """An unlocked achievement queued for display."""

    achievement: Achievement
    unlocked_at: datetime = field(default_factory=datetime.now)
    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "id": self.id,
            "unlocked_at": self.unlocked_at.isoformat(),
            "achievement": self.achievement.to_dict(),
        }


class AchievementQueue:
    """Ordered buffer of achievement popups with a single consumer.

    Keeps a bounded history of everything published so a reconnecting
    client can see what it missed.
    """

    def __init__(self, max_history: int = 100):
        """Initialize the queue.

        Args:
            max_history: Maximum number of notices to keep in history.
        """
        self._pending: deque[AchievementNotice] = deque()
        self._current: Optional[AchievementNotice] = None
        self._history: deque[AchievementNotice] = deque(maxlen=max_history)
        self._lock = threading.Lock()
        self._stats = {
            "total_published": 0,
            "total_dismissed": 0,
            "by_rarity": {},
        }

    def publish(self, achievement: Achievement) -> AchievementNotice:
        """Show the achievement now if nothing is showing, else queue it.

        Args:
            achievement: The newly unlocked achievement.

        Returns:
            The queued notice.
        """
        notice = AchievementNotice(achievement=achievement)
        with self._lock:
            self._history.append(notice)

            self._stats["total_published"] += 1
            rarity = achievement.rarity.value
            self._stats["by_rarity"][rarity] = self._stats["by_rarity"].get(rarity, 0) + 1

            if self._current is None:
                self._current = notice
            else:
                self._pending.append(notice)

        logger.info(f"[QUEUE] Published {achievement.id}")
        return notice

    def current(self) -> Optional[AchievementNotice]:
        """The notice currently on screen, if any."""
        with self._lock:
            return self._current

    def dismiss(self) -> Optional[AchievementNotice]:
        """Close the current notice and promote the next one.

        Returns:
            The new current notice, or None if the queue is empty.
        """
        with self._lock:
            if self._current is not None:
                self._stats["total_dismissed"] += 1
            self._current = self._pending.popleft() if self._pending else None
            return self._current

    def get_history(self, count: int = 50) -> list[AchievementNotice]:
        """Get recent notices, newest first.

        Args:
            count: Maximum number of notices to return.
        """
        with self._lock:
            return list(self._history)[-count:][::-1]

    def get_stats(self) -> dict:
        """Get queue statistics."""
        with self._lock:
            return {
                **self._stats,
                "showing": self._current is not None,
                "pending": len(self._pending),
                "history_size": len(self._history),
            }

    def clear(self) -> None:
        """Drop the current notice, everything pending, the history and the counters."""
        with self._lock:
            self._current = None
            self._pending.clear()
            self._history.clear()
            self._stats = {
                "total_published": 0,
                "total_dismissed": 0,
                "by_rarity": {},
            }


# Global singleton instance
achievement_queue = AchievementQueue(max_history=get_settings().achievement_history_size)


def publish_unlocks(achievements: Iterable[Achievement]) -> list[AchievementNotice]:
    """Publish several unlocks in order.

    Args:
        achievements: Newly unlocked achievements, in unlock order.

    Returns:
        The queued notices.
    """
    return [achievement_queue.publish(a) for a in achievements]
