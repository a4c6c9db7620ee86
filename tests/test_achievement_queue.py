"""
Unit tests for the achievement popup queue.

Usage:
    pytest tests/test_achievement_queue.py -v
"""
import pytest

from hydration.achievements import ACHIEVEMENTS
from server.hydration_api.services.achievement_queue import AchievementQueue


@pytest.fixture
def queue():
    """A fresh queue, independent of the global instance."""
    return AchievementQueue(max_history=3)


class TestAchievementQueue:
    """Test FIFO presentation of unlocked achievements."""

    def test_first_publish_shows_immediately(self, queue):
        notice = queue.publish(ACHIEVEMENTS["first_drink"])

        assert queue.current() is notice
        assert queue.get_stats()["pending"] == 0

    def test_later_unlocks_wait_in_order(self, queue):
        queue.publish(ACHIEVEMENTS["first_drink"])
        queue.publish(ACHIEVEMENTS["goal_reached"])
        queue.publish(ACHIEVEMENTS["early_bird"])

        assert queue.current().achievement.id == "first_drink"
        assert queue.dismiss().achievement.id == "goal_reached"
        assert queue.dismiss().achievement.id == "early_bird"
        assert queue.dismiss() is None
        assert queue.current() is None

    def test_dismiss_on_empty_queue(self, queue):
        assert queue.dismiss() is None
        assert queue.get_stats()["total_dismissed"] == 0

    def test_stats(self, queue):
        queue.publish(ACHIEVEMENTS["first_drink"])
        queue.publish(ACHIEVEMENTS["streak_3"])
        queue.dismiss()

        stats = queue.get_stats()

        assert stats["total_published"] == 2
        assert stats["total_dismissed"] == 1
        assert stats["by_rarity"] == {"common": 1, "rare": 1}
        assert stats["showing"] is True
        assert stats["pending"] == 0

    def test_history_is_bounded_newest_first(self, queue):
        for achievement_id in ("first_drink", "goal_getter", "week_warrior", "streak_3"):
            queue.publish(ACHIEVEMENTS[achievement_id])

        history = queue.get_history()

        assert [n.achievement.id for n in history] == ["streak_3", "week_warrior", "goal_getter"]
        assert [n.achievement.id for n in queue.get_history(1)] == ["streak_3"]

    def test_clear(self, queue):
        queue.publish(ACHIEVEMENTS["first_drink"])
        queue.publish(ACHIEVEMENTS["goal_getter"])

        queue.clear()

        assert queue.current() is None
        assert queue.get_history() == []
        stats = queue.get_stats()
        assert stats["pending"] == 0
        assert stats["total_published"] == 0
        assert stats["total_dismissed"] == 0
        assert stats["by_rarity"] == {}

    def test_notice_to_dict(self, queue):
        data = queue.publish(ACHIEVEMENTS["streak_7"]).to_dict()

        assert set(data) == {"id", "unlocked_at", "achievement"}
        assert data["achievement"]["rarity"] == "epic"
