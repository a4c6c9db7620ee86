"""
Unit tests for streaks, aggregate statistics and weekly data.

Usage:
    pytest tests/test_stats.py -v
"""
from hydration.models import DayRecord
from hydration.stats import (
    AggregateStats,
    achievement_progress,
    aggregate_stats,
    longest_streak,
    most_logged_kind,
    streak,
    weekly_data,
)


def history_of(*entries):
    """Build a history dict from make_day tuples."""
    return dict(entries)


class TestStreak:
    """Test the current streak walk."""

    def test_today_and_yesterday_met(self, make_day, today, days_before):
        history = history_of(
            make_day(today, True),
            make_day(days_before(1), True),
            make_day(days_before(2), False),
        )

        assert streak(history, today) == 2

    def test_unmet_today_does_not_break(self, make_day, today, days_before):
        """Today is still in progress; the chain from yesterday counts."""
        history = history_of(
            make_day(today, False),
            make_day(days_before(1), True),
            make_day(days_before(2), True),
        )

        assert streak(history, today) == 2

    def test_unmet_yesterday_ends_streak(self, make_day, today, days_before):
        history = history_of(
            make_day(days_before(1), False),
            make_day(days_before(2), True),
            make_day(days_before(3), True),
        )

        assert streak(history, today) == 0

    def test_only_today(self, make_day, today):
        assert streak(history_of(make_day(today, True)), today) == 1

    def test_missing_day_ends_streak(self, make_day, today, days_before):
        history = history_of(make_day(today, True), make_day(days_before(2), True))

        assert streak(history, today) == 1

    def test_empty_history(self, today):
        assert streak({}, today) == 0

    def test_goal_is_per_day(self, drink, today, days_before):
        """Each day is judged against its own stored goal."""
        yesterday = days_before(1)
        history = {
            yesterday.isoformat(): DayRecord(
                date=yesterday.isoformat(),
                goal=1500,
                logs=[drink(10, amount=1500, day=yesterday)],
            ),
        }

        assert streak(history, today) == 1


class TestLongestStreak:
    """Test the longest run of goal-met days."""

    def test_longest_run(self, make_day, days_before):
        history = history_of(
            make_day(days_before(6), True),
            make_day(days_before(5), True),
            make_day(days_before(4), True),
            make_day(days_before(3), False),
            make_day(days_before(2), True),
            make_day(days_before(1), True),
        )

        assert longest_streak(history) == 3

    def test_insertion_order_does_not_matter(self, make_day, days_before):
        history = history_of(
            make_day(days_before(1), True),
            make_day(days_before(3), True),
            make_day(days_before(2), True),
        )

        assert longest_streak(history) == 3

    def test_no_met_days(self, make_day, days_before):
        assert longest_streak(history_of(make_day(days_before(1), False))) == 0


class TestAggregateStats:
    """Test aggregate statistics."""

    def test_empty_history(self):
        """Every ratio falls back to zero."""
        stats = aggregate_stats({})

        assert stats == AggregateStats()
        assert stats.success_rate == 0
        assert stats.trend == "stable"
        assert stats.most_logged_kind == "water"

    def test_three_day_sample(self, drink, days_before):
        days = [(days_before(3), 2000), (days_before(2), 2000), (days_before(1), 1500)]
        history = {
            day.isoformat(): DayRecord(
                date=day.isoformat(),
                goal=2000,
                logs=[drink(9, amount=amount / 2, day=day), drink(15, amount=amount / 2, day=day)],
            )
            for day, amount in days
        }

        stats = aggregate_stats(history)

        assert stats.total_drinks == 6
        assert stats.days_met_goal == 2
        assert stats.total_days == 3
        assert stats.total_hydration == 5500
        assert stats.avg_daily == 1833
        assert stats.avg_last_7_days == 1833
        assert stats.success_rate == 67
        # No previous week to compare against
        assert stats.trend == "up"

    def test_trend_down(self, make_day, days_before):
        history = history_of(*[make_day(days_before(n), n > 7) for n in range(1, 15)])

        stats = aggregate_stats(history)

        assert stats.avg_last_7_days == 1000
        assert stats.avg_previous_7_days == 2000
        assert stats.trend == "down"

    def test_trend_stable(self, make_day, days_before):
        history = history_of(*[make_day(days_before(n), True) for n in range(1, 15)])

        assert aggregate_stats(history).trend == "stable"

    def test_uses_effective_hydration(self, make_day, days_before):
        history = history_of(make_day(days_before(1), True, kind="coffee"))

        stats = aggregate_stats(history)

        assert stats.total_hydration == 1700
        assert stats.days_met_goal == 0


class TestMostLoggedKind:
    """Test most-logged drink kind selection."""

    def test_counts_events_not_volume(self, drink, days_before):
        day = days_before(1)
        history = {
            day.isoformat(): DayRecord(
                date=day.isoformat(),
                goal=2000,
                logs=[
                    drink(8, amount=1000, day=day),
                    drink(9, amount=100, kind="tea", day=day),
                    drink(10, amount=100, kind="tea", day=day),
                ],
            ),
        }

        assert most_logged_kind(history) == "tea"

    def test_tie_goes_to_first_seen(self, drink, days_before):
        first, second = days_before(2), days_before(1)
        history = {
            second.isoformat(): DayRecord(
                date=second.isoformat(),
                goal=2000,
                logs=[drink(8, kind="water", day=second), drink(9, kind="tea", day=second)],
            ),
            first.isoformat(): DayRecord(
                date=first.isoformat(),
                goal=2000,
                logs=[drink(8, kind="tea", day=first), drink(9, kind="water", day=first)],
            ),
        }

        assert most_logged_kind(history) == "tea"


class TestWeeklyData:
    """Test the seven-day chart series."""

    def test_seven_days_oldest_first(self, make_day, today, days_before):
        history = history_of(make_day(today, True, goal=2500), make_day(days_before(3), False))

        week = weekly_data(history, today)

        assert [d["date"] for d in week] == [days_before(n).isoformat() for n in range(6, -1, -1)]
        assert [d["day_name"] for d in week] == ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]
        assert week[-1] == {"date": "2024-06-15", "day_name": "Sat", "total": 2500, "goal": 2500}
        assert week[3]["total"] == 1000

    def test_missing_days_use_fallback_goal(self, today):
        week = weekly_data({}, today)

        assert all(d["total"] == 0 and d["goal"] == 2000 for d in week)


class TestAchievementProgress:
    """Test the snapshot fed to the achievement engine."""

    def test_total_volume_is_raw(self, make_day, today):
        history = history_of(make_day(today, True, kind="coffee"))

        progress = achievement_progress(history, today)

        assert progress.total_volume == 2000
        assert progress.days_met_goal == 0
        assert progress.total_days == 1

    def test_streaks(self, make_day, today, days_before):
        history = history_of(
            make_day(days_before(1), True),
            make_day(days_before(2), True),
            make_day(days_before(5), True),
        )

        progress = achievement_progress(history, today)

        assert progress.current_streak == 2
        assert progress.longest_streak == 3
