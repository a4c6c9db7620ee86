"""
Unit tests for history operations.

Usage:
    pytest tests/test_history.py -v
"""
from datetime import datetime

import pytest

from hydration.history import add_drink, remove_drink, today_progress, update_goal
from hydration.models import DayRecord, UserSettings


class TestAddDrink:
    """Test logging drinks into a history."""

    def test_creates_day_with_current_goal(self, today):
        now = datetime(2024, 6, 15, 9, 30)

        history, event = add_drink({}, 300, daily_goal=2500, kind="tea", now=now)

        record = history["2024-06-15"]
        assert record.goal == 2500
        assert record.logs == [event]
        assert event.kind == "tea"
        assert event.timestamp == int(now.timestamp() * 1000)

    def test_appends_and_keeps_original_goal(self):
        history, _ = add_drink({}, 300, daily_goal=2000, now=datetime(2024, 6, 15, 9))
        history, _ = add_drink(history, 200, daily_goal=3000, now=datetime(2024, 6, 15, 11))

        record = history["2024-06-15"]
        assert record.goal == 2000
        assert [log.amount for log in record.logs] == [300, 200]

    def test_does_not_modify_input(self):
        original, _ = add_drink({}, 300, daily_goal=2000, now=datetime(2024, 6, 15, 9))

        updated, _ = add_drink(original, 200, daily_goal=2000, now=datetime(2024, 6, 15, 10))

        assert len(original["2024-06-15"].logs) == 1
        assert len(updated["2024-06-15"].logs) == 2

    def test_event_ids_are_unique(self):
        now = datetime(2024, 6, 15, 9)
        history, first = add_drink({}, 100, 2000, now=now)
        history, second = add_drink(history, 100, 2000, now=now)

        assert first.id != second.id


class TestRemoveDrink:
    """Test removing drinks."""

    def test_removes_by_id(self, drink, today):
        keep, gone = drink(9), drink(10)
        history = {"2024-06-15": DayRecord(date="2024-06-15", goal=2000, logs=[keep, gone])}

        updated = remove_drink(history, gone.id, today)

        assert updated["2024-06-15"].logs == [keep]
        assert history["2024-06-15"].logs == [keep, gone]

    def test_unknown_day_is_noop(self, today):
        assert remove_drink({}, "missing", today) == {}

    def test_unknown_id_leaves_logs(self, drink, today):
        history = {"2024-06-15": DayRecord(date="2024-06-15", goal=2000, logs=[drink(9)])}

        assert remove_drink(history, "missing", today)["2024-06-15"].logs == history["2024-06-15"].logs


class TestUpdateGoal:
    """Test goal changes."""

    def test_only_today_is_rewritten(self, make_day, today, days_before):
        history = dict([make_day(today, False), make_day(days_before(1), True)])
        settings = UserSettings(daily_goal=2000)

        updated, new_settings = update_goal(history, settings, 3000, today)

        assert new_settings.daily_goal == 3000
        assert settings.daily_goal == 2000
        assert updated[today.isoformat()].goal == 3000
        assert updated[days_before(1).isoformat()].goal == 2000
        assert history[today.isoformat()].goal == 2000

    def test_no_record_today(self, today):
        updated, new_settings = update_goal({}, UserSettings(), 1800, today)

        assert updated == {}
        assert new_settings.daily_goal == 1800


class TestTodayProgress:
    """Test today's progress summary."""

    def test_percentage_capped(self, make_day, today):
        history = dict([make_day(today, True, goal=2000)])

        progress = today_progress(history, UserSettings(daily_goal=1000), today)

        assert progress["hydration"] == pytest.approx(2000)
        assert progress["percentage"] == 100.0

    def test_partial(self, make_day, today):
        history = dict([make_day(today, False, goal=2000)])

        progress = today_progress(history, UserSettings(daily_goal=2000), today)

        assert progress["percentage"] == pytest.approx(50.0)

    def test_zero_goal(self, today):
        assert today_progress({}, UserSettings(daily_goal=0), today)["percentage"] == 0.0


class TestDayRecordSerialization:
    """Test the storage shape of a day record."""

    def test_to_dict(self, drink):
        record = DayRecord(date="2024-06-15", goal=2000, logs=[drink(9, amount=300, kind="tea")])

        data = record.to_dict()

        assert data["date"] == "2024-06-15"
        assert data["goal"] == 2000
        assert data["logs"] == [
            {"id": record.logs[0].id, "timestamp": record.logs[0].timestamp, "amount": 300, "type": "tea"},
        ]

    def test_from_dict_restores_record(self, drink):
        record = DayRecord(date="2024-06-15", goal=2000, logs=[drink(9), drink(11, kind="coffee")])

        assert DayRecord.from_dict(record.to_dict()) == record

    def test_from_dict_fills_missing_ids(self, ts):
        data = {"date": "2024-06-15", "goal": 2000, "logs": [{"timestamp": ts(9), "amount": 250}]}

        record = DayRecord.from_dict(data)

        assert record.logs[0].id
        assert record.logs[0].kind == "water"
