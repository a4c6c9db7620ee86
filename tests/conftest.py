"""
Pytest fixtures for hydration engine tests.
"""
import sys
import pytest
from datetime import date, datetime, timedelta
from pathlib import Path
from dotenv import load_dotenv

# Ensure src/ is on sys.path so tests can import the hydration package.
ROOT = Path(__file__).resolve().parent.parent
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# Load environment variables
load_dotenv()

from hydration.models import DayRecord, DrinkEvent  # noqa: E402


# A Saturday, away from any DST transition
REFERENCE_DAY = date(2024, 6, 15)


def to_ms(day: date, hour: int, minute: int = 0) -> int:
    """Epoch milliseconds for a local wall-clock time."""
    return int(datetime(day.year, day.month, day.day, hour, minute).timestamp() * 1000)


@pytest.fixture
def today():
    """Reference date used as 'today' in streak and weekly tests."""
    return REFERENCE_DAY


@pytest.fixture
def ts():
    """Factory: local (hour, minute) on the reference day -> epoch ms."""
    def _ts(hour: int, minute: int = 0, day: date = REFERENCE_DAY) -> int:
        return to_ms(day, hour, minute)
    return _ts


@pytest.fixture
def drink():
    """Factory for DrinkEvents at a local time on the reference day."""
    counter = {"n": 0}

    def _drink(
        hour: int,
        minute: int = 0,
        amount: float = 250,
        kind: str = "water",
        day: date = REFERENCE_DAY,
    ) -> DrinkEvent:
        counter["n"] += 1
        return DrinkEvent(
            id=f"drink-{counter['n']}",
            timestamp=to_ms(day, hour, minute),
            amount=amount,
            kind=kind,
        )

    return _drink


@pytest.fixture
def make_day(drink):
    """
    Factory for a DayRecord that either meets or misses its goal.

    Returns a (date_key, DayRecord) tuple ready to drop into a history dict.
    """
    def _make_day(day: date, met: bool, goal: float = 2000, kind: str = "water") -> tuple:
        amount = goal if met else goal / 2
        record = DayRecord(
            date=day.isoformat(),
            goal=goal,
            logs=[drink(12, amount=amount, kind=kind, day=day)],
        )
        return day.isoformat(), record

    return _make_day


@pytest.fixture
def days_before():
    """Factory: date n days before the reference day."""
    def _days_before(n: int) -> date:
        return REFERENCE_DAY - timedelta(days=n)
    return _days_before
