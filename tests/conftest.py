"""
Shared helpers for the Life Replay tests.
"""

import uuid
from datetime import datetime, timedelta, timezone

from life_replay.models import MoodEntry

NOW = datetime(2024, 1, 10, 12, 0, tzinfo=timezone.utc)


class FakeClock:
    """A clock that only moves when told to."""

    def __init__(self, now: datetime = NOW) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


def make_entry(
    mood: str,
    time_of_day: str = "morning",
    at: datetime = NOW,
    date: str | None = None,
    **fields,
) -> MoodEntry:
    """Build a stored entry logged at `at`, dated that day unless given."""
    return MoodEntry(
        id=uuid.uuid4().hex,
        date=date or at.date().isoformat(),
        time_of_day=time_of_day,
        mood=mood,
        timestamp=int(at.timestamp() * 1000),
        **fields,
    )


def days_ago(days: float, hours: float = 0) -> datetime:
    return NOW - timedelta(days=days, hours=hours)
