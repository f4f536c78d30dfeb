"""
Weekly insight reports.

The report is derived fresh from the entry store on every request and never
persisted. `build_weekly_insight` holds the logic and is pure; the
`InsightGenerator` only fetches the inputs.
"""

import logging
from datetime import datetime

from .aggregation import calculate_streaks, detect_patterns, unique_activities
from .models import ACTIVITIES, MOODS, POSITIVE_MOODS, MoodEntry, WeeklyInsight
from .store import EntryStore

logger = logging.getLogger(__name__)

MAX_INSIGHTS = 3

MOOD_DESCRIPTIONS = {
    "happy": "joyful",
    "calm": "peaceful",
    "tired": "exhausted",
    "anxious": "restless",
    "focused": "driven",
    "neutral": "balanced",
    "excited": "energized",
    "sad": "melancholic",
}

PEACEFUL_EVENING_MOODS = frozenset({"calm", "happy", "sad"})


def count_moods(entries: list[MoodEntry]) -> dict[str, int]:
    counts = {mood: 0 for mood in MOODS}
    for entry in entries:
        counts[entry.mood] += 1
    return counts


def dominant_mood(counts: dict[str, int]) -> str:
    """The most frequent mood; earlier moods in MOODS win ties."""
    dominant, best = "neutral", 0
    for mood in MOODS:
        if counts.get(mood, 0) > best:
            dominant, best = mood, counts[mood]
    return dominant


def basic_insights(entries: list[MoodEntry], dominant: str) -> list[str]:
    insights = [f"You've been feeling mostly {MOOD_DESCRIPTIONS[dominant]} this week."]

    evening = [e for e in entries if e.time_of_day == "evening"]
    peaceful = sum(1 for e in evening if e.mood in PEACEFUL_EVENING_MOODS)
    if evening and peaceful > len(evening) / 2:
        insights.append(
            "Evenings bring you peace. You're often calmer as the day winds down."
        )

    morning = [e for e in entries if e.time_of_day == "morning"]
    tired = sum(1 for e in morning if e.mood == "tired")
    if morning and tired > len(morning) / 2:
        insights.append(
            "Mornings have been heavy. Consider adjusting your sleep routine."
        )

    for activity in unique_activities(entries):
        moods = [e.mood for e in entries if activity in (e.activities or [])]
        positive = sum(1 for m in moods if m in POSITIVE_MOODS)
        if positive > len(moods) / 2:
            insights.append(f"{ACTIVITIES[activity]} seems to lift your spirits.")

    return insights[:MAX_INSIGHTS]


def build_weekly_insight(
    week_entries: list[MoodEntry], all_entries: list[MoodEntry], now: datetime
) -> WeeklyInsight:
    counts = count_moods(week_entries)
    dominant = dominant_mood(counts)

    return WeeklyInsight(
        week=now.date().isoformat(),
        dominant_mood=dominant,
        mood_counts=counts,
        insights=basic_insights(week_entries, dominant),
        patterns=detect_patterns(week_entries, all_entries, now),
        streaks=calculate_streaks(all_entries, now),
    )


class InsightGenerator:
    """Builds weekly reports from an entry store."""

    def __init__(self, store: EntryStore) -> None:
        self.store = store

    async def calculate_weekly_insights(self) -> WeeklyInsight:
        now = self.store.clock()
        week_entries = await self.store.get_week_entries()
        all_entries = await self.store.get_mood_entries()

        report = build_weekly_insight(week_entries, all_entries, now)
        logger.debug(
            "Weekly insight for %s: %d entries, dominant %s",
            report.week,
            len(week_entries),
            report.dominant_mood,
        )
        return report
