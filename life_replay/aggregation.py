"""
Pure aggregation over mood entries.

Nothing here touches storage: every function takes the entries it works on,
and anything time-dependent takes an explicit `now`. Pattern detectors return
at most one PatternInsight each, or None.
"""

import math
from collections.abc import Iterable
from datetime import datetime, timedelta

from .models import (
    ACTIVITIES,
    POSITIVE_MOODS,
    ActivityImpact,
    DayStats,
    EnergySummary,
    MoodEntry,
    PatternInsight,
    StreakInfo,
)

STREAK_LOOKBACK_DAYS = 30
MIN_LOGGING_STREAK = 2
MIN_MOOD_STREAK = 3
MIN_WINDOW_ENTRIES = 3
TREND_THRESHOLD = 0.2
TIME_PATTERN_THRESHOLD = 0.7
MAX_PATTERNS = 4

MORNING_POSITIVE = frozenset({"happy", "excited", "focused"})
EVENING_POSITIVE = frozenset({"happy", "calm", "excited"})
FATIGUE_MOODS = frozenset({"tired", "anxious"})


def to_millis(moment: datetime) -> int:
    return int(moment.timestamp() * 1000)


def round1(value: float) -> float:
    """Round half up to one decimal place."""
    return math.floor(value * 10 + 0.5) / 10


def positive_fraction(
    entries: list[MoodEntry], positive: Iterable[str] = POSITIVE_MOODS
) -> float:
    if not entries:
        return 0.0
    positive = frozenset(positive)
    return sum(1 for e in entries if e.mood in positive) / len(entries)


def unique_dates(entries: Iterable[MoodEntry]) -> list[str]:
    """Distinct entry dates, most recent first."""
    return sorted({e.date for e in entries}, reverse=True)


def entries_between(
    entries: Iterable[MoodEntry], start: datetime, end: datetime
) -> list[MoodEntry]:
    """Entries whose timestamp falls in [start, end)."""
    lo, hi = to_millis(start), to_millis(end)
    return [e for e in entries if lo <= e.timestamp < hi]


# MARK: - Streaks


def logging_streak(entries: Iterable[MoodEntry], now: datetime) -> int:
    """
    Count consecutive days with at least one entry, walking back from today.

    A missing entry today does not break the streak; the first gap before
    today does. The walk stops after STREAK_LOOKBACK_DAYS days.
    """
    dates = {e.date for e in entries}
    streak = 0
    for days_ago in range(STREAK_LOOKBACK_DAYS):
        day = (now - timedelta(days=days_ago)).date().isoformat()
        if day in dates:
            streak += 1
        elif days_ago > 0:
            break
    return streak


def positive_mood_streak(entries: Iterable[MoodEntry]) -> int:
    """Length of the run of positive moods among the most recent entries."""
    streak = 0
    for entry in sorted(entries, key=lambda e: e.timestamp, reverse=True):
        if entry.mood not in POSITIVE_MOODS:
            break
        streak += 1
    return streak


def calculate_streaks(all_entries: list[MoodEntry], now: datetime) -> list[StreakInfo]:
    streaks: list[StreakInfo] = []

    days = logging_streak(all_entries, now)
    if days >= MIN_LOGGING_STREAK:
        streaks.append(
            StreakInfo(
                type="logging",
                count=days,
                description=f"{days} day{'s' if days > 1 else ''} logging streak! 🔥",
            )
        )

    positive = positive_mood_streak(all_entries)
    if positive >= MIN_MOOD_STREAK:
        streaks.append(
            StreakInfo(
                type="mood",
                count=positive,
                description=f"{positive} positive entries in a row! ✨",
            )
        )

    return streaks


# MARK: - Pattern detectors


def detect_energy_pattern(week_entries: list[MoodEntry]) -> PatternInsight | None:
    levels = [e.energy_level for e in week_entries if e.energy_level is not None]
    if len(levels) < MIN_WINDOW_ENTRIES:
        return None

    average = sum(levels) / len(levels)
    if average >= 4:
        return PatternInsight(
            type="energy",
            title="High Energy Week",
            description="Your energy levels have been above average this week!",
            icon="⚡",
        )
    if average <= 2:
        return PatternInsight(
            type="energy",
            title="Low Energy Pattern",
            description="You might need more rest. Consider taking breaks.",
            icon="🔋",
        )
    return None


def detect_time_pattern(week_entries: list[MoodEntry]) -> PatternInsight | None:
    morning = [e for e in week_entries if e.time_of_day == "morning"]
    evening = [e for e in week_entries if e.time_of_day == "evening"]

    if (
        len(morning) >= MIN_WINDOW_ENTRIES
        and positive_fraction(morning, MORNING_POSITIVE) > TIME_PATTERN_THRESHOLD
    ):
        return PatternInsight(
            type="time",
            title="Morning Person",
            description="You tend to feel best in the mornings!",
            icon="🌅",
        )
    if (
        len(evening) >= MIN_WINDOW_ENTRIES
        and positive_fraction(evening, EVENING_POSITIVE) > TIME_PATTERN_THRESHOLD
    ):
        return PatternInsight(
            type="time",
            title="Night Owl",
            description="Your mood improves as the day goes on.",
            icon="🌙",
        )
    return None


def detect_trend_pattern(
    week_entries: list[MoodEntry], all_entries: list[MoodEntry], now: datetime
) -> PatternInsight | None:
    """Compare this week's positive share with the previous 7-day window."""
    last_week = entries_between(
        all_entries, now - timedelta(days=14), now - timedelta(days=7)
    )
    if len(week_entries) < MIN_WINDOW_ENTRIES or len(last_week) < MIN_WINDOW_ENTRIES:
        return None

    this_share = positive_fraction(week_entries)
    last_share = positive_fraction(last_week)

    if this_share > last_share + TREND_THRESHOLD:
        return PatternInsight(
            type="trend",
            title="Upward Trend",
            description="Your mood has been improving compared to last week!",
            icon="📈",
        )
    if this_share < last_share - TREND_THRESHOLD:
        return PatternInsight(
            type="trend",
            title="Challenging Week",
            description="This week has been tougher. Be gentle with yourself.",
            icon="💙",
        )
    return None


def longest_fatigue_run(entries: Iterable[MoodEntry]) -> int:
    longest = current = 0
    for entry in sorted(entries, key=lambda e: e.timestamp):
        if entry.mood in FATIGUE_MOODS:
            current += 1
            longest = max(longest, current)
        else:
            current = 0
    return longest


def detect_fatigue_pattern(week_entries: list[MoodEntry]) -> PatternInsight | None:
    run = longest_fatigue_run(week_entries)
    if run < 3:
        return None
    intensity = "really " if run >= 4 else ""
    return PatternInsight(
        type="streak",
        title="Rest Needed",
        description=(
            f"You've been {intensity}tired or anxious for a while. "
            "Prioritize self-care."
        ),
        icon="🫂",
    )


def detect_patterns(
    week_entries: list[MoodEntry], all_entries: list[MoodEntry], now: datetime
) -> list[PatternInsight]:
    """Run every detector in fixed order: energy, time of day, trend, fatigue."""
    candidates = [
        detect_energy_pattern(week_entries),
        detect_time_pattern(week_entries),
        detect_trend_pattern(week_entries, all_entries, now),
        detect_fatigue_pattern(week_entries),
    ]
    return [p for p in candidates if p is not None][:MAX_PATTERNS]


# MARK: - Stats


def activity_impact(
    entries: Iterable[MoodEntry], limit: int = 5
) -> list[ActivityImpact]:
    """How often each activity was logged and how often alongside a positive mood."""
    counts: dict[str, int] = {}
    positives: dict[str, int] = {}
    for entry in entries:
        for activity in entry.activities or []:
            counts[activity] = counts.get(activity, 0) + 1
            if entry.mood in POSITIVE_MOODS:
                positives[activity] = positives.get(activity, 0) + 1

    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)[:limit]
    return [
        ActivityImpact(
            activity=activity,
            label=ACTIVITIES[activity],
            count=count,
            positive_ratio=positives.get(activity, 0) / count,
        )
        for activity, count in ranked
    ]


def energy_label(average: float) -> str:
    if average >= 4:
        return "High"
    if average >= 3:
        return "Moderate"
    if average >= 2:
        return "Low"
    return "Very Low"


def _average_energy(entries: list[MoodEntry]) -> float | None:
    levels = [e.energy_level for e in entries if e.energy_level is not None]
    if not levels:
        return None
    return sum(levels) / len(levels)


def energy_summary(entries: list[MoodEntry]) -> EnergySummary | None:
    """Overall, morning and evening energy averages; None with fewer than 3 readings."""
    with_energy = [e for e in entries if e.energy_level is not None]
    if len(with_energy) < MIN_WINDOW_ENTRIES:
        return None

    average = _average_energy(with_energy)
    morning = _average_energy([e for e in with_energy if e.time_of_day == "morning"])
    evening = _average_energy([e for e in with_energy if e.time_of_day == "evening"])

    return EnergySummary(
        average=round1(average),
        label=energy_label(average),
        morning=round1(morning) if morning is not None else None,
        evening=round1(evening) if evening is not None else None,
    )


def unique_activities(entries: Iterable[MoodEntry]) -> list[str]:
    """Activities across entries in order of first appearance."""
    seen: dict[str, None] = {}
    for entry in entries:
        for activity in entry.activities or []:
            seen.setdefault(activity, None)
    return list(seen)


def day_stats(entries: list[MoodEntry]) -> DayStats:
    average = _average_energy(entries)
    return DayStats(
        activities_count=len(unique_activities(entries)),
        average_energy=round1(average) if average is not None else 0,
        has_notes=any(e.note and e.note.strip() for e in entries),
    )
