"""
Shared data models for Life Replay.

This module defines the core domain models used across multiple layers
of the application (storage, insights, story generation, API, CLI).
Models are stored and served with camelCase keys, but accept either
spelling on input.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

Mood = Literal[
    "happy", "calm", "tired", "anxious", "focused", "neutral", "excited", "sad"
]
TimeOfDay = Literal["morning", "afternoon", "evening"]
ActivityId = Literal[
    "work", "social", "exercise", "creative", "rest", "nature", "learning", "family"
]

# Enumeration order matters: it breaks ties for the dominant mood.
MOODS: tuple[str, ...] = (
    "happy",
    "calm",
    "tired",
    "anxious",
    "focused",
    "neutral",
    "excited",
    "sad",
)
TIMES_OF_DAY: tuple[str, ...] = ("morning", "afternoon", "evening")

ACTIVITIES: dict[str, str] = {
    "work": "Work",
    "social": "Social",
    "exercise": "Exercise",
    "creative": "Creative",
    "rest": "Rest",
    "nature": "Nature",
    "learning": "Learning",
    "family": "Family",
}

POSITIVE_MOODS = frozenset({"happy", "calm", "excited", "focused"})


class CamelModel(BaseModel):
    """Base model serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_json_dict(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


# MARK: - Entries


class MoodEntryCreate(CamelModel):
    """A mood observation as submitted, before the store assigns identity."""

    date: str = Field(..., description="Calendar day (YYYY-MM-DD) the entry belongs to")
    time_of_day: TimeOfDay = Field(..., description="Slot of the day")
    mood: Mood = Field(..., description="The logged mood")
    emotion_tag: str | None = Field(None, description="Optional free-form refinement")
    note: str | None = Field(None, description="Optional journal note")
    activities: list[ActivityId] | None = Field(
        None, description="What you did, from the activity catalog"
    )
    energy_level: int | None = Field(None, description="Energy on a 1-5 scale")


class MoodEntry(MoodEntryCreate):
    """A stored mood observation."""

    id: str = Field(..., description="Opaque unique identifier")
    timestamp: int = Field(..., description="Creation time in epoch milliseconds")


# MARK: - Stories


class StoryContext(CamelModel):
    """Everything the story generator knows about one slot of the day."""

    mood: Mood
    time_of_day: TimeOfDay = "morning"
    activities: list[ActivityId] | None = None
    energy_level: int | None = None
    note: str | None = None


class DayStoryInput(CamelModel):
    morning: StoryContext | None = None
    afternoon: StoryContext | None = None
    evening: StoryContext | None = None


class StoryText(CamelModel):
    """Rendered prose for the three slots plus a one-line summary."""

    morning: str
    afternoon: str
    evening: str
    summary: str


class StoryMoods(CamelModel):
    morning: Mood | None = None
    afternoon: Mood | None = None
    evening: Mood | None = None


class DayStory(StoryText):
    """The persisted narrative for one calendar date."""

    date: str = Field(..., description="Calendar day (YYYY-MM-DD)")
    moods: StoryMoods = Field(default_factory=StoryMoods)
    activities: list[ActivityId] | None = None
    average_energy: float | None = None
    notes: list[str] | None = None


# MARK: - Insights


class PatternInsight(CamelModel):
    type: Literal["time", "activity", "energy", "streak", "trend"]
    title: str
    description: str
    icon: str


class StreakInfo(CamelModel):
    type: Literal["logging", "mood"]
    count: int
    description: str


class WeeklyInsight(CamelModel):
    """A derived weekly report. Recomputed on every request, never stored."""

    week: str = Field(..., description="Date the report was computed for")
    dominant_mood: Mood
    mood_counts: dict[str, int]
    insights: list[str] = Field(default_factory=list)
    patterns: list[PatternInsight] = Field(default_factory=list)
    streaks: list[StreakInfo] = Field(default_factory=list)


class ActivityImpact(CamelModel):
    activity: ActivityId
    label: str
    count: int
    positive_ratio: float


class EnergySummary(CamelModel):
    average: float
    label: str
    morning: float | None = None
    evening: float | None = None


class DayStats(CamelModel):
    activities_count: int
    average_energy: float
    has_notes: bool
