"""
Day replay: turn a day's entries into a persisted DayStory.

When the day view is opened the story is regenerated from whatever entries
exist for that date and saved over the previous one. A day without entries
gets a neutral placeholder story that is not saved.
"""

import logging

from .aggregation import unique_activities
from .models import (
    TIMES_OF_DAY,
    DayStory,
    DayStoryInput,
    MoodEntry,
    StoryContext,
    StoryMoods,
)
from .store import EntryStore
from .story import StoryGenerator

logger = logging.getLogger(__name__)


def _context(entry: MoodEntry, slot: str, include_note: bool = True) -> StoryContext:
    return StoryContext(
        mood=entry.mood,
        time_of_day=slot,
        activities=entry.activities,
        energy_level=entry.energy_level,
        note=entry.note if include_note else None,
    )


def _slot_entries(entries: list[MoodEntry]) -> dict[str, MoodEntry | None]:
    return {
        slot: next((e for e in entries if e.time_of_day == slot), None)
        for slot in TIMES_OF_DAY
    }


def build_story_input(entries: list[MoodEntry]) -> DayStoryInput:
    """
    Map a day's entries onto the three story slots.

    An empty slot borrows the most recently saved entry of the day. Its note
    is only borrowed for the evening, so a note is not repeated in every
    passage.
    """
    if not entries:
        return DayStoryInput()

    latest = entries[-1]
    slots = {}
    for slot, entry in _slot_entries(entries).items():
        if entry is not None:
            slots[slot] = _context(entry, slot)
        else:
            slots[slot] = _context(latest, slot, include_note=slot == "evening")
    return DayStoryInput(**slots)


def compose_day_story(
    date: str, entries: list[MoodEntry], generator: StoryGenerator
) -> DayStory:
    """Render the story for `date` and attach the day's moods and details."""
    text = generator.generate_day_story(build_story_input(entries))

    moods = {}
    if entries:
        latest = entries[-1]
        moods = {
            slot: (entry or latest).mood
            for slot, entry in _slot_entries(entries).items()
        }

    levels = [e.energy_level for e in entries if e.energy_level is not None]

    return DayStory(
        date=date,
        **text.model_dump(),
        moods=StoryMoods(**moods),
        activities=unique_activities(entries),
        average_energy=sum(levels) / len(levels) if levels else 0,
        notes=[e.note for e in entries if e.note],
    )


class ReplayService:
    """Generates and caches day stories from the entry store."""

    def __init__(
        self, store: EntryStore, generator: StoryGenerator | None = None
    ) -> None:
        self.store = store
        self.generator = generator or StoryGenerator()

    async def load_day(self, date: str) -> DayStory:
        """
        Build the story for `date`, saving it when the day has entries.

        Raises:
            StorageError: If the story cannot be saved
        """
        entries = await self.store.get_entries_for_date(date)
        if not entries:
            text = self.generator.generate_simple_story("neutral")
            return DayStory(date=date, **text.model_dump())

        story = compose_day_story(date, entries, self.generator)
        await self.store.save_story(story)
        logger.info("Saved story for %s from %d entries", date, len(entries))
        return story

    async def load_today(self) -> DayStory:
        return await self.load_day(self.store.today())
