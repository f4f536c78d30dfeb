"""
Entry storage for Life Replay.

This module provides the store that owns the two persisted collections, mood
entries and day stories, on top of a pluggable key-value backend. Every read
loads the full collection and filters in memory; collections stay small enough
that no indexing is needed.
"""

import asyncio
import json
import logging
import uuid
from collections.abc import AsyncGenerator, Callable
from contextlib import asynccontextmanager
from datetime import datetime, timedelta, timezone

from pydantic import TypeAdapter

from .aggregation import to_millis, unique_dates
from .backends import StorageBackend, StorageError
from .models import DayStory, MoodEntry, MoodEntryCreate

logger = logging.getLogger(__name__)

STORAGE_KEYS = {
    "mood_entries": "life_replay_mood_entries",
    "stories": "life_replay_stories",
    # Reserved for the surrounding app; only cleared here.
    "settings": "life_replay_settings",
    "custom_moods": "life_replay_custom_moods",
}

WEEK = timedelta(days=7)
MONTH = timedelta(days=30)

_entries_adapter = TypeAdapter(list[MoodEntry])
_stories_adapter = TypeAdapter(list[DayStory])

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class EntryStore:
    """
    Persistent store for mood entries and day stories.

    Writes are read-modify-write over the whole collection and run under a
    single asyncio condition, so concurrent saves in one process are
    serialized. The same condition wakes subscribers of `stream()` whenever
    a new entry is saved.
    """

    def __init__(self, backend: StorageBackend, clock: Clock | None = None) -> None:
        self.backend = backend
        self.clock = clock or utc_now
        self._condition = asyncio.Condition()
        self._update_counter = 0
        self._last_saved: MoodEntry | None = None

    def today(self) -> str:
        return self.clock().date().isoformat()

    # MARK: - Mood entries

    async def save_mood_entry(self, entry: MoodEntryCreate) -> MoodEntry:
        """
        Save an entry, replacing any entry in the same date and time slot.

        Args:
            entry: The entry to store

        Returns:
            The stored entry with its id and timestamp

        Raises:
            StorageError: If the backend write fails
        """
        async with self._condition:
            timestamp = to_millis(self.clock())
            new_entry = MoodEntry(
                **entry.model_dump(exclude={"id", "timestamp"}),
                id=f"{timestamp}-{uuid.uuid4().hex[:9]}",
                timestamp=timestamp,
            )

            entries = [
                e
                for e in await self.get_mood_entries()
                if not (e.date == entry.date and e.time_of_day == entry.time_of_day)
            ]
            entries.append(new_entry)

            try:
                await self._write(STORAGE_KEYS["mood_entries"], entries)
            except (OSError, StorageError):
                logger.exception("Error saving mood entry")
                raise

            self._last_saved = new_entry
            self._update_counter += 1
            self._condition.notify_all()

            return new_entry

    async def get_mood_entries(self) -> list[MoodEntry]:
        """Return every stored entry, or an empty list if the record is unreadable."""
        data = await self._read(STORAGE_KEYS["mood_entries"])
        if data is None:
            return []
        try:
            return _entries_adapter.validate_json(data)
        except ValueError:
            logger.exception("Error parsing mood entries")
            return []

    async def get_today_moods(self) -> list[MoodEntry]:
        return await self.get_entries_for_date(self.today())

    async def get_entries_for_date(self, date: str) -> list[MoodEntry]:
        return [e for e in await self.get_mood_entries() if e.date == date]

    async def get_week_entries(self) -> list[MoodEntry]:
        return await self._entries_since(WEEK)

    async def get_month_entries(self) -> list[MoodEntry]:
        return await self._entries_since(MONTH)

    async def get_dates_with_entries(self) -> list[str]:
        """Unique dates that have entries, most recent first."""
        return unique_dates(await self.get_mood_entries())

    async def _entries_since(self, window: timedelta) -> list[MoodEntry]:
        cutoff = to_millis(self.clock() - window)
        return [e for e in await self.get_mood_entries() if e.timestamp >= cutoff]

    # MARK: - Stories

    async def save_story(self, story: DayStory) -> None:
        """
        Save a story, replacing any story for the same date.

        Raises:
            StorageError: If the backend write fails
        """
        async with self._condition:
            stories = [s for s in await self.get_stories() if s.date != story.date]
            stories.append(story)
            try:
                await self._write(STORAGE_KEYS["stories"], stories)
            except (OSError, StorageError):
                logger.exception("Error saving story")
                raise

    async def get_stories(self) -> list[DayStory]:
        data = await self._read(STORAGE_KEYS["stories"])
        if data is None:
            return []
        try:
            return _stories_adapter.validate_json(data)
        except ValueError:
            logger.exception("Error parsing stories")
            return []

    async def get_today_story(self) -> DayStory | None:
        return await self.get_story_for_date(self.today())

    async def get_story_for_date(self, date: str) -> DayStory | None:
        for story in await self.get_stories():
            if story.date == date:
                return story
        return None

    # MARK: - Maintenance

    async def clear_all_data(self) -> None:
        """
        Erase every record, including the reserved settings keys.

        Raises:
            StorageError: If the backend cannot remove the records
        """
        async with self._condition:
            try:
                await self.backend.multi_remove(STORAGE_KEYS.values())
            except (OSError, StorageError):
                logger.exception("Error clearing data")
                raise
        logger.info("Cleared all stored data")

    # MARK: - Streaming

    @asynccontextmanager
    async def stream(self) -> AsyncGenerator[AsyncGenerator[MoodEntry, None], None]:
        """
        Stream newly saved entries to a subscriber.

        Yields:
            An async generator of MoodEntry objects, one per save made after
            the subscription started
        """

        async def entry_generator() -> AsyncGenerator[MoodEntry, None]:
            async with self._condition:
                last_seen_counter = self._update_counter

            try:
                while True:
                    async with self._condition:
                        await self._condition.wait_for(
                            lambda: self._update_counter > last_seen_counter
                        )
                        last_seen_counter = self._update_counter
                        entry = self._last_saved

                    if entry is not None:
                        yield entry

            except (asyncio.CancelledError, GeneratorExit):
                # Subscriber went away
                return

        yield entry_generator()

    # MARK: - Private helpers

    async def _read(self, key: str) -> str | None:
        try:
            return await self.backend.get_item(key)
        except (OSError, StorageError, UnicodeDecodeError):
            logger.exception("Error reading %s", key)
            return None

    async def _write(self, key: str, items: list) -> None:
        payload = json.dumps([item.to_json_dict() for item in items])
        await self.backend.set_item(key, payload)
