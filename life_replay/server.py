"""
FastAPI server for Life Replay.

This module exposes the entry store, the story generator and the weekly
insights over a local HTTP API, plus a Server-Sent Events feed of newly saved
entries so a UI can refresh when another client logs a mood.
"""

import asyncio
import json
import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Query
from fastapi.responses import StreamingResponse
from pydantic import BaseModel, Field

from . import __version__, config
from .aggregation import activity_impact, energy_summary
from .backends import FileBackend, StorageError
from .insights import InsightGenerator
from .models import (
    ActivityId,
    ActivityImpact,
    DayStory,
    EnergySummary,
    Mood,
    MoodEntry,
    MoodEntryCreate,
    WeeklyInsight,
)
from .replay import ReplayService
from .store import EntryStore
from .story import StoryGenerator

logger = logging.getLogger(__name__)


# API Request/Response Schemas
class MoodEntryRequest(MoodEntryCreate):
    """Payload for logging a mood. Energy must be on the 1-5 scale."""

    energy_level: int | None = Field(
        None, ge=1, le=5, description="Energy on a 1-5 scale"
    )


class QuickSummaryResponse(BaseModel):
    summary: str = Field(..., description="One-line summary for the home screen")


def create_app(
    entry_store: EntryStore, generator: StoryGenerator | None = None
) -> FastAPI:
    """
    Create a FastAPI application with the given entry store.

    Args:
        entry_store: The EntryStore instance to use for the application
        generator: Story generator; a fresh unseeded one by default

    Returns:
        Configured FastAPI application
    """
    generator = generator or StoryGenerator()
    insight_generator = InsightGenerator(entry_store)
    replay_service = ReplayService(entry_store, generator)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        logger.info("Life Replay API starting")
        yield
        logger.info("Life Replay API stopped")

    app = FastAPI(
        title="Life Replay",
        description="A local mood journal that turns your day into a story",
        version=__version__,
        lifespan=lifespan,
    )

    @app.get("/")
    async def root() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "ok", "service": "life-replay"}

    # MARK: - Entries

    @app.get("/entries")
    async def list_entries(date: str | None = None) -> list[MoodEntry]:
        """All entries, or only those for `date` when given."""
        if date is not None:
            return await entry_store.get_entries_for_date(date)
        return await entry_store.get_mood_entries()

    @app.post("/entries")
    async def log_entry(entry: MoodEntryRequest) -> MoodEntry:
        """
        Log a mood, replacing any entry in the same date and time slot.

        Returns:
            The stored entry with its id and timestamp
        """
        try:
            return await entry_store.save_mood_entry(entry)
        except StorageError as e:
            raise HTTPException(
                status_code=500, detail=f"Failed to save entry: {str(e)}"
            )

    @app.get("/entries/today")
    async def today_entries() -> list[MoodEntry]:
        return await entry_store.get_today_moods()

    @app.get("/entries/week")
    async def week_entries() -> list[MoodEntry]:
        return await entry_store.get_week_entries()

    @app.get("/entries/month")
    async def month_entries() -> list[MoodEntry]:
        return await entry_store.get_month_entries()

    @app.get("/entries/dates")
    async def entry_dates() -> list[str]:
        """Dates that have entries, most recent first."""
        return await entry_store.get_dates_with_entries()

    @app.get("/entries/stream")
    async def stream_entries() -> StreamingResponse:
        """
        Stream newly saved entries via Server-Sent Events.

        Returns:
            StreamingResponse with text/event-stream content type
        """

        async def event_generator() -> AsyncGenerator[str, None]:
            try:
                async with entry_store.stream() as entry_stream:
                    async for entry in entry_stream:
                        data = json.dumps(entry.to_json_dict())
                        yield f"event: entry\ndata: {data}\n\n"
            except asyncio.CancelledError:
                # Client disconnected
                pass
            except Exception as e:
                logger.exception("Entry stream failed")
                error_data = json.dumps({"error": str(e)})
                yield f"event: error\ndata: {error_data}\n\n"

        return StreamingResponse(
            event_generator(),
            media_type="text/event-stream",
            headers={
                "Cache-Control": "no-cache",
                "Connection": "keep-alive",
            },
        )

    # MARK: - Stories

    @app.get("/stories")
    async def list_stories() -> list[DayStory]:
        return await entry_store.get_stories()

    @app.put("/stories")
    async def save_story(story: DayStory) -> DayStory:
        """Save a story, replacing any story for the same date."""
        try:
            await entry_store.save_story(story)
        except StorageError as e:
            raise HTTPException(
                status_code=500, detail=f"Failed to save story: {str(e)}"
            )
        return story

    @app.get("/stories/today")
    async def today_story() -> DayStory | None:
        return await entry_store.get_today_story()

    @app.get("/stories/{date}")
    async def story_for_date(date: str) -> DayStory:
        story = await entry_store.get_story_for_date(date)
        if story is None:
            raise HTTPException(status_code=404, detail=f"No story for {date}")
        return story

    @app.post("/replay/today")
    async def replay_today() -> DayStory:
        """Regenerate today's story from today's entries and save it."""
        try:
            return await replay_service.load_today()
        except StorageError as e:
            raise HTTPException(
                status_code=500, detail=f"Failed to save story: {str(e)}"
            )

    # MARK: - Insights

    @app.get("/insights/weekly")
    async def weekly_insights() -> WeeklyInsight:
        return await insight_generator.calculate_weekly_insights()

    @app.get("/insights/activities")
    async def activity_insights() -> list[ActivityImpact]:
        """Activity counts and positive-mood ratios for the last week."""
        return activity_impact(await entry_store.get_week_entries())

    @app.get("/insights/energy")
    async def energy_insights() -> EnergySummary | None:
        """Energy averages for the last week, or null with too few readings."""
        return energy_summary(await entry_store.get_week_entries())

    @app.get("/summary/quick")
    async def quick_summary(
        mood: Mood | None = None,
        activity: list[ActivityId] | None = Query(None),
    ) -> QuickSummaryResponse:
        return QuickSummaryResponse(
            summary=generator.get_quick_summary(mood, activity or None)
        )

    # MARK: - Maintenance

    @app.delete("/data")
    async def clear_data() -> dict[str, str]:
        """Erase all stored entries, stories and reserved settings."""
        try:
            await entry_store.clear_all_data()
        except StorageError as e:
            raise HTTPException(
                status_code=500, detail=f"Failed to clear data: {str(e)}"
            )
        return {"status": "cleared"}

    return app


def main() -> None:
    """Main entry point for the server."""
    import uvicorn

    logging.basicConfig(
        level=config.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = create_app(EntryStore(FileBackend(config.DATA_DIR)))
    logger.info("Storing data in %s", config.DATA_DIR)

    uvicorn.run(
        app,
        host=config.HOST,
        port=config.PORT,
        log_level=config.LOG_LEVEL,
    )


if __name__ == "__main__":
    main()
