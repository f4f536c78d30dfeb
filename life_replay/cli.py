"""
Command-line interface tools for the Life Replay service.
"""

import asyncio
import json
from collections.abc import Coroutine
from datetime import datetime, timezone
from typing import Any

import httpx
import typer
from httpx_sse import ServerSentEvent, aconnect_sse

from . import config
from .models import DayStory, MoodEntry, WeeklyInsight

DEFAULT_BASE_URL = config.BASE_URL

app = typer.Typer(help="Life Replay CLI tools")

BaseUrlOption = typer.Option(
    DEFAULT_BASE_URL, "--url", "-u", help="Base URL of the Life Replay service"
)


# MARK: - Commands


@app.command()
def log(
    mood: str = typer.Argument(..., help="How you feel, e.g. happy, calm, tired"),
    time_of_day: str = typer.Option(
        ..., "--time", "-t", help="morning, afternoon or evening"
    ),
    activity: list[str] = typer.Option(
        [], "--activity", "-a", help="Activity id; repeat for several"
    ),
    energy: int | None = typer.Option(
        None, "--energy", "-e", min=1, max=5, help="Energy level 1-5"
    ),
    note: str | None = typer.Option(None, "--note", "-n", help="Short journal note"),
    day: str | None = typer.Option(
        None, "--date", "-d", help="Date (YYYY-MM-DD), default today"
    ),
    base_url: str = BaseUrlOption,
) -> None:
    """Log a mood for a slot of the day, replacing any earlier entry for it."""
    payload: dict[str, Any] = {
        "date": day or datetime.now(timezone.utc).date().isoformat(),
        "timeOfDay": time_of_day,
        "mood": mood,
    }
    if activity:
        payload["activities"] = activity
    if energy is not None:
        payload["energyLevel"] = energy
    if note:
        payload["note"] = note

    async def _log() -> None:
        async with httpx.AsyncClient() as client:
            response = await client.post(f"{base_url}/entries", json=payload)
            response.raise_for_status()
            entry = MoodEntry.model_validate(response.json())
            print(f"Logged {entry.mood} for {entry.date} {entry.time_of_day}")

    _run_with_error_handling(_log(), base_url)


@app.command()
def today(
    base_url: str = BaseUrlOption,
    json_output: bool = typer.Option(False, "--json", "-j", help="Output raw JSON"),
) -> None:
    """Show today's entries."""

    async def _today() -> None:
        async with httpx.AsyncClient() as client:
            response = await client.get(f"{base_url}/entries/today")
            response.raise_for_status()
            result = response.json()

            if json_output:
                print(json.dumps(result, indent=2))
                return

            if not result:
                print("Nothing logged today")
                return
            for raw in result:
                print(_format_entry(MoodEntry.model_validate(raw)))

    _run_with_error_handling(_today(), base_url)


@app.command()
def story(base_url: str = BaseUrlOption) -> None:
    """Generate and print today's story."""

    async def _story() -> None:
        async with httpx.AsyncClient() as client:
            response = await client.post(f"{base_url}/replay/today")
            response.raise_for_status()
            day_story = DayStory.model_validate(response.json())
            print(_format_story(day_story))

    _run_with_error_handling(_story(), base_url)


@app.command()
def insights(
    base_url: str = BaseUrlOption,
    json_output: bool = typer.Option(False, "--json", "-j", help="Output raw JSON"),
) -> None:
    """Show this week's insights."""

    async def _insights() -> None:
        async with httpx.AsyncClient() as client:
            response = await client.get(f"{base_url}/insights/weekly")
            response.raise_for_status()
            result = response.json()

            if json_output:
                print(json.dumps(result, indent=2))
                return

            print(_format_insight(WeeklyInsight.model_validate(result)))

    _run_with_error_handling(_insights(), base_url)


@app.command()
def watch(base_url: str = BaseUrlOption) -> None:
    """Print entries as they are logged."""

    async def _watch() -> None:
        print(f"Watching {base_url}/entries/stream... (Ctrl+C to stop)")

        async with httpx.AsyncClient(timeout=None) as client:
            async with aconnect_sse(
                client, "GET", f"{base_url}/entries/stream"
            ) as event_source:
                async for sse in event_source.aiter_sse():
                    _handle_sse_event(sse)

    _run_with_error_handling(_watch(), base_url)


# MARK: - Private Helpers


def _format_entry(entry: MoodEntry) -> str:
    logged_at = datetime.fromtimestamp(entry.timestamp / 1000).strftime("%H:%M")
    line = f"{logged_at} {entry.time_of_day:<9} {entry.mood}"
    if entry.energy_level is not None:
        line += f" (energy {entry.energy_level})"
    if entry.activities:
        line += f" [{', '.join(entry.activities)}]"
    if entry.note:
        line += f' "{entry.note}"'
    return line


def _format_story(day_story: DayStory) -> str:
    return "\n".join(
        [
            day_story.summary,
            "",
            f"Morning:   {day_story.morning}",
            f"Afternoon: {day_story.afternoon}",
            f"Evening:   {day_story.evening}",
        ]
    )


def _format_insight(report: WeeklyInsight) -> str:
    lines = [f"Week of {report.week}: mostly {report.dominant_mood}"]
    lines.extend(f"  - {text}" for text in report.insights)
    lines.extend(f"  {p.icon} {p.title}: {p.description}" for p in report.patterns)
    lines.extend(f"  {s.description}" for s in report.streaks)
    return "\n".join(lines)


def _handle_sse_event(sse: ServerSentEvent) -> None:
    """Handle a single SSE event."""
    try:
        if sse.event == "error":
            error_data = json.loads(sse.data)
            print(f"Server error: {error_data.get('error', 'Unknown error')}")
            return

        entry = MoodEntry.model_validate(json.loads(sse.data))
        print(_format_entry(entry))

    except json.JSONDecodeError as e:
        print(f"Warning: Could not parse SSE data: {sse.data} - {e}")
    except ValueError as e:
        print(f"Warning: Error processing entry data: {e}")


def _run_with_error_handling(coro: Coroutine[Any, Any, Any], base_url: str) -> None:
    """Run an async coroutine with standardized error handling."""
    try:
        asyncio.run(coro)
    except KeyboardInterrupt:
        print("\nStopped")
        raise typer.Exit(0)
    except httpx.ConnectError:
        print(f"Error: Could not connect to {base_url}")
        raise typer.Exit(1)
    except httpx.HTTPStatusError as e:
        print(f"Error: HTTP {e.response.status_code} {e.response.text}")
        raise typer.Exit(1)
    except Exception as e:
        error_msg = str(e) if str(e) else f"Unknown error of type {type(e).__name__}"
        print(f"Error: {error_msg}")
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
