"""
Template-driven story generation.

A story is three short passages (morning, afternoon, evening) plus a one-line
summary. Each passage picks a template for its mood and time of day and fills
in placeholders from the slot's activities, energy level and note. Template
choice is random; pass a seeded `random.Random` for repeatable output.
"""

import random

from .models import TIMES_OF_DAY, DayStoryInput, StoryContext, StoryText
from .templates import (
    ACTIVITY_FALLBACKS,
    ACTIVITY_PHRASES,
    ACTIVITY_SUMMARY_FALLBACK,
    DEFAULT_ENERGY,
    ENERGY_PHRASES,
    ENERGY_STATE_FALLBACK,
    ENERGY_VERB_FALLBACK,
    NOTE_FALLBACK,
    QUICK_SUMMARY_PROMPT,
    STORY_TEMPLATES,
    SUMMARY_TEMPLATES,
)


def _fill_missing(text: str, placeholder: str, fallback: str) -> str:
    """Drop a placeholder that trails a comma, otherwise use the fallback phrase."""
    return text.replace(f", {placeholder}", "", 1).replace(placeholder, fallback, 1)


def fill_template(template: str, context: StoryContext) -> str:
    """Substitute every placeholder in `template` from `context`."""
    result = template

    # Activities: only the first one listed shapes the prose
    if context.activities:
        phrases = ACTIVITY_PHRASES[context.activities[0]]
        result = (
            result.replace("{{ACTIVITY_DOING}}", phrases["doing"], 1)
            .replace("{{ACTIVITY_PAST}}", phrases["past"], 1)
            .replace("{{ACTIVITY_EFFECT}}", phrases["effect"], 1)
            .replace("{{ACTIVITY_SUMMARY}}", f"filled with {phrases['doing']}", 1)
        )
    else:
        for key, fallback in ACTIVITY_FALLBACKS.items():
            result = _fill_missing(result, f"{{{{ACTIVITY_{key.upper()}}}}}", fallback)
        result = _fill_missing(
            result, "{{ACTIVITY_SUMMARY}}", ACTIVITY_SUMMARY_FALLBACK
        )

    # Energy
    if context.energy_level:
        energy = ENERGY_PHRASES.get(
            context.energy_level, ENERGY_PHRASES[DEFAULT_ENERGY]
        )
        result = result.replace("{{ENERGY_STATE}}", energy["state"], 1).replace(
            "{{ENERGY_VERB}}", energy["verb"], 1
        )
    else:
        result = (
            result.replace("{{ENERGY_STATE}}, ", "", 1)
            .replace("{{ENERGY_STATE}}", ENERGY_STATE_FALLBACK, 1)
            .replace("{{ENERGY_VERB}}", ENERGY_VERB_FALLBACK, 1)
        )

    # Note
    if context.note and context.note.strip():
        reflection = f'In your words: "{context.note.strip()}"'
    else:
        reflection = NOTE_FALLBACK
    result = result.replace("{{NOTE_REFLECTION}}", reflection, 1)

    return result[:1].upper() + result[1:]


def resolve_contexts(
    story_input: DayStoryInput,
) -> tuple[StoryContext, StoryContext, StoryContext]:
    """
    Fill the three slots of a day in order.

    A missing slot carries forward only the mood of the slot before it; a
    missing morning starts from "neutral".
    """
    resolved = []
    mood = "neutral"
    for slot in TIMES_OF_DAY:
        context = getattr(story_input, slot)
        if context is None:
            context = StoryContext(mood=mood, time_of_day=slot)
        else:
            context = context.model_copy(update={"time_of_day": slot})
        mood = context.mood
        resolved.append(context)
    return tuple(resolved)


class StoryGenerator:
    """Renders stories with a pluggable random source."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng or random.Random()

    def generate_time_story(self, context: StoryContext) -> str:
        """Render one passage for the context's mood and time of day."""
        template = self.rng.choice(STORY_TEMPLATES[context.mood][context.time_of_day])
        return fill_template(template, context)

    def generate_day_story(self, story_input: DayStoryInput) -> StoryText:
        """
        Render a full day.

        Missing slots are filled by carrying the previous slot's mood forward.
        The summary follows the evening mood and mentions activities from any
        slot of the day.
        """
        morning, afternoon, evening = resolve_contexts(story_input)

        activities: list[str] = []
        for context in (morning, afternoon, evening):
            for activity in context.activities or []:
                if activity not in activities:
                    activities.append(activity)

        morning_story = self.generate_time_story(morning)
        afternoon_story = self.generate_time_story(afternoon)
        evening_story = self.generate_time_story(evening)

        summary_template = self.rng.choice(SUMMARY_TEMPLATES[evening.mood])
        summary = fill_template(
            summary_template,
            StoryContext(
                mood=evening.mood,
                time_of_day="evening",
                activities=activities or None,
            ),
        )

        return StoryText(
            morning=morning_story,
            afternoon=afternoon_story,
            evening=evening_story,
            summary=summary,
        )

    def generate_simple_story(
        self,
        mood: str = "neutral",
        activities: list[str] | None = None,
        energy_level: int | None = None,
        note: str | None = None,
    ) -> StoryText:
        """Render a day where one mood and context apply to every slot."""
        slots = {
            slot: StoryContext(
                mood=mood,
                time_of_day=slot,
                activities=activities,
                energy_level=energy_level,
                note=note,
            )
            for slot in TIMES_OF_DAY
        }
        return self.generate_day_story(DayStoryInput(**slots))

    def get_quick_summary(
        self, mood: str | None, activities: list[str] | None = None
    ) -> str:
        """One-line summary for the home screen."""
        if not mood:
            return QUICK_SUMMARY_PROMPT

        template = self.rng.choice(SUMMARY_TEMPLATES[mood])
        return fill_template(
            template,
            StoryContext(mood=mood, time_of_day="morning", activities=activities),
        )


_default_generator = StoryGenerator()

generate_time_story = _default_generator.generate_time_story
generate_day_story = _default_generator.generate_day_story
generate_simple_story = _default_generator.generate_simple_story
get_quick_summary = _default_generator.get_quick_summary
