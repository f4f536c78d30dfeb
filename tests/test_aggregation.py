"""
Tests for the pure aggregation functions: streaks, pattern detectors and stats.
"""

from conftest import NOW, days_ago, make_entry

from life_replay.aggregation import (
    activity_impact,
    calculate_streaks,
    day_stats,
    detect_energy_pattern,
    detect_fatigue_pattern,
    detect_patterns,
    detect_time_pattern,
    detect_trend_pattern,
    energy_summary,
    logging_streak,
    longest_fatigue_run,
    positive_mood_streak,
    unique_dates,
)


def logged_on(*offsets: int):
    return [make_entry("neutral", at=days_ago(offset)) for offset in offsets]


class TestStreaks:
    def test_consecutive_days_up_to_a_gap(self):
        """Today and the two days before count; the gap three days ago stops it."""
        assert logging_streak(logged_on(0, 1, 2, 4, 5), NOW) == 3

    def test_missing_today_does_not_break_streak(self):
        assert logging_streak(logged_on(1, 2), NOW) == 2

    def test_gap_yesterday_breaks_streak(self):
        assert logging_streak(logged_on(0, 2, 3), NOW) == 1

    def test_lookback_is_capped(self):
        assert logging_streak(logged_on(*range(45)), NOW) == 30

    def test_mood_streak_stops_at_first_non_positive(self):
        """Newest first: happy, excited, tired, calm gives a streak of 2."""
        entries = [
            make_entry("calm", at=days_ago(0, hours=4)),
            make_entry("happy", at=days_ago(0, hours=1)),
            make_entry("tired", at=days_ago(0, hours=3)),
            make_entry("excited", at=days_ago(0, hours=2)),
        ]
        assert positive_mood_streak(entries) == 2

    def test_streak_reports_and_thresholds(self):
        entries = [
            make_entry("happy", at=days_ago(0)),
            make_entry("focused", at=days_ago(1)),
            make_entry("calm", at=days_ago(2)),
        ]
        streaks = calculate_streaks(entries, NOW)

        assert [(s.type, s.count) for s in streaks] == [("logging", 3), ("mood", 3)]
        assert streaks[0].description == "3 days logging streak! 🔥"
        assert streaks[1].description == "3 positive entries in a row! ✨"

    def test_short_streaks_are_not_reported(self):
        entries = [
            make_entry("happy", at=days_ago(0)),
            make_entry("sad", at=days_ago(3)),
        ]
        assert calculate_streaks(entries, NOW) == []

    def test_unique_dates_newest_first(self):
        entries = logged_on(3, 0, 3, 1)
        assert unique_dates(entries) == ["2024-01-10", "2024-01-09", "2024-01-07"]


class TestPatternDetectors:
    def test_energy_needs_three_readings(self):
        entries = [
            make_entry("happy", energy_level=5),
            make_entry("happy", energy_level=5),
        ]
        assert detect_energy_pattern(entries) is None

    def test_high_and_low_energy(self):
        high = [make_entry("happy", energy_level=level) for level in (4, 4, 5)]
        low = [make_entry("tired", energy_level=level) for level in (1, 2, 3)]
        middle = [make_entry("neutral", energy_level=level) for level in (3, 3, 3)]

        assert detect_energy_pattern(high).title == "High Energy Week"
        assert detect_energy_pattern(low).title == "Low Energy Pattern"
        assert detect_energy_pattern(middle) is None

    def test_entries_without_energy_are_ignored(self):
        entries = [make_entry("happy", energy_level=5) for _ in range(2)] + [
            make_entry("happy") for _ in range(5)
        ]
        assert detect_energy_pattern(entries) is None

    def test_morning_person(self):
        entries = [
            make_entry(mood, "morning") for mood in ("happy", "focused", "excited")
        ]
        pattern = detect_time_pattern(entries)
        assert pattern.type == "time"
        assert pattern.title == "Morning Person"

    def test_morning_positive_set_excludes_calm(self):
        entries = [make_entry("calm", "morning") for _ in range(3)]
        assert detect_time_pattern(entries) is None

    def test_night_owl(self):
        entries = [make_entry(mood, "evening") for mood in ("calm", "calm", "happy")]
        entries += [make_entry("tired", "morning") for _ in range(3)]
        assert detect_time_pattern(entries).title == "Night Owl"

    def test_morning_wins_when_both_qualify(self):
        entries = [make_entry("happy", "morning") for _ in range(3)]
        entries += [make_entry("happy", "evening") for _ in range(3)]
        assert detect_time_pattern(entries).title == "Morning Person"

    def test_threshold_is_strict(self):
        """Seven of ten positive mornings is not above 0.7."""
        entries = [make_entry("happy", "morning") for _ in range(7)]
        entries += [make_entry("tired", "morning") for _ in range(3)]
        assert detect_time_pattern(entries) is None

    def test_upward_trend(self):
        last_week = [make_entry("tired", at=days_ago(10)) for _ in range(3)]
        this_week = [make_entry("happy", at=days_ago(2)) for _ in range(3)]

        pattern = detect_trend_pattern(this_week, last_week + this_week, NOW)
        assert pattern.title == "Upward Trend"

    def test_challenging_week(self):
        last_week = [make_entry("calm", at=days_ago(8)) for _ in range(3)]
        this_week = [make_entry("anxious", at=days_ago(1)) for _ in range(3)]

        pattern = detect_trend_pattern(this_week, last_week + this_week, NOW)
        assert pattern.title == "Challenging Week"

    def test_trend_needs_both_windows(self):
        last_week = [make_entry("tired", at=days_ago(10)) for _ in range(2)]
        this_week = [make_entry("happy", at=days_ago(2)) for _ in range(5)]
        older = [make_entry("tired", at=days_ago(20)) for _ in range(5)]

        all_entries = last_week + this_week + older
        assert detect_trend_pattern(this_week, all_entries, NOW) is None

    def test_small_change_is_no_trend(self):
        last_week = [
            make_entry(m, at=days_ago(9))
            for m in ("happy", "happy", "tired", "tired", "tired")
        ]
        this_week = [
            make_entry(m, at=days_ago(1))
            for m in ("happy", "happy", "happy", "tired", "tired")
        ]

        assert detect_trend_pattern(this_week, last_week + this_week, NOW) is None

    def test_fatigue_run(self):
        moods = ["tired", "anxious", "happy", "tired", "tired", "anxious", "calm"]
        entries = [
            make_entry(m, at=days_ago(0, hours=len(moods) - i))
            for i, m in enumerate(moods)
        ]

        assert longest_fatigue_run(entries) == 3
        pattern = detect_fatigue_pattern(entries)
        assert pattern.type == "streak"
        assert pattern.description == (
            "You've been tired or anxious for a while. Prioritize self-care."
        )

    def test_long_fatigue_run_is_really_tired(self):
        entries = [make_entry("anxious", at=days_ago(0, hours=h)) for h in range(4)]
        assert "really tired or anxious" in detect_fatigue_pattern(entries).description

    def test_short_fatigue_run(self):
        entries = [make_entry("tired", at=days_ago(0, hours=h)) for h in range(2)]
        assert detect_fatigue_pattern(entries) is None

    def test_patterns_in_fixed_order(self):
        """All four detectors fire and appear as energy, time, trend, fatigue."""
        last_week = [make_entry("sad", at=days_ago(10)) for _ in range(3)]
        this_week = [
            make_entry("happy", "morning", at=days_ago(3), energy_level=5),
            make_entry("happy", "morning", at=days_ago(2), energy_level=5),
            make_entry("happy", "morning", at=days_ago(1), energy_level=4),
            make_entry("tired", "evening", at=days_ago(0, hours=3)),
            make_entry("tired", "evening", at=days_ago(0, hours=2)),
            make_entry("anxious", "evening", at=days_ago(0, hours=1)),
        ]

        patterns = detect_patterns(this_week, last_week + this_week, NOW)
        assert [p.type for p in patterns] == ["energy", "time", "trend", "streak"]

    def test_no_patterns_for_empty_week(self):
        assert detect_patterns([], [], NOW) == []


class TestStats:
    def test_activity_impact(self):
        entries = [
            make_entry("happy", activities=["exercise", "social"]),
            make_entry("tired", activities=["work"]),
            make_entry("calm", activities=["exercise"]),
            make_entry("anxious", activities=["work", "exercise"]),
        ]
        impact = activity_impact(entries)

        assert [(i.activity, i.count) for i in impact] == [
            ("exercise", 3),
            ("work", 2),
            ("social", 1),
        ]
        assert impact[0].label == "Exercise"
        assert impact[0].positive_ratio == 2 / 3
        assert impact[1].positive_ratio == 0

    def test_activity_impact_limit(self):
        activities = ["work", "social", "rest", "nature", "family", "learning"]
        entries = [make_entry("happy", activities=activities)]
        assert len(activity_impact(entries)) == 5

    def test_energy_summary(self):
        entries = [
            make_entry("happy", "morning", energy_level=4),
            make_entry("happy", "morning", energy_level=5),
            make_entry("tired", "evening", energy_level=2),
            make_entry("calm", "afternoon"),
        ]
        summary = energy_summary(entries)

        assert summary.average == 3.7
        assert summary.label == "Moderate"
        assert summary.morning == 4.5
        assert summary.evening == 2.0

    def test_energy_summary_needs_three_readings(self):
        assert energy_summary([make_entry("happy", energy_level=3)]) is None

    def test_energy_summary_missing_slot(self):
        entries = [make_entry("happy", "afternoon", energy_level=1) for _ in range(3)]
        summary = energy_summary(entries)
        assert summary.label == "Very Low"
        assert summary.morning is None
        assert summary.evening is None

    def test_day_stats(self):
        entries = [
            make_entry(
                "happy", "morning", activities=["work", "social"], energy_level=4
            ),
            make_entry("calm", "afternoon", activities=["work"], note="   "),
            make_entry("tired", "evening", energy_level=1),
        ]
        stats = day_stats(entries)

        assert stats.activities_count == 2
        assert stats.average_energy == 2.5
        assert stats.has_notes is False

    def test_day_stats_with_note_and_no_energy(self):
        stats = day_stats([make_entry("sad", note="Rainy day")])
        assert stats.average_energy == 0
        assert stats.has_notes is True
