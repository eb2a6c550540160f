"""Tests for mood color selection."""

import random

import pytest

from adapters.http.api.calendar.utils.mood_utils import MOOD_PALETTES, mood_color, mood_intensity


class TestMoodIntensity:

    @pytest.mark.parametrize("count,length,expected", [
        (0, 0, 0),
        (1, 0, 0),
        (1, 49, 0),
        (1, 100, 1),
        (2, 0, 1),
        (3, 0, 2),
        (1, 350, 2),
        (20, 5000, 2),
    ])
    def test_levels(self, count, length, expected):
        assert mood_intensity(count, length) == expected


class TestMoodColor:

    def test_quiet_day_uses_light_palette(self):
        assert mood_color(["short"]) in MOOD_PALETTES["light"]

    def test_busy_day_uses_dark_palette(self):
        assert mood_color(["a", "b", "c"]) in MOOD_PALETTES["dark"]

    def test_long_text_raises_intensity(self):
        assert mood_color(["x" * 100]) in MOOD_PALETTES["medium"]

    def test_seeded_rng_is_deterministic(self):
        first = mood_color(["one", "two"], rng=random.Random(7))
        second = mood_color(["one", "two"], rng=random.Random(7))

        assert first == second
