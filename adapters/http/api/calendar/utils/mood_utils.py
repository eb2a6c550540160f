"""Mood colors for calendar days.

A day's background gets brighter the busier it is: the number of events and
the amount of text written on that date select one of three palettes, and a
color is picked at random within the palette.
"""

import math
import random
from typing import Iterable, Optional

MOOD_PALETTES = {
    "light": ["#FFE5E5", "#E5F3FF", "#E5FFE5", "#FFF5E5", "#F0E5FF"],
    "medium": ["#FFB3B3", "#B3D9FF", "#B3FFB3", "#FFDFB3", "#D9B3FF"],
    "dark": ["#FF8080", "#80B3FF", "#80FF80", "#FFCC80", "#CC80FF"],
}

INTENSITY_PALETTES = ("light", "medium", "dark")


def mood_intensity(event_count: int, text_length: int) -> int:
    """Intensity level 0, 1 or 2.

    Two points per event plus one per 50 characters of text, every three
    points raise the level, capped at 2.
    """
    return min(math.floor((event_count * 2 + text_length / 50) / 3), 2)


def mood_color(texts: Iterable[str], rng: Optional[random.Random] = None) -> str:
    """Background color for a day given the texts of its events."""
    texts = list(texts)
    intensity = mood_intensity(len(texts), sum(len(t) for t in texts))
    palette = MOOD_PALETTES[INTENSITY_PALETTES[intensity]]
    return (rng or random).choice(palette)
