"""
Mood derivation.

Turns an archetype plus research signals into mood sliders, a color
palette and typography. All functions are pure and total: unknown keys
fall back to the ``local`` archetype / ``clean`` preset.
"""

from __future__ import annotations

import logging

from blink.core.ir import MoodInterpretation, MoodSliders, Palette, ResearchSignals, Typography
from blink.variants.presets import get_variant_preset

from .tables import (
    ARCHETYPE_COLORS,
    ARCHETYPE_INDUSTRY_COLORS,
    ARCHETYPE_MOOD_SLIDERS,
    COMPACT_DENSITY,
    HIGH_RATING,
    PRICE_LEVEL_SCORES,
    RATING_ENERGY_BOOST,
    SPACIOUS_DENSITY,
    TYPOGRAPHY,
    lookup,
)

logger = logging.getLogger(__name__)

SLIDER_MIN = 0
SLIDER_MAX = 100

# interpret_mood thresholds
LOW_THRESHOLD = 35
HIGH_THRESHOLD = 65


def clamp_slider(value: float) -> int:
    """Round and clamp a slider value into 0-100."""
    return max(SLIDER_MIN, min(SLIDER_MAX, round(value)))


def derive_mood_sliders(archetype: str | None, research: ResearchSignals | None) -> MoodSliders:
    """Archetype baseline adjusted by research.

    The price tier, when known, replaces the price axis; a rating of
    4.5 or more adds 10 to energy.

    Examples:
        >>> derive_mood_sliders("luxury", ResearchSignals(price_level="$")).price
        25
        >>> derive_mood_sliders("high-energy", ResearchSignals(rating=4.9)).energy
        100
    """
    research = research or ResearchSignals()
    base = lookup(ARCHETYPE_MOOD_SLIDERS, archetype)

    price = base.price
    if research.price_level in PRICE_LEVEL_SCORES:
        price = PRICE_LEVEL_SCORES[research.price_level]

    energy = base.energy
    if research.rating is not None and research.rating >= HIGH_RATING:
        energy += RATING_ENERGY_BOOST

    return MoodSliders(
        vibe=clamp_slider(base.vibe),
        energy=clamp_slider(energy),
        era=clamp_slider(base.era),
        density=clamp_slider(base.density),
        price=clamp_slider(price),
    )


def derive_colors(
    industry: str | None,
    archetype: str | None,
    research: ResearchSignals | None = None,
) -> Palette:
    """Palette for an archetype, specialised per industry where one is defined.

    ``research`` is accepted for call-site symmetry with the other
    derivations; no palette currently depends on it.
    """
    if archetype is not None and industry is not None:
        specific = ARCHETYPE_INDUSTRY_COLORS.get((archetype, industry))
        if specific is not None:
            return specific
    return lookup(ARCHETYPE_COLORS, archetype)


def derive_typography(preset: str | None) -> Typography:
    return lookup(TYPOGRAPHY, preset)


def derive_section_spacing(density: int) -> str:
    if density > COMPACT_DENSITY:
        return "compact"
    if density < SPACIOUS_DENSITY:
        return "spacious"
    return "balanced"


def _band(value: int, low: str, mid: str, high: str) -> str:
    if value < LOW_THRESHOLD:
        return low
    if value > HIGH_THRESHOLD:
        return high
    return mid


def interpret_mood(sliders: MoodSliders) -> MoodInterpretation:
    """Describe slider positions in words for prompts and summaries."""
    return MoodInterpretation(
        tone=_band(sliders.vibe, "professional", "balanced", "playful"),
        energy=_band(sliders.energy, "calm", "moderate", "energetic"),
        style=_band(sliders.era, "classic", "contemporary", "modern"),
        content_density=_band(sliders.density, "minimal", "balanced", "rich"),
        market_position=_band(sliders.price, "value-focused", "quality-focused", "premium"),
    )


def mood_sliders_for_preset(preset_id: str) -> MoodSliders | None:
    """Mood sliders pinned by a named variant preset, if it exists."""
    preset = get_variant_preset(preset_id)
    if preset is None:
        logger.debug(f"No variant preset named '{preset_id}'")
        return None
    return preset.mood_sliders


__all__ = [
    "clamp_slider",
    "derive_colors",
    "derive_mood_sliders",
    "derive_section_spacing",
    "derive_typography",
    "interpret_mood",
    "mood_sliders_for_preset",
]
