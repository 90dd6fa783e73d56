"""Tests for mood, color and typography derivation."""

import pytest

from blink.core.ir import MoodSliders, ResearchSignals
from blink.planner.content import extract_city, generate_subheadline, pick_template
from blink.planner.mood import (
    clamp_slider,
    derive_colors,
    derive_mood_sliders,
    derive_section_spacing,
    derive_typography,
    interpret_mood,
    mood_sliders_for_preset,
)


class TestMoodSliders:
    """Tests for archetype baselines and research adjustments."""

    def test_archetype_baseline(self):
        mood = derive_mood_sliders("vintage-classic", None)
        assert mood == MoodSliders(vibe=20, energy=30, era=10, density=50, price=60)

    def test_unknown_archetype_uses_local(self):
        assert derive_mood_sliders("no-such-archetype", ResearchSignals()) == derive_mood_sliders(
            "local", ResearchSignals()
        )

    @pytest.mark.parametrize("price_level,price", [("$", 25), ("$$", 50), ("$$$", 75), ("$$$$", 95)])
    def test_price_level_replaces_price(self, price_level, price):
        mood = derive_mood_sliders("luxury", ResearchSignals(price_level=price_level))
        assert mood.price == price

    def test_high_rating_boosts_energy(self):
        assert derive_mood_sliders("local", ResearchSignals(rating=4.5)).energy == 60
        assert derive_mood_sliders("local", ResearchSignals(rating=4.4)).energy == 50

    def test_energy_is_clamped(self):
        assert derive_mood_sliders("high-energy", ResearchSignals(rating=5.0)).energy == 100

    def test_clamp_slider(self):
        assert clamp_slider(-5) == 0
        assert clamp_slider(104.2) == 100
        assert clamp_slider(49.6) == 50


class TestInterpretMood:
    def test_bands(self):
        interpretation = interpret_mood(
            MoodSliders(vibe=20, energy=50, era=80, density=34, price=66)
        )
        assert interpretation.tone == "professional"
        assert interpretation.energy == "moderate"
        assert interpretation.style == "modern"
        assert interpretation.content_density == "minimal"
        assert interpretation.market_position == "premium"

    def test_thresholds_are_inclusive_of_middle(self):
        interpretation = interpret_mood(
            MoodSliders(vibe=35, energy=65, era=35, density=65, price=35)
        )
        assert interpretation.tone == "balanced"
        assert interpretation.energy == "moderate"
        assert interpretation.market_position == "quality-focused"


class TestColorsAndType:
    def test_industry_specific_palette(self):
        assert derive_colors("coffee-cafe", "local").primary == "#78350F"
        assert derive_colors("dental", "trust-authority").primary == "#0D9488"

    def test_archetype_palette(self):
        assert derive_colors("plumber", "reliable-local").primary == "#1E40AF"
        assert derive_colors("bakery", "luxury").primary == "#0F172A"

    def test_unknown_archetype_palette(self):
        assert derive_colors(None, None) == derive_colors("restaurant", "local")

    def test_typography(self):
        assert derive_typography("friendly").heading == "'Poppins', sans-serif"
        assert derive_typography("no-such-preset") == derive_typography("clean")

    @pytest.mark.parametrize(
        "density,spacing",
        [(71, "compact"), (70, "balanced"), (30, "balanced"), (29, "spacious")],
    )
    def test_section_spacing(self, density, spacing):
        assert derive_section_spacing(density) == spacing


class TestPresetMood:
    def test_named_preset(self):
        mood = mood_sliders_for_preset("friendly")
        assert mood == MoodSliders(vibe=80, energy=60, era=50, density=60, price=40)

    def test_unknown_preset(self):
        assert mood_sliders_for_preset("no-such-preset") is None


class TestContentHelpers:
    """Tests for city extraction and template selection."""

    @pytest.mark.parametrize(
        "address,city",
        [
            ("123 Main St, Springfield, IL 62701", "Springfield"),
            ("42 Elm St, Austin, TX 78701", "Austin"),
            ("Somewhere without a state", None),
            (None, None),
        ],
    )
    def test_extract_city(self, address, city):
        assert extract_city(address) == city

    def test_pick_template_is_stable(self):
        pool = ["a", "b", "c"]
        assert pick_template(pool, "acme|bakery|") == pick_template(pool, "acme|bakery|")
        assert pick_template(pool, "acme", seed=3) == pick_template(pool, "acme", seed=3)
        assert pick_template(["only"], "anything", seed=99) == "only"

    def test_subheadline_needs_rating_and_reviews(self, bakery_profile):
        assert generate_subheadline(bakery_profile, "dental") == (
            "Modern dentistry, compassionate care"
        )
