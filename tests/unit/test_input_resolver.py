"""Tests for input resolution at the three input levels."""

import pytest
from pydantic import ValidationError

from blink.core.errors import InvalidProfileError
from blink.core.ir import (
    BusinessProfile,
    ConfigOverrides,
    DesignChoice,
    InputLevel,
    PageTier,
    Palette,
    ResearchSignals,
    ResolvedConfiguration,
)
from blink.core.profile_loader import dump_model
from blink.planner import InputResolver, resolve_all_levels, resolve_inputs
from blink.planner.resolver import (
    coerce_level,
    derive_archetype,
    derive_preset,
    derive_theme,
    derive_tier,
    ensure_min_pages,
)


class TestMinimalLevel:
    """Minimal resolution leaves design choices AUTO."""

    def test_choices_are_auto(self, bakery_profile):
        config = resolve_inputs(bakery_profile, InputLevel.MINIMAL)

        assert config.level == InputLevel.MINIMAL
        assert config.business_name == "Sunrise Bakery"
        assert config.industry == "bakery"
        for choice in (config.preset, config.theme, config.layout, config.archetype):
            assert choice.is_auto
        assert config.page_tier == PageTier.STANDARD
        assert config.pages == ["home", "services", "contact", "about", "gallery", "testimonials"]
        assert config.tagline is None
        assert config.mood_sliders is None

    def test_resolved_values_are_recorded(self, bakery_profile):
        config = resolve_inputs(bakery_profile, "minimal")

        assert config.resolved is not None
        assert config.resolved.preset == "friendly"
        assert config.resolved.theme == "light"
        assert config.resolved.layout == "artisan-charm"
        assert config.resolved.archetype == "local"

    def test_resolve_replaces_auto(self, bakery_profile):
        resolved = resolve_inputs(bakery_profile, "minimal").resolve()

        assert resolved.preset == DesignChoice.explicit("friendly")
        assert resolved.layout.value == "artisan-charm"
        assert resolved.effective_layout == "artisan-charm"

    def test_auto_serializes_as_string(self, bakery_profile):
        data = dump_model(resolve_inputs(bakery_profile, "minimal"))

        assert data["preset"] == "auto"
        assert data["theme"] == "auto"
        assert data["level"] == "minimal"
        assert data["resolved"]["preset"] == "friendly"

    def test_auto_string_parses_back(self, bakery_profile):
        config = resolve_inputs(bakery_profile, "minimal")
        assert ResolvedConfiguration.model_validate(dump_model(config)) == config
        assert DesignChoice.model_validate("auto").is_auto
        assert DesignChoice.model_validate("bold").value == "bold"

    def test_too_few_pages_rejected(self, bakery_profile):
        data = dump_model(resolve_inputs(bakery_profile, "minimal"))
        data["pages"] = ["home"]
        with pytest.raises(ValidationError, match="at least 3 pages"):
            ResolvedConfiguration.model_validate(data)

    def test_overrides_become_explicit(self, bakery_profile):
        config = resolve_inputs(
            bakery_profile,
            "minimal",
            ConfigOverrides(layout="sweet-simple", theme="dark"),
        )

        assert config.layout == DesignChoice.explicit("sweet-simple")
        assert config.theme.value == "dark"
        assert config.preset.is_auto
        assert config.effective_layout == "sweet-simple"


class TestModerateLevel:
    """Moderate resolution makes core choices explicit."""

    def test_luxury_barbershop(self, barbershop_profile):
        config = resolve_inputs(barbershop_profile, InputLevel.MODERATE)

        assert config.industry == "barbershop"
        assert config.preset.value == "luxury"
        assert config.theme.value == "dark"
        assert config.archetype.value == "luxury"
        assert config.layout.value == "classic-heritage"
        assert config.page_tier == PageTier.PREMIUM
        assert len(config.pages) == 9
        assert config.city == "Austin"
        assert config.resolved is None
        assert config.mood_sliders is None

    def test_tagline_comes_from_industry_pool(self, barbershop_profile):
        config = resolve_inputs(barbershop_profile)

        assert config.tagline in {
            "Where style meets tradition",
            "Premium cuts, classic experience",
            "Your neighborhood barbershop in Austin",
        }

    def test_tagline_is_deterministic(self, barbershop_profile):
        first = resolve_inputs(barbershop_profile).tagline
        second = resolve_inputs(barbershop_profile).tagline
        assert first == second

    def test_seeded_tagline_is_reproducible(self, barbershop_profile):
        resolver = InputResolver(tagline_seed=7)
        assert resolver.resolve(barbershop_profile).tagline == resolver.resolve(
            barbershop_profile
        ).tagline

    def test_tagline_fills_fallback_city(self):
        profile = BusinessProfile(name="Acme", industry="underwater basket weaving")
        for seed in range(10):
            tagline = InputResolver(tagline_seed=seed).resolve(profile).tagline
            assert "{city}" not in tagline
            if tagline.startswith("Serving"):
                assert tagline == "Serving your area with pride"

    def test_unknown_industry_defaults(self, bare_profile):
        config = resolve_inputs(bare_profile)

        assert config.industry == "healthcare"
        assert config.preset.value == "clean"
        assert config.theme.value == "light"
        assert config.archetype.value == "trust-authority"
        assert config.page_tier == PageTier.BASIC
        assert config.pages == ["home", "services", "contact", "about"]

    def test_overrides_win(self, bakery_profile):
        palette = Palette(primary="#000000", secondary="#111111", accent="#222222")
        config = resolve_inputs(
            bakery_profile,
            "moderate",
            ConfigOverrides(preset="bold", page_tier=PageTier.PREMIUM, colors=palette),
        )

        assert config.preset.value == "bold"
        assert config.page_tier == PageTier.PREMIUM
        assert len(config.pages) == 9
        assert config.colors == palette

    def test_short_page_override_is_padded(self, bakery_profile):
        config = resolve_inputs(bakery_profile, "moderate", ConfigOverrides(pages=["home", "home"]))
        assert config.pages == ["home", "services", "contact"]


class TestExtremeLevel:
    """Extreme resolution adds the full design-token bundle."""

    def test_full_bundle(self, barbershop_profile):
        config = resolve_inputs(barbershop_profile, InputLevel.EXTREME)

        assert config.level == InputLevel.EXTREME
        mood = config.mood_sliders
        assert (mood.vibe, mood.energy, mood.era, mood.density, mood.price) == (
            70,
            40,
            70,
            30,
            95,
        )
        assert config.colors.primary == "#0F172A"
        assert config.typography.heading == "'Playfair Display', serif"
        assert config.content.hero_headline == "Fade Masters"
        assert config.content.hero_subheadline == "Rated 4.8★ by 212 happy customers"
        assert "Austin" in config.content.about_text
        assert config.features == ["online-booking", "service-menu", "gallery"]
        assert config.hero_style == "fullscreen-video"
        assert config.card_style.shadow == "elegant"
        assert config.section_spacing == "balanced"
        assert config.pages == ["home", "services", "contact", "about", "gallery", "book"]

    def test_industry_palette(self, bakery_profile):
        config = resolve_inputs(bakery_profile, "extreme")

        assert config.archetype.value == "local"
        assert config.colors.primary == "#92400E"
        assert config.content.hero_subheadline == "Quality service you can count on"
        assert "the community" in config.content.about_text

    def test_defaults_without_research(self, bare_profile):
        config = resolve_inputs(bare_profile, "extreme")

        assert config.features == ["contact-form", "service-list", "about"]
        assert config.hero_style == "professional-banner"
        assert config.typography.heading == "'Inter', sans-serif"
        assert config.pages == [
            "home",
            "services",
            "contact",
            "about",
            "team",
            "faq",
            "book",
        ]


class TestAllLevels:
    def test_every_level_is_resolved(self, barbershop_profile):
        configs = resolve_all_levels(barbershop_profile)

        assert set(configs) == set(InputLevel)
        assert configs[InputLevel.MINIMAL].preset.is_auto
        assert configs[InputLevel.EXTREME].mood_sliders is not None


class TestProfileValidation:
    """Profiles without a usable name are rejected."""

    def test_blank_name(self):
        with pytest.raises(InvalidProfileError, match="no name"):
            resolve_inputs(BusinessProfile(name="   "))

    def test_mapping_without_name(self):
        with pytest.raises(InvalidProfileError):
            resolve_inputs({"category": "bakery"})

    def test_not_a_mapping(self):
        with pytest.raises(InvalidProfileError, match="mapping"):
            resolve_inputs(["Sunrise Bakery"])

    def test_mapping_with_camel_case_keys(self):
        config = resolve_inputs({"businessName": "Dough Bros", "category": "pizza"})
        assert config.business_name == "Dough Bros"
        assert config.industry == "pizza-restaurant"
        assert config.theme.value == "medium"

    def test_mapping_with_null_research(self):
        """Test a prospect record with ``research: null`` resolves like one without it."""
        config = resolve_inputs(
            {"name": "Cristy's Cake Shop", "fixtureId": "bakery", "research": None},
            "minimal",
        )
        assert config.industry == "bakery"
        assert config.business_name == "Cristy's Cake Shop"


class TestDerivations:
    """Tests for the individual derivation helpers."""

    @pytest.mark.parametrize(
        "price_level,expected",
        [("$$$$", "luxury"), ("$$$", "luxury"), ("$$", "bold"), ("$", "friendly"), (None, "bold")],
    )
    def test_derive_preset(self, price_level, expected):
        assert derive_preset("barbershop", price_level) == expected

    def test_derive_preset_unknown_industry(self):
        assert derive_preset("no-such-industry", None) == "clean"

    def test_dark_name_keyword(self):
        profile = BusinessProfile(name="Black Pearl Cafe")
        assert derive_theme("coffee-cafe", profile) == "dark"
        assert derive_theme("coffee-cafe", BusinessProfile(name="Bean There")) == "light"

    def test_archetype_name_keywords_win(self):
        profile = BusinessProfile(
            name="Modern Cuts",
            research=ResearchSignals(price_level="$$$$"),
        )
        assert derive_archetype("barbershop", profile) == "modern-sleek"

    def test_archetype_from_top_price(self):
        profile = BusinessProfile(name="Bean There", research=ResearchSignals(price_level="$$$$"))
        assert derive_archetype("coffee-cafe", profile) == "luxury"

    @pytest.mark.parametrize(
        "score,tier",
        [
            (None, PageTier.BASIC),
            (0, PageTier.BASIC),
            (49.9, PageTier.BASIC),
            (50, PageTier.STANDARD),
            (74, PageTier.STANDARD),
            (75, PageTier.PREMIUM),
            (100, PageTier.PREMIUM),
        ],
    )
    def test_derive_tier(self, score, tier):
        assert derive_tier(score) == tier

    def test_ensure_min_pages(self):
        assert ensure_min_pages([], PageTier.BASIC) == ["home", "services", "contact"]
        assert ensure_min_pages(["menu"], PageTier.BASIC) == ["menu", "home", "services"]
        assert ensure_min_pages(["a", "b", "c", "d"], PageTier.BASIC) == ["a", "b", "c", "d"]

    @pytest.mark.parametrize(
        "level,expected",
        [
            ("minimal", InputLevel.MINIMAL),
            (" EXTREME ", InputLevel.EXTREME),
            (InputLevel.MODERATE, InputLevel.MODERATE),
            ("maximal", InputLevel.MODERATE),
            (None, InputLevel.MODERATE),
        ],
    )
    def test_coerce_level(self, level, expected):
        assert coerce_level(level) == expected
