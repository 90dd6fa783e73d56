"""
Property-based tests using Hypothesis.

These tests verify invariants across a wide range of inputs,
replacing the need for exhaustive example-based tests.
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from blink.catalog import default_catalog, normalize_industry
from blink.core.ir import BusinessProfile, InputLevel, ResearchSignals, ServiceItem
from blink.planner import generate_site, resolve_inputs
from blink.planner.mood import derive_mood_sliders
from blink.planner.tables import ARCHETYPE_MOOD_SLIDERS
from blink.variants import (
    LAYOUT_ABBREVIATIONS,
    PRESET_ABBREVIATIONS,
    SHORT_KEY_PATTERN,
    VARIANT_PRESETS,
    expand_variant_key,
    expand_variants,
    normalize_key,
    shorten_variant_key,
)

# =============================================================================
# Strategies
# =============================================================================

names = st.text(min_size=1, max_size=40).filter(lambda s: s.strip())

industry_hints = st.one_of(
    st.none(),
    st.text(max_size=40),
    st.sampled_from(default_catalog().keys()),
)

research = st.builds(
    ResearchSignals,
    rating=st.one_of(st.none(), st.floats(min_value=0, max_value=5)),
    review_count=st.one_of(st.none(), st.integers(min_value=0, max_value=10_000)),
    price_level=st.sampled_from([None, "$", "$$", "$$$", "$$$$"]),
)

profiles = st.builds(
    BusinessProfile,
    name=names,
    industry=industry_hints,
    address=st.one_of(st.none(), st.just("1 Main St, Springfield, IL 62701")),
    phone=st.one_of(st.none(), st.just("555-0100")),
    opportunity_score=st.one_of(st.none(), st.floats(min_value=0, max_value=100)),
    research=research,
    services=st.lists(st.builds(ServiceItem, name=names), max_size=2),
    about=st.one_of(st.none(), st.just("About us")),
)


# =============================================================================
# Industry Normalization Properties
# =============================================================================


class TestNormalizeProperties:
    """Property-based tests for industry normalization."""

    @given(st.one_of(st.none(), st.text(max_size=100)))
    @settings(max_examples=200)
    def test_always_returns_catalog_key(self, text) -> None:
        """Invariant: normalize is total and lands inside the catalog."""
        assert normalize_industry(text) in default_catalog()

    @given(st.sampled_from(default_catalog().keys()))
    def test_canonical_keys_are_fixed_points(self, key: str) -> None:
        assert normalize_industry(key) == key


# =============================================================================
# Variant Key Codec Properties
# =============================================================================


class TestCodecProperties:
    """Property-based tests for the variant key codec."""

    @given(st.text(max_size=80))
    @settings(max_examples=300)
    def test_shorten_output_is_path_safe(self, key: str) -> None:
        """Invariant: every shortened key is a valid short key."""
        short = shorten_variant_key(key)
        assert SHORT_KEY_PATTERN.match(short)
        assert len(short) <= 12

    @given(st.text(max_size=80))
    @settings(max_examples=300)
    def test_shorten_is_idempotent(self, key: str) -> None:
        short = shorten_variant_key(key)
        assert shorten_variant_key(short) == short

    @given(
        st.sampled_from(sorted(PRESET_ABBREVIATIONS)),
        st.sampled_from(sorted(LAYOUT_ABBREVIATIONS)),
    )
    def test_table_keys_round_trip(self, preset: str, layout: str) -> None:
        """Invariant: keys built from the tables expand back exactly."""
        long_key = f"{preset}-{layout}"
        assert expand_variant_key(shorten_variant_key(long_key)) == long_key


# =============================================================================
# Variant Matrix Properties
# =============================================================================


def _any_case(values: list[str]) -> st.SearchStrategy[str]:
    return st.sampled_from(values).flatmap(
        lambda value: st.sampled_from([value, value.upper(), value.title()])
    )


themes = _any_case(
    ["light", "dark", "medium", *LAYOUT_ABBREVIATIONS, *LAYOUT_ABBREVIATIONS.values()]
)


class TestMatrixProperties:
    @given(
        st.lists(_any_case(sorted(VARIANT_PRESETS)), max_size=8),
        st.lists(themes, max_size=8),
    )
    @settings(max_examples=200)
    def test_matrix_size_and_unique_keys(self, presets: list[str], theme_list: list[str]) -> None:
        """Invariant: |combinations| = |unique presets| x |unique themes|, keys distinct."""
        combinations = expand_variants(presets, theme_list)
        expected = len({normalize_key(p) for p in presets}) * len(
            {normalize_key(t) for t in theme_list}
        )

        assert len(combinations) == expected
        assert len({c.key for c in combinations}) == expected
        assert [c.index for c in combinations] == list(range(1, expected + 1))
        assert all(c.total == expected for c in combinations)


# =============================================================================
# Resolution and Planning Properties
# =============================================================================


class TestResolutionProperties:
    """Property-based tests for resolution and plan assembly."""

    @given(
        st.sampled_from([None, *sorted(ARCHETYPE_MOOD_SLIDERS)]),
        research,
    )
    @settings(max_examples=200)
    def test_mood_sliders_stay_in_range(self, archetype, signals) -> None:
        mood = derive_mood_sliders(archetype, signals)
        for value in (mood.vibe, mood.energy, mood.era, mood.density, mood.price):
            assert 0 <= value <= 100

    @given(profiles, st.sampled_from(list(InputLevel)))
    @settings(max_examples=150, deadline=None)
    def test_resolution_always_has_enough_pages(self, profile, level) -> None:
        """Invariant: every resolved configuration has >= 3 distinct pages."""
        config = resolve_inputs(profile, level)

        assert len(config.pages) >= 3
        assert len(set(config.pages)) == len(config.pages)
        assert config.industry in default_catalog()

    @given(profiles, st.one_of(st.none(), st.text(max_size=20)))
    @settings(max_examples=150, deadline=None)
    def test_plan_routes_are_unique(self, profile, layout) -> None:
        """Invariant: plans have a home route and no two pages share a path."""
        plan = generate_site(profile, layout)
        paths = [route.path for route in plan.routes]

        assert len(paths) == len(set(paths))
        assert plan.route_for("HomePage").path == "/"
        assert set(plan.pages) == {route.component for route in plan.routes}
        assert plan.selected_layout.id in default_catalog().lookup(plan.industry).layouts
