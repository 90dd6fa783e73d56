"""
Input resolution.

Derives a ResolvedConfiguration from a BusinessProfile at one of three
input levels:

- minimal: only identity is fixed; preset, theme, layout and archetype
  stay AUTO with their resolved values recorded alongside
- moderate: preset, theme, archetype, layout, page tier and tagline are
  chosen explicitly
- extreme: moderate plus mood sliders, colors, typography, hero copy,
  features and layout specifics

Every derivation is a pure table lookup with a documented default, so
resolution never fails for unknown industries or levels. Only a profile
without a business name is rejected.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from blink.catalog import IndustryCatalog, default_catalog
from blink.core.errors import InvalidProfileError, ProfileLoadError
from blink.core.ir import (
    MIN_PAGES,
    BusinessProfile,
    CardStyle,
    ConfigOverrides,
    DesignChoice,
    GeneratedContent,
    InputLevel,
    PageTier,
    ResolvedChoices,
    ResolvedConfiguration,
)
from blink.core.profile_loader import parse_profile

from .content import (
    generate_about_text,
    generate_headline,
    generate_subheadline,
    generate_tagline,
    profile_city,
)
from .mood import derive_colors, derive_mood_sliders, derive_section_spacing, derive_typography
from .tables import (
    ARCHETYPE_KEYWORDS,
    BUDGET_PRICE_LEVELS,
    CARD_STYLES,
    DARK_NAME_KEYWORDS,
    HERO_STYLES,
    INDUSTRY_ARCHETYPES,
    INDUSTRY_FEATURES,
    INDUSTRY_PAGES,
    INDUSTRY_PRESETS,
    INDUSTRY_THEMES,
    LUXURY_PRICE_LEVELS,
    PAGE_PACKAGES,
    PREMIUM_SCORE,
    STANDARD_SCORE,
    TOP_PRICE_LEVEL,
    lookup,
)

logger = logging.getLogger(__name__)

# Price tier assumed at moderate/extreme level when research has none
DEFAULT_PRICE_LEVEL = "$$"


# =============================================================================
# Derivation helpers
# =============================================================================


def derive_preset(industry: str | None, price_level: str | None) -> str:
    """Style preset for an industry at a price tier.

    Examples:
        >>> derive_preset("barbershop", "$$$$")
        'luxury'
        >>> derive_preset("barbershop", "$")
        'friendly'
        >>> derive_preset("unknown", None)
        'clean'
    """
    tiers = lookup(INDUSTRY_PRESETS, industry)
    if price_level in LUXURY_PRICE_LEVELS:
        return tiers.luxury
    if price_level in BUDGET_PRICE_LEVELS:
        return tiers.budget
    return tiers.default


def derive_theme(industry: str | None, profile: BusinessProfile) -> str:
    name = profile.name.lower()
    if any(keyword in name for keyword in DARK_NAME_KEYWORDS):
        return "dark"
    return lookup(INDUSTRY_THEMES, industry)


def derive_archetype(industry: str | None, profile: BusinessProfile) -> str:
    """Archetype from name keywords, then top price tier, then industry."""
    name = profile.name.lower()
    for keywords, archetype in ARCHETYPE_KEYWORDS:
        if any(keyword in name for keyword in keywords):
            return archetype
    if profile.research.price_level == TOP_PRICE_LEVEL:
        return "luxury"
    return lookup(INDUSTRY_ARCHETYPES, industry)


def derive_tier(score: float | None) -> PageTier:
    if score is None:
        return PageTier.BASIC
    if score >= PREMIUM_SCORE:
        return PageTier.PREMIUM
    if score >= STANDARD_SCORE:
        return PageTier.STANDARD
    return PageTier.BASIC


def derive_features(industry: str | None) -> list[str]:
    return list(lookup(INDUSTRY_FEATURES, industry))


def derive_hero_style(archetype: str | None) -> str:
    return lookup(HERO_STYLES, archetype)


def derive_card_style(archetype: str | None) -> CardStyle:
    return lookup(CARD_STYLES, archetype)


def pages_for_tier(tier: PageTier) -> list[str]:
    return list(PAGE_PACKAGES[tier])


def industry_pages(industry: str | None) -> list[str]:
    """Full page list for an industry, or the premium package."""
    if industry in INDUSTRY_PAGES:
        return list(INDUSTRY_PAGES[industry])
    return pages_for_tier(PageTier.PREMIUM)


def ensure_min_pages(pages: list[str], tier: PageTier) -> list[str]:
    """De-duplicate ``pages`` and top up from the tier package to the minimum."""
    result = list(dict.fromkeys(pages))
    for page in PAGE_PACKAGES[tier]:
        if len(result) >= MIN_PAGES:
            break
        if page not in result:
            result.append(page)
    return result


def coerce_level(level: InputLevel | str | None) -> InputLevel:
    """Parse an input level, mapping anything unknown to moderate."""
    if isinstance(level, InputLevel):
        return level
    try:
        return InputLevel(str(level).strip().lower())
    except ValueError:
        logger.debug(f"Unknown input level {level!r}, using moderate")
        return InputLevel.MODERATE


def coerce_profile(profile: BusinessProfile | Mapping[str, Any]) -> BusinessProfile:
    """Accept a BusinessProfile or raw mapping; reject anything without a name."""
    if not isinstance(profile, BusinessProfile):
        if not isinstance(profile, Mapping):
            raise InvalidProfileError(
                f"Profile must be a mapping or BusinessProfile, got {type(profile).__name__}"
            )
        try:
            profile = parse_profile(dict(profile))
        except ProfileLoadError as e:
            raise InvalidProfileError(e.message) from e
    if not profile.name or not profile.name.strip():
        raise InvalidProfileError("Business profile has no name")
    return profile


# =============================================================================
# Resolver
# =============================================================================


class InputResolver:
    """Resolves business profiles into configurations.

    Args:
        catalog: Industry catalog used to normalize industries. Defaults
            to the bundled catalog.
        tagline_seed: When set, tagline templates are picked with a
            seeded RNG instead of the identity hash.
    """

    def __init__(
        self,
        catalog: IndustryCatalog | None = None,
        tagline_seed: int | None = None,
    ):
        self.catalog = catalog or default_catalog()
        self.tagline_seed = tagline_seed

    def resolve_industry(self, profile: BusinessProfile) -> str:
        return self.catalog.normalize(profile.industry_hint)

    def resolve(
        self,
        profile: BusinessProfile | Mapping[str, Any],
        level: InputLevel | str | None = InputLevel.MODERATE,
        overrides: ConfigOverrides | None = None,
    ) -> ResolvedConfiguration:
        """Resolve a profile at ``level``.

        Raises:
            InvalidProfileError: If the profile has no business name.
        """
        profile = coerce_profile(profile)
        level = coerce_level(level)
        overrides = overrides or ConfigOverrides()
        industry = self.resolve_industry(profile)
        logger.debug(f"Resolving '{profile.name}' as {industry} at {level} level")

        if level == InputLevel.MINIMAL:
            return self._minimal(profile, industry, overrides)
        if level == InputLevel.EXTREME:
            return self._extreme(profile, industry, overrides)
        return self._moderate(profile, industry, overrides)

    def resolve_all_levels(
        self, profile: BusinessProfile | Mapping[str, Any]
    ) -> dict[InputLevel, ResolvedConfiguration]:
        """Resolve at every level, for side-by-side comparison."""
        profile = coerce_profile(profile)
        return {level: self.resolve(profile, level) for level in InputLevel}

    # -------------------------------------------------------------------------
    # Levels
    # -------------------------------------------------------------------------

    def _base(self, profile: BusinessProfile, industry: str) -> dict[str, Any]:
        return {
            "business_name": profile.name.strip(),
            "industry": industry,
            "city": profile_city(profile),
            "research": profile.research,
        }

    def _minimal(
        self, profile: BusinessProfile, industry: str, overrides: ConfigOverrides
    ) -> ResolvedConfiguration:
        tier = overrides.page_tier or PageTier.STANDARD
        resolved = ResolvedChoices(
            preset=derive_preset(industry, profile.research.price_level),
            theme=lookup(INDUSTRY_THEMES, industry),
            page_tier=tier,
            layout=self.catalog.recommended_layout(industry),
            archetype=lookup(INDUSTRY_ARCHETYPES, industry),
        )
        pages = overrides.pages if overrides.pages is not None else pages_for_tier(tier)

        return ResolvedConfiguration(
            level=InputLevel.MINIMAL,
            **self._base(profile, industry),
            preset=_choice(overrides.preset),
            theme=_choice(overrides.theme),
            layout=_choice(overrides.layout),
            archetype=_choice(overrides.archetype),
            page_tier=tier,
            pages=ensure_min_pages(pages, tier),
            resolved=resolved,
            colors=overrides.colors,
        )

    def _moderate_fields(
        self, profile: BusinessProfile, industry: str, overrides: ConfigOverrides
    ) -> dict[str, Any]:
        price_level = profile.research.price_level or DEFAULT_PRICE_LEVEL
        tier = overrides.page_tier or derive_tier(profile.opportunity_score)
        pages = overrides.pages if overrides.pages is not None else pages_for_tier(tier)
        return {
            **self._base(profile, industry),
            "preset": overrides.preset or derive_preset(industry, price_level),
            "theme": overrides.theme or derive_theme(industry, profile),
            "layout": overrides.layout or self.catalog.recommended_layout(industry),
            "archetype": overrides.archetype or derive_archetype(industry, profile),
            "page_tier": tier,
            "pages": ensure_min_pages(pages, tier),
            "tagline": generate_tagline(profile, industry, self.tagline_seed),
            "colors": overrides.colors,
        }

    def _moderate(
        self, profile: BusinessProfile, industry: str, overrides: ConfigOverrides
    ) -> ResolvedConfiguration:
        fields = self._moderate_fields(profile, industry, overrides)
        return _explicit_config(InputLevel.MODERATE, fields)

    def _extreme(
        self, profile: BusinessProfile, industry: str, overrides: ConfigOverrides
    ) -> ResolvedConfiguration:
        fields = self._moderate_fields(profile, industry, overrides)
        archetype = fields["archetype"]
        mood = derive_mood_sliders(archetype, profile.research)

        pages = overrides.pages if overrides.pages is not None else industry_pages(industry)
        fields.update(
            pages=ensure_min_pages(pages, fields["page_tier"]),
            mood_sliders=mood,
            colors=overrides.colors or derive_colors(industry, archetype, profile.research),
            typography=derive_typography(fields["preset"]),
            content=GeneratedContent(
                hero_headline=generate_headline(profile),
                hero_subheadline=generate_subheadline(profile, industry),
                about_text=generate_about_text(profile, industry),
            ),
            features=derive_features(industry),
            hero_style=derive_hero_style(archetype),
            card_style=derive_card_style(archetype),
            section_spacing=derive_section_spacing(mood.density),
        )
        return _explicit_config(InputLevel.EXTREME, fields)


def _choice(value: str | None) -> DesignChoice:
    return DesignChoice.auto() if value is None else DesignChoice.explicit(value)


def _explicit_config(level: InputLevel, fields: dict[str, Any]) -> ResolvedConfiguration:
    for name in ("preset", "theme", "layout", "archetype"):
        fields[name] = DesignChoice.explicit(fields[name])
    return ResolvedConfiguration(level=level, **fields)


def resolve_inputs(
    profile: BusinessProfile | Mapping[str, Any],
    level: InputLevel | str | None = InputLevel.MODERATE,
    overrides: ConfigOverrides | None = None,
    catalog: IndustryCatalog | None = None,
) -> ResolvedConfiguration:
    """Resolve a profile with a one-off InputResolver."""
    return InputResolver(catalog).resolve(profile, level, overrides)


def resolve_all_levels(
    profile: BusinessProfile | Mapping[str, Any],
    catalog: IndustryCatalog | None = None,
) -> dict[InputLevel, ResolvedConfiguration]:
    return InputResolver(catalog).resolve_all_levels(profile)


__all__ = [
    "DEFAULT_PRICE_LEVEL",
    "InputResolver",
    "coerce_level",
    "coerce_profile",
    "derive_archetype",
    "derive_card_style",
    "derive_features",
    "derive_hero_style",
    "derive_preset",
    "derive_theme",
    "derive_tier",
    "ensure_min_pages",
    "industry_pages",
    "pages_for_tier",
    "resolve_all_levels",
    "resolve_inputs",
]
