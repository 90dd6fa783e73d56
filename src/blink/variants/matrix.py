"""
Variant matrix expansion.

Expands preset and theme lists into the ordered cross product of
VariantCombinations, and enumerates the preset x layout variant keys
available for an industry.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from blink.catalog import IndustryCatalog, default_catalog
from blink.core.ir import VariantCombination, VariantKey

from .codec import DEFAULT_CODEC, VariantKeyCodec, normalize_key
from .presets import FRIENDLY, VARIANT_PRESETS

logger = logging.getLogger(__name__)

# Variant counts understood by select_variant_keys
SINGLE_VARIANT = 1
PER_LAYOUT_VARIANTS = 3


def _dedupe(values: Iterable[str]) -> list[str]:
    """Drop values that normalize to one already seen, keeping the first spelling."""
    unique: dict[str, str] = {}
    for value in values:
        unique.setdefault(normalize_key(value), value)
    return list(unique.values())


def expand_variants(
    presets: Iterable[str],
    themes: Iterable[str],
    codec: VariantKeyCodec | None = None,
) -> list[VariantCombination]:
    """Cross product of presets and themes, presets outermost.

    Inputs that differ only in case or separators count as duplicates and
    are dropped (first occurrence wins). Each combination
    carries the short key for ``{preset}-{theme}``.

    Examples:
        >>> [c.key for c in expand_variants(["luxury", "friendly"], ["light", "dark"])]
        ['lux-light', 'lux-dark', 'fri-light', 'fri-dark']
    """
    codec = codec or DEFAULT_CODEC
    unique_presets = _dedupe(presets)
    unique_themes = _dedupe(themes)
    total = len(unique_presets) * len(unique_themes)

    combinations: list[VariantCombination] = []
    seen_keys: dict[str, str] = {}
    for preset in unique_presets:
        for theme in unique_themes:
            long_key = f"{preset}-{theme}"
            key = codec.shorten(long_key)
            if key in seen_keys:
                logger.warning(f"Variant keys collide: '{seen_keys[key]}' and '{long_key}' -> {key}")
            seen_keys.setdefault(key, long_key)
            combinations.append(
                VariantCombination(
                    preset=preset,
                    theme=theme,
                    key=key,
                    index=len(combinations) + 1,
                    total=total,
                )
            )
    return combinations


def variant_keys_for_industry(
    industry: str,
    catalog: IndustryCatalog | None = None,
) -> list[VariantKey]:
    """Every named preset paired with every layout of the industry."""
    definition = (catalog or default_catalog()).lookup(industry)
    return [
        VariantKey(preset=preset_id, layout=layout_id)
        for preset_id in VARIANT_PRESETS
        for layout_id in definition.layouts
    ]


def select_variant_keys(
    industry: str,
    count: int,
    catalog: IndustryCatalog | None = None,
) -> list[VariantKey]:
    """Pick which variants to generate for an industry.

    - 1: the friendly preset on the industry's default layout
    - 3: the friendly preset across each of the industry's layouts
    - anything else: the full preset x layout set
    """
    catalog = catalog or default_catalog()
    definition = catalog.lookup(industry)
    if count == SINGLE_VARIANT:
        return [VariantKey(preset=FRIENDLY.id, layout=definition.default_layout)]
    if count == PER_LAYOUT_VARIANTS:
        return [VariantKey(preset=FRIENDLY.id, layout=layout_id) for layout_id in definition.layouts]
    return variant_keys_for_industry(industry, catalog)


__all__ = [
    "expand_variants",
    "select_variant_keys",
    "variant_keys_for_industry",
]
