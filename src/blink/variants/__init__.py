"""
Variant synthesis: key codec, named presets and matrix expansion.
"""

from .codec import (
    DEFAULT_CODEC,
    LAYOUT_ABBREVIATIONS,
    PRESET_ABBREVIATIONS,
    SHORT_KEY_PATTERN,
    VariantKeyCodec,
    check_path_length,
    expand_variant_key,
    is_short_variant_key,
    normalize_key,
    shorten_variant_key,
)
from .matrix import expand_variants, select_variant_keys, variant_keys_for_industry
from .presets import VARIANT_PRESETS, VariantPreset, get_variant_preset

__all__ = [
    # Codec
    "DEFAULT_CODEC",
    "LAYOUT_ABBREVIATIONS",
    "PRESET_ABBREVIATIONS",
    "SHORT_KEY_PATTERN",
    "VariantKeyCodec",
    "check_path_length",
    "expand_variant_key",
    "is_short_variant_key",
    "normalize_key",
    "shorten_variant_key",
    # Matrix
    "expand_variants",
    "select_variant_keys",
    "variant_keys_for_industry",
    # Presets
    "VARIANT_PRESETS",
    "VariantPreset",
    "get_variant_preset",
]
