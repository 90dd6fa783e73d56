"""
Variant key codec.

Generated variants are written to directories named after their variant
key. Long keys such as ``luxury-appetizing-visual`` push Windows paths
past their limit, so keys are shortened to ``{preset}-{layout}``
abbreviation pairs (``lux-vis``) and expanded back for display.

Short keys match ``^[a-z]+-[a-z0-9]{1,6}$`` and are at most 12 characters.
Keys built from the abbreviation tables round-trip exactly, and the table
covers every catalog layout. Themes and other short layout tokens are kept
verbatim unless they spell a table abbreviation, in which case they take a
hashed token instead. Anything longer degrades to a deterministic hashed
fallback and is logged; hashed tokens do not expand back.
"""

from __future__ import annotations

import hashlib
import logging
import re
from collections.abc import Mapping
from pathlib import Path

from blink.core.ir import VariantKey

logger = logging.getLogger(__name__)

SHORT_KEY_PATTERN = re.compile(r"^[a-z]+-[a-z0-9]{1,6}$")
MAX_SHORT_KEY_LENGTH = 12
MAX_LAYOUT_TOKEN_LENGTH = 6

# Windows MAX_PATH is 260; leave headroom for files inside the variant dir
MAX_PATH_LENGTH = 200

PRESET_ABBREVIATIONS: dict[str, str] = {
    "luxury": "lux",
    "friendly": "fri",
    "modern-minimal": "mod",
    "sharp-corporate": "corp",
    "bold-energetic": "bfun",
    "bold": "bld",
    "classic-elegant": "clas",
    "warm": "warm",
    "minimal": "min",
}

LAYOUT_ABBREVIATIONS: dict[str, str] = {
    "appetizing-visual": "vis",
    "menu-focused": "menu",
    "story-driven": "story",
    "booking-focused": "book",
    "portfolio-showcase": "port",
    "team-highlight": "team",
    "service-showcase": "svc",
    "trust-building": "trust",
    "trust-and-call": "call",
    "quote-generator": "quote",
    "visual-first": "vfirst",
    "conversion-focused": "conv",
    "content-heavy": "text",
    "layout-a": "a",
    "layout-b": "b",
    "layout-c": "c",
    # Catalog layouts
    "patient-focused": "ptnt",
    "medical-professional": "medpro",
    "clinical-dashboard": "cldash",
    "family-friendly": "famfr",
    "modern-cosmetic": "modcos",
    "clinical-efficient": "cleff",
    "family-fun": "ffun",
    "artisan-craft": "artcr",
    "quick-order": "qorder",
    "luxury-dining": "luxdin",
    "rustic-grill": "rgrill",
    "modern-chophouse": "chop",
    "cozy-warmth": "cozy",
    "modern-minimal": "modmin",
    "quick-grab": "qgrab",
    "farm-fresh": "farm",
    "elegant-dining": "eldin",
    "neighborhood-bistro": "bistro",
    "artisan-charm": "charm",
    "modern-patisserie": "patis",
    "sweet-simple": "sweet",
    "luxury-retreat": "retrt",
    "modern-beauty": "modbty",
    "quick-book": "qbook",
    "bold-energy": "bolden",
    "modern-wellness": "modwel",
    "functional-focused": "func",
    "serene-zen": "zen",
    "modern-flow": "flow",
    "active-practice": "active",
    "classic-heritage": "herit",
    "modern-grooming": "groom",
    "quick-cuts": "qcuts",
    "trust-authority": "auth",
    "modern-practice": "modprc",
    "results-focused": "result",
    "luxury-properties": "luxprp",
    "modern-search": "search",
    "local-expert": "expert",
    "trust-service": "trsvc",
    "professional-clean": "procln",
    "quick-call": "qcall",
    "fresh-clean": "fresh",
    "eco-friendly": "eco",
    "quick-quote": "qquote",
    "trusted-mechanic": "mech",
    "modern-auto": "modaut",
    "quick-service": "qsvc",
    "enterprise-trust": "entrst",
    "modern-startup": "start",
    "boutique-luxury": "btqlux",
    "modern-shop": "modshp",
    "fast-checkout": "fastck",
    "academic-excellence": "excel",
    "vibrant-community": "commty",
    "info-focused": "info",
}

_NON_ALNUM = re.compile(r"[^a-z0-9]+")
_NON_ALPHA = re.compile(r"[^a-z]")
_PRESET_TOKEN = re.compile(r"^[a-z]+$")
_LAYOUT_TOKEN = re.compile(r"^[a-z0-9]{1,6}$")


def normalize_key(key: str) -> str:
    """Lowercase and collapse every run of non-alphanumerics to one hyphen."""
    return _NON_ALNUM.sub("-", key.lower()).strip("-")


def _digest(text: str, length: int) -> str:
    return hashlib.sha1(text.encode("utf-8")).hexdigest()[:length]


def _invert(table: Mapping[str, str], kind: str) -> dict[str, str]:
    inverted: dict[str, str] = {}
    for full, short in table.items():
        if short in inverted:
            raise ValueError(
                f"{kind} abbreviation '{short}' is used by both '{inverted[short]}' and '{full}'"
            )
        inverted[short] = full
    return inverted


class VariantKeyCodec:
    """Shortens and expands variant keys using abbreviation tables.

    Args:
        preset_abbreviations: Preset id -> letters-only abbreviation.
        layout_abbreviations: Layout id -> 1-6 alphanumeric abbreviation.

    Both tables must be injective, and no preset abbreviation may spell a
    different preset's id, so ``shorten`` is idempotent and ``expand``
    unambiguous.
    """

    def __init__(
        self,
        preset_abbreviations: Mapping[str, str] | None = None,
        layout_abbreviations: Mapping[str, str] | None = None,
    ):
        presets = dict(PRESET_ABBREVIATIONS if preset_abbreviations is None else preset_abbreviations)
        layouts = dict(LAYOUT_ABBREVIATIONS if layout_abbreviations is None else layout_abbreviations)

        for preset, short in presets.items():
            if not _PRESET_TOKEN.match(short):
                raise ValueError(f"Preset abbreviation '{short}' must be lowercase letters")
            if short in presets and short != preset:
                raise ValueError(f"Preset abbreviation '{short}' collides with preset id '{short}'")
        for layout, short in layouts.items():
            if not _LAYOUT_TOKEN.match(short):
                raise ValueError(f"Layout abbreviation '{short}' must be 1-6 of [a-z0-9]")

        self._presets = presets
        self._layouts = layouts
        self._preset_reverse = _invert(presets, "Preset")
        self._layout_reverse = _invert(layouts, "Layout")
        # Longest first so "bold-energetic-x" is not read as preset "bold"
        self._presets_by_length = sorted(presets, key=lambda p: (-len(p), p))

    @property
    def preset_abbreviations(self) -> dict[str, str]:
        return dict(self._presets)

    @property
    def layout_abbreviations(self) -> dict[str, str]:
        return dict(self._layouts)

    def is_short_form(self, key: str) -> bool:
        """True if ``key`` is already a short key and must not be re-shortened."""
        if len(key) > MAX_SHORT_KEY_LENGTH or not SHORT_KEY_PATTERN.match(key):
            return False
        head = key.split("-", 1)[0]
        return head in self._preset_reverse or head not in self._presets

    def split(self, key: str) -> VariantKey | None:
        """Split a long key on its longest known preset prefix."""
        for preset in self._presets_by_length:
            prefix = f"{preset}-"
            if key.startswith(prefix) and len(key) > len(prefix):
                return VariantKey(preset=preset, layout=key[len(prefix) :])
        return None

    def shorten(self, key: str) -> str:
        """Shorten a ``{preset}-{layout}`` key. Never raises.

        Examples:
            >>> VariantKeyCodec().shorten("luxury-appetizing-visual")
            'lux-vis'
            >>> VariantKeyCodec().shorten("lux-vis")
            'lux-vis'
            >>> VariantKeyCodec().shorten("friendly-dark")
            'fri-dark'
        """
        normalized = normalize_key(key)
        if self.is_short_form(normalized):
            return normalized

        parsed = self.split(normalized)
        if parsed is not None:
            preset = self._presets[parsed.preset]
            return f"{preset}-{self.shorten_layout(parsed.layout)}"

        fallback = self._fallback(normalized)
        logger.warning(f"Variant key '{key}' has no known preset prefix, using '{fallback}'")
        return fallback

    def shorten_layout(self, layout: str) -> str:
        """Abbreviate a layout or theme id to at most six alphanumerics."""
        if layout in self._layouts:
            return self._layouts[layout]
        compact = _NON_ALNUM.sub("", layout.lower())
        if compact in self._layout_reverse:
            # Kept verbatim it would expand to a different layout
            hashed = self._hashed_layout(layout, compact)
            logger.warning(
                f"Layout '{layout}' spells the abbreviation of "
                f"'{self._layout_reverse[compact]}', using '{hashed}'"
            )
            return hashed
        if compact and len(compact) <= MAX_LAYOUT_TOKEN_LENGTH:
            return compact
        hashed = self._hashed_layout(layout, compact)
        logger.warning(f"Layout '{layout}' has no abbreviation, using '{hashed}'")
        return hashed

    def _hashed_layout(self, layout: str, compact: str) -> str:
        prefix = compact[:4]
        return f"{prefix}{_digest(layout, MAX_LAYOUT_TOKEN_LENGTH - len(prefix))}"

    def expand(self, key: str) -> str:
        """Expand a short key back to ``{preset}-{layout}``.

        Unknown tokens are kept as-is, so fallback keys expand to
        themselves. Input that is not a short key is returned normalized.

        Examples:
            >>> VariantKeyCodec().expand("lux-vis")
            'luxury-appetizing-visual'
            >>> VariantKeyCodec().expand("fri-dark")
            'friendly-dark'
        """
        normalized = normalize_key(key)
        if not SHORT_KEY_PATTERN.match(normalized):
            return normalized
        head, tail = normalized.split("-", 1)
        preset = self._preset_reverse.get(head, head)
        layout = self._layout_reverse.get(tail, tail)
        return f"{preset}-{layout}"

    def _fallback(self, key: str) -> str:
        letters = _NON_ALPHA.sub("", key)[:5] or "key"
        if letters in self._presets and letters not in self._preset_reverse:
            letters = letters[:3]
        return f"{letters}-{_digest(key, MAX_LAYOUT_TOKEN_LENGTH)}"


DEFAULT_CODEC = VariantKeyCodec()


def shorten_variant_key(key: str) -> str:
    return DEFAULT_CODEC.shorten(key)


def expand_variant_key(key: str) -> str:
    return DEFAULT_CODEC.expand(key)


def is_short_variant_key(key: str) -> bool:
    return DEFAULT_CODEC.is_short_form(key)


def check_path_length(path: str | Path, max_length: int = MAX_PATH_LENGTH) -> bool:
    """Return False (and log) when ``path`` is too long for Windows tooling."""
    length = len(str(path))
    if length > max_length:
        logger.warning(f"Path length {length} exceeds {max_length}: {path}")
        return False
    return True


__all__ = [
    "DEFAULT_CODEC",
    "LAYOUT_ABBREVIATIONS",
    "MAX_PATH_LENGTH",
    "MAX_SHORT_KEY_LENGTH",
    "PRESET_ABBREVIATIONS",
    "SHORT_KEY_PATTERN",
    "VariantKeyCodec",
    "check_path_length",
    "expand_variant_key",
    "is_short_variant_key",
    "normalize_key",
    "shorten_variant_key",
]
