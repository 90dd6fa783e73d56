"""
Industry catalog registry.

IndustryCatalog is an immutable lookup over IndustryDefinitions plus an
alias table. Lookups never fail: unknown industries resolve to the
catalog's default industry.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from functools import lru_cache

from blink.core.ir import IndustryDefinition, LayoutSummary, LayoutVariant, Palette

from .aliases import INDUSTRY_ALIASES
from .industries import DEFAULT_INDUSTRY, INDUSTRY_DEFINITIONS

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"[\s_]+")
_INVALID = re.compile(r"[^a-z0-9-]")
_HYPHENS = re.compile(r"-{2,}")


def slugify_industry(text: str | None) -> str:
    """Lowercase, hyphenate whitespace and drop anything outside [a-z0-9-].

    Examples:
        >>> slugify_industry("Coffee  Shop")
        'coffee-shop'
        >>> slugify_industry("Joe's Auto_Repair")
        'joes-auto-repair'
    """
    if not text:
        return ""
    slug = _WHITESPACE.sub("-", text.strip().lower())
    slug = _INVALID.sub("", slug)
    return _HYPHENS.sub("-", slug).strip("-")


class IndustryCatalog:
    """Registry of industry definitions with alias-aware normalization.

    Args:
        industries: Definitions keyed by industry key.
        aliases: Slug -> industry key. Aliases pointing at unknown keys are
            rejected.
        default_key: Industry used when nothing matches.
    """

    def __init__(
        self,
        industries: Mapping[str, IndustryDefinition],
        aliases: Mapping[str, str] | None = None,
        default_key: str = DEFAULT_INDUSTRY,
    ):
        if default_key not in industries:
            raise ValueError(f"Default industry '{default_key}' is not in the catalog")
        aliases = dict(aliases or {})
        unknown = {alias: key for alias, key in aliases.items() if key not in industries}
        if unknown:
            raise ValueError(f"Aliases point at unknown industries: {unknown}")

        self._industries = dict(industries)
        self._aliases = aliases
        self._default_key = default_key
        # Substring candidates, longest first so "pizza-shop" prefers "pizza"
        candidates = [(alias, key) for alias, key in aliases.items()]
        candidates += [(key, key) for key in industries]
        self._substring_candidates = sorted(candidates, key=lambda c: (-len(c[0]), c[0]))

    @property
    def default_key(self) -> str:
        return self._default_key

    def keys(self) -> list[str]:
        return list(self._industries)

    def aliases_for(self, industry_key: str) -> list[str]:
        return sorted(alias for alias, key in self._aliases.items() if key == industry_key)

    def __contains__(self, industry_key: object) -> bool:
        return industry_key in self._industries

    def __len__(self) -> int:
        return len(self._industries)

    def with_default(self, default_key: str) -> IndustryCatalog:
        """Return a catalog identical to this one but with another fallback industry."""
        return IndustryCatalog(self._industries, self._aliases, default_key)

    # -------------------------------------------------------------------------
    # Normalization
    # -------------------------------------------------------------------------

    def normalize(self, free_text: str | None) -> str:
        """Map free-text industry input to a catalog key.

        Exact matches (canonical key, then alias) win; otherwise the
        longest alias or key contained in the input is used; otherwise
        the default industry.

        Examples:
            >>> default_catalog().normalize("Mechanic")
            'auto-shop'
            >>> default_catalog().normalize("Tony's Pizza Shop")
            'pizza-restaurant'
            >>> default_catalog().normalize("")
            'healthcare'
        """
        slug = slugify_industry(free_text)
        if not slug:
            return self._default_key

        if slug in self._industries:
            return slug
        if slug in self._aliases:
            return self._aliases[slug]

        for candidate, key in self._substring_candidates:
            if candidate in slug:
                logger.debug(f"Industry '{free_text}' matched '{candidate}' -> {key}")
                return key

        logger.debug(f"Unknown industry '{free_text}', using {self._default_key}")
        return self._default_key

    # -------------------------------------------------------------------------
    # Lookup
    # -------------------------------------------------------------------------

    def lookup(self, industry_key: str | None) -> IndustryDefinition:
        """Return the definition for an industry; never fails."""
        if industry_key in self._industries:
            return self._industries[industry_key]
        return self._industries[self.normalize(industry_key)]

    def get_layout(self, industry: str | None, layout_id: str | None = None) -> LayoutVariant:
        return self.lookup(industry).layout(layout_id)

    def available_layouts(self, industry: str | None) -> list[LayoutSummary]:
        definition = self.lookup(industry)
        return [
            LayoutSummary(
                id=layout_id,
                name=layout.name,
                description=layout.description,
                is_default=layout_id == definition.default_layout,
            )
            for layout_id, layout in definition.layouts.items()
        ]

    def recommended_layout(self, industry: str | None) -> str:
        return self.lookup(industry).default_layout

    def palette(self, industry: str | None, layout_id: str | None = None) -> Palette:
        return self.lookup(industry).palette(layout_id)


@lru_cache(maxsize=1)
def default_catalog() -> IndustryCatalog:
    """Process-wide catalog built from the bundled industry definitions."""
    return IndustryCatalog(INDUSTRY_DEFINITIONS, INDUSTRY_ALIASES, DEFAULT_INDUSTRY)


def normalize_industry(free_text: str | None) -> str:
    """Normalize against the default catalog."""
    return default_catalog().normalize(free_text)


__all__ = [
    "IndustryCatalog",
    "default_catalog",
    "normalize_industry",
    "slugify_industry",
]
