"""
Template-based content helpers: tagline, hero copy and about text.

Selection from a template pool is deterministic. By default the pool
index comes from a SHA-256 digest of the business identity; callers that
want different but still reproducible picks pass an integer seed.
"""

from __future__ import annotations

import hashlib
import random
import re

from blink.core.ir import BusinessProfile

from .tables import (
    FALLBACK_CITY,
    FALLBACK_COMMUNITY,
    SUBHEADLINE_TEMPLATES,
    TAGLINE_TEMPLATES,
    lookup,
)

_CITY_PATTERN = re.compile(r"([A-Za-z\s]+),\s*[A-Z]{2}")


def extract_city(address: str | None) -> str | None:
    """Pull the city out of a US-style "street, City, ST zip" address.

    Examples:
        >>> extract_city("123 Main St, Springfield, IL 62701")
        'Springfield'
        >>> extract_city("somewhere") is None
        True
    """
    if not address:
        return None
    match = _CITY_PATTERN.search(address)
    if not match:
        return None
    return match.group(1).strip() or None


def profile_city(profile: BusinessProfile) -> str | None:
    return profile.city or extract_city(profile.address)


def _identity(profile: BusinessProfile, industry: str) -> str:
    return "|".join((profile.name.strip().lower(), industry, profile.address or ""))


def pick_template(pool: list[str], identity: str, seed: int | None = None) -> str:
    """Deterministically choose one template from ``pool``."""
    if seed is not None:
        return random.Random(f"{seed}|{identity}").choice(pool)
    digest = hashlib.sha256(identity.encode("utf-8")).digest()
    return pool[int.from_bytes(digest[:8], "big") % len(pool)]


def generate_tagline(
    profile: BusinessProfile,
    industry: str,
    seed: int | None = None,
) -> str:
    templates = lookup(TAGLINE_TEMPLATES, industry)
    template = pick_template(templates, _identity(profile, industry), seed)
    return template.format(city=profile_city(profile) or FALLBACK_CITY)


def generate_headline(profile: BusinessProfile) -> str:
    return profile.name.strip()


def generate_subheadline(profile: BusinessProfile, industry: str) -> str:
    research = profile.research
    if research.rating and research.review_count:
        return f"Rated {research.rating:g}★ by {research.review_count} happy customers"
    return lookup(SUBHEADLINE_TEMPLATES, industry)


def generate_about_text(profile: BusinessProfile, industry: str) -> str:
    city = profile_city(profile) or FALLBACK_COMMUNITY
    industry_words = industry.replace("-", " ", 1)
    return (
        f"{profile.name.strip()} has been proudly serving {city} with exceptional "
        f"{industry_words} services. Our team is dedicated to providing the highest "
        f"quality experience for every customer who walks through our doors."
    )


__all__ = [
    "extract_city",
    "generate_about_text",
    "generate_headline",
    "generate_subheadline",
    "generate_tagline",
    "pick_template",
    "profile_city",
]
