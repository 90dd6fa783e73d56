"""
Derivation tables for input resolution.

Every table is keyed by catalog industry keys (or archetype / preset ids)
and carries a ``default`` entry; lookups go through ``lookup()`` so a
missing key always lands on that default bucket.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeVar

from blink.core.ir import CardStyle, MoodSliders, PageTier, Palette, Typography

T = TypeVar("T")

DEFAULT = "default"


def lookup(table: dict[str, T], key: str | None) -> T:
    """Return ``table[key]``, falling back to ``table['default']``."""
    if key is not None and key in table:
        return table[key]
    return table[DEFAULT]


# =============================================================================
# Presets, themes, archetypes
# =============================================================================


@dataclass(frozen=True)
class PresetTiers:
    """Style preset per price tier for one industry."""

    default: str
    luxury: str
    budget: str


INDUSTRY_PRESETS: dict[str, PresetTiers] = {
    "barbershop": PresetTiers("bold", "luxury", "friendly"),
    "salon-spa": PresetTiers("luxury", "luxury", "clean"),
    "restaurant": PresetTiers("bold", "luxury", "friendly"),
    "steakhouse": PresetTiers("luxury", "luxury", "bold"),
    "pizza-restaurant": PresetTiers("vibrant", "bold", "friendly"),
    "coffee-cafe": PresetTiers("clean", "luxury", "friendly"),
    "bakery": PresetTiers("friendly", "luxury", "friendly"),
    "dental": PresetTiers("clean", "luxury", "clean"),
    "healthcare": PresetTiers("clean", "luxury", "clean"),
    "fitness-gym": PresetTiers("bold", "luxury", "vibrant"),
    "yoga": PresetTiers("minimal", "luxury", "clean"),
    "law-firm": PresetTiers("luxury", "luxury", "clean"),
    "real-estate": PresetTiers("luxury", "luxury", "bold"),
    "plumber": PresetTiers("bold", "clean", "friendly"),
    "cleaning": PresetTiers("clean", "clean", "friendly"),
    "auto-shop": PresetTiers("bold", "bold", "friendly"),
    DEFAULT: PresetTiers("clean", "luxury", "friendly"),
}

INDUSTRY_THEMES: dict[str, str] = {
    "barbershop": "dark",
    "fitness-gym": "dark",
    "law-firm": "dark",
    "auto-shop": "dark",
    "steakhouse": "dark",
    "restaurant": "medium",
    "pizza-restaurant": "medium",
    DEFAULT: "light",
}

INDUSTRY_ARCHETYPES: dict[str, str] = {
    "barbershop": "vintage-classic",
    "salon-spa": "modern-sleek",
    "restaurant": "local",
    "pizza-restaurant": "local",
    "coffee-cafe": "local",
    "bakery": "local",
    "steakhouse": "luxury",
    "dental": "trust-authority",
    "healthcare": "trust-authority",
    "law-firm": "trust-authority",
    "real-estate": "trust-authority",
    "fitness-gym": "high-energy",
    "yoga": "calm-wellness",
    "plumber": "reliable-local",
    "cleaning": "reliable-local",
    "auto-shop": "reliable-local",
    DEFAULT: "local",
}

# Name keywords that force an archetype, checked in order
ARCHETYPE_KEYWORDS: list[tuple[tuple[str, ...], str]] = [
    (("classic", "traditional", "vintage"), "vintage-classic"),
    (("modern", "studio", "boutique"), "modern-sleek"),
    (("luxury", "premium", "elite"), "luxury"),
]

DARK_NAME_KEYWORDS = ("night", "dark", "black")

LUXURY_PRICE_LEVELS = frozenset({"$$$", "$$$$"})
BUDGET_PRICE_LEVELS = frozenset({"$"})
TOP_PRICE_LEVEL = "$$$$"


# =============================================================================
# Pages
# =============================================================================

_BASIC_PAGES = ["home", "services", "contact", "about"]
_STANDARD_PAGES = [*_BASIC_PAGES, "gallery", "testimonials"]
_PREMIUM_PAGES = [*_STANDARD_PAGES, "team", "faq", "blog"]

PAGE_PACKAGES: dict[PageTier, list[str]] = {
    PageTier.BASIC: _BASIC_PAGES,
    PageTier.STANDARD: _STANDARD_PAGES,
    PageTier.PREMIUM: _PREMIUM_PAGES,
}

INDUSTRY_PAGES: dict[str, list[str]] = {
    "barbershop": ["home", "services", "contact", "about", "gallery", "book"],
    "salon-spa": ["home", "services", "contact", "about", "gallery", "book", "team"],
    "restaurant": ["home", "menu", "contact", "about", "gallery", "reservations"],
    "steakhouse": ["home", "menu", "contact", "about", "gallery", "reservations"],
    "pizza-restaurant": ["home", "menu", "contact", "about", "order"],
    "coffee-cafe": ["home", "menu", "contact", "about", "gallery"],
    "bakery": ["home", "menu", "contact", "about", "gallery", "order"],
    "dental": ["home", "services", "contact", "about", "team", "faq", "book"],
    "healthcare": ["home", "services", "contact", "about", "team", "faq", "book"],
    "fitness-gym": ["home", "services", "contact", "about", "schedule", "pricing", "team"],
    "yoga": ["home", "services", "contact", "about", "schedule", "pricing"],
    "law-firm": ["home", "services", "contact", "about", "team", "faq", "testimonials"],
    "real-estate": ["home", "services", "contact", "about", "listings", "team"],
    "plumber": ["home", "services", "contact", "about", "testimonials", "faq"],
    "cleaning": ["home", "services", "contact", "about", "pricing", "testimonials"],
    "auto-shop": ["home", "services", "contact", "about", "gallery", "testimonials"],
}

PREMIUM_SCORE = 75
STANDARD_SCORE = 50


# =============================================================================
# Mood, colors, typography
# =============================================================================


def _mood(vibe: int, energy: int, era: int, density: int, price: int) -> MoodSliders:
    return MoodSliders(vibe=vibe, energy=energy, era=era, density=density, price=price)


ARCHETYPE_MOOD_SLIDERS: dict[str, MoodSliders] = {
    "vintage-classic": _mood(20, 30, 10, 50, 60),
    "modern-sleek": _mood(80, 50, 90, 40, 70),
    "local": _mood(50, 50, 50, 50, 40),
    "luxury": _mood(70, 30, 70, 30, 90),
    "trust-authority": _mood(60, 30, 60, 40, 70),
    "high-energy": _mood(90, 90, 80, 70, 50),
    "calm-wellness": _mood(40, 20, 60, 30, 60),
    "reliable-local": _mood(50, 50, 50, 60, 40),
    "neighborhood-friendly": _mood(40, 60, 40, 60, 30),
}
ARCHETYPE_MOOD_SLIDERS[DEFAULT] = ARCHETYPE_MOOD_SLIDERS["local"]

PRICE_LEVEL_SCORES: dict[str, int] = {
    "$$$$": 95,
    "$$$": 75,
    "$$": 50,
    "$": 25,
}

HIGH_RATING = 4.5
RATING_ENERGY_BOOST = 10


def _palette(primary: str, secondary: str, accent: str) -> Palette:
    return Palette(primary=primary, secondary=secondary, accent=accent)


ARCHETYPE_COLORS: dict[str, Palette] = {
    "vintage-classic": _palette("#1A1A2E", "#C9A227", "#E43F5A"),
    "modern-sleek": _palette("#18181B", "#A855F7", "#F472B6"),
    "local": _palette("#1E3A5F", "#3B82F6", "#10B981"),
    "luxury": _palette("#0F172A", "#D4AF37", "#9333EA"),
    "trust-authority": _palette("#1E3A8A", "#3B82F6", "#10B981"),
    "high-energy": _palette("#DC2626", "#F59E0B", "#FBBF24"),
    "calm-wellness": _palette("#065F46", "#10B981", "#6EE7B7"),
    "reliable-local": _palette("#1E40AF", "#3B82F6", "#F59E0B"),
    "neighborhood-friendly": _palette("#059669", "#34D399", "#FCD34D"),
}
ARCHETYPE_COLORS[DEFAULT] = ARCHETYPE_COLORS["local"]

# (archetype, industry) pairs whose palette differs from the archetype's
ARCHETYPE_INDUSTRY_COLORS: dict[tuple[str, str], Palette] = {
    ("local", "bakery"): _palette("#92400E", "#B45309", "#FBBF24"),
    ("local", "coffee-cafe"): _palette("#78350F", "#92400E", "#F59E0B"),
    ("local", "pizza-restaurant"): _palette("#DC2626", "#F97316", "#FBBF24"),
    ("trust-authority", "dental"): _palette("#0D9488", "#14B8A6", "#5EEAD4"),
    ("trust-authority", "healthcare"): _palette("#059669", "#10B981", "#34D399"),
    ("trust-authority", "law-firm"): _palette("#1E3A5F", "#2563EB", "#3B82F6"),
}

TYPOGRAPHY: dict[str, Typography] = {
    "luxury": Typography(heading="'Playfair Display', serif", body="'Inter', sans-serif"),
    "bold": Typography(heading="'Bebas Neue', sans-serif", body="'Inter', sans-serif"),
    "clean": Typography(heading="'Inter', sans-serif", body="'Inter', sans-serif"),
    "friendly": Typography(heading="'Poppins', sans-serif", body="'Open Sans', sans-serif"),
    "vibrant": Typography(heading="'Montserrat', sans-serif", body="'Roboto', sans-serif"),
    "minimal": Typography(heading="'Inter', sans-serif", body="'Inter', sans-serif"),
}
TYPOGRAPHY[DEFAULT] = TYPOGRAPHY["clean"]


# =============================================================================
# Features and layout specifics
# =============================================================================

INDUSTRY_FEATURES: dict[str, list[str]] = {
    "restaurant": ["online-ordering", "reservations", "menu-display"],
    "barbershop": ["online-booking", "service-menu", "gallery"],
    "salon-spa": ["online-booking", "service-menu", "gallery", "team"],
    "dental": ["online-booking", "patient-portal", "insurance-info"],
    "fitness-gym": ["class-schedule", "membership-signup", "trainer-profiles"],
    "law-firm": ["consultation-booking", "case-results", "team-bios"],
    "plumber": ["emergency-contact", "service-areas", "instant-quote"],
    DEFAULT: ["contact-form", "service-list", "about"],
}

HERO_STYLES: dict[str, str] = {
    "vintage-classic": "centered-overlay",
    "modern-sleek": "split-image",
    "luxury": "fullscreen-video",
    "local": "image-left",
    "high-energy": "dynamic-carousel",
    "calm-wellness": "soft-gradient",
    "trust-authority": "professional-banner",
    DEFAULT: "centered-overlay",
}

CARD_STYLES: dict[str, CardStyle] = {
    "vintage-classic": CardStyle(border_radius="4px", shadow="subtle", border=True),
    "modern-sleek": CardStyle(border_radius="16px", shadow="medium", border=False),
    "luxury": CardStyle(border_radius="8px", shadow="elegant", border=False),
    "local": CardStyle(border_radius="12px", shadow="soft", border=False),
}
CARD_STYLES[DEFAULT] = CARD_STYLES["local"]

COMPACT_DENSITY = 70
SPACIOUS_DENSITY = 30


# =============================================================================
# Content templates
# =============================================================================

TAGLINE_TEMPLATES: dict[str, list[str]] = {
    "barbershop": [
        "Where style meets tradition",
        "Premium cuts, classic experience",
        "Your neighborhood barbershop in {city}",
    ],
    "salon-spa": [
        "Elevate your beauty",
        "Where relaxation meets transformation",
        "Premium salon services in {city}",
    ],
    "restaurant": [
        "Fresh flavors, memorable moments",
        "Taste the difference",
        "Fine dining in {city}",
    ],
    "dental": [
        "Your smile, our priority",
        "Gentle care, beautiful smiles",
        "Trusted dental care in {city}",
    ],
    DEFAULT: [
        "Quality service you can trust",
        "Excellence in every detail",
        "Serving {city} with pride",
    ],
}

SUBHEADLINE_TEMPLATES: dict[str, str] = {
    "barbershop": "Premium cuts & classic grooming",
    "salon-spa": "Beauty, wellness & relaxation",
    "restaurant": "Exceptional food, unforgettable experience",
    "dental": "Modern dentistry, compassionate care",
    DEFAULT: "Quality service you can count on",
}

FALLBACK_CITY = "your area"
FALLBACK_COMMUNITY = "the community"


__all__ = [
    "ARCHETYPE_COLORS",
    "ARCHETYPE_INDUSTRY_COLORS",
    "ARCHETYPE_KEYWORDS",
    "ARCHETYPE_MOOD_SLIDERS",
    "CARD_STYLES",
    "DEFAULT",
    "HERO_STYLES",
    "INDUSTRY_ARCHETYPES",
    "INDUSTRY_FEATURES",
    "INDUSTRY_PAGES",
    "INDUSTRY_PRESETS",
    "INDUSTRY_THEMES",
    "PAGE_PACKAGES",
    "PRICE_LEVEL_SCORES",
    "PresetTiers",
    "SUBHEADLINE_TEMPLATES",
    "TAGLINE_TEMPLATES",
    "TYPOGRAPHY",
    "lookup",
]
