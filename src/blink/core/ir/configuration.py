"""
Resolved configuration types.

A ResolvedConfiguration is the output of input resolution: every knob the
renderer needs, derived from a BusinessProfile at one InputLevel. Design
choices that are left for a later stage are represented as
``DesignChoice.auto()`` instead of a magic string, so consumers resolve
them through one total step (``ResolvedConfiguration.resolve()``).
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_serializer, model_validator

from .business import ResearchSignals
from .catalog import Palette

AUTO = "auto"

MIN_PAGES = 3


class InputLevel(StrEnum):
    """How much of the configuration is derived up front."""

    MINIMAL = "minimal"  # Only the name; everything else deferred as AUTO
    MODERATE = "moderate"  # Core choices made explicit
    EXTREME = "extreme"  # Full design-token bundle


class PageTier(StrEnum):
    BASIC = "basic"
    STANDARD = "standard"
    PREMIUM = "premium"


class Theme(StrEnum):
    LIGHT = "light"
    MEDIUM = "medium"
    DARK = "dark"


class DesignChoice(BaseModel):
    """A design knob that is either AUTO or an explicit value.

    Serializes to the bare string ``"auto"`` or the explicit value, and
    parses from the same.

    Examples:
        >>> DesignChoice.auto().resolve("luxury")
        'luxury'
        >>> DesignChoice.explicit("bold").resolve("luxury")
        'bold'
    """

    value: str | None = None
    model_config = ConfigDict(frozen=True)

    @model_validator(mode="before")
    @classmethod
    def _from_string(cls, data: Any) -> Any:
        if isinstance(data, str):
            return {"value": None if data == AUTO else data}
        return data

    @model_serializer
    def _serialize(self) -> str:
        return AUTO if self.value is None else self.value

    @classmethod
    def auto(cls) -> DesignChoice:
        return cls()

    @classmethod
    def explicit(cls, value: str) -> DesignChoice:
        return cls(value=None if value == AUTO else value)

    @property
    def is_auto(self) -> bool:
        return self.value is None

    def resolve(self, fallback: str) -> str:
        return fallback if self.value is None else self.value

    def __str__(self) -> str:
        return AUTO if self.value is None else self.value


class MoodSliders(BaseModel):
    """Five 0-100 axes describing the feel of a site.

    vibe: professional (0) .. playful (100)
    energy: calm .. energetic
    era: classic .. modern
    density: minimal .. rich content
    price: value .. premium positioning
    """

    vibe: int = Field(ge=0, le=100)
    energy: int = Field(ge=0, le=100)
    era: int = Field(ge=0, le=100)
    density: int = Field(ge=0, le=100)
    price: int = Field(ge=0, le=100)
    model_config = ConfigDict(frozen=True)


class MoodInterpretation(BaseModel):
    tone: str
    energy: str
    style: str
    content_density: str
    market_position: str
    model_config = ConfigDict(frozen=True)


class Typography(BaseModel):
    heading: str
    body: str
    model_config = ConfigDict(frozen=True)


class CardStyle(BaseModel):
    border_radius: str
    shadow: str
    border: bool
    model_config = ConfigDict(frozen=True)


class GeneratedContent(BaseModel):
    hero_headline: str
    hero_subheadline: str
    about_text: str
    model_config = ConfigDict(frozen=True)


class ResolvedChoices(BaseModel):
    """Concrete values standing behind the AUTO choices of a minimal config."""

    preset: str
    theme: str
    page_tier: PageTier
    layout: str
    archetype: str
    model_config = ConfigDict(frozen=True)


class ConfigOverrides(BaseModel):
    """Caller-supplied values that win over derived ones."""

    preset: str | None = None
    theme: str | None = None
    layout: str | None = None
    archetype: str | None = None
    page_tier: PageTier | None = None
    pages: list[str] | None = None
    colors: Palette | None = None
    model_config = ConfigDict(frozen=True)


class ResolvedConfiguration(BaseModel):
    level: InputLevel
    business_name: str
    industry: str
    city: str | None = None
    research: ResearchSignals = Field(default_factory=ResearchSignals)

    preset: DesignChoice
    theme: DesignChoice
    layout: DesignChoice
    archetype: DesignChoice
    page_tier: PageTier
    pages: list[str]
    resolved: ResolvedChoices | None = None

    tagline: str | None = None
    mood_sliders: MoodSliders | None = None
    colors: Palette | None = None
    typography: Typography | None = None
    content: GeneratedContent | None = None
    features: list[str] = Field(default_factory=list)
    hero_style: str | None = None
    card_style: CardStyle | None = None
    section_spacing: str | None = None
    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def _enough_pages(self) -> ResolvedConfiguration:
        if len(self.pages) < MIN_PAGES:
            raise ValueError(f"A site needs at least {MIN_PAGES} pages, got {self.pages}")
        return self

    def resolve(self) -> ResolvedConfiguration:
        """Return a copy with every AUTO choice replaced by its resolved value.

        Choices with no resolved counterpart stay AUTO.
        """
        if self.resolved is None:
            return self
        return self.model_copy(
            update={
                "preset": DesignChoice.explicit(self.preset.resolve(self.resolved.preset)),
                "theme": DesignChoice.explicit(self.theme.resolve(self.resolved.theme)),
                "layout": DesignChoice.explicit(self.layout.resolve(self.resolved.layout)),
                "archetype": DesignChoice.explicit(
                    self.archetype.resolve(self.resolved.archetype)
                ),
            }
        )

    @property
    def effective_layout(self) -> str | None:
        """Layout id after AUTO resolution, or None if nothing was chosen."""
        return self.resolve().layout.value


__all__ = [
    "AUTO",
    "MIN_PAGES",
    "CardStyle",
    "ConfigOverrides",
    "DesignChoice",
    "GeneratedContent",
    "InputLevel",
    "MoodInterpretation",
    "MoodSliders",
    "PageTier",
    "ResolvedChoices",
    "ResolvedConfiguration",
    "Theme",
    "Typography",
]
