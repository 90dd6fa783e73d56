"""
Industry catalog types.

An IndustryDefinition groups three LayoutVariants for one industry,
names the default one, and carries a color palette per layout.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Palette(BaseModel):
    primary: str
    secondary: str
    accent: str
    model_config = ConfigDict(frozen=True)


class LayoutStyle(BaseModel):
    hero_style: str
    card_style: str
    border_radius: str
    shadows: str
    spacing: str
    model_config = ConfigDict(frozen=True)


class LayoutVariant(BaseModel):
    """One visual treatment of an industry's site.

    ``section_order`` maps a page key (``home``, ``services``, ``about``)
    to the ordered section ids rendered on that page.
    """

    name: str
    description: str
    style: LayoutStyle
    emphasis: list[str] = Field(default_factory=list)
    section_order: dict[str, list[str]] = Field(default_factory=dict)
    model_config = ConfigDict(frozen=True)


class IndustryDefinition(BaseModel):
    key: str
    layouts: dict[str, LayoutVariant]
    default_layout: str
    color_palettes: dict[str, Palette]
    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def _default_layout_exists(self) -> IndustryDefinition:
        if self.default_layout not in self.layouts:
            raise ValueError(
                f"Industry '{self.key}' default layout '{self.default_layout}' is not defined"
            )
        missing = set(self.layouts) - set(self.color_palettes)
        if missing:
            raise ValueError(f"Industry '{self.key}' has layouts without palettes: {sorted(missing)}")
        return self

    def layout(self, layout_id: str | None) -> LayoutVariant:
        """Return the named layout, or the default one when unknown."""
        if layout_id and layout_id in self.layouts:
            return self.layouts[layout_id]
        return self.layouts[self.default_layout]

    def layout_id(self, layout_id: str | None) -> str:
        """Return ``layout_id`` if it belongs to this industry, else the default id."""
        if layout_id and layout_id in self.layouts:
            return layout_id
        return self.default_layout

    def palette(self, layout_id: str | None) -> Palette:
        return self.color_palettes[self.layout_id(layout_id)]


class LayoutSummary(BaseModel):
    """Listing entry for one layout of an industry."""

    id: str
    name: str
    description: str
    is_default: bool = False
    model_config = ConfigDict(frozen=True)


__all__ = [
    "IndustryDefinition",
    "LayoutStyle",
    "LayoutSummary",
    "LayoutVariant",
    "Palette",
]
