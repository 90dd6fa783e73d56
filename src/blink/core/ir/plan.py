"""
Generation plan and variant types.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .catalog import LayoutStyle, Palette


class VariantKey(BaseModel):
    """A (preset, layout) pair identifying one generated variant."""

    preset: str
    layout: str
    model_config = ConfigDict(frozen=True)

    @property
    def long_form(self) -> str:
        return f"{self.preset}-{self.layout}"

    @property
    def short_form(self) -> str:
        """Directory-safe key, e.g. ``fri-charm``."""
        from blink.variants.codec import DEFAULT_CODEC

        return DEFAULT_CODEC.shorten(self.long_form)


class VariantCombination(BaseModel):
    """One cell of the preset x theme matrix.

    ``index`` is 1-based and ``total`` is the size of the matrix, so a
    renderer can label it "variant {index} of {total}".
    """

    preset: str
    theme: str
    key: str
    index: int = Field(ge=1)
    total: int = Field(ge=1)
    model_config = ConfigDict(frozen=True)

    @property
    def label(self) -> str:
        return f"variant {self.index} of {self.total}"


class PageSpec(BaseModel):
    name: str
    component: str
    sections: list[str] = Field(default_factory=list)
    model_config = ConfigDict(frozen=True)


class Route(BaseModel):
    path: str
    component: str
    model_config = ConfigDict(frozen=True)


class SelectedLayout(BaseModel):
    id: str
    name: str
    description: str
    style: LayoutStyle
    emphasis: list[str] = Field(default_factory=list)
    model_config = ConfigDict(frozen=True)


class PlanBusiness(BaseModel):
    name: str
    city: str | None = None
    phone: str | None = None
    address: str | None = None
    email: str | None = None
    tagline: str | None = None
    model_config = ConfigDict(frozen=True)


class GenerationPlan(BaseModel):
    """Everything a renderer needs to emit one site."""

    business: PlanBusiness
    industry: str
    selected_layout: SelectedLayout
    colors: Palette
    pages: dict[str, PageSpec]
    routes: list[Route]
    model_config = ConfigDict(frozen=True)

    def route_for(self, component: str) -> Route | None:
        for route in self.routes:
            if route.component == component:
                return route
        return None


__all__ = [
    "GenerationPlan",
    "PageSpec",
    "PlanBusiness",
    "Route",
    "SelectedLayout",
    "VariantCombination",
    "VariantKey",
]
