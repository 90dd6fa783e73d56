"""
Business profile types.

A BusinessProfile is the sparse record the planner starts from: a name,
one or more raw industry hints, optional contact details and optional
third-party research signals (rating, review count, price tier).
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ResearchSignals(BaseModel):
    """Third-party research gathered about a business.

    Every field is optional; an empty ResearchSignals() stands in for
    "no research available".
    """

    rating: float | None = Field(default=None, ge=0, le=5)
    review_count: int | None = Field(default=None, ge=0)
    price_level: str | None = None
    categories: list[str] = Field(default_factory=list)
    hours: dict[str, str] = Field(default_factory=dict)
    photos: list[str] = Field(default_factory=list)
    review_highlights: list[str] = Field(default_factory=list)
    yelp_url: str | None = None
    google_maps_url: str | None = None
    model_config = ConfigDict(frozen=True)

    @field_validator("price_level")
    @classmethod
    def _price_level_is_dollars(cls, value: str | None) -> str | None:
        if value is None:
            return None
        value = value.strip()
        if not value:
            return None
        if set(value) != {"$"} or len(value) > 4:
            raise ValueError(f"price_level must be '$' to '$$$$', got {value!r}")
        return value


class ServiceItem(BaseModel):
    name: str
    description: str | None = None
    price: str | None = None
    model_config = ConfigDict(frozen=True)


class TeamMember(BaseModel):
    name: str
    role: str | None = None
    model_config = ConfigDict(frozen=True)


class BusinessProfile(BaseModel):
    """Input record describing one business.

    Industry is taken from the first non-empty of ``fixture_id``,
    ``category``, ``industry`` and the first research category.
    """

    name: str
    fixture_id: str | None = None
    category: str | None = None
    industry: str | None = None
    address: str | None = None
    city: str | None = None
    phone: str | None = None
    email: str | None = None
    opportunity_score: float | None = Field(default=None, ge=0, le=100)
    research: ResearchSignals = Field(default_factory=ResearchSignals)
    services: list[ServiceItem] = Field(default_factory=list)
    about: str | None = None
    team: list[TeamMember] = Field(default_factory=list)
    prospect_id: str | None = None
    model_config = ConfigDict(frozen=True)

    @property
    def industry_hint(self) -> str:
        """Raw industry text, before catalog normalization."""
        for candidate in (self.fixture_id, self.category, self.industry):
            if candidate and candidate.strip():
                return candidate
        if self.research.categories:
            return self.research.categories[0]
        return ""

    @property
    def has_contact(self) -> bool:
        return bool(self.phone or self.address or self.email)


__all__ = [
    "BusinessProfile",
    "ResearchSignals",
    "ServiceItem",
    "TeamMember",
]
