"""Shared pytest fixtures for BLINK tests."""

from pathlib import Path

import pytest

from blink.catalog import IndustryCatalog, default_catalog
from blink.core import ir


@pytest.fixture
def catalog() -> IndustryCatalog:
    """Return the bundled industry catalog."""
    return default_catalog()


@pytest.fixture
def bakery_profile() -> ir.BusinessProfile:
    """A bakery with no research data."""
    return ir.BusinessProfile(name="Sunrise Bakery", category="bakery")


@pytest.fixture
def barbershop_profile() -> ir.BusinessProfile:
    """A well-reviewed high-end barbershop with full contact details."""
    return ir.BusinessProfile(
        name="Fade Masters",
        fixture_id="barbershop",
        address="42 Elm St, Austin, TX 78701",
        phone="512-555-0100",
        opportunity_score=82,
        research=ir.ResearchSignals(rating=4.8, review_count=212, price_level="$$$$"),
        services=[ir.ServiceItem(name="Haircut", price="$40")],
        about="Family-run since 1998.",
    )


@pytest.fixture
def bare_profile() -> ir.BusinessProfile:
    """A profile with nothing but a name and an industry hint."""
    return ir.BusinessProfile(name="Mystery Co", industry="underwater basket weaving")


@pytest.fixture
def profile_yaml(tmp_path: Path) -> Path:
    """Write a YAML profile file and return its path."""
    path = tmp_path / "profile.yaml"
    path.write_text(
        """
businessName: Tony's Pizzeria
category: pizza
address: 9 Main St, Springfield, IL 62701
phone: 217-555-0199
opportunityScore: 60
rating: 4.6
reviewCount: 88
priceLevel: $$
services:
  - name: Large pie
    price: $18
"""
    )
    return path
