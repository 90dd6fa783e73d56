"""
Site assembly planning.

Combines a BusinessProfile, its ResolvedConfiguration and the industry
definition into a GenerationPlan: the chosen layout, palette, the pages
with their section order, and a route table.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from blink.catalog import IndustryCatalog, default_catalog
from blink.core.errors import PlanAssemblyError
from blink.core.ir import (
    BusinessProfile,
    ConfigOverrides,
    GenerationPlan,
    IndustryDefinition,
    InputLevel,
    PageSpec,
    PlanBusiness,
    ResolvedConfiguration,
    Route,
    SelectedLayout,
)

from .resolver import InputResolver, coerce_profile

logger = logging.getLogger(__name__)

HOME_PAGE = "HomePage"

# Pages every industry of the group adds beyond the core set
INDUSTRY_PAGE_COMPONENTS: dict[str, list[str]] = {
    "healthcare": ["ProvidersPage"],
    "dental": ["ProvidersPage"],
    "pizza-restaurant": ["MenuPage"],
    "steakhouse": ["MenuPage"],
    "coffee-cafe": ["MenuPage"],
    "restaurant": ["MenuPage"],
    "bakery": ["MenuPage"],
    "salon-spa": ["TeamPage", "GalleryPage"],
    "barbershop": ["TeamPage", "GalleryPage"],
    "fitness-gym": ["ClassesPage", "MembershipPage"],
    "yoga": ["ClassesPage", "MembershipPage"],
    "real-estate": ["ListingsPage"],
    "saas": ["PricingPage", "FeaturesPage"],
    "ecommerce": ["ShopPage"],
}

ROUTE_PATHS: dict[str, str] = {
    "HomePage": "/",
    "ServicesPage": "/services",
    "AboutPage": "/about",
    "ContactPage": "/contact",
    "ProvidersPage": "/providers",
    "TeamPage": "/team",
    "MenuPage": "/menu",
    "GalleryPage": "/gallery",
    "ClassesPage": "/classes",
    "MembershipPage": "/membership",
    "ListingsPage": "/listings",
    "PricingPage": "/pricing",
    "FeaturesPage": "/features",
    "ShopPage": "/shop",
}

GENERIC_SECTIONS = ["hero", "content", "cta"]


def page_key(component: str) -> str:
    """``HomePage`` -> ``home``; the key used in layout section orders."""
    name = component.removesuffix("Page")
    return name.lower() or component.lower()


def route_path(component: str) -> str:
    """Route for a page component, derived from its name when not in the table.

    Examples:
        >>> route_path("MenuPage")
        '/menu'
        >>> route_path("EventsPage")
        '/events'
    """
    if component in ROUTE_PATHS:
        return ROUTE_PATHS[component]
    return f"/{page_key(component)}"


class SiteAssemblyPlanner:
    """Builds GenerationPlans.

    Args:
        catalog: Catalog used by ``generate`` to look up industries.
    """

    def __init__(self, catalog: IndustryCatalog | None = None):
        self.catalog = catalog or default_catalog()

    def plan(
        self,
        profile: BusinessProfile,
        resolved_config: ResolvedConfiguration,
        industry_definition: IndustryDefinition,
    ) -> GenerationPlan:
        """Assemble a plan.

        Raises:
            InvalidProfileError: If the profile has no usable name.
            PlanAssemblyError: If no pages are produced or two pages share
                a route.
        """
        profile = coerce_profile(profile)
        layout_id = industry_definition.layout_id(resolved_config.effective_layout)
        if resolved_config.effective_layout not in (None, layout_id):
            logger.debug(
                f"Layout '{resolved_config.effective_layout}' is not defined for "
                f"{industry_definition.key}, using '{layout_id}'"
            )
        layout = industry_definition.layouts[layout_id]

        components = self.page_components(profile, industry_definition.key)
        if not components:
            raise PlanAssemblyError(f"No pages planned for '{profile.name}'")

        pages = {
            component: PageSpec(
                name=page_key(component),
                component=component,
                sections=list(layout.section_order.get(page_key(component), GENERIC_SECTIONS)),
            )
            for component in components
        }
        routes = self.build_routes(components)

        colors = resolved_config.colors or industry_definition.palette(layout_id)

        return GenerationPlan(
            business=PlanBusiness(
                name=profile.name.strip(),
                city=resolved_config.city,
                phone=profile.phone,
                address=profile.address,
                email=profile.email,
                tagline=resolved_config.tagline,
            ),
            industry=industry_definition.key,
            selected_layout=SelectedLayout(
                id=layout_id,
                name=layout.name,
                description=layout.description,
                style=layout.style,
                emphasis=list(layout.emphasis),
            ),
            colors=colors,
            pages=pages,
            routes=routes,
        )

    def page_components(self, profile: BusinessProfile, industry: str) -> list[str]:
        """Ordered, de-duplicated page components for a profile."""
        components = [HOME_PAGE]
        if profile.services:
            components.append("ServicesPage")
        if profile.about or profile.team:
            components.append("AboutPage")
        if profile.has_contact:
            components.append("ContactPage")
        components.extend(INDUSTRY_PAGE_COMPONENTS.get(industry, []))
        return list(dict.fromkeys(components))

    def build_routes(self, components: list[str]) -> list[Route]:
        routes: list[Route] = []
        owners: dict[str, str] = {}
        for component in components:
            path = route_path(component)
            if path in owners:
                raise PlanAssemblyError(
                    f"Route '{path}' is claimed by both {owners[path]} and {component}"
                )
            owners[path] = component
            routes.append(Route(path=path, component=component))
        return routes

    def generate(
        self,
        profile: BusinessProfile | Mapping[str, Any],
        layout_id: str | None = None,
        level: InputLevel | str = InputLevel.MINIMAL,
    ) -> GenerationPlan:
        """Resolve and plan in one step."""
        profile = coerce_profile(profile)
        overrides = ConfigOverrides(layout=layout_id) if layout_id else None
        resolved = InputResolver(self.catalog).resolve(profile, level, overrides)
        definition = self.catalog.lookup(resolved.industry)
        return self.plan(profile, resolved, definition)


def plan_site(
    profile: BusinessProfile,
    resolved_config: ResolvedConfiguration,
    industry_definition: IndustryDefinition,
) -> GenerationPlan:
    return SiteAssemblyPlanner().plan(profile, resolved_config, industry_definition)


def generate_site(
    profile: BusinessProfile | Mapping[str, Any],
    layout_id: str | None = None,
    catalog: IndustryCatalog | None = None,
) -> GenerationPlan:
    """Plan a site straight from a profile, with an optional layout choice."""
    return SiteAssemblyPlanner(catalog).generate(profile, layout_id)


__all__ = [
    "GENERIC_SECTIONS",
    "INDUSTRY_PAGE_COMPONENTS",
    "ROUTE_PATHS",
    "SiteAssemblyPlanner",
    "generate_site",
    "page_key",
    "plan_site",
    "route_path",
]
