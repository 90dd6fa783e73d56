"""Tests for assembling generation plans."""

import pytest

from blink.core.errors import PlanAssemblyError
from blink.core.ir import BusinessProfile, ConfigOverrides, InputLevel, Palette, TeamMember
from blink.planner import SiteAssemblyPlanner, generate_site, plan_site, resolve_inputs
from blink.planner.assembly import GENERIC_SECTIONS, page_key, route_path


class TestPageComponents:
    """Tests for which pages a profile gets."""

    def test_bare_profile(self, bare_profile):
        plan = generate_site(bare_profile)

        assert plan.industry == "healthcare"
        assert list(plan.pages) == ["HomePage", "ProvidersPage"]
        assert [r.path for r in plan.routes] == ["/", "/providers"]

    def test_full_profile(self, barbershop_profile):
        plan = generate_site(barbershop_profile)

        assert list(plan.pages) == [
            "HomePage",
            "ServicesPage",
            "AboutPage",
            "ContactPage",
            "TeamPage",
            "GalleryPage",
        ]
        assert len(plan.routes) == len(plan.pages)

    def test_team_alone_adds_about(self):
        profile = BusinessProfile(
            name="Law & Order LLP",
            category="lawyer",
            team=[TeamMember(name="J. Doe", role="Partner")],
        )
        plan = generate_site(profile)
        assert list(plan.pages) == ["HomePage", "AboutPage"]

    def test_industry_pages_are_not_duplicated(self, catalog):
        planner = SiteAssemblyPlanner(catalog)
        profile = BusinessProfile(name="Slice", category="pizza", email="hi@slice.test")
        assert planner.page_components(profile, "pizza-restaurant") == [
            "HomePage",
            "ContactPage",
            "MenuPage",
        ]


class TestSectionsAndLayout:
    def test_home_sections_follow_layout(self, bare_profile, catalog):
        plan = generate_site(bare_profile)

        expected = catalog.get_layout("healthcare", "patient-focused").section_order["home"]
        assert plan.pages["HomePage"].sections == expected
        assert plan.pages["HomePage"].name == "home"

    def test_pages_without_section_order_are_generic(self, bare_profile):
        plan = generate_site(bare_profile)
        assert plan.pages["ProvidersPage"].sections == GENERIC_SECTIONS

    def test_explicit_layout(self, barbershop_profile):
        plan = generate_site(barbershop_profile, "quick-cuts")

        assert plan.selected_layout.id == "quick-cuts"
        assert plan.selected_layout.name == "Quick Cuts"
        assert plan.selected_layout.style.spacing == "compact"
        assert plan.colors.primary == "#18181B"

    def test_unknown_layout_falls_back_to_default(self, barbershop_profile):
        plan = generate_site(barbershop_profile, "no-such-layout")
        assert plan.selected_layout.id == "classic-heritage"

    def test_resolved_colors_win(self, barbershop_profile, catalog):
        config = resolve_inputs(barbershop_profile, InputLevel.EXTREME)
        plan = plan_site(barbershop_profile, config, catalog.lookup("barbershop"))
        assert plan.colors.primary == "#0F172A"

    def test_override_colors(self, bakery_profile, catalog):
        palette = Palette(primary="#010101", secondary="#020202", accent="#030303")
        config = resolve_inputs(bakery_profile, "minimal", ConfigOverrides(colors=palette))
        plan = plan_site(bakery_profile, config, catalog.lookup("bakery"))
        assert plan.colors == palette


class TestBusinessBlock:
    def test_business_fields(self, profile_yaml, catalog):
        from blink.core.profile_loader import load_profile

        profile = load_profile(profile_yaml)
        config = resolve_inputs(profile)
        plan = SiteAssemblyPlanner(catalog).plan(profile, config, catalog.lookup(config.industry))

        assert plan.business.name == "Tony's Pizzeria"
        assert plan.business.city == "Springfield"
        assert plan.business.phone == "217-555-0199"
        assert plan.business.tagline == config.tagline
        assert plan.route_for("MenuPage").path == "/menu"
        assert plan.route_for("ShopPage") is None


class TestInvariants:
    """Plans never have empty page sets or clashing routes."""

    def test_duplicate_routes_rejected(self):
        with pytest.raises(PlanAssemblyError, match="/menu"):
            SiteAssemblyPlanner().build_routes(["HomePage", "MenuPage", "MenuPage"])

    def test_empty_page_set_rejected(self, bakery_profile, catalog):
        class NoPagesPlanner(SiteAssemblyPlanner):
            def page_components(self, profile, industry):
                return []

        config = resolve_inputs(bakery_profile, "minimal")
        with pytest.raises(PlanAssemblyError, match="No pages"):
            NoPagesPlanner(catalog).plan(bakery_profile, config, catalog.lookup("bakery"))

    def test_generate_rejects_blank_name(self):
        from blink.core.errors import InvalidProfileError

        with pytest.raises(InvalidProfileError):
            generate_site({"name": ""})

    def test_plan_rejects_blank_name(self, bakery_profile, catalog):
        """Test plan_site checks the profile even when handed a resolved config."""
        from blink.core.errors import InvalidProfileError

        config = resolve_inputs(bakery_profile, "minimal")
        with pytest.raises(InvalidProfileError, match="no name"):
            plan_site(BusinessProfile(name="  "), config, catalog.lookup("bakery"))


class TestRouteHelpers:
    @pytest.mark.parametrize(
        "component,path",
        [("HomePage", "/"), ("MenuPage", "/menu"), ("EventsPage", "/events")],
    )
    def test_route_path(self, component, path):
        assert route_path(component) == path

    def test_page_key(self):
        assert page_key("HomePage") == "home"
        assert page_key("ProvidersPage") == "providers"
