"""
Configuration resolution and site assembly planning.

Turns business profiles into ResolvedConfigurations (resolver), derives
mood-driven design tokens (mood), and assembles GenerationPlans
(assembly).
"""

from .assembly import SiteAssemblyPlanner, generate_site, plan_site, route_path
from .content import extract_city, generate_tagline
from .mood import (
    derive_colors,
    derive_mood_sliders,
    derive_section_spacing,
    derive_typography,
    interpret_mood,
    mood_sliders_for_preset,
)
from .resolver import (
    InputResolver,
    derive_archetype,
    derive_preset,
    derive_theme,
    derive_tier,
    resolve_all_levels,
    resolve_inputs,
)

__all__ = [
    # Assembly
    "SiteAssemblyPlanner",
    "generate_site",
    "plan_site",
    "route_path",
    # Content
    "extract_city",
    "generate_tagline",
    # Mood
    "derive_colors",
    "derive_mood_sliders",
    "derive_section_spacing",
    "derive_typography",
    "interpret_mood",
    "mood_sliders_for_preset",
    # Resolution
    "InputResolver",
    "derive_archetype",
    "derive_preset",
    "derive_theme",
    "derive_tier",
    "resolve_all_levels",
    "resolve_inputs",
]
