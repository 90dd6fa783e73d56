"""
BLINK Intermediate Representation (IR) types.

All types are frozen pydantic models, re-exported here so callers can
write ``from blink.core import ir`` and ``ir.BusinessProfile``.
"""

# Business input
from .business import (
    BusinessProfile,
    ResearchSignals,
    ServiceItem,
    TeamMember,
)

# Industry catalog
from .catalog import (
    IndustryDefinition,
    LayoutStyle,
    LayoutSummary,
    LayoutVariant,
    Palette,
)

# Resolved configuration
from .configuration import (
    AUTO,
    MIN_PAGES,
    CardStyle,
    ConfigOverrides,
    DesignChoice,
    GeneratedContent,
    InputLevel,
    MoodInterpretation,
    MoodSliders,
    PageTier,
    ResolvedChoices,
    ResolvedConfiguration,
    Theme,
    Typography,
)

# Plans and variants
from .plan import (
    GenerationPlan,
    PageSpec,
    PlanBusiness,
    Route,
    SelectedLayout,
    VariantCombination,
    VariantKey,
)

__all__ = [
    # Business input
    "BusinessProfile",
    "ResearchSignals",
    "ServiceItem",
    "TeamMember",
    # Industry catalog
    "IndustryDefinition",
    "LayoutStyle",
    "LayoutSummary",
    "LayoutVariant",
    "Palette",
    # Resolved configuration
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
    # Plans and variants
    "GenerationPlan",
    "PageSpec",
    "PlanBusiness",
    "Route",
    "SelectedLayout",
    "VariantCombination",
    "VariantKey",
]
