"""
Industry catalog.

Static industry/layout definitions and the registry that normalizes
free-text industry names onto them.
"""

from .aliases import INDUSTRY_ALIASES
from .industries import DEFAULT_INDUSTRY, INDUSTRY_DEFINITIONS
from .registry import IndustryCatalog, default_catalog, normalize_industry, slugify_industry

__all__ = [
    "DEFAULT_INDUSTRY",
    "INDUSTRY_ALIASES",
    "INDUSTRY_DEFINITIONS",
    "IndustryCatalog",
    "default_catalog",
    "normalize_industry",
    "slugify_industry",
]
