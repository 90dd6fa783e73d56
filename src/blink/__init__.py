"""
BLINK - configuration resolution and variant planning for generated
small-business websites.

Turns a sparse business record into a reproducible generation plan:
design tokens, ordered pages and sections, a route table and a
path-safe variant key.
"""

from __future__ import annotations

import re
from importlib.metadata import version as _metadata_version
from pathlib import Path as _Path

from .catalog import IndustryCatalog, default_catalog, normalize_industry
from .core import ir
from .core.errors import (
    BlinkError,
    InvalidProfileError,
    ManifestError,
    PlanAssemblyError,
    ProfileLoadError,
)
from .planner import InputResolver, SiteAssemblyPlanner, generate_site, plan_site, resolve_inputs
from .variants import (
    VariantKeyCodec,
    expand_variant_key,
    expand_variants,
    shorten_variant_key,
)


def _get_version() -> str:
    """Get version from pyproject.toml (editable) or importlib.metadata (installed)."""
    pyproject = _Path(__file__).parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        content = pyproject.read_text()
        if match := re.search(r'^version\s*=\s*["\']([^"\']+)["\']', content, re.MULTILINE):
            return match.group(1)

    try:
        return _metadata_version("blink-planner")
    except Exception:
        return "0.0.0"


__version__ = _get_version()

__all__ = [
    "__version__",
    "ir",
    # Errors
    "BlinkError",
    "InvalidProfileError",
    "ManifestError",
    "PlanAssemblyError",
    "ProfileLoadError",
    # Catalog
    "IndustryCatalog",
    "default_catalog",
    "normalize_industry",
    # Planning
    "InputResolver",
    "SiteAssemblyPlanner",
    "generate_site",
    "plan_site",
    "resolve_inputs",
    # Variants
    "VariantKeyCodec",
    "expand_variant_key",
    "expand_variants",
    "shorten_variant_key",
]
