"""Core BLINK functionality: IR types, errors, project manifest, profile loading."""

from . import ir
from .errors import (
    BlinkError,
    ErrorContext,
    InvalidProfileError,
    ManifestError,
    PlanAssemblyError,
    ProfileLoadError,
)
from .manifest import BlinkManifest, load_manifest, load_project_manifest
from .profile_loader import dump_model, load_profile, parse_profile

__all__ = [
    "ir",
    # Errors
    "BlinkError",
    "ErrorContext",
    "InvalidProfileError",
    "ManifestError",
    "PlanAssemblyError",
    "ProfileLoadError",
    # Manifest
    "BlinkManifest",
    "load_manifest",
    "load_project_manifest",
    # Profiles
    "dump_model",
    "load_profile",
    "parse_profile",
]
