"""
BLINK CLI Utilities.

Shared helpers used across CLI modules.
"""

from __future__ import annotations

import json
import logging
import platform
from pathlib import Path
from typing import Any

import typer
from pydantic import BaseModel

from blink.catalog import IndustryCatalog, default_catalog
from blink.core.errors import BlinkError
from blink.core.ir import BusinessProfile
from blink.core.manifest import BlinkManifest, load_project_manifest
from blink.core.profile_loader import dump_model, load_profile

__version__ = "0.3.0"

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def get_version() -> str:
    """Get BLINK version from package metadata."""
    try:
        from importlib.metadata import version

        return version("blink-planner")
    except Exception:
        return __version__


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"blink {get_version()}")
        typer.echo(f"Python {platform.python_version()} ({platform.python_implementation()})")
        raise typer.Exit()


def configure_logging(level: str) -> None:
    logging.basicConfig(level=getattr(logging, level.upper(), logging.WARNING), format=LOG_FORMAT)
    logging.getLogger("blink").setLevel(level.upper())


def load_manifest_or_exit(project_dir: Path) -> BlinkManifest:
    """Load blink.toml (or defaults) and configure logging from it."""
    try:
        manifest = load_project_manifest(project_dir.resolve())
    except BlinkError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    # --verbose has already set a level
    if logging.getLogger("blink").level == logging.NOTSET:
        configure_logging(manifest.log_level)
    return manifest


def catalog_or_exit(manifest: BlinkManifest) -> IndustryCatalog:
    """Bundled catalog with the manifest's fallback industry."""
    default_industry = manifest.planner.default_industry
    try:
        return default_catalog().with_default(default_industry)
    except ValueError:
        typer.echo(
            f"Error: planner.default_industry '{default_industry}' is not a catalog industry",
            err=True,
        )
        raise typer.Exit(1)


def load_profile_or_exit(path: Path) -> BusinessProfile:
    try:
        return load_profile(path)
    except BlinkError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


def echo_json(data: BaseModel | dict[str, Any] | list[Any]) -> None:
    if isinstance(data, BaseModel):
        data = dump_model(data)
    typer.echo(json.dumps(data, indent=2))
