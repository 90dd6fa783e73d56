"""
BLINK CLI application.

Registers all commands from the modular CLI modules in blink/cli/.
"""

from __future__ import annotations

import sys

import typer

from .plan import industries_command, normalize_command, plan_command, resolve_command
from .utils import configure_logging, version_callback
from .variants import key_app, variants_command

app = typer.Typer(
    help="""
BLINK - plan generated small-business websites.

Resolve business profiles into design configurations, assemble page and
route plans, and manage path-safe variant keys.
""",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """BLINK CLI main callback for global options."""
    if verbose:
        configure_logging("DEBUG")


# =============================================================================
# Planning Commands
# =============================================================================
app.command(name="normalize")(normalize_command)
app.command(name="industries")(industries_command)
app.command(name="resolve")(resolve_command)
app.command(name="plan")(plan_command)


# =============================================================================
# Variant Commands
# =============================================================================
app.command(name="variants")(variants_command)
app.add_typer(key_app, name="key")


# =============================================================================
# Main Entry Point
# =============================================================================


def main(argv: list[str] | None = None) -> None:
    app(args=argv, standalone_mode=True)


if __name__ == "__main__":
    main(sys.argv[1:])
