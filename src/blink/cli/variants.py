"""
Variant CLI commands.

Commands:
- variants: Show the preset x theme matrix with short keys
- key shorten: Shorten a variant key
- key expand: Expand a short variant key
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from .utils import catalog_or_exit, echo_json, load_manifest_or_exit

key_app = typer.Typer(
    help="Shorten and expand variant keys.",
    no_args_is_help=True,
)

console = Console()


def variants_command(
    presets: list[str] | None = typer.Option(None, "--preset", help="Preset id (repeatable)"),
    themes: list[str] | None = typer.Option(None, "--theme", help="Theme id (repeatable)"),
    industry: str | None = typer.Option(
        None, "--industry", "-i", help="List preset x layout keys for an industry instead"
    ),
    count: int = typer.Option(0, "--count", "-n", help="With --industry: 1, 3, or 0 for all"),
    output_json: bool = typer.Option(False, "--json", help="Output as JSON"),
    project_dir: Path = typer.Option(".", "--project", "-p", help="Project directory"),
) -> None:
    """Show variant combinations and their short keys."""
    from blink.variants import expand_variants, select_variant_keys

    manifest = load_manifest_or_exit(project_dir)

    if industry:
        keys = select_variant_keys(industry, count, catalog_or_exit(manifest))
        rows = [(key.long_form, key.short_form) for key in keys]
        if output_json:
            echo_json([{"key": long, "short": short} for long, short in rows])
            return
        table = Table(title=f"Variants for {industry}")
        table.add_column("#", style="dim")
        table.add_column("Variant")
        table.add_column("Short key")
        for i, (long, short) in enumerate(rows, start=1):
            table.add_row(str(i), long, short)
        console.print(table)
        return

    combinations = expand_variants(
        presets or manifest.variants.presets,
        themes or manifest.variants.themes,
    )
    if output_json:
        echo_json([combination.model_dump() for combination in combinations])
        return

    table = Table(title="Variants")
    table.add_column("#", style="dim")
    table.add_column("Preset")
    table.add_column("Theme")
    table.add_column("Key")
    for combination in combinations:
        table.add_row(
            f"{combination.index}/{combination.total}",
            combination.preset,
            combination.theme,
            combination.key,
        )
    console.print(table)


@key_app.command("shorten")
def key_shorten(
    key: str = typer.Argument(..., help="Long variant key, e.g. luxury-appetizing-visual"),
) -> None:
    """Print the short form of KEY."""
    from blink.variants import shorten_variant_key

    typer.echo(shorten_variant_key(key))


@key_app.command("expand")
def key_expand(
    key: str = typer.Argument(..., help="Short variant key, e.g. lux-vis"),
) -> None:
    """Print the long form of KEY."""
    from blink.variants import expand_variant_key

    typer.echo(expand_variant_key(key))
