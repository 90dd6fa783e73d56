"""
Planning CLI commands.

Commands:
- normalize: Map free-text industry to a catalog key
- industries: List catalog industries and their layouts
- resolve: Resolve a profile file into a configuration
- plan: Build a generation plan for a profile file
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from .utils import catalog_or_exit, echo_json, load_manifest_or_exit, load_profile_or_exit

console = Console()


def normalize_command(
    text: str = typer.Argument(..., help="Free-text industry, e.g. 'Joe's Pizzeria'"),
    project_dir: Path = typer.Option(".", "--project", "-p", help="Project directory"),
) -> None:
    """Print the catalog industry key for TEXT."""
    catalog = catalog_or_exit(load_manifest_or_exit(project_dir))
    typer.echo(catalog.normalize(text))


def industries_command(
    industry: str | None = typer.Argument(None, help="Show layouts for one industry"),
    project_dir: Path = typer.Option(".", "--project", "-p", help="Project directory"),
) -> None:
    """List catalog industries, or the layouts of one industry."""
    catalog = catalog_or_exit(load_manifest_or_exit(project_dir))

    if industry:
        key = catalog.normalize(industry)
        table = Table(title=f"Layouts for {key}")
        table.add_column("Layout")
        table.add_column("Name")
        table.add_column("Description")
        for summary in catalog.available_layouts(key):
            marker = " [green](default)[/green]" if summary.is_default else ""
            table.add_row(summary.id + marker, summary.name, summary.description)
        console.print(table)
        return

    table = Table(title="Industries")
    table.add_column("Industry")
    table.add_column("Default layout")
    table.add_column("Aliases", style="dim")
    for key in catalog.keys():
        table.add_row(key, catalog.recommended_layout(key), ", ".join(catalog.aliases_for(key)))
    console.print(table)
    console.print(f"\n[dim]{len(catalog)} industries[/dim]")


def resolve_command(
    profile_path: Path = typer.Argument(..., help="Profile file (.yaml, .yml or .json)"),
    level: str | None = typer.Option(
        None, "--level", "-l", help="Input level: minimal, moderate or extreme"
    ),
    project_dir: Path = typer.Option(".", "--project", "-p", help="Project directory"),
) -> None:
    """Resolve a business profile into a configuration (JSON)."""
    from blink.core.errors import BlinkError
    from blink.planner import InputResolver

    manifest = load_manifest_or_exit(project_dir)
    profile = load_profile_or_exit(profile_path)
    catalog = catalog_or_exit(manifest)

    resolver = InputResolver(catalog, tagline_seed=manifest.planner.tagline_seed)
    try:
        resolved = resolver.resolve(profile, level or manifest.planner.default_level)
    except BlinkError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    echo_json(resolved)


def plan_command(
    profile_path: Path = typer.Argument(..., help="Profile file (.yaml, .yml or .json)"),
    layout: str | None = typer.Option(None, "--layout", help="Layout id for the industry"),
    level: str | None = typer.Option(
        None, "--level", "-l", help="Input level: minimal, moderate or extreme"
    ),
    summary: bool = typer.Option(False, "--summary", help="Show a table instead of JSON"),
    project_dir: Path = typer.Option(".", "--project", "-p", help="Project directory"),
) -> None:
    """Build a generation plan for a business profile."""
    from blink.core.errors import BlinkError
    from blink.core.ir import ConfigOverrides
    from blink.planner import InputResolver, SiteAssemblyPlanner

    manifest = load_manifest_or_exit(project_dir)
    profile = load_profile_or_exit(profile_path)
    catalog = catalog_or_exit(manifest)

    resolver = InputResolver(catalog, tagline_seed=manifest.planner.tagline_seed)
    overrides = ConfigOverrides(layout=layout) if layout else None
    try:
        resolved = resolver.resolve(profile, level or manifest.planner.default_level, overrides)
        plan = SiteAssemblyPlanner(catalog).plan(
            profile, resolved, catalog.lookup(resolved.industry)
        )
    except BlinkError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    if not summary:
        echo_json(plan)
        return

    console.print(f"[bold]{plan.business.name}[/bold] ({plan.industry})")
    console.print(f"Layout: {plan.selected_layout.id} - {plan.selected_layout.description}")
    console.print(
        f"Colors: {plan.colors.primary} / {plan.colors.secondary} / {plan.colors.accent}"
    )
    table = Table(title="Pages")
    table.add_column("Route")
    table.add_column("Component")
    table.add_column("Sections", style="dim")
    for route in plan.routes:
        page = plan.pages[route.component]
        table.add_row(route.path, route.component, ", ".join(page.sections))
    console.print(table)
