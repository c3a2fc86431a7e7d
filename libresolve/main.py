"""libresolve CLI - resolve library components of build projects."""

import logging
import sys
from pathlib import Path

import click
from rich.panel import Panel
from rich.table import Table

from .console import console
from .logging_setup import init_json_logging
from .models import LibraryComponentSelector
from .registry import ManifestError
from .registry import ProjectRegistry
from .registry import load_manifest
from .resolution import LibraryResolveError
from .resolution import LocalLibraryResolver
from .settings import SettingsManager
from .utils.error_format import escape_markup

logger = logging.getLogger(__name__)


def _load_registry(manifest: Path) -> ProjectRegistry:
    try:
        return load_manifest(manifest)
    except ManifestError as e:
        console.print(f"[red]Error:[/red] {escape_markup(e)}", soft_wrap=True)
        sys.exit(1)


@click.group()
@click.version_option(package_name="libresolve")
@click.pass_context
def cli(ctx: click.Context):
    """libresolve - resolve library components of build projects."""
    settings = SettingsManager()
    if log_path := settings.get_log_path():
        init_json_logging(log_path, settings.get_log_level())
    ctx.obj = settings


@cli.command()
@click.argument("project_path")
@click.option("--library", "-l", "library_name", default=None, help="Library to select (optional if only one matches)")
@click.option("--binary-type", "-t", default=None, help="Binary kind required (default from settings)")
@click.option("--variant", "-v", default=None, help="Variant value the binary must have (e.g. java8)")
@click.option(
    "--manifest",
    "-m",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Project manifest (default from settings)",
)
@click.pass_obj
def resolve(
    settings: SettingsManager,
    project_path: str,
    library_name: str | None,
    binary_type: str | None,
    variant: str | None,
    manifest: Path | None,
):
    """Resolve a library of PROJECT_PATH and its binary."""
    binary_type = binary_type or settings.get_binary_type()
    registry = _load_registry(manifest or settings.get_manifest_path())

    selector = LibraryComponentSelector(project_path=project_path, library_name=library_name, variant=variant)
    resolver = LocalLibraryResolver(registry)

    try:
        library = resolver.resolve_library(selector, binary_type)
        binary = resolver.select_binary(library, selector, binary_type)
    except LibraryResolveError as e:
        logger.info(f"Resolution failed for {selector.display_name}")
        console.print(f"[red]Error:[/red] {escape_markup(e)}", soft_wrap=True)
        sys.exit(1)

    panel_content = f"""[bold]Project:[/bold] {escape_markup(project_path)}
[bold]Library:[/bold] {escape_markup(library.name)}
[bold]Binary:[/bold] {escape_markup(binary.display_name)}"""
    console.print(Panel(panel_content, title="✓ Resolved", border_style="green"))


@cli.command("list")
@click.option(
    "--manifest",
    "-m",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Project manifest (default from settings)",
)
@click.pass_obj
def list_projects(settings: SettingsManager, manifest: Path | None):
    """List projects, their libraries and binaries."""
    registry = _load_registry(manifest or settings.get_manifest_path())
    projects = registry.list_projects()

    if not projects:
        console.print("[dim]No projects found[/dim]")
        return

    table = Table(title="Projects", show_header=True, header_style="bold cyan")
    table.add_column("Project", style="green", no_wrap=True)
    table.add_column("Library", style="yellow", no_wrap=True)
    table.add_column("Binaries", style="magenta")

    for project_path, libraries in projects:
        if not libraries:
            table.add_row(escape_markup(project_path), "[dim](none)[/dim]", "")
            continue
        for library in libraries:
            binaries = ", ".join(escape_markup(binary.display_name) for binary in library.binaries)
            table.add_row(escape_markup(project_path), escape_markup(library.name), binaries or "[dim](none)[/dim]")

    console.print(table)


def main():
    cli()


if __name__ == "__main__":
    main()
