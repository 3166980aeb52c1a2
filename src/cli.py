"""CLI interface for folio."""

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from folio.config import load_config, merge_cli_overrides
from folio.content.registry import ContentRegistry, default_registry, load_registry
from folio.errors import ConfigError, ContentValidationError, FolioError
from folio.render.components import date_range
from folio.render.publishers import OutputFormat
from folio.site.build import build_site, registry_from_config

app = typer.Typer(
    name="folio",
    help="Render typed portfolio and blog content into a static site.",
)

console = Console()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        from folio import __version__

        console.print(f"folio {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-v",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = False,
) -> None:
    """folio - portfolio and blog site builder."""
    pass


def _report_error(exc: FolioError) -> None:
    if isinstance(exc, ConfigError):
        console.print("[red]Error:[/red] Invalid configuration")
    else:
        console.print(f"[red]Error:[/red] {exc}")
    if isinstance(exc, (ConfigError, ContentValidationError)):
        for location, message in exc.errors:
            console.print(f"  - [bold]{location}[/bold]: {message}")


@app.command()
def build(
    content: Annotated[
        Optional[Path],
        typer.Option("--content", "-c", help="TOML content file. Defaults to built-in content."),
    ] = None,
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Output directory. Defaults to ./site/"),
    ] = None,
    output_format: Annotated[
        Optional[OutputFormat],
        typer.Option("--format", "-f", help="Output format."),
    ] = None,
    locale: Annotated[
        Optional[str],
        typer.Option("--locale", "-l", help="Profile variant to render (e.g. en, zh)."),
    ] = None,
    config_path: Annotated[
        Optional[Path],
        typer.Option("--config", help="Path to a .folio.toml config file."),
    ] = None,
) -> None:
    """Render every page and write the site to disk."""
    try:
        config = merge_cli_overrides(
            load_config(config_path),
            output_directory=output,
            output_format=output_format,
            locale=locale,
            content_path=content,
        )
        registry = registry_from_config(config)
        result = build_site(registry, config)
    except FolioError as exc:
        _report_error(exc)
        raise typer.Exit(1) from exc

    console.print(
        f"[green]Built {result.pages} page(s)[/green] into {result.output_dir} "
        f"({config.output.format})"
    )
    for path in result.written:
        console.print(f"  - {path}")


@app.command()
def validate(
    path: Annotated[
        Path,
        typer.Argument(help="TOML content file to check."),
    ],
) -> None:
    """Check a content file against the entity models."""
    try:
        registry = load_registry(path)
    except FolioError as exc:
        _report_error(exc)
        raise typer.Exit(1) from exc

    console.print(
        f"[green]OK[/green] {path}: {len(registry.profiles)} profile(s), "
        f"{len(registry.projects)} project(s), {len(registry.publications)} publication(s)"
    )


@app.command()
def show(
    kind: Annotated[
        str,
        typer.Option("--kind", "-k", help="What to list: projects or publications."),
    ] = "projects",
    content: Annotated[
        Optional[Path],
        typer.Option("--content", "-c", help="TOML content file. Defaults to built-in content."),
    ] = None,
) -> None:
    """List registry entries, newest first."""
    if kind not in ("projects", "publications"):
        console.print(f"[red]Error:[/red] Unsupported kind: {kind}")
        console.print("Use 'projects' or 'publications'.")
        raise typer.Exit(1)

    try:
        registry: ContentRegistry = load_registry(content) if content else default_registry()
    except FolioError as exc:
        _report_error(exc)
        raise typer.Exit(1) from exc

    if kind == "projects":
        table = Table(title="Projects")
        table.add_column("Name")
        table.add_column("Dates")
        table.add_column("Tags")
        for project in registry.projects_sorted():
            dates = date_range(project.start_date, project.end_date).text
            tags = ", ".join(t.name for t in project.tags or ())
            table.add_row(project.name, dates, tags)
    else:
        table = Table(title="Publications")
        table.add_column("Title")
        table.add_column("Publisher")
        table.add_column("Date")
        for pub in registry.publications_sorted():
            table.add_row(pub.title, pub.publisher.value, pub.date)

    console.print(table)
