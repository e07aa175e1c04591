"""Pattern catalog CLI - run Gang-of-Four design pattern demos.

Commands:
- list: Show the demos in the catalog
- run: Run one demo by name
- run-all: Run every demo, optionally limited to one category
"""

import typer
from rich.console import Console
from rich.table import Table

from pattern_catalog.exceptions import DemoNotFoundError
from pattern_catalog.logging_setup import configure_logging
from pattern_catalog.narrator import default_narrator
from pattern_catalog.registry import default_registry
from pattern_catalog.runner import DemoRunner
from pattern_catalog.settings import get_settings
from pattern_catalog.types import PatternCategory

app = typer.Typer(
    name="pattern-catalog",
    help="Runnable catalog of Gang-of-Four design pattern demos",
    no_args_is_help=True,
)
console = Console()

_CATEGORY_STYLES = {
    PatternCategory.BEHAVIORAL: "cyan",
    PatternCategory.CREATIONAL: "green",
    PatternCategory.STRUCTURAL: "yellow",
}


def _parse_category(category: str | None) -> PatternCategory | None:
    """Turn a --category value into an enum, exiting on bad input."""
    if category is None:
        return None
    try:
        return PatternCategory(category.lower())
    except ValueError:
        valid = ", ".join(c.value for c in PatternCategory)
        console.print(f"[red]Invalid category '{category}'. Valid: {valid}[/red]")
        raise typer.Exit(1)


@app.callback()
def configure(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Configure logging before any command runs."""
    configure_logging("DEBUG" if verbose else get_settings().log_level)


@app.command("list")
def list_demos(
    category: str = typer.Option(
        None, "--category", "-c", help="Filter by category (behavioral, creational, structural)"
    ),
) -> None:
    """List the demos in the catalog."""
    category_filter = _parse_category(category)
    definitions = default_registry().get_definitions(category_filter)

    table = Table(title="Design Pattern Demos")
    table.add_column("Name", style="bold", no_wrap=True)
    table.add_column("Category", no_wrap=True)
    table.add_column("Summary", style="dim")

    for d in definitions:
        style = _CATEGORY_STYLES.get(d.category, "white")
        table.add_row(d.name, f"[{style}]{d.category.value}[/{style}]", d.summary)

    console.print(table)


@app.command("run")
def run_demo(
    name: str = typer.Argument(..., help="Demo name, as shown by 'list'"),
) -> None:
    """Run one demo."""
    try:
        definition = default_registry().get(name)
    except DemoNotFoundError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    DemoRunner(default_narrator()).run(definition)


@app.command("run-all")
def run_all(
    category: str = typer.Option(
        None, "--category", "-c", help="Only run demos in this category"
    ),
) -> None:
    """Run every demo in catalog order."""
    category_filter = _parse_category(category)
    definitions = default_registry().get_definitions(category_filter)

    count = DemoRunner(default_narrator()).run_all(definitions)
    console.print(f"[green]Ran {count} demos.[/green]")


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
