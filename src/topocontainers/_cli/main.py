import logging
from pathlib import Path
from typing import Annotated, Any

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from topocontainers._format import format_sequence
from topocontainers._graph import CycleError
from topocontainers._io import DocumentError, export_result_to_toml, load_sort_document
from topocontainers._models import SortDocument

from .config import ConfigError, TopoConfig, get_config
from .demo import run_demo

app = typer.Typer()

logger = logging.getLogger(__name__)
# Console for stderr (info/errors)
err_console = Console(stderr=True)
# Console for stdout (results)
out_console = Console()


@app.callback()
def callback(
    *,
    verbose: bool = typer.Option(default=False, help="Enable verbose output"),
) -> None:
    """Sort containers by declared precedence constraints."""
    log_level = logging.DEBUG if verbose else logging.INFO

    # Configure rich logging handler to output to stderr
    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        handlers=[
            RichHandler(
                console=err_console,
                show_time=False,
                show_path=verbose,
                rich_tracebacks=True,
            ),
        ],
    )


def _load_config() -> TopoConfig:
    try:
        return get_config()
    except ConfigError as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e


def _load_document(document: Path | None, config: TopoConfig) -> SortDocument:
    if document is None:
        document = config.input
    if document is None:
        err_console.print(
            f"[red]Error: No sort document given and no {escape('[tool.topocontainers]')}.input configured[/red]",
        )
        raise typer.Exit(code=1)

    err_console.print(f"[cyan]Loading sort document from:[/cyan] {document}")
    try:
        return load_sort_document(document)
    except (DocumentError, OSError) as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e


@app.command()
def sort(
    document: Annotated[
        Path | None,
        typer.Argument(help="Path to the sort document (TOML)"),
    ] = None,
    *,
    output: Annotated[
        Path | None,
        typer.Option("-o", "--output", help="Path to output TOML file"),
    ] = None,
    strict: Annotated[
        bool | None,
        typer.Option("--strict/--no-strict", help="Fail instead of tolerating cyclic constraints"),
    ] = None,
) -> None:
    """Sort the container of a document by its precedence edges."""
    config = _load_config()
    if output is None:
        output = config.output
    if strict is None:
        strict = config.strict

    err_console.print()
    doc = _load_document(document, config)
    adapter = doc.build()

    err_console.print(f"[cyan]Container:[/cyan] [bold]{doc.kind}[/bold] ({len(adapter)} elements)")
    err_console.print(f"[cyan]Edges:[/cyan] {len(doc.edges)}")
    err_console.print()

    try:
        result: Any = adapter.sort(strict=strict)
    except CycleError as e:
        err_console.print(f"[red]✗ {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e

    out_console.print(escape(format_sequence(result)))

    if output is not None:
        err_console.print()
        err_console.print(f"[cyan]Exporting result to:[/cyan] {output}")
        export_result_to_toml(doc.kind, result, output)

    err_console.print()
    err_console.print("[green]✓ Sort complete[/green]")
    err_console.print()


@app.command()
def check(
    document: Annotated[
        Path | None,
        typer.Argument(help="Path to the sort document (TOML)"),
    ] = None,
) -> None:
    """Check the precedence edges of a document for cycles."""
    config = _load_config()

    err_console.print()
    doc = _load_document(document, config)
    graph = doc.build().graph
    err_console.print()

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Container", style="bold")
    table.add_column("Vertices", justify="right", style="yellow")
    table.add_column("Edges", justify="right", style="green")
    table.add_row(str(doc.kind), str(len(graph)), str(len(doc.edges)))
    err_console.print(Panel(table, title="[bold]Precedence graph[/bold]", border_style="cyan"))
    err_console.print()

    cycle = graph.find_cycle()
    if cycle is not None:
        path = " -> ".join(str(key) for key in cycle)
        err_console.print(f"[red]✗ Cycle detected:[/red] {escape(path)}")
        err_console.print()
        raise typer.Exit(code=1)

    err_console.print("[green]✓ Precedence graph is acyclic[/green]")
    err_console.print()


@app.command()
def demo() -> None:
    """Run the built-in demonstration scenarios."""
    table = Table(show_header=True, header_style="bold cyan", box=None)
    table.add_column("Scenario", style="dim")
    table.add_column("Result")

    for title, rendered in run_demo():
        table.add_row(escape(title), escape(rendered))

    out_console.print(Panel(table, title="[bold]Topological sorting[/bold]", border_style="cyan"))


def main() -> None:
    app()
