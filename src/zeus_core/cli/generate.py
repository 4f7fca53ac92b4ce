"""CLI command: zeus-core generate — scan and write the snapshot."""

from __future__ import annotations

import sys

import click
from rich.console import Console
from rich.table import Table

from zeus_core.config import ZeusConfig
from zeus_core.scanner.engine import ScanEngine
from zeus_core.scanner.models import ScanResult
from zeus_core.snapshot import persist

console = Console(stderr=True)


@click.command()
@click.option(
    "--root",
    "-r",
    type=click.Path(exists=True, file_okay=False),
    default=None,
    help="Project root directory.",
)
@click.option(
    "--incremental/--no-incremental",
    default=None,
    help="Compare against the previous snapshot (default from config).",
)
@click.option("--table", "show_table", is_flag=True, help="Print found endpoints.")
def generate(root: str | None, incremental: bool | None, show_table: bool) -> None:
    """Generate .zeus-core/output.json from a backend project."""
    config = ZeusConfig.load(root_dir=root, incremental=incremental)

    console.print(f"[bold]zeus-core[/bold] scanning [cyan]{config.root_dir}[/cyan]")

    try:
        result = ScanEngine().scan(config.root_dir)
        written = persist(
            result,
            config.root_dir,
            incremental=config.incremental,
            output_file=config.output_file,
        )
    except OSError as e:
        console.print(f"[red]Generate failed:[/red] {e}")
        sys.exit(1)

    if show_table and result.endpoints:
        _print_table(result)

    console.print(
        f"Generated {written.endpoints_written} endpoints "
        f"(unchanged: {written.endpoints_unchanged})"
    )
    console.print(f"Output written to [cyan]{written.output_path}[/cyan]")

    if result.warnings:
        console.print(f"[yellow]Warnings: {len(result.warnings)}[/yellow]")
        for warning in result.warnings:
            console.print(f"  - {warning}")


def _print_table(result: ScanResult) -> None:
    table = Table(title="Endpoints", show_lines=False)
    table.add_column("Method", style="bold", width=8)
    table.add_column("Path", style="cyan")
    table.add_column("Framework")
    table.add_column("File")
    table.add_column("Line", justify="right")

    for endpoint in result.endpoints:
        table.add_row(
            endpoint.method.value,
            endpoint.path,
            endpoint.framework,
            _shorten_path(endpoint.source_file, result.root_dir),
            str(endpoint.line or ""),
        )

    console.print(table)


def _shorten_path(file_path: str, base_dir: str) -> str:
    """Shorten file path relative to scan directory."""
    if file_path.startswith(base_dir):
        return file_path[len(base_dir) :].lstrip("/")
    return file_path
