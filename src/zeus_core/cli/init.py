"""CLI command: zeus-core init — create the project config."""

from __future__ import annotations

import sys

import click
from rich.console import Console

from zeus_core.config import ZeusConfig

console = Console(stderr=True)


@click.command()
@click.option(
    "--root",
    "-r",
    type=click.Path(exists=True, file_okay=False),
    default=None,
    help="Project root directory.",
)
def init(root: str | None) -> None:
    """Initialize zeus-core in a backend project."""
    config = ZeusConfig.load(root_dir=root or ".")
    try:
        path = config.save()
    except OSError as e:
        console.print(f"[red]Init failed:[/red] {e}")
        sys.exit(1)

    console.print(f"[bold]zeus-core[/bold] initialized in [cyan]{config.root_dir}[/cyan]")
    console.print(f"  Config written to [cyan]{path}[/cyan]")
