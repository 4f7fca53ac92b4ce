"""CLI command: zeus-core serve — republish the last snapshot over HTTP."""

from __future__ import annotations

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
@click.option(
    "--port",
    "-p",
    type=int,
    default=None,
    help="Port to listen on (default: 4173).",
)
def serve(root: str | None, port: int | None) -> None:
    """Serve the generated output.json."""
    try:
        import uvicorn
    except ImportError:
        console.print(
            "[red]Web dependencies not installed.[/red]\n"
            "Install with: pip install zeus-core[web]"
        )
        raise SystemExit(1)

    from zeus_core.web.app import create_app

    config = ZeusConfig.load(root_dir=root, serve_port=port)

    console.print(f"[bold]zeus-core[/bold] serving [cyan]{config.output_path}[/cyan]")
    console.print(
        f"  [cyan]http://{config.serve_host}:{config.serve_port}/output.json[/cyan]\n"
    )

    uvicorn.run(
        create_app(config),
        host=config.serve_host,
        port=config.serve_port,
        log_level="info",
    )
