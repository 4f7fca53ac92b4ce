"""CLI entry point — Click group with global options."""

from __future__ import annotations

import logging

import click

from zeus_core import __version__


@click.group()
@click.version_option(version=__version__, prog_name="zeus-core")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
def main(verbose: bool) -> None:
    """zeus-core — extract documented HTTP endpoints from a backend project."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def _register_commands() -> None:
    from zeus_core.cli.generate import generate  # noqa: F811
    from zeus_core.cli.init import init  # noqa: F811
    from zeus_core.cli.serve import serve  # noqa: F811

    main.add_command(init)
    main.add_command(generate)
    main.add_command(serve)


_register_commands()
