"""httpadapter CLI main entry point."""

import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console

from .. import __version__
from ..config import ConfigManager
from ..exceptions import HttpAdapterError
from ..logging import configure_logging
from .commands import config, fetch

console = Console(stderr=True)


@click.group()
@click.version_option(version=__version__, prog_name="httpadapter")
@click.option(
    "--config",
    "config_file",
    type=click.Path(path_type=Path),
    help="Configuration file (default: ~/.config/httpadapter/config.toml)",
)
@click.option("-v", "--verbose", is_flag=True, help="Log every hop at DEBUG level")
@click.pass_context
def cli(ctx: click.Context, config_file: Optional[Path], verbose: bool) -> None:
    """HTTP client with pluggable transports and redirect following."""
    ctx.ensure_object(dict)
    manager = ConfigManager(config_file)
    ctx.obj["config_manager"] = manager

    try:
        logging_config = manager.logging_config()
    except HttpAdapterError as e:
        console.print(f"[red]Error:[/red] {e.message}", soft_wrap=True)
        ctx.exit(1)

    if verbose:
        logging_config.level = logging.DEBUG
    configure_logging(logging_config)


cli.add_command(fetch)
cli.add_command(config)


def main() -> None:
    """Console script entry point."""
    try:
        cli(obj={})
    except HttpAdapterError as e:
        console.print(f"[red]Error:[/red] {e.message}", soft_wrap=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
