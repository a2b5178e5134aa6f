"""Configuration command."""

import click
from rich.console import Console
from rich.table import Table

from ...exceptions import ConfigurationError

console = Console()


@click.command()
@click.option("--show", is_flag=True, help="Show current configuration")
@click.option("--init", "init_file", is_flag=True, help="Write the current configuration to the config file")
@click.pass_context
def config(ctx: click.Context, show: bool, init_file: bool) -> None:
    """Show or write the configuration.

    \b
    Examples:
        httpadapter config --show
        httpadapter --config ./httpadapter.toml config --init
    """
    manager = ctx.obj["config_manager"]

    try:
        current = manager.load_config()
        if init_file:
            path = manager.save_config(current)
            console.print(f"[green]✓ Configuration written to {path}[/green]")
    except (ConfigurationError, OSError) as e:
        console.print(f"[red]✗ {e}[/red]")
        ctx.exit(1)

    if show or not init_file:
        table = Table(title=f"Configuration ({manager.config_file})")
        table.add_column("Setting")
        table.add_column("Value")
        for section, values in current.model_dump(mode="json").items():
            for key, value in values.items():
                table.add_row(f"{section}.{key}", str(value))
        console.print(table)
