"""Config command implementation.

Shows and initializes the configuration file.
"""

from typing import Annotated

import typer
from rich.markup import escape
from rich.table import Table

from brewrecents.core.config import RecentsConfig, config_to_dict, load_config, save_config
from brewrecents.core.errors import ConfigError
from brewrecents.core.paths import get_config_path
from brewrecents.utils.formatting import console, print_error, print_success, print_warning

app = typer.Typer(
    help="Show or create the configuration file.",
    no_args_is_help=True,
)


@app.command()
def path() -> None:
    """Print the configuration file path."""
    typer.echo(str(get_config_path()))


@app.command()
def show() -> None:
    """Show the effective configuration."""
    config_path = get_config_path()
    try:
        config = load_config(config_path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    source = str(config_path) if config_path.exists() else "defaults"
    table = Table(
        title=f"Configuration ({escape(source)})",
        show_header=True,
        header_style="bold_header",
    )
    table.add_column("Setting", no_wrap=True)
    table.add_column("Value", style="info")

    for key, value in config_to_dict(config).items():
        shown = str(value).lower() if isinstance(value, bool) else str(value)
        table.add_row(key, escape(shown))

    console.print(table)


@app.command()
def init(
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite an existing configuration file."),
    ] = False,
) -> None:
    """Write a configuration file with the default settings."""
    config_path = get_config_path()
    if config_path.exists() and not force:
        print_warning(f"Configuration already exists: {config_path} (use --force to overwrite)")
        raise typer.Exit(code=1)

    try:
        saved = save_config(RecentsConfig(), config_path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Configuration written to {saved}")
