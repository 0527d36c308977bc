"""Main CLI application entry point.

Defines the Typer application, global options, and the recents report
that runs when no subcommand is given.
"""

import logging
from typing import Annotated

import typer
from rich.logging import RichHandler

from brewrecents import __version__
from brewrecents.cli.commands import config as config_command
from brewrecents.cli.commands.recents import show_recents
from brewrecents.cli.types import resolve_pair
from brewrecents.core.config import load_config
from brewrecents.core.errors import ConfigError
from brewrecents.models.options import ReportOptions
from brewrecents.utils.formatting import err_console, print_error

app = typer.Typer(
    name="brew-recents",
    help="Show recently added and updated Homebrew formulae and casks.",
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"brew-recents version {__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Route log records to stderr through Rich.

    Args:
        verbose: Log debug records instead of warnings only.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[
            RichHandler(
                console=err_console,
                show_time=False,
                show_path=verbose,
                markup=False,
                rich_tracebacks=True,
            )
        ],
        force=True,
    )


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging."),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Suppress the title and summary lines."),
    ] = False,
    days: Annotated[
        int | None,
        typer.Option(
            "--days",
            "-d",
            min=1,
            help="Show packages added/updated in the last N days. [default: 7]",
            show_default=False,
        ),
    ] = None,
    truncate_chars: Annotated[
        int | None,
        typer.Option(
            "--truncate-chars",
            "-t",
            min=1,
            help="Truncate package names longer than N characters. [default: 25]",
            show_default=False,
        ),
    ] = None,
    formula: Annotated[
        bool,
        typer.Option("--formula/--no-formula", help="Show formulae."),
    ] = True,
    cask: Annotated[
        bool,
        typer.Option("--cask/--no-cask", help="Show casks."),
    ] = True,
    new: Annotated[
        bool,
        typer.Option("--new/--no-new", help="Show new packages."),
    ] = True,
    updated: Annotated[
        bool,
        typer.Option("--updated/--no-updated", help="Show updated packages."),
    ] = True,
    only_formula: Annotated[
        bool,
        typer.Option("--only-formula", help="Show only formulae."),
    ] = False,
    only_cask: Annotated[
        bool,
        typer.Option("--only-cask", help="Show only casks."),
    ] = False,
    only_new: Annotated[
        bool,
        typer.Option("--only-new", help="Show only new packages."),
    ] = False,
    only_updated: Annotated[
        bool,
        typer.Option("--only-updated", help="Show only updated packages."),
    ] = False,
    dim_looked_up: Annotated[
        bool,
        typer.Option(
            "--dim-looked-up",
            help="Dim packages you've already looked up. [default: on]",
        ),
    ] = False,
    no_dim_looked_up: Annotated[
        bool,
        typer.Option("--no-dim-looked-up", help="Do not dim packages you've already looked up."),
    ] = False,
    hide_looked_up: Annotated[
        bool,
        typer.Option("--hide-looked-up", help="Hide packages you've already looked up."),
    ] = False,
    no_color: Annotated[
        bool,
        typer.Option("--no-color", help="Disable colored output."),
    ] = False,
    plain: Annotated[
        bool,
        typer.Option("--plain", help="Output without any formatting."),
    ] = False,
    width: Annotated[
        int | None,
        typer.Option(
            "--width",
            "-w",
            min=1,
            help="Output width in columns. [default: terminal width]",
            show_default=False,
        ),
    ] = None,
) -> None:
    """Show recently added and updated Homebrew packages.

    Installed packages are highlighted, packages you already looked up
    with `brew info` are dimmed or hidden.

    Examples:
        brew-recents                         # Last 7 days, everything
        brew-recents --days 5 --only-cask    # New and updated casks
        brew-recents --hide-looked-up        # Skip packages already seen
        brew-recents --plain                 # Names only, no styling
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    configure_logging(verbose)

    if ctx.invoked_subcommand is not None:
        return

    try:
        config = load_config()
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    show_formulae, show_casks = resolve_pair(formula, cask, only_formula, only_cask)
    show_new, show_updated = resolve_pair(new, updated, only_new, only_updated)

    if no_dim_looked_up:
        dim = False
    elif dim_looked_up:
        dim = True
    else:
        dim = config.dim_looked_up

    report_options = ReportOptions(
        days=days if days is not None else config.days,
        show_formulae=show_formulae,
        show_casks=show_casks,
        show_new=show_new,
        show_updated=show_updated,
    )

    show_recents(
        config,
        report_options,
        truncate_at=truncate_chars if truncate_chars is not None else config.truncate_chars,
        dim_inspected=dim,
        hide_inspected=hide_looked_up or config.hide_looked_up,
        color=not no_color,
        plain=plain,
        width=width,
        quiet=quiet,
    )


app.add_typer(config_command.app, name="config")


if __name__ == "__main__":
    app()
