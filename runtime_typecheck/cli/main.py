"""
Main CLI entry point using Typer.

This module defines the command-line interface for runtime_typecheck using Typer.
It provides three commands: check, explain, and catalog.
"""

import logging
from pathlib import Path
from typing import List, Optional

import typer
from typing_extensions import Annotated

from runtime_typecheck.utils.log import setup_logging

from .commands import catalog_command, check_command, explain_command
from .display import print_error


# Create Typer app
app = typer.Typer(
    name="runtime-typecheck",
    help="runtime-typecheck - Check values against composable conditions",
    add_completion=False,
    rich_markup_mode="rich"
)


@app.command("check")
def check(
    cond: Annotated[
        List[str],
        typer.Option("--cond", "-c", help="Comma-separated catalog names that must all hold (repeat for OR)")
    ],
    value: Annotated[
        Optional[str],
        typer.Option("--value", "-v", help="JSON literal to check")
    ] = None,
    json_file: Annotated[
        Optional[Path],
        typer.Option("--json", "-j", help="Path to JSON file to check", exists=True, file_okay=True, dir_okay=False)
    ] = None,
    show_value: Annotated[
        bool,
        typer.Option("--show-value", help="Display the parsed value")
    ] = False,
) -> None:
    """
    Check a JSON value against catalog conditions.

    Exits with code 1 if the value fails, 2 on usage errors.

    Example:
        runtime-typecheck check \\
            --value "-3" \\
            --cond positive,integer \\
            --cond string
    """
    try:
        passed = check_command(
            value_text=value,
            json_path=json_file,
            groups=cond,
            show_value=show_value
        )
    except Exception as e:
        print_error(f"Command failed: {e}")
        raise typer.Exit(code=2)

    if not passed:
        raise typer.Exit(code=1)


@app.command("explain")
def explain(
    cond: Annotated[
        List[str],
        typer.Option("--cond", "-c", help="Comma-separated catalog names that must all hold (repeat for OR)")
    ],
) -> None:
    """
    Show how the expected message of a descriptor is composed.

    Example:
        runtime-typecheck explain --cond nonempty --cond positive,integer
    """
    try:
        explain_command(groups=cond)
    except Exception as e:
        print_error(f"Command failed: {e}")
        raise typer.Exit(code=2)


@app.command("catalog")
def catalog() -> None:
    """List the named conditions usable with --cond."""
    catalog_command()


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: Annotated[
        bool,
        typer.Option("--version", help="Show version and exit")
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Enable debug logging")
    ] = False,
) -> None:
    """
    runtime-typecheck - Check values against composable conditions.

    Failures name the single condition that best explains them.
    """
    if version:
        from runtime_typecheck import __version__
        typer.echo(f"runtime-typecheck version {__version__}")
        raise typer.Exit()

    setup_logging(level=logging.DEBUG if verbose else logging.WARNING)

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def cli() -> None:
    """CLI entry point for the console script."""
    app()


if __name__ == "__main__":
    cli()
