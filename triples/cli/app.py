"""
Root Typer app for the triples CLI.
"""
import os
from typing import Optional

import typer

from triples import __version__
from triples.cli.commands import config, export, find, host, lookup, platforms, validate
from triples.core.logger import refresh_levels

app = typer.Typer(
    name="triples",
    help="Platform/arch to compiler target triple lookup for prebuilt native binaries",
    add_completion=False,
    no_args_is_help=True,
)

app.command("lookup")(lookup.lookup)
app.command("platforms")(platforms.platforms)
app.command("archs")(platforms.archs)
app.command("find")(find.find)
app.command("host")(host.host)
app.command("export")(export.export)
app.command("validate")(validate.validate)
app.add_typer(config.app, name="config")


def version_callback(value: bool) -> None:
    """Display version information."""
    if value:
        typer.echo(f"triples {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        help="Show version and exit",
        is_eager=True,
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Enable debug logging and full tracebacks",
    ),
) -> None:
    """
    Look up compiler target triples and artifact names by platform and arch.

    Platform and arch use Node's naming (process.platform / process.arch),
    e.g. linux x64 or win32 arm64.
    """
    if debug:
        os.environ["LOG_LEVEL"] = "debug"
        refresh_levels()
