"""
Platforms and archs commands - Enumerate supported combinations.
"""
from typing import Optional

import typer

from triples.cli.output import make_console
from triples.core.lookup import all_platforms, architectures_for


def platforms(
    as_json: Optional[bool] = typer.Option(None, "--json/--table", help="Output format (default from config)"),
    plain: bool = typer.Option(False, "--plain", help="Disable colors"),
) -> None:
    """List supported platforms."""
    console = make_console(plain=plain, as_json=as_json)
    console.print_names(all_platforms(), title="Platforms")


def archs(
    platform: str = typer.Argument(..., help="Platform name (linux, win32, ...)"),
    strict: bool = typer.Option(False, "--strict", help="Exit with code 1 for an unknown platform"),
    as_json: Optional[bool] = typer.Option(None, "--json/--table", help="Output format (default from config)"),
    plain: bool = typer.Option(False, "--plain", help="Disable colors"),
) -> None:
    """List architectures supported for PLATFORM."""
    console = make_console(plain=plain, as_json=as_json)
    names = architectures_for(platform)
    if not names:
        console.print_notice(f"unknown platform {platform!r}")
        if strict:
            raise typer.Exit(code=1)
    console.print_names(names, title=f"Architectures for {platform}")
