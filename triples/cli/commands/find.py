"""
Find command - Reverse lookup by target triple or artifact name.
"""
from typing import Optional

import typer

from triples.cli.output import make_console
from triples.core.lookup import find_by_artifact_name, find_by_triple


def find(
    name: str = typer.Argument(..., help="Target triple (x86_64-unknown-linux-gnu) or artifact name (linux-x64-gnu)"),
    as_json: Optional[bool] = typer.Option(None, "--json/--table", help="Output format (default from config)"),
    plain: bool = typer.Option(False, "--plain", help="Disable colors"),
) -> None:
    """
    Find the records matching a target triple or a platformArchABI name.

    Exits with code 1 when nothing matches, so it can validate a
    user-supplied target string in scripts.
    """
    console = make_console(plain=plain, as_json=as_json)

    record = find_by_triple(name)
    records = (record,) if record is not None else find_by_artifact_name(name)

    if not records:
        console.print_failure("find", f"no target matches {name!r}")
        raise typer.Exit(code=1)

    console.print_records(records, title=name)
