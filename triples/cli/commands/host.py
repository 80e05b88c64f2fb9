"""
Host command - Show the running system's keys and candidate triples.
"""
from typing import Optional

import typer

from triples.cli.output import make_console
from triples.core.host import host_target
from triples.core.lookup import lookup


def host(
    as_json: Optional[bool] = typer.Option(None, "--json/--table", help="Output format (default from config)"),
    plain: bool = typer.Option(False, "--plain", help="Disable colors"),
) -> None:
    """Detect this machine's platform/arch and list its candidate triples."""
    console = make_console(plain=plain, as_json=as_json)
    platform, arch = host_target()
    records = lookup(platform, arch)

    if console.as_json:
        console.print_json({
            "platform": platform,
            "arch": arch,
            "candidates": [record.to_dict() for record in records],
        })
        return

    console.console.print(f"platform: {platform}", markup=False)
    console.console.print(f"arch:     {arch}", markup=False)
    if not records:
        console.print_notice(f"{platform}/{arch} is not supported")
        return
    console.print_records(records, title="Candidates")
