"""
Lookup command - Show the variant records for a platform/arch pair.
"""
from typing import Optional

import typer

from triples.cli.output import make_console
from triples.core.logger import setup_logger
from triples.core.lookup import architectures_for, lookup as lookup_variants

logger = setup_logger(__name__)


def lookup(
    platform: str = typer.Argument(..., help="Platform name as Node reports it (linux, win32, ...)"),
    arch: str = typer.Argument(..., help="Architecture name as Node reports it (x64, arm64, ...)"),
    strict: bool = typer.Option(False, "--strict", help="Exit with code 1 when the pair is unsupported"),
    as_json: Optional[bool] = typer.Option(None, "--json/--table", help="Output format (default from config)"),
    plain: bool = typer.Option(False, "--plain", help="Disable colors"),
) -> None:
    """
    Show candidate target triples for PLATFORM and ARCH.

    Records are listed in authored order; picking one (for example by
    probing the C library) is left to the caller.
    """
    console = make_console(plain=plain, as_json=as_json)
    records = lookup_variants(platform, arch)

    if not records:
        known = sorted(architectures_for(platform))
        if known:
            console.print_notice(f"{platform}/{arch} is not supported (known archs: {', '.join(known)})")
        else:
            console.print_notice(f"{platform}/{arch} is not supported (unknown platform {platform!r})")
        if console.as_json:
            console.print_json([])
        if strict:
            raise typer.Exit(code=1)
        return

    logger.debug(f"{platform}/{arch}: {[r.triple for r in records]}")
    console.print_records(records, title=f"{platform}/{arch}")
