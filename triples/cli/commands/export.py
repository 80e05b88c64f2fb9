"""
Export command - Write the table as a JSON or TOML resource.
"""
from pathlib import Path
from typing import Optional

import typer

from triples.cli.output import TriplesConsole
from triples.core.logger import setup_logger
from triples.core.resource import FORMATS, ResourceError, dump_table, format_for_path, write_table

logger = setup_logger(__name__)


def export(
    fmt: Optional[str] = typer.Option(
        None, "--format", "-f", help="json or toml (default: from --output suffix, else json)"
    ),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="File to write instead of stdout"),
    plain: bool = typer.Option(False, "--plain", help="Disable colors"),
) -> None:
    """
    Export the table in its exterior shape:
    {platform: {arch: [{triple, platformArchABI, platform, arch, abi}]}}.
    """
    console = TriplesConsole(plain=plain)

    try:
        if output is not None:
            path_fmt = format_for_path(output)
            if fmt is not None and fmt != path_fmt:
                raise ResourceError(f"--format {fmt} does not match file suffix {output.suffix}")
            write_table(output)
            console.print_success(f"wrote {path_fmt} table to {output}")
            return

        fmt = fmt or "json"
        if fmt not in FORMATS:
            raise ResourceError(f"unsupported format: {fmt!r} (expected one of {', '.join(FORMATS)})")
        console.console.out(dump_table(fmt=fmt), end="", highlight=False)
    except ResourceError as e:
        logger.debug(f"export failed: {e}")
        console.print_failure("export", str(e))
        raise typer.Exit(code=1)
