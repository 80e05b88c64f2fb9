"""
Validate command - Check the bundled table or a resource file.
"""
from pathlib import Path
from typing import Optional

import typer

from triples.cli.output import make_console
from triples.core.logger import setup_logger
from triples.core.resource import ResourceError, load_table
from triples.core.table import PLATFORM_ARCH_TRIPLES
from triples.core.validation import validate_table

logger = setup_logger(__name__)


def validate(
    path: Optional[Path] = typer.Argument(None, help=".json or .toml table resource (default: bundled table)"),
    as_json: Optional[bool] = typer.Option(None, "--json/--table", help="Output format (default from config)"),
    plain: bool = typer.Option(False, "--plain", help="Disable colors"),
) -> None:
    """
    Validate a triple table.

    Checks that every record restates its platform/arch keys, that target
    triples are unique and that no field is empty or carries control
    characters. Strings in resource files are normalized on load.
    """
    console = make_console(plain=plain, as_json=as_json)
    source = str(path) if path is not None else "bundled table"

    if path is None:
        table = PLATFORM_ARCH_TRIPLES
    else:
        try:
            table = load_table(path)
        except (FileNotFoundError, ResourceError) as e:
            console.print_failure("validate", str(e))
            raise typer.Exit(code=1)

    problems = validate_table(table)

    if console.as_json:
        console.print_json({"source": source, "valid": not problems, "problems": problems})
    elif problems:
        console.print_failure("validate", f"{len(problems)} problem(s) in {source}")
        for problem in problems:
            console.err_console.print(f"    - {problem}", markup=False)
    else:
        console.print_success(f"{source} is valid")

    if problems:
        raise typer.Exit(code=1)
