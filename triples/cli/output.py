"""
Console output for the triples CLI using Rich.
"""
import json
import os
from typing import Any, Iterable, Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from triples.core.table import VariantRecord


class TriplesConsole:
    """
    Centralized console for CLI output.

    Tables and JSON go to stdout; notices and failures go to stderr.
    Respects --plain and NO_COLOR.
    """

    def __init__(self, plain: bool = False, as_json: bool = False):
        """
        Initialize TriplesConsole.

        Args:
            plain: If True, disable colors and styling (for CI/logs)
            as_json: If True, commands emit JSON instead of tables
        """
        # NO_COLOR: any non-empty value disables color
        self.plain = plain or bool(os.getenv("NO_COLOR"))
        self.as_json = as_json

        self.console = Console(no_color=self.plain, highlight=not self.plain)
        self.err_console = Console(stderr=True, no_color=self.plain, highlight=False)

        self.colors = {
            "success": "green" if not self.plain else None,
            "warning": "yellow" if not self.plain else None,
            "error": "bold red" if not self.plain else None,
        }

    def print_json(self, data: Any) -> None:
        """Emit data as indented JSON on stdout, unstyled."""
        self.console.out(json.dumps(data, indent=2), highlight=False)

    def print_records(self, records: Iterable[VariantRecord], title: Optional[str] = None) -> None:
        """
        Print variant records as a table, or as a JSON list in JSON mode.

        Args:
            records: Records to show, in order
            title: Optional table title
        """
        records = list(records)
        if self.as_json:
            self.print_json([record.to_dict() for record in records])
            return

        table = Table(title=title, show_header=True, header_style=None if self.plain else "bold cyan")
        table.add_column("triple", style=None if self.plain else "green", no_wrap=True)
        table.add_column("platformArchABI", style=None if self.plain else "cyan", no_wrap=True)
        table.add_column("platform")
        table.add_column("arch")
        table.add_column("abi")
        for record in records:
            table.add_row(
                record.triple,
                record.platform_arch_abi,
                record.platform,
                record.arch,
                record.abi,
            )
        self.console.print(table)

    def print_names(self, names: Iterable[str], title: str) -> None:
        """Print a sorted list of names, one per line (JSON list in JSON mode)."""
        names = sorted(names)
        if self.as_json:
            self.print_json(names)
            return
        self.console.print(f"{title}:", style=None if self.plain else "bold")
        for name in names:
            self.console.print(f"  {escape(name)}")

    def print_notice(self, message: str) -> None:
        """Print a warning-level notice on stderr."""
        self.err_console.print(f"[!] {message}", style=self.colors["warning"], markup=False)

    def print_success(self, message: str) -> None:
        """Print a success line on stderr."""
        self.err_console.print(f"[✓] {message}", style=self.colors["success"], markup=False)

    def print_failure(self, stage: str, cause: str) -> None:
        """
        Print a failure message.

        Args:
            stage: Command where the error occurred
            cause: Error cause/message
        """
        self.err_console.print(f"<x> {stage} | failed", style=self.colors["error"], markup=False)
        self.err_console.print(f"    cause: {cause}", style=self.colors["error"], markup=False)


def make_console(plain: bool = False, as_json: Optional[bool] = None) -> TriplesConsole:
    """
    Build a console from CLI flags, falling back to config for unset ones.

    Args:
        plain: --plain flag
        as_json: --json/--table flag, None when not given
    """
    from triples.core.config_manager import ConfigManager

    config = ConfigManager()
    if as_json is None:
        as_json = config.output_format() == "json"
    plain = plain or config.get_bool("output.plain")
    return TriplesConsole(plain=plain, as_json=as_json)
