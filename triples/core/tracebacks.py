"""
Rich traceback handler and short failure summaries.

Locals are NOT shown in tracebacks unless TRIPLES_TRACEBACK_LOCALS=1.
Reference: https://rich.readthedocs.io/en/stable/traceback.html
"""
import os
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.traceback import install as install_rich_traceback


def install_traceback_handler(debug: bool = False) -> None:
    """
    Install Rich traceback handler globally.

    Args:
        debug: If True, show more context lines around each frame.
    """
    console = Console(stderr=True)

    show_locals = os.getenv("TRIPLES_TRACEBACK_LOCALS", "").lower() in ("1", "true", "yes")

    install_rich_traceback(
        console=console,
        show_locals=show_locals,
        locals_max_length=10 if show_locals else 0,
        locals_max_string=80 if show_locals else 0,
        width=None,
        extra_lines=3 if debug else 1,
        word_wrap=True,
    )


def print_failure_summary(
    stage: str,
    error: BaseException,
    console: Optional[Console] = None
) -> None:
    """
    Print a one-line failure summary for normal mode.

    Args:
        stage: Command or step where the error occurred (e.g., "validate")
        error: The exception that was raised
        console: Optional Console instance (defaults to stderr)
    """
    if console is None:
        console = Console(stderr=True)

    console.print(f"[bold red]<x> {stage} | failed[/bold red]")
    console.print(f"[red]    cause: {escape(str(error))}[/red]", highlight=False)

    if os.getenv("LOG_LEVEL", "").lower() != "debug":
        console.print("[dim]    run with --debug for full traceback[/dim]")
