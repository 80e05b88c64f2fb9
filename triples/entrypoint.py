"""
Package-native CLI entry point for triples.

Used by the installed console script (triples).
"""

import os
import sys


def _is_debug_mode(argv: list[str]) -> bool:
    """Resolve debug mode from CLI flag, env, or config."""
    if "--debug" in argv:
        return True
    if os.getenv("LOG_LEVEL", "").lower() == "debug":
        return True
    from triples.core.config_manager import ConfigManager

    return ConfigManager().get_bool("logging.debug", default=False)


def main() -> None:
    """Entry point for the triples console script."""
    debug_mode = _is_debug_mode(sys.argv)
    if debug_mode:
        os.environ["LOG_LEVEL"] = "debug"
        # loggers created while resolving debug mode still hold the old level
        from triples.core.logger import refresh_levels

        refresh_levels()

    from triples.core.tracebacks import install_traceback_handler, print_failure_summary

    install_traceback_handler(debug=debug_mode)

    from triples.cli.app import app

    try:
        app()
    except KeyboardInterrupt:
        from rich.console import Console

        Console(stderr=True).print("\n[dim]Interrupted by user.[/dim]")
        sys.exit(130)
    except SystemExit:
        raise
    except Exception as e:
        if debug_mode:
            raise
        print_failure_summary("triples", e)
        sys.exit(1)


if __name__ == "__main__":
    main()
