"""
Config command - Show configuration location and effective settings.
"""
import typer
from rich.table import Table

from triples.cli.output import TriplesConsole
from triples.core.config_manager import OUTPUT_FORMATS, ConfigManager

app = typer.Typer(
    name="config",
    help="Show configuration location and effective settings",
    no_args_is_help=True,
)


@app.command("show")
def show(
    plain: bool = typer.Option(False, "--plain", help="Disable colors"),
) -> None:
    """Show where configuration is read from and the resolved values."""
    console = TriplesConsole(plain=plain)
    config = ConfigManager()

    table = Table(title="Configuration", show_header=True)
    table.add_column("Setting")
    table.add_column("Value", overflow="fold")

    table.add_row("config dir", str(config.config_dir))
    table.add_row(".env", f"{config.env_path} ({'found' if config.env_path.exists() else 'missing'})")
    table.add_row(
        "config.toml",
        f"{config.toml_path} ({'found' if config.check_toml_file_exists() else 'missing'})",
    )
    for section, values in config.effective().items():
        for key, value in values.items():
            table.add_row(f"{section}.{key}", str(value))

    console.console.print(table)


@app.command("set")
def set_value(
    key: str = typer.Argument(..., help="Dotted key, e.g. output.format"),
    value: str = typer.Argument(..., help="New value"),
    plain: bool = typer.Option(False, "--plain", help="Disable colors"),
) -> None:
    """Persist a setting in config.toml."""
    console = TriplesConsole(plain=plain)
    config = ConfigManager()
    effective = config.effective()

    section, _, name = key.partition(".")
    if section not in effective or name not in effective[section]:
        console.print_failure("config", f"unknown setting {key!r}")
        raise typer.Exit(code=1)

    current = effective[section][name]
    if isinstance(current, bool):
        config.set(key, value.strip().lower() in ("1", "true", "yes", "on"))
    else:
        if key == "output.format" and value not in OUTPUT_FORMATS:
            console.print_failure("config", f"output.format must be 'table' or 'json', got {value!r}")
            raise typer.Exit(code=1)
        config.set(key, value)

    console.print_success(f"{key} saved to {config.toml_path}")
