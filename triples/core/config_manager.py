"""
Configuration: .env for environment overrides, config.toml for CLI defaults.

Lookup order for a setting: environment variable (including values loaded
from .env), then config.toml, then built-in defaults.
"""
import copy
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

from dotenv import load_dotenv

from .logger import setup_logger
from .toml_config import DEFAULT_CONFIG, get_nested_value, read_toml, set_nested_value, write_toml

logger = setup_logger(__name__)

OUTPUT_FORMATS = ("table", "json")

# config.toml key -> environment variable overriding it
ENV_OVERRIDES = {
    "output.format": "TRIPLES_OUTPUT_FORMAT",
    "output.plain": "NO_COLOR",
}

_TRUE_VALUES = ("1", "true", "yes", "on")


def get_config_location() -> Path:
    """
    Resolve the configuration directory.

    TRIPLES_CONFIG_DIR wins; otherwise the current working directory.
    """
    override = os.getenv("TRIPLES_CONFIG_DIR")
    if override:
        return Path(override).expanduser()
    return Path.cwd()


class ConfigManager:
    """Reads settings from .env / environment and config.toml."""

    def __init__(self, config_dir: Optional[Union[str, Path]] = None):
        """
        Initialize ConfigManager.

        Args:
            config_dir: Directory holding .env and config.toml (defaults to get_config_location())
        """
        self.config_dir = Path(config_dir) if config_dir else get_config_location()
        self.env_path = self.config_dir / ".env"
        self.toml_path = self.config_dir / "config.toml"

        if self.env_path.exists():
            load_dotenv(self.env_path)
            logger.debug(f"Loaded environment from {self.env_path}")

        self._toml = read_toml(self.toml_path)

    def check_toml_file_exists(self) -> bool:
        """Check if config.toml exists."""
        return self.toml_path.exists()

    def get(self, key_path: str, default: Any = None) -> Any:
        """
        Get a setting by dotted key path.

        Args:
            key_path: e.g. "output.format"
            default: Returned when neither env, config.toml nor defaults define it

        Returns:
            The resolved value
        """
        env_var = ENV_OVERRIDES.get(key_path)
        if env_var and os.getenv(env_var):
            value = os.getenv(env_var)
            if env_var == "NO_COLOR":
                # any non-empty value disables color
                value = True
            logger.debug(f"Config get: {key_path} = {value} (from {env_var})")
            return value

        if key_path == "logging.debug" and os.getenv("LOG_LEVEL", "").lower() == "debug":
            return True

        value = get_nested_value(self._toml, key_path)
        if value is None:
            value = get_nested_value(DEFAULT_CONFIG, key_path, default)
        logger.debug(f"Config get: {key_path} = {value}")
        return value

    def get_bool(self, key_path: str, default: bool = False) -> bool:
        """Get a setting as a boolean; strings like "true"/"1"/"yes" count as True."""
        value = self.get(key_path, default)
        if isinstance(value, str):
            return value.strip().lower() in _TRUE_VALUES
        return bool(value)

    def output_format(self) -> str:
        """Default CLI output format; falls back to "table" for unknown values."""
        fmt = str(self.get("output.format", "table")).strip().lower()
        if fmt not in OUTPUT_FORMATS:
            logger.warning(f"Unknown output.format {fmt!r}, using 'table'")
            return "table"
        return fmt

    def set(self, key_path: str, value: Any) -> None:
        """Set a value in config.toml and persist it."""
        set_nested_value(self._toml, key_path, value)
        write_toml(self.toml_path, self._toml)
        logger.debug(f"Config set: {key_path} = {value}")

    def effective(self) -> Dict[str, Any]:
        """All known settings with env overrides applied."""
        resolved = copy.deepcopy(DEFAULT_CONFIG)
        for section, values in DEFAULT_CONFIG.items():
            for key in values:
                key_path = f"{section}.{key}"
                if isinstance(values[key], bool):
                    resolved[section][key] = self.get_bool(key_path)
                else:
                    resolved[section][key] = self.get(key_path)
        return resolved
