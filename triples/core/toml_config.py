"""
TOML configuration file management.
Handles reading and writing config.toml for CLI defaults.
"""
import sys
from pathlib import Path
from typing import Any, Dict

import tomli_w

from .logger import setup_logger

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

logger = setup_logger(__name__)

DEFAULT_CONFIG: Dict[str, Any] = {
    "output": {
        "format": "table",
        "plain": False,
    },
    "logging": {
        "debug": False,
    },
}


def read_toml(toml_path: Path) -> Dict[str, Any]:
    """
    Read config.toml file.

    Args:
        toml_path: Path to config.toml

    Returns:
        Dictionary of configuration values, empty if the file is missing or unreadable
    """
    if not toml_path.exists():
        logger.debug(f"config.toml not found at {toml_path}")
        return {}

    try:
        with open(toml_path, 'rb') as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.error(f"Error reading config.toml: {e}")
        return {}


def write_toml(toml_path: Path, config: Dict[str, Any]) -> None:
    """
    Write config.toml file.

    Args:
        toml_path: Path to config.toml
        config: Dictionary of configuration values (nested structure)
    """
    toml_path.parent.mkdir(parents=True, exist_ok=True)
    with open(toml_path, 'wb') as f:
        f.write(tomli_w.dumps(config).encode('utf-8'))
    logger.debug(f"Wrote config.toml to {toml_path}")


def get_nested_value(config: Dict[str, Any], key_path: str, default: Any = None) -> Any:
    """
    Get a nested value from config dict using dot notation.

    Args:
        config: Configuration dictionary
        key_path: Dot-separated key path (e.g., "output.format")
        default: Default value if key not found

    Returns:
        Value at key path, or default
    """
    keys = key_path.split('.')
    current = config

    for key in keys:
        if isinstance(current, dict) and key in current:
            current = current[key]
        else:
            return default

    return current


def set_nested_value(config: Dict[str, Any], key_path: str, value: Any) -> None:
    """
    Set a nested value in config dict using dot notation.

    Args:
        config: Configuration dictionary (modified in place)
        key_path: Dot-separated key path (e.g., "output.format")
        value: Value to set
    """
    keys = key_path.split('.')
    current = config

    for key in keys[:-1]:
        if not isinstance(current.get(key), dict):
            current[key] = {}
        current = current[key]

    current[keys[-1]] = value
