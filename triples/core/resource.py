"""
Serialized form of the triple table.

Exterior shape: {platform: {arch: [{triple, platformArchABI, platform, arch, abi}, ...]}}
stored as JSON or TOML. Loading normalizes every string, so files exported by
older tooling with trailing carriage returns come back clean.
"""
import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Union

import tomli_w

from .logger import setup_logger
from .table import PLATFORM_ARCH_TRIPLES, Table, freeze_table

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

logger = setup_logger(__name__)

FORMATS = ("json", "toml")
_SUFFIX_FORMATS = {".json": "json", ".toml": "toml"}


class ResourceError(ValueError):
    """A table resource could not be read or does not have the expected shape."""


def table_to_dict(table: Table = PLATFORM_ARCH_TRIPLES) -> Dict[str, Dict[str, List[Dict[str, str]]]]:
    """Convert a table into plain nested dicts/lists with exterior field names."""
    return {
        platform: {
            arch: [record.to_dict() for record in variants]
            for arch, variants in archs.items()
        }
        for platform, archs in table.items()
    }


def dump_table(table: Table = PLATFORM_ARCH_TRIPLES, fmt: str = "json") -> str:
    """
    Serialize a table.

    Args:
        table: Table to serialize
        fmt: "json" or "toml"

    Returns:
        Serialized text
    """
    data = table_to_dict(table)
    if fmt == "json":
        return json.dumps(data, indent=2) + "\n"
    if fmt == "toml":
        return tomli_w.dumps(data)
    raise ResourceError(f"unsupported format: {fmt!r} (expected one of {', '.join(FORMATS)})")


def format_for_path(path: Union[str, Path]) -> str:
    """Pick the serialization format from a file suffix."""
    suffix = Path(path).suffix.lower()
    if suffix not in _SUFFIX_FORMATS:
        raise ResourceError(f"unsupported file type: {suffix or '(none)'} (use .json or .toml)")
    return _SUFFIX_FORMATS[suffix]


def write_table(path: Union[str, Path], table: Table = PLATFORM_ARCH_TRIPLES) -> Path:
    """Write a table to path, format chosen by suffix."""
    path = Path(path)
    fmt = format_for_path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(dump_table(table, fmt), encoding="utf-8")
    logger.info(f"Wrote {fmt} table to {path}")
    return path


def _parse(text: str, fmt: str) -> Any:
    try:
        if fmt == "json":
            return json.loads(text, strict=False)
        return tomllib.loads(text)
    except (json.JSONDecodeError, tomllib.TOMLDecodeError) as e:
        raise ResourceError(f"invalid {fmt}: {e}") from e


def parse_table(text: str, fmt: str = "json") -> Table:
    """
    Parse serialized text into an immutable, normalized table.

    Raises:
        ResourceError: malformed text or unexpected structure
    """
    if fmt not in FORMATS:
        raise ResourceError(f"unsupported format: {fmt!r} (expected one of {', '.join(FORMATS)})")
    data = _parse(text, fmt)

    if not isinstance(data, dict):
        raise ResourceError("top level must be a mapping of platform -> architectures")
    for platform, archs in data.items():
        if not isinstance(archs, dict):
            raise ResourceError(f"platform {platform!r} must map to a mapping of architectures")
        for arch, variants in archs.items():
            if not isinstance(variants, list):
                raise ResourceError(f"{platform}/{arch} must hold a list of variant records")
            for item in variants:
                if not isinstance(item, dict):
                    raise ResourceError(f"{platform}/{arch} contains a non-mapping record")

    try:
        return freeze_table(data)
    except KeyError as e:
        raise ResourceError(f"variant record missing field {e}") from e
    except (TypeError, ValueError) as e:
        raise ResourceError(str(e)) from e


def load_table(path: Union[str, Path]) -> Table:
    """
    Load a table resource from a .json or .toml file.

    Raises:
        FileNotFoundError: path does not exist
        ResourceError: unsupported suffix, malformed content or structure
    """
    path = Path(path)
    fmt = format_for_path(path)
    if not path.exists():
        raise FileNotFoundError(f"table resource not found: {path}")
    logger.debug(f"Loading {fmt} table from {path}")
    return parse_table(path.read_text(encoding="utf-8"), fmt)
