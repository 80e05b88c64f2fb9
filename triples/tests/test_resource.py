"""
Tests for JSON/TOML table resources.
"""

import json
import sys
import tempfile
from pathlib import Path

import pytest

# Ensure `triples.*` imports work when running from repo root
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from triples.core.resource import (  # noqa: E402
    ResourceError,
    dump_table,
    format_for_path,
    load_table,
    parse_table,
    table_to_dict,
    write_table,
)
from triples.core.table import PLATFORM_ARCH_TRIPLES  # noqa: E402
from triples.core.validation import validate_table  # noqa: E402

# Shape of the published data: trailing \r on most string fields
LEGACY_JSON = r'''
{
  "win32": {
    "ia32": [
      {
        "triple": "i686-pc-windows-gnu\r",
        "platformArchABI": "win32-ia32-gnu\r",
        "platform": "win32",
        "arch": "ia32",
        "abi": "gnu\r"
      },
      {
        "triple": "i686-pc-windows-msvc\r",
        "platformArchABI": "win32-ia32-msvc\r",
        "platform": "win32",
        "arch": "ia32",
        "abi": "msvc\r"
      }
    ]
  }
}
'''


class TestDump:
    """dump_table() / table_to_dict()."""

    def test_json_has_exterior_shape(self):
        data = json.loads(dump_table(fmt="json"))
        assert set(data) == {"win32", "linux"}
        first = data["win32"]["arm64"][0]
        assert first == {
            "triple": "aarch64-pc-windows-msvc",
            "platformArchABI": "win32-arm64-msvc",
            "platform": "win32",
            "arch": "arm64",
            "abi": "msvc",
        }

    def test_json_keeps_authored_order(self):
        data = json.loads(dump_table(fmt="json"))
        assert [r["abi"] for r in data["linux"]["x64"]] == ["gnu", "gnux32", "musl"]

    def test_toml_parses_back_to_same_table(self):
        text = dump_table(fmt="toml")
        assert "[[linux.x64]]" in text
        assert table_to_dict(parse_table(text, "toml")) == table_to_dict(PLATFORM_ARCH_TRIPLES)

    def test_unknown_format(self):
        with pytest.raises(ResourceError):
            dump_table(fmt="yaml")


class TestLoad:
    """parse_table() / load_table()."""

    def test_legacy_carriage_returns_are_stripped(self):
        table = parse_table(LEGACY_JSON, "json")
        records = table["win32"]["ia32"]
        assert [r.triple for r in records] == ["i686-pc-windows-gnu", "i686-pc-windows-msvc"]
        assert [r.abi for r in records] == ["gnu", "msvc"]
        assert validate_table(table) == []

    def test_raw_control_characters_in_json_strings(self):
        text = '{"linux": {"x64": [{"triple": "x86_64-unknown-linux-gnu\r", "platformArchABI": "linux-x64-gnu\r", "platform": "linux", "arch": "x64", "abi": "gnu\r"}]}}'
        table = parse_table(text, "json")
        assert table["linux"]["x64"][0].platform_arch_abi == "linux-x64-gnu"

    def test_invalid_json(self):
        with pytest.raises(ResourceError, match="invalid json"):
            parse_table("{not json", "json")

    def test_invalid_toml(self):
        with pytest.raises(ResourceError, match="invalid toml"):
            parse_table("[[linux.x64]\n", "toml")

    def test_top_level_must_be_mapping(self):
        with pytest.raises(ResourceError):
            parse_table("[]", "json")

    def test_variants_must_be_list(self):
        with pytest.raises(ResourceError):
            parse_table('{"linux": {"x64": {"triple": "x"}}}', "json")

    def test_missing_field(self):
        with pytest.raises(ResourceError, match="missing field"):
            parse_table('{"linux": {"x64": [{"triple": "x86_64-unknown-linux-gnu"}]}}', "json")

    def test_non_string_field(self):
        text = '{"linux": {"x64": [{"triple": 1, "platformArchABI": "a", "platform": "linux", "arch": "x64", "abi": "gnu"}]}}'
        with pytest.raises(ResourceError, match="must be a string"):
            parse_table(text, "json")

    def test_keys_colliding_after_normalization(self):
        """Keys equal once cleaned must not silently drop records."""
        text = json.dumps({"linux": {
            "x64": [{"triple": "a-b-c", "platformArchABI": "linux-x64-a", "platform": "linux", "arch": "x64", "abi": "a"}],
            "x64\r": [{"triple": "d-e-f", "platformArchABI": "linux-x64-d", "platform": "linux", "arch": "x64", "abi": "d"}],
        }})
        with pytest.raises(ResourceError, match="duplicate arch key"):
            parse_table(text, "json")

    def test_platform_keys_colliding_after_normalization(self):
        text = '{"linux": {}, "linux\\r": {}}'
        with pytest.raises(ResourceError, match="duplicate platform key"):
            parse_table(text, "json")

    def test_load_missing_file(self):
        with pytest.raises(FileNotFoundError):
            load_table("/nonexistent/table.json")

    def test_load_unsupported_suffix(self):
        with pytest.raises(ResourceError, match="unsupported file type"):
            load_table("table.yaml")


class TestWrite:
    """write_table() picks the format from the suffix."""

    def test_format_for_path(self):
        assert format_for_path("a/b/table.JSON") == "json"
        assert format_for_path(Path("table.toml")) == "toml"

    @pytest.mark.parametrize("name", ["table.json", "table.toml"])
    def test_write_then_load(self, name):
        with tempfile.TemporaryDirectory() as tmp:
            path = write_table(Path(tmp) / "nested" / name)
            assert path.exists()
            loaded = load_table(path)
            assert table_to_dict(loaded) == table_to_dict(PLATFORM_ARCH_TRIPLES)
