"""
Tests for the bundled platform/arch triple table.
"""

import sys
from pathlib import Path

import pytest

# Ensure `triples.*` imports work when running from repo root
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from triples.core.table import (  # noqa: E402
    PLATFORM_ARCH_TRIPLES,
    VariantRecord,
    clean_text,
    freeze_table,
    has_control_chars,
)


def _records():
    for platform, archs in PLATFORM_ARCH_TRIPLES.items():
        for arch, variants in archs.items():
            for record in variants:
                yield platform, arch, record


class TestTableInvariants:
    """Invariants every consumer of the table relies on."""

    def test_platforms(self):
        assert set(PLATFORM_ARCH_TRIPLES) == {"win32", "linux"}

    def test_every_variant_list_is_non_empty(self):
        for platform, archs in PLATFORM_ARCH_TRIPLES.items():
            for arch, variants in archs.items():
                assert len(variants) > 0, f"{platform}/{arch}"

    def test_records_restate_their_key_path(self):
        for platform, arch, record in _records():
            assert record.platform == platform
            assert record.arch == arch

    def test_triples_are_unique(self):
        triples = [record.triple for _, _, record in _records()]
        assert len(triples) == len(set(triples))

    def test_strings_are_clean(self):
        """Regression: the published data carried a trailing carriage return on most fields."""
        for _, _, record in _records():
            for field, value in record.to_dict().items():
                assert value, field
                assert not has_control_chars(value), (field, value)
                assert not value.endswith("\r")

    def test_artifact_name_prefix(self):
        for platform, arch, record in _records():
            assert record.platform_arch_abi.startswith(f"{platform}-{arch}-")

    def test_artifact_name_ends_with_abi(self):
        for _, _, record in _records():
            assert record.platform_arch_abi.endswith(f"-{record.abi}")

    def test_record_count(self):
        assert sum(1 for _ in _records()) == 36


class TestImmutability:
    """The table is constructed once and never mutated."""

    def test_top_level_is_read_only(self):
        with pytest.raises(TypeError):
            PLATFORM_ARCH_TRIPLES["darwin"] = {}

    def test_platform_level_is_read_only(self):
        with pytest.raises(TypeError):
            PLATFORM_ARCH_TRIPLES["linux"]["x64"] = ()

    def test_variants_are_tuples(self):
        assert isinstance(PLATFORM_ARCH_TRIPLES["linux"]["x64"], tuple)

    def test_records_are_frozen(self):
        record = PLATFORM_ARCH_TRIPLES["linux"]["x64"][0]
        with pytest.raises(AttributeError):
            record.triple = "changed"


class TestVariantRecord:
    """Exterior (dict) form of a record."""

    def test_to_dict_uses_exterior_names(self):
        record = PLATFORM_ARCH_TRIPLES["win32"]["arm64"][0]
        assert record.to_dict() == {
            "triple": "aarch64-pc-windows-msvc",
            "platformArchABI": "win32-arm64-msvc",
            "platform": "win32",
            "arch": "arm64",
            "abi": "msvc",
        }

    def test_from_dict_strips_carriage_returns(self):
        record = VariantRecord.from_dict({
            "triple": "x86_64-unknown-linux-musl\r",
            "platformArchABI": "linux-x64-musl\r",
            "platform": "linux",
            "arch": "x64",
            "abi": "musl\r",
        })
        assert record.triple == "x86_64-unknown-linux-musl"
        assert record.platform_arch_abi == "linux-x64-musl"
        assert record.abi == "musl"

    def test_from_dict_missing_field(self):
        with pytest.raises(KeyError):
            VariantRecord.from_dict({"triple": "x", "platform": "linux", "arch": "x64", "abi": "gnu"})

    def test_from_dict_rejects_non_string(self):
        with pytest.raises(TypeError):
            VariantRecord.from_dict({
                "triple": 1,
                "platformArchABI": "linux-x64-gnu",
                "platform": "linux",
                "arch": "x64",
                "abi": "gnu",
            })


class TestCleanText:
    """clean_text() normalization."""

    @pytest.mark.parametrize("raw,expected", [
        ("gnu\r", "gnu"),
        ("gnu\r\n", "gnu"),
        ("  msvc ", "msvc"),
        ("mu\x00sl", "musl"),
        ("linux-x64-gnu", "linux-x64-gnu"),
    ])
    def test_clean_text(self, raw, expected):
        assert clean_text(raw) == expected

    def test_freeze_table_cleans_keys(self):
        table = freeze_table({
            "linux\r": {
                "x64\r": [{
                    "triple": "x86_64-unknown-linux-gnu\r",
                    "platformArchABI": "linux-x64-gnu\r",
                    "platform": "linux",
                    "arch": "x64",
                    "abi": "gnu\r",
                }],
            },
        })
        assert list(table) == ["linux"]
        assert list(table["linux"]) == ["x64"]
        assert table["linux"]["x64"][0].triple == "x86_64-unknown-linux-gnu"

    def test_freeze_table_rejects_keys_equal_after_cleaning(self):
        record = {
            "triple": "x86_64-unknown-linux-gnu",
            "platformArchABI": "linux-x64-gnu",
            "platform": "linux",
            "arch": "x64",
            "abi": "gnu",
        }
        with pytest.raises(ValueError, match="duplicate arch key linux/x64"):
            freeze_table({"linux": {"x64": [record], "x64\r": [dict(record, triple="other")]}})
