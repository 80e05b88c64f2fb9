"""
Read-only accessors over the platform/arch triple table.

Absence is a normal outcome here: unknown platforms or architectures give an
empty result and callers decide whether that is fatal.
"""
from typing import FrozenSet, Optional, Tuple

from .logger import setup_logger
from .table import PLATFORM_ARCH_TRIPLES, Table, VariantRecord

logger = setup_logger(__name__)


def lookup(platform: str, arch: str, table: Table = PLATFORM_ARCH_TRIPLES) -> Tuple[VariantRecord, ...]:
    """
    Return the variant records for (platform, arch) in authored order.

    Args:
        platform: Node-style platform name (e.g. "linux", "win32")
        arch: Node-style architecture name (e.g. "x64", "arm64")
        table: Table to search (defaults to the bundled one)

    Returns:
        Tuple of records, empty if the pair is not supported
    """
    variants = table.get(platform, {}).get(arch, ())
    if not variants:
        logger.debug(f"No variants for {platform}/{arch}")
    return variants


def all_platforms(table: Table = PLATFORM_ARCH_TRIPLES) -> FrozenSet[str]:
    """Every platform key in the table."""
    return frozenset(table)


def architectures_for(platform: str, table: Table = PLATFORM_ARCH_TRIPLES) -> FrozenSet[str]:
    """Architectures supported for platform; empty for an unknown platform."""
    return frozenset(table.get(platform, {}))


def supported_targets(table: Table = PLATFORM_ARCH_TRIPLES) -> Tuple[Tuple[str, str], ...]:
    """All (platform, arch) pairs in authored order."""
    return tuple(
        (platform, arch)
        for platform, archs in table.items()
        for arch in archs
    )


def all_records(table: Table = PLATFORM_ARCH_TRIPLES) -> Tuple[VariantRecord, ...]:
    """Flatten the table: platform, then arch, then variant, all in authored order."""
    return tuple(
        record
        for archs in table.values()
        for variants in archs.values()
        for record in variants
    )


def find_by_triple(triple: str, table: Table = PLATFORM_ARCH_TRIPLES) -> Optional[VariantRecord]:
    """Return the record whose target triple is `triple`, or None."""
    for record in all_records(table):
        if record.triple == triple:
            return record
    return None


def find_by_artifact_name(name: str, table: Table = PLATFORM_ARCH_TRIPLES) -> Tuple[VariantRecord, ...]:
    """
    Return every record using `name` as its platformArchABI.

    Several triples may share one artifact name (plain arm and armv7 do).
    """
    return tuple(record for record in all_records(table) if record.platform_arch_abi == name)
