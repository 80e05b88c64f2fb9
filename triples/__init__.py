"""
platform-triples: (platform, arch) -> compiler target triples for prebuilt native binaries.
"""
from triples.core.lookup import (
    all_platforms,
    all_records,
    architectures_for,
    find_by_artifact_name,
    find_by_triple,
    lookup,
    supported_targets,
)
from triples.core.table import PLATFORM_ARCH_TRIPLES, VariantRecord

__version__ = "0.1.0"

__all__ = [
    "PLATFORM_ARCH_TRIPLES",
    "VariantRecord",
    "all_platforms",
    "all_records",
    "architectures_for",
    "find_by_artifact_name",
    "find_by_triple",
    "lookup",
    "supported_targets",
]
