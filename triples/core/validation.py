"""
Consistency checks for a triple table.
"""
from typing import Dict, List, Tuple

from .logger import setup_logger
from .table import PLATFORM_ARCH_TRIPLES, Table, has_control_chars

logger = setup_logger(__name__)


def validate_table(table: Table = PLATFORM_ARCH_TRIPLES) -> List[str]:
    """
    Check a table against the invariants consumers rely on.

    - every (platform, arch) list is non-empty
    - each record restates its enclosing platform and arch
    - no two records share a target triple
    - no field is empty or carries control characters
    - platformArchABI starts with "<platform>-<arch>-"

    Args:
        table: Table to check (defaults to the bundled one)

    Returns:
        List of problem descriptions, empty when the table is consistent
    """
    problems: List[str] = []
    seen_triples: Dict[str, Tuple[str, str]] = {}

    for platform, archs in table.items():
        if not archs:
            problems.append(f"{platform}: no architectures")
        for arch, variants in archs.items():
            where = f"{platform}/{arch}"
            if not variants:
                problems.append(f"{where}: empty variant list")
                continue

            for index, record in enumerate(variants):
                label = f"{where}[{index}]"
                for field, value in record.to_dict().items():
                    if not value:
                        problems.append(f"{label}: empty {field}")
                    elif has_control_chars(value):
                        problems.append(f"{label}: control characters in {field} {value!r}")

                if record.platform != platform:
                    problems.append(f"{label}: platform {record.platform!r} does not match key {platform!r}")
                if record.arch != arch:
                    problems.append(f"{label}: arch {record.arch!r} does not match key {arch!r}")

                prefix = f"{platform}-{arch}-"
                if record.platform_arch_abi and not record.platform_arch_abi.startswith(prefix):
                    problems.append(
                        f"{label}: platformArchABI {record.platform_arch_abi!r} does not start with {prefix!r}"
                    )

                if record.triple in seen_triples:
                    first = "/".join(seen_triples[record.triple])
                    problems.append(f"{label}: duplicate triple {record.triple!r} (first seen under {first})")
                else:
                    seen_triples[record.triple] = (platform, arch)

    if problems:
        logger.warning(f"Table validation found {len(problems)} problem(s)")
    else:
        logger.debug(f"Table valid: {len(seen_triples)} triples")
    return problems
