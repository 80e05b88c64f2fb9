#!/usr/bin/env python3
"""
CI helper: print the host's platform and arch keys, then the candidate
artifact names (platformArchABI), one per line.
Output (e.g. on glibc x86_64 Linux):
    linux
    x64
    linux-x64-gnu
    linux-x64-gnux32
    linux-x64-musl
Release jobs pick the artifact suffix from these lines. ASCII-only for Windows cp1252.
Exits 1 when the host is not in the table.
"""

import sys
from pathlib import Path

# Allow running from a checkout without installing the package
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from triples.core.host import host_target  # noqa: E402
from triples.core.lookup import lookup  # noqa: E402


def candidate_names(platform: str, arch: str) -> list[str]:
    """Artifact names for (platform, arch), deduplicated, in table order."""
    names = []
    for record in lookup(platform, arch):
        if record.platform_arch_abi not in names:
            names.append(record.platform_arch_abi)
    return names


if __name__ == "__main__":
    platform, arch = host_target()
    print(platform)
    print(arch)
    names = candidate_names(platform, arch)
    for name in names:
        print(name)
    sys.exit(0 if names else 1)
