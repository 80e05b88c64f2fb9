"""
Host detection: map the running interpreter's platform and CPU onto the
table's Node-style keys (process.platform / process.arch naming).
"""
import platform
import sys
from typing import Tuple

from .logger import setup_logger
from .lookup import lookup
from .table import VariantRecord

logger = setup_logger(__name__)

_MACHINE_ARCHS = {
    "x86_64": "x64",
    "amd64": "x64",
    "x64": "x64",
    "i386": "ia32",
    "i486": "ia32",
    "i586": "ia32",
    "i686": "ia32",
    "x86": "ia32",
    "aarch64": "arm64",
    "arm64": "arm64",
    "armv6l": "arm",
    "armv7l": "arm",
    "armv8l": "arm",
    "armv5tel": "armv5te",
    "ppc": "powerpc",
    "ppc64": "powerpc64",
    "ppc64le": "ppc64",
    "riscv64": "riscv64",
    "s390x": "s390x",
    "sparc64": "sparc64",
    "mips": "mips",
    "mipsel": "mipsel",
    "mips64": "mips64",
    "mips64el": "mips64el",
}

_LITTLE_ENDIAN_MIPS = {
    "mips": "mipsel",
    "mips64": "mips64el",
}


def host_platform() -> str:
    """Return the Node-style platform name: win32, linux, darwin, freebsd, ..."""
    if sys.platform == "win32" or sys.platform == "cygwin":
        return "win32"
    if sys.platform.startswith("linux"):
        return "linux"
    if sys.platform == "darwin":
        return "darwin"
    for prefix in ("freebsd", "openbsd", "netbsd"):
        if sys.platform.startswith(prefix):
            return prefix
    if sys.platform.startswith("sunos"):
        return "sunos"
    if sys.platform.startswith("aix"):
        return "aix"
    return sys.platform


def host_arch() -> str:
    """Return the Node-style arch name, or the raw machine string lowercased."""
    m = (platform.machine() or "").strip().lower()
    # Linux reports mips/mips64 for both byte orders
    if m in _LITTLE_ENDIAN_MIPS and sys.byteorder == "little":
        return _LITTLE_ENDIAN_MIPS[m]
    if m in _MACHINE_ARCHS:
        return _MACHINE_ARCHS[m]
    logger.debug(f"Unmapped machine type: {m!r}")
    return m or "unknown"


def host_target() -> Tuple[str, str]:
    """(platform, arch) of the running host."""
    return host_platform(), host_arch()


def host_candidates() -> Tuple[VariantRecord, ...]:
    """Variant records for the running host; empty if unsupported."""
    plat, arch = host_target()
    candidates = lookup(plat, arch)
    logger.info(f"Host {plat}/{arch}: {len(candidates)} candidate(s)")
    return candidates
