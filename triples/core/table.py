"""
Platform / architecture -> target triple table.

The authored mapping below is keyed the way Node reports the running system
(process.platform, then process.arch). Each leaf lists the variant records
for that pair in authored order, e.g. the GNU-linked variant before the musl one.

The published table had a stray carriage return at the end of most string
fields. Every string is passed through clean_text() when the table is built,
so neither this literal nor a resource file loaded later can reintroduce it.
"""
import re
from dataclasses import dataclass, asdict
from types import MappingProxyType
from typing import Any, Dict, Mapping, Tuple

# C0 controls, DEL and C1 controls
_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f-\x9f]")

RECORD_FIELDS = ("triple", "platformArchABI", "platform", "arch", "abi")


def clean_text(value: str) -> str:
    """Strip surrounding whitespace and drop control characters."""
    return _CONTROL_CHARS.sub("", value).strip()


def has_control_chars(value: str) -> bool:
    """True if value contains any control character."""
    return bool(_CONTROL_CHARS.search(value))


@dataclass(frozen=True)
class VariantRecord:
    """One ABI variant of a (platform, arch) pair."""

    triple: str
    platform_arch_abi: str
    platform: str
    arch: str
    abi: str

    def to_dict(self) -> Dict[str, str]:
        """Return the record with its exterior field names (platformArchABI)."""
        data = asdict(self)
        return {
            "triple": data["triple"],
            "platformArchABI": data["platform_arch_abi"],
            "platform": data["platform"],
            "arch": data["arch"],
            "abi": data["abi"],
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "VariantRecord":
        """
        Build a record from its exterior form, normalizing every string.

        Raises:
            KeyError: a field is missing
            TypeError: a field is not a string
        """
        values = {}
        for field in RECORD_FIELDS:
            value = data[field]
            if not isinstance(value, str):
                raise TypeError(f"field {field!r} must be a string, got {type(value).__name__}")
            values[field] = clean_text(value)
        return cls(
            triple=values["triple"],
            platform_arch_abi=values["platformArchABI"],
            platform=values["platform"],
            arch=values["arch"],
            abi=values["abi"],
        )


Table = Mapping[str, Mapping[str, Tuple[VariantRecord, ...]]]


def freeze_table(raw: Mapping[str, Mapping[str, Any]]) -> Table:
    """
    Turn a nested {platform: {arch: [record dict, ...]}} mapping into read-only views.

    Keys are normalized with clean_text() like the record fields.

    Raises:
        ValueError: two keys at the same level are equal once normalized
    """
    frozen = {}
    for platform, archs in raw.items():
        platform_key = clean_text(platform)
        if platform_key in frozen:
            raise ValueError(f"duplicate platform key {platform_key!r} (from {platform!r})")
        variants_by_arch = {}
        for arch, variants in archs.items():
            arch_key = clean_text(arch)
            if arch_key in variants_by_arch:
                raise ValueError(f"duplicate arch key {platform_key}/{arch_key} (from {arch!r})")
            variants_by_arch[arch_key] = tuple(VariantRecord.from_dict(item) for item in variants)
        frozen[platform_key] = MappingProxyType(variants_by_arch)
    return MappingProxyType(frozen)



_AUTHORED = {
    "win32": {
        "arm64": [
            {
                "triple": "aarch64-pc-windows-msvc",
                "platformArchABI": "win32-arm64-msvc",
                "platform": "win32",
                "arch": "arm64",
                "abi": "msvc"
            }
        ],
        "ia32": [
            {
                "triple": "i686-pc-windows-gnu",
                "platformArchABI": "win32-ia32-gnu",
                "platform": "win32",
                "arch": "ia32",
                "abi": "gnu"
            },
            {
                "triple": "i686-pc-windows-msvc",
                "platformArchABI": "win32-ia32-msvc",
                "platform": "win32",
                "arch": "ia32",
                "abi": "msvc"
            }
        ],
        "x64": [
            {
                "triple": "x86_64-pc-windows-gnu",
                "platformArchABI": "win32-x64-gnu",
                "platform": "win32",
                "arch": "x64",
                "abi": "gnu"
            },
            {
                "triple": "x86_64-pc-windows-msvc",
                "platformArchABI": "win32-x64-msvc",
                "platform": "win32",
                "arch": "x64",
                "abi": "msvc"
            }
        ]
    },
    "linux": {
        "arm64": [
            {
                "triple": "aarch64-unknown-linux-gnu",
                "platformArchABI": "linux-arm64-gnu",
                "platform": "linux",
                "arch": "arm64",
                "abi": "gnu"
            },
            {
                "triple": "aarch64-unknown-linux-musl",
                "platformArchABI": "linux-arm64-musl",
                "platform": "linux",
                "arch": "arm64",
                "abi": "musl"
            }
        ],
        "arm": [
            {
                "triple": "arm-unknown-linux-gnueabi",
                "platformArchABI": "linux-arm-gnueabi",
                "platform": "linux",
                "arch": "arm",
                "abi": "gnueabi"
            },
            {
                "triple": "arm-unknown-linux-gnueabihf",
                "platformArchABI": "linux-arm-gnueabihf",
                "platform": "linux",
                "arch": "arm",
                "abi": "gnueabihf"
            },
            {
                "triple": "arm-unknown-linux-musleabi",
                "platformArchABI": "linux-arm-musleabi",
                "platform": "linux",
                "arch": "arm",
                "abi": "musleabi"
            },
            {
                "triple": "arm-unknown-linux-musleabihf",
                "platformArchABI": "linux-arm-musleabihf",
                "platform": "linux",
                "arch": "arm",
                "abi": "musleabihf"
            },
            {
                "triple": "armv7-unknown-linux-gnueabi",
                "platformArchABI": "linux-arm-gnueabi",
                "platform": "linux",
                "arch": "arm",
                "abi": "gnueabi"
            },
            {
                "triple": "armv7-unknown-linux-gnueabihf",
                "platformArchABI": "linux-arm-gnueabihf",
                "platform": "linux",
                "arch": "arm",
                "abi": "gnueabihf"
            },
            {
                "triple": "armv7-unknown-linux-musleabi",
                "platformArchABI": "linux-arm-musleabi",
                "platform": "linux",
                "arch": "arm",
                "abi": "musleabi"
            },
            {
                "triple": "armv7-unknown-linux-musleabihf",
                "platformArchABI": "linux-arm-musleabihf",
                "platform": "linux",
                "arch": "arm",
                "abi": "musleabihf"
            }
        ],
        "armv5te": [
            {
                "triple": "armv5te-unknown-linux-gnueabi",
                "platformArchABI": "linux-armv5te-gnueabi",
                "platform": "linux",
                "arch": "armv5te",
                "abi": "gnueabi"
            },
            {
                "triple": "armv5te-unknown-linux-musleabi",
                "platformArchABI": "linux-armv5te-musleabi",
                "platform": "linux",
                "arch": "armv5te",
                "abi": "musleabi"
            }
        ],
        "ia32": [
            {
                "triple": "i686-unknown-linux-gnu",
                "platformArchABI": "linux-ia32-gnu",
                "platform": "linux",
                "arch": "ia32",
                "abi": "gnu"
            },
            {
                "triple": "i686-unknown-linux-musl",
                "platformArchABI": "linux-ia32-musl",
                "platform": "linux",
                "arch": "ia32",
                "abi": "musl"
            }
        ],
        "mips": [
            {
                "triple": "mips-unknown-linux-gnu",
                "platformArchABI": "linux-mips-gnu",
                "platform": "linux",
                "arch": "mips",
                "abi": "gnu"
            },
            {
                "triple": "mips-unknown-linux-musl",
                "platformArchABI": "linux-mips-musl",
                "platform": "linux",
                "arch": "mips",
                "abi": "musl"
            }
        ],
        "mips64": [
            {
                "triple": "mips64-unknown-linux-gnuabi64",
                "platformArchABI": "linux-mips64-gnuabi64",
                "platform": "linux",
                "arch": "mips64",
                "abi": "gnuabi64"
            },
            {
                "triple": "mips64-unknown-linux-muslabi64",
                "platformArchABI": "linux-mips64-muslabi64",
                "platform": "linux",
                "arch": "mips64",
                "abi": "muslabi64"
            }
        ],
        "mips64el": [
            {
                "triple": "mips64el-unknown-linux-gnuabi64",
                "platformArchABI": "linux-mips64el-gnuabi64",
                "platform": "linux",
                "arch": "mips64el",
                "abi": "gnuabi64"
            },
            {
                "triple": "mips64el-unknown-linux-muslabi64",
                "platformArchABI": "linux-mips64el-muslabi64",
                "platform": "linux",
                "arch": "mips64el",
                "abi": "muslabi64"
            }
        ],
        "mipsel": [
            {
                "triple": "mipsel-unknown-linux-gnu",
                "platformArchABI": "linux-mipsel-gnu",
                "platform": "linux",
                "arch": "mipsel",
                "abi": "gnu"
            },
            {
                "triple": "mipsel-unknown-linux-musl",
                "platformArchABI": "linux-mipsel-musl",
                "platform": "linux",
                "arch": "mipsel",
                "abi": "musl"
            }
        ],
        "powerpc": [
            {
                "triple": "powerpc-unknown-linux-gnu",
                "platformArchABI": "linux-powerpc-gnu",
                "platform": "linux",
                "arch": "powerpc",
                "abi": "gnu"
            }
        ],
        "powerpc64": [
            {
                "triple": "powerpc64-unknown-linux-gnu",
                "platformArchABI": "linux-powerpc64-gnu",
                "platform": "linux",
                "arch": "powerpc64",
                "abi": "gnu"
            }
        ],
        "ppc64": [
            {
                "triple": "powerpc64le-unknown-linux-gnu",
                "platformArchABI": "linux-ppc64-gnu",
                "platform": "linux",
                "arch": "ppc64",
                "abi": "gnu"
            }
        ],
        "riscv64": [
            {
                "triple": "riscv64gc-unknown-linux-gnu",
                "platformArchABI": "linux-riscv64-gnu",
                "platform": "linux",
                "arch": "riscv64",
                "abi": "gnu"
            }
        ],
        "s390x": [
            {
                "triple": "s390x-unknown-linux-gnu",
                "platformArchABI": "linux-s390x-gnu",
                "platform": "linux",
                "arch": "s390x",
                "abi": "gnu"
            }
        ],
        "sparc64": [
            {
                "triple": "sparc64-unknown-linux-gnu",
                "platformArchABI": "linux-sparc64-gnu",
                "platform": "linux",
                "arch": "sparc64",
                "abi": "gnu"
            }
        ],
        "x64": [
            {
                "triple": "x86_64-unknown-linux-gnu",
                "platformArchABI": "linux-x64-gnu",
                "platform": "linux",
                "arch": "x64",
                "abi": "gnu"
            },
            {
                "triple": "x86_64-unknown-linux-gnux32",
                "platformArchABI": "linux-x64-gnux32",
                "platform": "linux",
                "arch": "x64",
                "abi": "gnux32"
            },
            {
                "triple": "x86_64-unknown-linux-musl",
                "platformArchABI": "linux-x64-musl",
                "platform": "linux",
                "arch": "x64",
                "abi": "musl"
            }
        ]
    }
}


PLATFORM_ARCH_TRIPLES: Table = freeze_table(_AUTHORED)
