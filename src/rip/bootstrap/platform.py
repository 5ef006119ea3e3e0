"""Platform detection and binary naming for the rip scanner.

Maps the host OS and CPU architecture to the name of the prebuilt binary
on disk and the name of the matching GitHub release asset.
"""

from __future__ import annotations

import platform
import sys
from dataclasses import dataclass

from rip.bootstrap.errors import UnsupportedPlatformError

# OS identifiers (as reported by sys.platform)
WINDOWS = "win32"
MACOS = "darwin"
LINUX = "linux"

SUPPORTED_OS = frozenset({WINDOWS, MACOS, LINUX})

ARM64 = "arm64"
X64 = "x64"

# Binary name used when the OS is unknown to the launcher
GENERIC_BINARY_NAME = "rip"

# Architecture normalization map
_ARCH_MAP = {
    "x86_64": X64,
    "amd64": X64,
    "x64": X64,
    "arm64": ARM64,
    "aarch64": ARM64,
}

# OS normalization map for platform.system() style names
_OS_MAP = {
    "windows": WINDOWS,
    "win32": WINDOWS,
    "darwin": MACOS,
    "linux": LINUX,
}


@dataclass(frozen=True)
class PlatformKey:
    """Host operating system and CPU architecture.

    Attributes:
        os: OS identifier (win32, darwin, linux, or anything else reported).
        arch: Normalized architecture (arm64, x64, or the raw lowercase value).
    """

    os: str
    arch: str

    def __str__(self) -> str:
        return f"{self.os}-{self.arch}"


@dataclass(frozen=True)
class BinarySpec:
    """Local file name and release asset name for one platform."""

    local_name: str
    remote_name: str


def normalize_arch(machine: str) -> str:
    """Normalize a raw architecture string.

    Known aliases collapse to ``arm64`` or ``x64``; anything else is
    returned lowercased so it still falls in the default bucket.
    """
    lowered = machine.lower()
    return _ARCH_MAP.get(lowered, lowered)


def normalize_os(system: str) -> str:
    """Normalize an OS name from sys.platform or platform.system()."""
    lowered = system.lower()
    if lowered.startswith("linux"):
        return LINUX
    return _OS_MAP.get(lowered, lowered)


def detect_platform() -> PlatformKey:
    """Detect the current platform. Never raises."""
    return PlatformKey(
        os=normalize_os(sys.platform),
        arch=normalize_arch(platform.machine()),
    )


def _posix_binary_name(prefix: str, arch: str) -> str:
    return f"{prefix}-arm64" if arch == ARM64 else f"{prefix}-x64"


def resolve_binary_spec(os_name: str, arch: str) -> BinarySpec:
    """Resolve the binary names for an OS/architecture pair.

    Args:
        os_name: OS identifier (win32, darwin, linux).
        arch: Architecture identifier; only ``arm64`` is distinguished on
            macOS and Linux, every other value maps to the x64 build.

    Returns:
        BinarySpec for the platform.

    Raises:
        UnsupportedPlatformError: If the OS has no prebuilt binary.
    """
    if os_name == WINDOWS:
        return BinarySpec(local_name="rip.exe", remote_name="rip-windows-x64.exe")
    if os_name == MACOS:
        name = _posix_binary_name("rip-macos", arch)
        return BinarySpec(local_name=name, remote_name=name)
    if os_name == LINUX:
        name = _posix_binary_name("rip-linux", arch)
        return BinarySpec(local_name=name, remote_name=name)
    raise UnsupportedPlatformError(os_name, arch)


def launcher_binary_name(os_name: str, arch: str) -> str:
    """Local binary name for the launcher; falls back to ``rip``."""
    try:
        return resolve_binary_spec(os_name, arch).local_name
    except UnsupportedPlatformError:
        return GENERIC_BINARY_NAME
