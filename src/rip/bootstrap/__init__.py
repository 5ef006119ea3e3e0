"""
Bootstrap module for the rip scanner binary.

This module handles:
- Platform detection and binary naming
- Install root and binary path management (~/.rip/bin/)
- Downloading the binary from GitHub releases
- Validating the installed binary
"""

from rip.bootstrap.errors import (
    AssetNotFoundError,
    DownloadError,
    InstallDirectoryError,
    InstallError,
    ReleaseMetadataError,
    TooManyRedirectsError,
    UnsupportedPlatformError,
)
from rip.bootstrap.installer import InstallResult, Installer, install
from rip.bootstrap.paths import RipPaths, get_rip_home
from rip.bootstrap.platform import (
    BinarySpec,
    PlatformKey,
    detect_platform,
    launcher_binary_name,
    resolve_binary_spec,
)
from rip.bootstrap.validation import ToolStatus, validate_binary

__all__ = [
    "AssetNotFoundError",
    "BinarySpec",
    "DownloadError",
    "InstallDirectoryError",
    "InstallError",
    "InstallResult",
    "Installer",
    "PlatformKey",
    "ReleaseMetadataError",
    "RipPaths",
    "TooManyRedirectsError",
    "ToolStatus",
    "UnsupportedPlatformError",
    "detect_platform",
    "get_rip_home",
    "install",
    "launcher_binary_name",
    "resolve_binary_spec",
    "validate_binary",
]
