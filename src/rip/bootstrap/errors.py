"""Exception hierarchy for binary installation failures."""

from __future__ import annotations

from typing import Optional


class InstallError(Exception):
    """Base class for fatal installer failures."""

    pass


class UnsupportedPlatformError(InstallError, ValueError):
    """No prebuilt binary exists for this OS/architecture pair."""

    def __init__(self, os_name: str, arch: str) -> None:
        self.os_name = os_name
        self.arch = arch
        super().__init__(f"Unsupported platform: {os_name}-{arch}")


class DownloadError(InstallError):
    """Network or HTTP failure while talking to the release host."""

    def __init__(self, message: str, status: Optional[int] = None) -> None:
        self.status = status
        super().__init__(message)


class TooManyRedirectsError(DownloadError):
    """Redirect chain exceeded the configured hop limit."""

    pass


class ReleaseMetadataError(InstallError):
    """Release metadata could not be parsed."""

    pass


class AssetNotFoundError(InstallError):
    """Latest release has no asset for the current platform."""

    pass


class InstallDirectoryError(InstallError):
    """Install root or its bin directory could not be created."""

    pass
