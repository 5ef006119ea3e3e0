"""Installation of the prebuilt rip scanner binary.

Handles:
- Resolving the binary for the current platform
- Skipping work when the binary is already on disk
- Locating the matching asset on the latest GitHub release
- Streaming it into <install-root>/bin/ and marking it executable
"""

from __future__ import annotations

import stat
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Optional
from urllib.request import OpenerDirector

from rip.bootstrap.download import DEFAULT_MAX_REDIRECTS, download_file
from rip.bootstrap.errors import AssetNotFoundError, InstallDirectoryError
from rip.bootstrap.paths import RipPaths
from rip.bootstrap.platform import (
    WINDOWS,
    BinarySpec,
    PlatformKey,
    detect_platform,
    resolve_binary_spec,
)
from rip.bootstrap.release import (
    GITHUB_REPOSITORY,
    LATEST_RELEASE_URL,
    USER_AGENT,
    fetch_latest_release,
)
from rip.core.logging import get_logger

LOGGER = get_logger(__name__)

ProgressCallback = Callable[[str], None]

RELEASES_PAGE_URL = f"https://github.com/{GITHUB_REPOSITORY}/releases"
ISSUES_URL = f"https://github.com/{GITHUB_REPOSITORY}/issues"

REMEDIATION_STEPS = (
    "Building from source: git clone https://github.com/"
    f"{GITHUB_REPOSITORY} && cd rip && cargo build --release",
    f"Downloading manually from: {RELEASES_PAGE_URL}",
    f"Reporting this issue: {ISSUES_URL}",
)


def _silent(_msg: str) -> None:
    pass


@dataclass(frozen=True)
class InstallResult:
    """Outcome of a successful install run.

    Attributes:
        binary_path: Location of the scanner binary.
        spec: Binary names resolved for the platform.
        downloaded: False when an existing binary was reused.
        executable: False when the executable bit could not be set.
    """

    binary_path: Path
    spec: BinarySpec
    downloaded: bool
    executable: bool = True


@dataclass
class Installer:
    """Installs the scanner binary for one platform into one install root."""

    paths: RipPaths
    platform_key: PlatformKey = field(default_factory=detect_platform)
    release_url: str = LATEST_RELEASE_URL
    max_redirects: int = DEFAULT_MAX_REDIRECTS
    timeout: Optional[float] = None
    progress: ProgressCallback = _silent
    opener: Optional[OpenerDirector] = None

    def install(self) -> InstallResult:
        """Install the binary unless it is already present.

        Returns:
            InstallResult describing what happened.

        Raises:
            UnsupportedPlatformError: If no binary exists for this platform.
            InstallDirectoryError: If the bin directory cannot be created.
            DownloadError: If the release API or the download fails.
            ReleaseMetadataError: If the release document cannot be parsed.
            AssetNotFoundError: If the release lacks this platform's asset.
        """
        self.progress("Installing RIP vulnerability scanner...")

        spec = resolve_binary_spec(self.platform_key.os, self.platform_key.arch)
        binary_path = self.paths.binary_path(spec)

        try:
            self.paths.ensure_directories()
        except OSError as e:
            raise InstallDirectoryError(f"Cannot create {self.paths.bin_dir}: {e}") from e

        if binary_path.exists():
            LOGGER.info(f"Binary already present at {binary_path}")
            self.progress("Binary already exists, skipping download")
            return InstallResult(binary_path=binary_path, spec=spec, downloaded=False)

        self.progress(f"Downloading {spec.remote_name} for {self.platform_key}...")

        release = fetch_latest_release(
            self.release_url,
            timeout=self.timeout,
            max_redirects=self.max_redirects,
            opener=self.opener,
        )

        asset = release.find_asset(spec.remote_name)
        if asset is None:
            raise AssetNotFoundError(f"Binary not found for platform {self.platform_key}")

        LOGGER.info(f"Downloading {asset.name} from {asset.url}")
        download_file(
            asset.url,
            binary_path,
            headers={"User-Agent": USER_AGENT},
            timeout=self.timeout,
            max_redirects=self.max_redirects,
            opener=self.opener,
        )

        executable = True
        if self.platform_key.os != WINDOWS:
            executable = self._make_executable(binary_path)

        self.progress("RIP vulnerability scanner installed successfully!")
        self.progress("Run with: rip")
        return InstallResult(
            binary_path=binary_path,
            spec=spec,
            downloaded=True,
            executable=executable,
        )

    def _make_executable(self, binary_path: Path) -> bool:
        """Add the executable bits; failure is only a warning."""
        try:
            mode = binary_path.stat().st_mode
            binary_path.chmod(mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        except OSError as e:
            LOGGER.warning(f"Could not set executable permissions on {binary_path}: {e}")
            self.progress("Warning: Could not set executable permissions")
            return False
        return True


def install(
    install_root: Optional[Path] = None,
    *,
    platform_key: Optional[PlatformKey] = None,
    max_redirects: int = DEFAULT_MAX_REDIRECTS,
    timeout: Optional[float] = None,
    progress: Optional[ProgressCallback] = None,
) -> InstallResult:
    """Install the scanner binary into ``install_root`` (default ~/.rip)."""
    paths = RipPaths(install_root) if install_root is not None else RipPaths.default()
    installer = Installer(
        paths=paths,
        platform_key=platform_key or detect_platform(),
        max_redirects=max_redirects,
        timeout=timeout,
        progress=progress or _silent,
    )
    return installer.install()
