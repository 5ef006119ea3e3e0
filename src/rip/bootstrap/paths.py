"""Path management for the rip install root.

Directory structure:
    <install-root>/
        bin/
            rip-linux-x64   - Downloaded scanner binary (name varies by platform)
        config.yml          - Optional settings file
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import ClassVar, Union

from rip.bootstrap.platform import BinarySpec

# Default directory name under user home
DEFAULT_HOME_DIR_NAME = ".rip"

CONFIG_FILE_NAME = "config.yml"


def get_rip_home() -> Path:
    """Get the default install root (~/.rip)."""
    return Path.home() / DEFAULT_HOME_DIR_NAME


@dataclass(frozen=True)
class RipPaths:
    """Paths derived from an explicit install root."""

    home: Path

    _BIN_DIR: ClassVar[str] = "bin"

    @classmethod
    def default(cls) -> "RipPaths":
        """Create paths from the default install root."""
        return cls(get_rip_home())

    @property
    def bin_dir(self) -> Path:
        """Directory holding the scanner binary."""
        return self.home / self._BIN_DIR

    @property
    def config_file(self) -> Path:
        return self.home / CONFIG_FILE_NAME

    def binary_path(self, binary: Union[BinarySpec, str]) -> Path:
        """Path of the local binary for a spec or a bare file name."""
        name = binary.local_name if isinstance(binary, BinarySpec) else binary
        return self.bin_dir / name

    def ensure_directories(self) -> None:
        """Create the bin directory (and any missing parents)."""
        self.bin_dir.mkdir(parents=True, exist_ok=True)
