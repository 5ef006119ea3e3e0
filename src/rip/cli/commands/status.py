"""Status command implementation."""

from __future__ import annotations

from argparse import Namespace
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from rip.config.loader import RipConfig

from rip.bootstrap.errors import UnsupportedPlatformError
from rip.bootstrap.paths import RipPaths
from rip.bootstrap.platform import WINDOWS, detect_platform, resolve_binary_spec
from rip.bootstrap.validation import ToolStatus, validate_binary
from rip.cli.commands import Command
from rip.cli.exit_codes import EXIT_SUCCESS


class StatusCommand(Command):
    """Shows platform information and scanner binary status."""

    def __init__(self, version: str):
        """Initialize StatusCommand.

        Args:
            version: Current rip installer version string.
        """
        self._version = version

    @property
    def name(self) -> str:
        """Command identifier."""
        return "status"

    def execute(self, args: Namespace, config: "RipConfig") -> int:
        """Execute the status command.

        Returns:
            Exit code (always 0 for status).
        """
        install_root = config.resolve_install_root(getattr(args, "install_root", None))
        paths = RipPaths(install_root)
        platform_key = detect_platform()

        print(f"rip installer version: {self._version}")
        print(f"Platform: {platform_key}")
        print(f"Install root: {paths.home}")
        if config.source is not None:
            print(f"Config file: {config.source}")

        try:
            spec = resolve_binary_spec(platform_key.os, platform_key.arch)
        except UnsupportedPlatformError as e:
            print(f"Binary: {e}")
            return EXIT_SUCCESS

        binary = paths.binary_path(spec)
        status = validate_binary(binary, check_executable=platform_key.os != WINDOWS)
        print(f"Release asset: {spec.remote_name}")
        print(f"Binary: {binary} ({status.value})")

        if status == ToolStatus.MISSING:
            print()
            print("Run 'rip-install' to download the scanner.")
        elif status == ToolStatus.NOT_EXECUTABLE:
            print()
            print(f"Mark it executable with: chmod +x {binary}")

        return EXIT_SUCCESS
