"""Install command implementation."""

from __future__ import annotations

import sys
from argparse import Namespace
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from rip.config.loader import RipConfig

from rip.bootstrap.errors import InstallError
from rip.bootstrap.installer import REMEDIATION_STEPS, Installer
from rip.bootstrap.paths import RipPaths
from rip.bootstrap.platform import detect_platform
from rip.cli.commands import Command
from rip.cli.exit_codes import EXIT_INSTALL_FAILURE, EXIT_SUCCESS
from rip.core.logging import get_logger

LOGGER = get_logger(__name__)


def print_remediation(error: Exception) -> None:
    """Print the failure cause and manual alternatives to stderr."""
    print(f"Installation failed: {error}", file=sys.stderr)
    print("", file=sys.stderr)
    print("You can try:", file=sys.stderr)
    for number, step in enumerate(REMEDIATION_STEPS, 1):
        print(f"   {number}. {step}", file=sys.stderr)


class InstallCommand(Command):
    """Downloads the scanner binary into the install root."""

    @property
    def name(self) -> str:
        """Command identifier."""
        return "install"

    def execute(self, args: Namespace, config: "RipConfig") -> int:
        """Run the installer and report the outcome.

        Returns:
            0 on success (including an already-present binary), 1 on any
            fatal installation error.
        """
        install_root = config.resolve_install_root(getattr(args, "install_root", None))
        installer = Installer(
            paths=RipPaths(install_root),
            platform_key=detect_platform(),
            max_redirects=config.max_redirects,
            timeout=config.timeout,
            progress=print,
        )

        try:
            result = installer.install()
        except InstallError as e:
            LOGGER.debug("Installation failed", exc_info=True)
            print_remediation(e)
            return EXIT_INSTALL_FAILURE

        LOGGER.info(f"Scanner binary at {result.binary_path}")
        return EXIT_SUCCESS
