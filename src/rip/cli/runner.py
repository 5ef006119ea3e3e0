"""CLI runner orchestration.

This module handles command dispatch and execution for the rip-install CLI.
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version
from typing import Iterable, Optional

from rip.cli.arguments import build_parser
from rip.cli.commands.install import InstallCommand
from rip.cli.commands.status import StatusCommand
from rip.cli.exit_codes import EXIT_INVALID_USAGE, EXIT_SUCCESS
from rip.config.loader import ConfigError, load_config
from rip.core.logging import configure_logging, get_logger

LOGGER = get_logger(__name__)

DISTRIBUTION_NAME = "rip-scanner"


def get_version() -> str:
    """Get the installer version.

    Returns:
        Version string from package metadata or fallback.
    """
    try:
        return version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        # Fallback for editable installs that have not yet built metadata.
        from rip import __version__
        return __version__


class CLIRunner:
    """Orchestrates CLI execution with subcommand dispatch."""

    def __init__(self) -> None:
        self.parser = build_parser()
        self._version = get_version()
        self.install_cmd = InstallCommand()
        self.status_cmd = StatusCommand(version=self._version)

    def run(self, argv: Optional[Iterable[str]] = None) -> int:
        """Run the CLI.

        Args:
            argv: Command-line arguments (defaults to sys.argv).

        Returns:
            Exit code.
        """
        argv_list = list(argv) if argv is not None else None
        args = self.parser.parse_args(argv_list)

        configure_logging(
            debug=args.debug,
            verbose=args.verbose,
            quiet=args.quiet,
        )

        if args.version:
            print(self._version)
            return EXIT_SUCCESS

        try:
            config = load_config(args.config)
        except ConfigError as e:
            LOGGER.error(str(e))
            return EXIT_INVALID_USAGE

        if args.command == "status":
            return self.status_cmd.execute(args, config)

        # No command given means install, matching a post-install hook.
        return self.install_cmd.execute(args, config)
