"""Launcher for the installed rip scanner binary.

Runs the platform binary as a child process with the caller's arguments and
standard streams, then exits with the child's status. The launcher defines
no options of its own; everything on the command line belongs to the
scanner.
"""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from rip.bootstrap.paths import RipPaths
from rip.bootstrap.platform import detect_platform, launcher_binary_name
from rip.config.loader import ConfigError, load_config
from rip.core.logging import get_logger

LOGGER = get_logger(__name__)

EXIT_SPAWN_FAILURE = 1


def resolve_install_root() -> Path:
    """Install root from ~/.rip/config.yml, or the default.

    A broken config file is logged and ignored.
    """
    try:
        return load_config().resolve_install_root()
    except ConfigError as e:
        LOGGER.warning(f"Ignoring config: {e}")
        return RipPaths.default().home


def binary_path(install_root: Optional[Path] = None) -> Path:
    """Path of the scanner binary for the current platform."""
    key = detect_platform()
    paths = RipPaths(install_root) if install_root is not None else RipPaths(resolve_install_root())
    return paths.binary_path(launcher_binary_name(key.os, key.arch))


def _exit_code(returncode: Optional[int]) -> int:
    # None or negative (killed by a signal) has no exit code to forward.
    if returncode is None or returncode < 0:
        return 0
    return returncode


def run(argv: Sequence[str], install_root: Optional[Path] = None) -> int:
    """Run the scanner binary with ``argv`` and return its exit code.

    Args:
        argv: Arguments passed through unchanged.
        install_root: Install root; defaults to the configured one.

    Returns:
        The child's exit code, or 1 if it could not be started.
    """
    path = binary_path(install_root)
    cmd: List[str] = [str(path), *argv]
    LOGGER.debug(f"Launching {cmd}")

    try:
        proc = subprocess.Popen(cmd, shell=False)
    except OSError as e:
        print(f"Failed to start RIP: {e.strerror or e}", file=sys.stderr)
        return EXIT_SPAWN_FAILURE

    while True:
        try:
            returncode = proc.wait()
            break
        except KeyboardInterrupt:
            # The child got the same SIGINT; let it decide how to exit.
            continue

    return _exit_code(returncode)


def main() -> None:
    """Console entry point for ``rip``."""
    sys.exit(run(sys.argv[1:]))


if __name__ == "__main__":
    main()
