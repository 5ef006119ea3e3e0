"""Logging setup shared by the installer and launcher entry points."""

from __future__ import annotations

import logging
import sys
from typing import Optional

# Root of the package logger hierarchy; everything under rip.* inherits it.
PACKAGE_LOGGER = "rip"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def resolve_level(*, debug: bool = False, verbose: bool = False, quiet: bool = False) -> int:
    """Map CLI flags to a logging level.

    Precedence:
    - quiet → ERROR
    - debug → DEBUG
    - verbose → INFO
    - default → WARNING
    """
    if quiet:
        return logging.ERROR
    if debug:
        return logging.DEBUG
    if verbose:
        return logging.INFO
    return logging.WARNING


def configure_logging(*, debug: bool = False, verbose: bool = False, quiet: bool = False) -> None:
    """Configure logging based on CLI flags.

    Records go to stderr so they never mix with the scanner binary's stdout.
    """
    level = resolve_level(debug=debug, verbose=verbose, quiet=quiet)
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)
    # basicConfig is a no-op once the root logger has handlers.
    logging.getLogger(PACKAGE_LOGGER).setLevel(level)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-level logger."""

    return logging.getLogger(name if name is not None else PACKAGE_LOGGER)
