"""Command-line interface for installing the rip scanner binary."""

from __future__ import annotations

import sys
from typing import Iterable, Optional

from rip.cli.runner import CLIRunner


def main(argv: Optional[Iterable[str]] = None) -> int:
    """Entry point for ``rip-install``."""
    return CLIRunner().run(argv)


def entrypoint() -> None:
    sys.exit(main())


__all__ = ["main", "entrypoint"]
