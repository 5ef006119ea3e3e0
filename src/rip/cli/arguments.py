"""Argument parser construction for the rip-install CLI.

This module builds the argument parser with subcommands:
- rip-install install - Download the scanner binary (default)
- rip-install status  - Show platform and binary status
"""

from __future__ import annotations

import argparse
from pathlib import Path


def _add_global_options(parser: argparse.ArgumentParser) -> None:
    """Add global options available to all commands."""
    parser.add_argument(
        "--version",
        action="store_true",
        help="Show rip installer version and exit.",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging.",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose (info-level) logging.",
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Reduce logging output to errors only.",
    )
    parser.add_argument(
        "--config",
        metavar="PATH",
        type=Path,
        help="Path to config file (default: ~/.rip/config.yml).",
    )
    parser.add_argument(
        "--install-root",
        metavar="PATH",
        type=Path,
        help="Directory to install into; the binary goes in its bin/ (default: ~/.rip).",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build and return the argument parser for the rip-install CLI.

    Returns:
        Configured ArgumentParser instance with subcommands.
    """
    parser = argparse.ArgumentParser(
        prog="rip-install",
        description="Install the RIP vulnerability scanner binary for this platform.",
        epilog=(
            "Examples:\n"
            "  rip-install                          # Download the binary if missing\n"
            "  rip-install --install-root ./tools   # Install into ./tools/bin\n"
            "  rip-install status                   # Show binary status\n"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    _add_global_options(parser)

    subparsers = parser.add_subparsers(
        dest="command",
        title="commands",
        description="Available commands:",
        metavar="COMMAND",
    )
    subparsers.add_parser(
        "install",
        help="Download the scanner binary unless it already exists (default).",
    )
    subparsers.add_parser(
        "status",
        help="Show platform, install location and binary status.",
    )

    return parser
