"""Validation of the locally installed scanner binary."""

from __future__ import annotations

import os
from enum import Enum
from pathlib import Path

from rip.core.logging import get_logger

LOGGER = get_logger(__name__)


class ToolStatus(str, Enum):
    """Status of the scanner binary."""

    PRESENT = "present"
    MISSING = "missing"
    NOT_EXECUTABLE = "not_executable"


def validate_binary(path: Path, *, check_executable: bool = True) -> ToolStatus:
    """Validate the scanner binary at ``path``.

    Args:
        path: Path to the binary.
        check_executable: Skip the execute-permission check when False
            (Windows has no executable bit).

    Returns:
        ToolStatus indicating whether the binary is present and executable.
    """
    if not path.is_file():
        LOGGER.debug(f"Binary missing at {path}")
        return ToolStatus.MISSING

    if check_executable and not os.access(path, os.X_OK):
        LOGGER.debug(f"Binary at {path} is not executable")
        return ToolStatus.NOT_EXECUTABLE

    return ToolStatus.PRESENT
