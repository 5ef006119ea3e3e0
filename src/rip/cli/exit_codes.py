"""Exit codes for the rip-install CLI."""

EXIT_SUCCESS = 0
EXIT_INSTALL_FAILURE = 1
EXIT_INVALID_USAGE = 2
