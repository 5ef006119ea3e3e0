"""Allow ``python -m rip`` to behave like the ``rip`` launcher."""

from rip.launcher import main

main()
