"""
Logging helpers for cliki.

Diagnostics go to stderr so they never mix with page output that the
viewer or git writes to stdout.
"""

from __future__ import annotations

import logging
import sys

_LEVELS = (logging.WARNING, logging.INFO, logging.DEBUG)


def configure_logging(verbosity: int) -> None:
    """
    Configure the root logger from the number of ``--verbose`` flags.

    No flag logs warnings only, one adds progress messages and two or
    more add every external command line.
    """

    level = _LEVELS[max(0, min(verbosity, len(_LEVELS) - 1))]
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="cliki: %(levelname)s %(name)s: %(message)s",
    )
