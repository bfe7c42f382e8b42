"""Log output for the ``zipit`` command.

Library modules only create loggers; handlers are installed here, once per
CLI invocation.
"""

from __future__ import annotations

import logging
import sys


LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def setup_logging(level: str = "INFO") -> None:
    """Send records at ``level`` and above to stderr, keeping stdout for command output.

    Unknown level names fall back to INFO. Calling it again replaces the
    handler rather than stacking a second one.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    root = logging.getLogger()
    root.setLevel(log_level)
    for handler in root.handlers[:]:
        root.removeHandler(handler)

    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(stream_handler)
