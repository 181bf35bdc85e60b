"""
Logging Setup

Configures the root logger once with a pipe-separated format. Modules log
through logging.getLogger(__name__).
"""

import logging
import sys


LOG_FORMAT = (
    "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
)


def configure_logging(level="INFO"):
    """Attach a stdout handler to the root logger unless one is already set up."""
    root = logging.getLogger()
    if root.handlers:
        return
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    root.setLevel(level)
