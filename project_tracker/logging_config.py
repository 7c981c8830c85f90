"""
Logging configuration for the project tracker service.

Plain-text records on stderr; the level comes from the app config
(``LOG_LEVEL``).
"""

import logging
import sys


LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_configured = False


def setup_logging(level="INFO"):
    """Attach a stderr handler to the package logger once, then adjust the level."""
    global _configured

    package_logger = logging.getLogger("project_tracker")
    package_logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))

    if _configured:
        return package_logger

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    package_logger.addHandler(handler)
    package_logger.propagate = True
    _configured = True
    return package_logger
