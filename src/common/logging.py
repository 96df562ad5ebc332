"""Logging setup shared by the storefront CLIs.

Library modules only create ``logging.getLogger(__name__)`` loggers; the
CLIs attach a single handler to the ``src`` package logger so every module
below it reports in the same format. Log lines go to stderr; stdout is
reserved for the JSON result the CLIs print.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    level: int = logging.INFO,
    module_name: str = "src",
    stream: TextIO | None = None,
) -> logging.Logger:
    """Attach a formatted stream handler to a package logger.

    Calling it again for the same logger returns it unchanged.

    Args:
        level: Logging level (default INFO).
        module_name: Logger to configure; child loggers propagate to it.
        stream: Output stream (default: sys.stderr).
    """
    logger = logging.getLogger(module_name)
    if logger.handlers:
        return logger

    logger.setLevel(level)
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)
    return logger
