"""Logging setup shared by the library, the CLI and the API.

Log records go to stderr so that stdout stays reserved for results
(``app.py --json`` prints machine-readable output there).

Usage:
    from text_analyzer.logger import get_logger
    logger = get_logger(__name__)
"""
from __future__ import annotations

import logging
import sys

_FMT = '%(asctime)s  %(levelname)-8s  %(name)s: %(message)s'
_HANDLER_NAME = "text_analyzer.stderr"


def _configure_root(level: int = logging.INFO) -> None:
    """Attach the stderr handler once, unless something else already configured logging."""
    root = logging.getLogger()
    if root.handlers:
        return
    root.setLevel(level)
    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(_FMT))
    root.addHandler(handler)


def get_logger(name: str, level: int = logging.INFO) -> logging.Logger:
    """Return a module-specific logger with root configured once."""
    _configure_root(level)
    return logging.getLogger(name)


def set_debug(enabled: bool) -> None:
    """Switch the root logger between INFO and DEBUG (``Global.debug`` / ``--debug``)."""
    logging.getLogger().setLevel(logging.DEBUG if enabled else logging.INFO)
