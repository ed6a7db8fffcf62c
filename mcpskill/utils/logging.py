"""
Logging helpers

All modules log through children of the "mcpskill" logger so the CLI can
change verbosity in one place.
"""

import logging
import sys

_ROOT_LOGGER = "mcpskill"
_FORMAT = "[%(name)s] %(levelname)s: %(message)s"
_configured = False


def _configure_root() -> logging.Logger:
    global _configured

    root = logging.getLogger(_ROOT_LOGGER)
    if not _configured or not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMAT))
        root.handlers.clear()
        root.addHandler(handler)
        root.setLevel(logging.INFO)
        root.propagate = False
        _configured = True
    return root


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger below the package root logger.

    Args:
        name: Usually __name__ of the calling module

    Returns:
        Configured logger
    """
    _configure_root()
    if name != _ROOT_LOGGER and not name.startswith(_ROOT_LOGGER + "."):
        name = f"{_ROOT_LOGGER}.{name}"
    return logging.getLogger(name)


def set_log_level(level: str) -> None:
    """Set verbosity for every mcpskill logger (DEBUG, INFO, WARNING, ERROR, CRITICAL)"""
    root = _configure_root()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
