"""
Logging configuration for applications that use the extension helpers.

The helpers themselves only create module loggers and never configure
handlers. Applications (and the test suite) call setup_logging once to get
console output in the shared format.
"""

import logging
import sys
import threading
from typing import Optional, Union

from coreext.config import ConfigurationError, get_settings

_config_lock = threading.Lock()
_MODULE_LOGGER = logging.getLogger(__name__)
_TECHNICAL_FORMAT = "%(asctime)s%(msecs)03d - %(name)s - %(levelname)s - %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _resolve_level(level: Union[int, str, None]) -> int:
    if level is None:
        level = get_settings().log_level
    if level is None:
        return logging.INFO
    if isinstance(level, int):
        return level

    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ConfigurationError.invalid_format("log level", level, "a logging level name such as DEBUG or INFO")
    return resolved


def _build_console_handler(level: int, user_friendly: bool) -> logging.Handler:
    if user_friendly:
        formatter = logging.Formatter("%(message)s")
    else:
        formatter = logging.Formatter(_TECHNICAL_FORMAT, _DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(logging.WARNING if user_friendly else level)
    return console_handler


def _has_console_handler(root_logger: logging.Logger) -> bool:
    return any(
        isinstance(handler, logging.StreamHandler) and not isinstance(handler, logging.FileHandler) for handler in root_logger.handlers
    )


def _close_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        try:
            handler.close()
        except OSError as exc:  # Best-effort cleanup operation
            _MODULE_LOGGER.debug("Handler close failed: %s", exc)
    logger.handlers = []


def setup_logging(level: Union[int, str, None] = None, user_friendly: bool = False, *, force: bool = False) -> Optional[logging.Handler]:
    """Configure root logging once; returns the installed handler or None when skipped."""

    with _config_lock:
        root_logger = logging.getLogger()
        if _has_console_handler(root_logger) and not force:
            return None

        resolved_level = _resolve_level(level)
        _close_handlers(root_logger)

        console_handler = _build_console_handler(resolved_level, user_friendly)
        root_logger.addHandler(console_handler)
        root_logger.setLevel(resolved_level)
        return console_handler


__all__ = ["setup_logging"]
