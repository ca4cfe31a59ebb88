"""Logging helpers for qubitsim.

Every module asks for its logger with ``get_logger(__name__)``; loggers live
under the ``qubitsim.`` namespace and share one stderr handler format.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

_DEFAULT_LEVEL = logging.WARNING
_FORMAT = "[%(levelname)s] %(name)s: %(message)s"

_loggers: dict[str, logging.Logger] = {}


def _resolve_level(level) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.WARNING)
    return int(level)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the cached logger for ``name`` (usually ``__name__``)."""
    if name is None:
        name = "qubitsim"
    logger_name = name if name.startswith("qubitsim") else f"qubitsim.{name}"

    if logger_name in _loggers:
        return _loggers[logger_name]

    logger = logging.getLogger(logger_name)
    if not logger.handlers:
        logger.setLevel(_DEFAULT_LEVEL)
        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(_DEFAULT_LEVEL)
        handler.setFormatter(logging.Formatter(_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False

    _loggers[logger_name] = logger
    return logger


def set_log_level(level) -> None:
    """Set the level on every qubitsim logger, existing and future.

    ``level`` is a ``logging`` constant or its name (``"DEBUG"``, ``"INFO"``...).
    """
    global _DEFAULT_LEVEL
    level = _resolve_level(level)
    for logger in _loggers.values():
        logger.setLevel(level)
        for handler in logger.handlers:
            handler.setLevel(level)
    _DEFAULT_LEVEL = level


def configure_logging(level=logging.WARNING, format_string: Optional[str] = None, stream=None) -> None:
    """Replace the handlers of all qubitsim loggers.

    Meant to be called once by an application (the CLI does it after parsing
    ``-v``). ``stream`` defaults to stderr.
    """
    global _DEFAULT_LEVEL, _FORMAT
    level = _resolve_level(level)
    if stream is None:
        stream = sys.stderr
    if format_string is not None:
        _FORMAT = format_string
    formatter = logging.Formatter(_FORMAT)

    for logger in _loggers.values():
        logger.setLevel(level)
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
        handler = logging.StreamHandler(stream)
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    _DEFAULT_LEVEL = level
