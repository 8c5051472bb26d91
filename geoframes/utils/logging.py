"""Logging utility for geoframes"""

__all__ = ['LOGGER', 'reset_warnings', 'warn_once']

import logging
from typing import Optional

LOGGER = logging.getLogger('geoframes')
LOGGER.setLevel(logging.WARNING)
_LOG_HANDLER = logging.StreamHandler()
_LOG_FORMATTER = logging.Formatter('[%(levelname)s] %(name)s: %(message)s')
_LOG_HANDLER.setFormatter(_LOG_FORMATTER)
LOGGER.addHandler(_LOG_HANDLER)

_WARNINGS = set()


def warn_once(warning: str, *args, logger: Optional[logging.Logger] = None):
    """
    Log a warning the first time a given message template is seen. Arguments
    are interpolated lazily by the logger, so the same template with different
    arguments is still only emitted once.

    Args:
        warning:
            The message template

        *args:
            Values for %-style placeholders in the template

        logger: (Default the package logger)
            The logger to emit on
    """
    if warning in _WARNINGS:
        return

    (logger or LOGGER).warning(warning, *args)
    _WARNINGS.add(warning)


def reset_warnings():
    """Forget which warnings have already been emitted"""
    _WARNINGS.clear()
