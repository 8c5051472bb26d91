"""Utility mixin classes"""

__all__ = ['LoggingMixin']

import logging

from geoframes.utils.logging import warn_once


class LoggingMixin:  # pylint: disable=too-few-public-methods
    """
    Gives each subclass a logger named after its module and class, nested under
    the package logger so the package handler and level apply.
    """

    @property
    def logger(self) -> logging.Logger:
        _class = self.__class__
        module_name = _class.__module__
        if module_name == 'builtins':
            return logging.getLogger(_class.__name__)

        return logging.getLogger(f'{module_name}.{_class.__name__}')

    def warn_once(self, msg, *args):
        """Logs a warning only once per message"""
        warn_once(msg, *args, logger=self.logger)
