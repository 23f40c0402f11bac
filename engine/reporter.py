# engine/reporter.py
from __future__ import annotations
import logging
import os
from typing import Optional, Protocol

LOGGER_NAME = "mini_csvdb"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


class Reporter(Protocol):
    """Diagnostic sink for failed operations. Must not raise or alter control flow."""

    def report_error(self, message: str) -> None: ...


class LoggingReporter:
    """
    Default reporter: ERROR records on the ``mini_csvdb`` logger.
    File output is optional and attached once via enable_file_log().
    """

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self.logger = logger or logging.getLogger(LOGGER_NAME)
        self._handler: Optional[logging.Handler] = None

    def report_error(self, message: str) -> None:
        self.logger.error(message)

    def enable_file_log(self, path: str) -> None:
        if self._handler:
            return
        # the logger is process-global: reuse a handler another reporter already attached
        target = os.path.abspath(path)
        for h in self.logger.handlers:
            if isinstance(h, logging.FileHandler) and h.baseFilename == target:
                self._handler = h
                return
        handler = logging.FileHandler(target, encoding="utf-8")
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        self.logger.addHandler(handler)
        self._handler = handler

    def disable_file_log(self) -> None:
        if self._handler:
            self.logger.removeHandler(self._handler)
            self._handler.close()
        self._handler = None
