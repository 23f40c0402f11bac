# engine/config.py
from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from typing import Any, Optional

from .reporter import LOG_FORMAT, LoggingReporter
from .store import RecordStore


@dataclass(frozen=True)
class StoreConfig:
    """
    Runtime settings for a store process.

    data_dir:  directory holding the <table>.csv files (default: data)
    log_file:  optional file that also receives reported errors
    log_level: root logging level name
    """
    data_dir: str = "data"
    log_file: Optional[str] = None
    log_level: str = "INFO"

    @classmethod
    def from_args(cls, args: Any) -> "StoreConfig":
        return cls(
            data_dir=getattr(args, "data", None) or cls.data_dir,
            log_file=getattr(args, "log_file", None),
            log_level=(getattr(args, "log_level", None) or cls.log_level).upper(),
        )

    def ensure_data_dir(self) -> str:
        path = os.path.abspath(self.data_dir)
        os.makedirs(path, exist_ok=True)
        return path

    def configure_logging(self, reporter: Optional[LoggingReporter] = None) -> LoggingReporter:
        level = getattr(logging, self.log_level, None)
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {self.log_level}")
        logging.basicConfig(level=level, format=LOG_FORMAT)
        reporter = reporter or LoggingReporter()
        if self.log_file:
            reporter.enable_file_log(self.log_file)
        return reporter

    def build_store(self) -> RecordStore:
        reporter = self.configure_logging()
        return RecordStore(self.ensure_data_dir(), reporter=reporter)
