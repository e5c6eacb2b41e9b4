"""A session log written to a timestamped file."""

from __future__ import annotations

import atexit
import os
import threading
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import ClassVar, TextIO

_START_MESSAGE = "Старт сессии приложения"
_END_MESSAGE = "Завершение сессии приложения"


class LogLevel(Enum):
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class Logger:
    """Appends timestamped lines to ``<directory>/app_YYYYmmdd_HHMMSS.log``.

    If the file cannot be created, logging silently does nothing.
    """

    _instance: ClassVar[Logger | None] = None
    _instance_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self, directory: str | os.PathLike[str] = "log") -> None:
        self._lock = threading.Lock()
        self.path = Path(directory) / datetime.now().strftime("app_%Y%m%d_%H%M%S.log")
        self._file: TextIO | None
        try:
            self._file = open(self.path, "w", encoding="utf-8")
        except OSError:
            self._file = None
        else:
            self.info(_START_MESSAGE)

    @classmethod
    def instance(cls) -> Logger:
        """Return the process-wide logger, creating it on first use."""
        with cls._instance_lock:
            if cls._instance is None:
                cls._instance = cls()
                atexit.register(cls._instance.close)
            return cls._instance

    @property
    def is_open(self) -> bool:
        return self._file is not None

    def log(self, level: LogLevel, message: str) -> None:
        with self._lock:
            if self._file is None:
                return
            stamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
            self._file.write(f"[{stamp}] [{level.value}] {message}\n")
            self._file.flush()

    def info(self, message: str) -> None:
        self.log(LogLevel.INFO, message)

    def warning(self, message: str) -> None:
        self.log(LogLevel.WARNING, message)

    def error(self, message: str) -> None:
        self.log(LogLevel.ERROR, message)

    def close(self) -> None:
        """Write the end-of-session line and close the file."""
        if self._file is None:
            return
        self.info(_END_MESSAGE)
        with self._lock:
            if self._file is not None:
                self._file.close()
                self._file = None

    def __enter__(self) -> Logger:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()