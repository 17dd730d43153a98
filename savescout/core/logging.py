from __future__ import annotations

import logging
from dataclasses import dataclass
from logging.handlers import RotatingFileHandler
from pathlib import Path

from PySide6.QtCore import QObject, Signal

from core.paths import get_logs_dir


@dataclass(slots=True)
class LogEvent:
    level: str
    message: str

    def to_payload(self) -> dict[str, str]:
        return {"level": self.level, "message": self.message}


class LogEmitter(QObject):
    log_message = Signal(str)
    log_event = Signal(object)


class QtSignalLogHandler(logging.Handler):
    def __init__(self, emitter: LogEmitter) -> None:
        super().__init__()
        self._emitter = emitter

    def emit(self, record: logging.LogRecord) -> None:
        try:
            message = self.format(record)
            self._emitter.log_message.emit(message)
            self._emitter.log_event.emit(LogEvent(level=record.levelname.lower(), message=record.getMessage()))
        except Exception:
            self.handleError(record)


def setup_logging(level: str = "INFO", logs_dir: Path | None = None) -> tuple[logging.Logger, LogEmitter]:
    log_file = (logs_dir or get_logs_dir()) / "app.log"
    log_level = logging.getLevelName(level.upper())
    if not isinstance(log_level, int):
        log_level = logging.INFO

    logger = logging.getLogger("savescout")
    logger.setLevel(log_level)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    file_handler = RotatingFileHandler(
        filename=log_file,
        maxBytes=1_000_000,
        backupCount=5,
        encoding="utf-8",
    )
    file_handler.setFormatter(formatter)
    file_handler.setLevel(log_level)

    emitter = LogEmitter()
    signal_handler = QtSignalLogHandler(emitter)
    signal_handler.setFormatter(formatter)
    signal_handler.setLevel(log_level)

    logger.addHandler(file_handler)
    logger.addHandler(signal_handler)

    return logger, emitter
