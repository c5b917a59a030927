"""Configurable application logger with console, rotating-file and queued output."""

from __future__ import annotations

import logging
import queue
import sys
import threading
import time
from dataclasses import replace
from logging.handlers import QueueHandler, QueueListener, TimedRotatingFileHandler
from pathlib import Path

import yaml

from asiokit.logconfig import (
    LoggerConfig,
    LogLevel,
    format_logger_config,
    str_to_log_level,
)

__all__ = [
    "Logger",
    "load_log_config",
    "create_logger",
    "log_trace",
    "log_debug",
    "log_info",
    "log_warn",
    "log_error",
    "log_fatal",
]

_PY_LEVELS = {
    LogLevel.TRACE: 5,
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.INFO: logging.INFO,
    LogLevel.WARN: logging.WARNING,
    LogLevel.ERR: logging.ERROR,
    LogLevel.FATAL: logging.CRITICAL,
}

_LABELS = {
    5: "trace",
    logging.DEBUG: "debug",
    logging.INFO: "info",
    logging.WARNING: "warning",
    logging.ERROR: "error",
    logging.CRITICAL: "critical",
}

_COLORS = {
    5: "\x1b[37m",
    logging.DEBUG: "\x1b[36m",
    logging.INFO: "\x1b[32m",
    logging.WARNING: "\x1b[33m\x1b[1m",
    logging.ERROR: "\x1b[31m\x1b[1m",
    logging.CRITICAL: "\x1b[1m\x1b[41m",
}
_RESET = "\x1b[m"

_QUEUE_SIZE = 8192


class _SinkFormatter(logging.Formatter):
    """Lays a record out as timestamp|level|thread|process|file|line|function|message."""

    def __init__(self, *, console: bool, color: bool) -> None:
        super().__init__()
        self._console = console
        self._color = color

    def format(self, record: logging.LogRecord) -> str:
        stamp = time.strftime("%Y-%m-%d %H:%M:%S", time.localtime(record.created))
        label = _LABELS.get(record.levelno, record.levelname.lower())
        if self._color:
            label = f"{_COLORS.get(record.levelno, '')}{label}{_RESET}"
        # The console layout places the thread id right after the level.
        separator = "" if self._console else "|"
        return (
            f"[L]{stamp}.{int(record.msecs):03d}|{label}{separator}{record.thread}"
            f"|{record.process}|{record.filename}|{record.lineno}|{record.funcName}"
            f"|{record.getMessage()}"
        )


class _BlockingQueueHandler(QueueHandler):
    """Waits for room in the queue rather than dropping records."""

    def enqueue(self, record: logging.LogRecord) -> None:
        self.queue.put(record)


class Logger:
    """A logger configured once through :meth:`init` and closed by :meth:`shutdown`."""

    _shutdown_lock = threading.Lock()

    def __init__(self) -> None:
        self._config = LoggerConfig()
        self._initialized = False
        self._logger: logging.Logger | None = None
        self._sinks: list[logging.Handler] = []
        self._front: list[logging.Handler] = []
        self._listener: QueueListener | None = None

    def __enter__(self) -> Logger:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.shutdown()

    def init(self, config: LoggerConfig) -> None:
        """Set up output from ``config``; does nothing if already initialised."""
        if self._initialized:
            return
        self._config = replace(config)
        sinks: list[logging.Handler] = []
        if self._config.enable_console:
            console = logging.StreamHandler(sys.stdout)
            console.setFormatter(
                _SinkFormatter(console=True, color=self._config.enable_color)
            )
            sinks.append(console)
        if self._config.enable_file:
            path = Path(self._config.log_file)
            path.parent.mkdir(parents=True, exist_ok=True)
            file_sink = TimedRotatingFileHandler(
                path,
                when="midnight",
                backupCount=int(self._config.max_files),
                encoding="utf-8",
            )
            file_sink.setFormatter(_SinkFormatter(console=False, color=False))
            sinks.append(file_sink)

        backend = logging.Logger("Logger")
        backend.propagate = False
        front: list[logging.Handler]
        if self._config.enable_async:
            records: queue.Queue[logging.LogRecord] = queue.Queue(maxsize=_QUEUE_SIZE)
            self._listener = QueueListener(records, *sinks)
            self._listener.start()
            front = [_BlockingQueueHandler(records)]
        elif sinks:
            front = list(sinks)
        else:
            front = [logging.NullHandler()]
        for handler in front:
            backend.addHandler(handler)
        backend.setLevel(_PY_LEVELS[self._config.log_level])

        self._sinks = sinks
        self._front = front
        self._logger = backend
        self._initialized = True
        self._write(
            LogLevel.INFO,
            "Logger Initialized Success,Config:{}",
            (format_logger_config(self._config),),
            2,
        )

    def is_initialized(self) -> bool:
        return self._initialized

    def config(self) -> LoggerConfig:
        """A copy of the current configuration."""
        return replace(self._config)

    def shutdown(self) -> None:
        """Write a closing message and release all outputs; safe to call repeatedly."""
        with self._shutdown_lock:
            if self._logger is None or not self._initialized:
                return
            self._write(LogLevel.INFO, "Logger Shutdown", (), 2)
            if self._listener is not None:
                self._listener.stop()
                self._listener = None
            for handler in self._front:
                self._logger.removeHandler(handler)
                handler.close()
            for handler in self._sinks:
                handler.close()
            self._front = []
            self._sinks = []
            self._logger = None
            self._initialized = False

    def set_log_level(self, level: LogLevel) -> None:
        self._config.log_level = LogLevel(level)
        if self._logger is not None:
            self._logger.setLevel(_PY_LEVELS[self._config.log_level])

    def log_level(self) -> LogLevel:
        return self._config.log_level

    def log(self, level: LogLevel, message: str, *args: object) -> None:
        """Log ``message``; with ``args`` it is filled in with ``str.format``."""
        self._write(level, message, args, 3)

    def _write(
        self, level: LogLevel, message: str, args: tuple[object, ...], depth: int
    ) -> None:
        level = LogLevel(level)
        if self._logger is None or level < self._config.log_level:
            return
        text = message.format(*args) if args else message
        self._logger.log(_PY_LEVELS[level], text, stacklevel=depth)


def load_log_config(yaml_path: str | Path) -> LoggerConfig:
    """Read the ``log`` section of a YAML file, relative to the working directory."""
    full_path = Path.cwd() / yaml_path
    if not full_path.exists():
        raise FileNotFoundError(f"log config file not found: {full_path}")
    with full_path.open(encoding="utf-8") as handle:
        document = yaml.safe_load(handle)
    section = document.get("log") if isinstance(document, dict) else None
    if not section:
        raise ValueError("Invalid log config file: missing 'log' section")
    if not isinstance(section, dict):
        raise ValueError("Invalid log config file: 'log' section is not a mapping")

    def pick(key: str, default: object) -> object:
        value = section.get(key)
        return default if value is None else value

    return LoggerConfig(
        log_file=str(pick("log_file", "log/log.txt")),
        log_level=str_to_log_level(str(pick("log_level", "info"))),
        max_file_size=int(pick("max_file_size", 1048576)),
        max_files=int(pick("max_files", 3)),
        enable_console=bool(pick("enable_console", True)),
        enable_file=bool(pick("enable_file", True)),
        enable_color=bool(pick("enable_color", True)),
        enable_async=bool(pick("enable_async", False)),
    )


_instance: Logger | None = None
_instance_lock = threading.Lock()


def create_logger() -> Logger:
    """The process-wide logger, created on first use."""
    global _instance
    if _instance is None:
        with _instance_lock:
            if _instance is None:
                _instance = Logger()
    return _instance


def log_trace(message: str, *args: object) -> None:
    create_logger()._write(LogLevel.TRACE, message, args, 3)


def log_debug(message: str, *args: object) -> None:
    create_logger()._write(LogLevel.DEBUG, message, args, 3)


def log_info(message: str, *args: object) -> None:
    create_logger()._write(LogLevel.INFO, message, args, 3)


def log_warn(message: str, *args: object) -> None:
    create_logger()._write(LogLevel.WARN, message, args, 3)


def log_error(message: str, *args: object) -> None:
    create_logger()._write(LogLevel.ERR, message, args, 3)


def log_fatal(message: str, *args: object) -> None:
    create_logger()._write(LogLevel.FATAL, message, args, 3)