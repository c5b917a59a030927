"""Logger configuration values and log level conversions."""

from __future__ import annotations

import enum
from dataclasses import dataclass

__all__ = [
    "LogLevel",
    "LoggerConfig",
    "str_to_log_level",
    "log_level_to_str",
    "format_logger_config",
]


class LogLevel(enum.IntEnum):
    """Severity of a log message, from least to most severe."""

    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARN = 3
    ERR = 4
    FATAL = 5


@dataclass
class LoggerConfig:
    """Settings that decide where log messages go and which are kept."""

    log_file: str = "app.log"
    log_level: LogLevel = LogLevel.INFO
    max_file_size: int = 1048576
    max_files: int = 3
    enable_console: bool = True
    enable_file: bool = True
    enable_color: bool = True
    enable_async: bool = False


_FROM_TEXT = {
    "trace": LogLevel.TRACE,
    "debug": LogLevel.DEBUG,
    "info": LogLevel.INFO,
    "warn": LogLevel.WARN,
    "error": LogLevel.ERR,
    "fatal": LogLevel.FATAL,
}

_TO_TEXT = {
    LogLevel.TRACE: "TRACE",
    LogLevel.DEBUG: "DEBUG",
    LogLevel.INFO: "INFO",
    LogLevel.WARN: "WARN",
    LogLevel.ERR: "ERROR",
    LogLevel.FATAL: "FATAL",
}


def str_to_log_level(level: str) -> LogLevel:
    """Map a lower-case level name to a level; unknown names give INFO."""
    return _FROM_TEXT.get(level, LogLevel.INFO)


def log_level_to_str(level: LogLevel) -> str:
    """Upper-case display name of a level; unknown values give INFO."""
    return _TO_TEXT.get(level, "INFO")


def _flag(value: bool) -> str:
    return "true" if value else "false"


def format_logger_config(config: LoggerConfig) -> str:
    """Render a configuration as a single human-readable line."""
    return (
        f"LoggerConfig {{ log_file: {config.log_file}"
        f", log_level: {log_level_to_str(config.log_level)}"
        f", max_file_size: {config.max_file_size}"
        f", max_files: {config.max_files}"
        f", enable_console: {_flag(config.enable_console)}"
        f", enable_file: {_flag(config.enable_file)}"
        f", enable_color: {_flag(config.enable_color)}"
        f", enableAsync: {_flag(config.enable_async)}"
        " }"
    )