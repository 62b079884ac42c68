import os
import traceback
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional


class LogLevel(Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


_LEVEL_ORDER = {
    LogLevel.DEBUG: 0,
    LogLevel.INFO: 1,
    LogLevel.WARNING: 2,
    LogLevel.ERROR: 3,
}


class Slogger:
    log_path = os.environ.get("POST_BROWSER_LOG", "logs/post_browser.log")
    min_level = LogLevel.DEBUG
    enabled = True

    @classmethod
    def configure(
        cls,
        log_path: Optional[str] = None,
        min_level: Optional[LogLevel] = None,
        enabled: Optional[bool] = None,
    ) -> None:
        """
        Adjust where and what gets logged.

        Args:
            log_path: File to append log lines to
            min_level: Messages below this level are dropped
            enabled: Turn file logging on or off entirely
        """
        if log_path:
            cls.log_path = log_path
        if min_level is not None:
            cls.min_level = min_level
        if enabled is not None:
            cls.enabled = enabled

    @classmethod
    def _ensure_log_directory(cls):
        """Ensure that the logs directory exists."""
        log_dir = os.path.dirname(cls.log_path)
        if log_dir and not os.path.exists(log_dir):
            os.makedirs(log_dir, exist_ok=True)

    @classmethod
    def _should_log(cls, level: LogLevel) -> bool:
        return cls.enabled and _LEVEL_ORDER[level] >= _LEVEL_ORDER[cls.min_level]

    @classmethod
    def _write(cls, line: str) -> None:
        cls._ensure_log_directory()
        with open(cls.log_path, "a", encoding="utf-8") as f:
            f.write(line)

    @classmethod
    def log(cls, message: str, level: LogLevel = LogLevel.INFO, context: Optional[Dict[str, Any]] = None):
        """
        Log a message with an optional level and context.

        Args:
            message: The message to log
            level: The log level (DEBUG, INFO, WARNING, ERROR)
            context: Optional dictionary of contextual information
        """
        if not cls._should_log(level):
            return

        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        log_message = f"{timestamp} - {level.value} - {message}"

        if context:
            context_str = " | ".join([f"{k}={v}" for k, v in context.items()])
            log_message += f" | {context_str}"

        cls._write(log_message + "\n")

    @classmethod
    def debug(cls, message: str, context: Optional[Dict[str, Any]] = None):
        """Log a debug message."""
        cls.log(message, LogLevel.DEBUG, context)

    @classmethod
    def info(cls, message: str, context: Optional[Dict[str, Any]] = None):
        """Log an info message."""
        cls.log(message, LogLevel.INFO, context)

    @classmethod
    def warning(cls, message: str, context: Optional[Dict[str, Any]] = None):
        """Log a warning message."""
        cls.log(message, LogLevel.WARNING, context)

    @classmethod
    def error(cls, message: str, context: Optional[Dict[str, Any]] = None):
        """Log an error message."""
        cls.log(message, LogLevel.ERROR, context)

    @classmethod
    def exception(cls, e: BaseException, message: str = "Exception occurred", context: Optional[Dict[str, Any]] = None):
        """
        Log an exception with its traceback.

        Args:
            e: The exception to log
            message: What was being attempted when it was raised
            context: Optional dictionary of contextual information
        """
        exc_type = type(e).__name__
        error_context = dict(context or {})
        error_context.update({
            "exception_type": exc_type,
            "exception_message": str(e),
        })

        cls.error(f"{message}: {exc_type} - {e}", error_context)

        if not cls._should_log(LogLevel.ERROR):
            return

        # Format from the exception itself; callers may log outside the except block
        exc_traceback = "".join(traceback.format_exception(type(e), e, e.__traceback__))
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        cls._write(f"{timestamp} - {LogLevel.ERROR.value} - TRACEBACK:\n{exc_traceback}\n")
