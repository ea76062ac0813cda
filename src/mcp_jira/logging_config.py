"""Logging configuration for MCP Jira."""

import logging
import os
import sys
import time
import types
import uuid
from contextvars import ContextVar, Token
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

# Default logger configuration
DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] [%(name)s] [%(context)s] %(message)s"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_DIRECTORY = "logs"
MAX_LOG_SIZE = 10 * 1024 * 1024  # 10 MB
LOG_BACKUP_COUNT = 5

# Context is task-local so concurrent tool calls keep their own trace ids
_log_context: ContextVar[dict[str, Any]] = ContextVar("mcp_jira_log_context")


def get_context() -> dict[str, Any]:
    """Return a copy of the logging context of the current task."""
    return dict(_log_context.get({}))


def set_context(**kwargs: Any) -> Token:
    """
    Add values to the logging context of the current task.

    Args:
        **kwargs: Key-value pairs to add to the context

    Returns:
        Token that restores the previous context when passed to ``reset_context``
    """
    context = get_context()
    context.update(kwargs)
    return _log_context.set(context)


def reset_context(token: Token) -> None:
    """Restore the logging context captured by ``set_context``."""
    _log_context.reset(token)


def format_context(context: dict[str, Any]) -> str:
    """Format context as ``operation=X,trace_id=Y``."""
    if not context:
        return "no-context"
    return ",".join(f"{k}={v}" for k, v in context.items())


class ContextFilter(logging.Filter):
    """Attach the current task's logging context to every record."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "context"):
            record.context = format_context(_log_context.get({}))
        return True


class LoggingContextManager:
    """Context manager for logging with tracking."""

    def __init__(self, logger: logging.Logger, operation: str, **context: Any) -> None:
        """
        Initializes the logging context manager.

        Args:
            logger: Logger used for the start/end messages
            operation: Name of the operation being executed
            **context: Additional context data
        """
        self.logger = logger
        self.operation = operation
        self.context = context.copy()
        self.trace_id = context.get("trace_id", str(uuid.uuid4())[:8])
        self.start_time = time.time()
        self._token: Token | None = None

    def __enter__(self) -> "LoggingContextManager":
        self.start_time = time.time()
        self.context["operation"] = self.operation
        self.context["trace_id"] = self.trace_id
        self._token = set_context(**self.context)

        self.logger.info(f"Operation started: {self.operation}")
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: types.TracebackType | None,
    ) -> None:
        duration = time.time() - self.start_time

        if exc_type:
            self.logger.error(
                f"Operation failed: {self.operation} after {duration:.3f}s - {exc_val}"
            )
        else:
            self.logger.debug(
                f"Operation completed: {self.operation} in {duration:.3f}s"
            )

        if self._token is not None:
            reset_context(self._token)
            self._token = None


def setup_logger(
    name: str = "mcp-jira",
    level: str | None = None,
    log_to_file: bool = False,
    log_dir: str | None = None,
    log_format: str | None = None,
) -> logging.Logger:
    """
    Configures and returns a logger.

    Console output goes to stderr: with the stdio transport, stdout carries
    the protocol messages.

    Args:
        name: Logger name
        level: Log level (DEBUG, INFO, etc.)
        log_to_file: If True, also logs to a rotating file
        log_dir: Directory to store log files
        log_format: Log format

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)

    log_level = level or os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL)
    logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    # Calling setup twice (import time, then CLI) must not duplicate output
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(log_format or os.getenv("LOG_FORMAT", DEFAULT_FORMAT))
    context_filter = ContextFilter()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    console_handler.addFilter(context_filter)
    logger.addHandler(console_handler)

    if log_to_file:
        log_directory = log_dir or os.getenv("LOG_DIR", DEFAULT_LOG_DIRECTORY)
        Path(log_directory).mkdir(parents=True, exist_ok=True)

        log_file = Path(log_directory) / f"{name}.log"
        file_handler = RotatingFileHandler(
            log_file, maxBytes=MAX_LOG_SIZE, backupCount=LOG_BACKUP_COUNT
        )
        file_handler.setFormatter(formatter)
        file_handler.addFilter(context_filter)
        logger.addHandler(file_handler)

    logger.propagate = False

    return logger


def log_operation(
    logger: logging.Logger, operation: str, **context: Any
) -> LoggingContextManager:
    """
    Creates a context manager for operation logging.

    Args:
        logger: Logger to write to
        operation: Name of the operation
        **context: Additional context data

    Returns:
        Context manager configured for operation logging
    """
    return LoggingContextManager(logger, operation, **context)
