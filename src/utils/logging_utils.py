"""
Logging utilities for tracing navigation through a workflow.

Provides:
- flush_logs() for immediate log output
- Page context tracking via a ContextVar so log lines emitted while a page
  is active carry its id
- TimingSpan for measuring operation durations (e.g. page initialization)
"""

import logging
import logging.handlers
import sys
import time
from contextvars import ContextVar
from typing import Optional

# Id of the page that is currently active in the workflow being traced
_page_context: ContextVar[Optional[str]] = ContextVar("page_id", default=None)

logger = logging.getLogger(__name__)


def flush_logs():
    """
    Force immediate flush of all log handlers.

    Necessary with async logging (QueueHandler) before showing a modal
    dialog or exiting, so the last messages reach the log file.
    """
    for logger_name in logging.Logger.manager.loggerDict:
        module_logger = logging.getLogger(logger_name)
        for handler in module_logger.handlers:
            handler.flush()

    root_logger = logging.getLogger()
    for handler in root_logger.handlers:
        handler.flush()
        if isinstance(handler, logging.handlers.QueueHandler):
            # 1ms delay to allow queue to drain
            time.sleep(0.001)

    sys.stdout.flush()
    sys.stderr.flush()


def set_page_context(page_id: Optional[str]):
    """Set the active page id in context."""
    _page_context.set(page_id)


def get_page_context() -> Optional[str]:
    """Get the active page id from context."""
    return _page_context.get()


def clear_page_context():
    """Clear the active page id from context."""
    _page_context.set(None)


def log_with_context(level: int, message: str, **kwargs):
    """
    Log a message tagged with the active page id (if any) and extra fields.

    Args:
        level: Logging level (e.g., logging.INFO)
        message: Log message
        **kwargs: Additional context to include in log
    """
    context_parts = []
    page_id = get_page_context()
    if page_id:
        context_parts.append(f"page={page_id}")
    context_parts.extend(f"{key}={value}" for key, value in kwargs.items())

    if context_parts:
        logger.log(level, f"[{' '.join(context_parts)}] {message}")
    else:
        logger.log(level, message)


def log_info(message: str, **kwargs):
    """Log INFO message with context."""
    log_with_context(logging.INFO, message, **kwargs)


def log_debug(message: str, **kwargs):
    """Log DEBUG message with context."""
    log_with_context(logging.DEBUG, message, **kwargs)


def log_warning(message: str, **kwargs):
    """Log WARNING message with context."""
    log_with_context(logging.WARNING, message, **kwargs)


def log_error(message: str, **kwargs):
    """Log ERROR message with context."""
    log_with_context(logging.ERROR, message, **kwargs)


class TimingSpan:
    """
    Context manager for timing operations and logging duration.

    Usage:
        with TimingSpan("page_init", page="network"):
            page.init()
    """

    def __init__(self, operation: str, level: int = logging.INFO, **extra_context):
        """
        Initialize timing span.

        Args:
            operation: Name of the operation being timed
            level: Level used for the start/completed messages
            **extra_context: Additional context to include in logs
        """
        self.operation = operation
        self.level = level
        self.extra_context = extra_context
        self.start_time = None
        self.end_time = None

    def __enter__(self):
        self.start_time = time.time()
        log_with_context(self.level, f"{self.operation} - started", **self.extra_context)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.end_time = time.time()
        duration_ms = (self.end_time - self.start_time) * 1000

        if exc_type is not None:
            log_error(
                f"{self.operation} - failed after {duration_ms:.0f}ms",
                error=str(exc_val),
                **self.extra_context,
            )
        else:
            log_with_context(
                self.level,
                f"{self.operation} - completed",
                duration_ms=f"{duration_ms:.0f}",
                **self.extra_context,
            )

        return False  # Don't suppress exceptions

    def get_duration_ms(self) -> Optional[float]:
        """Get duration in milliseconds."""
        if self.start_time and self.end_time:
            return (self.end_time - self.start_time) * 1000
        return None
