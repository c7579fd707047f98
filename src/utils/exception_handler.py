"""
Global exception handler.

Catches unhandled exceptions raised from Qt slots (for example a
PageNotFoundError raised while a navigation widget and its pager are wired
inconsistently), logs them and shows an error dialog instead of letting the
event loop die silently.
"""

import sys
import logging
import traceback
import os
import faulthandler
from typing import Optional
from PySide6.QtWidgets import QApplication, QMessageBox
from PySide6.QtCore import QObject, qInstallMessageHandler, QtMsgType

from utils.logging_utils import flush_logs
from workflow.errors import WorkflowError

logger = logging.getLogger(__name__)

SUPPRESS_DIALOGS_ENV = "PAGER_SUPPRESS_ERROR_DIALOGS"

# Keep a reference to the original handler
_original_excepthook = sys.excepthook


def _show_error_dialog(message: str, details: str, log_file_path: Optional[str] = None):
    """
    Show error dialog to user.

    Args:
        message: Short error message
        details: Full stack trace and details
        log_file_path: Optional path to log file mentioned in the dialog
    """
    # Check if we're in a test/CI environment
    if os.environ.get(SUPPRESS_DIALOGS_ENV) == "1":
        return

    app = QApplication.instance()
    if app is None:
        # Can't show dialog without Qt app
        print(f"\nERROR: {message}", file=sys.stderr)
        print(f"\nDetails:\n{details}", file=sys.stderr)
        return

    msg_box = QMessageBox()
    msg_box.setIcon(QMessageBox.Icon.Critical)
    msg_box.setWindowTitle("Unexpected Error")
    msg_box.setText(
        "An unexpected error occurred, but the application will try to continue.\n\n"
        f"{message}"
    )
    msg_box.setDetailedText(details)

    if log_file_path:
        msg_box.setInformativeText(f"Error details have been logged to:\n{log_file_path}")

    msg_box.setStandardButtons(QMessageBox.StandardButton.Ok)
    msg_box.exec()


def describe_exception(exc_type, exc_value) -> str:
    """Short, user-facing description of an exception."""
    if issubclass(exc_type, WorkflowError):
        return f"Workflow wiring error: {exc_value}"
    return f"{exc_type.__name__}: {exc_value}"


class GlobalExceptionHandler(QObject):
    """
    Catches and handles unhandled exceptions globally.

    Installs a Python excepthook (which also sees exceptions escaping Qt
    slots) and routes Qt's own messages into logging.
    """

    def __init__(self, log_file_path: Optional[str] = None):
        super().__init__()
        self.log_file_path = log_file_path
        self.installed = False

    def install(self):
        """Install global exception handlers."""
        sys.excepthook = self._handle_exception
        qInstallMessageHandler(self._qt_message_handler)
        faulthandler.enable(all_threads=True)
        self.installed = True
        logger.info("Global exception handler installed")

    def uninstall(self):
        """Restore original exception handlers."""
        sys.excepthook = _original_excepthook
        qInstallMessageHandler(None)
        faulthandler.disable()
        self.installed = False
        logger.info("Global exception handler uninstalled")

    def _qt_message_handler(self, mode: QtMsgType, context, message: str):
        """Handle messages from Qt's logging system."""
        level = logging.DEBUG
        if mode == QtMsgType.QtInfoMsg:
            level = logging.INFO
        elif mode == QtMsgType.QtWarningMsg:
            level = logging.WARNING
        elif mode == QtMsgType.QtCriticalMsg:
            level = logging.CRITICAL
        elif mode == QtMsgType.QtFatalMsg:
            level = logging.FATAL

        logger.log(level, f"[QT] {message} (Context: {context.file}:{context.line}, {context.function})")

    def _handle_exception(self, exc_type, exc_value, exc_traceback):
        """
        Handle uncaught exceptions.

        Args:
            exc_type: Exception type
            exc_value: Exception instance
            exc_traceback: Traceback object
        """
        # Ignore KeyboardInterrupt so we can still exit cleanly
        if issubclass(exc_type, KeyboardInterrupt):
            _original_excepthook(exc_type, exc_value, exc_traceback)
            return

        error_msg = describe_exception(exc_type, exc_value)
        error_details = "".join(traceback.format_exception(exc_type, exc_value, exc_traceback))

        logger.critical("=" * 60)
        logger.critical("UNHANDLED EXCEPTION")
        logger.critical("=" * 60)
        for line in error_details.split("\n"):
            if line.strip():
                logger.critical(line)
        logger.critical("=" * 60)
        flush_logs()

        _show_error_dialog(error_msg, error_details, self.log_file_path)


def install_global_exception_handler(log_file_path: Optional[str] = None) -> GlobalExceptionHandler:
    """
    Install global exception handler.

    Args:
        log_file_path: Optional path to log file mentioned in error dialogs

    Returns:
        GlobalExceptionHandler instance
    """
    handler = GlobalExceptionHandler(log_file_path)
    handler.install()
    return handler
