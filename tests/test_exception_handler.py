"""
Tests for the global exception handler.
"""

import logging
import sys

import pytest

from utils import exception_handler
from utils.exception_handler import GlobalExceptionHandler, describe_exception
from workflow.errors import PageNotFoundError


@pytest.fixture
def handler(qtbot):
    handler = GlobalExceptionHandler()
    yield handler
    if handler.installed:
        handler.uninstall()


def test_install_and_uninstall_swap_excepthook(handler):
    handler.install()
    assert sys.excepthook == handler._handle_exception

    handler.uninstall()
    assert sys.excepthook is exception_handler._original_excepthook


def test_workflow_errors_are_described_as_wiring_errors():
    message = describe_exception(PageNotFoundError, PageNotFoundError("missing", ["general"]))

    assert message.startswith("Workflow wiring error:")
    assert "missing" in message


def test_other_errors_keep_their_type_name():
    assert describe_exception(ValueError, ValueError("bad")) == "ValueError: bad"


def test_unhandled_exception_is_logged_without_dialog(handler, caplog, monkeypatch):
    monkeypatch.setenv(exception_handler.SUPPRESS_DIALOGS_ENV, "1")
    try:
        raise PageNotFoundError("missing", ["general"])
    except PageNotFoundError:
        exc_info = sys.exc_info()

    with caplog.at_level(logging.CRITICAL):
        handler._handle_exception(*exc_info)

    assert "UNHANDLED EXCEPTION" in caplog.text
    assert "PageNotFoundError" in caplog.text
