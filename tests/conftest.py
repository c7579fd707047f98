import os
import sys
import pytest

# Ensure src directory is importable
PROJECT_ROOT = os.path.dirname(os.path.dirname(__file__))
SRC_DIR = os.path.join(PROJECT_ROOT, 'src')
if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)

# Add tests directory to path for test utilities
TESTS_DIR = os.path.join(PROJECT_ROOT, 'tests')
if TESTS_DIR not in sys.path:
    sys.path.append(TESTS_DIR)

# Error dialogs would block headless test runs
os.environ.setdefault('PAGER_SUPPRESS_ERROR_DIALOGS', '1')
os.environ.setdefault('QT_QPA_PLATFORM', 'offscreen')

from test_utils.widget_stub import RecordingPager, make_pages  # noqa: E402


@pytest.fixture
def call_log():
    """Shared call log the recording stubs append to."""
    return []


@pytest.fixture
def two_pages(call_log):
    """Pages 'page1' ("Page 1") and 'page2' ("Page 2") sharing ``call_log``."""
    return make_pages(2, call_log)


@pytest.fixture
def pager_factory():
    """
    Factory fixture for RecordingPager instances.

    Usage:
        pager = pager_factory(pages, leave_policy=LeavePolicy.REQUIRE_VALID)
    """
    def _create(pages, leave_policy=None, init=True):
        pager = RecordingPager(pages, leave_policy=leave_policy)
        if init:
            pager.init()
        return pager

    return _create


@pytest.fixture
def settings_model():
    """Dict model edited by the Qt field tests."""
    return {
        'user_name': 'Ada',
        'email': 'ada@example.com',
        'hostname': 'example.org',
        'use_tls': True,
        'theme': 'Light',
    }
