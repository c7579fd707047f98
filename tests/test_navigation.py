"""
Tests for navigation sinks, leave policy parsing and navigation events.
"""

import pytest

from workflow.events import EventReason, NavigationEvent, navigate_to
from workflow.navigation import LeavePolicy, NavigationSink, NullNavigation
from workflow.page import Page
from workflow.testing import RecordingNavigation


@pytest.mark.parametrize("text,expected", [
    ("always", LeavePolicy.ALWAYS),
    ("require_valid", LeavePolicy.REQUIRE_VALID),
    (" Require-Valid ", LeavePolicy.REQUIRE_VALID),
    ("ALWAYS", LeavePolicy.ALWAYS),
])
def test_leave_policy_from_string(text, expected):
    assert LeavePolicy.from_string(text) is expected


def test_leave_policy_rejects_unknown_name():
    with pytest.raises(ValueError, match="sometimes"):
        LeavePolicy.from_string("sometimes")


def test_sinks_satisfy_protocol():
    assert isinstance(NullNavigation(), NavigationSink)
    assert isinstance(RecordingNavigation(), NavigationSink)
    assert not isinstance(object(), NavigationSink)


def test_recording_navigation_records_pages():
    navigation = RecordingNavigation()
    page = Page("general")

    navigation.mark_page(page)

    assert navigation.marked == [page]
    assert navigation.marked_ids == ["general"]
    navigation.reset()
    assert navigation.marked == []


def test_navigate_to_builds_navigation_event():
    event = navigate_to("network", source_id="tree")

    assert isinstance(event, NavigationEvent)
    assert event.target_page_id == "network"
    assert event.widget_id == "tree"
    assert event.reason == EventReason.SELECTION_CHANGED
