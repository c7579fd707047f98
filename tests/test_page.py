"""
Tests for Page.
"""

import pytest

from test_utils.widget_stub import RecordingPage, RecordingWidget
from workflow.events import Event
from workflow.page import Page
from workflow.testing import assert_custom_widget_contract


def test_page_identity():
    page = Page("network", "Network")

    assert page.page_id == "network"
    assert page.widget_id == "network"
    assert page.label == "Network"
    assert not page.initial
    assert page.store_on_leave


def test_label_defaults_to_id_and_may_change():
    page = Page("network")
    assert page.label == "network"

    page.label = "Network (!)"

    assert page.label == "Network (!)"
    assert page.page_id == "network"


def test_init_initializes_children_in_order(call_log):
    page = Page("p", children=[RecordingWidget("a", call_log), RecordingWidget("b", call_log)])

    assert not page.initialized
    page.init()

    assert page.initialized
    assert call_log == [("a", "init"), ("b", "init")]


def test_init_reentry_reruns_initialization(call_log):
    page = Page("p", children=[RecordingWidget("a", call_log)])

    page.init()
    page.init()

    assert call_log == [("a", "init"), ("a", "init")]
    assert page.initialized


def test_failed_child_init_leaves_page_uninitialized(call_log):
    page = Page("p", children=[RecordingWidget("a", call_log, fail_on="init")])

    with pytest.raises(RuntimeError):
        page.init()

    assert not page.initialized


def test_page_handle_forwards_to_child():
    field = RecordingWidget("field", reply=Event("refresh"))
    page = Page("p", children=[field])

    assert page.handle(Event("field")) == Event("refresh")


def test_page_validate_is_not_short_circuited(call_log):
    page = Page(
        "p",
        children=[RecordingWidget("valid", call_log, valid=True), RecordingWidget("invalid", call_log, valid=False)],
    )

    assert page.validate() is False
    assert ("valid", "validate") in call_log
    assert ("invalid", "validate") in call_log


def test_page_help_concatenates_children():
    page = Page(
        "p",
        children=[RecordingWidget("a", help_text="Alpha."), RecordingWidget("b", help_text="Beta.")],
    )

    assert page.help == "Alpha.\nBeta."


def test_base_contents_is_children():
    children = [RecordingWidget("a")]
    page = Page("p", children=children)

    assert page.contents == children


def test_page_contract():
    assert_custom_widget_contract(RecordingPage(0))
