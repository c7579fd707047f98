"""
Tests for TabPager and PageTabStrip.
"""

from unittest.mock import Mock

import pytest

from test_utils.qt_pages import make_settings_pages
from ui.page_tab_strip import PageTabStrip
from ui.qt_page import DIRTY_MARKER
from ui.tab_pager import TabPager
from workflow.navigation import LeavePolicy
from workflow.testing import assert_pager_contract


@pytest.fixture
def tab_pager(qtbot, settings_model):
    pager = TabPager(make_settings_pages(settings_model))
    qtbot.addWidget(pager.container)
    pager.init()
    return pager


def test_tab_strip_click_emits_only_for_other_pages(qtbot, settings_model):
    pages = make_settings_pages(settings_model)
    strip = PageTabStrip(pages)
    qtbot.addWidget(strip)
    strip.mark_page(pages[0])
    callback = Mock()
    strip.page_requested.connect(callback)

    strip.buttons["general"].click()
    strip.buttons["network"].click()

    callback.assert_called_once_with("network")


def test_mark_page_checks_tab_without_emitting(qtbot, settings_model):
    pages = make_settings_pages(settings_model)
    strip = PageTabStrip(pages)
    qtbot.addWidget(strip)

    with qtbot.assertNotEmitted(strip.page_requested):
        strip.mark_page(pages[1])

    assert strip.buttons["network"].isChecked()
    assert strip.get_current_page_id() == "network"


def test_init_shows_first_page(tab_pager):
    assert tab_pager.current_page.page_id == "general"
    assert tab_pager.tab_strip.buttons["general"].isChecked()
    assert tab_pager.stack.currentWidget() is tab_pager.page("general").contents
    assert not tab_pager.page("network").initialized


def test_click_switches_page(tab_pager):
    tab_pager.tab_strip.buttons["network"].click()

    assert tab_pager.current_page.page_id == "network"
    assert tab_pager.page("network").initialized
    assert tab_pager.stack.currentWidget() is tab_pager.page("network").contents
    assert tab_pager.contents() is tab_pager.container


def test_refused_switch_keeps_tab_on_current_page(qtbot):
    pager = TabPager(make_settings_pages({}), leave_policy=LeavePolicy.REQUIRE_VALID)
    qtbot.addWidget(pager.container)
    pager.init()

    pager.tab_strip.buttons["network"].click()

    assert pager.current_page.page_id == "general"
    assert pager.tab_strip.buttons["general"].isChecked()
    assert not pager.tab_strip.buttons["network"].isChecked()
    assert pager.stack.currentWidget() is pager.page("general").contents


def test_leaving_page_stores_input(tab_pager, settings_model):
    tab_pager.page("general").find("user_name").control.setText("Grace")

    tab_pager.tab_strip.buttons["network"].click()

    assert settings_model["user_name"] == "Grace"


def test_tab_text_follows_dirty_label(tab_pager):
    tab_pager.page("general").find("email").control.setText("grace@example.com")

    assert tab_pager.tab_strip.buttons["general"].text() == "General" + DIRTY_MARKER

    tab_pager.store()
    tab_pager.refresh_navigation()
    assert tab_pager.tab_strip.buttons["general"].text() == "General"


def test_tab_pager_contract(qtbot, settings_model):
    pager = TabPager(make_settings_pages(settings_model))
    qtbot.addWidget(pager.container)

    assert_pager_contract(pager)
