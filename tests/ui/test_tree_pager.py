"""
Tests for TreePager and PageTree.
"""

import pytest
from PySide6.QtCore import Qt

from test_utils.qt_pages import make_settings_pages
from ui.tree_pager import PageTree, TreePager
from workflow.navigation import LeavePolicy

GROUPS = {"network": "Connection", "appearance": "Connection"}


@pytest.fixture
def tree_pager(qtbot, settings_model):
    pager = TreePager(make_settings_pages(settings_model), groups=GROUPS)
    qtbot.addWidget(pager.container)
    pager.init()
    return pager


def test_grouped_pages_are_nested(qtbot, settings_model):
    tree = PageTree(make_settings_pages(settings_model), GROUPS)
    qtbot.addWidget(tree)

    group = tree.group_items["Connection"]
    assert tree.topLevelItemCount() == 2
    assert group.childCount() == 2
    assert tree.page_items["network"].parent() is group
    assert not group.flags() & Qt.ItemFlag.ItemIsSelectable


def test_mark_page_selects_without_emitting(qtbot, settings_model):
    pages = make_settings_pages(settings_model)
    tree = PageTree(pages)
    qtbot.addWidget(tree)

    with qtbot.assertNotEmitted(tree.page_requested):
        tree.mark_page(pages[2])

    assert tree.current_page_id() == "appearance"


def test_init_selects_initial_page(qtbot, settings_model):
    pages = make_settings_pages(settings_model)
    pages[1].initial = True
    pager = TreePager(pages)
    qtbot.addWidget(pager.container)

    pager.init()

    assert pager.current_page.page_id == "network"
    assert pager.tree.current_page_id() == "network"
    assert not pager.page("general").initialized


def test_selecting_item_switches_page(tree_pager):
    tree = tree_pager.tree

    tree.setCurrentItem(tree.page_items["appearance"])

    assert tree_pager.current_page.page_id == "appearance"
    assert tree_pager.stack.currentWidget() is tree_pager.page("appearance").contents


def test_selecting_group_item_does_nothing(tree_pager):
    tree = tree_pager.tree

    tree.setCurrentItem(tree.group_items["Connection"])

    assert tree_pager.current_page.page_id == "general"


def test_refused_switch_restores_selection(qtbot):
    pager = TreePager(make_settings_pages({}), leave_policy=LeavePolicy.REQUIRE_VALID)
    qtbot.addWidget(pager.container)
    pager.init()

    pager.tree.setCurrentItem(pager.tree.page_items["network"])

    assert pager.current_page.page_id == "general"
    assert pager.tree.current_page_id() == "general"
    assert pager.page("general").find("user_name").error_label.text() == "Name is required"


def test_item_text_follows_dirty_label(tree_pager):
    tree_pager.page("general").find("user_name").control.setText("Grace")

    assert tree_pager.tree.page_items["general"].text(0).endswith("*")
