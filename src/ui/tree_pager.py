"""
TreePager - pages listed in a navigation tree beside the active page.

Pages can be grouped under non-selectable group nodes, like a settings
dialog with sections.
"""

import logging
from typing import Dict, Mapping, Optional, Sequence

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import QHBoxLayout, QTreeWidget, QTreeWidgetItem

from ui.qt_page import QtPage
from ui.stacked_pager import StackedPager
from workflow.navigation import LeavePolicy

logger = logging.getLogger(__name__)

PAGE_ID_ROLE = Qt.ItemDataRole.UserRole


class PageTree(QTreeWidget):
    """
    Navigation tree with one item per page.

    Signals:
        page_requested: Emitted when the user selects another page item (str: page id)
    """

    page_requested = Signal(str)

    def __init__(self, pages: Sequence, groups: Optional[Mapping[str, str]] = None, parent=None):
        """
        Build the tree.

        Args:
            pages: Pages in display order
            groups: Optional page id -> group label; grouped pages are
                    nested under one node per label
            parent: Parent widget
        """
        super().__init__(parent)
        self.setHeaderHidden(True)
        self.setMinimumWidth(180)

        self.page_items: Dict[str, QTreeWidgetItem] = {}
        self.group_items: Dict[str, QTreeWidgetItem] = {}
        groups = groups or {}

        for page in pages:
            group_label = groups.get(page.page_id)
            parent_item = self._group_item(group_label) if group_label else self.invisibleRootItem()
            item = QTreeWidgetItem(parent_item, [page.label])
            item.setData(0, PAGE_ID_ROLE, page.page_id)
            self.page_items[page.page_id] = item

        self.expandAll()
        self.currentItemChanged.connect(self._on_current_item_changed)

    def _group_item(self, label: str) -> QTreeWidgetItem:
        item = self.group_items.get(label)
        if item is None:
            item = QTreeWidgetItem(self.invisibleRootItem(), [label])
            item.setFlags(Qt.ItemFlag.ItemIsEnabled)
            self.group_items[label] = item
        return item

    def _on_current_item_changed(self, current: Optional[QTreeWidgetItem], previous):
        if current is None:
            return
        page_id = current.data(0, PAGE_ID_ROLE)
        if page_id:
            self.page_requested.emit(page_id)

    def mark_page(self, page):
        """Select the item of ``page`` without emitting page_requested."""
        self.blockSignals(True)
        try:
            self.setCurrentItem(self.page_items[page.page_id])
        finally:
            self.blockSignals(False)

    def refresh_labels(self, pages: Sequence):
        for page in pages:
            self.page_items[page.page_id].setText(0, page.label)

    def current_page_id(self) -> Optional[str]:
        item = self.currentItem()
        return item.data(0, PAGE_ID_ROLE) if item else None


class TreePager(StackedPager):
    """Navigation tree on the left, active page on the right."""

    def __init__(
        self,
        pages: Sequence[QtPage],
        groups: Optional[Mapping[str, str]] = None,
        leave_policy: LeavePolicy = LeavePolicy.ALWAYS,
        widget_id: str = "tree_pager",
    ):
        self.tree = PageTree(pages, groups)
        super().__init__(pages, self.tree, leave_policy, widget_id)

        layout = QHBoxLayout(self.container)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self.tree)
        layout.addWidget(self.stack, 1)

        self.tree.page_requested.connect(self.request_page)
