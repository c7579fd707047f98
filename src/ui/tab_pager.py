"""
TabPager - pages behind a tab strip.
"""

from typing import Sequence

from PySide6.QtWidgets import QVBoxLayout

from ui.page_tab_strip import PageTabStrip
from ui.qt_page import QtPage
from ui.stacked_pager import StackedPager
from workflow.navigation import LeavePolicy


class TabPager(StackedPager):
    """Tab strip on top, active page below."""

    def __init__(
        self,
        pages: Sequence[QtPage],
        leave_policy: LeavePolicy = LeavePolicy.ALWAYS,
        widget_id: str = "tab_pager",
    ):
        self.tab_strip = PageTabStrip(pages)
        super().__init__(pages, self.tab_strip, leave_policy, widget_id)

        layout = QVBoxLayout(self.container)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)
        layout.addWidget(self.tab_strip)
        layout.addWidget(self.stack, 1)

        self.tab_strip.page_requested.connect(self.request_page)
