"""
Pager base for Qt: the active page is shown in a QStackedWidget.

Subclasses place the stack next to their navigation widget (tab strip,
tree, progress dots) inside ``container`` and forward the navigation
widget's requests to request_page().
"""

from typing import Sequence

from PySide6.QtWidgets import QStackedWidget, QWidget

from ui.qt_page import QtPage
from utils.logging_utils import log_debug
from workflow.events import Event, navigate_to
from workflow.navigation import LeavePolicy, NavigationSink
from workflow.pager import Pager


class StackedPager(Pager):
    """
    Pager over QtPages rendered in a shared QStackedWidget.

    Each page's QWidget is added to the stack the first time the page is
    shown and reused afterwards.
    """

    def __init__(
        self,
        pages: Sequence[QtPage],
        navigation: NavigationSink,
        leave_policy: LeavePolicy = LeavePolicy.ALWAYS,
        widget_id: str = "pager",
    ):
        super().__init__(pages, navigation, leave_policy, widget_id)
        self.container = QWidget()
        self.container.setObjectName(widget_id)
        self.stack = QStackedWidget()

        for page in self.pages:
            page.connect_events(self.handle_user_event)

    def contents(self) -> QWidget:
        self._show_page(self._require_current())
        return self.container

    def mark_page(self, page: QtPage) -> None:
        super().mark_page(page)
        self._show_page(page)

    def _show_page(self, page: QtPage) -> None:
        widget = page.contents
        if self.stack.indexOf(widget) < 0:
            self.stack.addWidget(widget)
        self.stack.setCurrentWidget(widget)
        page.focus_default()

    def request_page(self, page_id: str) -> bool:
        """
        Navigation requested by the user through the navigation widget.

        Returns:
            True if ``page_id`` is active afterwards. When the leave policy
            refused the switch the navigation widget is re-synced to the page
            that stayed active.
        """
        self.handle(navigate_to(page_id, self.widget_id))
        if self.is_current(page_id):
            self.refresh_navigation()
            return True
        log_debug("Navigation re-synced to active page", requested=page_id)
        self.refresh_navigation()
        self.mark_page(self.current_page)
        return False

    def handle_user_event(self, event: Event) -> None:
        """Entry point for events raised by the pages' controls."""
        self.handle(event)
        self.refresh_navigation()

    def refresh_navigation(self) -> None:
        """Re-read page labels into the navigation widget."""
        refresh = getattr(self.navigation, "refresh_labels", None)
        if refresh is not None:
            refresh(self.pages)
