"""
Wizard-style pager dialog.

Walks the user through the pages in order with Back/Next/Finish buttons.
Progress dots show the position and act as the pager's navigation sink.
Whether Next requires valid input is the pager's leave policy; Finish
always validates and stores the last page.
"""

import logging
from typing import Any, Dict, MutableMapping, Optional, Sequence

from PySide6.QtCore import Signal
from PySide6.QtWidgets import QDialog, QHBoxLayout, QLabel, QPushButton, QVBoxLayout

from ui.qt_page import QtPage
from ui.stacked_pager import StackedPager
from utils.logging_utils import log_warning
from workflow.navigation import LeavePolicy

logger = logging.getLogger(__name__)


class ProgressDots(QLabel):
    """Progress indicator: ● for the active page, ○ for the others."""

    def __init__(self, pages: Sequence, parent=None):
        super().__init__(parent)
        self._page_ids = [page.page_id for page in pages]
        self.setStyleSheet("color: #999; font-size: 16px;")
        self.setText(" ".join("○" for _ in self._page_ids))

    def mark_page(self, page):
        current = self._page_ids.index(page.page_id)
        dots = ["●" if i == current else "○" for i in range(len(self._page_ids))]
        self.setText(" ".join(dots))


class WizardPager(StackedPager):
    """Sequential pager; the stack fills the container."""

    def __init__(
        self,
        pages: Sequence[QtPage],
        leave_policy: LeavePolicy = LeavePolicy.REQUIRE_VALID,
        widget_id: str = "wizard_pager",
    ):
        self.dots = ProgressDots(pages)
        super().__init__(pages, self.dots, leave_policy, widget_id)

        layout = QVBoxLayout(self.container)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self.stack)

    @property
    def current_index(self) -> int:
        return self.pages.index(self._require_current())

    def is_first(self) -> bool:
        return self.current_index == 0

    def is_last(self) -> bool:
        return self.current_index == len(self.pages) - 1

    def next_page(self) -> bool:
        """Advance one page; False if already last or the leave policy refused."""
        if self.is_last():
            return False
        return self.switch_page(self.pages[self.current_index + 1].page_id)

    def previous_page(self) -> bool:
        """Go back one page; False if already first. Unfinished input never blocks going back."""
        if self.is_first():
            return False
        return self.switch_page(self.pages[self.current_index - 1].page_id, check_leave=False)


class PagerDialog(QDialog):
    """
    Modal dialog driving a WizardPager.

    Signals:
        workflow_complete: Emitted on Finish with the edited model
        workflow_cancelled: Emitted when the user cancels
    """

    workflow_complete = Signal(dict)
    workflow_cancelled = Signal()

    def __init__(self, pager: WizardPager, model: MutableMapping[str, Any], title: str = "", parent=None):
        """
        Initialize dialog.

        Args:
            pager: Pager holding the workflow pages
            model: Model the pages edit; emitted on completion
            title: Window title
            parent: Parent widget
        """
        super().__init__(parent)
        self.pager = pager
        self.model = model
        self._finished = False

        self.setWindowTitle(title)
        self.setModal(True)
        self.resize(650, 500)
        self._setup_ui()

        self.pager.init()
        self._update_navigation()

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setSpacing(0)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self.pager.container, 1)

        self.help_label = QLabel()
        self.help_label.setWordWrap(True)
        self.help_label.setStyleSheet("color: #999; padding: 0 20px;")
        layout.addWidget(self.help_label)

        layout.addLayout(self._create_navigation_bar())

    def _create_navigation_bar(self) -> QHBoxLayout:
        """Create bottom navigation bar with buttons and progress dots."""
        nav_layout = QHBoxLayout()
        nav_layout.setContentsMargins(20, 10, 20, 20)
        nav_layout.setSpacing(10)

        nav_layout.addWidget(self.pager.dots)
        nav_layout.addStretch()

        self.back_btn = QPushButton("← Back")
        self.back_btn.clicked.connect(self._on_back_clicked)
        nav_layout.addWidget(self.back_btn)

        self.next_btn = QPushButton("Next →")
        self.next_btn.clicked.connect(self._on_next_clicked)
        self.next_btn.setDefault(True)
        nav_layout.addWidget(self.next_btn)

        nav_layout.addSpacing(10)

        self.cancel_btn = QPushButton("Cancel")
        self.cancel_btn.clicked.connect(self.reject)
        nav_layout.addWidget(self.cancel_btn)

        return nav_layout

    def _update_navigation(self):
        """Update button visibility and labels for the active page."""
        self.back_btn.setVisible(not self.pager.is_first())
        self.next_btn.setText("Finish" if self.pager.is_last() else "Next →")
        self.help_label.setText(self.pager.help)

    def _on_back_clicked(self):
        self.pager.previous_page()
        self._update_navigation()

    def _on_next_clicked(self):
        """Handle Next/Finish button click."""
        if self.pager.is_last():
            self._finish()
            return

        if not self.pager.next_page():
            log_warning("Cannot advance from current page")
        self.pager.refresh_navigation()
        self._update_navigation()

    def _finish(self):
        if not self.pager.validate():
            log_warning("Cannot finish, last page has invalid input")
            return

        self.pager.store()
        self._finished = True
        logger.info("Workflow complete")
        self.workflow_complete.emit(dict(self.model))
        self.accept()

    def reject(self):
        """Handle dialog rejection (Cancel, Esc key, X button)."""
        if not self._finished:
            logger.info("Workflow cancelled by user")
            self.workflow_cancelled.emit()
        super().reject()

    def result_data(self) -> Optional[Dict[str, Any]]:
        """Edited model after Finish, None if cancelled or still open."""
        return dict(self.model) if self._finished else None
