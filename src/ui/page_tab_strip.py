"""
PageTabStrip - Segmented control showing one tab per page.

Displays the pages as flat toggle buttons with the active page checked.
"""

from typing import Dict, Optional, Sequence

from PySide6.QtCore import Signal
from PySide6.QtWidgets import QButtonGroup, QHBoxLayout, QPushButton, QWidget


class PageTabStrip(QWidget):
    """
    Segmented control for selecting a page.

    Acts as the navigation sink of a TabPager: mark_page() checks a tab
    without emitting anything, only user clicks emit page_requested.

    Signals:
        page_requested: Emitted when the user clicks a different tab (str: page id)
    """

    page_requested = Signal(str)

    def __init__(self, pages: Sequence, parent=None):
        super().__init__(parent)

        self._current_page_id: Optional[str] = None
        self.buttons: Dict[str, QPushButton] = {}

        self._setup_ui(pages)
        self._apply_styles()

    def _setup_ui(self, pages: Sequence):
        """Create one checkable button per page."""
        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        # Button group for mutual exclusivity
        self.button_group = QButtonGroup(self)
        self.button_group.setExclusive(True)

        for page in pages:
            button = QPushButton(page.label)
            button.setCheckable(True)
            button.setProperty("page_id", page.page_id)
            button.clicked.connect(lambda checked=False, page_id=page.page_id: self._on_tab_clicked(page_id))
            self.button_group.addButton(button)
            self.buttons[page.page_id] = button
            layout.addWidget(button)

        layout.addStretch()

    def _apply_styles(self):
        """Apply flat segmented control styling."""
        style = """
            QPushButton {
                border: 1px solid #555;
                background-color: #2b2b2b;
                color: #ccc;
                padding: 8px 20px;
                font-size: 13px;
                border-radius: 0;
                min-width: 90px;
                min-height: 34px;
            }
            QPushButton:hover {
                background-color: #3a3a3a;
                color: #ffffff;
            }
            QPushButton:checked {
                background-color: #0e639c;
                color: white;
                border: 1px solid #1177bb;
                font-weight: bold;
            }
        """
        self.setStyleSheet(style)

    def _on_tab_clicked(self, page_id: str):
        """Handle tab click."""
        if self._current_page_id != page_id:
            self.page_requested.emit(page_id)

    def mark_page(self, page):
        """Check the tab of ``page`` (no signal emitted)."""
        self._current_page_id = page.page_id
        self.buttons[page.page_id].setChecked(True)

    def refresh_labels(self, pages: Sequence):
        """Update tab texts from the page labels."""
        for page in pages:
            self.buttons[page.page_id].setText(page.label)

    def get_current_page_id(self) -> Optional[str]:
        """Get the id of the marked page."""
        return self._current_page_id
