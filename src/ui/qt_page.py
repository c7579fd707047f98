"""
Qt page: a Page whose contents is a QWidget form built from its fields.
"""

import logging
from typing import Optional, Sequence

from PySide6.QtGui import QFont
from PySide6.QtWidgets import QFormLayout, QLabel, QVBoxLayout, QWidget

from ui.fields import EventSink, FieldGroup, QtField
from workflow.events import Event
from workflow.page import Page
from workflow.widget import Widget

logger = logging.getLogger(__name__)

DIRTY_MARKER = " *"


def build_form(parent: QWidget, children: Sequence[Widget]) -> QFormLayout:
    """
    Lay out ``children`` as form rows on ``parent``.

    Fields get a label/control row followed by their (hidden) error row;
    groups are added as full-width rows. Widgets without a Qt control are
    part of the lifecycle but not displayed.
    """
    form = QFormLayout(parent)
    for child in children:
        if isinstance(child, QtField):
            form.addRow(child.label, child.control)
            form.addRow("", child.error_label)
        elif isinstance(child, FieldGroup):
            form.addRow(child.box)
    return form


class QtPage(Page):
    """
    Page rendered as a titled form.

    The QWidget is built on first access to ``contents`` and reused for the
    page's lifetime. The label gets a trailing marker while any field holds
    unsaved input.
    """

    def __init__(self, page_id: str, label: str = "", children=None, help_text: str = "",
                 initial: bool = False, store_on_leave: bool = True):
        super().__init__(page_id, label, children, help_text, initial, store_on_leave)
        self._base_label = self.label
        self._contents: Optional[QWidget] = None

    @property
    def contents(self) -> QWidget:
        if self._contents is None:
            self._contents = self._build_contents()
        return self._contents

    def _build_contents(self) -> QWidget:
        widget = QWidget()
        widget.setObjectName(self.page_id)
        layout = QVBoxLayout(widget)
        layout.setContentsMargins(20, 20, 20, 20)
        layout.setSpacing(12)

        title = QLabel(self._base_label)
        title_font = QFont()
        title_font.setPointSize(14)
        title_font.setBold(True)
        title.setFont(title_font)
        layout.addWidget(title)

        form_container = QWidget()
        build_form(form_container, self.children)
        layout.addWidget(form_container)
        layout.addStretch()
        return widget

    def connect_events(self, sink: EventSink) -> None:
        """Report user edits of every field on this page to ``sink``."""
        for widget in self.iter_widgets():
            if isinstance(widget, QtField):
                widget.event_sink = sink

    def focus_default(self) -> None:
        """Give keyboard focus to the field that asked for it, if any."""
        widget_id = self.default_focus
        widget = self.find(widget_id) if widget_id else None
        if isinstance(widget, QtField):
            widget.control.setFocus()

    def init(self) -> None:
        super().init()
        self.refresh_label()

    def handle(self, event: Event) -> Optional[Event]:
        result = super().handle(event)
        self.refresh_label()
        return result

    def store(self) -> None:
        super().store()
        self.refresh_label()

    def refresh_label(self) -> None:
        self.label = self._base_label + (DIRTY_MARKER if self.dirty_widget_ids() else "")
