"""
Form fields: leaf widgets binding one Qt input control to one model key.

Each field implements the widget lifecycle against a dict-like model:
init() loads model[key] into the control, store() writes it back and
validate() checks the current input, showing an inline error when it fails.
User edits mark the field dirty and are reported as ValueChanged events to
the connected event sink.
"""

import logging
from typing import Any, Callable, MutableMapping, Optional, Sequence

from PySide6.QtWidgets import QCheckBox, QComboBox, QGroupBox, QLabel, QLineEdit, QWidget

from workflow.events import Event, EventReason
from workflow.widget import CustomWidget, Widget

logger = logging.getLogger(__name__)

EventSink = Callable[[Event], Any]


class QtField(Widget):
    """
    Base class for model-bound Qt input fields.

    Subclasses create the control and convert between control and model
    values; lifecycle, dirty tracking and error display live here.
    """

    def __init__(
        self,
        widget_id: str,
        label: str,
        model: MutableMapping[str, Any],
        key: Optional[str] = None,
        help_text: str = "",
        focus: bool = False,
    ):
        super().__init__(widget_id, help_text)
        self.label = label
        self.focus = focus
        self.event_sink: Optional[EventSink] = None
        self._model = model
        self._key = key or widget_id
        self._loaded_value: Any = None
        self._loading = False

        self.control = self._create_control()
        self.control.setObjectName(widget_id)
        if help_text:
            self.control.setToolTip(help_text)

        self.error_label = QLabel()
        self.error_label.setStyleSheet("color: #e06c75;")
        self.error_label.setVisible(False)

    # Subclass hooks

    def _create_control(self) -> QWidget:
        raise NotImplementedError

    def _default_value(self) -> Any:
        return None

    def value(self) -> Any:
        """Current value shown by the control."""
        raise NotImplementedError

    def _set_value(self, value: Any) -> None:
        raise NotImplementedError

    def _check(self) -> Optional[str]:
        """Return an error message for invalid input, None if valid."""
        return None

    # Lifecycle

    def init(self) -> None:
        self._loading = True
        try:
            self._set_value(self._model.get(self._key, self._default_value()))
        finally:
            self._loading = False
        self._loaded_value = self.value()
        self.dirty = False
        self._show_error(None)

    def store(self) -> None:
        value = self.value()
        self._model[self._key] = value
        self._loaded_value = value
        self.dirty = False
        logger.debug(f"Stored {self._key}={value!r}")

    def validate(self) -> bool:
        error = self._check()
        self._show_error(error)
        return error is None

    def _show_error(self, message: Optional[str]) -> None:
        self.error_label.setText(message or "")
        self.error_label.setVisible(bool(message))

    def _on_control_changed(self, *args) -> None:
        if self._loading:
            return
        value = self.value()
        self.dirty = value != self._loaded_value
        if self.event_sink is not None:
            self.event_sink(Event(self.widget_id, EventReason.VALUE_CHANGED, {"value": value}))


class LineEditField(QtField):
    """Single-line text input. Required fields reject blank input."""

    def __init__(self, widget_id: str, label: str, model, key=None, help_text="", focus=False,
                 required: bool = False, placeholder: str = ""):
        self.required = required
        super().__init__(widget_id, label, model, key, help_text, focus)
        if placeholder:
            self.control.setPlaceholderText(placeholder)

    def _create_control(self) -> QLineEdit:
        control = QLineEdit()
        control.textChanged.connect(self._on_control_changed)
        return control

    def _default_value(self) -> str:
        return ""

    def value(self) -> str:
        return self.control.text()

    def _set_value(self, value: Any) -> None:
        self.control.setText("" if value is None else str(value))

    def _check(self) -> Optional[str]:
        if self.required and not self.value().strip():
            return f"{self.label} is required"
        return None


class CheckBoxField(QtField):
    """Boolean toggle."""

    def _create_control(self) -> QCheckBox:
        control = QCheckBox()
        control.toggled.connect(self._on_control_changed)
        return control

    def _default_value(self) -> bool:
        return False

    def value(self) -> bool:
        return self.control.isChecked()

    def _set_value(self, value: Any) -> None:
        self.control.setChecked(bool(value))


class ComboBoxField(QtField):
    """Choice from a fixed list of strings."""

    def __init__(self, widget_id: str, label: str, model, items: Sequence[str], key=None,
                 help_text="", focus=False):
        self._items = list(items)
        super().__init__(widget_id, label, model, key, help_text, focus)

    def _create_control(self) -> QComboBox:
        control = QComboBox()
        control.addItems(self._items)
        control.currentTextChanged.connect(self._on_control_changed)
        return control

    def _default_value(self) -> str:
        return self._items[0] if self._items else ""

    def value(self) -> str:
        return self.control.currentText()

    def _set_value(self, value: Any) -> None:
        index = self.control.findText(str(value))
        self.control.setCurrentIndex(max(index, 0))

    def _check(self) -> Optional[str]:
        if self.value() not in self._items:
            return f"{self.label}: choose one of {', '.join(self._items)}"
        return None


class FieldGroup(CustomWidget):
    """Titled group of fields rendered as a QGroupBox."""

    def __init__(self, widget_id: str, title: str, children: Sequence[Widget], help_text: str = ""):
        super().__init__(widget_id, children, help_text)
        self.title = title
        self._box: Optional[QGroupBox] = None

    @property
    def box(self) -> QGroupBox:
        if self._box is None:
            from ui.qt_page import build_form

            self._box = QGroupBox(self.title)
            build_form(self._box, self.children)
        return self._box
