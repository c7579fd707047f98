"""
Tests for the Qt form fields and QtPage.
"""

from unittest.mock import Mock

from PySide6.QtWidgets import QWidget

from ui.fields import CheckBoxField, ComboBoxField, FieldGroup, LineEditField
from ui.qt_page import DIRTY_MARKER, QtPage
from workflow.events import EventReason


def test_init_loads_model_values(qtbot, settings_model):
    name = LineEditField("user_name", "Name", settings_model)
    tls = CheckBoxField("use_tls", "Use TLS", settings_model)
    theme = ComboBoxField("theme", "Theme", settings_model, ["Dark", "Light"])

    for field in (name, tls, theme):
        field.init()

    assert name.value() == "Ada"
    assert tls.value() is True
    assert theme.value() == "Light"
    assert not any(field.dirty for field in (name, tls, theme))


def test_missing_key_uses_default(qtbot):
    field = ComboBoxField("theme", "Theme", {}, ["Dark", "Light"])

    field.init()

    assert field.value() == "Dark"


def test_key_can_differ_from_widget_id(qtbot):
    model = {"server.host": "example.org"}
    field = LineEditField("hostname", "Hostname", model, key="server.host")

    field.init()
    field.control.setText("example.com")
    field.store()

    assert model == {"server.host": "example.com"}


def test_edit_marks_dirty_and_reports_event(qtbot, settings_model):
    field = LineEditField("user_name", "Name", settings_model)
    field.init()
    sink = Mock()
    field.event_sink = sink

    field.control.setText("Grace")

    assert field.dirty
    event = sink.call_args[0][0]
    assert event.widget_id == "user_name"
    assert event.reason == EventReason.VALUE_CHANGED
    assert event.data == {"value": "Grace"}


def test_reverting_edit_clears_dirty(qtbot, settings_model):
    field = LineEditField("user_name", "Name", settings_model)
    field.init()

    field.control.setText("Grace")
    field.control.setText("Ada")

    assert not field.dirty


def test_init_does_not_report_events(qtbot, settings_model):
    field = LineEditField("user_name", "Name", settings_model)
    sink = Mock()
    field.event_sink = sink

    field.init()

    sink.assert_not_called()


def test_store_writes_back_and_clears_dirty(qtbot, settings_model):
    field = CheckBoxField("use_tls", "Use TLS", settings_model)
    field.init()

    field.control.setChecked(False)
    field.store()

    assert settings_model["use_tls"] is False
    assert not field.dirty


def test_required_field_shows_inline_error(qtbot):
    field = LineEditField("user_name", "Name", {}, required=True)
    field.init()

    assert field.validate() is False
    assert not field.error_label.isHidden()
    assert field.error_label.text() == "Name is required"

    field.control.setText("Ada")
    assert field.validate() is True
    assert field.error_label.isHidden()


def test_field_group_builds_box_once(qtbot, settings_model):
    group = FieldGroup("proxy_settings", "Proxy server", [
        LineEditField("proxy_host", "Host", settings_model),
    ])

    assert group.box is group.box
    assert group.box.title() == "Proxy server"


def test_qt_page_contents_built_once(qtbot, settings_model):
    page = QtPage("general", "General", [LineEditField("user_name", "Name", settings_model)])

    contents = page.contents

    assert isinstance(contents, QWidget)
    assert page.contents is contents


def test_qt_page_label_marks_unsaved_input(qtbot, settings_model):
    page = QtPage("general", "General", [LineEditField("user_name", "Name", settings_model)])
    page.connect_events(page.handle)
    page.init()

    page.find("user_name").control.setText("Grace")
    assert page.label == "General" + DIRTY_MARKER

    page.store()
    assert page.label == "General"
    assert settings_model["user_name"] == "Grace"


def test_qt_page_focus_default(qtbot, settings_model):
    page = QtPage("general", "General", [
        LineEditField("email", "E-mail", settings_model),
        LineEditField("user_name", "Name", settings_model, focus=True),
    ])

    assert page.default_focus == "user_name"
