"""
Widget lifecycle contract and the composite that forwards it.

Every node of a page's widget tree supports the same lifecycle:

- init(): populate displayed state from the edited model
- handle(event): react to an event, optionally returning a follow-up event
- store(): write displayed state back into the model
- validate(): report whether the current input is acceptable
- help: documentation text shown for the widget

CustomWidget owns an ordered list of child widgets and forwards each
lifecycle call into it. Toolkit bindings subclass these classes and add the
native control; the routing rules stay here.
"""

from typing import Iterator, List, Optional, Sequence

from workflow.events import Event


class Widget:
    """
    Smallest lifecycle-participating UI unit.

    Attributes:
        dirty: Holds input that differs from what init() loaded
        focus: Asks for the default keyboard focus of its page
        handle_all_events: Receives every event, not only its own
    """

    def __init__(self, widget_id: str, help_text: str = ""):
        self._widget_id = widget_id
        self._help_text = help_text
        self.dirty = False
        self.focus = False
        self.handle_all_events = False

    @property
    def widget_id(self) -> str:
        return self._widget_id

    @property
    def help(self) -> str:
        return self._help_text

    def init(self) -> None:
        pass

    def handle(self, event: Event) -> Optional[Event]:
        return None

    def store(self) -> None:
        pass

    def validate(self) -> bool:
        return True

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.widget_id!r})"


class CustomWidget(Widget):
    """Widget owning a nested tree of child widgets."""

    def __init__(self, widget_id: str, children: Optional[Sequence[Widget]] = None, help_text: str = ""):
        super().__init__(widget_id, help_text)
        self._children: List[Widget] = list(children or [])

    @property
    def children(self) -> List[Widget]:
        """Direct children in declared order."""
        return self._children

    def add_child(self, widget: Widget) -> None:
        self._children.append(widget)

    def iter_widgets(self) -> Iterator[Widget]:
        """Depth-first walk over all nested widgets (self excluded)."""
        for child in self._children:
            yield child
            if isinstance(child, CustomWidget):
                yield from child.iter_widgets()

    def find(self, widget_id: str) -> Optional[Widget]:
        """Return the nested widget with ``widget_id`` or None."""
        for widget in self.iter_widgets():
            if widget.widget_id == widget_id:
                return widget
        return None

    def owns(self, widget_id: str) -> bool:
        return self.find(widget_id) is not None

    def init(self) -> None:
        for child in self._children:
            child.init()

    def handle(self, event: Event) -> Optional[Event]:
        """
        Route ``event`` to the child it is addressed to.

        A child receives the event if it is the event's source, contains the
        source somewhere in its own subtree, or handles all events. The first
        non-None result is returned unchanged.
        """
        for child in self._children:
            if not self._accepts(child, event):
                continue
            result = child.handle(event)
            if result is not None:
                return result
        return None

    @staticmethod
    def _accepts(child: Widget, event: Event) -> bool:
        if child.handle_all_events or child.widget_id == event.widget_id:
            return True
        return isinstance(child, CustomWidget) and child.owns(event.widget_id)

    def store(self) -> None:
        for child in self._children:
            child.store()

    def validate(self) -> bool:
        # Every child is asked so each one can show its own error.
        results = [child.validate() for child in self._children]
        return all(results)

    @property
    def help(self) -> str:
        texts = [self._help_text] + [child.help for child in self._children]
        return "\n".join(text for text in texts if text)

    def dirty_widget_ids(self) -> List[str]:
        """Ids of all nested widgets holding unsaved input."""
        return [widget.widget_id for widget in self.iter_widgets() if widget.dirty]

    @property
    def default_focus(self) -> Optional[str]:
        """Id of the first nested widget asking for focus."""
        for widget in self.iter_widgets():
            if widget.focus:
                return widget.widget_id
        return None
