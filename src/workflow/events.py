"""
Event values exchanged between the event loop, pagers, pages and widgets.

Events are plain data: the event loop (or a Qt signal adapter) builds them,
containers route them by ``widget_id``.
"""

from dataclasses import dataclass, field
from typing import Any, Dict


class EventReason:
    """Why an event was raised."""

    ACTIVATED = "Activated"
    VALUE_CHANGED = "ValueChanged"
    SELECTION_CHANGED = "SelectionChanged"


@dataclass
class Event:
    """An ordinary widget event, addressed by the id of its source widget."""

    widget_id: str
    reason: str = EventReason.ACTIVATED
    data: Dict[str, Any] = field(default_factory=dict)


@dataclass
class NavigationEvent(Event):
    """Request to make the page ``target_page_id`` the active page."""

    target_page_id: str = ""


def navigate_to(page_id: str, source_id: str = "navigation") -> NavigationEvent:
    """Build a navigation event targeting ``page_id``."""
    return NavigationEvent(
        widget_id=source_id,
        reason=EventReason.SELECTION_CHANGED,
        target_page_id=page_id,
    )
