"""Toolkit-neutral page/pager workflow core."""

from .errors import (
    DuplicatePageError,
    PageNotFoundError,
    PagerNotInitializedError,
    ReentrantSwitchError,
    WorkflowError,
)
from .events import Event, EventReason, NavigationEvent, navigate_to
from .navigation import LeavePolicy, NavigationSink, NullNavigation
from .page import Page
from .pager import Pager
from .widget import CustomWidget, Widget

__all__ = [
    'CustomWidget',
    'DuplicatePageError',
    'Event',
    'EventReason',
    'LeavePolicy',
    'NavigationEvent',
    'NavigationSink',
    'NullNavigation',
    'Page',
    'PageNotFoundError',
    'Pager',
    'PagerNotInitializedError',
    'ReentrantSwitchError',
    'Widget',
    'WorkflowError',
    'navigate_to',
]
