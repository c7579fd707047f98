"""
Pager: container for an ordered set of pages with one active page.

The pager mediates every lifecycle call through exactly the active page and
owns the single navigation primitive, switch_page(). Pages are initialized
lazily, the first time they become active, so startup cost does not grow
with the number of pages.

Concrete pagers decide how the active page is framed (contents()) and
supply the NavigationSink that highlights the active page in a tree, tab
strip or progress indicator.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, List, Optional, Sequence, Tuple

from utils.logging_utils import TimingSpan, log_info, set_page_context
from workflow.errors import (
    DuplicatePageError,
    PageNotFoundError,
    PagerNotInitializedError,
    ReentrantSwitchError,
)
from workflow.events import Event, NavigationEvent
from workflow.navigation import LeavePolicy, NavigationSink
from workflow.page import Page
from workflow.widget import Widget

logger = logging.getLogger(__name__)


class Pager(Widget, ABC):
    """
    Base pager state machine.

    Lifecycle:
        1. Constructed with a non-empty, fixed list of pages
        2. init() activates the initial page
        3. switch_page()/handle() move between pages
        4. Discarded; all persisted state lives in the pages' widgets

    Attributes:
        leave_policy: Whether the departing page must validate before a switch
    """

    def __init__(
        self,
        pages: Sequence[Page],
        navigation: NavigationSink,
        leave_policy: LeavePolicy = LeavePolicy.ALWAYS,
        widget_id: str = "pager",
    ):
        """
        Initialize pager.

        Args:
            pages: Pages in display order; ids must be unique
            navigation: Sink notified after every page change
            leave_policy: Check applied before leaving the active page
            widget_id: Id of the pager itself

        Raises:
            ValueError: If no pages are given
            DuplicatePageError: If two pages share an id
            TypeError: If navigation does not implement mark_page()
        """
        super().__init__(widget_id)
        if not pages:
            raise ValueError("Pager needs at least one page")

        seen = set()
        for page in pages:
            if page.page_id in seen:
                raise DuplicatePageError(f"Duplicate page id '{page.page_id}'")
            seen.add(page.page_id)

        if not isinstance(navigation, NavigationSink):
            raise TypeError(f"{type(navigation).__name__} does not implement mark_page()")

        self._pages: Tuple[Page, ...] = tuple(pages)
        self._navigation = navigation
        self._current_page: Optional[Page] = None
        self._switching = False
        self.leave_policy = leave_policy

    @property
    def pages(self) -> Tuple[Page, ...]:
        return self._pages

    @property
    def current_page(self) -> Optional[Page]:
        """Active page, None before init(). Only switch_page() changes it."""
        return self._current_page

    @property
    def navigation(self) -> NavigationSink:
        return self._navigation

    def page_ids(self) -> List[str]:
        return [page.page_id for page in self._pages]

    def page(self, page_id: str) -> Page:
        """
        Resolve a page id.

        Raises:
            PageNotFoundError: If no page has this id
        """
        for page in self._pages:
            if page.page_id == page_id:
                return page
        raise PageNotFoundError(page_id, self.page_ids())

    def is_current(self, page_id: str) -> bool:
        return self._current_page is not None and self._current_page.page_id == page_id

    def initial_page(self) -> Page:
        """Page activated by init(): the first page flagged initial, else the first page."""
        for page in self._pages:
            if page.initial:
                return page
        return self._pages[0]

    def init(self) -> None:
        """Activate the initial page (if none is active yet) and mark it."""
        page = self._current_page if self._current_page is not None else self.initial_page()
        set_page_context(page.page_id)
        if not page.initialized:
            self._init_page(page)
        self._current_page = page
        self.mark_page(page)

    @abstractmethod
    def contents(self) -> Any:
        """Active page's contents, framed the way the concrete pager displays it."""

    def mark_page(self, page: Page) -> None:
        """Reflect ``page`` as active in the navigation display."""
        self._navigation.mark_page(page)

    def switch_page(self, target_id: str, check_leave: bool = True) -> bool:
        """
        Make ``target_id`` the active page.

        Steps: resolve the target, leave the active page (leave policy, then
        store() if the page asks for it), activate the target, initialize it
        if it never was, mark it. Callers re-fetch contents() afterwards.

        Args:
            target_id: Id of the page to activate
            check_leave: When False the departing page is left as is: no leave
                policy check and no store(). Used for backward moves that must
                not be blocked by input the user has not finished.

        Returns:
            True if the active page changed, False for a no-op (target already
            active) or a switch refused by the leave policy

        Raises:
            PageNotFoundError: If ``target_id`` is not a registered page
            ReentrantSwitchError: If called while another switch is running

        Exceptions raised by the target's init() propagate; the departing page
        then stays active.
        """
        if self._switching:
            raise ReentrantSwitchError(f"switch_page('{target_id}') called during another page switch")

        target = self.page(target_id)
        if target is self._current_page:
            logger.debug(f"Page '{target_id}' already active")
            return False

        self._switching = True
        try:
            departing = self._current_page
            if departing is not None and check_leave:
                if not self._may_leave(departing):
                    log_info("Page switch refused, input invalid", target=target_id)
                    return False
                if departing.store_on_leave:
                    departing.store()

            self._current_page = target
            set_page_context(target.page_id)
            try:
                if not target.initialized:
                    self._init_page(target)
            except Exception:
                # Target never became usable, stay on the departing page
                self._current_page = departing
                set_page_context(departing.page_id if departing is not None else None)
                raise
            self.mark_page(target)
        finally:
            self._switching = False

        logger.debug(f"Switched to page '{target_id}'")
        return True

    def _may_leave(self, page: Page) -> bool:
        if self.leave_policy is LeavePolicy.REQUIRE_VALID:
            return page.validate()
        return True

    def _init_page(self, page: Page) -> None:
        with TimingSpan("page_init", level=logging.DEBUG):
            page.init()

    def navigation_target(self, event: Event) -> Optional[str]:
        """
        Target page id of a navigation event, None for ordinary events.

        Besides NavigationEvent, an event raised by a widget named after a
        page (a tree item or tab button) counts as navigation too.
        """
        if isinstance(event, NavigationEvent):
            return event.target_page_id
        if event.widget_id in self.page_ids():
            return event.widget_id
        return None

    def handle(self, event: Event) -> Optional[Event]:
        """Switch pages on navigation events, forward anything else to the active page."""
        target_id = self.navigation_target(event)
        if target_id is not None:
            self.switch_page(target_id)
            return None
        return self._require_current().handle(event)

    def store(self) -> None:
        """Store the active page only; pages never shown hold no live input."""
        self._require_current().store()

    def validate(self) -> bool:
        return self._require_current().validate()

    @property
    def help(self) -> str:
        if self._current_page is None:
            return ""
        return self._current_page.help

    def dirty_widget_ids(self) -> List[str]:
        if self._current_page is None:
            return []
        return self._current_page.dirty_widget_ids()

    @property
    def default_focus(self) -> Optional[str]:
        if self._current_page is None:
            return None
        return self._current_page.default_focus

    def _require_current(self) -> Page:
        if self._current_page is None:
            raise PagerNotInitializedError(f"{type(self).__name__} has no active page; call init() first")
        return self._current_page
