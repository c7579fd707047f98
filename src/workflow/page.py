"""
Page: one navigable unit of a multi-page workflow.

A page owns its widget subtree and forwards every lifecycle call into it
(see CustomWidget). On top of that it carries the stable identifier the
pager navigates by and the label a navigation display shows.
"""

import logging
from typing import Any, Optional, Sequence

from workflow.widget import CustomWidget, Widget

logger = logging.getLogger(__name__)


class Page(CustomWidget):
    """
    Navigable widget container.

    Attributes:
        label: Display string, may change (e.g. to flag invalid input)
        initial: Ask the pager to start on this page
        store_on_leave: Persist input via store() before the pager leaves
        initialized: Set once init() ran at least once
    """

    def __init__(
        self,
        page_id: str,
        label: str = "",
        children: Optional[Sequence[Widget]] = None,
        help_text: str = "",
        initial: bool = False,
        store_on_leave: bool = True,
    ):
        super().__init__(page_id, children, help_text)
        self.label = label or page_id
        self.initial = initial
        self.store_on_leave = store_on_leave
        self.initialized = False

    @property
    def page_id(self) -> str:
        return self.widget_id

    @property
    def contents(self) -> Any:
        """
        Root of the page's owned widget subtree.

        Toolkit bindings override this to return a native container built
        once and reused for the page's lifetime.
        """
        return self.children

    def init(self) -> None:
        """Initialize every child; calling again re-runs initialization."""
        logger.debug(f"Initializing page '{self.page_id}'")
        super().init()
        self.initialized = True
