"""
Workflow-specific exceptions.

Navigation and wiring errors are programming errors: they are raised as hard
failures and never turned into user-facing validation messages. A page that
fails validation is normal control flow and has no exception here.
"""

from typing import Iterable, Optional


class WorkflowError(Exception):
    """Base exception for all pager/page errors."""


class PageNotFoundError(WorkflowError, KeyError):
    """
    Raised when navigation targets a page id the pager never registered.

    Usually means the navigation display (tree, tab strip) and the pager's
    page set are wired differently.
    """

    def __init__(self, page_id: str, known_ids: Optional[Iterable[str]] = None):
        """
        Initialize page lookup failure.

        Args:
            page_id: Identifier that could not be resolved
            known_ids: Identifiers the pager does know (for the message)
        """
        self.page_id = page_id
        self.known_ids = list(known_ids or [])
        super().__init__(page_id)

    def __str__(self) -> str:
        known = ", ".join(self.known_ids) or "<none>"
        return f"Page '{self.page_id}' not found (known pages: {known})"


class DuplicatePageError(WorkflowError):
    """Raised when two pages of one pager share an id."""


class PagerNotInitializedError(WorkflowError):
    """Raised when an operation needs an active page before init() ran."""


class ReentrantSwitchError(WorkflowError):
    """Raised when switch_page() is called while a switch is in flight."""
