"""
Reusable contract checks for widgets and pagers.

Projects building their own pages or pagers call these from their tests to
verify the lifecycle contract, e.g.::

    def test_my_pager_contract():
        assert_pager_contract(MyPager())
"""

from typing import List

from workflow.errors import PageNotFoundError
from workflow.events import Event
from workflow.pager import Pager
from workflow.widget import Widget


class RecordingNavigation:
    """NavigationSink that records every page it is asked to mark."""

    def __init__(self):
        self.marked: List = []

    def mark_page(self, page) -> None:
        self.marked.append(page)

    @property
    def marked_ids(self) -> List[str]:
        return [page.page_id for page in self.marked]

    def reset(self):
        self.marked.clear()


def assert_custom_widget_contract(widget: Widget):
    """Check the lifecycle contract every widget must honor."""
    assert isinstance(widget.widget_id, str) and widget.widget_id
    assert isinstance(widget.help, str)

    widget.init()
    result = widget.handle(Event(widget_id="__contract_foreign_event__"))
    assert result is None or isinstance(result, Event)
    assert isinstance(widget.validate(), bool)
    widget.store()


def assert_pager_contract(pager: Pager):
    """Check the pager contract: membership, navigation, contents, failures."""
    assert len(pager.pages) >= 1

    pager.init()
    assert_custom_widget_contract(pager)
    assert pager.current_page in pager.pages
    assert pager.contents() is not None

    for page in pager.pages:
        pager.switch_page(page.page_id)
        assert pager.current_page is page
        assert pager.contents() is not None

    before = pager.current_page
    try:
        pager.switch_page("__contract_missing_page__")
    except PageNotFoundError:
        pass
    else:
        raise AssertionError("switch_page() to an unknown id must raise PageNotFoundError")
    assert pager.current_page is before
