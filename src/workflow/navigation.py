"""
Navigation display capability and leave policy.

A pager reports every page change to exactly one NavigationSink: the tree,
tab strip or progress indicator that shows the user where they are.
"""

from enum import Enum
from typing import Protocol, runtime_checkable


@runtime_checkable
class NavigationSink(Protocol):
    """Anything that can highlight the active page."""

    def mark_page(self, page) -> None:
        """
        Visually mark ``page`` as the active page.

        Args:
            page: The Page that just became active
        """
        ...


class NullNavigation:
    """Sink for pagers that display no navigation chrome."""

    def mark_page(self, page) -> None:
        pass


class LeavePolicy(Enum):
    """What a pager checks before leaving the active page."""

    ALWAYS = "always"  # switch unconditionally (drafts allowed)
    REQUIRE_VALID = "require_valid"  # departing page must validate

    @classmethod
    def from_string(cls, value: str) -> "LeavePolicy":
        """
        Parse a policy name as written in config.ini.

        Args:
            value: "always" or "require_valid" (case-insensitive)

        Raises:
            ValueError: If the name is unknown
        """
        normalized = value.strip().lower().replace("-", "_")
        for policy in cls:
            if policy.value == normalized:
                return policy
        raise ValueError(f"Unknown leave policy: {value!r}")
