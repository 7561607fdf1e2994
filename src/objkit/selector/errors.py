"""Selector builder usage errors."""
from __future__ import annotations

from objkit.errors import ObjkitError
from objkit.selector.fragment import Fragment

ORDER_MESSAGE = (
    "fragments must appear in order: element, id, class, attribute, "
    "pseudo-class, pseudo-element"
)


class SelectorError(ObjkitError):
    """Base error for malformed selector call chains."""

    def __init__(self, message: str, *, fragment: Fragment) -> None:
        super().__init__(message)
        self.fragment = fragment


class DuplicateSingletonError(SelectorError):
    """Element, id or pseudo-element was set twice on one selector."""

    def __init__(self, fragment: Fragment) -> None:
        super().__init__(f"{fragment.label} occurs more than once", fragment=fragment)


class OutOfOrderError(SelectorError):
    """A fragment was added after one that must follow it."""

    def __init__(self, fragment: Fragment, conflict: Fragment) -> None:
        super().__init__(ORDER_MESSAGE, fragment=fragment)
        self.conflict = conflict
