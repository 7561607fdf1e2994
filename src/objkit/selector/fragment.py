"""Selector fragment kinds and combinator tokens."""

from __future__ import annotations

from enum import Enum


class Fragment(Enum):
    """One of the six pieces of a compound selector, in grammar order."""

    ELEMENT = (1, "element")
    ID = (2, "id")
    CLASS = (3, "class")
    ATTRIBUTE = (4, "attribute")
    PSEUDO_CLASS = (5, "pseudo-class")
    PSEUDO_ELEMENT = (6, "pseudo-element")

    def __init__(self, rank: int, label: str) -> None:
        self.rank = rank
        self.label = label

    def follows(self, other: Fragment) -> bool:
        """True if this fragment must appear after ``other``."""
        return self.rank > other.rank


class Combinator(Enum):
    """The four CSS combinators."""

    DESCENDANT = " "
    CHILD = ">"
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"
