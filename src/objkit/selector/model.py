"""Selector model: simple (compound) selectors and combinator expressions.

A simple selector accumulates fragments through chained setters::

    SimpleSelector().element("a").attr('href$=".png"').pseudo_class("focus")

Fragments must be added in grammar order (element, id, class, attribute,
pseudo-class, pseudo-element). Two selectors are joined into a
``CombinedSelector`` with a combinator token.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Protocol

from objkit.selector.errors import DuplicateSingletonError, OutOfOrderError
from objkit.selector.fragment import Combinator, Fragment

__all__ = ["SelectorExpression", "SimpleSelector", "CombinedSelector"]

logger = logging.getLogger(__name__)


class SelectorExpression(Protocol):
    """Anything that renders to a CSS selector string."""

    def stringify(self) -> str: ...


@dataclass
class SimpleSelector:
    """A compound selector built up one fragment at a time.

    Attributes:
        element_name: Type selector, at most once.
        id_name: Id selector, at most once.
        class_names: Class selectors in insertion order, repeats allowed.
        attribute: Attribute clause without brackets; a later call overwrites.
        pseudo_class_names: Pseudo-classes in insertion order, repeats allowed.
        pseudo_element_name: Pseudo-element, at most once.
    """

    element_name: str | None = None
    id_name: str | None = None
    class_names: list[str] = field(default_factory=list)
    attribute: str | None = None
    pseudo_class_names: list[str] = field(default_factory=list)
    pseudo_element_name: str | None = None

    # --- setters --------------------------------------------------------------

    def element(self, value: str) -> SimpleSelector:
        self._check_unique(Fragment.ELEMENT, self.element_name)
        self._check_order(Fragment.ELEMENT)
        self.element_name = value
        return self

    def id(self, value: str) -> SimpleSelector:
        self._check_unique(Fragment.ID, self.id_name)
        self._check_order(Fragment.ID)
        self.id_name = value
        return self

    def class_(self, value: str) -> SimpleSelector:
        self._check_order(Fragment.CLASS)
        self.class_names.append(value)
        return self

    def attr(self, value: str) -> SimpleSelector:
        self._check_order(Fragment.ATTRIBUTE)
        self.attribute = value
        return self

    def pseudo_class(self, value: str) -> SimpleSelector:
        self._check_order(Fragment.PSEUDO_CLASS)
        self.pseudo_class_names.append(value)
        return self

    def pseudo_element(self, value: str) -> SimpleSelector:
        self._check_unique(Fragment.PSEUDO_ELEMENT, self.pseudo_element_name)
        self.pseudo_element_name = value
        return self

    # --- rendering ------------------------------------------------------------

    def stringify(self) -> str:
        parts: list[str] = []
        if self.element_name is not None:
            parts.append(self.element_name)
        if self.id_name is not None:
            parts.append(f"#{self.id_name}")
        parts.extend(f".{name}" for name in self.class_names)
        if self.attribute is not None:
            parts.append(f"[{self.attribute}]")
        parts.extend(f":{name}" for name in self.pseudo_class_names)
        if self.pseudo_element_name is not None:
            parts.append(f"::{self.pseudo_element_name}")
        rendered = "".join(parts)
        logger.debug("Rendered selector %r", rendered)
        return rendered

    def __str__(self) -> str:
        return self.stringify()

    # --- grammar checks -------------------------------------------------------

    def populated(self) -> list[Fragment]:
        """Fragments that currently hold a value, in grammar order."""
        found: list[Fragment] = []
        if self.element_name is not None:
            found.append(Fragment.ELEMENT)
        if self.id_name is not None:
            found.append(Fragment.ID)
        if self.class_names:
            found.append(Fragment.CLASS)
        if self.attribute is not None:
            found.append(Fragment.ATTRIBUTE)
        if self.pseudo_class_names:
            found.append(Fragment.PSEUDO_CLASS)
        if self.pseudo_element_name is not None:
            found.append(Fragment.PSEUDO_ELEMENT)
        return found

    def _check_unique(self, fragment: Fragment, current: str | None) -> None:
        if current is not None:
            logger.debug("Rejected second %s %r", fragment.label, current)
            raise DuplicateSingletonError(fragment)

    def _check_order(self, fragment: Fragment) -> None:
        for existing in self.populated():
            if existing.follows(fragment):
                logger.debug(
                    "Rejected %s after %s", fragment.label, existing.label
                )
                raise OutOfOrderError(fragment, existing)


@dataclass(frozen=True)
class CombinedSelector:
    """Two selector expressions joined by a combinator.

    The token is not validated. It is always padded with one space on each
    side, so the descendant combinator renders as three spaces.
    """

    left: SelectorExpression
    combinator: Combinator | str
    right: SelectorExpression

    @property
    def token(self) -> str:
        if isinstance(self.combinator, Combinator):
            return self.combinator.value
        return self.combinator

    def stringify(self) -> str:
        rendered = f"{self.left.stringify()} {self.token} {self.right.stringify()}"
        logger.debug("Rendered combined selector %r", rendered)
        return rendered

    def __str__(self) -> str:
        return self.stringify()
