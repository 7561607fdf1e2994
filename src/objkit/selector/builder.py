"""Facade for building selectors: each entry point starts a new chain."""

from __future__ import annotations

from objkit.selector.fragment import Combinator
from objkit.selector.model import CombinedSelector, SelectorExpression, SimpleSelector

__all__ = ["SelectorBuilder", "css_selector_builder"]


class SelectorBuilder:
    """Starts selector chains.

    ``element``, ``id``, ``class_``, ``attr``, ``pseudo_class`` and
    ``pseudo_element`` each return a fresh ``SimpleSelector`` seeded with one
    fragment; ``combine`` joins two finished expressions.
    """

    def element(self, value: str) -> SimpleSelector:
        return SimpleSelector().element(value)

    def id(self, value: str) -> SimpleSelector:
        return SimpleSelector().id(value)

    def class_(self, value: str) -> SimpleSelector:
        return SimpleSelector().class_(value)

    def attr(self, value: str) -> SimpleSelector:
        return SimpleSelector().attr(value)

    def pseudo_class(self, value: str) -> SimpleSelector:
        return SimpleSelector().pseudo_class(value)

    def pseudo_element(self, value: str) -> SimpleSelector:
        return SimpleSelector().pseudo_element(value)

    def combine(
        self,
        left: SelectorExpression,
        combinator: Combinator | str,
        right: SelectorExpression,
    ) -> CombinedSelector:
        return CombinedSelector(left=left, combinator=combinator, right=right)


css_selector_builder = SelectorBuilder()
