from objkit.selector.builder import SelectorBuilder, css_selector_builder
from objkit.selector.errors import (
    DuplicateSingletonError,
    OutOfOrderError,
    SelectorError,
)
from objkit.selector.fragment import Combinator, Fragment
from objkit.selector.model import CombinedSelector, SelectorExpression, SimpleSelector

__all__ = [
    "SelectorBuilder",
    "css_selector_builder",
    "SelectorExpression",
    "SimpleSelector",
    "CombinedSelector",
    "Combinator",
    "Fragment",
    "SelectorError",
    "DuplicateSingletonError",
    "OutOfOrderError",
]
