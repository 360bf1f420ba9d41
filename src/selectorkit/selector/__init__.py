"""CSS selector builder with part order and repetition checks."""

from selectorkit.selector.builder import SelectorBuilder, css_selector_builder
from selectorkit.selector.errors import (
    DuplicatePartError,
    PartOrderError,
    SelectorError,
    SelectorSyntaxError,
    UnknownPartError,
)
from selectorkit.selector.fragment import SelectorFragment
from selectorkit.selector.model import COMBINATORS, PartKind

__all__ = [
    "css_selector_builder",
    "SelectorBuilder",
    "SelectorFragment",
    "PartKind",
    "COMBINATORS",
    "SelectorError",
    "DuplicatePartError",
    "PartOrderError",
    "UnknownPartError",
    "SelectorSyntaxError",
]
