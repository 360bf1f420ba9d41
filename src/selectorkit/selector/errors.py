"""Selector construction errors."""

from __future__ import annotations

from selectorkit.errors import SelectorKitError
from selectorkit.selector.model import PartKind

DUPLICATE_PART_MESSAGE = (
    "Element, id and pseudo-element should not occur more then one time inside the selector"
)
PART_ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: "
    "element, id, class, attribute, pseudo-class, pseudo-element"
)


class SelectorError(SelectorKitError):
    """Base error for selector construction failures."""


class DuplicatePartError(SelectorError):
    """A non-repeatable part (element, id, pseudo-element) was appended twice."""

    def __init__(self, kind: PartKind) -> None:
        super().__init__(DUPLICATE_PART_MESSAGE)
        self.kind = kind


class PartOrderError(SelectorError):
    """A part was appended after a part of higher rank."""

    def __init__(self, kind: PartKind, last_rank: int) -> None:
        super().__init__(PART_ORDER_MESSAGE)
        self.kind = kind
        self.last_rank = last_rank


class UnknownPartError(SelectorError):
    """A part kind name was not recognised."""

    def __init__(self, label: str) -> None:
        super().__init__(f"Unknown selector part: {label!r}")
        self.label = label


class SelectorSyntaxError(SelectorError):
    """A sequence of parts and combinators could not be assembled."""
