"""Incrementally built selector fragment."""

from __future__ import annotations

from selectorkit.selector.errors import DuplicatePartError, PartOrderError
from selectorkit.selector.model import PartKind

__all__ = ["SelectorFragment"]


class SelectorFragment:
    """Accumulates selector text while enforcing part order and repetition.

    Every append method mutates the fragment in place and returns it, so calls
    chain::

        SelectorFragment().element("a").attr('href$=".png"').pseudo_class("focus")

    Parts must be appended in rank order (see :class:`PartKind`). Element, id
    and pseudo-element may appear at most once; the others may repeat.
    """

    def __init__(self, text: str = "") -> None:
        self.text = text
        self.last_rank = 0
        self.seen: set[PartKind] = set()

    def append(self, kind: PartKind, value: str) -> SelectorFragment:
        """Append *value* rendered as *kind*.

        The duplicate check runs before the order check. On failure the
        fragment is left untouched.
        """
        if not kind.repeatable and kind in self.seen:
            raise DuplicatePartError(kind)
        if kind.rank < self.last_rank:
            raise PartOrderError(kind, self.last_rank)

        self.text += kind.render(value)
        self.last_rank = kind.rank
        if not kind.repeatable:
            self.seen.add(kind)
        return self

    # --- one method per part kind ---------------------------------------------

    def element(self, value: str) -> SelectorFragment:
        return self.append(PartKind.ELEMENT, value)

    def id(self, value: str) -> SelectorFragment:
        return self.append(PartKind.ID, value)

    def class_(self, value: str) -> SelectorFragment:
        return self.append(PartKind.CLASS, value)

    def attr(self, value: str) -> SelectorFragment:
        return self.append(PartKind.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> SelectorFragment:
        return self.append(PartKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> SelectorFragment:
        return self.append(PartKind.PSEUDO_ELEMENT, value)

    # --- output ---------------------------------------------------------------

    def stringify(self) -> str:
        """Return the accumulated selector text."""
        return self.text

    render = stringify

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return f"SelectorFragment({self.text!r})"
