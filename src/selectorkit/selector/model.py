"""Selector part kinds and combinators."""

from __future__ import annotations

from enum import Enum

__all__ = ["PartKind", "COMBINATORS"]


class PartKind(Enum):
    """The six compound-selector parts, in the order CSS requires them.

    Each member carries its rank (1-6), whether it may repeat within a
    compound selector, and the prefix/suffix used to render a value:

        element#id.class[attr]:pseudo-class::pseudo-element
                  \\----/\\----/\\----------/
                  may repeat
    """

    ELEMENT = ("element", 1, False, "", "")
    ID = ("id", 2, False, "#", "")
    CLASS = ("class", 3, True, ".", "")
    ATTRIBUTE = ("attr", 4, True, "[", "]")
    PSEUDO_CLASS = ("pseudo-class", 5, True, ":", "")
    PSEUDO_ELEMENT = ("pseudo-element", 6, False, "::", "")

    def __init__(self, label: str, rank: int, repeatable: bool, prefix: str, suffix: str) -> None:
        self.label = label
        self.rank = rank
        self.repeatable = repeatable
        self.prefix = prefix
        self.suffix = suffix

    def render(self, value: str) -> str:
        """Return *value* wrapped in this kind's syntax, e.g. ``#main``."""
        return f"{self.prefix}{value}{self.suffix}"

    @classmethod
    def from_label(cls, label: str) -> PartKind:
        """Look up a kind by its label (``element``, ``pseudo-class``, ...).

        Raises ``KeyError`` for unknown labels.
        """
        for kind in cls:
            if kind.label == label:
                return kind
        raise KeyError(label)


# Descendant, adjacent sibling, general sibling, child.
COMBINATORS: frozenset[str] = frozenset({" ", "+", "~", ">"})
