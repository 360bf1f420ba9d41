"""Facade for constructing selector fragments.

Example:
    builder = css_selector_builder

    builder.id("main").class_("container").class_("editable").stringify()
        -> '#main.container.editable'

    builder.element("a").attr('href$=".png"').pseudo_class("focus").stringify()
        -> 'a[href$=".png"]:focus'

    builder.combine(
        builder.element("div").id("main").class_("container").class_("draggable"),
        "+",
        builder.combine(
            builder.element("table").id("data"),
            "~",
            builder.combine(
                builder.element("tr").pseudo_class("nth-of-type(even)"),
                " ",
                builder.element("td").pseudo_class("nth-of-type(even)"),
            ),
        ),
    ).stringify()
        -> 'div#main.container.draggable + table#data ~ tr:nth-of-type(even)   td:nth-of-type(even)'
"""

from __future__ import annotations

import logging
from typing import Iterable, Union

from selectorkit.selector.errors import SelectorSyntaxError, UnknownPartError
from selectorkit.selector.fragment import SelectorFragment
from selectorkit.selector.model import COMBINATORS, PartKind

__all__ = ["SelectorBuilder", "css_selector_builder"]

logger = logging.getLogger(__name__)

# A part is (kind, value) where kind is a PartKind or its label; a bare string
# is a combinator.
Token = Union[tuple[Union[PartKind, str], str], str]


class SelectorBuilder:
    """Entry points that start a new fragment or join two fragments."""

    @staticmethod
    def element(value: str) -> SelectorFragment:
        return SelectorFragment().element(value)

    @staticmethod
    def id(value: str) -> SelectorFragment:
        return SelectorFragment().id(value)

    @staticmethod
    def class_(value: str) -> SelectorFragment:
        return SelectorFragment().class_(value)

    @staticmethod
    def attr(value: str) -> SelectorFragment:
        return SelectorFragment().attr(value)

    @staticmethod
    def pseudo_class(value: str) -> SelectorFragment:
        return SelectorFragment().pseudo_class(value)

    @staticmethod
    def pseudo_element(value: str) -> SelectorFragment:
        return SelectorFragment().pseudo_element(value)

    @staticmethod
    def combine(left: SelectorFragment, combinator: str, right: SelectorFragment) -> SelectorFragment:
        """Join two fragments as ``left <combinator> right``.

        The combinator is always wrapped in single spaces, so the descendant
        combinator ``" "`` yields three spaces. The result is a fresh fragment
        with no rank or repetition history.
        """
        text = f"{left.stringify()} {combinator} {right.stringify()}"
        logger.debug("Combined selector: %r", text)
        return SelectorFragment(text)

    @classmethod
    def build(cls, tokens: Iterable[Token]) -> SelectorFragment:
        """Assemble a fragment from parts and combinators in order.

        Consecutive parts are appended to the same compound selector; a
        combinator closes it and starts the next one::

            build([("element", "ul"), ("class", "menu"), ">", ("element", "li")])
            # 'ul.menu > li'
        """
        result: SelectorFragment | None = None
        operator: str | None = None
        compound: SelectorFragment | None = None

        for token in tokens:
            if isinstance(token, str):
                if token not in COMBINATORS:
                    raise SelectorSyntaxError(f"Unknown combinator: {token!r}")
                if compound is None:
                    raise SelectorSyntaxError(f"Combinator {token!r} must follow a selector")
                result = compound if result is None else cls.combine(result, operator, compound)
                operator, compound = token, None
                continue

            label, value = token
            kind = label if isinstance(label, PartKind) else _lookup_kind(label)
            if compound is None:
                compound = SelectorFragment()
            compound.append(kind, value)

        if compound is None:
            if operator is None:
                raise SelectorSyntaxError("Selector is empty")
            raise SelectorSyntaxError(f"Combinator {operator!r} has no right-hand selector")
        if result is None:
            return compound
        return cls.combine(result, operator, compound)


def _lookup_kind(label: str) -> PartKind:
    try:
        return PartKind.from_label(label)
    except KeyError:
        raise UnknownPartError(label) from None


css_selector_builder = SelectorBuilder()
