"""Tests for the css_selector_builder facade."""

import pytest

from selectorkit.selector import (
    DuplicatePartError,
    PartKind,
    PartOrderError,
    SelectorBuilder,
    SelectorFragment,
    SelectorSyntaxError,
    UnknownPartError,
    css_selector_builder,
)

builder = css_selector_builder


# ---------------------------------------------------------------------------
# Leaf constructors
# ---------------------------------------------------------------------------


class TestLeafConstructors:
    def test_each_returns_fresh_fragment(self):
        a = builder.element("a")
        b = builder.element("b")
        assert isinstance(a, SelectorFragment)
        assert a is not b
        assert a.stringify() == "a"
        assert b.stringify() == "b"

    @pytest.mark.parametrize(
        "method,expected",
        [
            ("element", "x"),
            ("id", "#x"),
            ("class_", ".x"),
            ("attr", "[x]"),
            ("pseudo_class", ":x"),
            ("pseudo_element", "::x"),
        ],
    )
    def test_rendering(self, method, expected):
        assert getattr(builder, method)("x").stringify() == expected

    def test_fragments_do_not_share_state(self):
        first = builder.element("div")
        builder.element("p")
        first.id("main")
        assert first.stringify() == "div#main"

    def test_examples(self):
        assert (
            builder.id("main").class_("container").class_("editable").stringify()
            == "#main.container.editable"
        )
        assert (
            builder.element("a").attr('href$=".png"').pseudo_class("focus").stringify()
            == 'a[href$=".png"]:focus'
        )

    def test_errors_propagate(self):
        with pytest.raises(DuplicatePartError):
            builder.element("div").element("p")
        with pytest.raises(PartOrderError):
            builder.class_("x").id("main")

    def test_static_access(self):
        assert SelectorBuilder.element("li").stringify() == "li"


# ---------------------------------------------------------------------------
# combine
# ---------------------------------------------------------------------------


class TestCombine:
    def test_adjacent_sibling(self):
        assert builder.combine(builder.element("div"), "+", builder.element("p")).stringify() == "div + p"

    def test_child(self):
        frag = builder.combine(
            builder.id("main").class_("container"), ">", builder.element("span")
        )
        assert frag.stringify() == "#main.container > span"

    def test_general_sibling(self):
        frag = builder.combine(builder.element("h1"), "~", builder.element("p"))
        assert frag.stringify() == "h1 ~ p"

    def test_descendant_keeps_three_spaces(self):
        frag = builder.combine(builder.element("ul"), " ", builder.element("li"))
        assert frag.stringify() == "ul   li"

    def test_nested(self):
        frag = builder.combine(
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
        )
        assert frag.stringify() == (
            "div#main.container.draggable + table#data ~ "
            "tr:nth-of-type(even)   td:nth-of-type(even)"
        )

    def test_combined_result_is_new_fragment(self):
        left = builder.element("div")
        right = builder.element("p")
        combined = builder.combine(left, "+", right)
        assert combined is not left
        assert combined is not right
        assert left.stringify() == "div"
        assert right.stringify() == "p"

    def test_combined_resets_tracking(self):
        combined = builder.combine(builder.element("div").pseudo_element("after"), ">", builder.element("p"))
        assert combined.last_rank == 0
        assert combined.seen == set()
        # Appends are checked against the reset state.
        combined.element("span")
        assert combined.stringify() == "div::after > pspan"


# ---------------------------------------------------------------------------
# build
# ---------------------------------------------------------------------------


class TestBuild:
    def test_single_compound(self):
        frag = builder.build([("element", "a"), ("attr", "href"), ("pseudo-class", "hover")])
        assert frag.stringify() == "a[href]:hover"

    def test_accepts_part_kinds(self):
        frag = builder.build([(PartKind.ID, "main"), (PartKind.CLASS, "wide")])
        assert frag.stringify() == "#main.wide"

    def test_with_combinators(self):
        frag = builder.build(
            [("element", "ul"), ("class", "menu"), ">", ("element", "li"), "+", ("element", "li")]
        )
        assert frag.stringify() == "ul.menu > li + li"

    def test_matches_nested_combine(self):
        frag = builder.build(
            [
                ("element", "div"), ("id", "main"), ("class", "container"), ("class", "draggable"),
                "+",
                ("element", "table"), ("id", "data"),
                "~",
                ("element", "tr"), ("pseudo-class", "nth-of-type(even)"),
                " ",
                ("element", "td"), ("pseudo-class", "nth-of-type(even)"),
            ]
        )
        assert frag.stringify() == (
            "div#main.container.draggable + table#data ~ "
            "tr:nth-of-type(even)   td:nth-of-type(even)"
        )

    def test_order_checked_per_compound(self):
        frag = builder.build([("class", "a"), ">", ("element", "b")])
        assert frag.stringify() == ".a > b"

    def test_order_error(self):
        with pytest.raises(PartOrderError):
            builder.build([("class", "a"), ("id", "b")])

    def test_duplicate_error(self):
        with pytest.raises(DuplicatePartError):
            builder.build([("element", "a"), ("element", "b")])

    def test_unknown_kind(self):
        with pytest.raises(UnknownPartError) as exc_info:
            builder.build([("tag", "a")])
        assert exc_info.value.label == "tag"

    def test_unknown_combinator(self):
        with pytest.raises(SelectorSyntaxError, match="Unknown combinator"):
            builder.build([("element", "a"), "|", ("element", "b")])

    def test_leading_combinator(self):
        with pytest.raises(SelectorSyntaxError, match="must follow a selector"):
            builder.build([">", ("element", "a")])

    def test_double_combinator(self):
        with pytest.raises(SelectorSyntaxError):
            builder.build([("element", "a"), ">", "+", ("element", "b")])

    def test_trailing_combinator(self):
        with pytest.raises(SelectorSyntaxError, match="no right-hand selector"):
            builder.build([("element", "a"), ">"])

    def test_empty(self):
        with pytest.raises(SelectorSyntaxError, match="empty"):
            builder.build([])
