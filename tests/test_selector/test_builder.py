"""Tests for the CSS selector builder."""

from __future__ import annotations

import pytest

from objtasks.errors import DuplicateUniquePartError, OutOfOrderError, SelectorError
from objtasks.selector import (
    PartKind,
    SelectorBuilder,
    SelectorFactory,
    combine,
    css_selector_builder,
)

builder = css_selector_builder


# ---------------------------------------------------------------------------
# Part kinds
# ---------------------------------------------------------------------------


class TestPartKind:
    def test_ranks(self) -> None:
        assert [k.rank for k in PartKind] == [1, 2, 3, 4, 5, 6]

    def test_unique_kinds(self) -> None:
        assert {k for k in PartKind if k.unique} == {
            PartKind.ELEMENT,
            PartKind.ID,
            PartKind.PSEUDO_ELEMENT,
        }

    def test_render_templates(self) -> None:
        assert PartKind.ELEMENT.render("div") == "div"
        assert PartKind.ID.render("main") == "#main"
        assert PartKind.CLASS.render("box") == ".box"
        assert PartKind.ATTRIBUTE.render("href") == "[href]"
        assert PartKind.PSEUDO_CLASS.render("hover") == ":hover"
        assert PartKind.PSEUDO_ELEMENT.render("after") == "::after"

    def test_render_keeps_braces_literal(self) -> None:
        assert PartKind.ATTRIBUTE.render('data-x="{a}"') == '[data-x="{a}"]'


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


class TestStringify:
    def test_id_and_classes(self) -> None:
        result = builder.id("main").class_("container").class_("editable").stringify()
        assert result == "#main.container.editable"

    def test_element_attr_pseudo_class(self) -> None:
        result = builder.element("a").attr('href$=".png"').pseudo_class("focus").stringify()
        assert result == 'a[href$=".png"]:focus'

    def test_every_kind_in_order(self) -> None:
        result = (
            builder.element("input")
            .id("name")
            .class_("field")
            .attr("type=text")
            .pseudo_class("focus")
            .pseudo_element("placeholder")
            .stringify()
        )
        assert result == "input#name.field[type=text]:focus::placeholder"

    @pytest.mark.parametrize(
        "method,value,expected",
        [
            ("element", "div", "div"),
            ("id", "nav", "#nav"),
            ("class_", "hidden", ".hidden"),
            ("attr", "disabled", "[disabled]"),
            ("pseudo_class", "hover", ":hover"),
            ("pseudo_element", "before", "::before"),
        ],
    )
    def test_each_entry_point(self, method: str, value: str, expected: str) -> None:
        assert getattr(builder, method)(value).stringify() == expected

    def test_repeated_classes_attrs_and_pseudo_classes(self) -> None:
        result = (
            builder.class_("a")
            .class_("b")
            .attr("x")
            .attr("y")
            .pseudo_class("first-child")
            .pseudo_class("hover")
            .stringify()
        )
        assert result == ".a.b[x][y]:first-child:hover"

    def test_str_matches_stringify(self) -> None:
        sel = builder.element("p").class_("lead")
        assert str(sel) == sel.stringify() == "p.lead"

    def test_stringify_does_not_freeze(self) -> None:
        sel = builder.element("p")
        assert sel.stringify() == "p"
        sel.class_("x")
        assert sel.stringify() == "p.x"


# ---------------------------------------------------------------------------
# Builder state
# ---------------------------------------------------------------------------


class TestBuilderState:
    def test_fresh_builder(self) -> None:
        b = SelectorBuilder()
        assert b.stringify() == ""
        assert b.max_rank == 0
        assert b.used_kinds == frozenset()
        assert b.parts == ()

    def test_tracks_unique_kinds_only(self) -> None:
        b = builder.element("a").class_("x").pseudo_element("after")
        assert b.used_kinds == {PartKind.ELEMENT, PartKind.PSEUDO_ELEMENT}

    def test_max_rank_follows_last_part(self) -> None:
        b = builder.id("x")
        assert b.max_rank == 2
        b.attr("y")
        assert b.max_rank == 4

    def test_parts_record_raw_values(self) -> None:
        b = builder.element("a").attr("href")
        assert b.parts == ((PartKind.ELEMENT, "a"), (PartKind.ATTRIBUTE, "href"))

    def test_chain_returns_same_builder(self) -> None:
        b = builder.element("a")
        assert b.class_("x") is b

    def test_factory_part_by_kind(self) -> None:
        assert builder.part(PartKind.ID, "main").stringify() == "#main"


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


class TestDuplicateParts:
    @pytest.mark.parametrize(
        "chain",
        [
            lambda: builder.element("a").element("b"),
            lambda: builder.id("x").id("y"),
            lambda: builder.pseudo_element("after").pseudo_element("before"),
            lambda: builder.element("a").id("x").class_("c").id("y"),
        ],
    )
    def test_second_unique_part_raises(self, chain) -> None:
        with pytest.raises(DuplicateUniquePartError):
            chain()

    def test_message(self) -> None:
        with pytest.raises(DuplicateUniquePartError) as exc_info:
            builder.id("x").id("y")
        assert str(exc_info.value) == (
            "Element, id and pseudo-element should not occur more than one time "
            "inside the selector"
        )
        assert exc_info.value.kind is PartKind.ID

    def test_uniqueness_checked_before_order(self) -> None:
        with pytest.raises(DuplicateUniquePartError):
            builder.element("a").class_("x").element("b")


class TestOutOfOrder:
    @pytest.mark.parametrize(
        "chain",
        [
            lambda: builder.class_("a").id("b"),
            lambda: builder.id("a").element("div"),
            lambda: builder.attr("x").class_("y"),
            lambda: builder.pseudo_class("hover").attr("x"),
            lambda: builder.pseudo_element("after").pseudo_class("hover"),
            lambda: builder.pseudo_element("after").element("a"),
        ],
    )
    def test_lower_rank_after_higher_raises(self, chain) -> None:
        with pytest.raises(OutOfOrderError):
            chain()

    def test_message_and_details(self) -> None:
        with pytest.raises(OutOfOrderError) as exc_info:
            builder.class_("a").id("b")
        assert str(exc_info.value) == (
            "Selector parts should be arranged in the following order: element, "
            "id, class, attribute, pseudo-class, pseudo-element"
        )
        assert exc_info.value.kind is PartKind.ID
        assert exc_info.value.max_rank == 3

    def test_failed_part_is_not_appended(self) -> None:
        b = builder.class_("a")
        with pytest.raises(OutOfOrderError):
            b.id("b")
        assert b.stringify() == ".a"
        assert b.max_rank == 3

    def test_both_errors_are_selector_errors(self) -> None:
        assert issubclass(DuplicateUniquePartError, SelectorError)
        assert issubclass(OutOfOrderError, SelectorError)


# ---------------------------------------------------------------------------
# Facade isolation
# ---------------------------------------------------------------------------


class TestFacadeIsolation:
    def test_entry_points_return_new_builders(self) -> None:
        a = builder.element("a")
        b = builder.element("b")
        assert a is not b
        assert isinstance(a, SelectorBuilder)

    def test_independent_chains_do_not_interfere(self) -> None:
        first = builder.element("a")
        second = builder.id("b")
        first.id("x")
        second.class_("y")
        assert first.stringify() == "a#x"
        assert second.stringify() == "#b.y"

    def test_failed_chain_leaves_facade_usable(self) -> None:
        with pytest.raises(OutOfOrderError):
            builder.pseudo_element("after").element("a")
        assert builder.element("a").stringify() == "a"

    def test_factory_holds_no_state(self) -> None:
        assert SelectorFactory.__slots__ == ()
        with pytest.raises(AttributeError):
            builder.selector = "x"  # type: ignore[attr-defined]


# ---------------------------------------------------------------------------
# Combination
# ---------------------------------------------------------------------------


class TestCombine:
    def test_simple(self) -> None:
        result = builder.combine(builder.element("div"), "+", builder.element("span"))
        assert result.stringify() == "div + span"

    def test_nested(self) -> None:
        result = builder.combine(
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
        assert result == (
            "div#main.container.draggable + table#data ~ "
            "tr:nth-of-type(even)   td:nth-of-type(even)"
        )

    def test_child_combinator(self) -> None:
        result = combine(builder.class_("menu"), ">", builder.element("li"))
        assert result.stringify() == ".menu > li"

    def test_combine_from_builder_instance(self) -> None:
        left = builder.element("ul")
        result = left.combine(left, "~", builder.element("p"))
        assert result.stringify() == "ul ~ p"
        assert result is not left

    def test_result_is_opaque_element(self) -> None:
        result = builder.combine(builder.element("a"), "+", builder.element("b"))
        assert result.parts == ((PartKind.ELEMENT, "a + b"),)
        assert result.max_rank == 1

    def test_chaining_after_combine_appends(self) -> None:
        result = builder.combine(builder.element("a"), "+", builder.element("b"))
        assert result.class_("x").stringify() == "a + b.x"

    def test_chaining_element_after_combine_raises(self) -> None:
        result = builder.combine(builder.element("a"), "+", builder.element("b"))
        with pytest.raises(DuplicateUniquePartError):
            result.element("y")
        assert result.stringify() == "a + b"

    def test_combined_text_is_not_revalidated(self) -> None:
        # Both operands already hold an element and an id.
        result = builder.combine(
            builder.element("a").id("x"), ">", builder.element("b").id("y")
        )
        assert result.stringify() == "a#x > b#y"
        assert result.used_kinds == {PartKind.ELEMENT}

    def test_operands_are_not_mutated(self) -> None:
        left = builder.element("a")
        right = builder.element("b")
        builder.combine(left, "+", right)
        assert left.stringify() == "a"
        assert right.stringify() == "b"
