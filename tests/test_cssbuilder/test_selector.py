"""Tests for the Selector builder and its facade."""

import logging

import pytest

from cssbuilder import (
    CssSelectorBuilder,
    DuplicateFragmentError,
    FragmentKind,
    OrderViolationError,
    Selector,
    SelectorError,
    css_selector_builder as builder,
)


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


class TestRender:
    def test_empty_selector_renders_empty_string(self):
        assert Selector().render() == ""

    def test_element_only(self):
        assert builder.element("div").render() == "div"

    def test_id_with_classes(self):
        result = builder.id("main").add_class("container").add_class("editable")
        assert result.render() == "#main.container.editable"

    def test_element_attribute_pseudo_class(self):
        result = builder.element("a").add_attribute('href$=".png"').add_pseudo_class("focus")
        assert result.render() == 'a[href$=".png"]:focus'

    def test_full_compound(self):
        result = (
            builder.element("input")
            .set_id("name")
            .add_class("wide")
            .add_attribute("type=text")
            .add_pseudo_class("invalid")
            .set_pseudo_element("placeholder")
        )
        assert result.render() == "input#name.wide[type=text]:invalid::placeholder"

    def test_repeated_fragments_keep_insertion_order(self):
        result = (
            builder.class_("b")
            .add_class("a")
            .add_attribute("x")
            .add_attribute("y")
            .add_pseudo_class("hover")
            .add_pseudo_class("focus")
        )
        assert result.render() == ".b.a[x][y]:hover:focus"

    def test_pseudo_element_alone(self):
        assert builder.pseudo_element("after").render() == "::after"

    def test_attribute_alone(self):
        assert builder.attr("disabled").render() == "[disabled]"

    def test_pseudo_class_alone(self):
        assert builder.pseudo_class("nth-of-type(even)").render() == ":nth-of-type(even)"

    def test_render_is_idempotent(self):
        sel = builder.element("li").add_class("item").add_pseudo_class("first-child")
        assert sel.render() == sel.render() == "li.item:first-child"

    def test_str_and_stringify_match_render(self):
        sel = builder.element("p").set_id("intro")
        assert str(sel) == sel.stringify() == sel.render() == "p#intro"

    def test_chaining_returns_same_instance(self):
        sel = Selector()
        assert sel.set_element("div") is sel
        assert sel.add_class("x") is sel


# ---------------------------------------------------------------------------
# Ordering and single-occurrence rules
# ---------------------------------------------------------------------------


class TestOrdering:
    def test_class_after_attribute_rejected(self):
        sel = builder.element("a").add_attribute("href")
        with pytest.raises(OrderViolationError) as exc_info:
            sel.add_class("link")
        assert exc_info.value.kind is FragmentKind.CLASS
        assert exc_info.value.after is FragmentKind.ATTRIBUTE

    def test_element_after_id_rejected(self):
        with pytest.raises(OrderViolationError):
            builder.id("main").set_element("div")

    def test_id_after_class_rejected(self):
        with pytest.raises(OrderViolationError):
            builder.class_("x").set_id("main")

    def test_pseudo_class_after_pseudo_element_rejected(self):
        with pytest.raises(OrderViolationError):
            builder.pseudo_element("before").add_pseudo_class("hover")

    def test_skipping_kinds_is_allowed(self):
        assert builder.element("a").add_pseudo_class("visited").render() == "a:visited"

    def test_message_names_the_order(self):
        with pytest.raises(OrderViolationError, match="element, id, class, attribute"):
            builder.pseudo_class("hover").add_attribute("x")

    def test_errors_share_base_class(self):
        with pytest.raises(SelectorError):
            builder.attr("x").add_class("y")


class TestSingleOccurrence:
    def test_duplicate_id(self):
        with pytest.raises(DuplicateFragmentError) as exc_info:
            builder.id("a").set_id("b")
        assert exc_info.value.kind is FragmentKind.ID

    def test_duplicate_element(self):
        with pytest.raises(DuplicateFragmentError):
            builder.element("div").set_element("span")

    def test_duplicate_pseudo_element(self):
        with pytest.raises(DuplicateFragmentError):
            builder.pseudo_element("before").set_pseudo_element("after")

    def test_empty_string_counts_as_unset(self):
        assert builder.element("").set_element("div").render() == "div"
        assert builder.id("").set_id("main").render() == "#main"
        assert builder.pseudo_element("").set_pseudo_element("after").render() == "::after"

    def test_order_checked_before_duplicate(self):
        # Going back to element after an id is an ordering problem first.
        with pytest.raises(OrderViolationError):
            builder.element("div").set_id("x").set_element("span")

    def test_message(self):
        with pytest.raises(DuplicateFragmentError, match="more than one time"):
            builder.element("a").set_element("b")


# ---------------------------------------------------------------------------
# Combinators
# ---------------------------------------------------------------------------


class TestCombine:
    def test_adjacent_sibling(self):
        result = builder.combine(
            builder.element("div").set_id("main"),
            "+",
            builder.element("table").set_id("data"),
        )
        assert result.render() == "div#main + table#data"

    def test_nested_right_associative(self):
        result = builder.combine(
            builder.element("div").set_id("main").add_class("container").add_class("draggable"),
            "+",
            builder.combine(
                builder.element("table").set_id("data"),
                "~",
                builder.combine(
                    builder.element("tr").add_pseudo_class("nth-of-type(even)"),
                    " ",
                    builder.element("td").add_pseudo_class("nth-of-type(even)"),
                ),
            ),
        )
        assert result.render() == (
            "div#main.container.draggable + table#data ~ "
            "tr:nth-of-type(even)   td:nth-of-type(even)"
        )

    def test_descendant_renders_three_spaces(self):
        result = builder.combine(builder.element("ul"), " ", builder.element("li"))
        assert result.render() == "ul   li"

    def test_child_combinator(self):
        result = builder.combine(builder.class_("menu"), ">", builder.element("a"))
        assert result.render() == ".menu > a"

    def test_combinator_not_validated(self):
        result = builder.combine(builder.element("a"), "||", builder.element("b"))
        assert result.render() == "a || b"

    def test_left_fields_are_copied(self):
        left = builder.element("div").add_class("x")
        result = builder.combine(left, ">", builder.element("p"))
        left.add_class("y")
        assert result.render() == "div.x > p"
        assert result.classes == ["x"]

    def test_right_operand_is_referenced(self):
        right = builder.element("p")
        result = builder.combine(builder.element("div"), ">", right)
        assert result.next is right

    def test_combine_overwrites_receiver_fragments(self):
        receiver = Selector().combine(builder.element("a"), "+", builder.element("b"))
        receiver.combine(builder.id("x"), "~", builder.element("c"))
        assert receiver.render() == "#x ~ c"
        assert receiver.element is None

    def test_fragment_after_combine_rejected(self):
        result = builder.combine(builder.element("a"), "+", builder.element("b"))
        with pytest.raises(OrderViolationError):
            result.add_class("late")

    def test_combined_left_operand_chain_is_dropped(self, caplog):
        inner = builder.combine(builder.element("a"), "+", builder.element("b"))
        with caplog.at_level(logging.WARNING, logger="cssbuilder.model"):
            result = builder.combine(inner, "~", builder.element("c"))
        assert result.render() == "a ~ c"
        assert "not carried over" in caplog.text


class TestFacade:
    def test_each_call_returns_fresh_selector(self):
        assert builder.element("a") is not builder.element("a")

    def test_facade_is_stateless(self):
        first = CssSelectorBuilder().class_("x")
        second = CssSelectorBuilder().class_("y")
        assert first.render() == ".x"
        assert second.render() == ".y"
