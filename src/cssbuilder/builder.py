"""Facade that starts a new selector chain per fragment kind.

Example::

    builder = css_selector_builder
    builder.id("main").add_class("container").add_class("editable").render()
    # '#main.container.editable'

    builder.combine(
        builder.element("div").set_id("main"),
        "+",
        builder.element("table").set_id("data"),
    ).render()
    # 'div#main + table#data'
"""

from __future__ import annotations

from cssbuilder.model import Selector

__all__ = ["CssSelectorBuilder", "css_selector_builder"]


class CssSelectorBuilder:
    """Stateless entry points, each returning a fresh :class:`Selector`."""

    def element(self, value: str) -> Selector:
        return Selector().set_element(value)

    def id(self, value: str) -> Selector:
        return Selector().set_id(value)

    def class_(self, value: str) -> Selector:
        return Selector().add_class(value)

    def attr(self, value: str) -> Selector:
        return Selector().add_attribute(value)

    def pseudo_class(self, value: str) -> Selector:
        return Selector().add_pseudo_class(value)

    def pseudo_element(self, value: str) -> Selector:
        return Selector().set_pseudo_element(value)

    def combine(self, left: Selector, combinator: str, right: Selector) -> Selector:
        return Selector().combine(left, combinator, right)


css_selector_builder = CssSelectorBuilder()
