"""Selector model: fragment kinds and the fluent Selector builder."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import IntEnum

from cssbuilder.errors import DuplicateFragmentError, OrderViolationError

logger = logging.getLogger(__name__)


class FragmentKind(IntEnum):
    """Selector fragment kinds, in the order they must be added."""

    ELEMENT = 0
    ID = 1
    CLASS = 2
    ATTRIBUTE = 3
    PSEUDO_CLASS = 4
    PSEUDO_ELEMENT = 5
    COMBINE = 6


@dataclass
class Selector:
    """A compound CSS selector, optionally combined with a second one.

    Grammar of one compound selector::

        element#id.class[attr]:pseudoClass::pseudoElement
                  \\----/\\----/\\----------/
                  may occur several times

    Fragments must be added in the order above.  ``element``, ``id`` and
    ``pseudo_element`` may be set only once.  Every mutator returns the
    selector itself so calls can be chained.
    """

    element: str | None = None
    id: str | None = None
    classes: list[str] = field(default_factory=list)
    attributes: list[str] = field(default_factory=list)
    pseudo_classes: list[str] = field(default_factory=list)
    pseudo_element: str | None = None
    combinator: str | None = None
    next: Selector | None = None
    _rank: FragmentKind = field(
        default=FragmentKind.ELEMENT, repr=False, compare=False
    )

    # --- ordering -------------------------------------------------------------

    def _advance(self, kind: FragmentKind) -> None:
        if self._rank > kind:
            raise OrderViolationError(kind, self._rank)
        self._rank = kind

    # --- single-occurrence fragments ------------------------------------------

    def set_element(self, value: str) -> Selector:
        self._advance(FragmentKind.ELEMENT)
        if self.element:
            raise DuplicateFragmentError(FragmentKind.ELEMENT)
        self.element = value
        return self

    def set_id(self, value: str) -> Selector:
        self._advance(FragmentKind.ID)
        if self.id:
            raise DuplicateFragmentError(FragmentKind.ID)
        self.id = value
        return self

    def set_pseudo_element(self, value: str) -> Selector:
        self._advance(FragmentKind.PSEUDO_ELEMENT)
        if self.pseudo_element:
            raise DuplicateFragmentError(FragmentKind.PSEUDO_ELEMENT)
        self.pseudo_element = value
        return self

    # --- repeatable fragments -------------------------------------------------

    def add_class(self, value: str) -> Selector:
        self._advance(FragmentKind.CLASS)
        self.classes.append(value)
        return self

    def add_attribute(self, value: str) -> Selector:
        """Append an attribute fragment, stored verbatim (e.g. ``href$=".png"``)."""
        self._advance(FragmentKind.ATTRIBUTE)
        self.attributes.append(value)
        return self

    def add_pseudo_class(self, value: str) -> Selector:
        self._advance(FragmentKind.PSEUDO_CLASS)
        self.pseudo_classes.append(value)
        return self

    # --- combination ----------------------------------------------------------

    def combine(self, left: Selector, combinator: str, right: Selector) -> Selector:
        """Take over *left*'s fragments and join *right* with *combinator*.

        The six fragment fields of *left* overwrite the receiver's.  The
        combinator is embedded verbatim, without validation.  Afterwards no
        further fragments can be added.
        """
        self._advance(FragmentKind.COMBINE)
        if left.combinator is not None and left.next is not None:
            logger.warning(
                "combine: left operand %r already has a %r combinator; "
                "its right-hand chain is not carried over",
                left.render(),
                left.combinator,
            )
        self.element = left.element
        self.id = left.id
        self.classes = list(left.classes)
        self.attributes = list(left.attributes)
        self.pseudo_classes = list(left.pseudo_classes)
        self.pseudo_element = left.pseudo_element
        self.combinator = combinator
        self.next = right
        return self

    # --- rendering ------------------------------------------------------------

    def render(self) -> str:
        """Return the CSS selector string for this selector and its chain."""
        parts: list[str] = []
        if self.element:
            parts.append(self.element)
        if self.id:
            parts.append(f"#{self.id}")
        parts.extend(f".{value}" for value in self.classes)
        parts.extend(f"[{value}]" for value in self.attributes)
        parts.extend(f":{value}" for value in self.pseudo_classes)
        if self.pseudo_element:
            parts.append(f"::{self.pseudo_element}")
        if self.combinator and self.next is not None:
            parts.append(f" {self.combinator} {self.next.render()}")
        return "".join(parts)

    stringify = render

    def __str__(self) -> str:
        return self.render()
