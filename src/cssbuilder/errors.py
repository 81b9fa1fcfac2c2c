"""Error hierarchy for the CSS selector builder."""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cssbuilder.model import FragmentKind


class SelectorError(Exception):
    """Base error for all cssbuilder errors."""


class OrderViolationError(SelectorError):
    """A fragment kind was added after a later-ranked kind."""

    def __init__(self, kind: FragmentKind, after: FragmentKind) -> None:
        super().__init__(
            "Selector parts should be arranged in the following order: "
            "element, id, class, attribute, pseudo-class, pseudo-element"
        )
        self.kind = kind
        self.after = after


class DuplicateFragmentError(SelectorError):
    """Element, id or pseudo-element was set twice on one selector."""

    def __init__(self, kind: FragmentKind) -> None:
        super().__init__(
            "Element, id and pseudo-element should not occur more than "
            "one time inside the selector"
        )
        self.kind = kind


class SelectorParseError(SelectorError):
    """Raised when selector text cannot be parsed."""

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ) -> None:
        self.line = line
        self.column = column
        super().__init__(message)
