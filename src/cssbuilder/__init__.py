"""cssbuilder: fluent CSS selector builder."""
from __future__ import annotations

from cssbuilder.builder import CssSelectorBuilder, css_selector_builder
from cssbuilder.errors import (
    DuplicateFragmentError,
    OrderViolationError,
    SelectorError,
    SelectorParseError,
)
from cssbuilder.model import FragmentKind, Selector
from cssbuilder.parser import parse_selector

__version__ = "0.1.0"

__all__ = [
    "CssSelectorBuilder",
    "DuplicateFragmentError",
    "FragmentKind",
    "OrderViolationError",
    "Selector",
    "SelectorError",
    "SelectorParseError",
    "css_selector_builder",
    "parse_selector",
]
