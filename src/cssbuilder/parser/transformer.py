"""Lark Transformer that converts selector text into a Selector chain."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Callable

from lark import Lark, Token, Transformer
from lark.exceptions import UnexpectedInput

from cssbuilder.errors import SelectorParseError
from cssbuilder.model import FragmentKind, Selector

logger = logging.getLogger(__name__)

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"

# Terminal name -> (fragment kind, prefix length, suffix length).
_TERMINALS: dict[str, tuple[FragmentKind, int, int]] = {
    "ELEMENT": (FragmentKind.ELEMENT, 0, 0),
    "ID": (FragmentKind.ID, 1, 0),
    "CLASS": (FragmentKind.CLASS, 1, 0),
    "ATTRIBUTE": (FragmentKind.ATTRIBUTE, 1, 1),
    "PSEUDO_CLASS": (FragmentKind.PSEUDO_CLASS, 1, 0),
    "PSEUDO_ELEMENT": (FragmentKind.PSEUDO_ELEMENT, 2, 0),
}

_APPLY: dict[FragmentKind, Callable[[Selector, str], Selector]] = {
    FragmentKind.ELEMENT: Selector.set_element,
    FragmentKind.ID: Selector.set_id,
    FragmentKind.CLASS: Selector.add_class,
    FragmentKind.ATTRIBUTE: Selector.add_attribute,
    FragmentKind.PSEUDO_CLASS: Selector.add_pseudo_class,
    FragmentKind.PSEUDO_ELEMENT: Selector.set_pseudo_element,
}

Fragment = tuple[FragmentKind, str]


@dataclass
class _Chain:
    """Compounds in source order and the combinators between them."""

    compounds: list[list[Fragment]] = field(default_factory=list)
    combinators: list[str] = field(default_factory=list)


class SelectorTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a Lark parse tree into plain fragment lists."""

    def compound(self, items: list[Token]) -> list[Fragment]:
        fragments: list[Fragment] = []
        for token in items:
            kind, prefix, suffix = _TERMINALS[token.type]
            raw = str(token)
            fragments.append((kind, raw[prefix : len(raw) - suffix]))
        return fragments

    def start(self, items: list[object]) -> _Chain:
        chain = _Chain()
        for item in items:
            if isinstance(item, Token):
                # Bare whitespace is the descendant combinator.
                chain.combinators.append(str(item).strip() or " ")
            else:
                chain.compounds.append(item)  # type: ignore[arg-type]
        return chain


def _build(fragments: list[Fragment]) -> Selector:
    selector = Selector()
    for kind, value in fragments:
        _APPLY[kind](selector, value)
    return selector


def _assemble(chain: _Chain) -> Selector:
    """Fold compounds right-to-left, mirroring nested ``combine`` calls."""
    selector = _build(chain.compounds[-1])
    pairs = list(zip(chain.compounds[:-1], chain.combinators))
    for fragments, combinator in reversed(pairs):
        selector = Selector().combine(_build(fragments), combinator, selector)
    return selector


@lru_cache(maxsize=None)
def _parser() -> Lark:
    return Lark(GRAMMAR_PATH.read_text(encoding="utf-8"), parser="lalr", start="start")


def parse_selector(source: str) -> Selector:
    """Parse selector text into a Selector chain.

    Fragments are replayed through the builder, so ordering and
    single-occurrence violations raise the builder's own errors.
    """
    text = source.strip()
    try:
        tree = _parser().parse(text)
    except UnexpectedInput as exc:
        raise SelectorParseError(
            str(exc),
            line=getattr(exc, "line", None),
            column=getattr(exc, "column", None),
        ) from exc
    chain = SelectorTransformer().transform(tree)
    logger.debug(
        "parsed %d compound selector(s) from %r", len(chain.compounds), text
    )
    return _assemble(chain)
