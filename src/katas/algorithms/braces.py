"""Brace expansion: ``a{b,c}d`` -> ``abd``, ``acd``."""

from __future__ import annotations

import re
from typing import Iterator

# Innermost alternation: braces with no braces inside.
_INNERMOST_RE = re.compile(r"\{([^{}]*)\}")


def expand_braces(source: str) -> Iterator[str]:
    """Yield every distinct expansion of the brace alternations in *source*.

    Alternations may nest and may contain empty alternatives
    (``e{d,}`` -> ``ed``, ``e``).  Output order is unspecified.
    """
    pending = [source]
    seen: set[str] = set()
    while pending:
        text = pending.pop()
        match = _INNERMOST_RE.search(text)
        if match is None:
            if text not in seen:
                seen.add(text)
                yield text
            continue
        head, tail = text[: match.start()], text[match.end() :]
        for alternative in match.group(1).split(","):
            pending.append(head + alternative + tail)
