# freqtab/matcher.py
"""
Adapter between the scanner and the regex engine (`re`, bytes mode).

The scanner only needs three things from an engine:
    compile_pattern(text)   -> Matcher           (InvalidPattern on failure)
    Matcher.find(view)      -> Match | None      (EngineOutOfResources)
    Match.span / group_span -> offsets relative to the view

Patterns are compiled case-insensitively. The first capturing group (groups
are numbered by their opening parenthesis) is reported as group_span.
"""

from __future__ import annotations

import re
from typing import Optional, Tuple

from freqtab.errors import EngineOutOfResources, InvalidPattern

Span = Tuple[int, int]


class Match:
    __slots__ = ("span", "group_span")

    def __init__(self, span: Span, group_span: Optional[Span] = None):
        self.span = span
        self.group_span = group_span

    @property
    def start(self) -> int:
        return self.span[0]

    @property
    def end(self) -> int:
        return self.span[1]

    def key_span(self) -> Span:
        """Group 1 if it matched something non-empty, else the whole match."""
        g = self.group_span
        if g is not None and g[0] != g[1]:
            return g
        return self.span

    def __repr__(self):
        return f"Match(span={self.span}, group_span={self.group_span})"


class Matcher:
    def __init__(self, text: str, compiled: "re.Pattern[bytes]"):
        self.text = text
        self._re = compiled
        self.has_group = compiled.groups >= 1

    def find(self, view) -> Optional[Match]:
        """
        Leftmost match inside `view` (bytes or memoryview), or None.
        The engine is never shown anything beyond the view.
        """
        try:
            m = self._re.search(view)
        except (MemoryError, RecursionError) as e:
            raise EngineOutOfResources(f"pattern {self.text!r} ran out of memory") from e
        if m is None:
            return None
        group_span = None
        if self.has_group and m.start(1) != -1:
            group_span = m.span(1)
        return Match(m.span(), group_span)

    def __repr__(self):
        return f"Matcher({self.text!r})"


def compile_pattern(text: str) -> Matcher:
    try:
        compiled = re.compile(text.encode("latin-1"), re.IGNORECASE)
    except (re.error, UnicodeEncodeError) as e:
        raise InvalidPattern(f"invalid pattern {text!r}: {e}") from e
    return Matcher(text, compiled)
