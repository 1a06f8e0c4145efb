"""
Inline markup tokenizer.

Splits one line into styled runs.  Recognised forms, tried in this order at
every position (first match wins, matches never overlap):

    ***x***        bold + italic
    **x** / __x__  bold
    *x* / _x_      italic
    `x`            monospace
    ~~x~~          strikethrough

The closing delimiter is the nearest one after at least one character of
content, and content never crosses a line break.  Anything that does not
close degrades to literal text.

The scan is linear: for every delimiter we precompute the index of its next
occurrence from each position, so looking for a closer is a table lookup
instead of a search.
"""
from __future__ import annotations

import logging
from dataclasses import replace
from typing import Dict, List, NamedTuple, Optional, Tuple

from .models import TextStyle

logger = logging.getLogger(__name__)

BOLD = {"font_weight": "bold"}
ITALIC = {"font_style": "italic"}
STRIKETHROUGH = {"text_decoration": "line-through"}
CODE = "code"  # resolved to the tokenizer's monospace family

MARKERS: Tuple[Tuple[str, object], ...] = (
    ("***", {**BOLD, **ITALIC}),
    ("**", BOLD),
    ("__", BOLD),
    ("*", ITALIC),
    ("_", ITALIC),
    ("`", CODE),
    ("~~", STRIKETHROUGH),
)

_LINE_BREAKS = "\n\r\u2028\u2029"


class StyledText(NamedTuple):
    text: str
    style: TextStyle


def _next_occurrences(text: str, delimiter: str) -> List[int]:
    """``table[i]`` is the first index >= i where *delimiter* starts, or ``len(text)``."""
    n = len(text)
    table = [n] * (n + 1)
    for i in range(n - len(delimiter), -1, -1):
        table[i] = i if text.startswith(delimiter, i) else table[i + 1]
    return table


def _next_breaks(text: str) -> List[int]:
    n = len(text)
    table = [n] * (n + 1)
    for i in range(n - 1, -1, -1):
        table[i] = i if text[i] in _LINE_BREAKS else table[i + 1]
    return table


class InlineTokenizer:
    """
    Turns a line of inline markdown into :class:`StyledText` runs.

    Args:
        base_style: style every run starts from (the theme's default text style)
        code_font_family: family substituted for `code` spans
    """

    def __init__(self, base_style: Optional[TextStyle] = None, code_font_family: str = "Courier New"):
        self.base_style = base_style or TextStyle()
        self.code_font_family = code_font_family

    def _markup_style(self, base: TextStyle, change) -> TextStyle:
        if change == CODE:
            return replace(base, font_family=self.code_font_family)
        return replace(base, **change)

    def tokenize(self, text: str, overrides: Optional[Dict] = None) -> List[StyledText]:
        """
        Tokenize *text* into runs covering all of it.

        *overrides* are applied on top of the base style for every run, e.g.
        ``{"font_size": 36, "font_weight": "bold"}`` for a heading.  Empty text
        yields no runs.
        """
        if not text:
            return []

        base = replace(self.base_style, **overrides) if overrides else self.base_style
        n = len(text)
        next_of = {delim: _next_occurrences(text, delim) for delim, _ in MARKERS}
        next_break = _next_breaks(text)

        runs: List[StyledText] = []
        last = 0
        i = 0
        while i < n:
            matched = False
            for delim, change in MARKERS:
                if not text.startswith(delim, i):
                    continue
                start = i + len(delim)
                if start >= n:
                    continue
                close = next_of[delim][start + 1]
                if close >= n or next_break[start] < close:
                    continue
                if i > last:
                    runs.append(StyledText(text[last:i], base))
                runs.append(StyledText(text[start:close], self._markup_style(base, change)))
                i = last = close + len(delim)
                matched = True
                break
            if not matched:
                i += 1

        if last < n:
            runs.append(StyledText(text[last:], base))

        logger.debug("Tokenized %d chars into %d runs", n, len(runs))
        return runs


_default_tokenizer = InlineTokenizer()


def tokenize(text: str, overrides: Optional[Dict] = None) -> List[StyledText]:
    """Tokenize with the built-in default style."""
    return _default_tokenizer.tokenize(text, overrides)
