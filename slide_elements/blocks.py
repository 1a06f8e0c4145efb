"""
Block classification for markdown lines.

Each non-table line is one of: heading, bullet item, numbered item,
horizontal rule, blank, or plain paragraph.  A table start outranks all of
them.  Classified lines become paragraphs that wait in a
:class:`ParagraphAccumulator` until the next flush point.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass, replace
from enum import Enum
from typing import Dict, List, Optional, Sequence

from .factory import ElementFactory
from .inline import StyledText
from .models import Paragraph, TextElement
from .tables import is_table_start

logger = logging.getLogger(__name__)

HEADING_RE = re.compile(r'^(#{1,6})\s+(.+)$')
BULLET_RE = re.compile(r'^\s*[-*+]\s+(.+)$')
NUMBERED_RE = re.compile(r'^\s*[0-9]+[.)]\s+(.+)$')
RULE_RE = re.compile(r'^[-*_]{3,}\s*$')

HEADING_FONT_SIZES = {1: 36, 2: 28, 3: 24, 4: 20, 5: 18, 6: 16}


class BlockKind(Enum):
    TABLE = "table"
    HEADING = "heading"
    BULLET = "bullet"
    NUMBERED = "numbered"
    RULE = "rule"
    BLANK = "blank"
    PARAGRAPH = "paragraph"


@dataclass(frozen=True)
class LineBlock:
    """A classified line: its kind, the text left to tokenize, heading level."""
    kind: BlockKind
    text: str = ""
    level: int = 0


def heading_font_size(level: int) -> int:
    return HEADING_FONT_SIZES.get(level, 18)


def classify_line(line: str) -> LineBlock:
    """Classify a single line, ignoring tables."""
    if not line.strip():
        return LineBlock(BlockKind.BLANK)

    match = HEADING_RE.match(line)
    if match:
        return LineBlock(BlockKind.HEADING, match.group(2).strip(), len(match.group(1)))

    match = BULLET_RE.match(line)
    if match:
        return LineBlock(BlockKind.BULLET, match.group(1).strip())

    match = NUMBERED_RE.match(line)
    if match:
        return LineBlock(BlockKind.NUMBERED, match.group(1).strip())

    if RULE_RE.match(line.strip()):
        return LineBlock(BlockKind.RULE)

    return LineBlock(BlockKind.PARAGRAPH, line.strip())


def classify(lines: Sequence[str], index: int) -> LineBlock:
    """Classify ``lines[index]``, looking one line ahead for a table start."""
    if is_table_start(lines, index):
        return LineBlock(BlockKind.TABLE)
    return classify_line(lines[index])


def _runs_or_empty(factory: ElementFactory, text: str, overrides: Optional[Dict] = None) -> List[StyledText]:
    """Tokenize *text*; whitespace-only content keeps one empty run in the line's style."""
    runs = factory.tokenizer.tokenize(text, overrides)
    if not runs:
        runs = [StyledText("", replace(factory.text_style, **overrides) if overrides else factory.text_style)]
    return runs


def build_paragraph(block: LineBlock, factory: ElementFactory) -> Optional[Paragraph]:
    """
    Turn a classified line into its paragraph.

    Blank lines, tables and plain lines that tokenize to nothing give ``None``.
    Headings and list items always keep at least one run.
    """
    if block.kind is BlockKind.HEADING:
        overrides = {"font_size": heading_font_size(block.level), "font_weight": "bold"}
        return factory.make_paragraph(_runs_or_empty(factory, block.text, overrides), "left")
    if block.kind is BlockKind.BULLET:
        return factory.make_paragraph(_runs_or_empty(factory, block.text), "left", bullet_type="bullet", indent_level=0)
    if block.kind is BlockKind.NUMBERED:
        return factory.make_paragraph(_runs_or_empty(factory, block.text), "left", bullet_type="number", indent_level=0)
    if block.kind is BlockKind.RULE:
        return factory.rule_paragraph()
    if block.kind is BlockKind.PARAGRAPH:
        runs = factory.tokenizer.tokenize(block.text)
        if runs:
            return factory.make_paragraph(runs, "left")
    return None


class ParagraphAccumulator:
    """Paragraphs pending until the next flush point."""

    def __init__(self, factory: ElementFactory):
        self.factory = factory
        self._pending: List[Paragraph] = []

    def __len__(self) -> int:
        return len(self._pending)

    def add(self, paragraph: Optional[Paragraph]) -> None:
        if paragraph is not None:
            self._pending.append(paragraph)

    def flush(self) -> Optional[TextElement]:
        """Wrap pending paragraphs into one text element and reset, or ``None`` if empty."""
        if not self._pending:
            return None
        paragraphs, self._pending = self._pending, []
        logger.debug("Flushing %d paragraphs into a text element", len(paragraphs))
        return self.factory.make_text_element(paragraphs)
