"""
Markdown to slide elements.

One forward scan over the lines: table starts become table elements,
everything else becomes one paragraph per line collected into a text box,
and the finished elements are stacked on the canvas.
"""
from __future__ import annotations

import logging
from typing import List, Optional

from .blocks import BlockKind, LineBlock, ParagraphAccumulator, build_paragraph, classify, classify_line
from .canvas import DEFAULT_CANVAS, Canvas
from .factory import ElementFactory, split_lines
from .ids import IdGenerator
from .layout_engine import stack_vertically
from .models import SlideElement, TextContent
from .tables import extract_table, flatten_table_row, is_pipe_row, is_separator_row

logger = logging.getLogger(__name__)


class MarkdownConverter:
    """
    Converts pasted markdown into slide elements.

    Args:
        ids: identifier source; defaults to random uuids
        theme: CSS theme supplying default text and text-box styles
        canvas: slide dimensions

    Raises:
        FileNotFoundError / ValueError: if the theme is unknown or incomplete
    """

    def __init__(
        self,
        ids: Optional[IdGenerator] = None,
        theme: str = "default",
        canvas: Canvas = DEFAULT_CANVAS,
    ):
        self.canvas = canvas
        self.factory = ElementFactory(ids=ids, theme=theme, canvas=canvas)

    def to_elements(self, markdown: str) -> List[SlideElement]:
        """
        Convert *markdown* into text and table elements, laid out top to
        bottom.  Never returns an empty list.
        """
        lines = split_lines(markdown)
        elements: List[SlideElement] = []
        pending = ParagraphAccumulator(self.factory)

        i = 0
        while i < len(lines):
            block = classify(lines, i)

            if block.kind is BlockKind.TABLE:
                table, next_index = extract_table(lines, i, self.factory)
                if table is not None:
                    text = pending.flush()
                    if text is not None:
                        elements.append(text)
                    elements.append(table)
                    i = next_index
                    continue
                # classify() reports TABLE only ahead of a separator row, so extraction
                # does not fail here; if it ever did, pending paragraphs stay unflushed
                # and the line is read as ordinary text.
                block = classify_line(lines[i])

            pending.add(build_paragraph(block, self.factory))
            i += 1

        text = pending.flush()
        if text is not None:
            elements.append(text)

        if not elements:
            logger.debug("No blocks recognised, falling back to plain text")
            elements.append(self.factory.make_text_element(
                self.factory.plain_text_content(markdown).paragraphs
            ))

        logger.debug("Converted %d lines into %d elements", len(lines), len(elements))
        return stack_vertically(elements, self.canvas)

    def to_text_content(self, markdown: str) -> TextContent:
        """
        Convert *markdown* into paragraphs only.

        Table rows are flattened into one plain paragraph each and separator
        rows are dropped.  Horizontal rules stay ordinary text here.
        """
        paragraphs = []
        for line in split_lines(markdown):
            block = classify_line(line)
            if block.kind is BlockKind.BLANK:
                continue
            if block.kind is BlockKind.RULE:
                block = LineBlock(BlockKind.PARAGRAPH, line.strip())
            if block.kind is BlockKind.PARAGRAPH and is_pipe_row(line):
                if is_separator_row(line):
                    continue
                block = LineBlock(BlockKind.PARAGRAPH, flatten_table_row(line))

            paragraph = build_paragraph(block, self.factory)
            if paragraph is not None:
                paragraphs.append(paragraph)

        if not paragraphs:
            logger.debug("No paragraphs recognised, falling back to plain text")
            return self.factory.plain_text_content(markdown)

        return TextContent(paragraphs=paragraphs)


def markdown_to_elements(
    markdown: str,
    ids: Optional[IdGenerator] = None,
    theme: str = "default",
    canvas: Canvas = DEFAULT_CANVAS,
) -> List[SlideElement]:
    """Convert *markdown* into laid-out slide elements."""
    return MarkdownConverter(ids=ids, theme=theme, canvas=canvas).to_elements(markdown)


def markdown_to_text_content(
    markdown: str,
    ids: Optional[IdGenerator] = None,
    theme: str = "default",
) -> TextContent:
    """Convert *markdown* into paragraphs, flattening any tables."""
    return MarkdownConverter(ids=ids, theme=theme).to_text_content(markdown)
