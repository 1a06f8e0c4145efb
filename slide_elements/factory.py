"""
Element factory: wraps tokenized runs into paragraphs, text boxes, table
cells and tables, stamping every piece with a fresh id and the theme's
default styles.
"""
from __future__ import annotations

import logging
from dataclasses import replace
from typing import Iterable, List, Optional, Sequence

from .canvas import DEFAULT_CANVAS, Canvas
from .css_utils import get_parser
from .ids import IdGenerator, UuidGenerator
from .inline import InlineTokenizer, StyledText
from .layout_engine import round_half_up
from .models import (
    CellBorders,
    Fill,
    Padding,
    Paragraph,
    Position,
    Size,
    TableCell,
    TableElement,
    TableStyle,
    TextContent,
    TextElement,
    TextRun,
)

logger = logging.getLogger(__name__)

TEXT_BOX_WIDTH = 400
TEXT_BOX_HEIGHT = 200

TABLE_FONT_SIZE = 14
TABLE_SIDE_MARGIN = 100  # horizontal room left around a table
MAX_COLUMN_WIDTH = 150
ROW_HEIGHT = 36
CELL_PADDING = Padding(top=4, right=8, bottom=4, left=8)

RULE_GLYPH = "─" * 23


def split_lines(text: str) -> List[str]:
    """Split on newlines, dropping the carriage return of CRLF input."""
    return [line[:-1] if line.endswith("\r") else line for line in text.split("\n")]


class ElementFactory:
    """
    Builds document elements for one conversion.

    Args:
        ids: identifier source, called once per run, paragraph, cell and element
        theme: CSS theme supplying default styles
        canvas: slide dimensions used to centre new elements
    """

    def __init__(
        self,
        ids: Optional[IdGenerator] = None,
        theme: str = "default",
        canvas: Canvas = DEFAULT_CANVAS,
    ):
        css = get_parser(theme)
        self.ids = ids or UuidGenerator()
        self.canvas = canvas
        self.text_style = css.default_text_style()
        self.textbox_style = css.default_textbox_style()
        self.muted_color = css.muted_color()
        self.palette = css.table_palette()
        self.tokenizer = InlineTokenizer(self.text_style, css.code_font_family())

    # -- text ---------------------------------------------------------------

    def make_run(self, text: str, style=None) -> TextRun:
        return TextRun(id=self.ids(), text=text, style=style or self.text_style)

    def make_paragraph(
        self,
        runs: Iterable[StyledText],
        alignment: str = "left",
        bullet_type: Optional[str] = None,
        indent_level: Optional[int] = None,
    ) -> Paragraph:
        text_runs = [self.make_run(run.text, run.style) for run in runs]
        return Paragraph(
            id=self.ids(),
            runs=text_runs,
            alignment=alignment,
            bullet_type=bullet_type,
            indent_level=indent_level,
        )

    def rule_paragraph(self) -> Paragraph:
        """Centered placeholder standing in for a horizontal rule."""
        style = replace(self.text_style, color=self.muted_color)
        return self.make_paragraph([StyledText(RULE_GLYPH, style)], "center")

    def make_text_element(self, paragraphs: Sequence[Paragraph]) -> TextElement:
        """Text box of the default size, centred on the canvas."""
        return TextElement(
            id=self.ids(),
            position=Position(
                x=round_half_up((self.canvas.width - TEXT_BOX_WIDTH) / 2),
                y=round_half_up((self.canvas.height - TEXT_BOX_HEIGHT) / 2),
            ),
            size=Size(width=TEXT_BOX_WIDTH, height=TEXT_BOX_HEIGHT),
            z_index=0,
            content=TextContent(paragraphs=list(paragraphs)),
            style=self.textbox_style,
        )

    def plain_text_content(self, text: str) -> TextContent:
        """
        Fallback content: one unstyled paragraph per non-blank line, with no
        markup interpretation.  A single space stands in when nothing is left.
        """
        lines = [line for line in split_lines(text) if line.strip()]
        if not lines:
            lines = [" "]
        return TextContent(paragraphs=[
            self.make_paragraph([StyledText(line, self.text_style)], "left") for line in lines
        ])

    # -- tables -------------------------------------------------------------

    def make_table_cell(
        self,
        runs: Sequence[StyledText],
        alignment: str = "left",
        fill: Optional[Fill] = None,
    ) -> TableCell:
        if not runs:
            runs = [StyledText("", replace(self.text_style, font_size=TABLE_FONT_SIZE))]
        return TableCell(
            id=self.ids(),
            content=TextContent(paragraphs=[self.make_paragraph(runs, alignment)]),
            padding=CELL_PADDING,
            vertical_align="middle",
            fill=fill,
            borders=CellBorders.uniform(self.palette.border),
        )

    def make_table(self, cells: List[List[TableCell]], header_fill: bool = True) -> TableElement:
        """
        Wrap a rectangular cell grid into a table centred on the canvas.

        Columns share one width, capped at ``MAX_COLUMN_WIDTH``; rows share
        ``ROW_HEIGHT``.
        """
        rows = len(cells)
        columns = len(cells[0]) if cells else 0
        column_width = min(MAX_COLUMN_WIDTH, (self.canvas.width - TABLE_SIDE_MARGIN) // max(columns, 1))
        width = column_width * columns
        height = ROW_HEIGHT * rows
        logger.debug("Building %dx%d table (%dx%d px)", rows, columns, width, height)
        return TableElement(
            id=self.ids(),
            position=Position(
                x=round_half_up((self.canvas.width - width) / 2),
                y=round_half_up((self.canvas.height - height) / 2),
            ),
            size=Size(width=width, height=height),
            z_index=0,
            rows=rows,
            columns=columns,
            cells=cells,
            column_widths=[column_width] * columns,
            row_heights=[ROW_HEIGHT] * rows,
            style=TableStyle(
                border_collapse=True,
                default_cell_fill=self.palette.cell_fill,
                header_row_fill=self.palette.header_fill if header_fill else None,
            ),
        )
