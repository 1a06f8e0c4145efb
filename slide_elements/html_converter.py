"""
HTML to slide elements.

Counterpart of :mod:`slide_elements.converter` for content pasted as HTML.
Top-level nodes map to paragraphs (headings, list items, paragraphs, line
breaks) and ``<table>`` elements map to table elements.  Parsing uses
BeautifulSoup with the stdlib ``html.parser`` backend.
"""
from __future__ import annotations

import logging
import re
from dataclasses import replace
from typing import Dict, List, Optional

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import PreformattedString

from .blocks import ParagraphAccumulator, heading_font_size
from .canvas import DEFAULT_CANVAS, Canvas
from .factory import TABLE_FONT_SIZE, ElementFactory
from .ids import IdGenerator
from .inline import StyledText
from .layout_engine import stack_vertically
from .models import Paragraph, SlideElement, TableCell, TableElement, TextContent

logger = logging.getLogger(__name__)

SKIPPED_TAGS = {"head", "script", "style", "template", "title", "meta", "link"}
HEADING_TAG_RE = re.compile(r'^h([1-6])$')
TEXT_ALIGN_RE = re.compile(r'text-align\s*:\s*([^;]+)', re.IGNORECASE)

# tag -> style override applied to everything inside it
INLINE_STYLES: Dict[str, Dict] = {
    "strong": {"font_weight": "bold"},
    "b": {"font_weight": "bold"},
    "em": {"font_style": "italic"},
    "i": {"font_style": "italic"},
    "u": {"text_decoration": "underline"},
    "s": {"text_decoration": "line-through"},
    "del": {"text_decoration": "line-through"},
    "strike": {"text_decoration": "line-through"},
}


def _is_text(node) -> bool:
    # Comments, doctypes and CDATA are PreformattedString subclasses
    return isinstance(node, NavigableString) and not isinstance(node, PreformattedString)


def get_alignment(el: Tag) -> str:
    """Paragraph alignment from inline ``text-align`` first, then the ``align`` attribute."""
    match = TEXT_ALIGN_RE.search(el.get("style") or "")
    if match:
        value = match.group(1).strip().lower()
        if value in ("center", "right", "justify"):
            return value
        if value in ("left", "start"):
            return "left"
        if value == "end":
            return "right"

    attr = (el.get("align") or "").strip().lower()
    if attr in ("center", "right", "justify"):
        return attr
    return "left"


def _col_span(cell: Tag) -> int:
    try:
        return max(1, int(cell.get("colspan", 1)))
    except (TypeError, ValueError):
        return 1


class HtmlConverter:
    """
    Converts pasted HTML into slide elements.

    Takes the same collaborators as
    :class:`~slide_elements.converter.MarkdownConverter`.
    """

    def __init__(
        self,
        ids: Optional[IdGenerator] = None,
        theme: str = "default",
        canvas: Canvas = DEFAULT_CANVAS,
    ):
        self.canvas = canvas
        self.factory = ElementFactory(ids=ids, theme=theme, canvas=canvas)

    # -- inline -------------------------------------------------------------

    def extract_runs(self, el: Tag, overrides: Optional[Dict] = None) -> List[StyledText]:
        """Recursively collect styled runs from the children of *el*."""
        overrides = overrides or {}
        style = replace(self.factory.text_style, **overrides)
        runs: List[StyledText] = []

        for child in el.children:
            if _is_text(child):
                text = str(child)
                if text:
                    runs.append(StyledText(text, style))
                continue
            if not isinstance(child, Tag) or child.name in SKIPPED_TAGS:
                continue

            child_overrides = dict(overrides)
            child_overrides.update(INLINE_STYLES.get(child.name, {}))
            if child.name == "code":
                child_overrides["font_family"] = self.factory.tokenizer.code_font_family
            runs.extend(self.extract_runs(child, child_overrides))

        return runs

    # -- blocks -------------------------------------------------------------

    def parse_block(self, el: Tag) -> List[Paragraph]:
        factory = self.factory
        tag = el.name
        paragraphs: List[Paragraph] = []

        if tag in ("ul", "ol"):
            bullet_type = "number" if tag == "ol" else "bullet"
            for li in el.find_all("li", recursive=False):
                runs = self.extract_runs(li)
                if runs:
                    paragraphs.append(factory.make_paragraph(runs, "left", bullet_type=bullet_type, indent_level=0))
        elif HEADING_TAG_RE.match(tag):
            level = int(tag[1])
            runs = self.extract_runs(el, {"font_size": heading_font_size(level), "font_weight": "bold"})
            if runs:
                paragraphs.append(factory.make_paragraph(runs, get_alignment(el)))
        elif tag == "br":
            paragraphs.append(factory.make_paragraph([StyledText("", factory.text_style)], "left"))
        else:
            # p, div, blockquote, span, ...
            runs = self.extract_runs(el)
            if runs:
                paragraphs.append(factory.make_paragraph(runs, get_alignment(el)))

        return paragraphs

    def _text_node_paragraph(self, node) -> Optional[Paragraph]:
        text = str(node).strip()
        if not text:
            return None
        return self.factory.make_paragraph([StyledText(text, self.factory.text_style)], "left")

    # -- tables -------------------------------------------------------------

    def parse_table(self, table: Tag) -> Optional[TableElement]:
        """
        Build a table element from ``<table>``; ``None`` if it has no cells.

        The grid is as wide as the widest row counting colspans; short rows
        are padded with empty, unfilled cells.
        """
        factory = self.factory
        rows = table.find_all("tr")
        if not rows:
            return None

        row_cells = [tr.find_all(["td", "th"], recursive=False) for tr in rows]
        columns = max(sum(_col_span(cell) for cell in cells) for cells in row_cells)
        if columns == 0:
            return None

        first_row_has_th = rows[0].find("th") is not None
        cell_style = {"font_size": TABLE_FONT_SIZE}

        grid: List[List[TableCell]] = []
        for r, cells in enumerate(row_cells):
            row: List[TableCell] = []
            for c in range(columns):
                if c >= len(cells):
                    row.append(self._empty_cell())
                    continue
                html_cell = cells[c]
                is_header = html_cell.name == "th" or (r == 0 and first_row_has_th)
                overrides = dict(cell_style, font_weight="bold") if is_header else cell_style
                fill = factory.palette.header_fill if is_header else factory.palette.cell_fill
                row.append(factory.make_table_cell(self.extract_runs(html_cell, overrides), get_alignment(html_cell), fill))
            grid.append(row)

        logger.debug("Parsed HTML table: %d rows x %d columns", len(grid), columns)
        return factory.make_table(grid, header_fill=first_row_has_th)

    def _empty_cell(self) -> TableCell:
        style = replace(self.factory.text_style, font_size=TABLE_FONT_SIZE)
        return self.factory.make_table_cell([StyledText("", style)], "left", fill=None)

    # -- entry points -------------------------------------------------------

    def _root(self, html: str):
        soup = BeautifulSoup(html, "html.parser")
        return soup.body or soup

    def to_text_content(self, html: str) -> TextContent:
        """Paragraphs of *html*; tables are skipped."""
        root = self._root(html)
        if not root.contents:
            return self.factory.plain_text_content(html)

        paragraphs: List[Paragraph] = []
        for node in root.children:
            if _is_text(node):
                paragraph = self._text_node_paragraph(node)
                if paragraph is not None:
                    paragraphs.append(paragraph)
            elif isinstance(node, Tag) and node.name not in SKIPPED_TAGS and node.name != "table":
                paragraphs.extend(self.parse_block(node))

        if not paragraphs:
            return self.factory.plain_text_content(root.get_text() or html)
        return TextContent(paragraphs=paragraphs)

    def to_elements(self, html: str) -> List[SlideElement]:
        """Text and table elements of *html*, laid out top to bottom."""
        factory = self.factory
        root = self._root(html)
        if not root.contents:
            return stack_vertically([factory.make_text_element(factory.plain_text_content(html).paragraphs)], self.canvas)

        elements: List[SlideElement] = []
        pending = ParagraphAccumulator(factory)

        for node in root.children:
            if _is_text(node):
                pending.add(self._text_node_paragraph(node))
                continue
            if not isinstance(node, Tag) or node.name in SKIPPED_TAGS:
                continue
            if node.name == "table":
                text = pending.flush()
                if text is not None:
                    elements.append(text)
                table = self.parse_table(node)
                if table is not None:
                    elements.append(table)
            else:
                for paragraph in self.parse_block(node):
                    pending.add(paragraph)

        text = pending.flush()
        if text is not None:
            elements.append(text)

        if not elements:
            logger.debug("No HTML blocks recognised, falling back to plain text")
            content = factory.plain_text_content(root.get_text() or html)
            elements.append(factory.make_text_element(content.paragraphs))

        return stack_vertically(elements, self.canvas)


def html_to_elements(
    html: str,
    ids: Optional[IdGenerator] = None,
    theme: str = "default",
    canvas: Canvas = DEFAULT_CANVAS,
) -> List[SlideElement]:
    """Convert *html* into laid-out slide elements."""
    return HtmlConverter(ids=ids, theme=theme, canvas=canvas).to_elements(html)


def html_to_text_content(html: str, ids: Optional[IdGenerator] = None, theme: str = "default") -> TextContent:
    """Convert *html* into paragraphs, ignoring tables."""
    return HtmlConverter(ids=ids, theme=theme).to_text_content(html)
