"""
Pipe-table extraction.

A table is a header row, an alignment separator row and any number of data
rows, every one of them starting and ending with ``|``::

    | Name | Qty |
    |:-----|----:|
    | Nut  |  12 |
"""
from __future__ import annotations

import logging
import re
from dataclasses import replace
from typing import TYPE_CHECKING, List, Optional, Sequence, Tuple

from .inline import StyledText
from .models import TableElement

if TYPE_CHECKING:
    from .factory import ElementFactory

logger = logging.getLogger(__name__)

SEPARATOR_RE = re.compile(r'\|[\s:|-]+\|')
FLATTENED_CELL_SEPARATOR = "  |  "

HEADER_STYLE = {"font_weight": "bold", "font_size": 14}
DATA_STYLE = {"font_size": 14}


def is_pipe_row(line: str) -> bool:
    stripped = line.strip()
    return bool(stripped) and stripped.startswith("|") and stripped.endswith("|")


def is_separator_row(line: str) -> bool:
    return SEPARATOR_RE.fullmatch(line.strip()) is not None


def is_table_start(lines: Sequence[str], index: int) -> bool:
    """True when ``lines[index]`` is a pipe row directly followed by a separator row."""
    if index + 1 >= len(lines):
        return False
    return is_pipe_row(lines[index]) and is_separator_row(lines[index + 1])


def split_pipe_row(line: str) -> List[str]:
    """``'| a | b |'`` -> ``['a', 'b']``"""
    return [cell.strip() for cell in line.strip()[1:-1].split("|")]


def parse_alignments(separator_cells: Sequence[str]) -> List[str]:
    alignments = []
    for cell in separator_cells:
        cell = cell.strip()
        if cell.startswith(":") and cell.endswith(":"):
            alignments.append("center")
        elif cell.endswith(":"):
            alignments.append("right")
        else:
            alignments.append("left")
    return alignments


def flatten_table_row(line: str) -> str:
    """A pipe row as one line of text, cells joined by a visible separator."""
    return FLATTENED_CELL_SEPARATOR.join(split_pipe_row(line))


def collect_table_lines(lines: Sequence[str], start: int) -> Tuple[List[str], int]:
    """
    Gather consecutive pipe rows from *start*.

    Stops at the first blank line, which is consumed, or the first other
    line, which is not.  Returns the stripped rows and the next index.
    """
    rows: List[str] = []
    i = start
    while i < len(lines):
        line = lines[i].strip()
        if is_pipe_row(line):
            rows.append(line)
            i += 1
        elif not line:
            i += 1
            break
        else:
            break
    return rows, i


def extract_table(
    lines: Sequence[str], start: int, factory: "ElementFactory"
) -> Tuple[Optional[TableElement], int]:
    """
    Build a table element from the pipe rows at *start*.

    The header row fixes the column count; data rows are padded with empty
    cells or truncated to it.  Returns ``(None, next_index)`` when fewer than
    two rows were collected.
    """
    rows, next_index = collect_table_lines(lines, start)
    if len(rows) < 2:
        logger.debug("Not a table at line %d: only %d pipe rows", start, len(rows))
        return None, next_index

    header = split_pipe_row(rows[0])
    alignments = parse_alignments(split_pipe_row(rows[1]))
    data_rows = [split_pipe_row(row) for row in rows[2:]]
    columns = len(header)

    def cell(text: str, column: int, is_header: bool):
        overrides = HEADER_STYLE if is_header else DATA_STYLE
        runs = factory.tokenizer.tokenize(text, overrides)
        if not runs:
            runs = [StyledText("", replace(factory.text_style, **overrides))]
        alignment = alignments[column] if column < len(alignments) else "left"
        fill = factory.palette.header_fill if is_header else factory.palette.cell_fill
        return factory.make_table_cell(runs, alignment, fill)

    cells = [[cell(text, c, True) for c, text in enumerate(header)]]
    for row in data_rows:
        cells.append([cell(row[c] if c < len(row) else "", c, False) for c in range(columns)])

    return factory.make_table(cells, header_fill=True), next_index
