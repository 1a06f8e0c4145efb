"""Vertical stacking of converted elements on the canvas."""
from __future__ import annotations

import logging
import math
from typing import List, Sequence

from .canvas import DEFAULT_CANVAS, Canvas

logger = logging.getLogger(__name__)

GAP = 20
MIN_TOP = 20


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up (``169.5 -> 170``)."""
    return math.floor(value + 0.5)


def stack_vertically(elements: Sequence, canvas: Canvas = DEFAULT_CANVAS, gap: int = GAP) -> List:
    """
    Centre the stack of *elements* vertically, in order, ``gap`` px apart.

    Only ``position.y`` is written; each element keeps the x it was created
    with.  The stack never starts above ``MIN_TOP`` even when it overflows
    the canvas.
    """
    elements = list(elements)
    if not elements:
        return elements

    total_height = sum(el.size.height for el in elements)
    total_with_gaps = total_height + gap * (len(elements) - 1)
    y = max(MIN_TOP, round_half_up((canvas.height - total_with_gaps) / 2))
    logger.debug("Stacking %d elements (%s px tall) from y=%s", len(elements), total_with_gaps, y)

    for el in elements:
        el.position.y = y
        y += el.size.height + gap

    return elements
