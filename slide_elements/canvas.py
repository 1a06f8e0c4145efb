"""Fixed slide canvas dimensions."""
from __future__ import annotations

from dataclasses import dataclass

CANVAS_WIDTH = 960
CANVAS_HEIGHT = 540


@dataclass(frozen=True)
class Canvas:
    width: int = CANVAS_WIDTH
    height: int = CANVAS_HEIGHT

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Canvas dimensions must be positive, got {self.width}x{self.height}")


DEFAULT_CANVAS = Canvas()
