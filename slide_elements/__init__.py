"""Slide Elements – top-level package

Converts pasted Markdown or HTML into positioned slide document elements
(text boxes and tables).  Exposes the public API **and** sets up a minimal
logging configuration so that every sub-module can call

```python
import logging
logger = logging.getLogger(__name__)
```

and honour a single environment variable `SLIDE_ELEMENTS_LOG_LEVEL`.
"""

from __future__ import annotations

import logging
import os

# ------------------------------------------------------------------
# Default logging – honour env var, otherwise WARNING.
# ------------------------------------------------------------------
LOG_LEVEL = os.getenv("SLIDE_ELEMENTS_LOG_LEVEL", "WARNING").upper()
if not logging.getLogger().handlers:
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

# Public API re-exports ------------------------------------------------
from .canvas import CANVAS_HEIGHT, CANVAS_WIDTH, Canvas  # noqa: E402
from .converter import MarkdownConverter, markdown_to_elements, markdown_to_text_content  # noqa: E402
from .html_converter import HtmlConverter, html_to_elements, html_to_text_content  # noqa: E402
from .ids import SequentialIdGenerator, UuidGenerator  # noqa: E402
from .inline import InlineTokenizer, tokenize  # noqa: E402
from .models import TableElement, TextContent, TextElement, to_dict  # noqa: E402

__all__ = [
    "CANVAS_HEIGHT",
    "CANVAS_WIDTH",
    "Canvas",
    "HtmlConverter",
    "InlineTokenizer",
    "MarkdownConverter",
    "SequentialIdGenerator",
    "TableElement",
    "TextContent",
    "TextElement",
    "UuidGenerator",
    "html_to_elements",
    "html_to_text_content",
    "markdown_to_elements",
    "markdown_to_text_content",
    "to_dict",
    "tokenize",
]
