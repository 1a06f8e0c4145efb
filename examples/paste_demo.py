#!/usr/bin/env python3
"""
Paste Demo - Slide Elements
===========================

Converts a small markdown snippet (headings, lists, a rule and a table) and
prints where each element lands on the 960x540 canvas, for both themes.
"""

import logging
import sys
from pathlib import Path

# Add the project root to the path so we can import our modules
project_root = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(project_root))

from slide_elements import markdown_to_elements
from slide_elements.models import element_text

logging.basicConfig(level=logging.INFO, format='%(asctime)s [%(levelname)s] %(message)s')
logger = logging.getLogger(__name__)

SNIPPET = """# Launch Plan

Ship the **beta** by *Friday*, then `tag` the release.

- Freeze features
- ~~Rewrite everything~~

---

| Task | Owner | Days |
|:-----|:-----:|-----:|
| Docs | Ana   | 2    |
| QA   | Raj   | 3    |
"""


def main():
    for theme in ("default", "dark"):
        logger.info("Theme: %s", theme)
        for el in markdown_to_elements(SNIPPET, theme=theme):
            first_line = element_text(el).splitlines()[0]
            logger.info(
                "  %-5s at (%s, %s) size %sx%s  %r",
                el.type, el.position.x, el.position.y, el.size.width, el.size.height, first_line,
            )


if __name__ == "__main__":
    main()
