#!/usr/bin/env python3
"""Command-line entry point: convert a markdown or HTML file to element JSON."""

import argparse
import json
import logging
import sys
from pathlib import Path

from .converter import MarkdownConverter
from .html_converter import HtmlConverter
from .models import element_text, to_dict
from .theme_loader import list_available_themes

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="slide-elements", description="Convert pasted Markdown or HTML into slide element JSON.")
    p.add_argument("input", type=Path, help="Markdown (or HTML with --html) file to convert")
    p.add_argument("--output", "-o", type=Path, help="Write JSON here instead of stdout")
    p.add_argument("--html", action="store_true", help="Treat the input as HTML")
    p.add_argument("--text-only", action="store_true", help="Emit paragraphs only; tables are flattened (markdown) or skipped (HTML)")
    p.add_argument("--theme", "-t", default="default", choices=list_available_themes(), help="CSS theme supplying default styles")
    p.add_argument("--debug", action="store_true", help="Enable verbose logging")
    return p


def main(argv=None) -> int:
    args = _build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(levelname)s  %(message)s",
    )
    logging.getLogger("slide_elements").setLevel(logging.DEBUG if args.debug else logging.INFO)

    if not args.input.exists():
        logger.error(f"Input file '{args.input}' not found")
        return 1

    source = args.input.read_text(encoding="utf-8")
    converter_cls = HtmlConverter if args.html else MarkdownConverter
    converter = converter_cls(theme=args.theme)

    if args.text_only:
        payload = to_dict(converter.to_text_content(source))
    else:
        elements = converter.to_elements(source)
        for el in elements:
            logger.debug("%s at (%s, %s): %r", el.type, el.position.x, el.position.y, element_text(el)[:40])
        payload = to_dict(elements)

    rendered = json.dumps(payload, indent=2, ensure_ascii=False)
    if args.output:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(rendered + "\n", encoding="utf-8")
        logger.info("Wrote %s", args.output)
    else:
        sys.stdout.write(rendered + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
