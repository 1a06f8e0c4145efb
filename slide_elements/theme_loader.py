"""
CSS themes bundled with the package.

A theme is ``themes/<name>.css``; its ``:root`` custom properties supply the
default text, text-box and table styles (see :mod:`slide_elements.css_utils`).
"""
import logging
import re
from pathlib import Path
from typing import List

logger = logging.getLogger(__name__)

THEMES_DIR = Path(__file__).parent / "themes"

# Letters, digits, '-' and '_' only, so a name can never leave THEMES_DIR
THEME_NAME_RE = re.compile(r'^[A-Za-z0-9_-]+$')


def theme_path(theme: str) -> Path:
    """Path of the CSS file for *theme*; ``ValueError`` for a malformed name."""
    if not THEME_NAME_RE.match(theme):
        raise ValueError(f"Invalid theme name: {theme!r}")
    return THEMES_DIR / f"{theme}.css"


def get_css(theme: str = "default") -> str:
    """
    Read the stylesheet of *theme*.

    Raises ``ValueError`` for a malformed name and ``FileNotFoundError``
    (listing the bundled themes) when no such file is shipped.
    """
    path = theme_path(theme)
    if not path.is_file():
        raise FileNotFoundError(
            f"Theme '{theme}' not found. Available themes: {list_available_themes()}"
        )
    logger.debug("Loading theme %s from %s", theme, path)
    return path.read_text(encoding="utf-8")


def list_available_themes() -> List[str]:
    """Names of the bundled themes, sorted."""
    if not THEMES_DIR.is_dir():
        return []
    return sorted(p.stem for p in THEMES_DIR.glob("*.css") if p.is_file())


def validate_theme(theme: str) -> bool:
    try:
        return theme_path(theme).is_file()
    except ValueError:
        return False
