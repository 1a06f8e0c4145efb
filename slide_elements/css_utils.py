"""
CSS theme parsing.

Themes are plain CSS files whose ``:root`` block defines the custom
properties every conversion needs: the default run style, the text-box
padding, the muted colour used for rule placeholders and the table palette.
"""
import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Dict, List

from .models import Fill, Padding, Stroke, TextBoxStyle, TextStyle
from .theme_loader import get_css


@dataclass(frozen=True)
class TablePalette:
    """Border and fill colours applied to generated table cells."""
    border: Stroke
    header_fill: Fill
    cell_fill: Fill


class CSSParser:
    """
    Reads the custom properties of one theme.

    Every getter raises ``ValueError`` naming the variable when the theme
    does not define it, so a broken theme fails loudly at load time rather
    than producing half-styled elements.
    """
    
    def __init__(self, theme: str = "default"):
        self.theme = theme
        self.css_content = get_css(theme)
        self._css_vars = None
    
    def get_css_variables(self) -> Dict[str, str]:
        """Extract all CSS variables from :root section. Cached for performance."""
        if self._css_vars is not None:
            return self._css_vars
            
        root_match = re.search(r':root\s*\{([^}]+)\}', self.css_content, re.DOTALL)
        if not root_match:
            raise ValueError(f"No :root section found in theme '{self.theme}'")
        
        variable_pattern = r'--([^:]+):\s*([^;]+);'
        css_vars = re.findall(variable_pattern, root_match.group(1))
        self._css_vars = {name.strip(): value.strip() for name, value in css_vars}
        
        return self._css_vars
    
    def get_raw_value(self, variable_name: str) -> str:
        """Get raw CSS variable value."""
        value = self.get_css_variables().get(variable_name)
        if not value:
            raise ValueError(f"CSS variable '--{variable_name}' not found in theme '{self.theme}'")
        return value
    
    def get_px_value(self, variable_name: str) -> int:
        """Get pixel value from CSS variable."""
        return self.get_px_values(variable_name)[0]
    
    def get_px_values(self, variable_name: str) -> List[int]:
        """Get every pixel value of a shorthand variable such as a padding."""
        value = self.get_raw_value(variable_name)
        values = [int(v) for v in re.findall(r'(\d+)px', value)]
        if not values:
            raise ValueError(f"CSS variable '--{variable_name}' is not a pixel value: {value}")
        return values
    
    def get_string_value(self, variable_name: str) -> str:
        """Get a possibly quoted string value (font families)."""
        return self.get_raw_value(variable_name).strip('\'"')
    
    def get_color(self, variable_name: str) -> str:
        value = self.get_raw_value(variable_name)
        if not re.fullmatch(r'#(?:[0-9a-fA-F]{3}){1,2}', value):
            raise ValueError(f"CSS variable '--{variable_name}' is not a hex color: {value}")
        return value
    
    def default_text_style(self) -> TextStyle:
        return TextStyle(
            font_family=self.get_string_value('font-family'),
            font_size=self.get_px_value('font-size'),
            font_weight='normal',
            font_style='normal',
            text_decoration='none',
            color=self.get_color('text-color'),
        )
    
    def default_textbox_style(self) -> TextBoxStyle:
        values = self.get_px_values('textbox-padding')
        # CSS shorthand: 1 to 4 values, clockwise from top
        if len(values) == 1:
            values = values * 4
        elif len(values) == 2:
            values = values * 2
        elif len(values) == 3:
            values = values + [values[1]]
        top, right, bottom, left = values[:4]
        return TextBoxStyle(padding=Padding(top, right, bottom, left))
    
    def code_font_family(self) -> str:
        return self.get_string_value('code-font-family')
    
    def muted_color(self) -> str:
        return self.get_color('muted-color')
    
    def table_palette(self) -> TablePalette:
        return TablePalette(
            border=Stroke(
                color=self.get_color('table-border-color'),
                width=self.get_px_value('table-border-width'),
                style='solid',
            ),
            header_fill=Fill(type='solid', color=self.get_color('table-header-fill')),
            cell_fill=Fill(type='solid', color=self.get_color('table-cell-fill')),
        )


@lru_cache(maxsize=None)
def get_parser(theme: str = "default") -> CSSParser:
    """Shared parser per theme; themes are read-only once loaded."""
    return CSSParser(theme)
