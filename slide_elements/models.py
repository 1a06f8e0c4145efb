"""
Data models for slide document elements.

Everything produced by a conversion is a plain dataclass tree.  Styles are
frozen so a single value can never be mutated through one run and leak into
another; derive variants with :func:`dataclasses.replace`.
"""
from __future__ import annotations

from dataclasses import dataclass, field, fields, is_dataclass
from typing import Any, ClassVar, Dict, List, Literal, Optional, Union

Alignment = Literal["left", "center", "right", "justify"]
CellAlignment = Literal["left", "center", "right"]
BulletType = Literal["none", "bullet", "number"]
VerticalAlign = Literal["top", "middle", "bottom"]
ElementType = Literal["text", "shape", "image", "table", "group"]


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


def to_dict(obj: Any) -> Any:
    """
    Serialize a model tree into the editor's JSON shape.

    Keys become camelCase, ``None`` fields are dropped and elements gain
    their ``type`` tag.
    """
    if is_dataclass(obj):
        out: Dict[str, Any] = {}
        if isinstance(obj, BaseElement):
            out["type"] = obj.type
        for f in fields(obj):
            value = getattr(obj, f.name)
            if value is None:
                continue
            out[_camel(f.name)] = to_dict(value)
        return out
    if isinstance(obj, (list, tuple)):
        return [to_dict(item) for item in obj]
    return obj


# ---------------------------------------------------------------------------
# Styles
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class TextStyle:
    font_family: str = "Calibri"
    font_size: float = 18
    font_weight: Union[str, int] = "normal"  # 'normal' | 'bold' | numeric weight
    font_style: str = "normal"  # 'normal' | 'italic'
    text_decoration: Optional[str] = "none"  # 'none' | 'underline' | 'line-through'
    color: str = "#000000"
    background_color: Optional[str] = None


@dataclass(frozen=True)
class Padding:
    top: float = 0
    right: float = 0
    bottom: float = 0
    left: float = 0


@dataclass(frozen=True)
class Fill:
    type: str = "solid"  # 'none' | 'solid' | 'gradient' | 'pattern' | 'image'
    color: Optional[str] = None


@dataclass(frozen=True)
class Stroke:
    color: str
    width: float = 1
    style: str = "solid"  # 'solid' | 'dashed' | 'dotted' | 'none'


@dataclass(frozen=True)
class TextBoxStyle:
    padding: Padding = field(default_factory=lambda: Padding(5, 10, 5, 10))
    vertical_align: VerticalAlign = "top"
    auto_fit: bool = False
    word_wrap: bool = True
    fill: Optional[Fill] = None
    stroke: Optional[Stroke] = None


@dataclass(frozen=True)
class CellBorders:
    top: Optional[Stroke] = None
    right: Optional[Stroke] = None
    bottom: Optional[Stroke] = None
    left: Optional[Stroke] = None

    @classmethod
    def uniform(cls, stroke: Stroke) -> "CellBorders":
        return cls(top=stroke, right=stroke, bottom=stroke, left=stroke)


@dataclass(frozen=True)
class TableStyle:
    border_collapse: bool = True
    default_cell_fill: Optional[Fill] = None
    header_row_fill: Optional[Fill] = None


# ---------------------------------------------------------------------------
# Text content
# ---------------------------------------------------------------------------

@dataclass
class TextRun:
    id: str
    text: str
    style: TextStyle


@dataclass
class Paragraph:
    id: str
    runs: List[TextRun]
    alignment: Alignment = "left"
    bullet_type: Optional[BulletType] = None
    indent_level: Optional[int] = None

    @property
    def text(self) -> str:
        return "".join(run.text for run in self.runs)


@dataclass
class TextContent:
    paragraphs: List[Paragraph] = field(default_factory=list)

    @property
    def text(self) -> str:
        """Plain text, one line per paragraph."""
        return "\n".join(p.text for p in self.paragraphs)


@dataclass
class TableCell:
    id: str
    content: TextContent
    padding: Optional[Padding] = None
    vertical_align: Optional[VerticalAlign] = None
    fill: Optional[Fill] = None
    borders: Optional[CellBorders] = None
    row_span: Optional[int] = None
    col_span: Optional[int] = None


# ---------------------------------------------------------------------------
# Elements
# ---------------------------------------------------------------------------

@dataclass
class Position:
    x: float
    y: float


@dataclass
class Size:
    width: float
    height: float


@dataclass
class BaseElement:
    """Fields shared by every element on a slide."""
    type: ClassVar[ElementType]

    id: str
    position: Position
    size: Size
    z_index: int = 0
    rotation: Optional[float] = None
    opacity: Optional[float] = None
    locked: Optional[bool] = None
    name: Optional[str] = None


@dataclass
class TextElement(BaseElement):
    type: ClassVar[ElementType] = "text"

    content: TextContent = field(default_factory=TextContent)
    style: TextBoxStyle = field(default_factory=TextBoxStyle)


@dataclass
class ShapeElement(BaseElement):
    type: ClassVar[ElementType] = "shape"

    shape_type: str = "rectangle"
    fill: Optional[Fill] = None
    stroke: Optional[Stroke] = None
    text: Optional[TextContent] = None


@dataclass
class ImageElement(BaseElement):
    type: ClassVar[ElementType] = "image"

    src: str = ""
    alt: Optional[str] = None
    stroke: Optional[Stroke] = None


@dataclass
class TableElement(BaseElement):
    type: ClassVar[ElementType] = "table"

    rows: int = 0
    columns: int = 0
    cells: List[List[TableCell]] = field(default_factory=list)
    column_widths: List[float] = field(default_factory=list)
    row_heights: List[float] = field(default_factory=list)
    style: TableStyle = field(default_factory=TableStyle)

    def header(self) -> List[TableCell]:
        return self.cells[0] if self.cells else []


@dataclass
class GroupElement(BaseElement):
    type: ClassVar[ElementType] = "group"

    children: List["SlideElement"] = field(default_factory=list)


SlideElement = Union[TextElement, ShapeElement, ImageElement, TableElement, GroupElement]


def element_text(element: SlideElement) -> str:
    """
    Return the plain text carried by any element variant.

    Table cells are joined with tabs, rows and group children with newlines.
    """
    if isinstance(element, TextElement):
        return element.content.text
    if isinstance(element, ShapeElement):
        return element.text.text if element.text else ""
    if isinstance(element, ImageElement):
        return element.alt or ""
    if isinstance(element, TableElement):
        return "\n".join(
            "\t".join(cell.content.text for cell in row) for row in element.cells
        )
    if isinstance(element, GroupElement):
        return "\n".join(element_text(child) for child in element.children)
    raise TypeError(f"Unknown slide element: {type(element).__name__}")
