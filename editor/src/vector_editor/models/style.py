"""
Vector Editor Core - Style Models

Fill, stroke and gradient records attached to every element, plus the
string enums used by them. Enums derive from str so plain strings compare
equal and serialize without conversion.
"""

from dataclasses import dataclass, field, asdict
from enum import Enum
from typing import List, Optional

from vector_editor.constants import DEFAULT_FILL_COLOR, DEFAULT_STROKE_COLOR, DEFAULT_STROKE_WIDTH


class FillType(str, Enum):
    SOLID = 'solid'
    GRADIENT = 'gradient'


class GradientType(str, Enum):
    LINEAR = 'linear'
    RADIAL = 'radial'


class LineCap(str, Enum):
    BUTT = 'butt'
    ROUND = 'round'
    SQUARE = 'square'


class LineJoin(str, Enum):
    MITER = 'miter'
    ROUND = 'round'
    BEVEL = 'bevel'


@dataclass
class GradientStop:
    """One color stop; offset is clamped into [0, 1]."""
    offset: float
    color: str
    opacity: float = 1.0

    def __post_init__(self):
        self.offset = max(0.0, min(1.0, float(self.offset)))


@dataclass
class Gradient:
    """Linear (x1, y1, x2, y2) or radial (cx, cy, r) gradient.

    Stops are kept in the order given; renderers expect ascending offsets.
    """
    type: GradientType
    stops: List[GradientStop] = field(default_factory=list)
    x1: Optional[float] = None
    y1: Optional[float] = None
    x2: Optional[float] = None
    y2: Optional[float] = None
    cx: Optional[float] = None
    cy: Optional[float] = None
    r: Optional[float] = None

    def __post_init__(self):
        self.type = GradientType(self.type)


@dataclass
class Fill:
    type: FillType = FillType.SOLID
    color: Optional[str] = DEFAULT_FILL_COLOR
    gradient: Optional[Gradient] = None
    opacity: float = 1.0

    def __post_init__(self):
        self.type = FillType(self.type)


@dataclass
class Stroke:
    color: str = DEFAULT_STROKE_COLOR
    width: float = DEFAULT_STROKE_WIDTH
    opacity: float = 1.0
    line_cap: LineCap = LineCap.BUTT
    line_join: LineJoin = LineJoin.MITER
    dash_array: Optional[List[float]] = None

    def __post_init__(self):
        self.width = max(0.0, float(self.width))
        self.line_cap = LineCap(self.line_cap)
        self.line_join = LineJoin(self.line_join)


def style_to_dict(style) -> dict:
    """Plain dict snapshot of a style record with enums flattened to strings."""
    def _flatten(value):
        if isinstance(value, Enum):
            return value.value
        if isinstance(value, dict):
            return {k: _flatten(v) for k, v in value.items()}
        if isinstance(value, list):
            return [_flatten(v) for v in value]
        return value
    return _flatten(asdict(style))
