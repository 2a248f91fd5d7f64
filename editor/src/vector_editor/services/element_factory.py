"""
Element factory - builds new document elements from a drag gesture.

Each create_* function takes the gesture's start and end points in
document space plus style options, and returns a fully populated element
with a fresh id, identity rotation/scale and default visibility.
"""

import math
import uuid as uuid_module

from vector_editor.constants import (
    ELEMENT_ID_PREFIX, DEFAULT_ELEMENT_NAMES,
    DEFAULT_FILL_COLOR, DEFAULT_STROKE_COLOR, DEFAULT_STROKE_WIDTH,
    DEFAULT_TEXT_COLOR, DEFAULT_FONT_SIZE, DEFAULT_FONT_FAMILY, DEFAULT_FONT_WEIGHT,
    TEXT_MIN_WIDTH, TEXT_MIN_HEIGHT, STROKE_NONE,
)
from vector_editor.models.document import Tool, validate_tool
from vector_editor.models.element import (
    CircleElement, EllipseElement, LineElement, RectangleElement, TextElement, TextAnchor,
)
from vector_editor.models.style import Fill, FillType, LineCap, LineJoin, Stroke
from vector_editor.models.transform import Rect, Transform
from vector_editor.utils.logger import loggerRaise


def generate_id():
    """Session-unique element id (random UUID, no time component)."""
    return f"{ELEMENT_ID_PREFIX}-{uuid_module.uuid4()}"


def _shape_fill(fill=None):
    return Fill(type=FillType.SOLID, color=fill or DEFAULT_FILL_COLOR, opacity=1.0)


def _shape_stroke(stroke=None, stroke_width=None, line_cap=LineCap.BUTT, line_join=LineJoin.MITER):
    return Stroke(
        color=stroke or DEFAULT_STROKE_COLOR,
        width=stroke_width or DEFAULT_STROKE_WIDTH,
        opacity=1.0,
        line_cap=line_cap,
        line_join=line_join,
    )


def create_rectangle(start, end, fill=None, stroke=None, stroke_width=None):
    """Rectangle spanning the drag: min corner + absolute deltas."""
    box = Rect.from_points(start, end)
    return RectangleElement(
        id=generate_id(),
        name=DEFAULT_ELEMENT_NAMES['rectangle'],
        transform=Transform(box.x, box.y),
        fill=_shape_fill(fill),
        stroke=_shape_stroke(stroke, stroke_width),
        width=box.width,
        height=box.height,
    )


def create_circle(start, end, fill=None, stroke=None, stroke_width=None):
    """Circle with the drag as its diameter."""
    center_x = (start.x + end.x) / 2
    center_y = (start.y + end.y) / 2
    radius = math.hypot(end.x - start.x, end.y - start.y) / 2
    return CircleElement(
        id=generate_id(),
        name=DEFAULT_ELEMENT_NAMES['circle'],
        transform=Transform(center_x, center_y),
        fill=_shape_fill(fill),
        stroke=_shape_stroke(stroke, stroke_width),
        radius=radius,
    )


def create_ellipse(start, end, fill=None, stroke=None, stroke_width=None):
    """Ellipse inscribed in the drag box."""
    return EllipseElement(
        id=generate_id(),
        name=DEFAULT_ELEMENT_NAMES['ellipse'],
        transform=Transform((start.x + end.x) / 2, (start.y + end.y) / 2),
        fill=_shape_fill(fill),
        stroke=_shape_stroke(stroke, stroke_width),
        radius_x=abs(end.x - start.x) / 2,
        radius_y=abs(end.y - start.y) / 2,
    )


def create_line(start, end, stroke=None, stroke_width=None):
    """Line anchored at start; endpoints are stored relative to the anchor.

    Lines have no fill.
    """
    return LineElement(
        id=generate_id(),
        name=DEFAULT_ELEMENT_NAMES['line'],
        transform=Transform(start.x, start.y),
        fill=Fill(type=FillType.SOLID, color=None, opacity=0.0),
        stroke=_shape_stroke(stroke, stroke_width, LineCap.ROUND, LineJoin.ROUND),
        x1=0.0,
        y1=0.0,
        x2=end.x - start.x,
        y2=end.y - start.y,
    )


def create_text(start, end, fill=None, font_size=None, font_family=None):
    """Empty text box; a plain click still yields a TEXT_MIN_WIDTH x TEXT_MIN_HEIGHT box."""
    box = Rect.from_points(start, end)
    return TextElement(
        id=generate_id(),
        name=DEFAULT_ELEMENT_NAMES['text'],
        transform=Transform(box.x, box.y),
        fill=Fill(type=FillType.SOLID, color=fill or DEFAULT_TEXT_COLOR, opacity=1.0),
        stroke=Stroke(color=STROKE_NONE, width=0, opacity=0.0),
        content='',
        font_size=font_size or DEFAULT_FONT_SIZE,
        font_family=font_family or DEFAULT_FONT_FAMILY,
        font_weight=DEFAULT_FONT_WEIGHT,
        text_anchor=TextAnchor.START,
        width=max(box.width, TEXT_MIN_WIDTH),
        height=max(box.height, TEXT_MIN_HEIGHT),
    )


# Tool -> factory registry (tools that do not create elements are absent)
FACTORIES = {
    Tool.RECTANGLE: create_rectangle,
    Tool.CIRCLE: create_circle,
    Tool.ELLIPSE: create_ellipse,
    Tool.LINE: create_line,
    Tool.TEXT: create_text,
}

# Style options each factory understands
_SHAPE_OPTIONS = frozenset({'fill', 'stroke', 'stroke_width'})
FACTORY_OPTIONS = {
    Tool.RECTANGLE: _SHAPE_OPTIONS,
    Tool.CIRCLE: _SHAPE_OPTIONS,
    Tool.ELLIPSE: _SHAPE_OPTIONS,
    Tool.LINE: frozenset({'stroke', 'stroke_width'}),
    Tool.TEXT: frozenset({'fill', 'font_size', 'font_family'}),
}
STYLE_OPTIONS = frozenset().union(*FACTORY_OPTIONS.values())


def create_element(tool, start, end, **options):
    """Create the element for a drawing tool.

    Options a tool has no use for (font_size for a rectangle, fill for a
    line) are dropped, so one style dict can serve every tool.

    Args:
        tool: Tool value or name
        start, end: Gesture points in document space
        **options: Style options (see STYLE_OPTIONS)

    Returns:
        New element, or None for tools without a factory (select, pan, path)

    Raises:
        ValueError: If an option is not a known style option
    """
    tool = validate_tool(tool)
    unknown = set(options) - STYLE_OPTIONS
    if unknown:
        loggerRaise(ValueError(f"Unknown style options: {sorted(unknown)}"), title="Invalid style")

    factory = FACTORIES.get(tool)
    if factory is None:
        return None
    accepted = FACTORY_OPTIONS[tool]
    return factory(start, end, **{key: value for key, value in options.items() if key in accepted})
