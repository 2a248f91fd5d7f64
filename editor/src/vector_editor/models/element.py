"""
Vector Editor Core - Element Data Model

Elements are the geometric primitives of a document. Each variant is a
dataclass sharing the base record (id, name, transform, fill, stroke,
visible, locked, opacity) and adding its own geometry fields.

The variant discriminant is a class-level constant exposed through the
read-only `type` property, so it can never change after creation and can
never be the target of a partial update.

Usage:
    rect = RectangleElement('el-1', width=10, height=20)
    rect.type                      # ElementType.RECTANGLE
    moved = rect.merged({'width': 40, 'transform': {'x': 5}})
"""

import dataclasses
from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any, ClassVar, Dict, Optional, Tuple, Union

from vector_editor.constants import DEFAULT_FONT_FAMILY, DEFAULT_FONT_SIZE, DEFAULT_FONT_WEIGHT
from vector_editor.models.style import Fill, Stroke, style_to_dict
from vector_editor.models.transform import Transform


class ElementType(str, Enum):
    RECTANGLE = 'rectangle'
    CIRCLE = 'circle'
    ELLIPSE = 'ellipse'
    PATH = 'path'
    TEXT = 'text'
    LINE = 'line'


class TextAnchor(str, Enum):
    START = 'start'
    MIDDLE = 'middle'
    END = 'end'


# Nested records that accept a dict of their own fields as a partial update
_NESTED_RECORDS = ('transform', 'fill', 'stroke')


@dataclass
class Element:
    """Base record shared by every element variant.

    Properties:
        id: Opaque unique identifier, immutable after creation
        type: Variant discriminant (class-level, read-only)
        name: Display label
        transform: Position, rotation and scale (see Transform)
        fill, stroke: Style records
        visible: Gates rendering
        locked: Gates interaction (enforced by the controller, not here)
        opacity: Overall opacity, independent of fill/stroke opacity
    """
    TYPE: ClassVar[ElementType] = None

    id: str
    name: str = ''
    transform: Transform = field(default_factory=Transform)
    fill: Fill = field(default_factory=Fill)
    stroke: Stroke = field(default_factory=Stroke)
    visible: bool = True
    locked: bool = False
    opacity: float = 1.0

    def __new__(cls, *args, **kwargs):
        if cls.TYPE is None:
            raise TypeError(f"{cls.__name__} is abstract; create one of the element variants")
        return super().__new__(cls)

    @property
    def type(self) -> ElementType:
        return self.TYPE

    @classmethod
    def updatable_fields(cls) -> Tuple[str, ...]:
        """Fields a partial update may touch for this variant."""
        return tuple(f.name for f in fields(cls) if f.name != 'id')

    def validate_updates(self, updates: Dict[str, Any]) -> None:
        """Reject update keys that do not belong to this variant.

        Raises:
            ValueError: If an update targets id, type, or a field of another variant
        """
        allowed = self.updatable_fields()
        invalid = sorted(key for key in updates if key not in allowed)
        if invalid:
            raise ValueError(
                f"Cannot update {', '.join(invalid)} on {self.TYPE.value} element '{self.id}'"
            )

    def merged(self, updates: Dict[str, Any]) -> 'Element':
        """Return a new element with `updates` merged in.

        Nested records (transform, fill, stroke) may be given as a dict of
        their own fields, which is shallow-merged into the current record.
        """
        self.validate_updates(updates)
        changes = {}
        for key, value in updates.items():
            if key in _NESTED_RECORDS and isinstance(value, dict):
                try:
                    value = dataclasses.replace(getattr(self, key), **value)
                except TypeError as e:
                    raise ValueError(f"Invalid {key} update on element '{self.id}': {e}") from e
            changes[key] = value
        return dataclasses.replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        """Plain dict snapshot for renderers (enums flattened to strings)."""
        data = style_to_dict(self)
        data['type'] = self.TYPE.value
        return data


@dataclass
class RectangleElement(Element):
    TYPE: ClassVar[ElementType] = ElementType.RECTANGLE

    width: float = 0.0
    height: float = 0.0
    rx: Optional[float] = None
    ry: Optional[float] = None


@dataclass
class CircleElement(Element):
    TYPE: ClassVar[ElementType] = ElementType.CIRCLE

    radius: float = 0.0


@dataclass
class EllipseElement(Element):
    TYPE: ClassVar[ElementType] = ElementType.ELLIPSE

    radius_x: float = 0.0
    radius_y: float = 0.0


@dataclass
class PathElement(Element):
    TYPE: ClassVar[ElementType] = ElementType.PATH

    path_data: str = ''


@dataclass
class TextElement(Element):
    TYPE: ClassVar[ElementType] = ElementType.TEXT

    content: str = ''
    font_size: float = DEFAULT_FONT_SIZE
    font_family: str = DEFAULT_FONT_FAMILY
    font_weight: Union[int, str] = DEFAULT_FONT_WEIGHT
    text_anchor: TextAnchor = TextAnchor.START
    width: float = 0.0
    height: float = 0.0

    def __post_init__(self):
        self.text_anchor = TextAnchor(self.text_anchor)


@dataclass
class LineElement(Element):
    """Line with endpoints relative to transform.x/y."""
    TYPE: ClassVar[ElementType] = ElementType.LINE

    x1: float = 0.0
    y1: float = 0.0
    x2: float = 0.0
    y2: float = 0.0


ELEMENT_CLASSES = {
    cls.TYPE: cls
    for cls in (RectangleElement, CircleElement, EllipseElement, PathElement, TextElement, LineElement)
}


def element_class_for(element_type) -> type:
    """Look up the element class for a type value.

    Raises:
        ValueError: If element_type is not a known ElementType
    """
    return ELEMENT_CLASSES[ElementType(element_type)]
