"""
Vector Editor Core - Data Models

This module contains the document data model: elements, styles and the
Document store. This is the MODEL in MVC architecture.

Public API: Import Document, Tool and the element classes from models.
"""

from .transform import Vec2, Point, Rect, Transform
from .style import Fill, Stroke, Gradient, GradientStop, FillType, GradientType, LineCap, LineJoin
from .element import (
    Element, ElementType, TextAnchor,
    RectangleElement, CircleElement, EllipseElement, PathElement, TextElement, LineElement,
    element_class_for,
)
from .document import Document, Tool

__all__ = [
    'Vec2', 'Point', 'Rect', 'Transform',
    'Fill', 'Stroke', 'Gradient', 'GradientStop', 'FillType', 'GradientType', 'LineCap', 'LineJoin',
    'Element', 'ElementType', 'TextAnchor',
    'RectangleElement', 'CircleElement', 'EllipseElement', 'PathElement', 'TextElement', 'LineElement',
    'element_class_for',
    'Document', 'Tool',
]
