"""
Tests for the element factory and pointer coordinate mapping.
"""
import pytest
from PyQt5.QtCore import QPointF
from PyQt5.QtGui import QTransform

from vector_editor.models.document import Tool
from vector_editor.models.element import ElementType, TextAnchor
from vector_editor.models.style import LineCap, LineJoin
from vector_editor.models.transform import Transform, Vec2
from vector_editor.services.element_factory import (
    create_circle, create_element, create_ellipse, create_line, create_rectangle,
    create_text, generate_id,
)
from vector_editor.utils.coordinate_transforms import get_mouse_position, snap_to_grid


class TestRectangle:

    def test_geometry(self):
        rect = create_rectangle(Vec2(0, 0), Vec2(10, 20))
        assert rect.type == ElementType.RECTANGLE
        assert rect.transform == Transform(0, 0, 0, 1, 1)
        assert rect.width == 10
        assert rect.height == 20

    def test_reversed_drag_uses_min_corner(self):
        rect = create_rectangle(Vec2(30, 40), Vec2(10, 5))
        assert rect.transform.pos == Vec2(10, 5)
        assert (rect.width, rect.height) == (20, 35)

    def test_default_style(self):
        rect = create_rectangle(Vec2(0, 0), Vec2(1, 1))
        assert rect.fill.color == '#3b82f6'
        assert rect.fill.opacity == 1
        assert rect.stroke.color == '#1e40af'
        assert rect.stroke.width == 2
        assert rect.stroke.line_cap == LineCap.BUTT
        assert rect.stroke.line_join == LineJoin.MITER
        assert rect.visible and not rect.locked
        assert rect.opacity == 1
        assert rect.name == 'Rectangle'

    def test_style_options(self):
        rect = create_rectangle(Vec2(0, 0), Vec2(1, 1), fill='#ff0000', stroke='#00ff00', stroke_width=5)
        assert rect.fill.color == '#ff0000'
        assert rect.stroke.color == '#00ff00'
        assert rect.stroke.width == 5


class TestCircleAndEllipse:

    def test_circle_three_four_five(self):
        circle = create_circle(Vec2(0, 0), Vec2(6, 8))
        assert circle.transform == Transform(3, 4, 0, 1, 1)
        assert circle.radius == pytest.approx(5)

    def test_ellipse(self):
        ellipse = create_ellipse(Vec2(10, 10), Vec2(0, 4))
        assert ellipse.transform.pos == Vec2(5, 7)
        assert ellipse.radius_x == 5
        assert ellipse.radius_y == 3


class TestLine:

    def test_endpoints_relative_to_start(self):
        line = create_line(Vec2(5, 5), Vec2(15, -5))
        assert line.transform.pos == Vec2(5, 5)
        assert (line.x1, line.y1, line.x2, line.y2) == (0, 0, 10, -10)

    def test_line_style(self):
        line = create_line(Vec2(0, 0), Vec2(1, 1))
        assert line.fill.opacity == 0
        assert line.stroke.line_cap == LineCap.ROUND
        assert line.stroke.line_join == LineJoin.ROUND


class TestText:

    def test_click_gets_minimum_box(self):
        text = create_text(Vec2(20, 30), Vec2(20, 30))
        assert text.transform.pos == Vec2(20, 30)
        assert (text.width, text.height) == (150, 32)
        assert text.content == ''

    def test_large_drag_keeps_size(self):
        text = create_text(Vec2(0, 0), Vec2(300, 100))
        assert (text.width, text.height) == (300, 100)

    def test_text_defaults(self):
        text = create_text(Vec2(0, 0), Vec2(1, 1))
        assert text.font_size == 16
        assert text.font_family == 'Arial, sans-serif'
        assert text.font_weight == 400
        assert text.text_anchor == TextAnchor.START
        assert text.fill.color == '#000000'
        assert text.stroke.width == 0

    def test_fill_sets_text_colour(self):
        text = create_text(Vec2(0, 0), Vec2(1, 1), fill='#ff0000')
        assert text.fill.color == '#ff0000'

    def test_misspelled_option_rejected(self):
        with pytest.raises(TypeError):
            create_text(Vec2(0, 0), Vec2(1, 1), font_sise=20)


class TestCreateElement:

    @pytest.mark.parametrize("tool,element_type", [
        (Tool.RECTANGLE, ElementType.RECTANGLE),
        (Tool.CIRCLE, ElementType.CIRCLE),
        (Tool.ELLIPSE, ElementType.ELLIPSE),
        (Tool.LINE, ElementType.LINE),
        (Tool.TEXT, ElementType.TEXT),
    ])
    def test_dispatch(self, tool, element_type):
        element = create_element(tool, Vec2(0, 0), Vec2(4, 4))
        assert element.type == element_type

    @pytest.mark.parametrize("tool", ['select', 'pan', 'path'])
    def test_non_drawing_tools(self, tool):
        assert create_element(tool, Vec2(0, 0), Vec2(4, 4)) is None

    def test_options_for_other_tools_dropped(self):
        line = create_element(Tool.LINE, Vec2(0, 0), Vec2(4, 4), fill='#123456', font_size=30, stroke='#00ff00')
        assert line.fill.opacity == 0
        assert line.stroke.color == '#00ff00'

    def test_unknown_option_rejected(self):
        with pytest.raises(ValueError):
            create_element(Tool.RECTANGLE, Vec2(0, 0), Vec2(4, 4), fil='#123456')

    def test_unknown_tool(self):
        with pytest.raises(ValueError):
            create_element('spray', Vec2(0, 0), Vec2(1, 1))

    def test_ids_unique(self):
        ids = {generate_id() for _ in range(1000)}
        assert len(ids) == 1000
        assert all(i.startswith('el-') for i in ids)


# ══════════════════════════════════════════════════════════════════════════
# Coordinate mapping
# ══════════════════════════════════════════════════════════════════════════

class TestMousePosition:

    def test_divides_out_screen_transform(self):
        ctm = QTransform(2, 0, 0, 4, 10, 20)
        point = get_mouse_position(QPointF(30, 60), ctm)
        assert point == Vec2(10, 10)

    def test_accepts_vec2(self):
        point = get_mouse_position(Vec2(5, 5), QTransform())
        assert point == Vec2(5, 5)

    def test_missing_transform_returns_origin(self):
        assert get_mouse_position(QPointF(30, 60), None) == Vec2(0, 0)

    def test_degenerate_transform_returns_origin(self):
        ctm = QTransform(0, 0, 0, 1, 0, 0)
        assert get_mouse_position(QPointF(30, 60), ctm) == Vec2(0, 0)

    def test_snap_to_grid(self):
        assert snap_to_grid(Vec2(14, 16), 10) == Vec2(10, 20)
