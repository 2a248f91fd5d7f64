"""Coordinate transformation utilities for pointer input.

Provides conversion between coordinate systems:
- Device space (raw pointer pixels, as delivered by the input layer)
- Document space (element coordinates, independent of pan/zoom)
"""
from vector_editor.models.transform import Vec2


def get_mouse_position(client_pos, screen_ctm):
    """Convert a pointer position to document coordinates.

    Divides out the rendering surface's screen transform (translation
    e/f = dx/dy, scale a/d = m11/m22).

    Args:
        client_pos: Pointer position with x()/y() accessors (QPoint, QPointF) or a Vec2
        screen_ctm: QTransform mapping document space to device space, or None

    Returns:
        Vec2 in document space; the origin if the transform is unavailable
    """
    if screen_ctm is None or screen_ctm.m11() == 0 or screen_ctm.m22() == 0:
        return Vec2(0.0, 0.0)

    if isinstance(client_pos, Vec2):
        client_x, client_y = client_pos
    else:
        client_x, client_y = client_pos.x(), client_pos.y()

    return Vec2(
        (client_x - screen_ctm.dx()) / screen_ctm.m11(),
        (client_y - screen_ctm.dy()) / screen_ctm.m22(),
    )


def snap_to_grid(point, grid_size):
    """Snap a document-space point to the nearest grid intersection.

    Args:
        point: Vec2 in document space
        grid_size: Grid spacing in document units

    Returns:
        Vec2 on the grid
    """
    if grid_size <= 0:
        return point
    return Vec2(
        round(point.x / grid_size) * grid_size,
        round(point.y / grid_size) * grid_size,
    )
