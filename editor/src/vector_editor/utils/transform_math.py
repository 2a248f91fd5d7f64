"""Transform math for handle-based resize and rotate gestures.

Pure functions over element snapshots. Each gesture computes its result
from the element as it was when the gesture started (not the live
element), so repeated pointer moves never accumulate error.

Conventions:
- Rotation is in degrees, applied about the element's visual center
- Resize deltas are taken in the element's rotated local frame
- Results are update dicts suitable for Document.update_element()
"""

import math

import numpy as np

from vector_editor.constants import MIN_ELEMENT_SIZE
from vector_editor.models.element import ElementType
from vector_editor.models.transform import Rect, Vec2
from vector_editor.state.transform_state import HANDLE_DIRECTIONS, CORNER_HANDLES, validate_handle


def rotation_matrix(degrees):
    """2x2 rotation matrix for a rotation in degrees."""
    theta = math.radians(degrees)
    cos_t, sin_t = math.cos(theta), math.sin(theta)
    return np.array([[cos_t, -sin_t], [sin_t, cos_t]])


def rotate_point(point, center, degrees):
    """Rotate a point about a center."""
    offset = np.array([point.x - center.x, point.y - center.y])
    x, y = rotation_matrix(degrees) @ offset
    return Vec2(center.x + float(x), center.y + float(y))


def _to_local(point, origin, degrees):
    """Offset of point from origin expressed in a frame rotated by `degrees`."""
    offset = np.array([point.x - origin.x, point.y - origin.y])
    return rotation_matrix(-degrees) @ offset


# ========================================
# Geometry queries
# ========================================

def element_center(element):
    """Visual center of an element (the pivot for rotation).

    Args:
        element: Any Element variant

    Returns:
        Vec2 in document space
    """
    t = element.transform
    if element.type in (ElementType.RECTANGLE, ElementType.TEXT):
        return Vec2(t.x + element.width / 2, t.y + element.height / 2)
    if element.type == ElementType.LINE:
        return Vec2(t.x + (element.x1 + element.x2) / 2, t.y + (element.y1 + element.y2) / 2)
    # circle, ellipse and path are positioned by their origin
    return Vec2(t.x, t.y)


def element_bounds(element):
    """Unrotated bounding box of an element."""
    t = element.transform
    if element.type in (ElementType.RECTANGLE, ElementType.TEXT):
        return Rect(t.x, t.y, element.width, element.height)
    if element.type == ElementType.CIRCLE:
        r = element.radius
        return Rect(t.x - r, t.y - r, 2 * r, 2 * r)
    if element.type == ElementType.ELLIPSE:
        return Rect(t.x - element.radius_x, t.y - element.radius_y, 2 * element.radius_x, 2 * element.radius_y)
    if element.type == ElementType.LINE:
        return Rect.from_points(Vec2(t.x + element.x1, t.y + element.y1), Vec2(t.x + element.x2, t.y + element.y2))
    # path data is opaque; only its origin is known
    return Rect(t.x, t.y, 0.0, 0.0)


def element_aabb(element):
    """Axis-aligned box around the element after its rotation."""
    bounds = element_bounds(element)
    rotation = element.transform.rotation
    if not rotation:
        return bounds

    center = element_center(element)
    corners = np.array([
        [bounds.x, bounds.y],
        [bounds.right, bounds.y],
        [bounds.right, bounds.bottom],
        [bounds.x, bounds.bottom],
    ]) - [center.x, center.y]
    rotated = corners @ rotation_matrix(rotation).T + [center.x, center.y]
    min_x, min_y = rotated.min(axis=0)
    max_x, max_y = rotated.max(axis=0)
    return Rect(float(min_x), float(min_y), float(max_x - min_x), float(max_y - min_y))


def rect_intersects(a, b):
    """True if two rectangles overlap or touch."""
    return a.x <= b.right and b.x <= a.right and a.y <= b.bottom and b.y <= a.bottom


# ========================================
# Resize
# ========================================

def resize_element(element, handle, start_point, point, keep_aspect=False):
    """Compute the updates for dragging a resize handle.

    Args:
        element: Element snapshot taken at gesture start
        handle: One of the eight resize handles
        start_point: Pointer position at gesture start (document space)
        point: Current pointer position (document space)
        keep_aspect: Corner handles keep the width/height ratio

    Returns:
        dict of field updates ({} when the element cannot be resized)
    """
    handle = validate_handle(handle)
    direction = HANDLE_DIRECTIONS.get(handle)
    if direction is None:
        return {}

    if element.type in (ElementType.RECTANGLE, ElementType.TEXT):
        return _resize_box(element, direction, start_point, point,
                           keep_aspect and handle in CORNER_HANDLES)
    if element.type == ElementType.ELLIPSE:
        return _resize_ellipse(element, direction, point)
    if element.type == ElementType.CIRCLE:
        return _resize_circle(element, direction, point)
    if element.type == ElementType.LINE:
        return _resize_line(element, point)
    return {}


def _resize_line(element, point):
    """Move the end point onto the pointer; the start stays fixed on screen.

    Lines rotate about their midpoint, so the origin is recomputed for the
    new midpoint.
    """
    t = element.transform
    rotation = t.rotation
    start = rotate_point(Vec2(t.x + element.x1, t.y + element.y1), element_center(element), rotation)

    # Segment from the fixed start to the pointer, in the unrotated frame
    dx, dy = _to_local(point, start, rotation)
    mid_x, mid_y = (start.x + point.x) / 2, (start.y + point.y) / 2
    return {
        'transform': {'x': float(mid_x - dx / 2 - element.x1), 'y': float(mid_y - dy / 2 - element.y1)},
        'x2': float(element.x1 + dx),
        'y2': float(element.y1 + dy),
    }


def _resize_box(element, direction, start_point, point, keep_aspect):
    """Move the dragged edges; the opposite edges stay fixed on screen."""
    hx, hy = direction
    rotation = element.transform.rotation
    width, height = element.width, element.height
    center = element_center(element)

    dx, dy = rotation_matrix(-rotation) @ np.array([point.x - start_point.x, point.y - start_point.y])

    # Box edges relative to the old center, in the unrotated local frame
    left, right = -width / 2, width / 2
    top, bottom = -height / 2, height / 2
    if hx < 0:
        left += dx
    elif hx > 0:
        right += dx
    if hy < 0:
        top += dy
    elif hy > 0:
        bottom += dy

    if keep_aspect and width > 0 and height > 0:
        factor = max(abs(right - left) / width, abs(bottom - top) / height)
        if hx < 0:
            left = right - width * factor
        else:
            right = left + width * factor
        if hy < 0:
            top = bottom - height * factor
        else:
            bottom = top + height * factor

    # Dragging past the opposite edge flips the box
    left, right = min(left, right), max(left, right)
    top, bottom = min(top, bottom), max(top, bottom)
    new_width = max(right - left, MIN_ELEMENT_SIZE)
    new_height = max(bottom - top, MIN_ELEMENT_SIZE)

    local_center = np.array([(left + right) / 2, (top + bottom) / 2])
    cx, cy = np.array([center.x, center.y]) + rotation_matrix(rotation) @ local_center

    return {
        'transform': {'x': float(cx - new_width / 2), 'y': float(cy - new_height / 2)},
        'width': float(new_width),
        'height': float(new_height),
    }


def _resize_ellipse(element, direction, point):
    """Ellipses resize symmetrically about their center."""
    hx, hy = direction
    local_x, local_y = _to_local(point, element.transform.pos, element.transform.rotation)
    updates = {}
    if hx:
        updates['radius_x'] = max(abs(float(local_x)), MIN_ELEMENT_SIZE / 2)
    if hy:
        updates['radius_y'] = max(abs(float(local_y)), MIN_ELEMENT_SIZE / 2)
    return updates


def _resize_circle(element, direction, point):
    hx, hy = direction
    local_x, local_y = _to_local(point, element.transform.pos, element.transform.rotation)
    if hx and hy:
        radius = max(abs(local_x), abs(local_y))
    elif hx:
        radius = abs(local_x)
    else:
        radius = abs(local_y)
    return {'radius': max(float(radius), MIN_ELEMENT_SIZE / 2)}


# ========================================
# Rotate
# ========================================

def rotate_element(element, center, start_point, point, snap_degrees=None):
    """Compute the rotation update for dragging the rotate handle.

    Args:
        element: Element snapshot taken at gesture start
        center: Pinned rotation center for this gesture
        start_point: Pointer position at gesture start
        point: Current pointer position
        snap_degrees: Snap the result to multiples of this angle (optional)

    Returns:
        dict with a transform rotation update, normalized to [0, 360)
    """
    start_angle = math.degrees(math.atan2(start_point.y - center.y, start_point.x - center.x))
    current_angle = math.degrees(math.atan2(point.y - center.y, point.x - center.x))
    rotation = element.transform.rotation + (current_angle - start_angle)

    if snap_degrees:
        rotation = round(rotation / snap_degrees) * snap_degrees

    return {'transform': {'rotation': rotation % 360.0}}
