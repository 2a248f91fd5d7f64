"""Transform data structures for coordinate and state representation."""
from dataclasses import dataclass


@dataclass
class Vec2:
    """2D vector for coordinate pairs.

    Used for any x/y coordinate pair across different spaces:
    - Document space (element coordinates, affected by pan/zoom)
    - Device space (raw pointer pixels)
    """
    x: float
    y: float

    def __iter__(self):
        """Allow tuple unpacking: x, y = vec2"""
        return iter((self.x, self.y))


# Gesture and factory APIs speak in points
Point = Vec2


@dataclass
class Rect:
    """Axis-aligned rectangle (viewBox, drawing dimensions, bounds)."""
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @classmethod
    def from_points(cls, a: Vec2, b: Vec2) -> 'Rect':
        """Bounding box of two points (min corner + absolute deltas)."""
        return cls(min(a.x, b.x), min(a.y, b.y), abs(b.x - a.x), abs(b.y - a.y))

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def center(self) -> Vec2:
        return Vec2(self.x + self.width / 2, self.y + self.height / 2)


@dataclass
class Transform:
    """Element transform: position plus rotation/scale about the local origin.

    The meaning of x/y depends on the element variant:
    - rectangle, text: top-left corner
    - circle, ellipse: center
    - line: start point
    - path: origin of the path data
    """
    x: float = 0.0
    y: float = 0.0
    rotation: float = 0.0  # Degrees
    scale_x: float = 1.0
    scale_y: float = 1.0

    @property
    def pos(self) -> Vec2:
        return Vec2(self.x, self.y)
