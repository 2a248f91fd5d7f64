"""Transform gesture state for handle-based resize and rotate.

Binds exactly one element and one handle per gesture. The geometry math
lives in utils.transform_math; this machine only stores gesture metadata.
"""

import logging
from enum import Enum

from PyQt5.QtCore import QObject, pyqtSignal

from vector_editor.models.transform import Vec2
from vector_editor.utils.logger import loggerRaise


class TransformHandle(str, Enum):
    TOP_LEFT = 'top-left'
    TOP_RIGHT = 'top-right'
    BOTTOM_LEFT = 'bottom-left'
    BOTTOM_RIGHT = 'bottom-right'
    TOP = 'top'
    BOTTOM = 'bottom'
    LEFT = 'left'
    RIGHT = 'right'
    ROTATE = 'rotate'


CORNER_HANDLES = frozenset({
    TransformHandle.TOP_LEFT, TransformHandle.TOP_RIGHT,
    TransformHandle.BOTTOM_LEFT, TransformHandle.BOTTOM_RIGHT,
})
EDGE_HANDLES = frozenset({
    TransformHandle.TOP, TransformHandle.BOTTOM,
    TransformHandle.LEFT, TransformHandle.RIGHT,
})

# Normalized handle positions on the box: -1 = left/top, 1 = right/bottom
HANDLE_DIRECTIONS = {
    TransformHandle.TOP_LEFT: (-1, -1),
    TransformHandle.TOP_RIGHT: (1, -1),
    TransformHandle.BOTTOM_LEFT: (-1, 1),
    TransformHandle.BOTTOM_RIGHT: (1, 1),
    TransformHandle.TOP: (0, -1),
    TransformHandle.BOTTOM: (0, 1),
    TransformHandle.LEFT: (-1, 0),
    TransformHandle.RIGHT: (1, 0),
}


def validate_handle(handle) -> TransformHandle:
    try:
        return TransformHandle(handle)
    except ValueError as e:
        loggerRaise(e, f"Unknown transform handle: {handle!r}", "Invalid handle")


class TransformState(QObject):
    """Tracks an in-progress resize/rotate gesture.

    The rotation center is pinned once per gesture so the visual center of
    a rotating element does not drift as its rotated bounds change.
    """

    changed = pyqtSignal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self._logger = logging.getLogger('TransformState')
        self.is_transforming = False
        self.handle = None
        self.start_point = None
        self.element_id = None
        self.rotate_center_x = None
        self.rotate_center_y = None

    def start_transform(self, element_id, handle, point):
        """Bind the gesture to one element and one handle

        Raises:
            ValueError: If handle is not a known TransformHandle
        """
        self.handle = validate_handle(handle)
        self.is_transforming = True
        self.element_id = element_id
        self.start_point = point
        # The pinned center belongs to a single gesture
        self.rotate_center_x = None
        self.rotate_center_y = None
        self._logger.debug(f"Start transform: {element_id} via {self.handle.value}")
        self.changed.emit()

    def set_rotate_center(self, x, y):
        self.rotate_center_x = x
        self.rotate_center_y = y
        self.changed.emit()

    @property
    def rotate_center(self):
        if self.rotate_center_x is None or self.rotate_center_y is None:
            return None
        return Vec2(self.rotate_center_x, self.rotate_center_y)

    @property
    def is_rotating(self):
        return self.is_transforming and self.handle == TransformHandle.ROTATE

    @property
    def is_resizing(self):
        return self.is_transforming and self.handle in HANDLE_DIRECTIONS

    def reset(self):
        """Clear the gesture (no commit step; updates were applied live)"""
        self.is_transforming = False
        self.element_id = None
        self.handle = None
        self.start_point = None
        self.rotate_center_x = None
        self.rotate_center_y = None
        self.changed.emit()

    end_transform = reset
