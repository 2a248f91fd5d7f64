"""Draw-by-drag gesture state.

idle -> drawing -> idle. The machine only stores points and the preview;
the controller derives the preview element and commits the final shape.
"""

import logging
from collections import namedtuple

from PyQt5.QtCore import QObject, pyqtSignal

from vector_editor.models.transform import Rect

DrawResult = namedtuple('DrawResult', ['start', 'end'])


class DrawingState(QObject):
    """Tracks an in-progress draw gesture and its live preview element."""

    changed = pyqtSignal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self._logger = logging.getLogger('DrawingState')
        self.is_drawing = False
        self.start_point = None
        self.current_point = None
        self.preview_element = None

    def start_drawing(self, point):
        self.is_drawing = True
        self.start_point = point
        self.current_point = point
        self._logger.debug(f"Start drawing at ({point.x}, {point.y})")
        self.changed.emit()

    def update_drawing(self, point):
        if not self.is_drawing:
            return
        self.current_point = point
        self.changed.emit()

    def end_drawing(self):
        """Finish the gesture.

        Returns:
            DrawResult(start, end), or None when no gesture was in progress.
            The state is reset either way.
        """
        result = None
        if self.is_drawing and self.start_point is not None and self.current_point is not None:
            result = DrawResult(self.start_point, self.current_point)
        self.reset()
        return result

    def set_preview_element(self, element):
        self.preview_element = element
        self.changed.emit()

    def reset(self):
        self.is_drawing = False
        self.start_point = None
        self.current_point = None
        self.preview_element = None
        self.changed.emit()

    @property
    def dimensions(self) -> Rect:
        """Bounding box of the start/current points (zero rect if either is missing)"""
        if self.start_point is None or self.current_point is None:
            return Rect(0.0, 0.0, 0.0, 0.0)
        return Rect.from_points(self.start_point, self.current_point)
