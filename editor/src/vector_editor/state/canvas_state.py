"""Canvas viewport state: viewBox, zoom, grid display and snapping.

Provides viewport navigation including:
- Zoom in/out/reset with clamping
- Pan from device-space pointer deltas
- Grid display toggle, grid size and snap-to-grid
"""

import logging

from PyQt5.QtCore import QObject, pyqtSignal
from PyQt5.QtGui import QTransform

from vector_editor.constants import (
    DEFAULT_VIEW_BOX,
    ZOOM_MIN, ZOOM_MAX, ZOOM_DEFAULT, ZOOM_STEP,
    GRID_SIZE_MIN, GRID_SIZE_MAX, GRID_SIZE_DEFAULT,
    GRID_VISIBLE_DEFAULT, SNAP_TO_GRID_DEFAULT,
)
from vector_editor.models.transform import Rect, Vec2
from vector_editor.utils.coordinate_transforms import snap_to_grid
from vector_editor.utils.logger import loggerRaise


class CanvasState(QObject):
    """Viewport state consumed by coordinate mapping and the renderer."""

    changed = pyqtSignal()

    def __init__(self, view_box=None, grid_visible=GRID_VISIBLE_DEFAULT,
                 grid_size=GRID_SIZE_DEFAULT, snap_to_grid=SNAP_TO_GRID_DEFAULT, parent=None):
        super().__init__(parent)
        self._logger = logging.getLogger('CanvasState')
        self.view_box = Rect(**dict(DEFAULT_VIEW_BOX, **(view_box or {})))
        self.zoom = ZOOM_DEFAULT
        self.grid_visible = bool(grid_visible)
        self.grid_size = self._clamp_grid_size(grid_size)
        self.snap_to_grid = bool(snap_to_grid)

    @classmethod
    def from_config(cls, config, parent=None):
        """Create canvas state from a loaded config dict"""
        return cls(
            view_box=config.get('view_box'),
            grid_visible=config.get('grid_visible', GRID_VISIBLE_DEFAULT),
            grid_size=config.get('grid_size', GRID_SIZE_DEFAULT),
            snap_to_grid=config.get('snap_to_grid', SNAP_TO_GRID_DEFAULT),
            parent=parent,
        )

    # ========================================
    # View box
    # ========================================

    def set_view_box(self, **partial):
        """Merge x/y/width/height values into the view box."""
        current = vars(self.view_box)
        unknown = set(partial) - set(current)
        if unknown:
            loggerRaise(ValueError(f"Unknown view box fields: {sorted(unknown)}"), title="Invalid view box")
        self.view_box = Rect(**dict(current, **partial))
        self.changed.emit()

    def pan(self, delta_x, delta_y):
        """Pan by a device-space pointer delta.

        Dragging right moves the visible window left in document space.
        """
        self.view_box.x -= delta_x / self.zoom
        self.view_box.y -= delta_y / self.zoom
        self.changed.emit()

    # ========================================
    # Zoom
    # ========================================

    def set_zoom(self, zoom):
        """Set zoom factor, clamped to [ZOOM_MIN, ZOOM_MAX]."""
        self.zoom = max(ZOOM_MIN, min(ZOOM_MAX, float(zoom)))
        self._logger.debug(f"Zoom: {self.zoom:.3f}")
        self.changed.emit()

    def zoom_in(self):
        self.set_zoom(self.zoom * ZOOM_STEP)

    def zoom_out(self):
        self.set_zoom(self.zoom / ZOOM_STEP)

    def reset_zoom(self):
        """Reset zoom to 100% (view box is left untouched)."""
        self.set_zoom(ZOOM_DEFAULT)

    def get_zoom_percent(self):
        return int(round(self.zoom * 100))

    # ========================================
    # Grid
    # ========================================

    def toggle_grid(self):
        self.grid_visible = not self.grid_visible
        self.changed.emit()

    def toggle_snap_to_grid(self):
        self.snap_to_grid = not self.snap_to_grid
        self.changed.emit()

    def set_grid_size(self, size):
        self.grid_size = self._clamp_grid_size(size)
        self.changed.emit()

    @staticmethod
    def _clamp_grid_size(size):
        return max(GRID_SIZE_MIN, min(GRID_SIZE_MAX, size))

    def snap(self, point: Vec2) -> Vec2:
        """Snap a document point to the grid when snapping is enabled."""
        if not self.snap_to_grid:
            return point
        return snap_to_grid(point, self.grid_size)

    # ========================================
    # Coordinate mapping
    # ========================================

    def screen_transform(self) -> QTransform:
        """Document -> device transform for the current view box and zoom.

        Usable as the screen CTM passed to get_mouse_position().
        """
        return QTransform(
            self.zoom, 0.0,
            0.0, self.zoom,
            -self.view_box.x * self.zoom, -self.view_box.y * self.zoom,
        )
