"""
Vector Editor Core - Interaction State

Gesture and view state owned by the host controller:
- canvas_state.py: viewport (view box, zoom, grid, snap)
- drawing_state.py: draw-by-drag gesture
- selection_state.py: selected and hovered ids
- transform_state.py: resize/rotate gesture
"""

from .canvas_state import CanvasState
from .drawing_state import DrawingState, DrawResult
from .selection_state import SelectionState
from .transform_state import TransformState, TransformHandle, CORNER_HANDLES, EDGE_HANDLES

__all__ = [
    'CanvasState',
    'DrawingState', 'DrawResult',
    'SelectionState',
    'TransformState', 'TransformHandle', 'CORNER_HANDLES', 'EDGE_HANDLES',
]
