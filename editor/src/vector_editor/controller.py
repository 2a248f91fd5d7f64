"""
Editor controller - routes pointer gestures to the document and state stores.

Owns one of each store (document, canvas, drawing, selection, transform)
and composes them the way an interactive canvas does:

- Shape tools: press/drag/release draws a new element with a live preview
- Select tool on a handle: resize or rotate the bound element
- Select tool on an element: select it and drag the selection
- Select tool on empty canvas: marquee selection
- Pan tool: drag the viewport

Points arrive in document space (already mapped by get_mouse_position).
Hit-testing is the caller's job: it passes the element id and handle under
the pointer, if any. Locked elements are never selected or transformed.

Usage:
    controller = EditorController(config=load_config())
    controller.set_tool('rectangle')
    controller.pointer_down(Vec2(10, 10))
    controller.pointer_move(Vec2(60, 40))
    element = controller.pointer_up()
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Optional

from vector_editor.constants import DEFAULT_CONFIG, DEFAULT_TEXT_COLOR, ROTATION_SNAP_DEGREES
from vector_editor.models.document import Document, Tool, validate_tool
from vector_editor.models.transform import Rect, Vec2
from vector_editor.services.element_factory import FACTORIES, create_element
from vector_editor.state.canvas_state import CanvasState
from vector_editor.state.drawing_state import DrawingState
from vector_editor.state.selection_state import SelectionState
from vector_editor.state.transform_state import TransformHandle, TransformState, validate_handle
from vector_editor.utils.config import style_options
from vector_editor.utils.transform_math import (
    element_aabb, element_center, rect_intersects, resize_element, rotate_element,
)


@dataclass
class GestureContext:
    """Unified state for the gesture in progress.

    Replaces per-gesture boolean flags with a single object.
    """
    operation: str  # 'draw', 'transform', 'move', 'marquee', 'pan'
    start_point: Vec2
    current_point: Optional[Vec2] = None
    additive: bool = False
    # Element snapshots at gesture start: {id: element}
    snapshots: Dict[str, object] = field(default_factory=dict)


class EditorController:
    """Host interaction controller composing the editor stores"""

    def __init__(self, document=None, canvas=None, drawing=None, selection=None,
                 transform=None, config=None):
        self._logger = logging.getLogger('EditorController')
        self.config = dict(DEFAULT_CONFIG, **(config or {}))

        self.document = document if document is not None else Document()
        self.canvas = canvas if canvas is not None else CanvasState.from_config(self.config)
        self.drawing = drawing if drawing is not None else DrawingState()
        self.selection = selection if selection is not None else SelectionState()
        self.transform = transform if transform is not None else TransformState()

        self.style = style_options(self.config)
        self._gesture: Optional[GestureContext] = None

    # ========================================
    # Properties
    # ========================================

    @property
    def gesture(self):
        """Operation name of the active gesture, or None when idle"""
        return self._gesture.operation if self._gesture else None

    @property
    def marquee_rect(self) -> Optional[Rect]:
        """Marquee rectangle for the renderer while a marquee drag is active"""
        if not self._gesture or self._gesture.operation != 'marquee' or self._gesture.current_point is None:
            return None
        return Rect.from_points(self._gesture.start_point, self._gesture.current_point)

    # ========================================
    # Tool and element management
    # ========================================

    def set_tool(self, tool):
        """Switch tools, abandoning any gesture in progress"""
        tool = validate_tool(tool)
        self.cancel_gesture()
        self.document.set_tool(tool)

    def remove_element(self, element_id):
        """Remove an element and every gesture/selection reference to it"""
        self.document.remove_element(element_id)
        if self.selection.is_selected(element_id):
            self.selection.deselect(element_id)
        if self.selection.hovered_id == element_id:
            self.selection.set_hovered(None)
        if self.transform.element_id == element_id:
            self.transform.reset()
            self._gesture = None
        if self._gesture and element_id in self._gesture.snapshots:
            del self._gesture.snapshots[element_id]

    def delete_selected(self):
        """Remove the selected, unlocked elements

        Returns:
            List of removed ids
        """
        removed = []
        for element_id in self.selection.selected_ids:
            element = self.document.get_element_by_id(element_id)
            if element is None or element.locked:
                continue
            self.remove_element(element_id)
            removed.append(element_id)
        self._logger.debug(f"Deleted {len(removed)} element(s)")
        return removed

    def clear(self):
        """Empty the document and reset all gesture and selection state"""
        self.cancel_gesture()
        self.document.clear()
        self.selection.clear_selection()
        self.selection.set_hovered(None)

    def _interactive(self, element_id):
        """Element if it exists and is not locked, else None"""
        element = self.document.get_element_by_id(element_id)
        if element is None or element.locked:
            return None
        return element

    # ========================================
    # Pointer routing
    # ========================================

    def pointer_down(self, point, element_id=None, handle=None, additive=False):
        """Begin a gesture for the current tool

        Args:
            point: Pointer position in document space
            element_id: Element under the pointer (from the caller's hit test)
            handle: Transform handle under the pointer, if any
            additive: Toggle selection instead of replacing it (shift/ctrl)
        """
        if self._gesture:
            self.cancel_gesture()

        tool = self.document.current_tool
        if tool == Tool.PAN:
            self._gesture = GestureContext('pan', point)
        elif tool in FACTORIES:
            self._begin_draw(point)
        elif tool == Tool.SELECT:
            if handle is not None and element_id is not None:
                self._begin_transform(element_id, handle, point)
            elif element_id is not None:
                self._begin_move(element_id, point, additive)
            else:
                self._begin_marquee(point, additive)
        else:
            self._logger.debug(f"Tool {tool.value} has no pointer gesture")

    def pointer_move(self, point, keep_aspect=False, snap_rotation=False):
        """Advance the active gesture

        Args:
            point: Pointer position in document space
            keep_aspect: Corner resizes keep the aspect ratio
            snap_rotation: Rotation snaps to the configured angle step
        """
        if not self._gesture:
            return

        operation = self._gesture.operation
        if operation == 'pan':
            self._update_pan(point)
        elif operation == 'draw':
            self._update_draw(point)
        elif operation == 'transform':
            self._update_transform(point, keep_aspect, snap_rotation)
        elif operation == 'move':
            self._update_move(point)
        elif operation == 'marquee':
            self._gesture.current_point = point

    def pointer_up(self):
        """Finish the active gesture

        Returns:
            The element created by a draw gesture, otherwise None
        """
        if not self._gesture:
            return None

        gesture, self._gesture = self._gesture, None
        if gesture.operation == 'draw':
            return self._finish_draw()
        if gesture.operation == 'transform':
            self.transform.end_transform()
        elif gesture.operation == 'marquee':
            self._finish_marquee(gesture)
        return None

    def cancel_gesture(self):
        """Abandon the active gesture, restoring transformed elements"""
        gesture, self._gesture = self._gesture, None
        if gesture and gesture.operation in ('transform', 'move'):
            for element_id, snapshot in gesture.snapshots.items():
                restore = {name: getattr(snapshot, name) for name in snapshot.updatable_fields()}
                self.document.update_element(element_id, restore)
        if self.drawing.is_drawing:
            self.drawing.reset()
        if self.transform.is_transforming:
            self.transform.reset()

    # ========================================
    # Drawing
    # ========================================

    def _begin_draw(self, point):
        point = self.canvas.snap(point)
        self._gesture = GestureContext('draw', point)
        self.drawing.start_drawing(point)

    def _style_for(self, tool):
        """Factory options for a tool; text is filled with the text colour"""
        style = dict(self.style)
        if tool == Tool.TEXT:
            style['fill'] = self.config.get('text_color') or DEFAULT_TEXT_COLOR
        return style

    def _update_draw(self, point):
        tool = self.document.current_tool
        self.drawing.update_drawing(self.canvas.snap(point))
        preview = create_element(
            tool, self.drawing.start_point, self.drawing.current_point, **self._style_for(tool)
        )
        self.drawing.set_preview_element(preview)

    def _finish_draw(self):
        tool = self.document.current_tool
        result = self.drawing.end_drawing()
        if result is None:
            return None

        start, end = result
        # Text boxes have a minimum size, other shapes need a real drag
        if tool != Tool.TEXT and start.x == end.x and start.y == end.y:
            self._logger.debug("Discarded zero-size shape")
            return None

        element = create_element(tool, start, end, **self._style_for(tool))
        self.document.add_element(element)
        self.selection.select(element.id)
        return element

    # ========================================
    # Transform (resize / rotate)
    # ========================================

    def _begin_transform(self, element_id, handle, point):
        handle = validate_handle(handle)
        element = self._interactive(element_id)
        if element is None:
            return

        self.transform.start_transform(element_id, handle, point)
        if handle == TransformHandle.ROTATE:
            # Pinned once: recomputing from rotated bounds would orbit the center
            center = element_center(element)
            self.transform.set_rotate_center(center.x, center.y)
        self._gesture = GestureContext('transform', point, snapshots={element_id: element})

    def _update_transform(self, point, keep_aspect, snap_rotation):
        element_id = self.transform.element_id
        snapshot = self._gesture.snapshots.get(element_id)
        if snapshot is None:
            return

        if self.transform.is_rotating:
            snap = self.config.get('rotation_snap_degrees', ROTATION_SNAP_DEGREES) if snap_rotation else None
            updates = rotate_element(snapshot, self.transform.rotate_center, self.transform.start_point, point, snap)
        else:
            point = self.canvas.snap(point)
            updates = resize_element(snapshot, self.transform.handle, self.transform.start_point, point, keep_aspect)

        if updates:
            self.document.update_element(element_id, updates)

    # ========================================
    # Selection / move / marquee
    # ========================================

    def _begin_move(self, element_id, point, additive):
        if self._interactive(element_id) is None:
            return

        if additive or not self.selection.is_selected(element_id):
            self.selection.select(element_id, additive)

        snapshots = {}
        for selected_id in self.selection.selected_ids:
            element = self._interactive(selected_id)
            if element is not None:
                snapshots[selected_id] = element
        self._gesture = GestureContext('move', point, snapshots=snapshots)

    def _update_move(self, point):
        start = self._gesture.start_point
        delta_x, delta_y = point.x - start.x, point.y - start.y
        for element_id, snapshot in self._gesture.snapshots.items():
            origin = snapshot.transform
            self.document.update_element(
                element_id, transform={'x': origin.x + delta_x, 'y': origin.y + delta_y}
            )

    def _begin_marquee(self, point, additive):
        if not additive:
            self.selection.clear_selection()
        self._gesture = GestureContext('marquee', point, current_point=point, additive=additive)

    def _finish_marquee(self, gesture):
        rect = Rect.from_points(gesture.start_point, gesture.current_point or gesture.start_point)
        if rect.width == 0 and rect.height == 0:
            # Plain click on empty canvas
            return
        hits = [
            element.id for element in self.document
            if element.visible and not element.locked and rect_intersects(rect, element_aabb(element))
        ]
        if gesture.additive:
            current = self.selection.selected_ids
            hits = current + [element_id for element_id in hits if element_id not in current]
        self.selection.select_multiple(hits)

    # ========================================
    # Viewport
    # ========================================

    def _update_pan(self, point):
        # Keep the grabbed document point under the pointer
        anchor = self._gesture.start_point
        zoom = self.canvas.zoom
        self.canvas.pan((point.x - anchor.x) * zoom, (point.y - anchor.y) * zoom)
