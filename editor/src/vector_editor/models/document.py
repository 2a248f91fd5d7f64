"""
Vector Editor Core - Document Model

THE MODEL of the editor. Owns the scene: the ordered element sequence
(z-order, later = on top) and the active tool.

This class handles:
- Tool selection
- Element add / update (partial merge) / remove / lookup / clear

The Document is INDEPENDENT of gesture state:
- No selection state (that's SelectionState)
- No drawing/transform gesture state (DrawingState, TransformState)
- Removal does not cascade; the controller clears stale references

Every mutation emits `changed`, so views can re-render without polling.

Usage:
    document = Document()
    document.changed.connect(view.update)
    document.add_element(create_rectangle(start, end))
    document.update_element(element_id, width=40)
    document.remove_element(element_id)
"""

import logging
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional, Tuple

from PyQt5.QtCore import QObject, pyqtSignal

from vector_editor.models.element import Element
from vector_editor.utils.logger import loggerRaise


class Tool(str, Enum):
    SELECT = 'select'
    RECTANGLE = 'rectangle'
    CIRCLE = 'circle'
    ELLIPSE = 'ellipse'
    LINE = 'line'
    PATH = 'path'
    TEXT = 'text'
    PAN = 'pan'


def validate_tool(tool) -> Tool:
    """Coerce a tool value, routing unknown values through loggerRaise."""
    try:
        return Tool(tool)
    except ValueError as e:
        loggerRaise(e, f"Unknown tool: {tool!r}", "Invalid tool")


class Document(QObject):
    """Scene data model: current tool plus ordered element sequence

    Signals:
        changed: Emitted after any mutation of the element sequence
        tool_changed(str): Emitted with the new tool value
    """

    changed = pyqtSignal()
    tool_changed = pyqtSignal(str)

    def __init__(self, parent=None):
        super().__init__(parent)
        self._logger = logging.getLogger('Document')
        self._current_tool = Tool.SELECT
        self._elements: List[Element] = []

    # ========================================
    # Properties
    # ========================================

    @property
    def current_tool(self) -> Tool:
        return self._current_tool

    @property
    def elements(self) -> Tuple[Element, ...]:
        """Read-only snapshot of the element sequence in z-order"""
        return tuple(self._elements)

    @property
    def element_ids(self) -> List[str]:
        return [element.id for element in self._elements]

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[Element]:
        return iter(tuple(self._elements))

    # ========================================
    # Tool
    # ========================================

    def set_tool(self, tool) -> None:
        """Set the active tool

        Args:
            tool: Tool value or its string name

        Raises:
            ValueError: If tool is not a known Tool
        """
        self._current_tool = validate_tool(tool)
        self._logger.debug(f"Set tool: {self._current_tool.value}")
        self.tool_changed.emit(self._current_tool.value)

    # ========================================
    # Element operations
    # ========================================

    def add_element(self, element: Element) -> None:
        """Append a fully formed element on top of the z-order"""
        self._elements.append(element)
        self._logger.debug(f"Added element: {element.id} ({element.type.value})")
        self.changed.emit()

    def update_element(self, element_id: str, updates: Optional[Dict[str, Any]] = None, **fields) -> None:
        """Merge field updates into the element with the given id

        Updates may be passed as a dict, as keyword arguments, or both.
        An absent id is a silent no-op.

        Args:
            element_id: Target element id
            updates: Field name -> new value

        Raises:
            ValueError: If an update targets id, type, or another variant's fields
        """
        index = self.index_of(element_id)
        if index is None:
            return

        merged_updates = dict(updates or {})
        merged_updates.update(fields)
        if not merged_updates:
            return

        try:
            updated = self._elements[index].merged(merged_updates)
        except ValueError as e:
            loggerRaise(e, f"Invalid update for element {element_id}", "Invalid update")

        # Single assignment: readers never observe a half-merged element
        self._elements[index] = updated
        self._logger.debug(f"Updated element {element_id}: {sorted(merged_updates)}")
        self.changed.emit()

    def remove_element(self, element_id: str) -> None:
        """Remove the element with the given id (no-op if absent)"""
        remaining = [element for element in self._elements if element.id != element_id]
        if len(remaining) == len(self._elements):
            return
        self._elements = remaining
        self._logger.debug(f"Removed element: {element_id}")
        self.changed.emit()

    def get_element_by_id(self, element_id: str) -> Optional[Element]:
        """Return the element with the given id, or None if not found"""
        for element in self._elements:
            if element.id == element_id:
                return element
        return None

    def index_of(self, element_id: str) -> Optional[int]:
        """Z-order index of an element, or None if not found"""
        for index, element in enumerate(self._elements):
            if element.id == element_id:
                return index
        return None

    def clear(self) -> None:
        """Remove every element"""
        self._elements = []
        self._logger.debug("Cleared document")
        self.changed.emit()
