"""Selection state: selected element ids and the hovered id."""

import logging
from typing import Iterable, List, Optional

from PyQt5.QtCore import QObject, pyqtSignal


class SelectionState(QObject):
    """Selected ids in insertion order plus an independent hover cursor.

    Ids are not checked against the document; stale ids are cleared by
    the controller when elements are removed.
    """

    changed = pyqtSignal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self._logger = logging.getLogger('SelectionState')
        self._selected_ids: List[str] = []
        self.hovered_id: Optional[str] = None

    @property
    def selected_ids(self) -> List[str]:
        """Copy of the selection in insertion order"""
        return list(self._selected_ids)

    def select(self, element_id: str, multi_select: bool = False) -> None:
        """Select an element

        Args:
            element_id: Id to select
            multi_select: Toggle membership instead of replacing the selection
        """
        if not multi_select:
            self._selected_ids = [element_id]
        elif element_id in self._selected_ids:
            self._selected_ids = [i for i in self._selected_ids if i != element_id]
        else:
            self._selected_ids.append(element_id)
        self._logger.debug(f"Selection: {self._selected_ids}")
        self.changed.emit()

    def select_multiple(self, element_ids: Iterable[str]) -> None:
        """Replace the selection verbatim (callers dedup if they need to)"""
        self._selected_ids = list(element_ids)
        self._logger.debug(f"Selection: {self._selected_ids}")
        self.changed.emit()

    def deselect(self, element_id: Optional[str] = None) -> None:
        """Remove one id, or clear the whole selection when no id is given"""
        if element_id is not None:
            self._selected_ids = [i for i in self._selected_ids if i != element_id]
        else:
            self._selected_ids = []
        self.changed.emit()

    def clear_selection(self) -> None:
        self.deselect()

    def is_selected(self, element_id: str) -> bool:
        return element_id in self._selected_ids

    def set_hovered(self, element_id: Optional[str]) -> None:
        self.hovered_id = element_id
        self.changed.emit()

    @property
    def has_selection(self) -> bool:
        return len(self._selected_ids) > 0

    @property
    def selected_count(self) -> int:
        return len(self._selected_ids)
