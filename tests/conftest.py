"""
Shared fixtures for vector editor core tests.

Provides fresh stores, sample elements and a populated controller.
"""
import sys
import os
import pytest

# Ensure editor/src is on the path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'editor', 'src'))

from vector_editor.models.transform import Vec2
from vector_editor.utils import logger


@pytest.fixture(autouse=True)
def debug_mode():
    """Contract violations raise straight through in tests"""
    logger.set_debug_mode(True)
    logger.set_error_handler(None)
    yield
    logger.set_debug_mode(True)
    logger.set_error_handler(None)


@pytest.fixture
def document():
    """Fresh empty document"""
    from vector_editor.models.document import Document
    return Document()


@pytest.fixture
def canvas():
    from vector_editor.state.canvas_state import CanvasState
    return CanvasState()


@pytest.fixture
def drawing():
    from vector_editor.state.drawing_state import DrawingState
    return DrawingState()


@pytest.fixture
def selection():
    from vector_editor.state.selection_state import SelectionState
    return SelectionState()


@pytest.fixture
def transform_state():
    from vector_editor.state.transform_state import TransformState
    return TransformState()


@pytest.fixture
def rect():
    """10x20 rectangle at the origin"""
    from vector_editor.services.element_factory import create_rectangle
    return create_rectangle(Vec2(0, 0), Vec2(10, 20))


@pytest.fixture
def populated_document(document):
    """Document holding a rectangle, a circle and a line (in z-order)"""
    from vector_editor.services.element_factory import create_rectangle, create_circle, create_line
    document.add_element(create_rectangle(Vec2(0, 0), Vec2(100, 50)))
    document.add_element(create_circle(Vec2(200, 200), Vec2(260, 280)))
    document.add_element(create_line(Vec2(10, 300), Vec2(110, 350)))
    return document


@pytest.fixture
def controller():
    """Controller with grid snapping off"""
    from vector_editor.controller import EditorController
    return EditorController(config={'snap_to_grid': False})


@pytest.fixture
def record_signal():
    """Connect a list recorder to a signal and return the list"""
    def _record(signal):
        calls = []
        signal.connect(lambda *args: calls.append(args))
        return calls
    return _record
