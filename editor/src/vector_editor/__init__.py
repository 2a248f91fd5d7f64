"""
Vector Editor Core

Document model and interaction state machines for a 2-D vector editor:
- models/: elements, styles and the Document store
- state/: canvas viewport, drawing, selection and transform gestures
- services/: element factory
- utils/: logging, configuration, coordinate mapping, transform math
- controller.py: pointer routing across the stores
"""

from .version import __version__

__all__ = ['__version__']
