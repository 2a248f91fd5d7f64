"""Element construction services"""

from .element_factory import (
    generate_id, create_element,
    create_rectangle, create_circle, create_ellipse, create_line, create_text,
)

__all__ = [
    'generate_id', 'create_element',
    'create_rectangle', 'create_circle', 'create_ellipse', 'create_line', 'create_text',
]
