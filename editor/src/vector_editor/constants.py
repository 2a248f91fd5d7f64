"""
Vector Editor Core - Constants and Configuration

This module contains all constant values used throughout the editor core:
- Default element styling (fill, stroke, text)
- Viewport defaults and clamps (zoom, grid)
- Drawing and transform interaction constants
- Default configuration values
"""

# ======================================================================
# ELEMENT DEFAULTS
# ======================================================================

# Default shape colors (used when no style option is supplied)
DEFAULT_FILL_COLOR = '#3b82f6'
DEFAULT_STROKE_COLOR = '#1e40af'
DEFAULT_STROKE_WIDTH = 2

# Text defaults
DEFAULT_TEXT_COLOR = '#000000'
DEFAULT_FONT_SIZE = 16
DEFAULT_FONT_FAMILY = 'Arial, sans-serif'
DEFAULT_FONT_WEIGHT = 400

# A zero-drag click with the text tool still produces an editable box
TEXT_MIN_WIDTH = 150
TEXT_MIN_HEIGHT = 32

# Stroke color meaning "no stroke"
STROKE_NONE = 'none'

# Element id prefix
ELEMENT_ID_PREFIX = 'el'

# Display names for new elements, keyed by element type
DEFAULT_ELEMENT_NAMES = {
    'rectangle': 'Rectangle',
    'circle': 'Circle',
    'ellipse': 'Ellipse',
    'path': 'Path',
    'text': 'Text',
    'line': 'Line',
}

# ======================================================================
# VIEWPORT
# ======================================================================

DEFAULT_VIEW_BOX = {'x': 0.0, 'y': 0.0, 'width': 800.0, 'height': 600.0}

# Zoom limits [0.1, 10]
ZOOM_MIN = 0.1
ZOOM_MAX = 10.0
ZOOM_DEFAULT = 1.0
ZOOM_STEP = 1.2  # zoom_in multiplies, zoom_out divides

# Grid size limits [5, 100]
GRID_SIZE_MIN = 5
GRID_SIZE_MAX = 100
GRID_SIZE_DEFAULT = 20
GRID_VISIBLE_DEFAULT = True
SNAP_TO_GRID_DEFAULT = False

# ======================================================================
# TRANSFORM INTERACTION
# ======================================================================

# Smallest extent a resize may shrink a shape to
MIN_ELEMENT_SIZE = 1.0

# Rotation snap step used while the snap modifier is held
ROTATION_SNAP_DEGREES = 45.0

# ======================================================================
# CONFIGURATION
# ======================================================================

CONFIG_DIR_NAME = '.vector_editor'
CONFIG_FILE_NAME = 'config.json'

DEFAULT_CONFIG = {
    'grid_visible': GRID_VISIBLE_DEFAULT,
    'grid_size': GRID_SIZE_DEFAULT,
    'snap_to_grid': SNAP_TO_GRID_DEFAULT,
    'view_box': dict(DEFAULT_VIEW_BOX),
    'fill': DEFAULT_FILL_COLOR,
    'stroke': DEFAULT_STROKE_COLOR,
    'stroke_width': DEFAULT_STROKE_WIDTH,
    'font_size': DEFAULT_FONT_SIZE,
    'font_family': DEFAULT_FONT_FAMILY,
    'text_color': DEFAULT_TEXT_COLOR,
    'rotation_snap_degrees': ROTATION_SNAP_DEGREES,
}
