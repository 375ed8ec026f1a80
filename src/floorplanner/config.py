"""
Configuration defaults for the floor plan editor.
"""

# Grid
DEFAULT_GRID_SIZE = 20.0
DEFAULT_SHOW_GRID = True
DEFAULT_SNAP_TO_GRID = True

# Hit-testing (canvas units at zoom 1.0)
ENDPOINT_HIT_RADIUS = 20.0
BODY_HIT_RADIUS = 15.0
WALL_HIT_RADIUS = 10.0

# Undo/redo
MAX_HISTORY = 50

# Zoom
ZOOM_STEP = 0.25
MIN_ZOOM = 0.25
MAX_ZOOM = 3.0

# Walls (inches)
DEFAULT_WALL_THICKNESS = 6.0  # 6 inches
DEFAULT_WALL_HEIGHT = 96.0  # 8 feet
MIN_WALL_LENGTH = 10.0

# Document
DEFAULT_PLAN_NAME = "Untitled Floor Plan"
DEFAULT_SCALE = 4.0  # pixels per inch

# Materials
RECENT_MATERIALS_LIMIT = 10

# Elevations
ELEVATION_ANGLE_TOLERANCE = 0.1  # radians
