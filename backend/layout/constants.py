"""
Layout constants for the mission canvas.
Node boxes are fixed size; rows are separated by VERTICAL_GAP.
"""

# Step box dimensions
NODE_WIDTH = 260
NODE_HEIGHT = 110

# Horizontal spacing between boxes (and between reserved subtree slots)
HORIZONTAL_GAP = 50

# Vertical spacing between layers
VERTICAL_GAP = 80

# Canvas padding and minimum size around the laid-out steps
DEFAULT_CANVAS_PADDING = 60
DEFAULT_MIN_CANVAS_WIDTH = 800
DEFAULT_MIN_CANVAS_HEIGHT = 600

# Above this step count the view falls back to a grid layout
DEFAULT_MAX_LAYOUT_STEPS = 300
