import logging

# Canvas settings
# Logical drawing surface size in unscaled pixels
CANVAS_WIDTH = 320
CANVAS_HEIGHT = 180

# Window settings
WINDOW_WIDTH = 960
WINDOW_HEIGHT = 540
WINDOW_CAPTION = "Sprite Engine"
FPS = 60

# Colors
# Frame clear colour for the logical canvas (fully transparent)
CLEAR_COLOR = (0, 0, 0, 0)
# Letterbox bars around the scaled canvas
BACKGROUND_COLOR = (0.0, 0.0, 0.0, 1.0)

# Bitmap font settings
# Pixels added after every glyph
DEFAULT_HORIZONTAL_MARGIN = 1
# Pixels added between lines
DEFAULT_VERTICAL_MARGIN = 1

# Placeholder texture used when a sprite is created without one
MISSING_TEXTURE_SIZE = 16
# Two-colour checkerboard, quadrants of MISSING_TEXTURE_SIZE // 2
MISSING_TEXTURE_COLORS = ((255, 0, 255, 255), (0, 0, 0, 255))

# Pointer settings
# Bit assigned to each pygame mouse button in the button mask
# (1 = primary, 2 = secondary, 4 = middle)
POINTER_BUTTON_BITS = {1: 1, 2: 4, 3: 2}

# Logging
LOG_LEVEL = logging.INFO
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
