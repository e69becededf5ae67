"""Configuration Constants

Constants for worksheet generation.
"""

# File Processing Limits
MAX_FONT_FILE_SIZE_MB = 50
SUPPORTED_FONT_EXTENSIONS = (".ttf", ".otf")  # .otf must have TrueType outlines

# Progress Steps (for UI progress tracking)
PROGRESS_STEPS = {
    "VALIDATE": 0.05,
    "LOAD_FONT": 0.15,
    "LAYOUT": 0.30,
    "COMPLETE": 1.0,
}

# Output
DEFAULT_OUTPUT_FILENAME = "renshuu-out.pdf"

# Page arrangement: four character blocks per row, two rows per page
BLOCKS_PER_ROW = 4
BLOCK_ROWS_PER_PAGE = 2
CHARACTERS_PER_PAGE = BLOCKS_PER_ROW * BLOCK_ROWS_PER_PAGE

# Colors
BLACK = "#000000"
DOTTED_LINE_GREY = "#BBBBBB"  # Guide lines inside boxes
TEXT_GREY = "#888888"  # Traceable text

# Dash pattern for the guide lines inside each box
GUIDE_LINE_DASH = [2]
SOLID_LINE_DASH = []

# Line height as a multiple of font size (used to center glyphs in boxes)
LINE_HEIGHT_FACTOR = 1.15

# Fonts
UNKNOWN_FONT_NAME = "unknown-font"
FONT_STYLE = "normal"
