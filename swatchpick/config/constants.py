"""Application-wide constants."""

APP_NAME = "SwatchPick"
APP_VERSION = "0.1.0"
ORG_NAME = "SwatchPick"
ORG_DOMAIN = "swatchpick.org"

# Value shown by a picker whose preference has never been written
DEFAULT_COLOR = "#000000"

# Debounce delay between UI edits and preference writes, in milliseconds
UPDATE_DELAY_DEFAULT_MS = 100

# Contrast against the reference background below which a swatch gets an outline
TOO_WHITE_CONTRAST_THRESHOLD = 1.25
REFERENCE_LUMINANCE = 1.0

# Swatch geometry
SWATCH_SIZE = 24
SWATCH_MARGIN = 6
SWATCH_OUTLINE_COLOR = "#000000"
SWATCH_OUTLINE_WIDTH = 1
SWATCH_FOCUS_RING_COLOR = "#661A73E8"
SWATCH_FOCUS_RING_WIDTH = 2

# Checkerboard behind translucent swatches
CHECKERBOARD_CELL_SIZE = 5
CHECKERBOARD_COLOR_A = "#FFFFFF"
CHECKERBOARD_COLOR_B = "#E6E6E6"

# Picker dialog
PICKER_DIALOG_TITLE = "Select Color"
PLANE_MIN_SIZE = 160
PLANE_INDICATOR_RADIUS = 5
HUE_MAX = 359
TRANSPARENCY_STEPS = 100
HEX_INPUT_WIDTH = 110

# Preferences edited by the demo window: (key, label, default, allow transparency)
COLOR_PREFERENCES = [
    ("foreground", "Text color", "#DADCE0", True),
    ("background", "Background color", "#202124", True),
    ("cursor", "Cursor color", "hsl(100, 60%, 80%)", False),
]
