"""Module: prepboard.config.layout

Date: 2026-10-19

Responsive breakpoints, grid tables and interaction tuning for the
widget layout engine.
"""

# =====================================
# BREAKPOINTS (exclusive upper bounds, px)
# =====================================

MOBILE_MAX_WIDTH = 768
TABLET_MAX_WIDTH = 1024

# =====================================
# GRID
# =====================================

# Number of grid columns per screen class
GRID_COLUMNS = {
    "mobile": 1,
    "tablet": 2,
    "desktop": 3,
}

# Column span per (screen class, widget size); mobile is always a full row
COLUMN_SPANS = {
    "tablet": {"small": 1, "medium": 1, "large": 2, "extra-large": 2},
    "desktop": {"small": 1, "medium": 1, "large": 2, "extra-large": 3},
}

# Minimum slot height per widget size (px)
MIN_HEIGHTS = {
    "small": 144,
    "medium": 192,
    "large": 256,
    "extra-large": 320,
}

# =====================================
# INTERACTION
# =====================================

DRAG_THRESHOLD_PX = 5  # Pointer travel before an armed press becomes a drag
RESIZE_DEBOUNCE_MS = 100  # Quiet period before a resize is classified

# =====================================
# PERSISTENCE
# =====================================

LAYOUT_STORAGE_KEY = "prep.dashboard.v5"
LAYOUT_FORMAT_VERSION = 1
LAYOUT_FILE_NAME = "layout.json"
LAYOUT_DIR_NAME = ".prepboard"
