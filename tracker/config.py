"""
config.py - Path resolution and app constants
Issue Board v0.1
"""

import os
import sys

# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------


def get_base_path() -> str:
    """
    Return the directory the app keeps its data next to.
    - frozen exe: directory containing the executable
    - script    : project root (one level above this package)
    """
    if getattr(sys, "frozen", False):
        return os.path.dirname(sys.executable)
    return os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


BASE_PATH = get_base_path()

# TRACKER_DB_PATH overrides the default location (tests, shared folders)
DB_PATH = os.environ.get("TRACKER_DB_PATH") or os.path.join(BASE_PATH, "tracker.db")

# ---------------------------------------------------------------------------
# App constants
# ---------------------------------------------------------------------------

APP_TITLE = "Issue Board"
APP_VERSION = "0.1.0"

# ---------------------------------------------------------------------------
# Notices shown in the results region
# ---------------------------------------------------------------------------

NOTICE_NO_RESULTS = "No issues found matching your criteria."
NOTICE_NO_DATA = "No issue data found."
NOTICE_LOAD_ERROR = "Error loading issue data."
NOTICE_FILTER_ERROR = "An error occurred while filtering issues."
NOTICE_SEARCH_ERROR = "An error occurred while searching issues."

# Card fallbacks for records missing a field
FALLBACK_TITLE = "No Title Provided"
FALLBACK_AUTHOR = "Unknown Author"
FALLBACK_DESCRIPTION = "No Description Provided"

# ---------------------------------------------------------------------------
# Colour palette (GitHub-like)
# ---------------------------------------------------------------------------

COLOR_BG = "#F0F2F5"
COLOR_CARD = "#FFFFFF"
COLOR_BORDER = "#D0D7DE"
COLOR_TEXT_MUTED = "#656D76"
COLOR_TEXT_MAIN = "#1F2328"
COLOR_PRIMARY = "#0969DA"
COLOR_SUCCESS = "#2da44e"
COLOR_DANGER = "#CF222E"
COLOR_INFO_BG = "#DDF4FF"

COLOR_APPBAR_BG = "#FFFFFF"
COLOR_APPBAR_FG = "#1F2328"

# UI constants
BORDER_RADIUS_CARD = 10
BORDER_RADIUS_BTN = 6
SHADOW_ELEVATION = 2
