"""
Application-wide constants for Qt Pager.

Centralizes app name and file names to ensure consistency.
"""

# Application display name (user-facing)
APP_NAME = "Qt Pager"

# Application full description
APP_DESCRIPTION = "Multi-page settings workflow"

APP_VERSION = "0.1.0"

# Technical identifiers (for paths, files - DO NOT change without migration)
APP_FOLDER_NAME = "QtPager"  # Used in %LOCALAPPDATA%\QtPager\
APP_LOG_FILENAME = "qtpager.log"
APP_CONFIG_FILENAME = "config.ini"

# Pager layouts the demo can build ([Pager] layout / --layout)
PAGER_LAYOUTS = ("tabs", "tree", "wizard")
