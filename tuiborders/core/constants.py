"""
Shared constants for TUI Borders.
"""

# Preview grid size
DEFAULT_COLUMNS = 2
DEFAULT_ROWS = 2
DEFAULT_CELL_WIDTH = 2

# Any non-empty value disables colored output (https://no-color.org)
NO_COLOR_ENV = "NO_COLOR"
