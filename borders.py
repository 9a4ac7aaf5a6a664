#!/usr/bin/env python3
"""
TUI Borders - preview the box-drawing border styles in a terminal.

Run `python borders.py --help` for options.
"""

import sys

from tuiborders.cli import main


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\n\nCancelled by user.")
        sys.exit(0)
