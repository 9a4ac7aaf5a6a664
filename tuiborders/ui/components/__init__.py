"""
Reusable visual building blocks.

Non-interactive components for rendering bordered UI elements.
"""

from .box import (
    Box,
    BoxLine,
    BoxHorizontal,
    decorate,
    box_row,
)
from .formatting import strip_ansi
from .preview import render_sample, render_frame

__all__ = [
    # Box drawing
    "Box",
    "BoxLine",
    "BoxHorizontal",
    "decorate",
    "box_row",
    # Formatting
    "strip_ansi",
    # Previews
    "render_sample",
    "render_frame",
]
