"""
User interface module.

Border styles, decorations and the glyph bundles they resolve to.
"""

from .colors import (
    Colors,
    Decoration,
    rgb,
    NO_DECORATION,
    DEFAULT_DECORATION,
    NAMED_DECORATIONS,
)
from .borders import (
    Border,
    BorderStyle,
    CustomBorder,
    BORDER_GLYPHS,
    custom,
    resolve,
)
from .components import (
    Box,
    BoxLine,
    BoxHorizontal,
    decorate,
    box_row,
    strip_ansi,
    render_sample,
    render_frame,
)

__all__ = [
    # Colors
    "Colors",
    "Decoration",
    "rgb",
    "NO_DECORATION",
    "DEFAULT_DECORATION",
    "NAMED_DECORATIONS",
    # Borders
    "Border",
    "BorderStyle",
    "CustomBorder",
    "BORDER_GLYPHS",
    "custom",
    "resolve",
    # Components
    "Box",
    "BoxLine",
    "BoxHorizontal",
    "decorate",
    "box_row",
    "strip_ansi",
    "render_sample",
    "render_frame",
]
