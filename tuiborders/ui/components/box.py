"""
Box drawing primitives.

Decorated glyph bundles for rendering bordered UI elements, plus a row
helper for renderers that draw them.
"""

from dataclasses import dataclass

from ..colors import Decoration, NO_DECORATION


def decorate(char: str, decoration: Decoration = NO_DECORATION) -> str:
    """
    Wrap a glyph in a decoration.

    The reset code is only appended when the decoration carries codes, so
    undecorated glyphs come back unchanged.
    """
    if decoration.is_empty:
        return char
    return f"{decoration.codes}{char}{decoration.reset}"


@dataclass(frozen=True)
class BoxLine:
    """Left, middle and right glyphs of a border row (or the vertical sides)."""
    left: str
    middle: str
    right: str

    @classmethod
    def build(cls, left: str, middle: str, right: str,
              decoration: Decoration = NO_DECORATION) -> "BoxLine":
        return cls(
            decorate(left, decoration),
            decorate(middle, decoration),
            decorate(right, decoration),
        )


@dataclass(frozen=True)
class BoxHorizontal:
    """Fill glyphs for the top edge, row dividers and bottom edge."""
    top: str
    middle: str
    bottom: str

    @classmethod
    def build(cls, top: str, middle: str, bottom: str,
              decoration: Decoration = NO_DECORATION) -> "BoxHorizontal":
        return cls(
            decorate(top, decoration),
            decorate(middle, decoration),
            decorate(bottom, decoration),
        )


@dataclass(frozen=True)
class Box:
    """A fully resolved border: 15 decorated glyphs."""
    top: BoxLine
    middle: BoxLine
    bottom: BoxLine
    horizontal: BoxHorizontal
    vertical: BoxLine


def box_row(left: str, fill: str, right: str, width: int) -> str:
    """
    Create a box row.

    Args:
        left: Left border glyph
        fill: Fill glyph (repeated)
        right: Right border glyph
        width: Total width including borders

    Returns:
        Formatted string for the row
    """
    return f"{left}{fill * max(width - 2, 0)}{right}"
