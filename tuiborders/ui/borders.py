"""
Border styles.

Catalog of box-drawing border styles and their resolution into decorated
glyph bundles:

    ┌──┬──┐  ╔══╦══╗  ╒══╤══╕  ╓──╥──╖  ███████  ▛▀▀▀▀▀▜  +--+--+  /-----\\
    │  │  │  ║  ║  ║  │  │  │  ║  ║  ║  █  │  █  ▌  │  ▐  |  |  |  |  |  |
    ├──┼──┤  ╠══╬══╣  ╞══╪══╡  ╟──╫──╢  █──┼──█  ▌──┼──▐  +--+--+  |--+--|
    └──┴──┘  ╚══╩══╝  ╘══╧══╛  ╙──╨──╜  ███████  ▙▃▃▃▃▃▟  +--+--+  \\-----/

Custom borders wrap another style with their own decoration. A custom
border's base must not (directly or indirectly) be the border itself.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from .colors import Decoration, DEFAULT_DECORATION
from .components.box import Box, BoxHorizontal, BoxLine


class BorderStyle(Enum):
    SINGLE = "single"
    DOUBLE = "double"
    DOUBLE_LIGHT_EDGE = "double-light-edge"
    DOUBLE_HEAVY_EDGE = "double-heavy-edge"
    BLOCK_100 = "block100"
    BLOCK_75 = "block75"
    BLOCK_50 = "block50"
    HALF_BLOCK = "half-block"
    ASCII = "ascii"
    ASCII_ALT = "ascii-alt"
    ASCII_SLANTED = "ascii-slanted"
    NONE = "none"

    @classmethod
    def all_cases(cls) -> list["BorderStyle"]:
        """Every built-in style followed by NONE."""
        return list(cls)

    def to_box(self, decoration: Decoration = DEFAULT_DECORATION) -> Optional[Box]:
        return resolve(self, decoration)


@dataclass(frozen=True)
class CustomBorder:
    """An existing style drawn with its own decoration."""
    base: Union[BorderStyle, "CustomBorder"]
    decoration: Decoration

    def to_box(self, decoration: Decoration = DEFAULT_DECORATION) -> Optional[Box]:
        return resolve(self, decoration)


Border = Union[BorderStyle, CustomBorder]


def custom(base: Border, decoration: Decoration) -> CustomBorder:
    return CustomBorder(base, decoration)


# top, middle, bottom, horizontal (top/middle/bottom fill), vertical
BORDER_GLYPHS = {
    BorderStyle.SINGLE: ("┌┬┐", "├┼┤", "└┴┘", "───", "│││"),
    BorderStyle.DOUBLE: ("╔╦╗", "╠╬╣", "╚╩╝", "═══", "║║║"),
    BorderStyle.DOUBLE_LIGHT_EDGE: ("╒╤╕", "╞╪╡", "╘╧╛", "═══", "│││"),
    BorderStyle.DOUBLE_HEAVY_EDGE: ("╓╥╖", "╟╫╢", "╙╨╜", "───", "║║║"),
    BorderStyle.BLOCK_100: ("███", "█┼█", "███", "█─█", "█│█"),
    BorderStyle.BLOCK_75: ("▓▓▓", "▓┼▓", "▓▓▓", "▓─▓", "▓│▓"),
    BorderStyle.BLOCK_50: ("░░░", "░┼░", "░░░", "░─░", "░│░"),
    BorderStyle.HALF_BLOCK: ("▛▀▜", "▌┼▐", "▙▃▟", "▀─▃", "▌│▐"),
    BorderStyle.ASCII: ("+++", "+++", "+++", "---", "|||"),
    BorderStyle.ASCII_ALT: ("---", "|+|", "---", "---", "|||"),
    BorderStyle.ASCII_SLANTED: ("/-\\", "|+|", "\\-/", "---", "|||"),
}


def resolve(style: Border, decoration: Decoration = DEFAULT_DECORATION) -> Optional[Box]:
    """
    Resolve a border style into a decorated glyph bundle.

    Custom borders replace the caller's decoration with their own and are
    unwrapped until a built-in style is reached.

    Returns:
        The Box to draw, or None for a borderless view
    """
    while isinstance(style, CustomBorder):
        style, decoration = style.base, style.decoration

    glyphs = BORDER_GLYPHS.get(style) if isinstance(style, BorderStyle) else None
    if glyphs is None:
        # NONE, or anything the catalog doesn't know
        return None

    top, middle, bottom, horizontal, vertical = glyphs
    return Box(
        top=BoxLine.build(*top, decoration=decoration),
        middle=BoxLine.build(*middle, decoration=decoration),
        bottom=BoxLine.build(*bottom, decoration=decoration),
        horizontal=BoxHorizontal.build(*horizontal, decoration=decoration),
        vertical=BoxLine.build(*vertical, decoration=decoration),
    )
