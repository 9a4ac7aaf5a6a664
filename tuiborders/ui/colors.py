"""
Shared color definitions for terminal output.

Decorations wrap a glyph in ANSI attribute codes plus a reset.
"""

from dataclasses import dataclass


class Colors:
    RESET = "\x1b[0m"
    BOLD = "\x1b[1m"
    DIM = "\x1b[2m"
    BLACK = "\x1b[30m"
    RED = "\x1b[31m"
    GREEN = "\x1b[32m"
    YELLOW = "\x1b[33m"
    BLUE = "\x1b[34m"
    MAGENTA = "\x1b[35m"
    CYAN = "\x1b[36m"
    LIGHT_GRAY = "\x1b[37m"
    DARK_GRAY = "\x1b[90m"
    WHITE = "\x1b[97m"
    PURPLE = "\x1b[38;2;138;43;226m"
    INDIGO = "\x1b[38;2;99;102;241m"
    PINK = "\x1b[38;2;244;114;182m"


def rgb(r: int, g: int, b: int) -> str:
    for channel in (r, g, b):
        if not 0 <= channel <= 255:
            raise ValueError(f"Color channel out of range: {channel}")
    return f"\x1b[38;2;{r};{g};{b}m"


@dataclass(frozen=True)
class Decoration:
    """
    A terminal attribute applied to a single glyph.

    `codes` is emitted before the glyph and `reset` after it, but only
    when the decoration actually carries codes.
    """
    codes: str = ""
    reset: str = Colors.RESET

    @classmethod
    def of(cls, *codes: str) -> "Decoration":
        return cls("".join(codes))

    @classmethod
    def rgb(cls, r: int, g: int, b: int) -> "Decoration":
        return cls(rgb(r, g, b))

    @property
    def is_empty(self) -> bool:
        return self.codes == ""

    def __add__(self, other: "Decoration") -> "Decoration":
        if not isinstance(other, Decoration):
            return NotImplemented
        if self.is_empty:
            return other
        if other.is_empty:
            return self
        # Differing resets need a full reset
        reset = self.reset if self.reset == other.reset else Colors.RESET
        return Decoration(self.codes + other.codes, reset)

    def __str__(self) -> str:
        return self.codes


NO_DECORATION = Decoration()
DEFAULT_DECORATION = Decoration(Colors.LIGHT_GRAY)

# Names accepted by the preview CLI
NAMED_DECORATIONS = {
    "none": NO_DECORATION,
    "bold": Decoration(Colors.BOLD),
    "dim": Decoration(Colors.DIM),
    "black": Decoration(Colors.BLACK),
    "red": Decoration(Colors.RED),
    "green": Decoration(Colors.GREEN),
    "yellow": Decoration(Colors.YELLOW),
    "blue": Decoration(Colors.BLUE),
    "magenta": Decoration(Colors.MAGENTA),
    "cyan": Decoration(Colors.CYAN),
    "light-gray": DEFAULT_DECORATION,
    "dark-gray": Decoration(Colors.DARK_GRAY),
    "white": Decoration(Colors.WHITE),
    "purple": Decoration(Colors.PURPLE),
    "indigo": Decoration(Colors.INDIGO),
    "pink": Decoration(Colors.PINK),
}
