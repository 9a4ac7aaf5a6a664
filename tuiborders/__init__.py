"""
TUI Borders - box-drawing border styles for text-mode interfaces.

Resolve a border style and a decoration into the glyphs a renderer needs
to draw frames and grid dividers:

    from tuiborders import BorderStyle, resolve
    box = resolve(BorderStyle.DOUBLE)
    print(box.top.left)
"""

from .ui import (
    Border,
    BorderStyle,
    CustomBorder,
    Box,
    BoxLine,
    BoxHorizontal,
    Colors,
    Decoration,
    NO_DECORATION,
    DEFAULT_DECORATION,
    custom,
    decorate,
    resolve,
)


def _get_version():
    """Read version from VERSION file, or from the installed distribution."""
    from importlib.metadata import PackageNotFoundError, version
    from pathlib import Path
    # Source checkout first, then package metadata (regular install)
    version_file = Path(__file__).parent.parent / "VERSION"
    if version_file.exists():
        return version_file.read_text().strip()
    try:
        return version("tui-borders")
    except PackageNotFoundError:
        return "0.0.0"


__version__ = _get_version()

__all__ = [
    "Border",
    "BorderStyle",
    "CustomBorder",
    "Box",
    "BoxLine",
    "BoxHorizontal",
    "Colors",
    "Decoration",
    "NO_DECORATION",
    "DEFAULT_DECORATION",
    "custom",
    "decorate",
    "resolve",
    "__version__",
]
