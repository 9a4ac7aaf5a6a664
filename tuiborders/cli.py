"""
Border preview command line.

Prints sample grids for the requested border styles.
"""

import argparse
import os
import sys

from tuiborders import __version__
from tuiborders.core.constants import (
    DEFAULT_CELL_WIDTH,
    DEFAULT_COLUMNS,
    DEFAULT_ROWS,
    NO_COLOR_ENV,
)
from tuiborders.ui import (
    BorderStyle,
    NAMED_DECORATIONS,
    DEFAULT_DECORATION,
    NO_DECORATION,
    custom,
    resolve,
    render_sample,
)


def color_disabled() -> bool:
    """NO_COLOR is honored when set to any non-empty value."""
    return bool(os.environ.get(NO_COLOR_ENV, ""))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="borders",
        description="TUI Borders - preview box-drawing border styles"
    )
    parser.add_argument(
        "styles",
        nargs="*",
        metavar="STYLE",
        help="Styles to preview (default: all, see --list)"
    )
    parser.add_argument(
        "--color",
        choices=sorted(NAMED_DECORATIONS),
        help="Decoration to draw the borders with (default: light-gray)"
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help=f"Draw undecorated glyphs (also enabled by {NO_COLOR_ENV})"
    )
    parser.add_argument("--columns", type=int, default=DEFAULT_COLUMNS, help="Cells per row")
    parser.add_argument("--rows", type=int, default=DEFAULT_ROWS, help="Rows of cells")
    parser.add_argument("--cell-width", type=int, default=DEFAULT_CELL_WIDTH, help="Interior width of a cell")
    parser.add_argument("--list", action="store_true", help="List style names and exit")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def preview(style: BorderStyle, decoration, columns: int, rows: int, cell_width: int) -> list[str]:
    """Caption and sample grid for one style, drawn through a custom border."""
    box = resolve(custom(style, decoration))
    if box is None:
        return [f"{style.value} (no border)"]
    return [style.value] + render_sample(box, columns=columns, cell_width=cell_width, rows=rows)


def main(argv=None) -> int:
    """Entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.list:
        for style in BorderStyle.all_cases():
            print(style.value)
        return 0

    names = {style.value for style in BorderStyle}
    unknown = [name for name in args.styles if name not in names]
    if unknown:
        parser.error(f"unknown style: {', '.join(unknown)}")
    if args.columns < 1 or args.rows < 1:
        parser.error("--columns and --rows must be at least 1")
    if args.cell_width < 0:
        parser.error("--cell-width must not be negative")

    no_color = args.no_color or color_disabled()
    if no_color:
        if args.color and args.color != "none":
            print(f"Warning: ignoring --color {args.color}, color output is disabled", file=sys.stderr)
        decoration = NO_DECORATION
    elif args.color:
        decoration = NAMED_DECORATIONS[args.color]
    else:
        decoration = DEFAULT_DECORATION

    styles = [BorderStyle(name) for name in args.styles] or BorderStyle.all_cases()
    for i, style in enumerate(styles):
        if i:
            print()
        for line in preview(style, decoration, args.columns, args.rows, args.cell_width):
            print(line)
    return 0
