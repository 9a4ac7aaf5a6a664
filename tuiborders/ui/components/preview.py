"""
Border previews.

Draws resolved boxes as sample grids and frames. Used by the preview CLI.
"""

from typing import Optional

from ...core.constants import DEFAULT_CELL_WIDTH, DEFAULT_COLUMNS, DEFAULT_ROWS
from .box import Box, box_row


def _grid_row(left: str, fill: str, junction: str, right: str, columns: int, cell_width: int) -> str:
    return left + junction.join(fill * cell_width for _ in range(columns)) + right


def render_sample(
    box: Optional[Box],
    columns: int = DEFAULT_COLUMNS,
    cell_width: int = DEFAULT_CELL_WIDTH,
    rows: int = DEFAULT_ROWS,
) -> list[str]:
    """
    Render an empty grid using every glyph of a box.

    Args:
        box: Resolved box, or None for no border
        columns: Number of cells per row
        cell_width: Interior width of each cell
        rows: Number of cell rows

    Returns:
        List of lines to print (empty if box is None)
    """
    if columns < 1 or rows < 1:
        raise ValueError(f"Grid needs at least one cell, got {columns}x{rows}")
    if cell_width < 0:
        raise ValueError(f"Negative cell width: {cell_width}")
    if box is None:
        return []

    h, v = box.horizontal, box.vertical
    lines = [_grid_row(box.top.left, h.top, box.top.middle, box.top.right, columns, cell_width)]
    for row in range(rows):
        lines.append(_grid_row(v.left, " ", v.middle, v.right, columns, cell_width))
        if row < rows - 1:
            lines.append(_grid_row(box.middle.left, h.middle, box.middle.middle, box.middle.right,
                                   columns, cell_width))
    lines.append(_grid_row(box.bottom.left, h.bottom, box.bottom.middle, box.bottom.right, columns, cell_width))
    return lines


def render_frame(box: Optional[Box], width: int, height: int) -> list[str]:
    """
    Render a plain frame without interior dividers.

    Width and height include the border; both are clamped to 2.
    """
    if box is None:
        return []
    width, height = max(width, 2), max(height, 2)
    lines = [box_row(box.top.left, box.horizontal.top, box.top.right, width)]
    lines += [box_row(box.vertical.left, " ", box.vertical.right, width)] * (height - 2)
    lines.append(box_row(box.bottom.left, box.horizontal.bottom, box.bottom.right, width))
    return lines
