"""
Tests for border previews.

Tests render_sample(), render_frame() and box_row().
"""

import pytest

from tuiborders.ui import (
    BorderStyle,
    NO_DECORATION,
    box_row,
    resolve,
    render_sample,
    render_frame,
    strip_ansi,
)


class TestBoxRow:
    """Tests for box_row()."""

    def test_width_includes_borders(self):
        assert box_row("┌", "─", "┐", 5) == "┌───┐"

    def test_minimum_width(self):
        assert box_row("┌", "─", "┐", 2) == "┌┐"
        assert box_row("┌", "─", "┐", 0) == "┌┐"


class TestRenderSample:
    """Tests for render_sample()."""

    def test_single_grid(self):
        lines = render_sample(resolve(BorderStyle.SINGLE, NO_DECORATION))
        assert lines == [
            "┌──┬──┐",
            "│  │  │",
            "├──┼──┤",
            "│  │  │",
            "└──┴──┘",
        ]

    def test_half_block_grid(self):
        lines = render_sample(resolve(BorderStyle.HALF_BLOCK, NO_DECORATION))
        assert lines == [
            "▛▀▀▀▀▀▜",
            "▌  │  ▐",
            "▌──┼──▐",
            "▌  │  ▐",
            "▙▃▃▃▃▃▟",
        ]

    def test_ascii_slanted_grid(self):
        lines = render_sample(resolve(BorderStyle.ASCII_SLANTED, NO_DECORATION))
        assert lines[0] == "/-----\\"
        assert lines[2] == "|--+--|"
        assert lines[-1] == "\\-----/"

    def test_decorated_grid_strips_to_plain(self):
        plain = render_sample(resolve(BorderStyle.DOUBLE, NO_DECORATION), columns=3, cell_width=1, rows=1)
        decorated = render_sample(resolve(BorderStyle.DOUBLE), columns=3, cell_width=1, rows=1)
        assert [strip_ansi(line) for line in decorated] == plain
        assert plain == ["╔═╦═╦═╗", "║ ║ ║ ║", "╚═╩═╩═╝"]

    def test_none_renders_nothing(self):
        assert render_sample(resolve(BorderStyle.NONE)) == []

    def test_invalid_sizes(self):
        box = resolve(BorderStyle.SINGLE)
        with pytest.raises(ValueError):
            render_sample(box, columns=0)
        with pytest.raises(ValueError):
            render_sample(box, rows=0)
        with pytest.raises(ValueError):
            render_sample(box, cell_width=-1)


class TestRenderFrame:
    """Tests for render_frame()."""

    def test_ascii_frame(self):
        lines = render_frame(resolve(BorderStyle.ASCII, NO_DECORATION), 4, 3)
        assert lines == ["+--+", "|  |", "+--+"]

    def test_frame_clamps_size(self):
        lines = render_frame(resolve(BorderStyle.SINGLE, NO_DECORATION), 1, 1)
        assert lines == ["┌┐", "└┘"]

    def test_none_frame(self):
        assert render_frame(None, 10, 5) == []
