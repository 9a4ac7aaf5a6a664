"""Pytest configuration and fixtures."""

import pytest

from tuiborders.ui import Colors, Decoration


@pytest.fixture
def red():
    return Decoration(Colors.RED)


@pytest.fixture
def bold():
    return Decoration(Colors.BOLD)
