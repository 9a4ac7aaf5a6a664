"""
Core constants shared across TUI Borders.
"""
