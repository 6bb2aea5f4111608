"""Render image files as coloured ASCII art for the terminal, with optional edge detection."""

__version__ = "0.1.0"