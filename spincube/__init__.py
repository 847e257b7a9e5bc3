"""A shaded, rotating cube rendered in the terminal with ANSI escape codes."""

__version__ = "0.1.0"