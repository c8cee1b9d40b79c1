"""Algorithm exercises on trees, linked lists, strings, integers, arrays and mazes."""

__version__ = "0.1.0"