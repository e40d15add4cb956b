"""Solutions to olympiad and contest problems as plain Python functions."""

__version__ = "0.1.0"