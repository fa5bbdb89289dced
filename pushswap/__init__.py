"""Two-stack push_swap puzzle: input parsing, stack operations and position helpers."""

__version__ = "1.0.0"