"""Helpers for collapsing, concatenating and dedenting inline text."""

__version__ = "0.1.0"
__all__ = ["collapse", "concat", "dedent"]