"""Lexing, variable expansion and pipeline parsing for a small shell."""

__version__ = "0.1.0"