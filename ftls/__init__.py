"""Helpers for characters, byte buffers, strings, output, linked lists and line reading."""

__version__ = "0.1.0"