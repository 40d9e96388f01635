"""Typed configuration nodes (integer, float, array, map) serialized to configuration text, with RGB/RGBA colour helpers."""

__version__ = "0.1.0"