"""Maze-game building blocks: XPM decoding, colour names, string, byte and list helpers."""

__version__ = "0.1.0"