"""Positions of stars, planets, the Sun and the Moon in an observer's sky."""

__version__ = "0.1.0"