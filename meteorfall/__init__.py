"""Meteorfall: an arcade game of shooting down falling asteroids, built on pygame."""

__version__ = "0.1.0"