"""Chessgui — click-driven two-player chess board."""

__version__ = "0.1.0"
