"""Cabin Buddy: billing and rotation-selection logic for shared vacation properties."""

__version__ = "0.1.0"
