"""Spline curves, swept surfaces, SWP scene parsing and OBJ output for 3D modeling."""

__version__ = "0.1.0"