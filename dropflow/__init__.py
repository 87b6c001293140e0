"""Persistence analysis, camera settings and operator-interface state for microfluidics automation."""

__version__ = "0.1.0"