"""Simulated smartwatch controllers, weather and navigation data, and display driver logic."""

__version__ = "0.1.0"