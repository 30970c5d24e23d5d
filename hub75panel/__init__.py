"""Coordinate mapping, LED driver start-up sequences and weather icons for chained HUB75 LED matrix panels."""

__version__ = "0.1.0"
__all__ = ["virtual_panel", "leddrivers", "weather_icons"]