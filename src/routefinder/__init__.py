"""Shortest route through a handful of locations using Google Maps distances."""

__version__ = "0.1.0"
