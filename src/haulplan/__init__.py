"""Truck allocation planning across mine haul road segments."""

__version__ = "0.1.0"
