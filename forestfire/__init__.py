"""Forest fire simulation on a grid, with wind and an escaping animal."""

__version__ = "0.1.0"