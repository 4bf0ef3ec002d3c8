"""Time series segmentation helpers and closed chord mining."""

__version__ = "1.0.0"