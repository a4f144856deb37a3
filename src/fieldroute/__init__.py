"""Route sequencing service for p1Meter installation days."""

__version__ = "0.1.0"
